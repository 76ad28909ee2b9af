import enum
from datetime import datetime, timezone
from sqlalchemy import String, Integer, DateTime, Enum as SAEnum
from sqlalchemy.orm import Mapped, mapped_column
from assetverse.database import Base


class RequestStatus(str, enum.Enum):
    pending = "pending"
    approved = "approved"
    rejected = "rejected"


class AssetRequest(Base):
    """Employee request for one unit of an asset. pending -> approved | rejected, never back."""

    __tablename__ = "requests"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    # No foreign key: the asset may be deleted while the request is pending.
    asset_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    asset_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    asset_type: Mapped[str | None] = mapped_column(String(32), nullable=True)
    requester_email: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    requester_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    hr_email: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    company_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    status: Mapped[str] = mapped_column(
        SAEnum(RequestStatus, values_callable=lambda e: [x.value for x in e]),
        default=RequestStatus.pending,
        nullable=False,
        index=True,
    )
    note: Mapped[str | None] = mapped_column(String(1000), nullable=True)
    processed_by: Mapped[str | None] = mapped_column(String(255), nullable=True)
    requested_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )
    resolved_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
