import enum
from datetime import datetime, timezone
from sqlalchemy import String, Integer, DateTime, ForeignKey, Enum as SAEnum
from sqlalchemy.orm import Mapped, mapped_column
from assetverse.database import Base


class AssignmentStatus(str, enum.Enum):
    assigned = "assigned"
    returned = "returned"


class Assignment(Base):
    """Asset unit held by an employee. Created only by an approval, one per request."""

    __tablename__ = "assigned_assets"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    asset_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    request_id: Mapped[int] = mapped_column(ForeignKey("requests.id"), unique=True, nullable=False)
    asset_name: Mapped[str] = mapped_column(String(255), nullable=False)
    asset_image: Mapped[str | None] = mapped_column(String(500), nullable=True)
    asset_type: Mapped[str] = mapped_column(String(32), nullable=False)
    employee_email: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    employee_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    hr_email: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    company_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    status: Mapped[str] = mapped_column(
        SAEnum(AssignmentStatus, values_callable=lambda e: [x.value for x in e]),
        default=AssignmentStatus.assigned,
        nullable=False,
        index=True,
    )
    assigned_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )
    returned_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
