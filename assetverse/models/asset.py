import enum
from datetime import datetime, timezone
from sqlalchemy import String, Integer, DateTime, ForeignKey, CheckConstraint, Enum as SAEnum
from sqlalchemy.orm import Mapped, mapped_column
from assetverse.database import Base


class AssetType(str, enum.Enum):
    returnable = "Returnable"
    non_returnable = "Non-returnable"


class Asset(Base):
    """Inventory line owned by one company (identified by its HR's email)."""

    __tablename__ = "assets"

    __table_args__ = (
        CheckConstraint(
            "available_quantity >= 0 AND available_quantity <= product_quantity",
            name="ck_asset_available_range",
        ),
    )

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    hr_email: Mapped[str] = mapped_column(ForeignKey("users.email"), nullable=False, index=True)
    company_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    product_name: Mapped[str] = mapped_column(String(255), nullable=False)
    product_image: Mapped[str | None] = mapped_column(String(500), nullable=True)
    product_type: Mapped[str] = mapped_column(
        SAEnum(AssetType, values_callable=lambda e: [x.value for x in e]),
        nullable=False,
    )
    product_quantity: Mapped[int] = mapped_column(Integer, nullable=False)
    available_quantity: Mapped[int] = mapped_column(Integer, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
        nullable=False,
    )
