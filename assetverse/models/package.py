from datetime import datetime, timezone
from decimal import Decimal
from sqlalchemy import String, Integer, DateTime, Numeric, ForeignKey, JSON
from sqlalchemy.orm import Mapped, mapped_column
from assetverse.database import Base


class Package(Base):
    __tablename__ = "packages"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    name: Mapped[str] = mapped_column(String(64), unique=True, nullable=False)
    employee_limit: Mapped[int] = mapped_column(Integer, nullable=False)
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    features: Mapped[list[str]] = mapped_column(JSON, default=list, nullable=False)


class Payment(Base):
    """Confirmed checkout from the payment processor. Append-only."""

    __tablename__ = "payments"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    hr_email: Mapped[str] = mapped_column(ForeignKey("users.email"), nullable=False, index=True)
    package_name: Mapped[str] = mapped_column(String(64), nullable=False)
    employee_limit: Mapped[int] = mapped_column(Integer, nullable=False)
    amount: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    transaction_id: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    status: Mapped[str] = mapped_column(String(16), default="completed", nullable=False)
    paid_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )
