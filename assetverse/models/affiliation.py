import enum
from datetime import datetime, timezone
from sqlalchemy import String, DateTime, UniqueConstraint, Enum as SAEnum
from sqlalchemy.orm import Mapped, mapped_column
from assetverse.database import Base


class AffiliationStatus(str, enum.Enum):
    active = "active"
    inactive = "inactive"


class Affiliation(Base):
    __tablename__ = "employee_affiliations"

    __table_args__ = (
        UniqueConstraint("employee_email", "hr_email", name="uq_affiliation_employee_company"),
    )

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    employee_email: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    employee_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    hr_email: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    company_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    company_logo: Mapped[str | None] = mapped_column(String(500), nullable=True)
    status: Mapped[str] = mapped_column(
        SAEnum(AffiliationStatus, values_callable=lambda e: [x.value for x in e]),
        default=AffiliationStatus.active,
        nullable=False,
    )
    affiliated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )
    removed_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
