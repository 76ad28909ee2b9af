import enum
from datetime import datetime, timezone
from sqlalchemy import String, Integer, DateTime, Enum as SAEnum
from sqlalchemy.orm import Mapped, mapped_column
from assetverse.database import Base


class Role(str, enum.Enum):
    hr = "hr"
    employee = "employee"


class User(Base):
    """Profile of a verified identity. HR users carry the company record."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    uid: Mapped[str | None] = mapped_column(String(128), nullable=True)
    email: Mapped[str] = mapped_column(String(255), unique=True, index=True, nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[str] = mapped_column(
        SAEnum(Role, values_callable=lambda e: [x.value for x in e]),
        nullable=False,
    )
    photo_url: Mapped[str | None] = mapped_column(String(500), nullable=True)
    date_of_birth: Mapped[str | None] = mapped_column(String(32), nullable=True)
    # HR only
    company_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    company_logo: Mapped[str | None] = mapped_column(String(500), nullable=True)
    subscription: Mapped[str | None] = mapped_column(String(64), nullable=True)
    package_limit: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    current_employees: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
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
