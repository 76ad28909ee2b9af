import logging
from decimal import Decimal

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from assetverse.errors import InvalidInput
from assetverse.models.package import Package, Payment
from assetverse.models.user import User
from assetverse.schemas.pagination import Page, paginate
from assetverse.schemas.payment import PaymentConfirm
from assetverse.services.access_service import HRScope

logger = logging.getLogger(__name__)

DEFAULT_PACKAGES = [
    ("basic", 5, Decimal("5.00"), ["Asset tracking", "Employee management", "Basic support"]),
    ("standard", 10, Decimal("8.00"), ["All Basic features", "Advanced analytics", "Priority support"]),
    ("premium", 20, Decimal("15.00"), ["All Standard features", "Custom branding", "24/7 support"]),
]


def seed_packages(db: Session) -> None:
    existing = set(db.scalars(select(Package.name)).all())
    for name, limit, price, features in DEFAULT_PACKAGES:
        if name not in existing:
            db.add(Package(name=name, employee_limit=limit, price=price, features=features))
    db.commit()


def list_packages(db: Session) -> list[Package]:
    return db.scalars(select(Package).order_by(Package.employee_limit)).all()


def get_payment_by_transaction(db: Session, transaction_id: str) -> Payment | None:
    return db.scalar(select(Payment).where(Payment.transaction_id == transaction_id))


def confirm_payment(db: Session, hr: HRScope, data: PaymentConfirm) -> dict:
    """Record a checkout confirmed by the payment processor and upgrade the package.

    ``transaction_id`` is unique: confirming the same transaction again
    returns the stored payment and applies no second upgrade.
    """
    existing = get_payment_by_transaction(db, data.transaction_id)
    if existing is None:
        company = db.scalar(select(User).where(User.email == hr.email))
        if data.employee_limit < company.current_employees:
            raise InvalidInput("Package limit is below the current number of employees")
        payment = Payment(
            hr_email=hr.email,
            package_name=data.package_name,
            employee_limit=data.employee_limit,
            amount=data.amount,
            transaction_id=data.transaction_id,
        )
        db.add(payment)
        db.execute(
            update(User)
            .where(User.email == hr.email)
            .values(package_limit=data.employee_limit, subscription=data.package_name)
        )
        try:
            db.commit()
        except IntegrityError:
            db.rollback()
            existing = get_payment_by_transaction(db, data.transaction_id)
        else:
            db.refresh(payment)
            logger.info(
                "Payment %s confirmed for %s: %s (%s employees)",
                data.transaction_id, hr.email, data.package_name, data.employee_limit,
            )
            return {"created": True, "payment": payment, "package_limit": data.employee_limit}

    if existing.hr_email != hr.email:
        logger.warning("Transaction %s replayed by %s", data.transaction_id, hr.email)
        raise InvalidInput("Transaction belongs to another account")
    limit = db.scalar(select(User.package_limit).where(User.email == hr.email))
    return {"created": False, "payment": existing, "package_limit": limit}


def list_payments(db: Session, hr: HRScope, page: int = 1, size: int = 50) -> Page:
    query = (
        select(Payment)
        .where(Payment.hr_email == hr.email)
        .order_by(Payment.paid_at.desc(), Payment.id.desc())
    )
    return paginate(db, query, page, size)
