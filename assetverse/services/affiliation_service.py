import logging
from datetime import datetime, timezone

from sqlalchemy import select, update, func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from assetverse.errors import Conflict, NotFound
from assetverse.models.affiliation import Affiliation, AffiliationStatus
from assetverse.models.assignment import Assignment, AssignmentStatus
from assetverse.models.user import User
from assetverse.schemas.pagination import Page, paginate
from assetverse.services.access_service import HRScope, EmployeeScope
import assetverse.services.assignment_service as assignment_svc

logger = logging.getLogger(__name__)

LIMIT_REACHED = "Employee limit reached, upgrade your package"


def get_affiliation(db: Session, hr_email: str, employee_email: str) -> Affiliation | None:
    return db.scalar(
        select(Affiliation).where(
            Affiliation.hr_email == hr_email,
            Affiliation.employee_email == employee_email,
        )
        .execution_options(populate_existing=True)
    )


def is_affiliated(db: Session, hr_email: str, employee_email: str) -> bool:
    affiliation = get_affiliation(db, hr_email, employee_email)
    return affiliation is not None and affiliation.status == AffiliationStatus.active


def check_capacity(db: Session, hr: HRScope, employee_email: str) -> None:
    """Fail early if affiliating ``employee_email`` would exceed the package limit."""
    if is_affiliated(db, hr.email, employee_email):
        return
    seats = db.execute(
        select(User.current_employees, User.package_limit).where(User.email == hr.email)
    ).first()
    if seats is None or seats.current_employees >= seats.package_limit:
        raise Conflict(LIMIT_REACHED)


def _take_seat(db: Session, hr_email: str) -> None:
    result = db.execute(
        update(User)
        .where(User.email == hr_email, User.current_employees < User.package_limit)
        .values(current_employees=User.current_employees + 1)
    )
    if result.rowcount != 1:
        raise Conflict(LIMIT_REACHED)


def _release_seat(db: Session, hr_email: str) -> None:
    db.execute(
        update(User)
        .where(User.email == hr_email, User.current_employees > 0)
        .values(current_employees=User.current_employees - 1)
    )


def ensure_affiliation(
    db: Session,
    hr: HRScope,
    employee_email: str,
    employee_name: str | None = None,
) -> tuple[Affiliation, bool]:
    """Return the active affiliation for the pair, creating or reactivating it if needed.

    The (employee, company) pair is unique in storage, so a concurrent insert
    surfaces as IntegrityError and falls back to the row that won. The
    employee counter moves only when this call is the one that activated the
    affiliation. Does not commit.
    """
    existing = get_affiliation(db, hr.email, employee_email)
    if existing is None:
        affiliation = Affiliation(
            employee_email=employee_email,
            employee_name=employee_name,
            hr_email=hr.email,
            company_name=hr.company_name,
            company_logo=hr.company_logo,
        )
        try:
            with db.begin_nested():
                db.add(affiliation)
        except IntegrityError:
            existing = get_affiliation(db, hr.email, employee_email)
        else:
            _take_seat(db, hr.email)
            logger.info("Affiliation created: %s -> %s", employee_email, hr.email)
            return affiliation, True

    if existing.status == AffiliationStatus.active:
        return existing, False

    result = db.execute(
        update(Affiliation)
        .where(Affiliation.id == existing.id, Affiliation.status == AffiliationStatus.inactive)
        .values(
            status=AffiliationStatus.active,
            affiliated_at=datetime.now(timezone.utc),
            removed_at=None,
        )
    )
    db.refresh(existing)
    if result.rowcount != 1:
        return existing, False
    _take_seat(db, hr.email)
    logger.info("Affiliation reactivated: %s -> %s", employee_email, hr.email)
    return existing, True


def remove_employee(db: Session, hr: HRScope, employee_email: str) -> dict:
    """Deactivate the affiliation and reclaim every unit the employee still holds."""
    result = db.execute(
        update(Affiliation)
        .where(
            Affiliation.hr_email == hr.email,
            Affiliation.employee_email == employee_email,
            Affiliation.status == AffiliationStatus.active,
        )
        .values(status=AffiliationStatus.inactive, removed_at=datetime.now(timezone.utc))
    )
    if result.rowcount != 1:
        db.rollback()
        raise NotFound("Employee is not affiliated with your company")

    returned = assignment_svc.terminate_for_removal(db, employee_email, hr.email)
    _release_seat(db, hr.email)
    db.commit()

    current = db.scalar(select(User.current_employees).where(User.email == hr.email))
    logger.info(
        "Employee %s removed from %s, %s assignment(s) returned",
        employee_email, hr.email, returned,
    )
    return {
        "employee_email": employee_email,
        "returned_assignments": returned,
        "current_employees": current or 0,
    }


def list_company_employees(db: Session, hr: HRScope, page: int = 1, size: int = 50) -> Page:
    query = (
        select(Affiliation)
        .where(Affiliation.hr_email == hr.email, Affiliation.status == AffiliationStatus.active)
        .order_by(Affiliation.affiliated_at)
    )
    result = paginate(db, query, page, size)

    counts = dict(
        db.execute(
            select(Assignment.employee_email, func.count(Assignment.id))
            .where(
                Assignment.hr_email == hr.email,
                Assignment.status == AssignmentStatus.assigned,
            )
            .group_by(Assignment.employee_email)
        ).all()
    )
    result.items = [_employee_dict(a, counts.get(a.employee_email, 0)) for a in result.items]
    return result


def list_my_companies(db: Session, employee: EmployeeScope) -> list[Affiliation]:
    return db.scalars(
        select(Affiliation)
        .where(
            Affiliation.employee_email == employee.email,
            Affiliation.status == AffiliationStatus.active,
        )
        .order_by(Affiliation.affiliated_at)
    ).all()


def list_team(db: Session, employee: EmployeeScope, hr_email: str) -> list[dict]:
    """Colleagues of ``employee`` at the company run by ``hr_email``."""
    if not is_affiliated(db, hr_email, employee.email):
        raise NotFound("You are not affiliated with this company")
    rows = db.execute(
        select(Affiliation, User)
        .outerjoin(User, User.email == Affiliation.employee_email)
        .where(Affiliation.hr_email == hr_email, Affiliation.status == AffiliationStatus.active)
        .order_by(Affiliation.employee_name)
    ).all()
    return [
        {
            "employee_email": aff.employee_email,
            "employee_name": aff.employee_name,
            "photo_url": user.photo_url if user else None,
            "date_of_birth": user.date_of_birth if user else None,
        }
        for aff, user in rows
    ]


def _employee_dict(affiliation: Affiliation, assets_count: int) -> dict:
    return {
        "id": affiliation.id,
        "employee_email": affiliation.employee_email,
        "employee_name": affiliation.employee_name,
        "hr_email": affiliation.hr_email,
        "company_name": affiliation.company_name,
        "company_logo": affiliation.company_logo,
        "status": affiliation.status,
        "affiliated_at": affiliation.affiliated_at,
        "removed_at": affiliation.removed_at,
        "assets_count": assets_count,
    }
