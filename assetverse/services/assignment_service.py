import logging
from datetime import datetime, timezone

from sqlalchemy import select, update
from sqlalchemy.orm import Session

from assetverse.errors import Conflict, NotFound
from assetverse.models.asset import AssetType
from assetverse.models.assignment import Assignment, AssignmentStatus
from assetverse.schemas.pagination import Page, paginate
from assetverse.services.access_service import HRScope, EmployeeScope
import assetverse.services.inventory_service as inventory_svc

logger = logging.getLogger(__name__)


def _claim_return(db: Session, assignment_id: int) -> bool:
    """assigned -> returned, only if still assigned."""
    result = db.execute(
        update(Assignment)
        .where(Assignment.id == assignment_id, Assignment.status == AssignmentStatus.assigned)
        .values(status=AssignmentStatus.returned, returned_at=datetime.now(timezone.utc))
    )
    return result.rowcount == 1


def return_asset(db: Session, employee: EmployeeScope, assignment_id: int) -> Assignment:
    assignment = db.scalar(
        select(Assignment).where(
            Assignment.id == assignment_id,
            Assignment.employee_email == employee.email,
            Assignment.status == AssignmentStatus.assigned,
        )
        .execution_options(populate_existing=True)
    )
    if not assignment:
        raise NotFound("Assigned asset not found")
    if assignment.asset_type != AssetType.returnable.value:
        raise Conflict("Non-returnable assets cannot be returned")

    if not _claim_return(db, assignment.id):
        db.rollback()
        raise NotFound("Assigned asset not found")
    inventory_svc.restock(db, assignment.asset_id)
    db.commit()
    db.refresh(assignment)
    logger.info("Assignment %s returned by %s", assignment.id, employee.email)
    return assignment


def terminate_for_removal(db: Session, employee_email: str, hr_email: str) -> int:
    """Return every unit ``employee_email`` holds from ``hr_email``'s company.

    Each status claim is paired with its restock inside a savepoint. Returns
    the number of assignments terminated. Does not commit.
    """
    assignments = db.scalars(
        select(Assignment).where(
            Assignment.employee_email == employee_email,
            Assignment.hr_email == hr_email,
            Assignment.status == AssignmentStatus.assigned,
        )
    ).all()
    terminated = 0
    for assignment in assignments:
        with db.begin_nested():
            if not _claim_return(db, assignment.id):
                continue
            inventory_svc.restock(db, assignment.asset_id)
        terminated += 1
    return terminated


def list_my_assets(
    db: Session,
    employee: EmployeeScope,
    page: int = 1,
    size: int = 50,
    search: str = "",
    asset_type: AssetType | None = None,
) -> Page:
    query = select(Assignment).where(Assignment.employee_email == employee.email)
    if search:
        query = query.where(Assignment.asset_name.ilike(f"%{search}%"))
    if asset_type is not None:
        query = query.where(Assignment.asset_type == asset_type.value)
    query = query.order_by(Assignment.assigned_at.desc(), Assignment.id.desc())
    return paginate(db, query, page, size)


def list_company_assignments(
    db: Session,
    hr: HRScope,
    page: int = 1,
    size: int = 50,
    status: AssignmentStatus | None = None,
) -> Page:
    query = select(Assignment).where(Assignment.hr_email == hr.email)
    if status is not None:
        query = query.where(Assignment.status == status)
    query = query.order_by(Assignment.assigned_at.desc(), Assignment.id.desc())
    return paginate(db, query, page, size)
