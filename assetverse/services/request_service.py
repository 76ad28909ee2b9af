"""Asset request lifecycle: pending -> approved | rejected.

Approval is one unit of work over several rows. Every step that guards an
invariant is a conditional UPDATE (stock, request status, employee seat), so
a retried or concurrent approval fails cleanly instead of applying its side
effects twice. Any failure rolls the whole unit back.
"""
import logging
from datetime import datetime, timezone

from sqlalchemy import select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from assetverse.errors import AppError, Conflict, Internal, InvalidInput, NotFound
from assetverse.models.asset import Asset, AssetType
from assetverse.models.assignment import Assignment
from assetverse.models.request import AssetRequest, RequestStatus
from assetverse.schemas.pagination import Page, paginate
from assetverse.schemas.request import RequestCreate
from assetverse.services.access_service import HRScope, EmployeeScope
import assetverse.services.affiliation_service as affiliation_svc
import assetverse.services.inventory_service as inventory_svc

logger = logging.getLogger(__name__)


def create_request(db: Session, employee: EmployeeScope, data: RequestCreate) -> AssetRequest:
    """File a pending request. The asset is only checked when the request is approved."""
    asset = db.get(Asset, data.asset_id)
    hr_email = asset.hr_email if asset else (data.hr_email or "").lower()
    if not hr_email:
        raise InvalidInput("hr_email is required when the asset is unknown")

    request = AssetRequest(
        asset_id=data.asset_id,
        asset_name=asset.product_name if asset else None,
        asset_type=AssetType(asset.product_type).value if asset else None,
        requester_email=employee.email,
        requester_name=employee.name,
        hr_email=hr_email,
        company_name=asset.company_name if asset else None,
        note=data.note,
    )
    db.add(request)
    db.commit()
    db.refresh(request)
    logger.info("Request %s filed by %s for asset %s", request.id, employee.email, data.asset_id)
    return request


def _get_pending(db: Session, hr: HRScope, request_id: int) -> AssetRequest:
    request = db.scalar(
        select(AssetRequest).where(
            AssetRequest.id == request_id,
            AssetRequest.hr_email == hr.email,
            AssetRequest.status == RequestStatus.pending,
        )
        .execution_options(populate_existing=True)
    )
    if not request:
        raise NotFound("Pending request not found")
    return request


def _claim(db: Session, hr: HRScope, request_id: int, status: RequestStatus) -> None:
    result = db.execute(
        update(AssetRequest)
        .where(
            AssetRequest.id == request_id,
            AssetRequest.hr_email == hr.email,
            AssetRequest.status == RequestStatus.pending,
        )
        .values(status=status, resolved_at=datetime.now(timezone.utc), processed_by=hr.email)
    )
    if result.rowcount != 1:
        raise Conflict("Request was already processed")


def approve_request(db: Session, hr: HRScope, request_id: int) -> dict:
    request = _get_pending(db, hr, request_id)
    asset = db.scalar(
        select(Asset)
        .where(Asset.id == request.asset_id, Asset.hr_email == hr.email)
        .execution_options(populate_existing=True)
    )
    if not asset:
        raise NotFound("Requested asset no longer exists")
    if asset.available_quantity <= 0:
        raise Conflict("Asset is out of stock")
    affiliation_svc.check_capacity(db, hr, request.requester_email)

    try:
        inventory_svc.adjust_available(db, asset.id, -1)
        _claim(db, hr, request.id, RequestStatus.approved)
        assignment = Assignment(
            asset_id=asset.id,
            request_id=request.id,
            asset_name=asset.product_name,
            asset_image=asset.product_image,
            asset_type=AssetType(asset.product_type).value,
            employee_email=request.requester_email,
            employee_name=request.requester_name,
            hr_email=hr.email,
            company_name=hr.company_name,
        )
        db.add(assignment)
        db.flush()
        _, affiliation_created = affiliation_svc.ensure_affiliation(
            db, hr, request.requester_email, request.requester_name
        )
        db.commit()
    except AppError as exc:
        db.rollback()
        logger.warning("Approval of request %s refused: %s", request_id, exc.detail)
        raise
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Approval of request %s failed", request_id)
        raise Internal("Approval failed, please retry")

    db.refresh(assignment)
    logger.info(
        "Request %s approved by %s (assignment %s, new affiliation=%s)",
        request_id, hr.email, assignment.id, affiliation_created,
    )
    return {
        "request_id": request_id,
        "assignment": assignment,
        "affiliation_created": affiliation_created,
    }


def reject_request(db: Session, hr: HRScope, request_id: int) -> AssetRequest:
    request = _get_pending(db, hr, request_id)
    try:
        _claim(db, hr, request.id, RequestStatus.rejected)
        db.commit()
    except AppError:
        db.rollback()
        raise
    db.refresh(request)
    logger.info("Request %s rejected by %s", request_id, hr.email)
    return request


def list_company_requests(
    db: Session,
    hr: HRScope,
    page: int = 1,
    size: int = 50,
    search: str = "",
    status: RequestStatus | None = None,
) -> Page:
    query = select(AssetRequest).where(AssetRequest.hr_email == hr.email)
    if search:
        query = query.where(
            AssetRequest.requester_name.ilike(f"%{search}%")
            | AssetRequest.requester_email.ilike(f"%{search}%")
        )
    if status is not None:
        query = query.where(AssetRequest.status == status)
    query = query.order_by(AssetRequest.requested_at.desc(), AssetRequest.id.desc())
    return paginate(db, query, page, size)


def list_my_requests(
    db: Session,
    employee: EmployeeScope,
    page: int = 1,
    size: int = 50,
    status: RequestStatus | None = None,
) -> Page:
    query = select(AssetRequest).where(AssetRequest.requester_email == employee.email)
    if status is not None:
        query = query.where(AssetRequest.status == status)
    query = query.order_by(AssetRequest.requested_at.desc(), AssetRequest.id.desc())
    return paginate(db, query, page, size)
