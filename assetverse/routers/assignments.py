from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from assetverse.database import get_db
from assetverse.models.asset import AssetType
from assetverse.models.assignment import AssignmentStatus
from assetverse.routers.deps import require_hr, require_employee
from assetverse.schemas.assignment import AssignmentResponse
from assetverse.schemas.pagination import Page
from assetverse.services.access_service import HRScope, EmployeeScope
import assetverse.services.assignment_service as svc

router = APIRouter(tags=["assignments"])


@router.get("/my-assets", response_model=Page[AssignmentResponse])
def my_assets(
    page: int = Query(1, ge=1),
    size: int = Query(50, ge=1, le=200),
    search: str = Query(""),
    asset_type: AssetType | None = Query(None),
    db: Session = Depends(get_db),
    employee: EmployeeScope = Depends(require_employee),
):
    return svc.list_my_assets(db, employee, page=page, size=size, search=search, asset_type=asset_type)


@router.patch("/assigned-assets/{assignment_id}/return", response_model=AssignmentResponse)
def return_asset(assignment_id: int, db: Session = Depends(get_db), employee: EmployeeScope = Depends(require_employee)):
    return svc.return_asset(db, employee, assignment_id)


@router.get("/assigned-assets", response_model=Page[AssignmentResponse])
def company_assignments(
    page: int = Query(1, ge=1),
    size: int = Query(50, ge=1, le=200),
    status: AssignmentStatus | None = Query(None),
    db: Session = Depends(get_db),
    hr: HRScope = Depends(require_hr),
):
    return svc.list_company_assignments(db, hr, page=page, size=size, status=status)
