from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from assetverse.database import get_db
from assetverse.models.request import RequestStatus
from assetverse.routers.deps import require_hr, require_employee
from assetverse.schemas.assignment import ApprovalResponse
from assetverse.schemas.pagination import Page
from assetverse.schemas.request import RequestCreate, RequestResponse
from assetverse.services.access_service import HRScope, EmployeeScope
import assetverse.services.request_service as svc

router = APIRouter(tags=["requests"])


@router.post("/requests", response_model=RequestResponse, status_code=201)
def create_request(data: RequestCreate, db: Session = Depends(get_db), employee: EmployeeScope = Depends(require_employee)):
    return svc.create_request(db, employee, data)


@router.get("/requests", response_model=Page[RequestResponse])
def list_requests(
    page: int = Query(1, ge=1),
    size: int = Query(50, ge=1, le=200),
    search: str = Query(""),
    status: RequestStatus | None = Query(None),
    db: Session = Depends(get_db),
    hr: HRScope = Depends(require_hr),
):
    return svc.list_company_requests(db, hr, page=page, size=size, search=search, status=status)


@router.patch("/requests/{request_id}/approve", response_model=ApprovalResponse)
def approve_request(request_id: int, db: Session = Depends(get_db), hr: HRScope = Depends(require_hr)):
    return svc.approve_request(db, hr, request_id)


@router.patch("/requests/{request_id}/reject", response_model=RequestResponse)
def reject_request(request_id: int, db: Session = Depends(get_db), hr: HRScope = Depends(require_hr)):
    return svc.reject_request(db, hr, request_id)


@router.get("/my-requests", response_model=Page[RequestResponse])
def my_requests(
    page: int = Query(1, ge=1),
    size: int = Query(50, ge=1, le=200),
    status: RequestStatus | None = Query(None),
    db: Session = Depends(get_db),
    employee: EmployeeScope = Depends(require_employee),
):
    return svc.list_my_requests(db, employee, page=page, size=size, status=status)
