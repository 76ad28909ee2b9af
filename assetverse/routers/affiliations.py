from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from assetverse.database import get_db
from assetverse.routers.deps import require_hr, require_employee
from assetverse.schemas.affiliation import AffiliationResponse, EmployeeResponse, TeamMember, RemovalResponse
from assetverse.schemas.pagination import Page
from assetverse.services.access_service import HRScope, EmployeeScope
import assetverse.services.affiliation_service as svc

router = APIRouter(tags=["affiliations"])


@router.get("/employees", response_model=Page[EmployeeResponse])
def list_employees(
    page: int = Query(1, ge=1),
    size: int = Query(50, ge=1, le=200),
    db: Session = Depends(get_db),
    hr: HRScope = Depends(require_hr),
):
    return svc.list_company_employees(db, hr, page=page, size=size)


@router.delete("/employee-affiliations/{employee_email}", response_model=RemovalResponse)
def remove_employee(employee_email: str, db: Session = Depends(get_db), hr: HRScope = Depends(require_hr)):
    return svc.remove_employee(db, hr, employee_email.lower())


@router.get("/my-companies", response_model=list[AffiliationResponse])
def my_companies(db: Session = Depends(get_db), employee: EmployeeScope = Depends(require_employee)):
    return svc.list_my_companies(db, employee)


@router.get("/my-team/{hr_email}", response_model=list[TeamMember])
def my_team(hr_email: str, db: Session = Depends(get_db), employee: EmployeeScope = Depends(require_employee)):
    return svc.list_team(db, employee, hr_email.lower())
