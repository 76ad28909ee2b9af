from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy.orm import Session
from assetverse.database import get_db
from assetverse.routers.deps import require_hr
from assetverse.schemas.pagination import Page
from assetverse.schemas.payment import PackageResponse, PaymentConfirm, PaymentResponse, PaymentResult
from assetverse.services.access_service import HRScope
import assetverse.services.payment_service as svc

router = APIRouter(tags=["payments"])


@router.get("/packages", response_model=list[PackageResponse])
def list_packages(db: Session = Depends(get_db)):
    return svc.list_packages(db)


@router.post("/payments", response_model=PaymentResult, status_code=201)
def confirm_payment(
    data: PaymentConfirm,
    response: Response,
    db: Session = Depends(get_db),
    hr: HRScope = Depends(require_hr),
):
    result = svc.confirm_payment(db, hr, data)
    if not result["created"]:
        response.status_code = 200
    return result


@router.get("/payments", response_model=Page[PaymentResponse])
def list_payments(
    page: int = Query(1, ge=1),
    size: int = Query(50, ge=1, le=200),
    db: Session = Depends(get_db),
    hr: HRScope = Depends(require_hr),
):
    return svc.list_payments(db, hr, page=page, size=size)
