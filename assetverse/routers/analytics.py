from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from assetverse.database import get_db
from assetverse.routers.deps import require_hr
from assetverse.schemas.analytics import AnalyticsSummary
from assetverse.services.access_service import HRScope
import assetverse.services.analytics_service as svc

router = APIRouter(prefix="/analytics", tags=["analytics"])


@router.get("/summary", response_model=AnalyticsSummary)
def summary(
    top: int = Query(5, ge=1, le=20),
    db: Session = Depends(get_db),
    hr: HRScope = Depends(require_hr),
):
    return svc.get_summary(db, hr, top=top)
