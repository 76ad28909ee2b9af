from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from assetverse.database import get_db
from assetverse.models.asset import AssetType
from assetverse.routers.deps import get_identity, require_hr
from assetverse.schemas.asset import AssetCreate, AssetUpdate, AssetResponse, AvailableAssetResponse
from assetverse.schemas.pagination import Page
from assetverse.services.access_service import HRScope
import assetverse.services.inventory_service as svc

router = APIRouter(tags=["assets"])


@router.post("/assets", response_model=AssetResponse, status_code=201)
def create_asset(data: AssetCreate, db: Session = Depends(get_db), hr: HRScope = Depends(require_hr)):
    return svc.create_asset(db, hr, data)


@router.get("/assets", response_model=Page[AssetResponse])
def list_assets(
    page: int = Query(1, ge=1),
    size: int = Query(50, ge=1, le=200),
    search: str = Query(""),
    product_type: AssetType | None = Query(None),
    db: Session = Depends(get_db),
    hr: HRScope = Depends(require_hr),
):
    return svc.list_assets(db, hr, page=page, size=size, search=search, product_type=product_type)


@router.get("/available-assets", response_model=Page[AvailableAssetResponse])
def list_available_assets(
    page: int = Query(1, ge=1),
    size: int = Query(50, ge=1, le=200),
    search: str = Query(""),
    db: Session = Depends(get_db),
    _=Depends(get_identity),
):
    return svc.list_available_assets(db, page=page, size=size, search=search)


@router.get("/assets/{asset_id}", response_model=AssetResponse)
def get_asset(asset_id: int, db: Session = Depends(get_db), hr: HRScope = Depends(require_hr)):
    return svc.get_asset(db, hr, asset_id)


@router.put("/assets/{asset_id}", response_model=AssetResponse)
def edit_asset(asset_id: int, data: AssetUpdate, db: Session = Depends(get_db), hr: HRScope = Depends(require_hr)):
    return svc.edit_asset(db, hr, asset_id, data)


@router.delete("/assets/{asset_id}", status_code=204)
def delete_asset(asset_id: int, db: Session = Depends(get_db), hr: HRScope = Depends(require_hr)):
    svc.delete_asset(db, hr, asset_id)
