import logging

from sqlalchemy import select, update
from sqlalchemy.orm import Session

from assetverse.errors import Conflict, InvalidInput, NotFound
from assetverse.models.asset import Asset, AssetType
from assetverse.schemas.asset import AssetCreate, AssetUpdate
from assetverse.schemas.pagination import Page, paginate
from assetverse.services.access_service import HRScope

logger = logging.getLogger(__name__)


def create_asset(db: Session, hr: HRScope, data: AssetCreate) -> Asset:
    if data.product_quantity < 0:
        raise InvalidInput("Quantity must not be negative")
    asset = Asset(
        hr_email=hr.email,
        company_name=hr.company_name,
        product_name=data.product_name,
        product_image=data.product_image,
        product_type=data.product_type,
        product_quantity=data.product_quantity,
        available_quantity=data.product_quantity,
    )
    db.add(asset)
    db.commit()
    db.refresh(asset)
    logger.info("Asset %s (%s x%s) created by %s", asset.id, asset.product_name, asset.product_quantity, hr.email)
    return asset


def list_assets(
    db: Session,
    hr: HRScope,
    page: int = 1,
    size: int = 50,
    search: str = "",
    product_type: AssetType | None = None,
) -> Page:
    query = select(Asset).where(Asset.hr_email == hr.email)
    if search:
        query = query.where(Asset.product_name.ilike(f"%{search}%"))
    if product_type is not None:
        query = query.where(Asset.product_type == product_type)
    query = query.order_by(Asset.created_at.desc(), Asset.id.desc())
    return paginate(db, query, page, size)


def list_available_assets(db: Session, page: int = 1, size: int = 50, search: str = "") -> Page:
    """Assets of every company with at least one unit in stock."""
    query = select(Asset).where(Asset.available_quantity > 0)
    if search:
        query = query.where(Asset.product_name.ilike(f"%{search}%"))
    query = query.order_by(Asset.created_at.desc(), Asset.id.desc())
    return paginate(db, query, page, size)


def get_asset(db: Session, hr: HRScope, asset_id: int) -> Asset:
    asset = db.scalar(select(Asset).where(Asset.id == asset_id, Asset.hr_email == hr.email))
    if not asset:
        raise NotFound("Asset not found")
    return asset


def edit_asset(db: Session, hr: HRScope, asset_id: int, data: AssetUpdate) -> Asset:
    """Rewrite asset fields.

    Availability is reset to the (new) total on every edit. Units currently
    assigned are not reconciled; returns of those units are capped by
    ``restock`` so the range invariant still holds.
    """
    asset = get_asset(db, hr, asset_id)
    fields = data.model_dump(exclude_unset=True)
    for field in ("product_name", "product_type", "product_quantity"):
        if field in fields and fields[field] is None:
            raise InvalidInput(f"{field} must not be null")
    if fields.get("product_quantity", 0) < 0:
        raise InvalidInput("Quantity must not be negative")

    for field, value in fields.items():
        setattr(asset, field, value)
    asset.available_quantity = asset.product_quantity
    db.commit()
    db.refresh(asset)
    logger.info("Asset %s edited by %s, availability reset to %s", asset.id, hr.email, asset.available_quantity)
    return asset


def delete_asset(db: Session, hr: HRScope, asset_id: int) -> None:
    asset = get_asset(db, hr, asset_id)
    db.delete(asset)
    db.commit()
    logger.info("Asset %s deleted by %s", asset_id, hr.email)


def adjust_available(db: Session, asset_id: int, delta: int) -> None:
    """Apply ``delta`` to the available quantity in one conditional UPDATE.

    The range check is part of the WHERE clause, so two concurrent callers
    can never both take the last unit. Does not commit.
    """
    result = db.execute(
        update(Asset)
        .where(
            Asset.id == asset_id,
            Asset.available_quantity + delta >= 0,
            Asset.available_quantity + delta <= Asset.product_quantity,
        )
        .values(available_quantity=Asset.available_quantity + delta)
    )
    if result.rowcount == 1:
        return
    if db.get(Asset, asset_id) is None:
        raise NotFound("Asset not found")
    raise Conflict("Not enough units available" if delta < 0 else "Quantity would exceed total")


def restock(db: Session, asset_id: int) -> bool:
    """Put one unit back, capped at the total. Returns False when nothing changed. Does not commit."""
    result = db.execute(
        update(Asset)
        .where(Asset.id == asset_id, Asset.available_quantity < Asset.product_quantity)
        .values(available_quantity=Asset.available_quantity + 1)
    )
    if result.rowcount != 1:
        logger.warning("Asset %s not restocked (deleted or already at total)", asset_id)
        return False
    return True
