from sqlalchemy import select, func
from sqlalchemy.orm import Session

from assetverse.models.asset import Asset, AssetType
from assetverse.models.request import AssetRequest, RequestStatus
from assetverse.models.user import User
from assetverse.services.access_service import HRScope


def get_summary(db: Session, hr: HRScope, top: int = 5) -> dict:
    by_type = dict(
        db.execute(
            select(Asset.product_type, func.coalesce(func.sum(Asset.product_quantity), 0))
            .where(Asset.hr_email == hr.email)
            .group_by(Asset.product_type)
        ).all()
    )
    top_requested = db.execute(
        select(
            AssetRequest.asset_id,
            func.max(AssetRequest.asset_name).label("asset_name"),
            func.count(AssetRequest.id).label("request_count"),
        )
        .where(AssetRequest.hr_email == hr.email)
        .group_by(AssetRequest.asset_id)
        .order_by(func.count(AssetRequest.id).desc(), AssetRequest.asset_id)
        .limit(top)
    ).all()
    pending = db.scalar(
        select(func.count(AssetRequest.id)).where(
            AssetRequest.hr_email == hr.email,
            AssetRequest.status == RequestStatus.pending,
        )
    )
    company = db.execute(
        select(User.current_employees, User.package_limit).where(User.email == hr.email)
    ).first()

    return {
        "asset_types": {
            "returnable": int(by_type.get(AssetType.returnable, 0)),
            "non_returnable": int(by_type.get(AssetType.non_returnable, 0)),
        },
        "top_requested": [
            {"asset_id": row.asset_id, "asset_name": row.asset_name, "request_count": row.request_count}
            for row in top_requested
        ],
        "pending_requests": pending or 0,
        "current_employees": company.current_employees if company else 0,
        "package_limit": company.package_limit if company else 0,
    }
