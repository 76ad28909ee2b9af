from assetverse.models.user import User, Role
from assetverse.models.asset import Asset, AssetType
from assetverse.models.request import AssetRequest, RequestStatus
from assetverse.models.assignment import Assignment, AssignmentStatus
from assetverse.models.affiliation import Affiliation, AffiliationStatus
from assetverse.models.package import Package, Payment

__all__ = [
    "User", "Role",
    "Asset", "AssetType",
    "AssetRequest", "RequestStatus",
    "Assignment", "AssignmentStatus",
    "Affiliation", "AffiliationStatus",
    "Package", "Payment",
]
