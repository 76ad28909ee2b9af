from assetverse.schemas.user import UserRegister, UserUpdate, UserResponse, RegisterResponse
from assetverse.schemas.asset import AssetCreate, AssetUpdate, AssetResponse, AvailableAssetResponse
from assetverse.schemas.request import RequestCreate, RequestResponse
from assetverse.schemas.assignment import AssignmentResponse, ApprovalResponse
from assetverse.schemas.affiliation import AffiliationResponse, EmployeeResponse, TeamMember, RemovalResponse
from assetverse.schemas.payment import PackageResponse, PaymentConfirm, PaymentResponse, PaymentResult
from assetverse.schemas.analytics import AnalyticsSummary
from assetverse.schemas.pagination import Page

__all__ = [
    "UserRegister", "UserUpdate", "UserResponse", "RegisterResponse",
    "AssetCreate", "AssetUpdate", "AssetResponse", "AvailableAssetResponse",
    "RequestCreate", "RequestResponse",
    "AssignmentResponse", "ApprovalResponse",
    "AffiliationResponse", "EmployeeResponse", "TeamMember", "RemovalResponse",
    "PackageResponse", "PaymentConfirm", "PaymentResponse", "PaymentResult",
    "AnalyticsSummary",
    "Page",
]
