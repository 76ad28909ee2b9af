from pydantic import BaseModel


class AssetTypeBreakdown(BaseModel):
    returnable: int
    non_returnable: int


class TopRequestedAsset(BaseModel):
    asset_id: int
    asset_name: str | None
    request_count: int


class AnalyticsSummary(BaseModel):
    asset_types: AssetTypeBreakdown
    top_requested: list[TopRequestedAsset]
    pending_requests: int
    current_employees: int
    package_limit: int
