from datetime import datetime
from pydantic import BaseModel, Field
from assetverse.models.request import RequestStatus


class RequestCreate(BaseModel):
    asset_id: int
    hr_email: str | None = None  # taken from the asset when omitted
    note: str | None = Field(None, max_length=1000)


class RequestResponse(BaseModel):
    id: int
    asset_id: int
    asset_name: str | None
    asset_type: str | None
    requester_email: str
    requester_name: str | None
    hr_email: str
    company_name: str | None
    status: RequestStatus
    note: str | None
    processed_by: str | None
    requested_at: datetime
    resolved_at: datetime | None

    model_config = {"from_attributes": True}
