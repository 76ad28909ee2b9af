from datetime import datetime
from pydantic import BaseModel
from assetverse.models.assignment import AssignmentStatus


class AssignmentResponse(BaseModel):
    id: int
    asset_id: int
    request_id: int
    asset_name: str
    asset_image: str | None
    asset_type: str
    employee_email: str
    employee_name: str | None
    hr_email: str
    company_name: str | None
    status: AssignmentStatus
    assigned_at: datetime
    returned_at: datetime | None

    model_config = {"from_attributes": True}


class ApprovalResponse(BaseModel):
    request_id: int
    assignment: AssignmentResponse
    affiliation_created: bool
