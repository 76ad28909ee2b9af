from datetime import datetime
from pydantic import BaseModel
from assetverse.models.affiliation import AffiliationStatus


class AffiliationResponse(BaseModel):
    id: int
    employee_email: str
    employee_name: str | None
    hr_email: str
    company_name: str | None
    company_logo: str | None
    status: AffiliationStatus
    affiliated_at: datetime
    removed_at: datetime | None

    model_config = {"from_attributes": True}


class EmployeeResponse(AffiliationResponse):
    # Denormalized count of currently assigned assets
    assets_count: int = 0


class TeamMember(BaseModel):
    employee_email: str
    employee_name: str | None
    photo_url: str | None = None
    date_of_birth: str | None = None


class RemovalResponse(BaseModel):
    employee_email: str
    returned_assignments: int
    current_employees: int
