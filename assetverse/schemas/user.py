from datetime import datetime
from pydantic import BaseModel, Field, model_validator
from assetverse.models.user import Role


class UserRegister(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    role: Role
    photo_url: str | None = None
    date_of_birth: str | None = None
    company_name: str | None = Field(None, max_length=255)
    company_logo: str | None = None

    @model_validator(mode="after")
    def _hr_needs_company(self):
        if self.role == Role.hr and not self.company_name:
            raise ValueError("company_name is required for HR accounts")
        return self


class UserUpdate(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=255)
    photo_url: str | None = None
    date_of_birth: str | None = None
    company_logo: str | None = None


class UserResponse(BaseModel):
    id: int
    email: str
    name: str
    role: Role
    photo_url: str | None
    date_of_birth: str | None
    company_name: str | None
    company_logo: str | None
    subscription: str | None
    package_limit: int
    current_employees: int
    created_at: datetime

    model_config = {"from_attributes": True}


class RegisterResponse(BaseModel):
    created: bool
    user: UserResponse
