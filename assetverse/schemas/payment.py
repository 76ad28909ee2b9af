from datetime import datetime
from decimal import Decimal
from pydantic import BaseModel, Field


class PackageResponse(BaseModel):
    id: int
    name: str
    employee_limit: int
    price: Decimal
    features: list[str]

    model_config = {"from_attributes": True}


class PaymentConfirm(BaseModel):
    package_name: str = Field(..., min_length=1, max_length=64)
    employee_limit: int = Field(..., gt=0)
    transaction_id: str = Field(..., min_length=1, max_length=255)
    amount: Decimal = Field(..., ge=0)


class PaymentResponse(BaseModel):
    id: int
    hr_email: str
    package_name: str
    employee_limit: int
    amount: Decimal
    transaction_id: str
    status: str
    paid_at: datetime

    model_config = {"from_attributes": True}


class PaymentResult(BaseModel):
    created: bool
    payment: PaymentResponse
    package_limit: int
