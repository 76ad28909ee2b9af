from datetime import datetime
from pydantic import BaseModel, Field
from assetverse.models.asset import AssetType


class AssetCreate(BaseModel):
    product_name: str = Field(..., min_length=1, max_length=255)
    product_image: str | None = None
    product_type: AssetType
    product_quantity: int


class AssetUpdate(BaseModel):
    product_name: str | None = Field(None, min_length=1, max_length=255)
    product_image: str | None = None
    product_type: AssetType | None = None
    product_quantity: int | None = None


class AssetResponse(BaseModel):
    id: int
    hr_email: str
    company_name: str | None
    product_name: str
    product_image: str | None
    product_type: AssetType
    product_quantity: int
    available_quantity: int
    created_at: datetime

    model_config = {"from_attributes": True}


class AvailableAssetResponse(BaseModel):
    id: int
    hr_email: str
    company_name: str | None
    product_name: str
    product_image: str | None
    product_type: AssetType
    available_quantity: int

    model_config = {"from_attributes": True}
