from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ProductCategory(str, Enum):
    BATTERY = "BATTERY"
    ELECTRIC_SCOOTER = "ELECTRIC_SCOOTER"


class ProductStatus(str, Enum):
    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"
    INACTIVE = "INACTIVE"


class ProductCreate(BaseModel):
    title: str = Field(..., max_length=200)
    description: str
    price: float = Field(..., gt=0)
    stock: int = Field(1, ge=0)
    category: ProductCategory = ProductCategory.BATTERY
    brand: Optional[str] = None
    images: list[str] = []


class ProductUpdate(BaseModel):
    title: Optional[str] = Field(None, max_length=200)
    description: Optional[str] = None
    price: Optional[float] = Field(None, gt=0)
    stock: Optional[int] = Field(None, ge=0)
    category: Optional[ProductCategory] = None
    brand: Optional[str] = None
    images: Optional[list[str]] = None
    status: Optional[ProductStatus] = None


class ProductFilters(BaseModel):
    """Query filters shared by the public catalogue and the admin review list."""

    status: Optional[ProductStatus] = None
    category: Optional[ProductCategory] = None
    search: Optional[str] = None
    brand: Optional[str] = None
    min_price: Optional[float] = Field(None, alias="minPrice", ge=0)
    max_price: Optional[float] = Field(None, alias="maxPrice", ge=0)
    page: Optional[int] = Field(None, ge=1)
    limit: Optional[int] = Field(None, ge=1, le=100)

    model_config = ConfigDict(populate_by_name=True)
