from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .product import ProductStatus


class BanToggle(BaseModel):
    is_banned: bool = Field(..., alias="isBanned")

    model_config = ConfigDict(populate_by_name=True)


class ProductReview(BaseModel):
    status: ProductStatus
    rejected_reason: Optional[str] = Field(None, alias="rejectedReason")

    model_config = ConfigDict(populate_by_name=True)

    @model_validator(mode="after")
    def check_decision(self):
        if self.status not in (ProductStatus.APPROVED, ProductStatus.REJECTED):
            raise ValueError("Review status must be APPROVED or REJECTED")
        return self
