from pydantic import BaseModel, ConfigDict, Field


class DepositPayload(BaseModel):
    amount: float = Field(..., gt=0)


class PackagePurchase(BaseModel):
    package_id: str = Field(..., alias="packageId")

    model_config = ConfigDict(populate_by_name=True)
