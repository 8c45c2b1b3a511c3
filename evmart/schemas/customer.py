from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ProfileUpdate(BaseModel):
    full_name: Optional[str] = Field(None, alias="fullName")
    phone_number: Optional[str] = Field(None, alias="phoneNumber")
    address: Optional[str] = None
    date_of_birth: Optional[date] = Field(None, alias="dateOfBirth")

    model_config = ConfigDict(populate_by_name=True)
