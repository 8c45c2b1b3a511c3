from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ContactStatus(str, Enum):
    PENDING = "PENDING"
    CONTACTED = "CONTACTED"
    CLOSED = "CLOSED"


class ContactCreate(BaseModel):
    customer_name: str = Field(..., alias="customerName")
    customer_phone: str = Field(..., alias="customerPhone")
    customer_email: str = Field(..., alias="customerEmail")
    message: str = ""

    model_config = ConfigDict(populate_by_name=True)


class ContactStatusUpdate(BaseModel):
    status: ContactStatus


class ContactFilters(BaseModel):
    status: Optional[ContactStatus] = None
    search: Optional[str] = None
    page: Optional[int] = Field(None, ge=1)
    limit: Optional[int] = Field(None, ge=1, le=100)
