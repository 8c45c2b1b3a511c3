from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Role(str, Enum):
    ADMIN = "ADMIN"
    SHOP = "SHOP"
    CUSTOMER = "CUSTOMER"


class SessionUser(BaseModel):
    """
    The profile stored alongside the bearer token.

    Unknown fields returned by the backend (fullName, phoneNumber, ...) are kept
    so the stored profile stays a faithful copy of what the server sent.
    """

    id: str | None = None
    email: str | None = None
    role_name: str | None = Field(None, alias="roleName")

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    @property
    def role(self) -> Role | None:
        try:
            return Role(self.role_name)
        except ValueError:
            return None


class Session(BaseModel):
    token: str | None = None
    user: SessionUser | None = None

    @classmethod
    def empty(cls) -> "Session":
        return cls()

    @property
    def is_authenticated(self) -> bool:
        return bool(self.token) and self.user is not None


class LoginPayload(BaseModel):
    email: str
    password: str


class RegisterPayload(BaseModel):
    email: str
    password: str
    confirm_password: str = Field(..., alias="confirmPassword")
    role_name: Role = Field(..., alias="roleName")

    model_config = ConfigDict(populate_by_name=True)
