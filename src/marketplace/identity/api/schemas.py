"""Pydantic request/response schemas for the Identity API."""

from pydantic import BaseModel


# ---------------------------------------------------------------------------
# Staff users
# ---------------------------------------------------------------------------
class RegisterUserRequest(BaseModel):
    username: str
    email: str
    password: str
    mobile_number: str
    address: str
    role: str


class UpdateUserRequest(BaseModel):
    username: str
    mobile_number: str
    address: str
    password: str | None = None


class LoginRequest(BaseModel):
    email: str
    password: str


class UserIdResponse(BaseModel):
    user_id: str


class UserResponse(BaseModel):
    id: str
    username: str
    email: str
    mobile_number: str
    address: str
    role: str
    is_active: bool


class TokenResponse(BaseModel):
    token: str
    user: UserResponse


# ---------------------------------------------------------------------------
# Customers
# ---------------------------------------------------------------------------
class RegisterCustomerRequest(BaseModel):
    # Presence is checked by the RegisterCustomer command, so a missing field is a 400
    email: str | None = None
    password: str | None = None
    full_name: str | None = None
    mobile_number: str | None = None
    address: str | None = None


class UpdateCustomerRequest(BaseModel):
    full_name: str | None = None
    mobile_number: str | None = None
    address: str | None = None


class CustomerIdResponse(BaseModel):
    customer_id: str


class CustomerResponse(BaseModel):
    id: str
    email: str
    full_name: str | None = None
    mobile_number: str | None = None
    address: str | None = None
    is_active: bool


class CustomerTokenResponse(BaseModel):
    token: str
    customer: CustomerResponse
