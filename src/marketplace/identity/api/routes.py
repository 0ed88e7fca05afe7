"""FastAPI routes for Identity: staff users, administration and customers."""

from fastapi import APIRouter, Depends
from protean.utils.globals import current_domain

from marketplace.api.schemas import StatusResponse
from marketplace.identity.api.dependencies import current_claims, require_role
from marketplace.identity.api.schemas import (
    CustomerIdResponse,
    CustomerResponse,
    CustomerTokenResponse,
    LoginRequest,
    RegisterCustomerRequest,
    RegisterUserRequest,
    TokenResponse,
    UpdateCustomerRequest,
    UpdateUserRequest,
    UserIdResponse,
    UserResponse,
)
from marketplace.identity.customer.account import (
    ActivateCustomer,
    DeactivateCustomer,
    DeleteCustomer,
    UpdateCustomer,
)
from marketplace.identity.customer.authentication import login_customer
from marketplace.identity.customer.customer import Customer
from marketplace.identity.customer.registration import RegisterCustomer
from marketplace.identity.user.account import ActivateUser, DeactivateUser, DeleteUser, UpdateUser
from marketplace.identity.user.authentication import login_user
from marketplace.identity.user.registration import RegisterUser
from marketplace.identity.user.user import User, UserRole
from marketplace.shared.errors import PermissionDenied
from marketplace.shared.ids import ensure_object_id


def _user_response(user) -> UserResponse:
    return UserResponse(
        id=str(user.id),
        username=user.username,
        email=user.email,
        mobile_number=user.mobile_number,
        address=user.address,
        role=user.role,
        is_active=user.is_active,
    )


def _customer_response(customer) -> CustomerResponse:
    return CustomerResponse(
        id=str(customer.id),
        email=customer.email,
        full_name=customer.full_name,
        mobile_number=customer.mobile_number,
        address=customer.address,
        is_active=customer.is_active,
    )


def _assert_self_or_admin(claims: dict, user_id: str) -> None:
    if claims.get("id") != user_id and claims.get("role") != UserRole.ADMIN.value:
        raise PermissionDenied("You can only change your own account")


# ---------------------------------------------------------------------------
# User Router
# ---------------------------------------------------------------------------
user_router = APIRouter(prefix="/users", tags=["users"])


@user_router.post("/register", status_code=201, response_model=UserIdResponse)
async def register_user(body: RegisterUserRequest) -> UserIdResponse:
    command = RegisterUser(
        username=body.username,
        email=body.email,
        password=body.password,
        mobile_number=body.mobile_number,
        address=body.address,
        role=body.role,
    )
    result = current_domain.process(command, asynchronous=False)
    return UserIdResponse(user_id=result)


@user_router.post("/login", response_model=TokenResponse)
async def login(body: LoginRequest) -> TokenResponse:
    token, user = login_user(body.email, body.password)
    return TokenResponse(token=token, user=_user_response(user))


@user_router.get("/{user_id}", response_model=UserResponse)
async def get_user(user_id: str) -> UserResponse:
    ensure_object_id(user_id, "user_id")
    return _user_response(current_domain.repository_for(User).get(user_id))


@user_router.put("/{user_id}", response_model=StatusResponse)
async def update_user(user_id: str, body: UpdateUserRequest, claims: dict = Depends(current_claims)) -> StatusResponse:
    ensure_object_id(user_id, "user_id")
    _assert_self_or_admin(claims, user_id)
    command = UpdateUser(
        user_id=user_id,
        username=body.username,
        mobile_number=body.mobile_number,
        address=body.address,
        password=body.password,
    )
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@user_router.delete("/{user_id}", response_model=StatusResponse)
async def delete_user(user_id: str, claims: dict = Depends(current_claims)) -> StatusResponse:
    ensure_object_id(user_id, "user_id")
    _assert_self_or_admin(claims, user_id)
    current_domain.process(DeleteUser(user_id=user_id), asynchronous=False)
    return StatusResponse()


# ---------------------------------------------------------------------------
# Admin Router
# ---------------------------------------------------------------------------
admin_router = APIRouter(
    prefix="/admin",
    tags=["admin"],
    dependencies=[Depends(require_role(UserRole.ADMIN.value))],
)


def _users_with_role(role: UserRole) -> list[UserResponse]:
    return [_user_response(u) for u in current_domain.repository_for(User).with_role(role.value)]


@admin_router.get("/admins", response_model=list[UserResponse])
async def get_admins() -> list[UserResponse]:
    return _users_with_role(UserRole.ADMIN)


@admin_router.get("/vendors", response_model=list[UserResponse])
async def get_vendors() -> list[UserResponse]:
    return _users_with_role(UserRole.VENDOR)


@admin_router.get("/csrs", response_model=list[UserResponse])
async def get_csrs() -> list[UserResponse]:
    return _users_with_role(UserRole.CSR)


@admin_router.patch("/users/{user_id}/activate", response_model=StatusResponse)
async def activate_user(user_id: str) -> StatusResponse:
    ensure_object_id(user_id, "user_id")
    current_domain.process(ActivateUser(user_id=user_id), asynchronous=False)
    return StatusResponse()


@admin_router.patch("/users/{user_id}/deactivate", response_model=StatusResponse)
async def deactivate_user(user_id: str) -> StatusResponse:
    ensure_object_id(user_id, "user_id")
    current_domain.process(DeactivateUser(user_id=user_id), asynchronous=False)
    return StatusResponse()


# ---------------------------------------------------------------------------
# Customer Router
# ---------------------------------------------------------------------------
customer_router = APIRouter(prefix="/customers", tags=["customers"])

_staff_only = Depends(require_role(UserRole.CSR.value, UserRole.ADMIN.value))


@customer_router.post("/register", status_code=201, response_model=CustomerIdResponse)
async def register_customer(body: RegisterCustomerRequest) -> CustomerIdResponse:
    command = RegisterCustomer(
        email=body.email,
        password=body.password,
        full_name=body.full_name,
        mobile_number=body.mobile_number,
        address=body.address,
    )
    result = current_domain.process(command, asynchronous=False)
    return CustomerIdResponse(customer_id=result)


@customer_router.post("/login", response_model=CustomerTokenResponse)
async def login_as_customer(body: LoginRequest) -> CustomerTokenResponse:
    token, customer = login_customer(body.email, body.password)
    return CustomerTokenResponse(token=token, customer=_customer_response(customer))


@customer_router.get("", response_model=list[CustomerResponse])
async def get_customers() -> list[CustomerResponse]:
    customers = current_domain.repository_for(Customer)._dao.query.all().items
    return [_customer_response(c) for c in customers]


@customer_router.get("/{email}", response_model=CustomerResponse)
async def get_customer(email: str) -> CustomerResponse:
    return _customer_response(current_domain.repository_for(Customer).get_by_email(email))


@customer_router.put("/{customer_id}", response_model=StatusResponse)
async def update_customer(customer_id: str, body: UpdateCustomerRequest) -> StatusResponse:
    ensure_object_id(customer_id, "customer_id")
    command = UpdateCustomer(
        customer_id=customer_id,
        full_name=body.full_name,
        mobile_number=body.mobile_number,
        address=body.address,
    )
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@customer_router.patch("/{email}/activate", response_model=StatusResponse, dependencies=[_staff_only])
async def activate_customer(email: str) -> StatusResponse:
    current_domain.process(ActivateCustomer(email=email), asynchronous=False)
    return StatusResponse()


@customer_router.patch("/{email}/deactivate", response_model=StatusResponse, dependencies=[_staff_only])
async def deactivate_customer(email: str) -> StatusResponse:
    current_domain.process(DeactivateCustomer(email=email), asynchronous=False)
    return StatusResponse()


@customer_router.delete("/{email}", response_model=StatusResponse)
async def delete_customer(email: str) -> StatusResponse:
    current_domain.process(DeleteCustomer(email=email), asynchronous=False)
    return StatusResponse()
