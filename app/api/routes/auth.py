"""Login endpoints. Credentials are checked per request; no session or token is issued."""

import logging

from fastapi import APIRouter, Depends

from app.api.deps import get_admin_repository, get_customer_repository
from app.core.errors import AuthError, ValidationError
from app.core.security import verify_password
from app.domain.schemas import (
    AdminLoginResponse,
    AdminSummary,
    CustomerLoginResponse,
    CustomerSettingsResponse,
    CustomerSummary,
    LoginRequest,
)
from app.repositories.admin import AdminRepository
from app.repositories.customer import CustomerRepository

logger = logging.getLogger(__name__)

router = APIRouter()


def _require_credentials(data: LoginRequest) -> None:
    if not data.username or not data.password:
        raise ValidationError("Username and password required")


@router.post("/admin/login", response_model=AdminLoginResponse)
def admin_login(
    data: LoginRequest,
    admins: AdminRepository = Depends(get_admin_repository),
):
    """Authenticate an administrator."""
    _require_credentials(data)

    admin = admins.get_by_username(data.username)
    if not admin or not verify_password(data.password, admin.get("password_hash")):
        logger.warning(f"Failed admin login for '{data.username}'")
        raise AuthError("Invalid credentials")

    return AdminLoginResponse(
        admin=AdminSummary(id=admin["id"], username=admin["username"]),
        message="Admin login successful",
    )


@router.post("/customer/login", response_model=CustomerLoginResponse)
def customer_login(
    data: LoginRequest,
    customers: CustomerRepository = Depends(get_customer_repository),
):
    """Authenticate a customer and return their branding settings.

    Unknown username, wrong password and deactivated account all produce
    the same 401 response.
    """
    _require_credentials(data)

    customer = customers.get_by_username(data.username)
    if (
        not customer
        or not verify_password(data.password, customer.get("password_hash"))
        or not customer.get("is_active")
    ):
        logger.warning(f"Failed customer login for '{data.username}'")
        raise AuthError("Invalid credentials or account deactivated")

    settings = customers.settings.get_by_customer_id(customer["id"])

    return CustomerLoginResponse(
        customer=CustomerSummary(
            id=customer["id"],
            username=customer["username"],
            email=customer["email"],
        ),
        settings=CustomerSettingsResponse(**settings) if settings else None,
        message="Customer login successful",
    )
