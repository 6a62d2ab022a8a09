"""Admin API routes for managing customer accounts."""

import logging

from fastapi import APIRouter, Depends, status

from app.api.deps import get_customer_repository
from app.core.errors import ConflictError, NotFoundError, conflict_from_violation
from app.domain.schemas import (
    CustomerCreate,
    CustomerMutationResponse,
    CustomerResponse,
    CustomerUpdate,
    CustomerWithStats,
    MessageResponse,
    PlatformStatsResponse,
    UsageStatsResponse,
)
from app.repositories.customer import CustomerRepository
from database.memory import UniqueViolationError

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/customers", response_model=list[CustomerWithStats])
def list_customers(customers: CustomerRepository = Depends(get_customer_repository)):
    """List every customer with its usage stats.

    A customer without a stats row gets zeroed counters instead of failing the list.
    """
    results = []
    for customer in customers.get_all():
        stats = customers.stats.get_by_customer_id(customer["id"])
        results.append(CustomerWithStats(
            **customer,
            stats=UsageStatsResponse(**stats) if stats else UsageStatsResponse(),
        ))
    return results


@router.post(
    "/customers",
    response_model=CustomerMutationResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_customer(
    data: CustomerCreate,
    customers: CustomerRepository = Depends(get_customer_repository),
):
    """Create a customer account with default settings and zeroed stats."""
    if customers.get_by_username(data.username):
        raise ConflictError("Username already exists")

    if customers.get_by_email(data.email):
        raise ConflictError("Email already exists")

    try:
        customer = customers.create(
            username=data.username,
            email=data.email,
            password=data.password,
        )
    except UniqueViolationError as e:
        logger.warning(f"Customer creation lost a uniqueness race: {e}")
        raise conflict_from_violation(e) from e

    logger.info(f"Created customer {customer['id']} ({customer['username']})")
    return CustomerMutationResponse(
        customer=CustomerResponse(**customer),
        message="Customer created successfully",
    )


@router.put("/customers/{customer_id}", response_model=CustomerMutationResponse)
def update_customer(
    customer_id: int,
    data: CustomerUpdate,
    customers: CustomerRepository = Depends(get_customer_repository),
):
    """Partially update a customer account."""
    existing = customers.get_by_id(customer_id)
    if not existing:
        raise NotFoundError("Customer not found")

    update_data = data.model_dump(exclude_unset=True)

    lookups = {"username": customers.get_by_username, "email": customers.get_by_email}
    for field, lookup in lookups.items():
        if field in update_data:
            holder = lookup(update_data[field])
            if holder and holder["id"] != customer_id:
                raise ConflictError(f"{field.capitalize()} already exists")

    try:
        customer = customers.update(customer_id, **update_data)
    except UniqueViolationError as e:
        raise conflict_from_violation(e) from e

    if not customer:
        raise NotFoundError("Customer not found")

    logger.info(f"Updated customer {customer_id}: {sorted(k for k in update_data if k != 'password')}")
    return CustomerMutationResponse(
        customer=CustomerResponse(**customer),
        message="Customer updated successfully",
    )


@router.delete("/customers/{customer_id}", response_model=MessageResponse)
def deactivate_customer(
    customer_id: int,
    customers: CustomerRepository = Depends(get_customer_repository),
):
    """Soft-delete a customer. The account and everything it owns is kept."""
    if not customers.deactivate(customer_id):
        raise NotFoundError("Customer not found")

    logger.info(f"Deactivated customer {customer_id}")
    return MessageResponse(message="Customer deactivated successfully")


@router.get("/stats", response_model=PlatformStatsResponse)
def platform_stats(customers: CustomerRepository = Depends(get_customer_repository)):
    """Platform-wide totals.

    Usage counters are summed over every customer, deactivated ones
    included, so the totals match totalCustomers rather than activeCustomers.
    """
    all_customers = customers.get_all()
    totals = PlatformStatsResponse(
        total_customers=len(all_customers),
        active_customers=sum(1 for c in all_customers if c.get("is_active")),
    )
    for stats in customers.stats.get_all():
        totals.total_views += stats.get("total_views", 0)
        totals.unique_visitors += stats.get("unique_visitors", 0)
        totals.media_uploads += stats.get("media_uploads", 0)
    return totals
