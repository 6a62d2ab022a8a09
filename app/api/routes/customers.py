import logging

from fastapi import APIRouter, Depends

from app.api.deps import get_customer_repository, get_settings_repository, get_stats_repository
from app.core.errors import NotFoundError
from app.domain.schemas import (
    CustomerProfileResponse,
    CustomerResponse,
    CustomerSettingsResponse,
    CustomerSettingsUpdate,
    SettingsMutationResponse,
    StatsMutationResponse,
    UsageStatsResponse,
    UsageStatsUpdate,
)
from app.repositories.customer import CustomerRepository
from app.repositories.customer_settings import CustomerSettingsRepository
from app.repositories.usage_stats import UsageStatsRepository

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/{customer_id}/settings", response_model=CustomerSettingsResponse)
def get_customer_settings(
    customer_id: int,
    settings: CustomerSettingsRepository = Depends(get_settings_repository),
):
    """Get a customer's branding settings."""
    result = settings.get_by_customer_id(customer_id)
    if not result:
        raise NotFoundError("Settings not found")
    return CustomerSettingsResponse(**result)


@router.put("/{customer_id}/settings", response_model=SettingsMutationResponse)
def update_customer_settings(
    customer_id: int,
    data: CustomerSettingsUpdate,
    settings: CustomerSettingsRepository = Depends(get_settings_repository),
):
    """Partially update a customer's branding settings."""
    update_data = data.model_dump(exclude_unset=True)
    result = settings.update(customer_id, **update_data)
    if not result:
        raise NotFoundError("Settings not found")

    logger.info(f"Updated settings for customer {customer_id}")
    return SettingsMutationResponse(
        settings=CustomerSettingsResponse(**result),
        message="Settings updated successfully",
    )


@router.post("/{customer_id}/stats", response_model=StatsMutationResponse)
def update_usage_stats(
    customer_id: int,
    data: UsageStatsUpdate,
    stats: UsageStatsRepository = Depends(get_stats_repository),
):
    """Overwrite usage counters for a customer. last_activity is refreshed on every call."""
    result = stats.update(customer_id, **data.model_dump(exclude_unset=True))
    if not result:
        raise NotFoundError("Statistics not found")

    return StatsMutationResponse(
        stats=UsageStatsResponse(**result),
        message="Statistics updated successfully",
    )


@router.get("/{customer_id}/profile", response_model=CustomerProfileResponse)
def get_customer_profile(
    customer_id: int,
    customers: CustomerRepository = Depends(get_customer_repository),
):
    """Get customer, settings and stats in one response.

    Each part is looked up independently and is null when absent; an
    unknown id returns all three as null rather than a 404.
    """
    customer = customers.get_by_id(customer_id)
    settings = customers.settings.get_by_customer_id(customer_id)
    stats = customers.stats.get_by_customer_id(customer_id)

    return CustomerProfileResponse(
        customer=CustomerResponse(**customer) if customer else None,
        settings=CustomerSettingsResponse(**settings) if settings else None,
        stats=UsageStatsResponse(**stats) if stats else None,
    )
