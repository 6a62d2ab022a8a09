"""Startup data: the default administrator and a few demo tenants."""

import logging

from app.core.config import Settings
from app.repositories.admin import AdminRepository
from app.repositories.customer import CustomerRepository
from database.memory import MemoryDatabase

logger = logging.getLogger(__name__)

DEMO_CUSTOMERS = (
    ("john_jane", "john.jane@example.com"),
    ("sarah_mike", "sarah.mike@example.com"),
    ("emma_david", "emma.david@example.com"),
)


def seed_database(db: MemoryDatabase, settings: Settings) -> None:
    admins = AdminRepository(db, bcrypt_rounds=settings.bcrypt_rounds)
    if not admins.get_by_username(settings.admin_username):
        admins.create(settings.admin_username, settings.admin_password)
        logger.info(f"Seeded admin account '{settings.admin_username}'")

    if not settings.seed_demo_customers:
        return

    customers = CustomerRepository(db, bcrypt_rounds=settings.bcrypt_rounds)
    for username, email in DEMO_CUSTOMERS:
        if customers.get_by_username(username) or customers.get_by_email(email):
            continue
        customers.create(username=username, email=email, password=settings.demo_customer_password)
    logger.info(f"Seeded {len(DEMO_CUSTOMERS)} demo customers")
