from fastapi import Depends, Request

from app.core.config import Settings
from app.repositories.admin import AdminRepository
from app.repositories.customer import CustomerRepository
from app.repositories.customer_settings import CustomerSettingsRepository
from app.repositories.gallery import GalleryRepository
from app.repositories.usage_stats import UsageStatsRepository
from app.repositories.user import UserRepository
from database.memory import MemoryDatabase


def get_db(request: Request) -> MemoryDatabase:
    """The store created for this application instance."""
    return request.app.state.db


def get_app_settings(request: Request) -> Settings:
    """Settings the application instance was created with."""
    return request.app.state.settings


def get_admin_repository(
    db: MemoryDatabase = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
) -> AdminRepository:
    return AdminRepository(db, bcrypt_rounds=settings.bcrypt_rounds)


def get_customer_repository(
    db: MemoryDatabase = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
) -> CustomerRepository:
    return CustomerRepository(db, bcrypt_rounds=settings.bcrypt_rounds)


def get_settings_repository(db: MemoryDatabase = Depends(get_db)) -> CustomerSettingsRepository:
    return CustomerSettingsRepository(db)


def get_stats_repository(db: MemoryDatabase = Depends(get_db)) -> UsageStatsRepository:
    return UsageStatsRepository(db)


def get_gallery_repository(db: MemoryDatabase = Depends(get_db)) -> GalleryRepository:
    return GalleryRepository(db)


def get_user_repository(
    db: MemoryDatabase = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
) -> UserRepository:
    return UserRepository(db, bcrypt_rounds=settings.bcrypt_rounds)
