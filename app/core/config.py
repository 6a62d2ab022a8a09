from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Server
    app_name: str = "Wedding Gallery API"
    environment: str = "development"
    log_level: str = "INFO"
    cors_origins: list[str] = ["*"]

    # Seeded administrator (no self-registration)
    admin_username: str = "admin"
    admin_password: str = "admin123"

    # Demo tenants created at startup
    seed_demo_customers: bool = True
    demo_customer_password: str = "demo123"

    # bcrypt cost factor for stored passwords
    bcrypt_rounds: int = 12

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
