from app.core.security import DEFAULT_BCRYPT_ROUNDS, hash_password
from app.repositories.customer_settings import CustomerSettingsRepository
from app.repositories.usage_stats import UsageStatsRepository
from database.memory import MemoryDatabase

TABLE = "customers"


class CustomerRepository:

    def __init__(self, db: MemoryDatabase, bcrypt_rounds: int = DEFAULT_BCRYPT_ROUNDS):
        self.db = db
        self.bcrypt_rounds = bcrypt_rounds
        self.settings = CustomerSettingsRepository(db)
        self.stats = UsageStatsRepository(db)

    def create(self, username: str, email: str, password: str) -> dict:
        """Create a customer together with its default settings and zeroed stats.

        The three rows are written under one store lock. Raises
        UniqueViolationError (before anything is written) if the username
        or email is taken.
        """
        password_hash = hash_password(password, rounds=self.bcrypt_rounds)
        with self.db.transaction():
            customer = self.db.insert(TABLE, {
                "username": username,
                "email": email,
                "password_hash": password_hash,
                "is_active": True,
            })
            self.settings.create(customer["id"])
            self.stats.create(customer["id"])
        return customer

    def get_by_id(self, customer_id: int) -> dict | None:
        """Get a customer by ID."""
        return self.db.get(TABLE, customer_id)

    def get_by_username(self, username: str) -> dict | None:
        """Get a customer by username."""
        return self.db.find_one(TABLE, username=username)

    def get_by_email(self, email: str) -> dict | None:
        """Get a customer by email."""
        return self.db.find_one(TABLE, email=email)

    def get_all(self) -> list[dict]:
        """Get all customers in creation order."""
        return self.db.select(TABLE)

    def update(self, customer_id: int, **kwargs) -> dict | None:
        """Update a customer. A plaintext password is re-hashed."""
        password = kwargs.pop("password", None)
        if password:
            kwargs["password_hash"] = hash_password(password, rounds=self.bcrypt_rounds)
        for column in ("created_at", "updated_at"):
            kwargs.pop(column, None)
        return self.db.update(TABLE, customer_id, kwargs)

    def deactivate(self, customer_id: int) -> bool:
        """Soft-delete a customer. Settings, stats and galleries are kept."""
        return self.db.update(TABLE, customer_id, {"is_active": False}) is not None
