from app.core.security import DEFAULT_BCRYPT_ROUNDS, hash_password
from database.memory import MemoryDatabase

TABLE = "users"


class UserRepository:
    """Standalone username/password accounts kept for older clients."""

    def __init__(self, db: MemoryDatabase, bcrypt_rounds: int = DEFAULT_BCRYPT_ROUNDS):
        self.db = db
        self.bcrypt_rounds = bcrypt_rounds

    def create(self, username: str, password: str) -> dict:
        """Create a new user."""
        return self.db.insert(TABLE, {
            "username": username,
            "password_hash": hash_password(password, rounds=self.bcrypt_rounds),
        })

    def get_by_id(self, user_id: int) -> dict | None:
        """Get a user by ID."""
        return self.db.get(TABLE, user_id)

    def get_by_username(self, username: str) -> dict | None:
        """Get a user by username."""
        return self.db.find_one(TABLE, username=username)
