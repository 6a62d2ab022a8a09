from app.core.security import DEFAULT_BCRYPT_ROUNDS, hash_password
from database.memory import MemoryDatabase

TABLE = "admins"


class AdminRepository:

    def __init__(self, db: MemoryDatabase, bcrypt_rounds: int = DEFAULT_BCRYPT_ROUNDS):
        self.db = db
        self.bcrypt_rounds = bcrypt_rounds

    def create(self, username: str, password: str) -> dict:
        """Create an admin. Only the startup seed calls this."""
        return self.db.insert(TABLE, {
            "username": username,
            "password_hash": hash_password(password, rounds=self.bcrypt_rounds),
        })

    def get_by_id(self, admin_id: int) -> dict | None:
        return self.db.get(TABLE, admin_id)

    def get_by_username(self, username: str) -> dict | None:
        return self.db.find_one(TABLE, username=username)

    def get_all(self) -> list[dict]:
        return self.db.select(TABLE)
