from database.memory import MemoryDatabase

TABLE = "usage_stats"


class UsageStatsRepository:

    def __init__(self, db: MemoryDatabase):
        self.db = db

    def create(self, customer_id: int) -> dict:
        """Create zeroed counters for a customer."""
        return self.db.insert(TABLE, {"customer_id": customer_id})

    def get_by_customer_id(self, customer_id: int) -> dict | None:
        return self.db.find_one(TABLE, customer_id=customer_id)

    def get_all(self) -> list[dict]:
        return self.db.select(TABLE)

    def update(self, customer_id: int, **kwargs) -> dict | None:
        """Overwrite counters and refresh last_activity. Returns None if the customer has no stats."""
        stats = self.get_by_customer_id(customer_id)
        if not stats:
            return None
        kwargs.pop("customer_id", None)
        kwargs.pop("last_activity", None)
        return self.db.update(TABLE, stats["id"], kwargs)
