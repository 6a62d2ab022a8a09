from database.memory import MemoryDatabase

TABLE = "customer_settings"


class CustomerSettingsRepository:

    def __init__(self, db: MemoryDatabase):
        self.db = db

    def create(self, customer_id: int, **kwargs) -> dict:
        """Create the branding settings row for a customer; unset fields take table defaults."""
        return self.db.insert(TABLE, {"customer_id": customer_id, **kwargs})

    def get_by_customer_id(self, customer_id: int) -> dict | None:
        """Get a customer's settings (linear scan over all settings rows)."""
        return self.db.find_one(TABLE, customer_id=customer_id)

    def update(self, customer_id: int, **kwargs) -> dict | None:
        """Merge partial settings for a customer. Returns None if the customer has none."""
        settings = self.get_by_customer_id(customer_id)
        if not settings:
            return None
        kwargs.pop("customer_id", None)
        return self.db.update(TABLE, settings["id"], kwargs)
