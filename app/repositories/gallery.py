from database.memory import MemoryDatabase

TABLE = "wedding_galleries"

_READ_ONLY = ("id", "customer_id", "created_at", "updated_at")


class GalleryRepository:

    def __init__(self, db: MemoryDatabase):
        self.db = db

    def create(self, customer_id: int, slug: str, title: str, couple_names: str, **kwargs) -> dict:
        """Create a wedding gallery. Raises UniqueViolationError if the slug is taken."""
        return self.db.insert(TABLE, {
            **kwargs,
            "customer_id": customer_id,
            "slug": slug,
            "title": title,
            "couple_names": couple_names,
        })

    def get_by_id(self, gallery_id: int) -> dict | None:
        """Get a gallery by ID, published or not."""
        return self.db.get(TABLE, gallery_id)

    def get_by_slug(self, slug: str) -> dict | None:
        """Get a gallery by slug, published or not."""
        return self.db.find_one(TABLE, slug=slug)

    def get_by_customer(self, customer_id: int) -> list[dict]:
        """Get all galleries owned by a customer in creation order."""
        return self.db.select(TABLE, customer_id=customer_id)

    def update(self, gallery_id: int, **kwargs) -> dict | None:
        """Partially update a gallery."""
        for column in _READ_ONLY:
            kwargs.pop(column, None)
        return self.db.update(TABLE, gallery_id, kwargs)

    def delete(self, gallery_id: int) -> bool:
        """Delete a gallery."""
        return self.db.delete(TABLE, gallery_id)
