import logging

from app.core.config import Settings, get_settings
from database.memory import MemoryDatabase

logger = logging.getLogger(__name__)


def init_db(settings: Settings | None = None) -> MemoryDatabase:
    """Create a fresh in-memory store and seed it.

    State lives only as long as the returned object; a restart resets
    every table and every id counter.
    """
    from app.services.seed import seed_database

    settings = settings or get_settings()
    db = MemoryDatabase()
    seed_database(db, settings)
    logger.info(
        f"In-memory database ready: {db.count('admins')} admin(s), "
        f"{db.count('customers')} customer(s)"
    )
    return db
