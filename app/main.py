import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api import api_router
from app.core.config import Settings, get_settings
from app.core.errors import register_exception_handlers
from database.connection import init_db
from database.memory import MemoryDatabase

# Configure logging
logging.basicConfig(
    level=get_settings().log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    logger.info(f"{app.title} starting ({app.state.settings.environment})")
    yield
    # Shutdown
    logger.info(f"{app.title} shutting down; in-memory data discarded")


def create_app(settings: Settings | None = None, database: MemoryDatabase | None = None) -> FastAPI:
    """Build the application around its own store.

    Each call gets an independent, freshly seeded store unless one is passed in.
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Multi-tenant wedding gallery API",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.db = database if database is not None else init_db(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Include all routes
    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
