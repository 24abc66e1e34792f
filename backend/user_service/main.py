import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from sqlalchemy.engine import Engine

from user_service.config import Settings
from user_service.database import build_engine, create_db_and_tables
from user_service.errors import setup_error_handling
from user_service.routes import user_routes

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    create_db_and_tables(app.state.engine)
    logger.info("Database & tables created!")
    yield


def create_app(engine: Optional[Engine] = None, settings: Optional[Settings] = None) -> FastAPI:
    """Build the application around an explicitly supplied (or configured) engine."""
    settings = settings or Settings.from_env()
    if engine is None:
        engine = build_engine(settings)

    app = FastAPI(title="User Service", lifespan=lifespan)
    app.state.engine = engine

    setup_error_handling(app)

    app.include_router(user_routes.router, prefix="/api/users", tags=["Users"])

    return app


def run():
    import uvicorn

    settings = Settings.from_env()
    logging.basicConfig(level=settings.log_level)
    logger.info("Server is running on port %s", settings.port)
    uvicorn.run(create_app(settings=settings), host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    run()
