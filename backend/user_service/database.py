import logging

from fastapi import Request
from sqlalchemy.engine import Engine
from sqlmodel import SQLModel, Session, create_engine

from user_service.config import Settings

logger = logging.getLogger(__name__)


def build_engine(settings: Settings) -> Engine:
    url = settings.sqlalchemy_url()
    # statements reach the root handler once; echo=True would add a second stdout handler
    engine = create_engine(url)  # lazy; nothing connects until first use
    if settings.db_echo:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO)
    logger.info("Database engine configured for %s", engine.url.render_as_string(hide_password=True))
    return engine


def create_db_and_tables(engine: Engine):
    # registers the users table on SQLModel.metadata
    from user_service.models import user_model  # noqa: F401

    SQLModel.metadata.create_all(engine)


def get_session(request: Request):
    with Session(request.app.state.engine) as session:
        yield session
