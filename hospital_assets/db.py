import logging

from fastapi import HTTPException
from sqlmodel import SQLModel, Session, create_engine

from hospital_assets.config import settings
from hospital_assets.errors import DomainError

logger = logging.getLogger(__name__)


def _connect_args(url: str) -> dict:
    # sqlite connections are handed across FastAPI's threadpool
    if url.startswith("sqlite"):
        return {"check_same_thread": False}
    return {}


engine = create_engine(
    settings.database_url,
    echo=settings.sql_echo,
    connect_args=_connect_args(settings.database_url),
)


def create_db_and_tables() -> None:
    SQLModel.metadata.create_all(engine)


def get_session():
    session = Session(engine)
    try:
        yield session
    except (DomainError, HTTPException):
        # services roll back their own failed writes
        raise
    except Exception:
        session.rollback()
        logger.exception("rolled back session after unexpected error")
        raise
    finally:
        session.close()
