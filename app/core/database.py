# app/core/database.py
import logging

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import declarative_base, sessionmaker

from app.core.config import Settings

logger = logging.getLogger("inspection.db")
logger.setLevel(logging.INFO)

Base = declarative_base()


def build_engine(settings: Settings) -> Engine:
    connect_args = {}
    if settings.is_sqlite:
        # Sync endpoints run in FastAPI's threadpool
        connect_args["check_same_thread"] = False
    elif settings.require_encrypted_transport:
        # Encrypted, certificate not verified
        connect_args["sslmode"] = "require"

    return create_engine(
        settings.database_url,
        connect_args=connect_args,
        pool_pre_ping=not settings.is_sqlite,
    )


def build_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


def init_schema(engine: Engine) -> bool:
    """
    Create tecidos/anomalias if they don't exist.
    Failures are logged, not raised: the server still starts.
    """
    # Register model tables on Base.metadata
    import app.models  # noqa: F401

    try:
        Base.metadata.create_all(bind=engine, checkfirst=True)
    except SQLAlchemyError as e:
        logger.error(f"Failed to create tables: {e}", exc_info=True)
        return False

    logger.info("Database schema ready")
    return True
