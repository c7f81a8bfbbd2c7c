import logging

from sqlalchemy import create_engine, event
from sqlalchemy.ext.declarative import declarative_base
from sqlalchemy.orm import sessionmaker

from config import settings

logger = logging.getLogger(__name__)


def create_db_engine(url: str, **kwargs):
    """Create the engine; SQLite gets FK enforcement and cross-thread access."""
    if url.startswith("sqlite"):
        kwargs.setdefault("connect_args", {"check_same_thread": False})

    db_engine = create_engine(url, **kwargs)

    if db_engine.dialect.name == "sqlite":
        @event.listens_for(db_engine, "connect")
        def _enable_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return db_engine


# 1. Engine (the one store handle for the process)
engine = create_db_engine(settings.database_url)

# 2. Session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# 3. Base class for the models
Base = declarative_base()


# 4. Per-request session (used by the routers)
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(db_engine=None, session_factory=None) -> None:
    """Create tables and seed the catalog once at startup."""
    # models must be imported so their tables are registered on Base
    import models  # noqa: F401
    from core.seed import seed_if_empty

    db_engine = db_engine or engine
    session_factory = session_factory or SessionLocal

    Base.metadata.create_all(bind=db_engine)
    logger.info("✅ DB tables ready")

    db = session_factory()
    try:
        seed_if_empty(db)
    finally:
        db.close()
