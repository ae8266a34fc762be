"""
Database engine and session management.

Builds the SQLAlchemy engine from environment configuration with an in-memory
SQLite fallback for pytest runs and exposes the per-request session dependency.
"""
import logging
import os
import sys

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)

_IN_MEMORY_SQLITE = "sqlite+pysqlite:///:memory:"


def _get_database_url() -> str:
    # If DATABASE_URL is explicitly set, use it
    if os.getenv("DATABASE_URL"):
        return os.getenv("DATABASE_URL")

    # Otherwise, generate from individual components (all must be set)
    db_user = os.getenv("POSTGRES_USER")
    db_password = os.getenv("POSTGRES_PASSWORD")
    db_host = os.getenv("POSTGRES_HOST")
    db_port = os.getenv("POSTGRES_PORT")
    db_name = os.getenv("POSTGRES_DB")

    missing = [
        name
        for name, value in (
            ("POSTGRES_USER", db_user),
            ("POSTGRES_PASSWORD", db_password),
            ("POSTGRES_HOST", db_host),
            ("POSTGRES_PORT", db_port),
            ("POSTGRES_DB", db_name),
        )
        if not value
    ]
    if missing:
        raise ValueError(f"Missing required database environment variables: {', '.join(missing)}")

    return f"postgresql://{db_user}:{db_password}@{db_host}:{db_port}/{db_name}"


def _is_pytest_runtime() -> bool:
    """Best-effort detection that we're executing under pytest.

    ``PYTEST_CURRENT_TEST`` is only set while a test runs, so module import
    during collection is detected through ``sys.modules`` instead.
    """
    if os.getenv("PYTEST_RUNNING") == "1":
        return True
    if "PYTEST_CURRENT_TEST" in os.environ:
        return True
    return "pytest" in sys.modules


def _resolve_engine_settings():
    """Return ``(url, engine_kwargs)`` honouring the test override order.

    1. ``REALESTATE_TEST_DB`` wins when set.
    2. Under pytest without an override, an in-memory SQLite database shared
       through ``StaticPool`` so every session sees the same schema.
    3. Otherwise the configured production database.
    """
    explicit_test_db = os.getenv("REALESTATE_TEST_DB")
    if explicit_test_db:
        kwargs = {"connect_args": {"check_same_thread": False}} if explicit_test_db.startswith("sqlite") else {}
        return explicit_test_db, kwargs
    if _is_pytest_runtime():
        return _IN_MEMORY_SQLITE, {
            "connect_args": {"check_same_thread": False},
            "poolclass": StaticPool,
        }
    return _get_database_url(), {}


DATABASE_URL, _engine_kwargs = _resolve_engine_settings()

engine = create_engine(DATABASE_URL, **_engine_kwargs)


@event.listens_for(Engine, "connect")
def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    """SQLite ignores foreign keys unless asked; restrict-on-delete depends on them."""
    module = type(dbapi_connection).__module__
    if not module.startswith("sqlite3"):
        return
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# In-memory SQLite has no migrations applied; create the schema up front so the
# first request in a test run does not hit "no such table".
if DATABASE_URL == _IN_MEMORY_SQLITE:
    from realestate.db import models  # local import avoids a circular import at module load

    models.Base.metadata.create_all(bind=engine)
    logger.debug("in-memory sqlite schema created")


def get_db():
    """Dependency to get a database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
