from __future__ import annotations

from pathlib import Path

import pytest
from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, inspect, text
from sqlalchemy.exc import IntegrityError

SERVICE_ROOT = Path(__file__).resolve().parents[3]
ENTITY_TABLES = {"customers", "categories", "locations", "properties", "invoices"}


def _make_alembic_config(database_url: str) -> Config:
    cfg = Config(str(SERVICE_ROOT / "alembic.ini"))
    cfg.set_main_option("sqlalchemy.url", database_url)
    cfg.set_main_option("script_location", str(SERVICE_ROOT / "migrations"))
    return cfg


@pytest.fixture
def sqlite_url(tmp_path):
    return f"sqlite:///{tmp_path / 'migrations.db'}"


@pytest.mark.integration
@pytest.mark.slow
def test_upgrade_creates_schema_and_downgrade_removes_it(sqlite_url):
    cfg = _make_alembic_config(sqlite_url)
    engine = create_engine(sqlite_url)

    command.upgrade(cfg, "head")
    inspector = inspect(engine)
    assert ENTITY_TABLES <= set(inspector.get_table_names())
    customer_indexes = {ix["name"] for ix in inspector.get_indexes("customers")}
    assert "uq_customers_email_active" in customer_indexes
    property_fks = {fk["referred_table"] for fk in inspector.get_foreign_keys("properties")}
    assert property_fks == {"categories", "locations"}

    command.downgrade(cfg, "base")
    assert not ENTITY_TABLES & set(inspect(engine).get_table_names())

    command.upgrade(cfg, "head")
    assert ENTITY_TABLES <= set(inspect(engine).get_table_names())
    engine.dispose()


@pytest.mark.integration
@pytest.mark.slow
def test_migrated_email_index_only_covers_active_customers(sqlite_url):
    command.upgrade(_make_alembic_config(sqlite_url), "head")
    engine = create_engine(sqlite_url)
    insert = text(
        "INSERT INTO customers (first_name, last_name, email, identity_number, balance, phone_number, "
        "created_date, is_deleted) VALUES ('A', 'B', :email, '1', 0, '1', '2024-01-01 00:00:00', :deleted)"
    )

    with engine.begin() as conn:
        conn.execute(insert, {"email": "dup@test.com", "deleted": True})
        conn.execute(insert, {"email": "dup@test.com", "deleted": False})

    with pytest.raises(IntegrityError):
        with engine.begin() as conn:
            conn.execute(insert, {"email": "dup@test.com", "deleted": False})
    engine.dispose()
