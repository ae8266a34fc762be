from __future__ import annotations

import json
import runpy
from pathlib import Path

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from realestate.db import models

MODULE_GLOBALS = runpy.run_path(str(Path(__file__).resolve().parents[2] / "scripts" / "soft_delete_audit.py"))
RUN_AUDIT = MODULE_GLOBALS["run_audit"]
MAIN = MODULE_GLOBALS["main"]
ENV_DB_URL = MODULE_GLOBALS["_env_db_url"]


@pytest.fixture
def audit_db(tmp_path):
    url = f"sqlite:///{tmp_path / 'audit.db'}"
    engine = create_engine(url)
    models.Base.metadata.create_all(bind=engine)
    db = sessionmaker(bind=engine)()
    now = models.now_utc()

    live_cat = models.Category(name="Office", description="", created_date=now)
    dead_cat = models.Category(name="Old", description="", created_date=now, is_deleted=True)
    loc = models.Location(city_name="Ankara", plate_code="06", created_date=now)
    gone = models.Customer(
        first_name="Gone", last_name="Away", email="gone@test.com", identity_number="1",
        balance=0, phone_number="1", created_date=now, is_deleted=True,
    )
    db.add_all([live_cat, dead_cat, loc, gone])
    db.flush()

    def _prop(title, category, is_deleted=False):
        return models.Property(
            title=title, block_number="1", parcel_number="2", square_meters=80, price=1000,
            category_id=category.id, location_id=loc.id, is_available=True,
            created_date=now, is_deleted=is_deleted,
        )

    orphaned = _prop("Orphaned", dead_cat)
    db.add_all([orphaned, _prop("Fine", live_cat), _prop("Deleted too", dead_cat, is_deleted=True)])
    invoice = models.Invoice(
        serial_number="A-1", invoice_date=now, total_amount=10, customer_id=gone.id,
        status="Pending", created_date=now,
    )
    db.add(invoice)
    db.commit()
    ids = {"orphaned_property": orphaned.id, "invoice": invoice.id}
    db.close()
    engine.dispose()
    return url, ids


def test_run_audit_counts_and_deleted_parent_refs(audit_db):
    url, ids = audit_db

    report = RUN_AUDIT(url)

    assert report["tables"]["categories"] == {"active": 1, "deleted": 1}
    assert report["tables"]["properties"] == {"active": 2, "deleted": 1}
    assert report["tables"]["customers"] == {"active": 0, "deleted": 1}
    refs = report["deleted_parent_refs"]
    assert refs["properties.category_id"] == [ids["orphaned_property"]]
    assert refs["properties.location_id"] == []
    assert refs["invoices.customer_id"] == [ids["invoice"]]


def test_main_json_output(audit_db, monkeypatch, capsys):
    url, _ids = audit_db
    monkeypatch.setenv("DATABASE_URL", url)

    assert MAIN(["--json"]) == 0

    report = json.loads(capsys.readouterr().out)
    assert report["tables"]["locations"] == {"active": 1, "deleted": 0}


def test_main_text_output(audit_db, monkeypatch, capsys):
    url, _ids = audit_db
    monkeypatch.setenv("DATABASE_URL", url)

    assert MAIN([]) == 0

    out = capsys.readouterr().out
    assert "Soft-delete audit" in out
    assert "- invoices.customer_id: 1" in out


def test_env_url_built_from_postgres_parts(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.setenv("POSTGRES_USER", "svc")
    monkeypatch.setenv("POSTGRES_PASSWORD", "pw")
    monkeypatch.setenv("POSTGRES_HOST", "db")
    monkeypatch.setenv("POSTGRES_PORT", "5433")
    monkeypatch.setenv("POSTGRES_DB", "realestate")

    assert ENV_DB_URL() == "postgresql://svc:pw@db:5433/realestate"
