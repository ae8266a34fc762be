import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from realestate.db.database import SessionLocal, engine
from realestate.db import models


@pytest.fixture(scope="session", autouse=True)
def create_schema_once():
    """Create all tables once per test session (SQLite in-memory lives as long as the process)."""
    models.Base.metadata.create_all(bind=engine)
    yield
    models.Base.metadata.drop_all(bind=engine)


@pytest.fixture(autouse=True)
def clean_data():
    """Empty every table between tests without dropping metadata (faster)."""
    with engine.begin() as connection:
        for table in reversed(models.Base.metadata.sorted_tables):
            connection.execute(table.delete())
    yield


@pytest.fixture
def db_session():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def client():
    from realestate.api.main import app
    return TestClient(app)


@pytest.fixture
def customer_factory(db_session: Session):
    def _create(email: str, first_name: str = "Ada", last_name: str = "Lovelace", **extra):
        customer = models.Customer(
            first_name=first_name,
            last_name=last_name,
            email=email,
            identity_number=extra.pop("identity_number", "12345678901"),
            balance=extra.pop("balance", 0),
            phone_number=extra.pop("phone_number", "05551234567"),
            created_date=models.now_utc(),
            **extra,
        )
        db_session.add(customer)
        db_session.commit()
        db_session.refresh(customer)
        return customer
    return _create


@pytest.fixture
def category_factory(db_session: Session):
    def _create(name: str = "Residential", description: str = ""):
        category = models.Category(name=name, description=description, created_date=models.now_utc())
        db_session.add(category)
        db_session.commit()
        db_session.refresh(category)
        return category
    return _create


@pytest.fixture
def location_factory(db_session: Session):
    def _create(city_name: str = "Istanbul", plate_code: str = "34"):
        location = models.Location(city_name=city_name, plate_code=plate_code, created_date=models.now_utc())
        db_session.add(location)
        db_session.commit()
        db_session.refresh(location)
        return location
    return _create
