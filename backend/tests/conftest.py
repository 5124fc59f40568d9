"""
Shared pytest fixtures: in-memory database, API client, users and seed records.
"""
import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from datetime import datetime, timedelta

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.database import Base, get_db
from app.dependencies import get_clock
from app.main import app
from app.models.batch import Batch
from app.models.raw_material import RawMaterial
from app.models.supplier import Supplier
from app.models.user import User
from app.utils.clock import fixed_clock
from app.utils.security import create_access_token, get_password_hash

# Fixed "now" for anything date-window related.
NOW = datetime(2026, 10, 19, 9, 30, 0)
TODAY = datetime(2026, 10, 19)

test_engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


@pytest.fixture()
def db():
    Base.metadata.create_all(bind=test_engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture()
def client(db):
    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_clock] = lambda: fixed_clock(NOW)
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


def _make_user(db, email: str, role: str, name: str = "Test User") -> User:
    user = User(
        name=name,
        email=email,
        password_hash=get_password_hash("Password123!"),
        role=role,
        is_active=True,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def _headers(user: User) -> dict:
    token = create_access_token(subject=user.id, role=user.role)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture()
def admin_user(db) -> User:
    return _make_user(db, "admin@chemledger.test", "admin", name="Admin")


@pytest.fixture()
def regular_user(db) -> User:
    return _make_user(db, "worker@chemledger.test", "user", name="Worker")


@pytest.fixture()
def qa_user(db) -> User:
    return _make_user(db, "qa@chemledger.test", "qa-worker", name="QA")


@pytest.fixture()
def admin_headers(admin_user) -> dict:
    return _headers(admin_user)


@pytest.fixture()
def user_headers(regular_user) -> dict:
    return _headers(regular_user)


@pytest.fixture()
def qa_headers(qa_user) -> dict:
    return _headers(qa_user)


@pytest.fixture()
def supplier(db) -> Supplier:
    row = Supplier(
        name="Acme",
        status="Approved",
        certifications=[{"name": "ISO 9001", "expiryDate": (TODAY + timedelta(days=5)).isoformat()}],
        quality_issues=[{"description": "late shipment", "date": (TODAY - timedelta(days=2)).isoformat()}],
        contact_email="sales@acme.test",
    )
    db.add(row)
    db.commit()
    db.refresh(row)
    return row


@pytest.fixture()
def raw_material(db, supplier) -> RawMaterial:
    row = RawMaterial(
        name="Sodium Hydroxide",
        purity="99%",
        supplier_id=supplier.id,
        hazard_class="8",
        storage_temp="15-25C",
        status="Low Stock",
        quantity_value=12,
        quantity_unit="kg",
    )
    db.add(row)
    db.commit()
    db.refresh(row)
    return row


@pytest.fixture()
def batch(db, raw_material, supplier) -> Batch:
    row = Batch(
        batch_number="B-100",
        raw_material_id=raw_material.id,
        source_id=supplier.id,
        production_date=TODAY - timedelta(days=10),
        acquisition_date=TODAY - timedelta(days=8),
        buyer="Plant 1",
        contents="NaOH pellets",
        status="Active",
        approval_status="Pending",
        quantity_value=50,
        quantity_unit="kg",
    )
    db.add(row)
    db.commit()
    db.refresh(row)
    return row
