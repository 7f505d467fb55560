"""
Shared test fixtures for the smart energy test suite.

Provides:
- In-memory SQLite session with all tables created
- SQLAlchemy repositories wired to that session
- MagicMock collaborators for the service unit tests
- A FastAPI TestClient with the database and notifier overridden
"""

import logging
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from smart_energy.core.database import Base, get_db
from smart_energy.core.deps import get_notifier
from smart_energy.models import Device
from smart_energy.repositories import SqlAlchemyDeviceRepository, SqlAlchemyEnergyPlanRepository
from smart_energy.services.interfaces import (
    DeviceRepository, EnergyPlanRepository, NotificationService
)

# Keep test output clean
logging.getLogger("smart_energy").setLevel(logging.WARNING)


# ========================== Database Fixtures ==============================


@pytest.fixture()
def db_session():
    """Fresh in-memory SQLite database per test"""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    TestingSession = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)
    session = TestingSession()
    yield session
    session.close()
    engine.dispose()


@pytest.fixture()
def seeded_devices(db_session):
    """Three devices: 1 on (500 W), 2 off (1000 W), 3 on (250 W)"""
    devices = [
        Device(id=1, name="Lamp", is_on=True, power_usage_watts=500),
        Device(id=2, name="TV", is_on=False, power_usage_watts=1000),
        Device(id=3, name="PC", is_on=True, power_usage_watts=250),
    ]
    db_session.add_all(devices)
    db_session.commit()
    return devices


@pytest.fixture()
def sql_device_repo(db_session):
    return SqlAlchemyDeviceRepository(db_session)


@pytest.fixture()
def sql_plan_repo(db_session):
    return SqlAlchemyEnergyPlanRepository(db_session, default_limit_kwh=1.5)


# ========================== Mock Collaborators =============================


@pytest.fixture()
def device_repo():
    return MagicMock(spec=DeviceRepository)


@pytest.fixture()
def plan_repo():
    return MagicMock(spec=EnergyPlanRepository)


@pytest.fixture()
def notifier():
    return MagicMock(spec=NotificationService)


# ========================== API Client ====================================


@pytest.fixture()
def client(db_session, notifier):
    """TestClient running against the in-memory database"""
    from smart_energy.main import app

    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_notifier] = lambda: notifier
    yield TestClient(app)
    app.dependency_overrides.clear()
