# tests/conftest.py
from datetime import datetime, timedelta

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from infra.db.base import Base
import infra.db.models  # noqa
from infra.services import build_service_graph


NOW = datetime(2025, 3, 10, 9, 0, 0)


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def days():
    def _days(n: float) -> datetime:
        return NOW + timedelta(days=n)

    return _days


@pytest.fixture
def session():
    # separate in-memory DB for tests
    engine = create_engine("sqlite:///:memory:", future=True)
    TestingSessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def services(session):
    return build_service_graph(session).as_dict()
