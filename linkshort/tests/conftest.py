import os

# Point the application engine at SQLite before linkshort.db.database is imported
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from datetime import timedelta
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from linkshort.main import app
from linkshort.db.models import Base, Link, Visit, utcnow
from linkshort.db import database


# Create in-memory SQLite database for testing
SQLALCHEMY_TEST_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session():
    """Creates a fresh database for each test."""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db_session):
    """Creates a test client with overridden database dependency."""
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[database.get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def sample_urls():
    """Provides sample URLs for testing."""
    return [
        "https://example.com/test1",
        "https://google.com/search?q=test",
        "https://github.com/user/repo",
    ]


@pytest.fixture
def make_link(db_session):
    """Inserts a Link directly, bypassing the shorten endpoint."""
    def _make_link(short_url="abc123", url="https://example.com/target"):
        link = Link(url=url, short_url=short_url)
        db_session.add(link)
        db_session.commit()
        db_session.refresh(link)
        return link
    return _make_link


@pytest.fixture
def add_visit(db_session):
    """Inserts a Visit with an explicit age relative to now."""
    def _add_visit(link, ip_address="10.0.0.1", user_agent="Mozilla/5.0", age=timedelta(0), created_at=None):
        visit = Visit(
            link_id=link.id,
            ip_address=ip_address,
            user_agent=user_agent,
            created_at=created_at or utcnow() - age,
        )
        db_session.add(visit)
        db_session.commit()
        db_session.refresh(visit)
        return visit
    return _add_visit
