"""
Configuration partagée pour tous les tests.

- `client` : get_db remplacé par un MagicMock, aucune connexion réelle à PostgreSQL
- `admin_client` / `member_client` : idem, avec une session admin ou membre simulée
- `db` : session SQLite en mémoire pour les tests de services
- `db_client` : client HTTP branché sur cette même base SQLite
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("ENV", "test")
os.environ.setdefault("OTP_DELIVERY", "log")
os.environ.setdefault("OTP_MAX_REQUESTS_PER_HOUR", "5")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402
from unittest.mock import MagicMock  # noqa: E402

from app.database import Base, get_db  # noqa: E402
from app.dependencies import require_admin, require_member  # noqa: E402
from app.main import app  # noqa: E402
from app.services.session_service import AdminPrincipal, MemberPrincipal  # noqa: E402

ADMIN_ID = 1
MEMBER_ID = 42


@pytest.fixture
def mock_db():
    return MagicMock()


@pytest.fixture
def client(mock_db):
    """Client HTTP de test avec la BDD mockée."""
    app.dependency_overrides[get_db] = lambda: mock_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def admin_client(client):
    """Client HTTP avec une session administrateur simulée."""
    app.dependency_overrides[require_admin] = lambda: AdminPrincipal(admin_id=ADMIN_ID, token="admin-token")
    yield client


@pytest.fixture
def member_client(client):
    """Client HTTP avec une session membre simulée."""
    app.dependency_overrides[require_member] = lambda: MemberPrincipal(member_id=MEMBER_ID, token="member-token")
    yield client


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db(engine):
    """Session SQLite en mémoire, clés étrangères actives."""
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def db_client(engine):
    """Client HTTP sans dépendance remplacée, hormis la base SQLite de test."""
    TestSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    def override_get_db():
        session = TestSession()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
