import os

# Settings are read at import time
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("SECRET_KEY", "test-secret-key-for-backoffice-tests")
os.environ.setdefault("STORAGE_BACKEND", "s3")

import pytest
from datetime import datetime, timedelta, UTC
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from jose import jwt

from backoffice.database import get_db
from backoffice.models import Base, Tenant, Agency, Trip, TripImage
from backoffice.config import settings
from backoffice.core.exceptions import StorageException
from backoffice.storage import StoredImage, get_storage
# Import FastAPI app AFTER model imports
from backoffice.main import app

# Test database (SQLite in-memory for speed)
# Use StaticPool to ensure all connections share the same in-memory database
SQLALCHEMY_TEST_DATABASE_URL = "sqlite:///:memory:"
engine = create_engine(
    SQLALCHEMY_TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


class FakeImageStorage:
    """In-memory image store recording every store/delete call"""

    def __init__(self):
        self.stored: list[StoredImage] = []
        self.deleted: list[str] = []
        self.fail_delete = False
        self._counter = 0

    def store(self, data: bytes, folder: str) -> StoredImage:
        self._counter += 1
        base = f"https://files.test/{folder}/{self._counter}"
        image = StoredImage(full_url=f"{base}-original.jpg", thumbnail_url=f"{base}-thumbnail.jpg")
        self.stored.append(image)
        return image

    def delete(self, url: str) -> None:
        if self.fail_delete:
            raise StorageException(f"Failed to delete image: {url}")
        self.deleted.append(url)


@pytest.fixture(scope="function")
def db_session():
    """Create fresh database for each test"""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def fake_storage():
    return FakeImageStorage()


@pytest.fixture(scope="function")
def client(db_session, fake_storage):
    """FastAPI test client with test database and in-memory image store"""

    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_storage] = lambda: fake_storage
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def create_test_token(
    user_id: str = "test-user-123",
    role: str = "agency_admin",
    agency_id: int | None = None,
    tenant_id: int | None = None,
    expired: bool = False,
    **claims,
) -> str:
    """
    Generate valid JWT token for testing.

    Args:
        user_id: User ID to embed in 'sub' claim
        role: Role claim
        agency_id: Agency the principal is bound to
        tenant_id: Tenant the principal belongs to
        expired: If True, create expired token
        claims: Extra claims (or overrides, e.g. role=None to drop it)

    Returns:
        Encoded JWT token
    """
    if expired:
        exp = datetime.now(UTC) - timedelta(minutes=5)
    else:
        exp = datetime.now(UTC) + timedelta(minutes=15)

    payload = {"sub": user_id, "role": role, "exp": exp, "iat": datetime.now(UTC)}
    if agency_id is not None:
        payload["agency_id"] = agency_id
    if tenant_id is not None:
        payload["tenant_id"] = tenant_id
    payload.update(claims)
    payload = {k: v for k, v in payload.items() if v is not None}

    return jwt.encode(payload, settings.SECRET_KEY, algorithm="HS256")


def make_headers(token: str, tenant_slug: str | None = None) -> dict:
    headers = {"Authorization": f"Bearer {token}"}
    if tenant_slug:
        headers["X-Tenant-ID"] = tenant_slug
    return headers


def create_agency(db, tenant: Tenant, suffix: int, name: str = "Agency") -> Agency:
    agency = Agency(
        tenant_id=tenant.id,
        name=f"{name} {suffix}",
        cadastur=f"12.3456{suffix}.89/0001-1{suffix}",
        cnpj=f"12.345.67{suffix}/0001-9{suffix}",
    )
    db.add(agency)
    db.commit()
    db.refresh(agency)
    return agency


def create_trip(db, agency: Agency, slug: str = "ilha-grande") -> Trip:
    trip = Trip(
        agency_id=agency.id,
        slug=slug,
        destination="Ilha Grande - RJ",
        departure_date=datetime(2026, 9, 20, 8, 0, tzinfo=UTC),
        return_date=datetime(2026, 9, 22, 20, 0, tzinfo=UTC),
        total_seats=40,
    )
    db.add(trip)
    db.commit()
    db.refresh(trip)
    return trip


def add_image(db, trip: Trip, name: str, is_main: bool = False) -> TripImage:
    base = f"https://files.test/trips/{trip.id}/{name}"
    image = TripImage(
        trip_id=trip.id,
        image_url=f"{base}-original.jpg",
        thumbnail_url=f"{base}-thumbnail.jpg",
        is_main=is_main,
    )
    db.add(image)
    db.commit()
    db.refresh(image)
    return image


@pytest.fixture
def tenant(db_session):
    tenant = Tenant(slug="bora", name="Bora Turismo", plan="pro")
    db_session.add(tenant)
    db_session.commit()
    db_session.refresh(tenant)
    return tenant


@pytest.fixture
def other_tenant(db_session):
    tenant = Tenant(slug="outra", name="Outra Viagens")
    db_session.add(tenant)
    db_session.commit()
    db_session.refresh(tenant)
    return tenant


@pytest.fixture
def agency(db_session, tenant):
    return create_agency(db_session, tenant, 1)


@pytest.fixture
def sibling_agency(db_session, tenant):
    """Second agency in the same tenant"""
    return create_agency(db_session, tenant, 2)


@pytest.fixture
def foreign_agency(db_session, other_tenant):
    """Agency belonging to another tenant"""
    return create_agency(db_session, other_tenant, 3)


@pytest.fixture
def trip(db_session, agency):
    return create_trip(db_session, agency)


@pytest.fixture
def superadmin_headers(tenant):
    """Superadmin targeting tenant "bora" """
    return make_headers(create_test_token(user_id="root", role="superadmin"), tenant.slug)


@pytest.fixture
def platform_headers():
    """Superadmin without tenant (admin routes)"""
    return make_headers(create_test_token(user_id="root", role="superadmin"))


@pytest.fixture
def admin_headers(tenant, agency):
    """Agency admin bound to `agency`"""
    token = create_test_token(
        user_id="admin-1", role="agency_admin", agency_id=agency.id, tenant_id=tenant.id
    )
    return make_headers(token, tenant.slug)


@pytest.fixture
def agent_headers(tenant, agency):
    token = create_test_token(user_id="agent-1", role="agent", agency_id=agency.id, tenant_id=tenant.id)
    return make_headers(token, tenant.slug)


@pytest.fixture
def customer_headers(tenant, agency):
    token = create_test_token(
        user_id="customer-1", role="customer", agency_id=agency.id, tenant_id=tenant.id
    )
    return make_headers(token, tenant.slug)
