"""
Shared fixtures: an in-memory SQLite database behind the real app, plus
clients for anonymous, logged-in and admin callers.
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("DB_LOG_SLOW_QUERIES", "false")

from datetime import datetime  # noqa: E402
from decimal import Decimal  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from petphoto.auth import ROLE_ADMIN, ROLE_USER, AuthContext, create_session_token  # noqa: E402
from petphoto.database import Base, get_db  # noqa: E402
from petphoto.main import app  # noqa: E402
from petphoto.models import (  # noqa: E402
    BOOKING_STATUS_PENDING,
    Booking,
    BookingService,
    Notification,
    Owner,
    Pet,
    Photographer,
    Service,
)

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db():
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


def _client(headers=None) -> TestClient:
    client = TestClient(app)
    if headers:
        client.headers.update(headers)
    return client


@pytest.fixture
def override_db(db: Session):
    def override_get_db():
        session = TestingSessionLocal()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield
    app.dependency_overrides.clear()


def bearer(role: str, email: str) -> dict:
    token = create_session_token(AuthContext(email=email, role=role))
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def anon_client(override_db) -> TestClient:
    return _client()


@pytest.fixture
def user_client(override_db) -> TestClient:
    return _client(bearer(ROLE_USER, "user@example.com"))


@pytest.fixture
def admin_client(override_db) -> TestClient:
    return _client(bearer(ROLE_ADMIN, "admin@example.com"))


# Entity helpers

def make_owner(db: Session, name="Sarah Johnson", email="sarah.johnson@email.com", **kwargs) -> Owner:
    owner = Owner(name=name, email=email, **kwargs)
    db.add(owner)
    db.commit()
    db.refresh(owner)
    return owner


def make_pet(db: Session, owner: Owner, name="Max", species="Dog", **kwargs) -> Pet:
    pet = Pet(owner_id=owner.id, name=name, species=species, age=kwargs.pop("age", 3), **kwargs)
    db.add(pet)
    db.commit()
    db.refresh(pet)
    return pet


def make_photographer(db: Session, name="Alex Morgan", is_available=True, **kwargs) -> Photographer:
    photographer = Photographer(name=name, is_available=is_available, **kwargs)
    db.add(photographer)
    db.commit()
    db.refresh(photographer)
    return photographer


def make_service(db: Session, name="Pet Portrait", price="50.00", **kwargs) -> Service:
    service = Service(name=name, price=Decimal(price), is_active=kwargs.pop("is_active", True), **kwargs)
    db.add(service)
    db.commit()
    db.refresh(service)
    return service


def make_booking(
    db: Session,
    owner: Owner,
    pet: Pet,
    photographer: Photographer,
    services=(),
    booking_date=datetime(2026, 11, 1, 10, 0),
    status=BOOKING_STATUS_PENDING,
    **kwargs,
) -> Booking:
    booking = Booking(
        owner_id=owner.id,
        pet_id=pet.id,
        photographer_id=photographer.id,
        booking_date=booking_date,
        status=status,
        **kwargs,
    )
    booking.booking_services = [
        BookingService(service_id=s.id, status=BOOKING_STATUS_PENDING) for s in services
    ]
    db.add(booking)
    db.commit()
    db.refresh(booking)
    return booking


def make_notification(db: Session, owner: Owner, message="Welcome!", **kwargs) -> Notification:
    notification = Notification(owner_id=owner.id, message=message, **kwargs)
    db.add(notification)
    db.commit()
    db.refresh(notification)
    return notification


@pytest.fixture
def owner(db: Session) -> Owner:
    return make_owner(db)


@pytest.fixture
def pet(db: Session, owner: Owner) -> Pet:
    return make_pet(db, owner)


@pytest.fixture
def photographer(db: Session) -> Photographer:
    return make_photographer(db)


@pytest.fixture
def portrait(db: Session) -> Service:
    return make_service(db, name="Pet Portrait", price="50.00")


@pytest.fixture
def birthday(db: Session) -> Service:
    return make_service(db, name="Pet Birthday Shoot", price="75.00")
