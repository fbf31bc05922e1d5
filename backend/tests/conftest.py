"""Pytest fixtures: a fresh SQLite file database per test, seeded with the demo catalog."""
from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from wellness_booking.config import Settings
from wellness_booking.database import Database
from wellness_booking.main import create_app
from wellness_booking.models.event_type import EventType
from wellness_booking.seed import seed

# Import all models so they register with Base.metadata
from wellness_booking.models.user import User                      # noqa: F401
from wellness_booking.models.event import Event, ProposedDate      # noqa: F401

NUTRITION_TALK = "Health Talk - Nutrition"      # vendor_healthplus
EYE_SCREENING = "Onsite Eye Screening"          # vendor_wellcare


@pytest.fixture(scope="function")
def settings(tmp_path):
    return Settings(
        DATABASE_URL=f"sqlite:///{tmp_path / 'test.db'}",
        JWT_SECRET="test-secret",
        LOG_LEVEL="WARNING",
    )


@pytest.fixture(scope="function")
def database(settings):
    """Create a fresh database with all tables for each test."""
    database = Database(settings.DATABASE_URL)
    database.create_all()
    yield database
    database.drop_all()
    database.dispose()


@pytest.fixture(scope="function")
def db(database):
    """Yield a database session, closed after the test."""
    session = database.session()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(scope="function")
def app(settings, database):
    return create_app(settings, database)


@pytest.fixture(scope="function")
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture(scope="function")
def users(db):
    """Seeded users keyed by username."""
    return {user.username: user for user in seed(db)}


@pytest.fixture(scope="function")
def catalog(db, users):
    """Seeded event types keyed by name."""
    return {event_type.name: event_type for event_type in db.query(EventType).all()}


@pytest.fixture(scope="function")
def headers(app, users):
    """Authorization headers keyed by username."""
    auth_service = app.state.auth_service
    return {
        username: {"Authorization": f"Bearer {auth_service.issue_token(user)}"}
        for username, user in users.items()
    }


@pytest.fixture(scope="function")
def proposed_dates():
    """Three distinct whole-second instants a few days out."""
    base = datetime.now(timezone.utc).replace(hour=9, minute=0, second=0, microsecond=0) + timedelta(days=7)
    return [base, base + timedelta(days=1), base + timedelta(days=2)]


@pytest.fixture(scope="function")
def make_event(client, headers, catalog, proposed_dates):
    """Factory: POST /api/events as a requester and return the response."""
    def _make(requester="hr_acme", event_type=NUTRITION_TALK, dates=None, location=None, **extra):
        dates = proposed_dates if dates is None else dates
        body = {
            "eventTypeId": catalog[event_type].event_type_id,
            "proposedDates": [d.isoformat() if isinstance(d, datetime) else d for d in dates],
            "location": location if location is not None else {"postalCode": "50000", "streetName": "1 Wellness Way"},
            **extra,
        }
        return client.post("/api/events", json=body, headers=headers[requester])
    return _make
