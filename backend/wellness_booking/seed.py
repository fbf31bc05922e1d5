"""Seed the demo catalog: HR accounts, vendor accounts and their event types.

Run with ``python -m wellness_booking.seed``. Existing events, event types and
users are removed first. Prints a development bearer token per account.
"""
import logging

from sqlalchemy.orm import Session

from wellness_booking.auth import AuthService
from wellness_booking.config import Settings, settings as default_settings
from wellness_booking.database import Database
from wellness_booking.domain.lifecycle import Role
from wellness_booking.models.event import Event, ProposedDate
from wellness_booking.models.event_type import EventType
from wellness_booking.models.user import User

logger = logging.getLogger(__name__)

REQUESTERS = [
    ("hr_acme", "Acme Corporation"),
    ("hr_globex", "Globex Industries"),
]

PROVIDERS = [
    ("vendor_healthplus", "HealthPlus Pte Ltd"),
    ("vendor_wellcare", "WellCare Solutions"),
    ("vendor_fitlife", "FitLife Wellness"),
]

# (name, description, provider username)
EVENT_TYPES = [
    ("Health Talk - Stress Management", "A talk on managing workplace stress and mental wellness", "vendor_healthplus"),
    ("Health Talk - Nutrition", "A talk on healthy eating habits and nutrition", "vendor_healthplus"),
    ("Onsite Health Screening", "Basic health screening including BMI, blood pressure, blood glucose", "vendor_wellcare"),
    ("Onsite Eye Screening", "Eye health check and vision screening", "vendor_wellcare"),
    ("Yoga Workshop", "Guided yoga session for all fitness levels", "vendor_fitlife"),
    ("Fitness Bootcamp", "High-energy group workout held onsite", "vendor_fitlife"),
]


def seed(db: Session) -> list[User]:
    """Replace users and the catalog with the demo data set. Returns the users."""
    db.query(ProposedDate).delete()
    db.query(Event).delete()
    db.query(EventType).delete()
    db.query(User).delete()

    users: dict[str, User] = {}
    for username, company in REQUESTERS:
        users[username] = User(username=username, role=Role.requester, company_name=company)
    for username, company in PROVIDERS:
        users[username] = User(username=username, role=Role.provider, company_name=company)
    db.add_all(users.values())
    db.flush()

    for name, description, provider in EVENT_TYPES:
        db.add(EventType(name=name, description=description, provider_id=users[provider].user_id))

    db.commit()
    logger.info("Seeded %d users and %d event types", len(users), len(EVENT_TYPES))
    return list(users.values())


def main(app_settings: Settings = default_settings) -> None:
    logging.basicConfig(level=app_settings.LOG_LEVEL.upper(), format="%(message)s")
    database = Database(app_settings.DATABASE_URL)
    database.create_all()
    auth_service = AuthService(app_settings)
    db = database.session()
    try:
        for user in seed(db):
            print(f"{user.role.value:<7} {user.username:<20} {auth_service.issue_token(user)}")
    finally:
        db.close()
        database.dispose()


if __name__ == "__main__":
    main()
