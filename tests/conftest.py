import os
from datetime import date
import pytest
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

# Set required environment variables for testing
os.environ["SECRET_KEY"] = "test-secret-key-for-testing-0123456789abcdef"
os.environ["DATABASE_URL"] = "sqlite:///:memory:"

from cleanplan.database import create_db_engine, init_db
from cleanplan.models import Base, Employee, User
from cleanplan.schemas.apartment import ApartmentCreate
from cleanplan.security import get_password_hash

TEST_DATABASE_URL = "sqlite://"


@pytest.fixture
def engine():
    """
    Create a fresh in-memory database for each test.
    StaticPool keeps every session on the same connection, so they all see one database.
    """
    engine = create_db_engine(TEST_DATABASE_URL, poolclass=StaticPool)
    init_db(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db_session(engine):
    """Create a new database session for each test."""
    TestingSessionLocal = sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=engine
    )
    session = TestingSessionLocal()
    yield session
    session.close()


def _create_user(db_session, email: str, password: str) -> User:
    user = User(email=email, hashed_password=get_password_hash(password))
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def test_user(db_session):
    """Create the user most tests act as."""
    return _create_user(db_session, "owner@example.com", "testpass123")


@pytest.fixture
def other_user(db_session):
    """Create a second tenant whose data must stay invisible to test_user."""
    return _create_user(db_session, "someone.else@example.com", "otherpass123")


@pytest.fixture
def make_employee(db_session):
    """Factory that stores an employee for a given user."""
    def _make(user: User, first_name: str, last_name: str) -> Employee:
        employee = Employee(first_name=first_name, last_name=last_name, user_id=user.id)
        db_session.add(employee)
        db_session.commit()
        db_session.refresh(employee)
        return employee

    return _make


@pytest.fixture
def employees(test_user, make_employee):
    """Three employees owned by test_user."""
    return [
        make_employee(test_user, "Mario", "Rossi"),
        make_employee(test_user, "Anna", "Bianchi"),
        make_employee(test_user, "Luca", "Verdi"),
    ]


@pytest.fixture
def apartment_data():
    """Factory for apartment payloads with sensible defaults."""
    def _make(**overrides) -> ApartmentCreate:
        fields = {
            "name": "Via Roma 12",
            "cleaning_date": date(2024, 2, 10),
            "start_time": "09:30",
            "notes": None,
            "price": "80.00",
        }
        fields.update(overrides)
        return ApartmentCreate(**fields)

    return _make
