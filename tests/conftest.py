import pytest
from faker import Faker
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from app.db.db import get_session
from app.factories.dragon_treasure_factory import DragonTreasureFactory
from app.factories.user_factory import UserFactory
from app.main import app
from app.utils.password_hasher import PasswordHasher


@pytest.fixture(name="session")
def session_fixture():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)

    with Session(engine) as session:
        yield session

    SQLModel.metadata.drop_all(engine)


@pytest.fixture(name="client")
def client_fixture(session: Session):
    def get_session_override():
        try:
            yield session
        finally:
            # a request that fails validation leaves nothing behind, as a closed session would
            session.rollback()

    app.dependency_overrides[get_session] = get_session_override
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()


@pytest.fixture
def password_hasher():
    return PasswordHasher(rounds=4)


@pytest.fixture
def fake():
    fake = Faker()
    fake.seed_instance(1234)
    return fake


@pytest.fixture
def user_factory(session, password_hasher, fake):
    return UserFactory(password_hasher, session=session, faker=fake)


@pytest.fixture
def treasure_factory(session, fake):
    return DragonTreasureFactory(session=session, faker=fake)


@pytest.fixture
def owner(user_factory):
    return user_factory.create()
