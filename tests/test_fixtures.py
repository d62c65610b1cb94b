from sqlmodel import select

from app.fixtures import load_fixtures
from app.models.dragon_treasure import DragonTreasure
from app.models.user import User


def test_load_fixtures(session, password_hasher):
    users, treasures = load_fixtures(session, users=3, treasures=8, password_hasher=password_hasher)

    assert len(session.exec(select(User)).all()) == 3
    assert len(session.exec(select(DragonTreasure)).all()) == 8

    user_ids = {user.id for user in users}
    assert all(treasure.owner_id in user_ids for treasure in treasures)
