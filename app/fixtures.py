"""Seed a database with random users and their treasures.

    python -m app.fixtures
"""

import logging
import random

from sqlmodel import Session

from app.config import LOG_FORMAT, LOG_LEVEL
from app.db.db import create_db_and_tables, engine
from app.factories.dragon_treasure_factory import DragonTreasureFactory
from app.factories.user_factory import UserFactory
from app.utils.logging_config import setup_logging
from app.utils.password_hasher import PasswordHasher

logger = logging.getLogger(__name__)


def load_fixtures(session: Session, users: int = 10, treasures: int = 40, password_hasher=None):
    user_factory = UserFactory(password_hasher or PasswordHasher(), session=session)
    created_users = user_factory.create_many(users)

    treasure_factory = DragonTreasureFactory(session=session)
    created_treasures = treasure_factory.create_many(
        treasures,
        owner=lambda: random.choice(created_users),
    )

    logger.info("Loaded %s users and %s treasures", len(created_users), len(created_treasures))

    return created_users, created_treasures


if __name__ == "__main__":
    setup_logging(LOG_LEVEL, LOG_FORMAT)
    create_db_and_tables()

    with Session(engine) as session:
        load_fixtures(session)
