from sqlmodel import Session, SQLModel, create_engine

from app.config import DATABASE_URL

# both tables must be registered before create_all / the first mapper use
from app.models.user import User  # noqa: F401
from app.models.dragon_treasure import DragonTreasure  # noqa: F401

connect_args = {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(DATABASE_URL, connect_args=connect_args)


def create_db_and_tables(bind=None):
    SQLModel.metadata.create_all(bind or engine)


def get_session():
    with Session(engine) as session:
        yield session
