import logging
from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel, ConfigDict
from sqlmodel import Session, or_, select

from app.db.db import get_session
from app.models.dragon_treasure import DragonTreasure
from app.models.user import User
from app.routers.treasures import list_treasures
from app.utils.auth_helper import get_current_user_required, get_db_user
from app.utils.pagination import collection_response, paginate
from app.utils.password_hasher import PasswordHasher, get_password_hasher
from app.utils.serializer import USER_READ, normalize, normalize_many
from app.utils.treasure_filters import TreasureFilters, get_treasure_filters
from app.utils.treasure_validator import validate_user

logger = logging.getLogger(__name__)

router = APIRouter()


class UserWrite(BaseModel):
    model_config = ConfigDict(extra="forbid")

    email: str
    username: str
    password: str  # plaintext, hashed before persisting


@router.get("")
def get_users(
    page: int = Query(1, ge=1),
    session: Session = Depends(get_session),
):
    users, total = paginate(session, select(User), page, User.id)

    return collection_response(normalize_many(users, {USER_READ}), total, page)


@router.post("", status_code=201)
def create_user(
    payload: UserWrite,
    session: Session = Depends(get_session),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
):
    user = User(email=payload.email, username=payload.username, password=payload.password)

    # constraints apply to the plaintext the client sent
    validate_user(user)

    existing = session.exec(
        select(User).where(or_(User.email == user.email, User.username == user.username))
    ).first()

    if existing:
        raise HTTPException(status_code=409, detail="Email or username already taken")

    user.set_password(password_hasher.hash_password(user, user.password))

    session.add(user)
    session.commit()
    session.refresh(user)

    logger.info("Registered user %s", user.id)

    return normalize(user, {USER_READ})


@router.get("/me")
def get_me(
    session: Session = Depends(get_session),
    current_user=Depends(get_current_user_required),
):
    return normalize(get_db_user(session, current_user), {USER_READ})


@router.get("/{user_id}")
def get_user(
    user_id: int,
    session: Session = Depends(get_session),
):
    user = session.get(User, user_id)

    if not user:
        raise HTTPException(status_code=404, detail="User not found")

    return normalize(user, {USER_READ})


@router.get("/{user_id}/treasures")
def get_user_treasures(
    user_id: int,
    filters: TreasureFilters = Depends(get_treasure_filters),
    session: Session = Depends(get_session),
):
    if not session.get(User, user_id):
        raise HTTPException(status_code=404, detail="User not found")

    query = select(DragonTreasure).where(DragonTreasure.owner_id == user_id)

    return list_treasures(session, query, filters)
