import logging
from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel
from sqlmodel import Session, select

from app.db.db import get_session
from app.models.user import User
from app.utils.auth_helper import create_access_token
from app.utils.password_hasher import PasswordHasher, get_password_hasher

logger = logging.getLogger(__name__)

router = APIRouter()


class LoginRequest(BaseModel):
    email: str
    password: str


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user_id: str


@router.post("/login", response_model=TokenResponse)
def login(
    payload: LoginRequest,
    session: Session = Depends(get_session),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
):
    db_user = session.exec(select(User).where(User.email == payload.email)).first()

    if not db_user or not password_hasher.is_password_valid(db_user, payload.password):
        logger.warning("Failed login for %s", payload.email)
        raise HTTPException(status_code=401, detail="Invalid credentials")

    return TokenResponse(
        access_token=create_access_token(db_user),
        user_id=str(db_user.id),
    )
