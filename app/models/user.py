from typing import TYPE_CHECKING, List, Optional
from sqlmodel import Field, Relationship, SQLModel
from datetime import datetime, timezone

if TYPE_CHECKING:
    from app.models.dragon_treasure import DragonTreasure


class User(SQLModel, table=True):
    __tablename__ = "users"

    id: Optional[int] = Field(default=None, primary_key=True)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    email: str = Field(max_length=180, index=True, unique=True)
    username: str = Field(max_length=255, index=True, unique=True)
    password: str  # bcrypt hash once persisted

    dragon_treasures: List["DragonTreasure"] = Relationship(back_populates="owner")

    def set_email(self, email: str) -> "User":
        self.email = email
        return self

    def set_username(self, username: str) -> "User":
        self.username = username
        return self

    def set_password(self, password: str) -> "User":
        self.password = password
        return self
