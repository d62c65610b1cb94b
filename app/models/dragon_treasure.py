import re
from typing import Optional
from sqlalchemy import Column, Text
from sqlmodel import Field, Relationship, SQLModel
from datetime import datetime, timezone

from app.models.user import User

SHORT_DESCRIPTION_LENGTH = 40
ELLIPSIS = "..."

_LINE_BREAK = re.compile(r"\r\n|\n\r|\n|\r")


def nl2br(text: str) -> str:
    return _LINE_BREAK.sub("<br />", text)


class DragonTreasure(SQLModel, table=True):
    """A rare and valuable treasure."""

    __tablename__ = "dragon_treasures"

    id: Optional[int] = Field(default=None, primary_key=True)

    name: Optional[str] = Field(default=None, max_length=255)
    description: Optional[str] = Field(default=None, sa_column=Column(Text))

    # Estimated value of the treasure, in gold coins
    value: int = Field(default=0)
    cool_factor: int = Field(default=0)

    # Server-internal, never serialized
    is_published: bool = Field(default=False)

    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    owner_id: Optional[int] = Field(default=None, foreign_key="users.id", nullable=False, index=True)
    owner: Optional[User] = Relationship(back_populates="dragon_treasures")

    def __init__(self, **data):
        # both timestamps start from the same instant
        now = datetime.now(timezone.utc)
        data.setdefault("created_at", now)
        data.setdefault("updated_at", data["created_at"])
        super().__init__(**data)

    @property
    def short_description(self) -> Optional[str]:
        if self.description is None:
            return None

        if len(self.description) <= SHORT_DESCRIPTION_LENGTH:
            return self.description

        return self.description[:SHORT_DESCRIPTION_LENGTH] + ELLIPSIS

    def set_name(self, name: str) -> "DragonTreasure":
        self.name = name
        return self

    def set_description(self, description: str) -> "DragonTreasure":
        self.description = description
        return self

    def set_text_description(self, description: str) -> "DragonTreasure":
        """Write path for ``description``: stores the text with line breaks as ``<br />``."""
        self.description = nl2br(description)
        return self

    def set_value(self, value: int) -> "DragonTreasure":
        self.value = value
        return self

    def set_cool_factor(self, cool_factor: int) -> "DragonTreasure":
        self.cool_factor = cool_factor
        return self

    def set_is_published(self, is_published: bool) -> "DragonTreasure":
        self.is_published = is_published
        return self

    def set_created_at(self, created_at: Optional[datetime]) -> "DragonTreasure":
        self.created_at = created_at
        return self

    def set_updated_at(self, updated_at: Optional[datetime]) -> "DragonTreasure":
        self.updated_at = updated_at
        return self

    def set_owner(self, owner: Optional[User]) -> "DragonTreasure":
        self.owner = owner
        return self
