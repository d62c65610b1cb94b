from fastapi import HTTPException
from pydantic import BaseModel, ConfigDict, EmailStr, Field, ValidationError, field_validator

from app.models.dragon_treasure import DragonTreasure
from app.models.user import User

NAME_MAX_MESSAGE = "Describe your loot in 50 characters or less"

# bcrypt only looks at the first 72 bytes and refuses longer input
PASSWORD_MAX_BYTES = 72

# INTEGER column
VALUE_MAX = 2**31 - 1


def _not_blank(value: str) -> str:
    if value is None or not value.strip():
        raise ValueError("This value should not be blank.")
    return value


class ValidatedUser(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    email: EmailStr
    username: str = Field(max_length=255)
    password: str

    @field_validator("username")
    @classmethod
    def check_username(cls, v: str) -> str:
        return _not_blank(v)

    @field_validator("password")
    @classmethod
    def check_password(cls, v: str) -> str:
        _not_blank(v)
        if len(v.encode("utf-8")) > PASSWORD_MAX_BYTES:
            raise ValueError(f"This value is too long. It should have {PASSWORD_MAX_BYTES} bytes or less.")
        return v


class ValidatedTreasure(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    name: str
    description: str
    value: int = Field(ge=0, le=VALUE_MAX)
    cool_factor: int = Field(ge=0, le=10)
    owner: ValidatedUser  # required, validated recursively

    @field_validator("owner", mode="before")
    @classmethod
    def check_owner(cls, v):
        if v is None:
            raise ValueError("This value should not be null.")
        return v

    @field_validator("name")
    @classmethod
    def check_name(cls, v: str) -> str:
        _not_blank(v)
        if len(v) < 2:
            raise ValueError("This value is too short. It should have 2 characters or more.")
        if len(v) > 50:
            raise ValueError(NAME_MAX_MESSAGE)
        return v

    @field_validator("description")
    @classmethod
    def check_description(cls, v: str) -> str:
        return _not_blank(v)


def violations(error: ValidationError) -> list:
    return [
        {
            "field": ".".join(str(loc) for loc in e["loc"]),
            "message": e["msg"].removeprefix("Value error, "),
        }
        for e in error.errors()
    ]


def validate_treasure(treasure: DragonTreasure) -> ValidatedTreasure:
    try:
        return ValidatedTreasure.model_validate(treasure, from_attributes=True)
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=violations(e))


def validate_user(user: User) -> ValidatedUser:
    try:
        return ValidatedUser.model_validate(user, from_attributes=True)
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=violations(e))
