"""Exposure groups for API output.

Each record type has a table mapping its fields to the groups it is
exposed in. ``normalize`` keeps the fields whose groups intersect the
groups of the current operation. A related record is embedded when at
least one of its own fields is in those groups, otherwise it is rendered
as its IRI.
"""

from datetime import datetime
from typing import Any, Iterable, Optional

from app.models.dragon_treasure import DragonTreasure
from app.models.user import User

TREASURE_READ = "treasure:read"
TREASURE_WRITE = "treasure:write"
TREASURE_ITEM_GET = "treasure:item:get"
USER_READ = "user:read"
USER_WRITE = "user:write"

TREASURE_GROUPS = {
    "id": {TREASURE_READ, USER_READ},
    "name": {TREASURE_READ, TREASURE_WRITE, USER_READ},
    "description": {TREASURE_READ, TREASURE_WRITE, USER_READ},
    "value": {TREASURE_READ, TREASURE_WRITE, USER_READ},
    "cool_factor": {TREASURE_READ, TREASURE_WRITE, USER_READ},
    "created_at": {TREASURE_READ},
    "updated_at": {TREASURE_READ},
    "owner": {TREASURE_READ, TREASURE_WRITE},
    "short_description": {TREASURE_READ},
    # is_published: server-internal, in no group
}

USER_GROUPS = {
    "id": {USER_READ},
    "email": {USER_READ, USER_WRITE},
    "username": {USER_READ, USER_WRITE, TREASURE_ITEM_GET},
    "dragon_treasures": {USER_READ},
    # password is write-only and never normalized
}

GROUPS_BY_TYPE = {
    DragonTreasure: TREASURE_GROUPS,
    User: USER_GROUPS,
}


def iri(record) -> Optional[str]:
    if record.id is None:
        return None
    if isinstance(record, DragonTreasure):
        return f"/api/treasures/{record.id}/info"
    if isinstance(record, User):
        return f"/api/users/{record.id}"
    raise TypeError(f"No IRI for {type(record).__name__}")


def exposed_fields(record_type, groups: Iterable[str]) -> list:
    groups = set(groups)
    mapping = GROUPS_BY_TYPE[record_type]
    return [name for name, field_groups in mapping.items() if field_groups & groups]


def _normalize_value(value: Any, groups: set):
    if isinstance(value, (DragonTreasure, User)):
        if exposed_fields(type(value), groups):
            return normalize(value, groups)
        return iri(value)

    if isinstance(value, list):
        return [_normalize_value(v, groups) for v in value]

    if isinstance(value, datetime):
        return value.isoformat()

    return value


def normalize(record, groups: Iterable[str], properties: Optional[Iterable[str]] = None) -> dict:
    groups = set(groups)
    fields = exposed_fields(type(record), groups)

    # property projection only narrows what the groups already expose
    if properties:
        wanted = set(properties)
        fields = [name for name in fields if name in wanted]

    return {name: _normalize_value(getattr(record, name), groups) for name in fields}


def normalize_many(records, groups: Iterable[str], properties: Optional[Iterable[str]] = None) -> list:
    return [normalize(record, groups, properties) for record in records]
