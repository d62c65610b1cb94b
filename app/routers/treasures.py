import logging
from datetime import datetime, timezone
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, ConfigDict
from sqlmodel import Session, select

from app.db.db import get_session
from app.models.dragon_treasure import DragonTreasure
from app.models.user import User
from app.utils.pagination import collection_response, paginate
from app.utils.serializer import TREASURE_ITEM_GET, TREASURE_READ, normalize, normalize_many
from app.utils.treasure_filters import TreasureFilters, apply_treasure_filters, get_treasure_filters
from app.utils.treasure_validator import validate_treasure

logger = logging.getLogger(__name__)

router = APIRouter()


class TreasureWrite(BaseModel):
    """Fields of the ``treasure:write`` group. Only keys sent by the client are applied."""

    model_config = ConfigDict(extra="forbid")

    name: Optional[str] = None
    description: Optional[str] = None
    value: Optional[int] = None
    cool_factor: Optional[int] = None
    owner: Optional[int] = None  # user id


def apply_treasure_write(session: Session, treasure: DragonTreasure, payload: TreasureWrite) -> DragonTreasure:
    data = payload.model_dump(exclude_unset=True)

    # resolve the owner before touching the record so autoflush never sees it half-written
    if "owner" in data:
        owner = session.get(User, data["owner"]) if data["owner"] is not None else None

    if "name" in data:
        treasure.set_name(data["name"])

    if "description" in data:
        if data["description"] is None:
            treasure.set_description(None)
        else:
            treasure.set_text_description(data["description"])

    if "value" in data:
        treasure.set_value(data["value"])

    if "cool_factor" in data:
        treasure.set_cool_factor(data["cool_factor"])

    if "owner" in data:
        treasure.set_owner(owner)

    return treasure


def list_treasures(session: Session, query, filters: TreasureFilters) -> dict:
    query = apply_treasure_filters(query, filters)
    treasures, total = paginate(session, query, filters.page, DragonTreasure.id)

    return collection_response(
        normalize_many(treasures, {TREASURE_READ}, filters.properties),
        total,
        filters.page,
    )


@router.get("/treasures/{treasure_id}/info")
def get_treasure(
    treasure_id: int,
    session: Session = Depends(get_session),
):
    treasure = session.get(DragonTreasure, treasure_id)

    if not treasure:
        raise HTTPException(status_code=404, detail="Treasure not found")

    return normalize(treasure, {TREASURE_READ, TREASURE_ITEM_GET})


@router.get("/treasures")
def get_treasures(
    filters: TreasureFilters = Depends(get_treasure_filters),
    session: Session = Depends(get_session),
):
    return list_treasures(session, select(DragonTreasure), filters)


@router.post("/treasures", status_code=201)
def create_treasure(
    payload: TreasureWrite,
    session: Session = Depends(get_session),
):
    treasure = apply_treasure_write(session, DragonTreasure(), payload)

    validate_treasure(treasure)

    session.add(treasure)
    session.commit()
    session.refresh(treasure)

    logger.info(
        "Created treasure %s for user %s",
        treasure.id,
        treasure.owner_id,
        extra={"treasure_id": treasure.id, "user_id": treasure.owner_id},
    )

    return normalize(treasure, {TREASURE_READ})


@router.patch("/treasures/{treasure_id}")
def update_treasure(
    treasure_id: int,
    payload: TreasureWrite,
    session: Session = Depends(get_session),
):
    treasure = session.get(DragonTreasure, treasure_id)

    if not treasure:
        raise HTTPException(status_code=404, detail="Treasure not found")

    apply_treasure_write(session, treasure, payload)

    validate_treasure(treasure)

    treasure.set_updated_at(datetime.now(timezone.utc))

    session.add(treasure)
    session.commit()
    session.refresh(treasure)

    logger.info("Updated treasure %s", treasure.id, extra={"treasure_id": treasure.id})

    return normalize(treasure, {TREASURE_READ})
