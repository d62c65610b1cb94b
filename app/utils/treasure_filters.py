from typing import List, Optional
from fastapi import HTTPException, Query
from pydantic import BaseModel
from sqlmodel import col

from app.models.dragon_treasure import DragonTreasure
from app.models.user import User


class TreasureFilters(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None
    owner: Optional[int] = None
    owner_username: Optional[str] = None
    value_gt: Optional[int] = None
    value_gte: Optional[int] = None
    value_lt: Optional[int] = None
    value_lte: Optional[int] = None
    value_between: Optional[str] = None
    is_published: Optional[bool] = None
    created_at: Optional[bool] = None
    properties: Optional[List[str]] = None
    page: int = 1


def get_treasure_filters(
    name: Optional[str] = None,
    description: Optional[str] = None,
    owner: Optional[int] = None,
    owner_username: Optional[str] = Query(None, alias="owner.username"),
    value_gt: Optional[int] = Query(None, alias="value[gt]"),
    value_gte: Optional[int] = Query(None, alias="value[gte]"),
    value_lt: Optional[int] = Query(None, alias="value[lt]"),
    value_lte: Optional[int] = Query(None, alias="value[lte]"),
    value_between: Optional[str] = Query(None, alias="value[between]"),
    is_published: Optional[bool] = None,
    created_at: Optional[bool] = None,
    properties: Optional[List[str]] = Query(None, alias="properties[]"),
    page: int = Query(1, ge=1),
) -> TreasureFilters:
    return TreasureFilters(
        name=name,
        description=description,
        owner=owner,
        owner_username=owner_username,
        value_gt=value_gt,
        value_gte=value_gte,
        value_lt=value_lt,
        value_lte=value_lte,
        value_between=value_between,
        is_published=is_published,
        created_at=created_at,
        properties=properties,
        page=page,
    )


def parse_between(raw: str):
    # "10..100"
    low, sep, high = raw.partition("..")
    try:
        if not sep:
            raise ValueError(raw)
        return int(low), int(high)
    except ValueError:
        raise HTTPException(status_code=400, detail=f"Invalid value[between] range '{raw}', expected 'min..max'")


def apply_treasure_filters(query, filters: TreasureFilters):
    # partial strategy: case-insensitive substring
    if filters.name:
        query = query.where(col(DragonTreasure.name).ilike(f"%{filters.name}%"))

    if filters.description:
        query = query.where(col(DragonTreasure.description).ilike(f"%{filters.description}%"))

    # exact strategy
    if filters.owner is not None:
        query = query.where(DragonTreasure.owner_id == filters.owner)

    if filters.owner_username:
        query = query.join(User, User.id == DragonTreasure.owner_id).where(
            col(User.username).ilike(f"%{filters.owner_username}%")
        )

    if filters.value_gt is not None:
        query = query.where(DragonTreasure.value > filters.value_gt)
    if filters.value_gte is not None:
        query = query.where(DragonTreasure.value >= filters.value_gte)
    if filters.value_lt is not None:
        query = query.where(DragonTreasure.value < filters.value_lt)
    if filters.value_lte is not None:
        query = query.where(DragonTreasure.value <= filters.value_lte)
    if filters.value_between:
        low, high = parse_between(filters.value_between)
        query = query.where(col(DragonTreasure.value).between(low, high))

    if filters.is_published is not None:
        query = query.where(DragonTreasure.is_published == filters.is_published)

    if filters.created_at is not None:
        if filters.created_at:
            query = query.where(col(DragonTreasure.created_at).is_not(None))
        else:
            query = query.where(col(DragonTreasure.created_at).is_(None))

    return query

