from datetime import datetime, timezone

from app.models.dragon_treasure import DragonTreasure
from app.models.user import User
from app.utils.serializer import (
    TREASURE_ITEM_GET,
    TREASURE_READ,
    USER_READ,
    exposed_fields,
    iri,
    normalize,
)


def make_treasure():
    owner = User(id=7, email="smaug@example.com", username="Smaug", password="hashed")
    return (
        DragonTreasure(id=3, created_at=datetime(2024, 2, 1, tzinfo=timezone.utc))
        .set_name("Golden chalice")
        .set_description("A chalice of pure gold")
        .set_value(100)
        .set_cool_factor(5)
        .set_is_published(True)
        .set_owner(owner)
    )


def test_read_group_links_owner_by_iri():
    data = normalize(make_treasure(), {TREASURE_READ})

    assert data == {
        "id": 3,
        "name": "Golden chalice",
        "description": "A chalice of pure gold",
        "value": 100,
        "cool_factor": 5,
        "created_at": "2024-02-01T00:00:00+00:00",
        "updated_at": "2024-02-01T00:00:00+00:00",
        "owner": "/api/users/7",
        "short_description": "A chalice of pure gold",
    }


def test_is_published_is_in_no_group():
    all_groups = {TREASURE_READ, TREASURE_ITEM_GET, USER_READ, "treasure:write"}

    assert "is_published" not in exposed_fields(DragonTreasure, all_groups)


def test_item_get_group_embeds_owner_username():
    data = normalize(make_treasure(), {TREASURE_READ, TREASURE_ITEM_GET})

    assert data["owner"] == {"username": "Smaug"}


def test_user_read_embeds_treasures_without_owner():
    treasure = make_treasure()

    data = normalize(treasure.owner, {USER_READ})

    assert data["username"] == "Smaug"
    assert "password" not in data
    assert data["dragon_treasures"] == [
        {
            "id": 3,
            "name": "Golden chalice",
            "description": "A chalice of pure gold",
            "value": 100,
            "cool_factor": 5,
        }
    ]


def test_property_projection():
    data = normalize(make_treasure(), {TREASURE_READ}, properties=["name", "value", "is_published"])

    assert data == {"name": "Golden chalice", "value": 100}


def test_iri():
    treasure = make_treasure()

    assert iri(treasure) == "/api/treasures/3/info"
    assert iri(treasure.owner) == "/api/users/7"
    assert iri(DragonTreasure()) is None
