from datetime import timezone

from app.factories.base import ModelFactory
from app.models.dragon_treasure import DragonTreasure


class DragonTreasureFactory(ModelFactory):
    """Builds treasures. ``owner`` has no default and must be passed."""

    model = DragonTreasure

    TREASURE_NAMES = [
        "pile of gold coins",
        "diamond-encrusted throne",
        "rare magic staff",
        "enchanted sword",
        "set of gemstones",
        "mystical crystal ball",
        "ancient war horn",
        "golden chalice",
        "crown of the dragon king",
        "mysterious bone necklace",
    ]

    def defaults(self) -> dict:
        created_at = self.faker.date_time_between(start_date="-1y", tzinfo=timezone.utc)

        return {
            "name": self.faker.random_element(self.TREASURE_NAMES),
            "description": self.faker.paragraph(),
            "value": self.faker.random_int(min=0, max=1000),
            "cool_factor": self.faker.random_int(min=0, max=10),
            "is_published": self.faker.boolean(),
            "created_at": created_at,
            "updated_at": created_at,
        }
