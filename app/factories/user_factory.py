from typing import Optional

from faker import Faker
from sqlmodel import Session

from app.factories.base import ModelFactory
from app.models.user import User
from app.utils.password_hasher import PasswordHasher


class UserFactory(ModelFactory):
    model = User

    USERNAMES = [
        "FlamingInferno",
        "ScaleSorcerer",
        "TheDragonWithBadBreath",
        "BurnedOut",
        "ForgotMyOwnName",
        "ClumsyClaws",
        "HoarderOfUselessTrinkets",
    ]

    DEFAULT_PASSWORD = "password"

    def __init__(
        self,
        password_hasher: PasswordHasher,
        session: Optional[Session] = None,
        faker: Optional[Faker] = None,
    ):
        self.password_hasher = password_hasher
        super().__init__(session=session, faker=faker)

    def defaults(self) -> dict:
        # unique proxies keep email/username clear of the table's unique constraints
        suffix = self.faker.unique.random_number(digits=3)

        return {
            "email": self.faker.unique.email(),
            "password": self.DEFAULT_PASSWORD,
            "username": f"{self.faker.random_element(self.USERNAMES)}{suffix}",
        }

    def initialize(self) -> "UserFactory":
        return self.after_instantiate(self._hash_password)

    def _hash_password(self, user: User) -> None:
        user.set_password(self.password_hasher.hash_password(user, user.password))
