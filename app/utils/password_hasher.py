import bcrypt

from app.config import BCRYPT_ROUNDS
from app.models.user import User


class PasswordHasher:
    """One-way transform from a plaintext password to the stored credential."""

    def __init__(self, rounds: int = BCRYPT_ROUNDS):
        self.rounds = rounds

    def hash_password(self, user: User, plain_password: str) -> str:
        # bcrypt salts per call, the user record only scopes the credential
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(plain_password.encode("utf-8"), salt).decode("utf-8")

    def is_password_valid(self, user: User, plain_password: str) -> bool:
        if not user.password:
            return False

        try:
            return bcrypt.checkpw(plain_password.encode("utf-8"), user.password.encode("utf-8"))
        except ValueError:
            # stored value is not a bcrypt hash
            return False


def get_password_hasher() -> PasswordHasher:
    return PasswordHasher()
