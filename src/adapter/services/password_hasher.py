import bcrypt

from src.app.services.password_hasher import IPasswordHasher

# bcrypt only reads the first 72 bytes of its input
BCRYPT_MAX_BYTES = 72


class BcryptPasswordHasher(IPasswordHasher):
    """bcrypt implementation of the password hasher (cost factor 12 by default)"""

    def __init__(self, rounds: int = 12):
        self.rounds = rounds

    def hash(self, password: str) -> str:
        password_hash = bcrypt.hashpw(
            password.encode("utf-8")[:BCRYPT_MAX_BYTES], bcrypt.gensalt(self.rounds)
        )
        return password_hash.decode("utf-8")

    def verify(self, password: str, password_hash: str) -> bool:
        try:
            return bcrypt.checkpw(
                password.encode("utf-8")[:BCRYPT_MAX_BYTES], password_hash.encode("utf-8")
            )
        except ValueError:
            # Stored value is not a bcrypt hash
            return False
