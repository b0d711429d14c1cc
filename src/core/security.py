"""Password hashing helpers."""
from passlib.context import CryptContext

# pbkdf2_sha256 is implemented by passlib itself, so no native backend is required.
password_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def hash_password(plain: str) -> str:
    return password_context.hash(plain)


def verify_password(plain: str, hashed: str) -> bool:
    return password_context.verify(plain, hashed)
