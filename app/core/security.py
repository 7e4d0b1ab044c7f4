import uuid
from typing import Optional

from passlib.context import CryptContext

# Use Argon2 as the primary hashing algorithm and keep bcrypt for
# verification of existing hashes.
pwd_context = CryptContext(schemes=["argon2", "bcrypt"], deprecated="auto")

def generate_login_token() -> str:
    """
    Issue a login token for an athlete.

    Tokens are opaque bearer strings exchanged for the athlete's identity.
    They never expire; issuing a new one overwrites the stored value.

    Returns:
        A random UUID4 string
    """
    return str(uuid.uuid4())

def get_password_hash(password: Optional[str]) -> Optional[str]:
    """
    Hash an athlete password; athletes may be created without one.

    Args:
        password: The password to hash

    Returns:
        The hashed password, or None when no password was given
    """
    if not password:
        return None
    return pwd_context.hash(password)
