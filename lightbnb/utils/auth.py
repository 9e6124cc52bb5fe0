"""
Password hashing utilities.
Stored user passwords are bcrypt hashes; these helpers produce and check them.
"""

from passlib.context import CryptContext


# Password hashing context
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def hash_password(password: str) -> str:
    """
    Hash a password using bcrypt.

    Args:
        password: Plain text password

    Returns:
        Hashed password string
    """
    if not password:
        raise ValueError("Password cannot be empty")
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a password against a stored hash.

    Returns False instead of raising when the stored value is not a
    recognised hash.
    """
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except ValueError:
        return False
