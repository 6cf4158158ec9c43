"""
Password hashing helpers built on bcrypt
"""
from typing import Optional

import bcrypt
from fastapi.concurrency import run_in_threadpool

from ..config import settings

# bcrypt only looks at the first 72 bytes of a password
BCRYPT_MAX_BYTES = 72


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


def hash_password(password: str, rounds: Optional[int] = None) -> str:
    """
    Hash a password with a fresh random salt

    Args:
        password: Plaintext password
        rounds: bcrypt cost factor (defaults to settings)

    Returns:
        The bcrypt hash as text, salt and cost included
    """
    if rounds is None:
        rounds = settings.bcrypt_rounds
    return bcrypt.hashpw(_encode(password), bcrypt.gensalt(rounds=rounds)).decode("utf-8")


def verify_password(password: str, hashed: str) -> bool:
    """Check a plaintext password against a stored bcrypt hash"""
    try:
        return bcrypt.checkpw(_encode(password), hashed.encode("utf-8"))
    except ValueError:
        # stored value is not a bcrypt hash
        return False


async def hash_password_async(password: str) -> str:
    return await run_in_threadpool(hash_password, password)


async def verify_password_async(password: str, hashed: str) -> bool:
    return await run_in_threadpool(verify_password, password, hashed)
