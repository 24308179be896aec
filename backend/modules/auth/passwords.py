"""
Password hashing with bcrypt.

Passwords are reduced with SHA-256 before bcrypt sees them. bcrypt only
reads the first 72 bytes of its input, and passwords have no length limit,
so without the reduction two long passwords sharing a prefix would verify
against each other.
"""

import asyncio
import base64
import hashlib
from typing import Any

import bcrypt


class PasswordHasher:
    """
    Salted, deliberately slow one-way hashing for user passwords.

    Every call to hash() uses a fresh salt, so hashing the same password
    twice gives different results; only verify() can compare them.

    Usage:
        hasher = PasswordHasher()
        stored = hasher.hash("password123")
        hasher.verify("password123", stored)  # True
    """

    DEFAULT_ROUNDS = 12

    def __init__(self, rounds: int = DEFAULT_ROUNDS):
        """
        Args:
            rounds: bcrypt work factor (log2 of iterations). Tests use the
                minimum of 4 to stay fast.
        """
        self._rounds = rounds

    @staticmethod
    def _prepare(password: str) -> bytes:
        digest = hashlib.sha256(password.encode("utf-8")).digest()
        return base64.b64encode(digest)

    def hash(self, password: str) -> str:
        """
        Hash a plaintext password.

        Raises:
            ValueError: If password is empty or not a string
        """
        if not isinstance(password, str) or not password:
            raise ValueError("Password cannot be empty")
        salt = bcrypt.gensalt(rounds=self._rounds)
        return bcrypt.hashpw(self._prepare(password), salt).decode("utf-8")

    def verify(self, password: Any, password_hash: Any) -> bool:
        """
        Check a plaintext password against a stored hash.

        Comparison is constant-time. Returns False, never raises, for a
        mismatch, an empty input or a corrupt hash.
        """
        if not isinstance(password, str) or not password:
            return False
        if not isinstance(password_hash, str) or not password_hash:
            return False
        try:
            return bcrypt.checkpw(self._prepare(password), password_hash.encode("utf-8"))
        except (ValueError, TypeError):
            # Invalid hash format
            return False

    async def hash_async(self, password: str) -> str:
        """hash() on a worker thread so the event loop keeps serving requests."""
        return await asyncio.to_thread(self.hash, password)

    async def verify_async(self, password: Any, password_hash: Any) -> bool:
        """verify() on a worker thread."""
        return await asyncio.to_thread(self.verify, password, password_hash)
