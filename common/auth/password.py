"""
bcrypt password hashing.

Passwords are pre-hashed with SHA-256 before bcrypt, which handles bcrypt's
72-byte input limit and gives consistent behavior across password lengths.

Example:
    guard = PasswordGuard()

    hashed = await guard.hash_async("correct horse battery staple")
    ok = await guard.verify_async("correct horse battery staple", hashed)
"""

import asyncio
import base64
import hashlib
from typing import Optional

import bcrypt as bcrypt_lib


class PasswordGuard:
    """One-way password hashing and verification."""

    def __init__(self, rounds: int = 12):
        self._rounds = rounds

    def _prehash_password(self, password: str) -> bytes:
        sha256_hash = hashlib.sha256(password.encode("utf-8")).digest()
        return base64.b64encode(sha256_hash)

    def hash(self, password: str) -> str:
        """Hash a password with a fresh random salt."""
        salt = bcrypt_lib.gensalt(rounds=self._rounds)
        return bcrypt_lib.hashpw(self._prehash_password(password), salt).decode("utf-8")

    def verify(self, password: Optional[str], hashed: Optional[str]) -> bool:
        """
        Check a password against a stored hash.

        Never raises: a missing password, a missing hash or a malformed hash
        all count as a mismatch.
        """
        if not password or not hashed:
            return False
        try:
            return bcrypt_lib.checkpw(
                self._prehash_password(password),
                hashed.encode("utf-8"),
            )
        except ValueError:
            return False

    # bcrypt is CPU-bound; keep it off the event loop.
    async def hash_async(self, password: str) -> str:
        return await asyncio.to_thread(self.hash, password)

    async def verify_async(self, password: Optional[str], hashed: Optional[str]) -> bool:
        return await asyncio.to_thread(self.verify, password, hashed)
