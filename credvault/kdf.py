"""
kdf.py - Password key derivation with scrypt.

Responsibilities:
- Normalize passwords to NFKC so equivalent Unicode spellings derive the same key
- Derive a dklen-byte key from password + salt using scrypt (memory-hard KDF)
- Offer a coroutine that runs the derivation on a worker thread

Design notes:
- The salt may be text or bytes. Credentials pass the hex-encoded salt text,
  which is UTF-8 encoded before it reaches scrypt.
- Derivation is deterministic: same normalized password, salt and parameters
  always give the same key.
"""

from __future__ import annotations

import asyncio
import logging
import time
import unicodedata
from typing import Union

from cryptography.hazmat.primitives.kdf.scrypt import Scrypt

from .config import CostParameters


logger = logging.getLogger(__name__)

SaltInput = Union[str, bytes, bytearray, memoryview]


def normalize_password(password: str) -> str:
    """Return the NFKC form of ``password``."""
    if not isinstance(password, str):
        raise TypeError("password must be a string")
    return unicodedata.normalize("NFKC", password)


def _salt_bytes(salt: SaltInput) -> bytes:
    if isinstance(salt, str):
        return salt.encode("utf-8")
    if isinstance(salt, (bytes, bytearray, memoryview)):
        return bytes(salt)
    raise TypeError("salt must be str or bytes-like")


def derive_key(password: str, salt: SaltInput, params: CostParameters) -> bytes:
    """Derive ``params.dklen`` bytes from password + salt. Blocks for the full scrypt run."""
    secret = normalize_password(password).encode("utf-8")
    kdf = Scrypt(
        salt=_salt_bytes(salt),
        length=params.dklen,
        n=params.n,
        r=params.r,
        p=params.p,
    )
    t0 = time.perf_counter()
    key = kdf.derive(secret)
    logger.debug(
        "scrypt n=%d r=%d p=%d took %.1f ms",
        params.n,
        params.r,
        params.p,
        (time.perf_counter() - t0) * 1000.0,
    )
    return key


async def derive_key_async(password: str, salt: SaltInput, params: CostParameters) -> bytes:
    """Run :func:`derive_key` on a worker thread so the event loop keeps serving other work."""
    return await asyncio.to_thread(derive_key, password, salt, params)
