"""
attack.py - Offline brute-force demonstration.

Given a stolen credential, try every PIN of a given length and report how long
it took. Each guess costs one full scrypt derivation with the hasher's
parameters, which is what the cost tuning buys.
"""

from __future__ import annotations

import time
from typing import Optional, Tuple

from .auth import CredentialHasher


def bruteforce_pin(
    credential: str,
    digits: int = 4,
    hasher: Optional[CredentialHasher] = None,
) -> Tuple[Optional[str], float, int]:
    """Try all zero-padded PINs of ``digits`` digits. Returns (pin or None, seconds, attempts)."""
    if digits < 1:
        raise ValueError("digits must be at least 1")
    hasher = hasher if hasher is not None else CredentialHasher()
    start = time.perf_counter()
    attempts = 0
    max_pin = 10**digits

    for i in range(max_pin):
        pin = str(i).zfill(digits)
        attempts += 1
        if hasher.verify_sync(credential, pin):
            return pin, (time.perf_counter() - start), attempts

    return None, (time.perf_counter() - start), attempts
