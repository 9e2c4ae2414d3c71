"""
codec.py - Credential text format.

Responsibilities:
- Generate per-credential salts from the OS secure random source
- Serialize salt + derived key as "<salt-hex>:<key-hex>"
- Parse stored credentials into a tagged result (parsed or malformed)

Only [0-9a-f] and ':' ever appear in a produced credential, so the text can go
into any text column or file without escaping.
"""

from __future__ import annotations

import binascii
import os
from dataclasses import dataclass
from typing import Union

from .errors import DecodingError, MalformedCredentialError, RandomSourceUnavailable


SALT_BYTES = 16
SEPARATOR = ":"

MISSING_SEPARATOR = "missing-separator"
EMPTY_SALT = "empty-salt"
EMPTY_KEY = "empty-key"


def new_salt() -> bytes:
    """Return SALT_BYTES fresh random bytes. Never falls back to a non-crypto PRNG."""
    try:
        return os.urandom(SALT_BYTES)
    except (NotImplementedError, OSError) as exc:
        raise RandomSourceUnavailable("secure random source unavailable") from exc


def _unhex(field_name: str, value: str) -> bytes:
    try:
        return binascii.unhexlify(value)
    except (binascii.Error, ValueError) as exc:
        raise DecodingError(f"bad-{field_name}-hex", f"{field_name} component is not valid hex") from exc


@dataclass(frozen=True)
class ParsedCredential:
    salt_hex: str
    key_hex: str

    def salt_bytes(self) -> bytes:
        return _unhex("salt", self.salt_hex)

    def key_bytes(self) -> bytes:
        return _unhex("key", self.key_hex)

    def validate(self) -> None:
        """Raise DecodingError unless both components are strict hex."""
        self.salt_bytes()
        self.key_bytes()


@dataclass(frozen=True)
class MalformedCredential:
    reason: str


ParseResult = Union[ParsedCredential, MalformedCredential]


def encode_credential(salt_hex: str, key: bytes) -> str:
    return f"{salt_hex}{SEPARATOR}{key.hex()}"


def parse_credential(text: str) -> ParseResult:
    """Split on the first ':' into salt and key. Shape problems come back as MalformedCredential."""
    if not isinstance(text, str):
        return MalformedCredential(MISSING_SEPARATOR)
    salt_hex, sep, key_hex = text.partition(SEPARATOR)
    if not sep:
        return MalformedCredential(MISSING_SEPARATOR)
    if not salt_hex:
        return MalformedCredential(EMPTY_SALT)
    if not key_hex:
        return MalformedCredential(EMPTY_KEY)
    return ParsedCredential(salt_hex=salt_hex, key_hex=key_hex)


def split_credential(text: str) -> ParsedCredential:
    """Like parse_credential, but raise MalformedCredentialError instead of returning the variant."""
    result = parse_credential(text)
    if isinstance(result, MalformedCredential):
        raise MalformedCredentialError(result.reason)
    return result
