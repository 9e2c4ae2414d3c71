"""
auth.py - Password credential hashing and verification using scrypt.

Responsibilities:
- Hash a password into a "<salt-hex>:<key-hex>" credential for storage
- Verify a password against a stored credential at login time

The cost parameters are handed to CredentialHasher when it is built and never
change afterwards. check()/check_sync() are the entry points for login
decisions: they collapse "malformed record" into False so the caller cannot
tell it apart from a wrong password. The reason only reaches the log.
"""

from __future__ import annotations

import logging
from typing import Optional, Tuple

from . import codec
from .compare import constant_time_equal
from .config import CostParameters, load_cost_parameters
from .errors import MalformedCredentialError
from .kdf import derive_key, derive_key_async


logger = logging.getLogger(__name__)

# salt for the throwaway derivation run on malformed records
_DUMMY_SALT_HEX = "0" * (2 * codec.SALT_BYTES)


def _unpack(credential: str) -> Tuple[str, bytes]:
    """Return (salt_hex, stored_key). Both components must be valid hex."""
    parsed = codec.split_credential(credential)
    parsed.validate()
    return parsed.salt_hex, parsed.key_bytes()


class CredentialHasher:
    def __init__(self, params: Optional[CostParameters] = None) -> None:
        self.params = params if params is not None else load_cost_parameters()

    def __repr__(self) -> str:
        return f"CredentialHasher(n={self.params.n}, r={self.params.r}, p={self.params.p}, dklen={self.params.dklen})"

    # Coroutines ---------------------------------------------------------
    async def hash(self, password: str) -> str:
        """Return a fresh credential for ``password``. Raises RandomSourceUnavailable."""
        salt_hex = codec.new_salt().hex()
        key = await derive_key_async(password, salt_hex, self.params)
        return codec.encode_credential(salt_hex, key)

    async def verify(self, credential: str, password: str) -> bool:
        """
        True iff ``password`` re-derives the stored key.

        Raises MalformedCredentialError (or its DecodingError subclass) for
        records that are not two non-empty hex components.
        """
        salt_hex, stored_key = _unpack(credential)
        candidate = await derive_key_async(password, salt_hex, self.params)
        return constant_time_equal(candidate, stored_key)

    async def check(self, credential: str, password: str) -> bool:
        """Boolean-only verify for login decisions. Malformed records fail closed."""
        try:
            return await self.verify(credential, password)
        except MalformedCredentialError as exc:
            logger.warning("rejecting malformed stored credential: %s", exc.reason)
            # same scrypt cost as a wrong password
            await derive_key_async(password, _DUMMY_SALT_HEX, self.params)
            return False

    # Blocking twins -----------------------------------------------------
    def hash_sync(self, password: str) -> str:
        salt_hex = codec.new_salt().hex()
        key = derive_key(password, salt_hex, self.params)
        return codec.encode_credential(salt_hex, key)

    def verify_sync(self, credential: str, password: str) -> bool:
        salt_hex, stored_key = _unpack(credential)
        candidate = derive_key(password, salt_hex, self.params)
        return constant_time_equal(candidate, stored_key)

    def check_sync(self, credential: str, password: str) -> bool:
        try:
            return self.verify_sync(credential, password)
        except MalformedCredentialError as exc:
            logger.warning("rejecting malformed stored credential: %s", exc.reason)
            derive_key(password, _DUMMY_SALT_HEX, self.params)
            return False


_default_hasher: Optional[CredentialHasher] = None


def default_hasher() -> CredentialHasher:
    """Process-wide hasher built from the environment on first use."""
    global _default_hasher
    if _default_hasher is None:
        _default_hasher = CredentialHasher(load_cost_parameters())
    return _default_hasher


def hash_secret(secret: str) -> str:
    """Return a credential string for ``secret`` using the default hasher."""
    return default_hasher().hash_sync(secret)


def verify_secret(stored_hash: str, secret: str) -> bool:
    """Verify a secret against a stored credential. Malformed records give False."""
    return default_hasher().check_sync(stored_hash, secret)
