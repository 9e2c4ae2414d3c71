"""Password credentials: scrypt-derived keys stored as "<salt-hex>:<key-hex>"."""
from .auth import CredentialHasher, hash_secret, verify_secret
from .compare import constant_time_equal
from .config import CONSTRAINED, RECOMMENDED, CostParameters, load_cost_parameters
from .errors import (
    ConfigError,
    CredentialError,
    DecodingError,
    EncodingError,
    MalformedCredentialError,
    RandomSourceUnavailable,
)
from .kdf import derive_key, derive_key_async

__all__ = [
    "CONSTRAINED",
    "RECOMMENDED",
    "ConfigError",
    "CostParameters",
    "CredentialError",
    "CredentialHasher",
    "DecodingError",
    "EncodingError",
    "MalformedCredentialError",
    "RandomSourceUnavailable",
    "constant_time_equal",
    "derive_key",
    "derive_key_async",
    "hash_secret",
    "load_cost_parameters",
    "verify_secret",
]
