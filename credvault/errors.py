"""
errors.py - Exception types for credential hashing.

Callers on the authentication decision path should only ever see a boolean;
these types exist for internal diagnostics and for callers that create or
migrate credentials.
"""

from __future__ import annotations


class CredentialError(Exception):
    """Base class for every credential failure."""


class EncodingError(CredentialError):
    """A credential could not be produced."""


class RandomSourceUnavailable(EncodingError):
    """The operating system's secure random source failed."""


class MalformedCredentialError(CredentialError, ValueError):
    """A stored credential does not have the ``salt:key`` shape."""

    def __init__(self, reason: str, message: str = "") -> None:
        super().__init__(message or f"malformed credential ({reason})")
        self.reason = reason


class DecodingError(MalformedCredentialError):
    """A credential component is not valid hex."""


class ConfigError(ValueError):
    """Invalid cost parameters or configuration values."""
