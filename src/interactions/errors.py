"""Exception hierarchy for the interactions store.

Filesystem failures are not wrapped: they surface as the builtin ``OSError``
family so callers can tell a broken disk from a broken document.
"""

from __future__ import annotations

from pathlib import Path


class InteractionsError(Exception):
    """Base class for all errors raised by this package."""


class ValidationError(InteractionsError, ValueError):
    """A value was rejected before anything was written."""


class DecodeError(InteractionsError):
    """A stored document exists but could not be parsed into an entity."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot decode {path}: {reason}")


class CredentialsNotFoundError(InteractionsError, LookupError):
    """No credentials file exists for the member."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(f"Credentials not found for: {email}")


class TeamNotFoundError(InteractionsError, LookupError):
    """The shared root holds no team record."""
