"""Pincode authentication for team members.

A pincode is hashed as ``sha256(salt || utf8(pincode))`` with a fresh 16-byte
random salt; salt and hash are stored as lowercase hex in the member's
credentials file.

The pincode identifies a person at the keyboard. It is not an encryption key,
and the 4-character minimum is a product floor, not a security guarantee.
"""

from __future__ import annotations

import hashlib
import hmac
import secrets
from dataclasses import dataclass
from typing import Any

from interactions.errors import ValidationError

SALT_LENGTH = 16
MIN_PINCODE_LENGTH = 4


def generate_salt() -> bytes:
    return secrets.token_bytes(SALT_LENGTH)


def hash_pincode(pincode: str, salt: bytes) -> str:
    hasher = hashlib.sha256()
    hasher.update(salt)
    hasher.update(pincode.encode("utf-8"))
    return hasher.hexdigest()


def _validate_pincode(pincode: str) -> None:
    if len(pincode) < MIN_PINCODE_LENGTH:
        raise ValidationError(f"Pincode must be at least {MIN_PINCODE_LENGTH} characters")


def _digests_equal(a: str, b: str) -> bool:
    """Compare two hex digests without early exit on the first differing byte.

    The length check returns immediately, so a length mismatch is observable
    through timing. Both digests are sha256 hex, so this only reveals that a
    stored hash is malformed.
    """
    left, right = a.encode("utf-8"), b.encode("utf-8")
    if len(left) != len(right):
        return False
    return hmac.compare_digest(left, right)


@dataclass
class Credentials:
    salt: str
    pincode_hash: str

    @classmethod
    def create(cls, pincode: str) -> Credentials:
        """Hash ``pincode`` under a new random salt."""
        _validate_pincode(pincode)
        salt = generate_salt()
        return cls(salt=salt.hex(), pincode_hash=hash_pincode(pincode, salt))

    def verify(self, pincode: str) -> bool:
        """Check ``pincode``. Malformed stored state yields False, never an error."""
        try:
            salt = bytes.fromhex(self.salt)
        except (TypeError, ValueError):
            return False
        if not isinstance(self.pincode_hash, str):
            return False
        return _digests_equal(hash_pincode(pincode, salt), self.pincode_hash)

    def rotate(self, new_pincode: str) -> None:
        """Replace the pincode in place. A new salt is drawn on every rotation."""
        _validate_pincode(new_pincode)
        salt = generate_salt()
        self.pincode_hash = hash_pincode(new_pincode, salt)
        self.salt = salt.hex()

    def to_dict(self) -> dict[str, Any]:
        return {"salt": self.salt, "pincode_hash": self.pincode_hash}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Credentials:
        return cls(salt=str(data["salt"]), pincode_hash=str(data["pincode_hash"]))


@dataclass
class MemberCredentials:
    """On-disk shape of members/<email>/credentials.yaml."""

    email: str
    credentials: Credentials

    @classmethod
    def create(cls, email: str, pincode: str) -> MemberCredentials:
        return cls(email=email, credentials=Credentials.create(pincode))

    def verify(self, pincode: str) -> bool:
        return self.credentials.verify(pincode)

    def to_dict(self) -> dict[str, Any]:
        return {"email": self.email, "credentials": self.credentials.to_dict()}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> MemberCredentials:
        return cls(email=str(data["email"]), credentials=Credentials.from_dict(data["credentials"]))
