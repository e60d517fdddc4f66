"""Team member profile."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class Member:
    """A member's profile, stored at members/<email>/profile.yaml."""

    email: str
    name: str | None = None
    bio: str | None = None
    timezone: str | None = None

    @property
    def display_name(self) -> str:
        """Display name, falling back to the email when unset."""
        return self.name or self.email

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"email": self.email}
        for key in ("name", "bio", "timezone"):
            value = getattr(self, key)
            if value is not None:
                data[key] = value
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Member:
        return cls(
            email=str(data["email"]),
            name=data.get("name"),
            bio=data.get("bio"),
            timezone=data.get("timezone"),
        )
