"""Team model.

A team is user-defined: a sports team, a multi-organization collaboration or
an open source project. Leaders set purpose and maintain the manifesto;
members commit to following it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class Team:
    name: str
    manifesto: str | None = None
    vision: str | None = None
    leaders: list[str] = field(default_factory=list)
    members: list[str] = field(default_factory=list)

    def add_leader(self, email: str) -> None:
        if email not in self.leaders:
            self.leaders.append(email)

    def add_member(self, email: str) -> None:
        if email not in self.members:
            self.members.append(email)

    def is_leader(self, email: str) -> bool:
        return email in self.leaders

    def is_member(self, email: str) -> bool:
        """Leaders count as members even when absent from ``members``."""
        return email in self.members or self.is_leader(email)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"name": self.name}
        if self.manifesto is not None:
            data["manifesto"] = self.manifesto
        if self.vision is not None:
            data["vision"] = self.vision
        data["leaders"] = list(self.leaders)
        data["members"] = list(self.members)
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Team:
        return cls(
            name=str(data["name"]),
            manifesto=data.get("manifesto"),
            vision=data.get("vision"),
            leaders=_str_list(data.get("leaders")),
            members=_str_list(data.get("members")),
        )


def _str_list(value: Any) -> list[str]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise TypeError(f"expected a list, got {type(value).__name__}")
    return [str(v) for v in value]
