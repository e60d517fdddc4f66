"""Interaction model.

Logged moments between people: a lightweight journal of kudos, feedback,
apologies, check-ins and retrospectives. On disk the author and recipients
keep the original ``from`` / ``with`` keys.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any

from interactions.errors import ValidationError
from interactions.models.ids import random_id

_LABELS = {
    "appreciation": "Appreciation",
    "feedback": "Feedback",
    "apology": "Apology",
    "check_in": "Check-in",
    "retrospective": "Retrospective",
}


class InteractionKind(str, Enum):
    APPRECIATION = "appreciation"
    FEEDBACK = "feedback"
    APOLOGY = "apology"
    CHECK_IN = "check_in"
    RETROSPECTIVE = "retrospective"

    @property
    def label(self) -> str:
        """Human-readable label, e.g. ``Check-in``."""
        return _LABELS[self.value]


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def parse_timestamp(value: Any) -> datetime:
    """Accept an ISO 8601 string or a YAML-native datetime; return aware UTC."""
    if isinstance(value, datetime):
        dt = value
    elif isinstance(value, str):
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        dt = datetime.fromisoformat(text)
    else:
        raise TypeError(f"timestamp must be a string, got {type(value).__name__}")
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


@dataclass(frozen=True)
class Interaction:
    """A logged interaction. Never updated or deleted once written."""

    kind: InteractionKind
    author: str
    recipients: list[str]
    note: str
    id: str = field(default_factory=random_id)
    timestamp: datetime = field(default_factory=utcnow)
    shared: bool = False

    def __post_init__(self) -> None:
        if not self.recipients:
            raise ValidationError("An interaction needs at least one recipient")
        object.__setattr__(self, "recipients", list(self.recipients))
        object.__setattr__(self, "timestamp", parse_timestamp(self.timestamp))

    @classmethod
    def create(
        cls,
        kind: InteractionKind,
        author: str,
        recipients: list[str],
        note: str,
        shared: bool = False,
    ) -> Interaction:
        return cls(
            kind=kind,
            author=author,
            recipients=list(recipients),
            note=note,
            shared=shared,
        )

    @classmethod
    def appreciation(
        cls, author: str, recipients: list[str], note: str, shared: bool = False
    ) -> Interaction:
        return cls.create(InteractionKind.APPRECIATION, author, recipients, note, shared)

    @classmethod
    def feedback(
        cls, author: str, recipients: list[str], note: str, shared: bool = False
    ) -> Interaction:
        return cls.create(InteractionKind.FEEDBACK, author, recipients, note, shared)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "kind": self.kind.value,
            "from": self.author,
            "with": list(self.recipients),
            "note": self.note,
            "timestamp": self.timestamp.isoformat(),
            "shared": self.shared,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Interaction:
        recipients = data["with"]
        if not isinstance(recipients, list):
            raise TypeError("'with' must be a list")
        shared = data.get("shared", False)
        if not isinstance(shared, bool):
            raise TypeError("'shared' must be a boolean")
        return cls(
            id=str(data["id"]),
            kind=InteractionKind(data["kind"]),
            author=str(data["from"]),
            recipients=[str(r) for r in recipients],
            note=str(data["note"]),
            timestamp=parse_timestamp(data["timestamp"]),
            shared=shared,
        )
