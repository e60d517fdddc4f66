"""Objectives and key results."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from interactions.models.ids import random_id


class OkrVisibility(str, Enum):
    PRIVATE = "private"
    SHARED = "shared"


@dataclass
class KeyResult:
    """A measurable result; ``progress`` always lies in [0.0, 1.0]."""

    description: str
    progress: float = 0.0
    notes: str | None = None

    def __post_init__(self) -> None:
        self.progress = self.clamp_progress(self.progress)

    @staticmethod
    def clamp_progress(progress: float) -> float:
        return min(max(float(progress), 0.0), 1.0)

    def set_progress(self, progress: float) -> None:
        self.progress = self.clamp_progress(progress)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "description": self.description,
            "progress": self.clamp_progress(self.progress),
        }
        if self.notes is not None:
            data["notes"] = self.notes
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> KeyResult:
        return cls(
            description=str(data["description"]),
            progress=float(data.get("progress", 0.0)),
            notes=data.get("notes"),
        )


def _okr_id() -> str:
    return random_id("okr-")


@dataclass
class Objective:
    title: str
    id: str = field(default_factory=_okr_id)
    description: str | None = None
    key_results: list[KeyResult] = field(default_factory=list)
    visibility: OkrVisibility = OkrVisibility.PRIVATE
    owner: str | None = None
    quarter: str | None = None

    def add_key_result(self, kr: KeyResult) -> None:
        self.key_results.append(kr)

    @property
    def overall_progress(self) -> float:
        """Mean progress over key results; 0.0 when there are none."""
        if not self.key_results:
            return 0.0
        return sum(kr.progress for kr in self.key_results) / len(self.key_results)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"id": self.id, "title": self.title}
        if self.description is not None:
            data["description"] = self.description
        data["key_results"] = [kr.to_dict() for kr in self.key_results]
        data["visibility"] = self.visibility.value
        if self.owner is not None:
            data["owner"] = self.owner
        if self.quarter is not None:
            data["quarter"] = self.quarter
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Objective:
        raw_krs = data.get("key_results") or []
        if not isinstance(raw_krs, list):
            raise TypeError("'key_results' must be a list")
        return cls(
            id=str(data["id"]),
            title=str(data["title"]),
            description=data.get("description"),
            key_results=[KeyResult.from_dict(kr) for kr in raw_krs],
            visibility=OkrVisibility(data.get("visibility", OkrVisibility.PRIVATE.value)),
            owner=data.get("owner"),
            quarter=data.get("quarter"),
        )
