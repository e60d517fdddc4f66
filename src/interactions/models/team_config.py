"""Team configuration stored in the shared root's config.yaml.

Every block is optional; absent blocks and absent fields are left out of the
stored document entirely.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any


def _compact(obj: Any) -> dict[str, Any]:
    return {f.name: getattr(obj, f.name) for f in fields(obj) if getattr(obj, f.name) is not None}


def _optional_str(data: dict[str, Any], key: str) -> str | None:
    value = data.get(key)
    return None if value is None else str(value)


@dataclass
class PublishConfig:
    """Paths the generated markdown files are published to."""

    manifesto: str | None = None
    vision: str | None = None
    okrs: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PublishConfig:
        return cls(**{k: _optional_str(data, k) for k in ("manifesto", "vision", "okrs")})


@dataclass
class WebhookConfig:
    discord: str | None = None
    slack: str | None = None
    signal: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> WebhookConfig:
        return cls(**{k: _optional_str(data, k) for k in ("discord", "slack", "signal")})


@dataclass
class LintingConfig:
    """Linting on pull requests against ``target_branch``."""

    enabled: bool = False
    target_branch: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> LintingConfig:
        enabled = data.get("enabled", False)
        if not isinstance(enabled, bool):
            raise TypeError("'linting.enabled' must be a boolean")
        return cls(enabled=enabled, target_branch=_optional_str(data, "target_branch"))


@dataclass
class BackupConfig:
    protected_branch: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> BackupConfig:
        return cls(protected_branch=_optional_str(data, "protected_branch"))


_BLOCKS = {
    "publish": PublishConfig,
    "webhooks": WebhookConfig,
    "linting": LintingConfig,
    "backup": BackupConfig,
}


@dataclass
class TeamConfig:
    publish: PublishConfig | None = None
    webhooks: WebhookConfig | None = None
    linting: LintingConfig | None = None
    backup: BackupConfig | None = None

    @classmethod
    def with_defaults(cls) -> TeamConfig:
        return cls(
            publish=PublishConfig(
                manifesto="/MANIFESTO.md",
                vision="/VISION.md",
                okrs="/okrs/",
            ),
            linting=LintingConfig(enabled=True, target_branch="interactions"),
            backup=BackupConfig(protected_branch="main"),
        )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        for key in _BLOCKS:
            block = getattr(self, key)
            if block is not None:
                data[key] = _compact(block)
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> TeamConfig:
        data = data or {}
        kwargs: dict[str, Any] = {}
        for key, block_cls in _BLOCKS.items():
            raw = data.get(key)
            if raw is None:
                continue
            if not isinstance(raw, dict):
                raise TypeError(f"'{key}' must be a mapping")
            kwargs[key] = block_cls.from_dict(raw)
        return cls(**kwargs)
