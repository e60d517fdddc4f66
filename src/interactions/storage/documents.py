"""Read/write helpers for one-entity-per-file documents.

Entities are YAML mappings. Free-text documents (manifesto, vision) are
plain markdown, stored and returned byte-for-byte.
Every write goes through a temp file in the target directory followed by
``os.replace``, so a reader never observes a half-written file.
"""

from __future__ import annotations

import logging
import os
import secrets
from collections.abc import Callable
from pathlib import Path
from typing import Any, TypeVar

import yaml

from interactions.errors import DecodeError

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Malformed documents surface as one of these from ``from_dict``.
_DECODE_ERRORS = (KeyError, ValueError, TypeError, AttributeError)


def dump_yaml(data: dict[str, Any]) -> str:
    return yaml.safe_dump(data, sort_keys=False, allow_unicode=True, default_flow_style=False)


def atomic_write_text(path: Path, content: str) -> None:
    """Replace ``path`` with ``content``, creating parent directories first."""
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = path.with_name(f".{path.name}.{secrets.token_hex(4)}.tmp")
    try:
        with tmp_path.open("x", encoding="utf-8", newline="") as f:
            f.write(content)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp_path, path)
    except BaseException:
        tmp_path.unlink(missing_ok=True)
        raise
    logger.debug("Wrote %s (%d chars)", path, len(content))


def _read_text(path: Path) -> str:
    try:
        return path.read_bytes().decode("utf-8")
    except UnicodeDecodeError as e:
        raise DecodeError(path, f"not UTF-8 text: {e}") from e


def write_document(path: Path, data: dict[str, Any]) -> None:
    atomic_write_text(path, dump_yaml(data))


def parse_document(path: Path, text: str, decode: Callable[[dict[str, Any]], T]) -> T:
    """Decode YAML ``text`` read from ``path``; raise DecodeError on any failure."""
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise DecodeError(path, f"invalid YAML: {e}") from e
    if not isinstance(data, dict):
        raise DecodeError(path, "document is not a mapping")
    try:
        return decode(data)
    except _DECODE_ERRORS as e:
        raise DecodeError(path, f"{type(e).__name__}: {e}") from e


def read_document(path: Path, decode: Callable[[dict[str, Any]], T]) -> T | None:
    """Load a single entity; ``None`` when the file does not exist."""
    if not path.is_file():
        return None
    return parse_document(path, _read_text(path), decode)


def read_text_document(path: Path) -> str | None:
    """Load a free-text document verbatim; ``None`` when the file does not exist."""
    if not path.is_file():
        return None
    return _read_text(path)
