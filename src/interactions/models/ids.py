"""Identifier generation for feed entries and objectives."""

from __future__ import annotations

import time
import uuid


def random_id(prefix: str = "") -> str:
    """Return a random 32-char hex id, safe across concurrent writers."""
    return f"{prefix}{uuid.uuid4().hex}"


def timestamp_id(prefix: str = "") -> str:
    """Legacy wall-clock id: hex seconds followed by hex sub-second nanos.

    Two processes creating an entity within the same nanosecond tick collide,
    so this is only used when ids must match files written by older tools.
    """
    ns = time.time_ns()
    secs, nanos = divmod(ns, 1_000_000_000)
    return f"{prefix}{secs:x}{nanos:x}"
