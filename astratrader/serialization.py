"""Conversion of monotonic instants to and from a JSON-friendly form.

An instant is stored as the ``[seconds, nanoseconds]`` that had elapsed since
it when it was saved, and restored relative to the moment of loading.
"""

from __future__ import annotations

import time
from typing import Any

_NANOS_PER_SECOND = 1_000_000_000
_MAX_SECS = 2**64 - 1
_MAX_NANOS = 2**32 - 1


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def serialize_instant(instant: float, now: float | None = None) -> list[int]:
    """Return the time elapsed since ``instant`` as ``[secs, nanos]``."""
    if now is None:
        now = time.monotonic()
    elapsed = max(0.0, now - instant)
    total_ns = round(elapsed * _NANOS_PER_SECOND)
    secs, nanos = divmod(total_ns, _NANOS_PER_SECOND)
    return [secs, nanos]


def deserialize_instant(value: Any, now: float | None = None) -> float:
    """Rebuild an instant from ``[secs, nanos]`` elapsed before ``now``."""
    if not isinstance(value, (list, tuple)) or len(value) != 2:
        raise ValueError("an instant must be a pair of [seconds, nanoseconds]")
    secs, nanos = value
    if not (_is_int(secs) and _is_int(nanos)):
        raise ValueError("instant components must be integers")
    if not 0 <= secs <= _MAX_SECS or not 0 <= nanos <= _MAX_NANOS:
        raise ValueError("instant components out of range")
    if now is None:
        now = time.monotonic()
    return now - (secs + nanos / _NANOS_PER_SECOND)


def serialize_optional_instant(instant: float | None, now: float | None = None) -> list[int] | None:
    """Like :func:`serialize_instant`, passing ``None`` through."""
    if instant is None:
        return None
    return serialize_instant(instant, now)


def deserialize_optional_instant(value: Any, now: float | None = None) -> float | None:
    """Like :func:`deserialize_instant`, passing ``None`` through."""
    if value is None:
        return None
    return deserialize_instant(value, now)