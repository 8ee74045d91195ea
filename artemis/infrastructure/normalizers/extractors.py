"""Candidate extractors for loosely typed upstream JSON.

Each logical field is described by an ordered tuple of extractors. The first
extractor that yields a value wins; when none does, the caller's default
applies. Extractors never raise on missing or mistyped data.
"""

from __future__ import annotations

import math
from numbers import Real
from typing import (
    Any,
    Callable,
    Iterable,
    List,
    Mapping,
    Optional,
    Sequence,
    TypeVar,
)

T = TypeVar("T")

Extractor = Callable[[Mapping[str, Any]], Optional[T]]


def first_match(
    payload: Mapping[str, Any],
    extractors: Sequence[Extractor[T]],
    default: Optional[T] = None,
) -> Optional[T]:
    """Apply ``extractors`` in order and return the first non-None result."""
    for extractor in extractors:
        value = extractor(payload)
        if value is not None:
            return value
    return default


def first_match_in(
    payloads: Iterable[Mapping[str, Any]],
    extractors: Sequence[Extractor[T]],
    default: Optional[T] = None,
) -> Optional[T]:
    """Scan ``payloads`` in order; the first payload with a match decides."""
    for payload in payloads:
        value = first_match(payload, extractors)
        if value is not None:
            return value
    return default


def mappings(value: Any) -> List[Mapping[str, Any]]:
    """JSON objects contained in ``value`` if it is a list, else nothing."""
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, Mapping)]


def as_mapping(value: Any) -> Mapping[str, Any]:
    """Return ``value`` if it is a JSON object, an empty mapping otherwise."""
    return value if isinstance(value, Mapping) else {}


def text(key: str) -> Extractor[str]:
    """Non-blank string stored under ``key``."""

    def _extract(payload: Mapping[str, Any]) -> Optional[str]:
        value = payload.get(key)
        if isinstance(value, str) and value.strip():
            return value.strip()
        return None

    return _extract


def flag(key: str) -> Extractor[bool]:
    """Boolean stored under ``key``; strings like ``"true"`` do not count."""

    def _extract(payload: Mapping[str, Any]) -> Optional[bool]:
        value = payload.get(key)
        return value if isinstance(value, bool) else None

    return _extract


def integer(key: str) -> Extractor[int]:
    """Finite number stored under ``key``, truncated to int."""

    def _extract(payload: Mapping[str, Any]) -> Optional[int]:
        value = payload.get(key)
        if isinstance(value, bool) or not isinstance(value, Real):
            return None
        if not math.isfinite(value):
            return None
        return int(value)

    return _extract


def text_list(key: str) -> Extractor[List[str]]:
    """List of strings stored under ``key``; non-string items are dropped."""

    def _extract(payload: Mapping[str, Any]) -> Optional[List[str]]:
        value = payload.get(key)
        if not isinstance(value, list):
            return None
        return [item for item in value if isinstance(item, str)]

    return _extract


def texts(*keys: str) -> List[Extractor[str]]:
    return [text(key) for key in keys]


def flags(*keys: str) -> List[Extractor[bool]]:
    return [flag(key) for key in keys]
