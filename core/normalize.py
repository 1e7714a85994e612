"""
core/normalize.py
────────────────────────────────────────────────────────────────────────
Normalisation helpers shared by the deduplicator and the ranker.

Everything here coerces instead of raising: names fall back to ``""``,
numbers fall back to ``0`` and tag lists tolerate ``None``.
"""
from __future__ import annotations

import math
import numbers
from typing import Any, Iterable


def normalize_name(value: Any) -> str:
    """Case/whitespace-insensitive comparison key for a ``name`` field."""
    if value is None:
        return ""
    return str(value).strip().lower()


def normalize_terms(values: Iterable[Any] | str | None) -> frozenset[str]:
    """Lower-case and trim a collection of profile terms, dropping blanks."""
    if values is None:
        return frozenset()
    if isinstance(values, str):
        values = [values]
    out = (normalize_name(v) for v in values)
    return frozenset(v for v in out if v)


def tag_text(raw: Any) -> str:
    """
    The lower-cased tag string substring matching runs against.

    Lists of tags are joined with commas so that ``["vegan", "nuts"]``
    and ``"Vegan,Nuts"`` behave identically.
    """
    if raw is None:
        return ""
    if isinstance(raw, str):
        return raw.lower()
    return ",".join(str(t) for t in raw).lower()


def parse_tags(raw: Any) -> frozenset[str]:
    """Comma-split, trimmed, lower-cased tag set (blanks dropped)."""
    return normalize_terms(tag_text(raw).split(","))


def contains_any(tags: Iterable[str], terms: Iterable[str]) -> bool:
    """True when at least one term is a substring of at least one tag."""
    tags = tuple(tags)
    return any(t in tag for t in terms for tag in tags)


def to_number(value: Any, default: float = 0.0) -> float:
    """Best-effort float; ``None``, NaN, bools and junk become ``default``."""
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, numbers.Real):
        out = float(value)  # type: ignore[arg-type]
    else:
        try:
            out = float(str(value).strip())
        except ValueError:
            return default
    return default if math.isnan(out) else out
