"""
core/dedup.py
────────────────────────────────────────────────────────────────────────
Catalog deduplication.

Upstream catalog tables routinely hold near-identical rows (the same meal
typed twice, a price stored as 12.0 and 12.000001, …).  `deduplicate()`
collapses them with a kind-specific equivalence rule:

    meal      name  +  |price_a − price_b| < 0.01
    category  name
    plan      name  +  meals_per_week (exact)

Names compare case-insensitively after trimming.  The first record of an
equivalence class wins entirely; output keeps first-occurrence order and
contains the *same objects* that were passed in.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, List, Mapping, TypeVar

from core.models.catalog import CatalogKind
from core.normalize import normalize_name, to_number

_LOG = logging.getLogger(__name__)

MEAL_PRICE_TOLERANCE = 0.01
_PRICE_DIGITS = 9

R = TypeVar("R")
EquivalenceRule = Callable[[Any, Any], bool]


def _field(record: Any, name: str) -> Any:
    """Read a field from a tagged record or from a plain row mapping."""
    if isinstance(record, Mapping):
        return record.get(name)
    return getattr(record, name, None)


def _name(record: Any) -> str:
    return normalize_name(_field(record, "name"))


# ──────────────────────────── rules ───────────────────────────── #
def meals_equivalent(a: Any, b: Any) -> bool:
    if _name(a) != _name(b):
        return False
    price_a = to_number(_field(a, "price"))
    price_b = to_number(_field(b, "price"))
    # 12.01 - 12.00 is 0.00999… in binary floating point; a one-cent gap
    # must still count as a different price
    return round(abs(price_a - price_b), _PRICE_DIGITS) < MEAL_PRICE_TOLERANCE


def categories_equivalent(a: Any, b: Any) -> bool:
    return _name(a) == _name(b)


def plans_equivalent(a: Any, b: Any) -> bool:
    return (
        _name(a) == _name(b)
        and _field(a, "meals_per_week") == _field(b, "meals_per_week")
    )


RULES: dict[CatalogKind, EquivalenceRule] = {
    CatalogKind.meal: meals_equivalent,
    CatalogKind.category: categories_equivalent,
    CatalogKind.plan: plans_equivalent,
}


# ──────────────────────────── pass ────────────────────────────── #
def deduplicate(records: Iterable[R], rule: EquivalenceRule) -> List[R]:
    """
    Keep the first record of every equivalence class, in input order.

    Quadratic by construction: catalogs are tens to low hundreds of rows
    and every record is checked against everything already kept.
    """
    if records is None:
        raise TypeError("records must be a list, not None")

    kept: List[R] = []
    seen = 0
    for rec in records:
        seen += 1
        if _field(rec, "name") is None:
            _LOG.warning("catalog record without a name – comparing as ''")
        if not any(rule(existing, rec) for existing in kept):
            kept.append(rec)

    _LOG.debug("dedup kept %d of %d records", len(kept), seen)
    return kept


def deduplicate_catalog(kind: CatalogKind | str, records: Iterable[R]) -> List[R]:
    """`deduplicate()` with the rule registered for ``kind``."""
    try:
        rule = RULES[CatalogKind(kind)]
    except ValueError:
        raise ValueError(f"unknown catalog kind: {kind!r}") from None
    return deduplicate(records, rule)
