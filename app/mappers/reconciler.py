"""Exact-match comparison of a client-quoted estimate against the server's.

Fail-closed: anything absent or malformed is "not consistent". Only dates
and rounded monetary amounts are read from either side, never the factors,
so a claimed payload needs nothing beyond ``basePrice``, ``finalPrice`` and
``dailyBreakdown[].date`` / ``.clamped`` (camelCase or snake_case keys).
"""

import math
from collections.abc import Mapping
from typing import Any

from pydantic.alias_generators import to_camel

from app.mappers.calendar import round_half_up
from app.schemas.pricing import PricingEstimate

Estimate = PricingEstimate | Mapping[str, Any] | None


def _as_mapping(estimate: Any) -> Mapping[str, Any] | None:
    if isinstance(estimate, PricingEstimate):
        return estimate.model_dump(mode="json", by_alias=True)
    if isinstance(estimate, Mapping):
        return estimate
    return None


def estimate_field(estimate: Any, name: str) -> Any:
    """Read *name* (snake_case) from an estimate, trying the camelCase key first."""
    data = _as_mapping(estimate)
    if data is None:
        return None
    camel = to_camel(name)
    if camel in data:
        return data[camel]
    return data.get(name)


def _rounded(value: Any) -> int | None:
    """Half-up rounded amount, or None for anything that is not a finite number."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if not math.isfinite(value):
        return None
    return round_half_up(value)


def _amounts_match(claimed: Any, authoritative: Any) -> bool:
    mine, theirs = _rounded(claimed), _rounded(authoritative)
    return mine is not None and mine == theirs


def _days(estimate: Any) -> list[Any]:
    days = estimate_field(estimate, "daily_breakdown")
    return days if isinstance(days, list) else []


def are_consistent(claimed: Estimate, authoritative: Estimate) -> bool:
    """True only when totals, dates and daily clamped prices all match exactly.

    Dates must be identical ISO strings; ``"2026-06-08T00:00:00"`` or an epoch
    number does not match ``"2026-06-08"``.
    """
    claimed = _as_mapping(claimed)
    authoritative = _as_mapping(authoritative)
    if claimed is None or authoritative is None:
        return False

    for name in ("base_price", "final_price"):
        if not _amounts_match(estimate_field(claimed, name), estimate_field(authoritative, name)):
            return False

    claimed_days = _days(claimed)
    authoritative_days = _days(authoritative)
    if len(claimed_days) != len(authoritative_days):
        return False

    for mine, theirs in zip(claimed_days, authoritative_days):
        if not isinstance(mine, Mapping) or not isinstance(theirs, Mapping):
            return False
        my_date, their_date = mine.get("date"), theirs.get("date")
        if not isinstance(my_date, str) or my_date != their_date:
            return False
        if not _amounts_match(mine.get("clamped"), theirs.get("clamped")):
            return False
    return True
