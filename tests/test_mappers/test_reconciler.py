"""Tests for the estimate reconciler (pure functions, no I/O)."""

from datetime import date

import pytest

from app.catalog import get_vehicle
from app.mappers.rate_calculator import compute_estimate
from app.mappers.reconciler import are_consistent, estimate_field

AS_OF = date(2026, 1, 5)


@pytest.fixture
def estimate():
    return compute_estimate(date(2026, 6, 8), date(2026, 6, 12), get_vehicle(1), [], as_of=AS_OF)


def test_reflexive(estimate):
    assert are_consistent(estimate, estimate) is True


def test_independent_recomputations_match(estimate):
    again = compute_estimate(date(2026, 6, 8), date(2026, 6, 12), get_vehicle(1), [], as_of=AS_OF)
    assert are_consistent(again, estimate) is True


def test_client_json_payload_matches(estimate):
    """A camelCase JSON payload as sent by a client is accepted."""
    payload = estimate.model_dump(mode="json", by_alias=True)
    assert are_consistent(payload, estimate) is True


def test_factors_are_not_compared(estimate):
    claimed = estimate.model_copy(deep=True)
    for line in claimed.daily_breakdown:
        line.seasonal_factor = 3.0
        line.occupancy_factor = 0.1
        line.raw = 999.99
    claimed.occupancy_factor = 1.2
    assert are_consistent(claimed, estimate) is True


def test_none_is_never_consistent(estimate):
    assert are_consistent(None, estimate) is False
    assert are_consistent(estimate, None) is False
    assert are_consistent(None, None) is False


def test_different_base_price(estimate):
    claimed = estimate.model_copy(update={"base_price": estimate.base_price + 1})
    assert are_consistent(claimed, estimate) is False


def test_different_final_price(estimate):
    claimed = estimate.model_copy(update={"final_price": estimate.final_price - 1})
    assert are_consistent(claimed, estimate) is False


def test_single_daily_clamped_differs(estimate):
    claimed = estimate.model_copy(deep=True)
    claimed.daily_breakdown[2].clamped += 1
    assert are_consistent(claimed, estimate) is False


def test_date_differs_at_same_index(estimate):
    claimed = estimate.model_copy(deep=True)
    claimed.daily_breakdown[0].date = date(2026, 6, 7)
    assert are_consistent(claimed, estimate) is False


def test_length_differs(estimate):
    claimed = estimate.model_copy(deep=True)
    claimed.daily_breakdown.pop()
    assert are_consistent(claimed, estimate) is False


def test_malformed_payload_fails_closed(estimate):
    assert are_consistent({"foo": "bar"}, estimate) is False
    assert are_consistent({"basePrice": "abc", "finalPrice": 1}, estimate) is False
    assert are_consistent("not an estimate", estimate) is False


def test_missing_breakdown_does_not_match_days(estimate):
    payload = {
        "basePrice": estimate.base_price,
        "finalPrice": estimate.final_price,
        "demandAdjustment": estimate.demand_adjustment,
        "occupancyFactor": estimate.occupancy_factor,
    }
    assert are_consistent(payload, estimate) is False


def test_whole_float_amounts_accepted(estimate):
    payload = estimate.model_dump(mode="json", by_alias=True)
    payload["finalPrice"] = float(payload["finalPrice"])
    for day in payload["dailyBreakdown"]:
        day["clamped"] = float(day["clamped"])
    assert are_consistent(payload, estimate) is True


def test_minimal_payload_with_compared_fields_only(estimate):
    """Factor fields are never read, so a payload without them still matches."""
    payload = {
        "basePrice": estimate.base_price,
        "finalPrice": estimate.final_price,
        "dailyBreakdown": [
            {"date": line.date.isoformat(), "clamped": line.clamped}
            for line in estimate.daily_breakdown
        ],
    }
    assert are_consistent(payload, estimate) is True


def test_snake_case_payload_matches(estimate):
    payload = estimate.model_dump(mode="json")
    assert "final_price" in payload
    assert are_consistent(payload, estimate) is True


def test_fractional_amounts_are_rounded(estimate):
    """216.2 rounds to 216 and 43.2 to 43, same as the server's integers."""
    payload = estimate.model_dump(mode="json", by_alias=True)
    payload["finalPrice"] = 216.2
    payload["basePrice"] = 239.6
    for day in payload["dailyBreakdown"]:
        day["clamped"] = 43.2
    assert are_consistent(payload, estimate) is True


def test_fractional_amount_rounding_past_half_differs(estimate):
    payload = estimate.model_dump(mode="json", by_alias=True)
    payload["dailyBreakdown"][3]["clamped"] = 43.5
    assert are_consistent(payload, estimate) is False


@pytest.mark.parametrize(
    "claimed_date",
    [
        "2026-06-08T00:00:00",
        "2026-06-08T00:00:00Z",
        1780876800,  # 2026-06-08 00:00 UTC as epoch seconds
        "20260608",
        " 2026-06-08",
        None,
    ],
)
def test_non_canonical_dates_rejected(estimate, claimed_date):
    payload = estimate.model_dump(mode="json", by_alias=True)
    payload["dailyBreakdown"][0]["date"] = claimed_date
    assert are_consistent(payload, estimate) is False


@pytest.mark.parametrize("bad_amount", ["216", None, True, float("nan"), float("inf"), [216]])
def test_non_numeric_amounts_rejected(estimate, bad_amount):
    payload = estimate.model_dump(mode="json", by_alias=True)
    payload["finalPrice"] = bad_amount
    assert are_consistent(payload, estimate) is False


def test_missing_daily_clamped_rejected(estimate):
    payload = estimate.model_dump(mode="json", by_alias=True)
    del payload["dailyBreakdown"][1]["clamped"]
    assert are_consistent(payload, estimate) is False


def test_non_mapping_daily_line_rejected(estimate):
    payload = estimate.model_dump(mode="json", by_alias=True)
    payload["dailyBreakdown"][0] = "2026-06-08"
    assert are_consistent(payload, estimate) is False


def test_estimate_field_reads_both_spellings(estimate):
    assert estimate_field({"finalPrice": 10}, "final_price") == 10
    assert estimate_field({"final_price": 11}, "final_price") == 11
    assert estimate_field(estimate, "final_price") == estimate.final_price
    assert estimate_field(None, "final_price") is None
    assert estimate_field("garbage", "final_price") is None
