"""Dynamic daily rental pricing.

Pure functions, no I/O. The only time dependency is *as_of* ("today"),
which callers pass explicitly; when omitted it is read once per call.

Per day: base rate (weekday/weekend) × seasonal × bridge/end-of-month
× occupancy × last-minute, then clamped into the vehicle's price band.
"""

from collections.abc import Iterable
from datetime import date, timedelta

from app.catalog import DEMAND_PERIODS
from app.mappers.calendar import clamp, is_weekend, iter_days, round_cents, round_half_up
from app.schemas.pricing import (
    BookingStatus,
    DailyPriceLine,
    DemandPeriod,
    PricingEstimate,
    Reservation,
    VehiclePricingProfile,
)

VAN_CATEGORY = "utilitaires"

# Long-weekend windows around May 1st and May 8th
MAY_BRIDGE_DAYS = frozenset({1, 2, 3, 4, 8, 9, 10, 11})
MAY_BRIDGE_FACTOR = 1.12
END_OF_MONTH_VAN_FACTOR = 1.15

OCCUPANCY_WINDOW_DAYS = 30
LAST_MINUTE_HOURS = 48
LAST_MINUTE_FACTOR = 0.9


def vehicle_type(vehicle: VehiclePricingProfile) -> str:
    """Return "van" for utility vehicles, "car" otherwise."""
    return "van" if vehicle.category == VAN_CATEGORY else "car"


def seasonal_factor(
    day: date,
    vehicle: VehiclePricingProfile,
    demand_periods: Iterable[DemandPeriod] = DEMAND_PERIODS,
) -> float:
    """Product of every matching demand period's factor. Overlaps multiply."""
    kind = vehicle_type(vehicle)
    factor = 1.0
    for period in demand_periods:
        if period.category not in ("all", kind):
            continue
        if period.start <= day <= period.end:
            factor *= period.factor
    return factor


def bridge_factor(day: date, vehicle: VehiclePricingProfile) -> float:
    """May long-weekend boost (all vehicles) and end-of-month moving surge (vans)."""
    factor = 1.0
    if day.month == 5 and day.day in MAY_BRIDGE_DAYS:
        factor *= MAY_BRIDGE_FACTOR
    if (day.day >= 27 or day.day <= 3) and vehicle_type(vehicle) == "van":
        factor *= END_OF_MONTH_VAN_FACTOR
    return factor


def last_minute_factor(day: date, as_of: date) -> float:
    """Discount for days no more than 48 hours after today's midnight.

    Covers past days, today, tomorrow and the day after (exactly 48h).
    """
    hours_ahead = (day - as_of).days * 24
    return LAST_MINUTE_FACTOR if hours_ahead <= LAST_MINUTE_HOURS else 1.0


def occupancy_tier(ratio: float) -> float:
    """Map a booked-days ratio to its multiplier.

    Tiers:
      - < 0.25       → 0.9
      - 0.25 .. 0.5  → 1.0
      - 0.5 .. 0.7   → 1.1 (lower bound exclusive)
      - > 0.7        → 1.2
    """
    if ratio < 0.25:
        return 0.9
    if ratio <= 0.5:
        return 1.0
    if ratio <= 0.7:
        return 1.1
    return 1.2


def booked_days_in_window(
    vehicle: VehiclePricingProfile,
    reservations: Iterable[Reservation],
    as_of: date,
) -> set[date]:
    """Distinct days in [as_of, as_of + 29] covered by a confirmed reservation."""
    window_start = as_of
    window_end = as_of + timedelta(days=OCCUPANCY_WINDOW_DAYS - 1)
    booked: set[date] = set()
    for reservation in reservations:
        if reservation.vehicle_id != vehicle.id or reservation.status != BookingStatus.confirmed:
            continue
        first = max(reservation.start_date, window_start)
        last = min(reservation.end_date, window_end)
        booked.update(iter_days(first, last))
    return booked


def occupancy_factor(
    vehicle: VehiclePricingProfile,
    reservations: Iterable[Reservation],
    as_of: date,
) -> float:
    booked = booked_days_in_window(vehicle, reservations, as_of)
    return occupancy_tier(len(booked) / OCCUPANCY_WINDOW_DAYS)


def compute_estimate(
    start_date: date,
    end_date: date,
    vehicle: VehiclePricingProfile,
    reservations: Iterable[Reservation] | None = None,
    as_of: date | None = None,
    demand_periods: Iterable[DemandPeriod] = DEMAND_PERIODS,
) -> PricingEstimate:
    """Price every day of [start_date, end_date] and aggregate the totals.

    Totals are rounded once at the end: ``final_price`` is the rounded sum
    of the unrounded clamped prices, not the sum of the per-day integers.
    An inverted range yields an empty breakdown and zero totals.
    """
    if as_of is None:
        as_of = date.today()
    periods = tuple(demand_periods)

    occupancy = occupancy_factor(vehicle, reservations or (), as_of)

    base_total = 0.0
    adjusted_total = 0.0
    breakdown: list[DailyPriceLine] = []

    for day in iter_days(start_date, end_date):
        base_day = vehicle.base_weekend if is_weekend(day) else vehicle.base_weekday
        seasonal = seasonal_factor(day, vehicle, periods)
        bridge = bridge_factor(day, vehicle)
        last_minute = last_minute_factor(day, as_of)

        raw = base_day * seasonal * bridge * occupancy * last_minute
        clamped = clamp(raw, vehicle.min_price, vehicle.max_price)

        base_total += base_day
        adjusted_total += clamped
        breakdown.append(
            DailyPriceLine(
                date=day,
                base_day=base_day,
                seasonal_factor=seasonal,
                bridge_factor=bridge,
                occupancy_factor=occupancy,
                last_minute_factor=last_minute,
                raw=round_cents(raw),
                clamped=round_half_up(clamped),
            )
        )

    base_price = round_half_up(base_total)
    final_price = round_half_up(adjusted_total)
    return PricingEstimate(
        base_price=base_price,
        final_price=final_price,
        demand_adjustment=final_price - base_price,
        occupancy_factor=occupancy,
        daily_breakdown=breakdown,
    )
