import datetime as dt
from enum import StrEnum

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class BookingStatus(StrEnum):
    pending = "PENDING"
    confirmed = "CONFIRMED"
    cancelled = "CANCELLED"


class CamelModel(BaseModel):
    """Serializes with camelCase keys, accepts both spellings on input."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class VehiclePricingProfile(CamelModel):
    model_config = ConfigDict(frozen=True)

    id: int
    category: str  # "particuliers" | "utilitaires"
    name: str = ""
    base_weekday: float
    base_weekend: float
    min_price: float
    max_price: float
    deposit: float = 0  # not used in pricing math


class DemandPeriod(CamelModel):
    model_config = ConfigDict(frozen=True)

    name: str
    start: dt.date
    end: dt.date  # inclusive
    category: str  # "car" | "van" | "all"
    factor: float


class Reservation(CamelModel):
    model_config = ConfigDict(frozen=True)

    vehicle_id: int
    start_date: dt.date
    end_date: dt.date
    status: BookingStatus = BookingStatus.confirmed


class DailyPriceLine(CamelModel):
    date: dt.date
    base_day: float
    seasonal_factor: float
    bridge_factor: float
    occupancy_factor: float
    last_minute_factor: float
    raw: float  # rounded to 2 decimals
    clamped: int  # rounded to the nearest integer


class PricingEstimate(CamelModel):
    base_price: int
    final_price: int
    demand_adjustment: int
    occupancy_factor: float
    daily_breakdown: list[DailyPriceLine] = []
