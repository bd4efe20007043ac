"""Static pricing configuration, loaded once at import time."""

from datetime import date

from app.schemas.pricing import DemandPeriod, VehiclePricingProfile

DEMAND_PERIODS: tuple[DemandPeriod, ...] = (
    DemandPeriod(name="Vacances scolaires", start=date(2026, 2, 14), end=date(2026, 3, 2), category="car", factor=1.12),
    DemandPeriod(name="Été utilitaires", start=date(2026, 7, 1), end=date(2026, 8, 31), category="van", factor=1.3),
    DemandPeriod(name="Été voitures", start=date(2026, 7, 1), end=date(2026, 8, 31), category="car", factor=1.15),
    DemandPeriod(name="Ponts de mai", start=date(2026, 5, 1), end=date(2026, 5, 11), category="all", factor=1.15),
)

VEHICLES: tuple[VehiclePricingProfile, ...] = (
    VehiclePricingProfile(
        id=1, category="particuliers", name="Peugeot 208 GT Auto",
        base_weekday=48, base_weekend=58, min_price=42, max_price=95, deposit=1000,
    ),
    VehiclePricingProfile(
        id=2, category="particuliers", name="Volkswagen Polo 6",
        base_weekday=45, base_weekend=55, min_price=39, max_price=85, deposit=800,
    ),
    VehiclePricingProfile(
        id=5, category="particuliers", name="Volkswagen Golf 8 Auto",
        base_weekday=57, base_weekend=67, min_price=49, max_price=110, deposit=1000,
    ),
    VehiclePricingProfile(
        id=3, category="utilitaires", name="Citroën Jumpy",
        base_weekday=55, base_weekend=68, min_price=50, max_price=120, deposit=1200,
    ),
    VehiclePricingProfile(
        id=4, category="utilitaires", name="Opel Movano 12m³",
        base_weekday=63, base_weekend=76, min_price=58, max_price=135, deposit=1500,
    ),
)

_VEHICLES_BY_ID: dict[int, VehiclePricingProfile] = {v.id: v for v in VEHICLES}


def get_vehicle(vehicle_id: int) -> VehiclePricingProfile | None:
    return _VEHICLES_BY_ID.get(vehicle_id)
