from typing import Any

from fastapi import APIRouter, Query

from app.catalog import VEHICLES
from app.dependencies import BookingStoreDep, CheckoutDep
from app.schemas.checkout import EstimateRequest
from app.schemas.pricing import PricingEstimate, VehiclePricingProfile

router = APIRouter(prefix="/api")


@router.get("/health")
async def health() -> dict[str, Any]:
    return {"ok": True, "vehicles": len(VEHICLES)}


@router.get("/vehicles", response_model=list[VehiclePricingProfile])
async def list_vehicles() -> list[VehiclePricingProfile]:
    return list(VEHICLES)


@router.post("/pricing/estimate", response_model=PricingEstimate)
async def estimate(request: EstimateRequest, service: CheckoutDep) -> PricingEstimate:
    return service.quote(request.vehicle_id, request.start_date, request.end_date)


@router.get("/bookings-public")
async def bookings_public(
    service: CheckoutDep,
    store: BookingStoreDep,
    months: int = Query(default=6, ge=0, le=24),
) -> dict[str, Any]:
    ranges = store.public_ranges(service.today(), months=months)
    return {"bookings": [r.model_dump(mode="json", by_alias=True) for r in ranges]}


@router.post("/pricing-metrics", status_code=202)
async def pricing_metrics(payload: dict[str, Any], store: BookingStoreDep) -> dict[str, bool]:
    store.record_metric(payload)
    return {"accepted": True}
