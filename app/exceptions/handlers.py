import logging

from fastapi import Request
from fastapi.responses import JSONResponse

from .custom import PricingMismatchError, VehicleNotFoundError

logger = logging.getLogger(__name__)


async def vehicle_not_found_handler(_request: Request, exc: VehicleNotFoundError) -> JSONResponse:
    logger.warning("Vehicle not found: %s", exc.vehicle_id)
    return JSONResponse(
        status_code=404,
        content={"error": exc.message},
    )


async def pricing_mismatch_handler(_request: Request, exc: PricingMismatchError) -> JSONResponse:
    logger.warning("Pricing mismatch, returning server estimate (final=%s)", exc.server_estimate.final_price)
    return JSONResponse(
        status_code=409,
        content={
            "error": exc.message,
            "pricingEstimateServer": exc.server_estimate.model_dump(mode="json", by_alias=True),
        },
    )
