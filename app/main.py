import logging
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.bookings import BookingStore
from app.config import Settings
from app.exceptions.custom import PricingMismatchError, VehicleNotFoundError
from app.exceptions.handlers import pricing_mismatch_handler, vehicle_not_found_handler
from app.routers.checkout import router as checkout_router
from app.routers.pricing import router as pricing_router
from app.services.checkout import CheckoutService


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = Settings()

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stdout,
    )

    store = BookingStore(max_metrics=settings.max_pricing_metrics)
    app.state.booking_store = store
    app.state.checkout_service = CheckoutService(
        store, settings.pricing_timezone, settings.app_base_url,
    )

    yield


app = FastAPI(title="Rental Pricing", lifespan=lifespan)

app.add_exception_handler(VehicleNotFoundError, vehicle_not_found_handler)
app.add_exception_handler(PricingMismatchError, pricing_mismatch_handler)

app.include_router(pricing_router)
app.include_router(checkout_router)
