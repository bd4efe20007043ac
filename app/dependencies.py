from typing import Annotated

from fastapi import Depends, Request

from app.bookings import BookingStore
from app.services.checkout import CheckoutService


def get_checkout_service(request: Request) -> CheckoutService:
    return request.app.state.checkout_service


def get_booking_store(request: Request) -> BookingStore:
    return request.app.state.booking_store


CheckoutDep = Annotated[CheckoutService, Depends(get_checkout_service)]
BookingStoreDep = Annotated[BookingStore, Depends(get_booking_store)]
