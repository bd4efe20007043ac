from __future__ import annotations

from datetime import date, datetime
from typing import Any

from app.schemas.pricing import BookingStatus, CamelModel, PricingEstimate


class EstimateRequest(CamelModel):
    vehicle_id: int
    start_date: date
    end_date: date


class Customer(CamelModel):
    name: str
    email: str
    phone: str


class CheckoutRequest(CamelModel):
    vehicle_id: int
    start_date: date
    end_date: date
    customer: Customer
    notes: str | None = None
    # Raw client payload; validated by the reconciler, which fails closed
    pricing_estimate: dict[str, Any] | None = None


class CheckoutResponse(CamelModel):
    url: str
    booking_id: str
    pricing_estimate_server: PricingEstimate


class BookingRecord(CamelModel):
    booking_id: str
    vehicle_id: int
    vehicle_name: str
    customer_name: str
    customer_email: str
    customer_phone: str
    start_date: date
    end_date: date
    total_paid_eur: int
    notes: str = ""
    status: BookingStatus
    created_at: datetime


class PublicBookingRange(CamelModel):
    vehicle_id: int
    start_date: date
    end_date: date
