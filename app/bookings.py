from __future__ import annotations

from collections import deque
from datetime import date, datetime, timezone
from typing import Any

from dateutil.relativedelta import relativedelta

from app.schemas.checkout import BookingRecord, PublicBookingRange
from app.schemas.pricing import BookingStatus, Reservation


class BookingStore:
    """Process-local bookings plus a bounded buffer of client pricing metrics."""

    def __init__(self, max_metrics: int = 5000) -> None:
        self._bookings: dict[str, BookingRecord] = {}
        self._metrics: deque[dict[str, Any]] = deque(maxlen=max_metrics)

    def add_booking(self, booking: BookingRecord) -> BookingRecord:
        self._bookings[booking.booking_id] = booking
        return booking

    def get_booking(self, booking_id: str) -> BookingRecord | None:
        return self._bookings.get(booking_id)

    def list_bookings(self) -> list[BookingRecord]:
        return list(self._bookings.values())

    def reservation_snapshot(self) -> list[Reservation]:
        """Point-in-time copy of every booking as a pricing reservation."""
        return [
            Reservation(
                vehicle_id=b.vehicle_id,
                start_date=b.start_date,
                end_date=b.end_date,
                status=b.status,
            )
            for b in self._bookings.values()
        ]

    def public_ranges(self, today: date, months: int = 6) -> list[PublicBookingRange]:
        """Confirmed date ranges overlapping [today, today + months], no customer data."""
        horizon = today + relativedelta(months=months)
        return [
            PublicBookingRange(vehicle_id=b.vehicle_id, start_date=b.start_date, end_date=b.end_date)
            for b in self._bookings.values()
            if b.status == BookingStatus.confirmed and b.end_date >= today and b.start_date <= horizon
        ]

    def record_metric(self, payload: dict[str, Any]) -> None:
        self._metrics.append({**payload, "receivedAt": datetime.now(timezone.utc).isoformat()})

    def list_metrics(self, limit: int | None = None) -> list[dict[str, Any]]:
        metrics = list(self._metrics)
        return metrics[-limit:] if limit else metrics
