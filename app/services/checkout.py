import logging
import uuid
from datetime import date, datetime, timezone
from zoneinfo import ZoneInfo

from app.bookings import BookingStore
from app.catalog import get_vehicle
from app.exceptions.custom import PricingMismatchError, VehicleNotFoundError
from app.mappers.rate_calculator import compute_estimate
from app.mappers.reconciler import are_consistent, estimate_field
from app.schemas.checkout import BookingRecord, CheckoutRequest, CheckoutResponse
from app.schemas.pricing import BookingStatus, PricingEstimate, VehiclePricingProfile

logger = logging.getLogger(__name__)


class CheckoutService:
    def __init__(self, store: BookingStore, timezone_name: str, app_base_url: str):
        self._store = store
        self._tz = ZoneInfo(timezone_name)
        self._app_base_url = app_base_url.rstrip("/")

    def today(self) -> date:
        """Current calendar date in the configured pricing time zone."""
        return datetime.now(self._tz).date()

    def _vehicle(self, vehicle_id: int) -> VehiclePricingProfile:
        vehicle = get_vehicle(vehicle_id)
        if vehicle is None:
            raise VehicleNotFoundError(vehicle_id)
        return vehicle

    def quote(
        self, vehicle_id: int, start_date: date, end_date: date, as_of: date | None = None,
    ) -> PricingEstimate:
        """Authoritative estimate against the current reservation snapshot."""
        vehicle = self._vehicle(vehicle_id)
        return compute_estimate(
            start_date,
            end_date,
            vehicle,
            self._store.reservation_snapshot(),
            as_of=as_of or self.today(),
        )

    def checkout(self, request: CheckoutRequest, as_of: date | None = None) -> CheckoutResponse:
        """Recompute, reconcile, then record the booking at the server price.

        Raises PricingMismatchError carrying the server estimate when the
        client's quote does not match exactly.
        """
        vehicle = self._vehicle(request.vehicle_id)
        server_estimate = self.quote(
            vehicle.id, request.start_date, request.end_date, as_of=as_of,
        )

        if not are_consistent(request.pricing_estimate, server_estimate):
            claimed_final = estimate_field(request.pricing_estimate, "final_price")
            logger.warning(
                "Pricing mismatch for vehicle %s %s..%s: claimed=%s server=%s",
                vehicle.id, request.start_date, request.end_date,
                claimed_final, server_estimate.final_price,
            )
            raise PricingMismatchError(server_estimate)

        booking_id = str(uuid.uuid4())
        # No payment provider: the booking is confirmed immediately (simulation mode)
        booking = self._store.add_booking(
            BookingRecord(
                booking_id=booking_id,
                vehicle_id=vehicle.id,
                vehicle_name=vehicle.name,
                customer_name=request.customer.name,
                customer_email=request.customer.email,
                customer_phone=request.customer.phone,
                start_date=request.start_date,
                end_date=request.end_date,
                total_paid_eur=server_estimate.final_price,
                notes=request.notes or "",
                status=BookingStatus.confirmed,
                created_at=datetime.now(timezone.utc),
            )
        )
        logger.info(
            "Booking %s recorded for vehicle %s (%s EUR)",
            booking.booking_id, vehicle.id, booking.total_paid_eur,
        )

        return CheckoutResponse(
            url=f"{self._app_base_url}/success?bookingId={booking_id}",
            booking_id=booking_id,
            pricing_estimate_server=server_estimate,
        )
