from app.schemas.pricing import PricingEstimate


class VehicleNotFoundError(Exception):
    def __init__(self, vehicle_id: int):
        self.vehicle_id = vehicle_id
        self.message = f"Vehicle {vehicle_id} not found"
        super().__init__(self.message)


class PricingMismatchError(Exception):
    """Client-quoted estimate differs from the server's recomputation."""

    def __init__(self, server_estimate: PricingEstimate):
        self.server_estimate = server_estimate
        self.message = "Pricing mismatch detected. Please refresh and try again."
        super().__init__(self.message)
