"""Modification resolver - overlays a modification's overrides onto its original booking"""

from rental_ledger.domain.exceptions import InvalidRecordError
from rental_ledger.domain.models import Booking, BookingModification


def resolve(original: Booking, modification: BookingModification) -> Booking:
    """
    Build the effective booking after a modification.

    start_date, end_date and distance_km take the override when it is set
    (None means unchanged; a 0 km override is a real override). The id,
    vehicle and deductible reduction always come from the original.

    Raises:
        InvalidRecordError: modification targets another booking, or the
            resolved dates are inverted
    """
    if modification.original_booking.id != original.id:
        raise InvalidRecordError(
            f"Modification {modification.id} targets booking "
            f"{modification.original_booking.id}, not {original.id}"
        )

    def pick(override, fallback):
        return override if override is not None else fallback

    return Booking(
        id=original.id,
        vehicle=original.vehicle,
        start_date=pick(modification.override_start_date, original.start_date),
        end_date=pick(modification.override_end_date, original.end_date),
        distance_km=pick(modification.override_distance_km, original.distance_km),
        deductible_reduction_opted=original.deductible_reduction_opted,
    )


def effective_booking(modification: BookingModification) -> Booking:
    """Resolve a modification against the booking it references"""
    return resolve(modification.original_booking, modification)
