"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Optional

from rental_ledger.domain.exceptions import InvalidRecordError


class Party(str, Enum):
    """Who receives or pays a ledger amount"""

    DRIVER = "driver"
    OWNER = "owner"
    INSURANCE = "insurance"
    ASSISTANCE = "assistance"
    PLATFORM = "platform"


class Direction(str, Enum):
    """Flow of money relative to the party"""

    DEBIT = "debit"
    CREDIT = "credit"

    @property
    def opposite(self) -> "Direction":
        return Direction.CREDIT if self is Direction.DEBIT else Direction.DEBIT


def _require_non_negative_int(name: str, value) -> None:
    # bool is an int subclass but never a valid amount
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidRecordError(f"{name} must be an integer, got {value!r}")
    if value < 0:
        raise InvalidRecordError(f"{name} must be >= 0, got {value}")


@dataclass(frozen=True)
class Vehicle:
    """Rentable vehicle with its per-day and per-km rates (minor currency units)"""

    id: int
    price_per_day: int
    price_per_km: int

    def __post_init__(self) -> None:
        if self.id is None:
            raise InvalidRecordError("Vehicle id is required")
        _require_non_negative_int("price_per_day", self.price_per_day)
        _require_non_negative_int("price_per_km", self.price_per_km)


@dataclass(frozen=True)
class Booking:
    """Rental of one vehicle over an inclusive date range"""

    id: int
    vehicle: Vehicle
    start_date: date
    end_date: date
    distance_km: int
    deductible_reduction_opted: bool = False

    def __post_init__(self) -> None:
        if self.id is None:
            raise InvalidRecordError("Booking id is required")
        if not isinstance(self.vehicle, Vehicle):
            raise InvalidRecordError(f"Booking {self.id} has no vehicle")
        _require_non_negative_int("distance_km", self.distance_km)
        if self.end_date < self.start_date:
            raise InvalidRecordError(
                f"Booking {self.id} ends ({self.end_date}) before it starts ({self.start_date})"
            )


@dataclass(frozen=True)
class BookingModification:
    """Change request against an existing booking; None means 'keep original'"""

    id: int
    original_booking: Booking
    override_start_date: Optional[date] = None
    override_end_date: Optional[date] = None
    override_distance_km: Optional[int] = None

    def __post_init__(self) -> None:
        if self.id is None:
            raise InvalidRecordError("Modification id is required")
        if not isinstance(self.original_booking, Booking):
            raise InvalidRecordError(f"Modification {self.id} has no booking")
        if self.override_distance_km is not None:
            _require_non_negative_int("distance_km", self.override_distance_km)


@dataclass(frozen=True)
class PricingBreakdown:
    """Priced booking. platform_fee may be negative here, never in a LedgerAction"""

    duration_days: int
    time_price: int
    distance_price: int
    total_price: int
    commission: int
    insurance_fee: int
    assistance_fee: int
    platform_fee: int
    deductible_reduction_fee: int
    price_with_options: int


@dataclass(frozen=True)
class LedgerAction:
    """Single debit/credit instruction; amount is always non-negative"""

    party: Party
    direction: Direction
    amount: int
