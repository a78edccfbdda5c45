"""Pricing engine - turns a booking's duration, distance and options into a priced breakdown"""

from decimal import Decimal

from rental_ledger.domain.exceptions import InvalidPricingInputError
from rental_ledger.domain.models import Booking, PricingBreakdown
from rental_ledger.utils.date_utils import inclusive_day_count

COMMISSION_RATE = Decimal("0.3")
INSURANCE_SHARE = Decimal("0.5")
ASSISTANCE_FEE_PER_DAY = 100
DEDUCTIBLE_REDUCTION_FEE_PER_DAY = 400

# (first day the tier applies, discount); checked from the last tier backwards
DISCOUNT_TIERS = (
    (1, Decimal("0")),
    (2, Decimal("0.1")),
    (5, Decimal("0.3")),
    (11, Decimal("0.5")),
)


def discount_for_day(day: int) -> Decimal:
    """
    Discount applied to the given 1-indexed day of a rental.

    Schedule:
    - day 1:      0%
    - days 2-4:   10%
    - days 5-10:  30%
    - day 11+:    50%
    """
    for first_day, discount in reversed(DISCOUNT_TIERS):
        if day >= first_day:
            return discount
    raise InvalidPricingInputError(f"Rental days are 1-indexed, got day {day}")


def price_for_day(day: int, price_per_day: int) -> int:
    """Discounted price of a single day, truncated toward zero"""
    return int((1 - discount_for_day(day)) * price_per_day)


def time_price(duration_days: int, price_per_day: int) -> int:
    """
    Time component of the price.

    Each day is discounted and truncated on its own before summing, so an
    11-day rental at 1000/day costs 1000 + 3*900 + 6*700 + 500 = 8400.
    """
    return sum(price_for_day(day, price_per_day) for day in range(1, duration_days + 1))


def distance_price(distance_km: int, price_per_km: int) -> int:
    """Distance component of the price (never discounted)"""
    return distance_km * price_per_km


def _check_preconditions(duration_days: int, distance_km: int, price_per_day: int, price_per_km: int) -> None:
    if duration_days < 1:
        raise InvalidPricingInputError(f"duration_days must be >= 1, got {duration_days}")
    if distance_km < 0:
        raise InvalidPricingInputError(f"distance_km must be >= 0, got {distance_km}")
    if price_per_day < 0 or price_per_km < 0:
        raise InvalidPricingInputError(
            f"Rates must be >= 0, got price_per_day={price_per_day} price_per_km={price_per_km}"
        )


def price(
    duration_days: int,
    distance_km: int,
    price_per_day: int,
    price_per_km: int,
    deductible_reduction_opted: bool = False,
) -> PricingBreakdown:
    """
    Price a rental and split the commission.

    Commission rules:
    - commission = 30% of total price
    - insurance gets half the commission
    - assistance gets a flat 100 per day
    - platform keeps the rest (may be negative on cheap, short rentals)

    Every percentage is truncated where it is computed, not at the end.

    Raises:
        InvalidPricingInputError: duration < 1, or negative distance/rate
    """
    _check_preconditions(duration_days, distance_km, price_per_day, price_per_km)

    time_component = time_price(duration_days, price_per_day)
    distance_component = distance_price(distance_km, price_per_km)
    total_price = time_component + distance_component

    commission = int(total_price * COMMISSION_RATE)
    insurance_fee = int(commission * INSURANCE_SHARE)
    assistance_fee = duration_days * ASSISTANCE_FEE_PER_DAY
    platform_fee = commission - insurance_fee - assistance_fee

    deductible_reduction_fee = (
        duration_days * DEDUCTIBLE_REDUCTION_FEE_PER_DAY if deductible_reduction_opted else 0
    )

    return PricingBreakdown(
        duration_days=duration_days,
        time_price=time_component,
        distance_price=distance_component,
        total_price=total_price,
        commission=commission,
        insurance_fee=insurance_fee,
        assistance_fee=assistance_fee,
        platform_fee=platform_fee,
        deductible_reduction_fee=deductible_reduction_fee,
        price_with_options=total_price + deductible_reduction_fee,
    )


def price_booking(booking: Booking) -> PricingBreakdown:
    """Price a booking using its vehicle's rates and its inclusive calendar duration"""
    return price(
        duration_days=inclusive_day_count(booking.start_date, booking.end_date),
        distance_km=booking.distance_km,
        price_per_day=booking.vehicle.price_per_day,
        price_per_km=booking.vehicle.price_per_km,
        deductible_reduction_opted=booking.deductible_reduction_opted,
    )
