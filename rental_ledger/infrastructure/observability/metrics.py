"""Prometheus metrics for priced bookings, modifications and ledger reversals"""

from prometheus_client import Counter, Histogram

from rental_ledger.domain.models import PricingBreakdown

bookings_priced_counter = Counter(
    "rental_ledger_bookings_priced_total",
    "Bookings priced",
)

modifications_processed_counter = Counter(
    "rental_ledger_modifications_processed_total",
    "Booking modifications turned into ledger deltas",
)

direction_reversals_counter = Counter(
    "rental_ledger_direction_reversals_total",
    "Per-booking ledger amounts that came out negative and were flipped",
    ["party"],  # owner | platform | ...
)

booking_duration_histogram = Histogram(
    "rental_ledger_booking_duration_days",
    "Booking length in days",
    buckets=[1, 2, 4, 10, 30, 90],
)


def record_booking(breakdown: PricingBreakdown) -> None:
    """Record pricing metrics for a booking"""
    bookings_priced_counter.inc()
    booking_duration_histogram.observe(breakdown.duration_days)


def record_reversals(parties) -> None:
    for party in parties:
        direction_reversals_counter.labels(party=party).inc()
