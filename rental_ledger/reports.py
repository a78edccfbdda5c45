"""Report builder - projects priced bookings and modification deltas into output records"""

import time
from typing import Any, Dict, List

from rental_ledger.config import settings
from rental_ledger.domain.ledger import actions_for_booking, actions_for_modification, reversed_parties
from rental_ledger.domain.models import Booking, BookingModification, LedgerAction
from rental_ledger.domain.modifications import effective_booking
from rental_ledger.domain.pricing import price_booking
from rental_ledger.infrastructure.dataset.store import DataStore
from rental_ledger.infrastructure.observability.logging import log_reversal, log_report
from rental_ledger.infrastructure.observability.metrics import (
    modifications_processed_counter,
    record_booking,
    record_reversals,
)

SECTIONS = ("bookings", "modifications", "all")


def serialize_actions(actions: List[LedgerAction]) -> List[Dict[str, Any]]:
    return [
        {"who": action.party.value, "type": action.direction.value, "amount": action.amount}
        for action in actions
    ]


def booking_report(booking: Booking) -> Dict[str, Any]:
    """Price, options, commission split and ledger of one booking"""
    breakdown = price_booking(booking)
    record_booking(breakdown)

    reversed_ = [party.value for party in reversed_parties(breakdown)]
    if reversed_:
        record_reversals(reversed_)
        if settings.warn_on_reversal:
            log_reversal(booking.id, reversed_)

    return {
        "id": booking.id,
        "price": breakdown.total_price,
        "options": {
            "deductible_reduction": breakdown.deductible_reduction_fee,
        },
        "commission": {
            "insurance_fee": breakdown.insurance_fee,
            "assistance_fee": breakdown.assistance_fee,
            "platform_fee": breakdown.platform_fee,
        },
        "actions": serialize_actions(actions_for_booking(breakdown)),
    }


def modification_report(modification: BookingModification) -> Dict[str, Any]:
    """Per-party ledger delta caused by a modification"""
    original = price_booking(modification.original_booking)
    modified = price_booking(effective_booking(modification))
    modifications_processed_counter.inc()

    return {
        "id": modification.id,
        "booking_id": modification.original_booking.id,
        "actions": serialize_actions(actions_for_modification(original, modified)),
    }


def build_report(store: DataStore, section: str = "all") -> Dict[str, Any]:
    """
    Build the batch report, records in input order.

    Args:
        store: Loaded dataset
        section: "bookings", "modifications" or "all"
    """
    if section not in SECTIONS:
        raise ValueError(f"Unknown report section {section!r}, expected one of {SECTIONS}")

    start_time = time.time()
    report: Dict[str, Any] = {}

    if section in ("bookings", "all"):
        report["bookings"] = [booking_report(booking) for booking in store.bookings]
    if section in ("modifications", "all"):
        report["modifications"] = [modification_report(m) for m in store.modifications]

    duration_ms = (time.time() - start_time) * 1000
    log_report(
        len(report.get("bookings", [])),
        len(report.get("modifications", [])),
        duration_ms,
    )
    return report
