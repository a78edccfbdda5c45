"""Integration tests for the report builder"""

import logging
import pytest
from rental_ledger.infrastructure.dataset.store import DataStore
from rental_ledger.reports import booking_report, build_report, modification_report


@pytest.mark.integration
def test_booking_report_shape(sample_dataset):
    store = DataStore(sample_dataset)

    report = booking_report(store.bookings[0])

    assert report == {
        "id": 1,
        "price": 3000,
        "options": {"deductible_reduction": 400},
        "commission": {"insurance_fee": 450, "assistance_fee": 100, "platform_fee": 350},
        "actions": [
            {"who": "driver", "type": "debit", "amount": 3400},
            {"who": "owner", "type": "credit", "amount": 2100},
            {"who": "insurance", "type": "credit", "amount": 450},
            {"who": "assistance", "type": "credit", "amount": 100},
            {"who": "platform", "type": "credit", "amount": 750},
        ],
    }


@pytest.mark.integration
def test_modification_report_scenario_b(make_booking):
    from rental_ledger.domain.models import BookingModification

    original = make_booking(days=1, distance_km=100)
    modification = BookingModification(id=7, original_booking=original, override_distance_km=150)

    report = modification_report(modification)

    assert report["id"] == 7
    assert report["booking_id"] == 1
    assert report["actions"] == [
        {"who": "driver", "type": "debit", "amount": 500},
        {"who": "owner", "type": "credit", "amount": 350},
        {"who": "insurance", "type": "credit", "amount": 75},
        {"who": "assistance", "type": "credit", "amount": 0},
        {"who": "platform", "type": "credit", "amount": 75},
    ]


@pytest.mark.integration
def test_build_report_sections(sample_dataset):
    store = DataStore(sample_dataset)

    assert set(build_report(store)) == {"bookings", "modifications"}
    assert set(build_report(store, section="bookings")) == {"bookings"}
    assert set(build_report(store, section="modifications")) == {"modifications"}

    with pytest.raises(ValueError):
        build_report(store, section="owners")


@pytest.mark.integration
def test_build_report_keeps_input_order(sample_dataset):
    sample_dataset["modifications"].reverse()
    store = DataStore(sample_dataset)

    report = build_report(store, section="modifications")

    assert [m["id"] for m in report["modifications"]] == [3, 2, 1]


@pytest.mark.integration
def test_reversed_amount_is_warned(caplog):
    store = DataStore({
        "vehicles": [{"id": 1, "price_per_day": 100, "price_per_km": 0}],
        "bookings": [{"id": 5, "vehicle_id": 1, "start_date": "2020-01-01",
                      "end_date": "2020-01-01", "distance_km": 0}],
    })

    with caplog.at_level(logging.WARNING, logger="rental_ledger"):
        report = build_report(store, section="bookings")

    assert report["bookings"][0]["actions"][-1] == {"who": "platform", "type": "debit", "amount": 85}
    warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert len(warnings) == 1
    assert warnings[0].booking_id == 5
    assert warnings[0].parties == ["platform"]


@pytest.mark.integration
def test_reversal_warning_can_be_disabled(caplog, monkeypatch):
    from rental_ledger import reports

    monkeypatch.setattr(reports.settings, "warn_on_reversal", False)
    store = DataStore({
        "vehicles": [{"id": 1, "price_per_day": 100, "price_per_km": 0}],
        "bookings": [{"id": 5, "vehicle_id": 1, "start_date": "2020-01-01",
                      "end_date": "2020-01-01", "distance_km": 0}],
    })

    with caplog.at_level(logging.WARNING, logger="rental_ledger"):
        build_report(store, section="bookings")

    assert not [r for r in caplog.records if r.levelno == logging.WARNING]
