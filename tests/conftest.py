"""Pytest fixtures for testing"""

import json
import pytest
from datetime import date, timedelta
from pathlib import Path
from typing import Any, Callable, Dict
from rental_ledger.domain.models import Booking, Vehicle


@pytest.fixture
def vehicle() -> Vehicle:
    """2000/day, 10/km"""
    return Vehicle(id=1, price_per_day=2000, price_per_km=10)


@pytest.fixture
def make_booking(vehicle: Vehicle) -> Callable[..., Booking]:
    """Factory for bookings starting 2015-12-08 lasting `days` inclusive days"""

    def _make(days: int = 1, distance_km: int = 100, deductible_reduction_opted: bool = False, **kwargs) -> Booking:
        start = kwargs.pop("start_date", date(2015, 12, 8))
        return Booking(
            id=kwargs.pop("id", 1),
            vehicle=kwargs.pop("vehicle", vehicle),
            start_date=start,
            end_date=start + timedelta(days=days - 1),
            distance_km=distance_km,
            deductible_reduction_opted=deductible_reduction_opted,
        )

    return _make


@pytest.fixture
def sample_dataset() -> Dict[str, Any]:
    """Three bookings on one vehicle plus three modifications (one of them a no-op)"""
    return {
        "vehicles": [
            {"id": 1, "price_per_day": 2000, "price_per_km": 10},
            {"id": 2, "price_per_day": 3000, "price_per_km": 15},
            {"id": 3, "price_per_day": 1700, "price_per_km": 8},
        ],
        "bookings": [
            {"id": 1, "vehicle_id": 1, "start_date": "2015-12-08", "end_date": "2015-12-08",
             "distance_km": 100, "deductible_reduction_opted": True},
            {"id": 2, "vehicle_id": 1, "start_date": "2015-03-31", "end_date": "2015-04-01",
             "distance_km": 300, "deductible_reduction_opted": False},
            {"id": 3, "vehicle_id": 1, "start_date": "2015-07-03", "end_date": "2015-07-14",
             "distance_km": 1000, "deductible_reduction_opted": True},
        ],
        "modifications": [
            {"id": 1, "booking_id": 1, "end_date": "2015-12-10", "distance_km": 150},
            {"id": 2, "booking_id": 3, "start_date": "2015-07-04"},
            {"id": 3, "booking_id": 2},
        ],
    }


@pytest.fixture
def dataset_file(tmp_path: Path, sample_dataset: Dict[str, Any]) -> Path:
    path = tmp_path / "data.json"
    path.write_text(json.dumps(sample_dataset), encoding="utf-8")
    return path
