"""In-memory dataset: validates raw records and resolves id references into domain objects"""

import json
from pathlib import Path
from typing import Any, Dict, Iterable, List, TypeVar, Union

from pydantic import ValidationError

from rental_ledger.domain.exceptions import (
    DuplicateRecordError,
    InvalidRecordError,
    UnresolvedReferenceError,
)
from rental_ledger.domain.models import Booking, BookingModification, Vehicle
from rental_ledger.infrastructure.dataset.schemas import Dataset

T = TypeVar("T")


def _index_by_id(kind: str, items: Iterable[T]) -> Dict[int, T]:
    index: Dict[int, T] = {}
    for item in items:
        if item.id in index:
            raise DuplicateRecordError(f"Duplicate {kind} id {item.id}")
        index[item.id] = item
    return index


class DataStore:
    """
    Vehicles, bookings and modifications of one batch run.

    Every reference is resolved at construction: a booking pointing at an
    unknown vehicle (or a modification at an unknown booking) rejects the
    whole dataset, so no partial report can be produced.
    """

    def __init__(self, data: Dict[str, Any]):
        try:
            dataset = Dataset.model_validate(data)
        except ValidationError as e:
            raise InvalidRecordError(f"Invalid dataset: {e}") from e

        self.vehicles: List[Vehicle] = [
            Vehicle(id=raw.id, price_per_day=raw.price_per_day, price_per_km=raw.price_per_km)
            for raw in dataset.vehicles
        ]
        vehicles_by_id = _index_by_id("vehicle", self.vehicles)

        self.bookings: List[Booking] = []
        for raw in dataset.bookings:
            if raw.vehicle_id not in vehicles_by_id:
                raise UnresolvedReferenceError(
                    f"Booking {raw.id} references unknown vehicle {raw.vehicle_id}"
                )
            self.bookings.append(
                Booking(
                    id=raw.id,
                    vehicle=vehicles_by_id[raw.vehicle_id],
                    start_date=raw.start_date,
                    end_date=raw.end_date,
                    distance_km=raw.distance_km,
                    deductible_reduction_opted=raw.deductible_reduction_opted,
                )
            )
        bookings_by_id = _index_by_id("booking", self.bookings)

        self.modifications: List[BookingModification] = []
        for raw in dataset.modifications:
            if raw.booking_id not in bookings_by_id:
                raise UnresolvedReferenceError(
                    f"Modification {raw.id} references unknown booking {raw.booking_id}"
                )
            self.modifications.append(
                BookingModification(
                    id=raw.id,
                    original_booking=bookings_by_id[raw.booking_id],
                    override_start_date=raw.start_date,
                    override_end_date=raw.end_date,
                    override_distance_km=raw.distance_km,
                )
            )
        _index_by_id("modification", self.modifications)

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "DataStore":
        """
        Load a dataset from a JSON file.

        Raises:
            InvalidRecordError: file is not valid JSON or fails validation
            UnresolvedReferenceError: dangling vehicle/booking id
            DuplicateRecordError: repeated id within a collection
        """
        try:
            data = json.loads(Path(path).read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise InvalidRecordError(f"{path} is not valid JSON: {e}") from e
        return cls(data)
