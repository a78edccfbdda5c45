"""Pydantic schemas for validating the raw input dataset"""

from datetime import date
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class VehicleRecord(BaseModel):
    """Entry of `vehicles`"""

    model_config = ConfigDict(extra="forbid")

    id: int
    price_per_day: int = Field(..., ge=0, description="Daily rate in minor currency units")
    price_per_km: int = Field(..., ge=0, description="Per-km rate in minor currency units")


class BookingRecord(BaseModel):
    """Entry of `bookings`"""

    model_config = ConfigDict(extra="forbid")

    id: int
    vehicle_id: int
    start_date: date
    end_date: date
    distance_km: int = Field(..., ge=0)
    deductible_reduction_opted: bool = False


class ModificationRecord(BaseModel):
    """Entry of `modifications`; omitted fields keep the booking's value"""

    model_config = ConfigDict(extra="forbid")

    id: int
    booking_id: int
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    distance_km: Optional[int] = Field(default=None, ge=0)


class Dataset(BaseModel):
    """Top-level input document"""

    model_config = ConfigDict(extra="forbid")

    vehicles: List[VehicleRecord]
    bookings: List[BookingRecord] = []
    modifications: List[ModificationRecord] = []
