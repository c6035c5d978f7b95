from datetime import datetime, timezone
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from smart_parking.config.settings_env import Settings
from smart_parking.domain.common import VehicleType, TicketStatus


class FacilityConfig(BaseModel):
    floor_count: int = Field(..., ge=1)
    car_slots_per_floor: int = Field(..., ge=0)
    bike_slots_per_floor: int = Field(..., ge=0)
    electric_car_slots_per_floor: int = Field(default=0, ge=0)
    handicapped_car_slots_per_floor: int = Field(default=0, ge=0)
    handicapped_bike_slots_per_floor: int = Field(default=0, ge=0)
    ticket_counter_start: int = Field(default=1000, ge=0)

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_settings(cls, settings: Settings) -> "FacilityConfig":
        return cls(
            floor_count=settings.PARKING_FLOORS,
            car_slots_per_floor=settings.CAR_SLOTS_PER_FLOOR,
            bike_slots_per_floor=settings.BIKE_SLOTS_PER_FLOOR,
            electric_car_slots_per_floor=settings.ELECTRIC_CAR_SLOTS_PER_FLOOR,
            handicapped_car_slots_per_floor=settings.HANDICAPPED_CAR_SLOTS_PER_FLOOR,
            handicapped_bike_slots_per_floor=settings.HANDICAPPED_BIKE_SLOTS_PER_FLOOR,
            ticket_counter_start=settings.TICKET_COUNTER_START,
        )


class VehicleEntry(BaseModel):
    registration: str = Field(..., min_length=1)
    vehicle_type: VehicleType = VehicleType.CAR

    @field_validator('registration')
    def validate_registration(cls, v):  # pylint: disable=no-self-argument
        v = v.upper().strip()
        if not v:
            raise ValueError("registration must not be blank")
        return v


class VehicleExit(BaseModel):
    registration: str = Field(..., min_length=1)

    @field_validator('registration')
    def validate_registration(cls, v):  # pylint: disable=no-self-argument
        v = v.upper().strip()
        if not v:
            raise ValueError("registration must not be blank")
        return v


class TicketSummary(BaseModel):
    ticket_id: int
    registration: str
    vehicle_type: VehicleType
    vehicle_label: str
    hourly_rate: float
    floor: int
    slot_id: int
    entry_time: datetime
    exit_time: Optional[datetime] = None
    status: TicketStatus = TicketStatus.ACTIVE
    amount_paid: Optional[float] = None

    @field_validator('entry_time', 'exit_time')
    @classmethod
    def make_datetime_aware(cls, dt: datetime) -> datetime:
        if dt is None:
            return dt
        if dt.tzinfo is None:
            return dt.replace(tzinfo=timezone.utc)
        return dt

    model_config = ConfigDict(frozen=True)


class FloorStatus(BaseModel):
    floor: int
    total: int
    occupied: int
    available: int


class ParkingStatus(BaseModel):
    total_slots: int
    occupied_slots: int
    available_slots: int
    occupancy_rate: float
    floors: List[FloorStatus]


class ParkingAnalytics(BaseModel):
    total_revenue: float
    revenue_by_vehicle_type: Dict[VehicleType, float]
    tickets_issued: int
    tickets_closed: int
    average_duration_hours: float
    current_occupancy: int
    floor_distribution: Dict[int, int]
