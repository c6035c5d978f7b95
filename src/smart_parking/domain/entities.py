from datetime import datetime, timezone
from typing import List, Optional, Tuple

from smart_parking.domain.billing import RateCard, DEFAULT_RATE_CARD
from smart_parking.domain.common import VehicleType, SlotStatus, TicketStatus
from smart_parking.domain.exceptions import SlotNotFoundError, SlotStateError, TicketClosedError


class Vehicle:
    """Registration plus type. Rate and label come from the tariff it was created under."""

    __slots__ = ("_registration", "_vehicle_type", "_rate_card")

    def __init__(self, registration: str, vehicle_type: VehicleType, rate_card: Optional[RateCard] = None):
        self._registration = registration
        self._vehicle_type = VehicleType(vehicle_type)
        self._rate_card = rate_card if rate_card is not None else DEFAULT_RATE_CARD

    @property
    def registration(self) -> str:
        return self._registration

    @property
    def vehicle_type(self) -> VehicleType:
        return self._vehicle_type

    def hourly_rate(self) -> float:
        return self._rate_card.hourly_rate(self._vehicle_type)

    def type_label(self) -> str:
        return self._rate_card.label(self._vehicle_type)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vehicle):
            return NotImplemented
        return (self._registration, self._vehicle_type) == (other._registration, other._vehicle_type)

    def __hash__(self) -> int:
        return hash((self._registration, self._vehicle_type))

    def __repr__(self) -> str:
        return f"Vehicle({self._registration!r}, {self._vehicle_type.value})"


class ParkingSlot:
    def __init__(self, id: int, floor: int, allowed_type: VehicleType, status: SlotStatus = SlotStatus.FREE):
        self.id = id
        self.floor = floor
        self.allowed_type = allowed_type
        self.status = status
        self.vehicle: Optional[Vehicle] = None
        self.occupied_since: Optional[datetime] = None

    @property
    def is_occupied(self) -> bool:
        return self.status == SlotStatus.OCCUPIED

    def is_compatible(self, vehicle_type: VehicleType) -> bool:
        return self.status == SlotStatus.FREE and self.allowed_type == vehicle_type

    def occupy(self, vehicle: Vehicle) -> bool:
        if not self.is_compatible(vehicle.vehicle_type):
            return False
        self.vehicle = vehicle
        self.status = SlotStatus.OCCUPIED
        self.occupied_since = datetime.now(timezone.utc)
        return True

    def vacate(self) -> Optional[Vehicle]:
        # Vacating a slot that holds nothing is a no-op.
        if self.status != SlotStatus.OCCUPIED:
            return None
        vehicle = self.vehicle
        self.vehicle = None
        self.occupied_since = None
        self.status = SlotStatus.FREE
        return vehicle

    def set_status(self, status: SlotStatus) -> None:
        status = SlotStatus(status)
        if status == SlotStatus.OCCUPIED:
            raise SlotStateError("A slot only becomes occupied by parking a vehicle in it")
        if self.is_occupied:
            raise SlotStateError(f"Slot {self.id} on floor {self.floor} is occupied")
        self.status = status

    def __repr__(self) -> str:
        return f"ParkingSlot(floor={self.floor}, id={self.id}, {self.allowed_type.value}, {self.status.value})"


class Ticket:
    def __init__(
        self,
        id: int,
        registration: str,
        vehicle_type: VehicleType,
        floor: int,
        slot_id: int,
        entry_time: Optional[datetime] = None,
        exit_time: Optional[datetime] = None,
        active: bool = True,
        amount_paid: Optional[float] = None,
    ):
        self.id = id
        self.registration = registration
        self.vehicle_type = vehicle_type
        self.floor = floor
        self.slot_id = slot_id
        self.entry_time = entry_time or datetime.now(timezone.utc)
        self.exit_time = exit_time
        self.active = active
        self.amount_paid = amount_paid

    @property
    def status(self) -> TicketStatus:
        return TicketStatus.ACTIVE if self.active else TicketStatus.CLOSED

    def close(self) -> None:
        if not self.active:
            raise TicketClosedError(self.id)
        self.exit_time = datetime.now(timezone.utc)
        self.active = False

    def duration_hours(self) -> float:
        end_time = self.exit_time if not self.active else datetime.now(timezone.utc)
        return (end_time - self.entry_time).total_seconds() / 3600

    def __repr__(self) -> str:
        return f"Ticket({self.id}, {self.registration!r}, floor={self.floor}, slot={self.slot_id}, {self.status.value})"


class ParkingFloor:
    """One level of the facility.

    Slots are numbered from 1 in creation order: cars, bikes, electric cars,
    handicapped cars, handicapped bikes. Ids are unique on the floor only.
    """

    def __init__(
        self,
        number: int,
        car_slots: int = 0,
        bike_slots: int = 0,
        electric_car_slots: int = 0,
        handicapped_car_slots: int = 0,
        handicapped_bike_slots: int = 0,
    ):
        self.number = number
        self.slots: List[ParkingSlot] = []
        self._occupied = 0

        layout = (
            (VehicleType.CAR, car_slots),
            (VehicleType.BIKE, bike_slots),
            (VehicleType.ELECTRIC_CAR, electric_car_slots),
            (VehicleType.HANDICAPPED_CAR, handicapped_car_slots),
            (VehicleType.HANDICAPPED_BIKE, handicapped_bike_slots),
        )
        slot_id = 1
        for vehicle_type, count in layout:
            for _ in range(count):
                self.slots.append(ParkingSlot(id=slot_id, floor=number, allowed_type=vehicle_type))
                slot_id += 1

    def get_slot(self, slot_id: int) -> Optional[ParkingSlot]:
        for slot in self.slots:
            if slot.id == slot_id:
                return slot
        return None

    def find_available_slot(self, vehicle_type: VehicleType) -> Optional[ParkingSlot]:
        for slot in self.slots:
            if slot.is_compatible(vehicle_type):
                return slot
        return None

    def occupy(self, slot_id: int, vehicle: Vehicle) -> bool:
        slot = self.get_slot(slot_id)
        if slot is None or not slot.occupy(vehicle):
            return False
        self._occupied += 1
        return True

    def vacate_slot(self, slot_id: int) -> Optional[Vehicle]:
        slot = self.get_slot(slot_id)
        if slot is None or not slot.is_occupied:
            return None
        self._occupied -= 1
        return slot.vacate()

    def set_slot_status(self, slot_id: int, status: SlotStatus) -> ParkingSlot:
        slot = self.get_slot(slot_id)
        if slot is None:
            raise SlotNotFoundError(self.number, slot_id)
        slot.set_status(status)
        return slot

    def occupancy_counts(self) -> Tuple[int, int]:
        return self._occupied, len(self.slots)

    def __repr__(self) -> str:
        occupied, total = self.occupancy_counts()
        return f"ParkingFloor({self.number}, {occupied}/{total})"
