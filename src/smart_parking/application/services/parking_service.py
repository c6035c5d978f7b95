from typing import List, Optional

from smart_parking.application.repositories import AbstractTicketRepository
from smart_parking.config.settings_env import Settings, settings as default_settings
from smart_parking.domain.billing import RateCard, DEFAULT_RATE_CARD
from smart_parking.domain.common import VehicleType, SlotStatus
from smart_parking.domain.entities import Vehicle, Ticket, ParkingFloor, ParkingSlot
from smart_parking.domain.exceptions import (
    AlreadyParkedError,
    NoCapacityError,
    SlotNotFoundError,
    VehicleNotFoundError,
)
from smart_parking.infrastructure.persistence.in_memory_repositories import InMemoryTicketRepository
from smart_parking.schemas.parking import (
    FacilityConfig,
    FloorStatus,
    ParkingStatus,
    TicketSummary,
    VehicleEntry,
    VehicleExit,
)
from smart_parking.shared.utils import get_logger

logger = get_logger("facility")


class ParkingFacility:
    """Multi-floor parking engine.

    Owns the floors, the active-ticket index (through ``ticket_repo``), the
    ticket counter and the revenue total. Allocation is first-fit over
    floors in order, then slots in creation order, with exact vehicle type
    matching. Not thread-safe: callers serving concurrent requests must
    serialise access to the whole facility.
    """

    def __init__(
        self,
        config: FacilityConfig,
        rate_card: Optional[RateCard] = None,
        ticket_repo: Optional[AbstractTicketRepository] = None,
    ):
        self.config = config
        self.rate_card = rate_card if rate_card is not None else DEFAULT_RATE_CARD
        self.ticket_repo = ticket_repo if ticket_repo is not None else InMemoryTicketRepository()
        self.floors: List[ParkingFloor] = [
            ParkingFloor(
                number,
                car_slots=config.car_slots_per_floor,
                bike_slots=config.bike_slots_per_floor,
                electric_car_slots=config.electric_car_slots_per_floor,
                handicapped_car_slots=config.handicapped_car_slots_per_floor,
                handicapped_bike_slots=config.handicapped_bike_slots_per_floor,
            )
            for number in range(1, config.floor_count + 1)
        ]
        self._ticket_counter = config.ticket_counter_start
        self._total_revenue = 0.0

        total, _, _ = self._counts()
        logger.debug(f"Facility ready: {config.floor_count} floors, {total} slots")

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "ParkingFacility":
        settings = settings or default_settings
        rate_card = RateCard.from_base_rates(
            car_rate=settings.CAR_HOURLY_RATE,
            bike_rate=settings.BIKE_HOURLY_RATE,
            daily_max=settings.DAILY_MAX,
        )
        return cls(FacilityConfig.from_settings(settings), rate_card=rate_card)

    @property
    def total_revenue(self) -> float:
        return self._total_revenue

    @property
    def tickets_issued(self) -> int:
        return self._ticket_counter - self.config.ticket_counter_start

    def park(self, vehicle_type: VehicleType, registration: str) -> TicketSummary:
        entry = VehicleEntry(registration=registration, vehicle_type=vehicle_type)

        existing = self.ticket_repo.get_active_by_registration(entry.registration)
        if existing:
            logger.warning(f"Rejected park for {entry.registration}: already on ticket {existing.id}")
            raise AlreadyParkedError(entry.registration, existing.id)

        vehicle = Vehicle(entry.registration, entry.vehicle_type, rate_card=self.rate_card)
        for floor in self.floors:
            slot = floor.find_available_slot(vehicle.vehicle_type)
            if slot and floor.occupy(slot.id, vehicle):
                self._ticket_counter += 1
                ticket = Ticket(
                    id=self._ticket_counter,
                    registration=vehicle.registration,
                    vehicle_type=vehicle.vehicle_type,
                    floor=floor.number,
                    slot_id=slot.id,
                    entry_time=slot.occupied_since,
                )
                self.ticket_repo.add(ticket)
                logger.info(
                    f"Vehicle {vehicle.registration} ({vehicle.type_label()}) parked at "
                    f"floor {floor.number} slot {slot.id}, ticket {ticket.id}"
                )
                return self._summarize(ticket)

        logger.warning(f"No {vehicle.vehicle_type.value} slot available for {vehicle.registration}")
        raise NoCapacityError(vehicle.vehicle_type)

    def unpark(self, registration: str) -> float:
        registration = VehicleExit(registration=registration).registration

        ticket = self.ticket_repo.get_active_by_registration(registration)
        if not ticket:
            logger.warning(f"Unpark requested for unknown vehicle {registration}")
            raise VehicleNotFoundError(registration)

        ticket.close()
        hours, charge = self.rate_card.quote(ticket.vehicle_type, ticket.duration_hours())
        ticket.amount_paid = charge
        self._total_revenue += charge

        floor = self._get_floor(ticket.floor)
        floor.vacate_slot(ticket.slot_id)
        self.ticket_repo.close(ticket)

        logger.info(
            f"Vehicle {registration} left floor {ticket.floor} slot {ticket.slot_id}. "
            f"Billed {hours}h, amount: ${charge:.2f}"
        )
        return charge

    def status(self) -> ParkingStatus:
        total, occupied, available = self._counts()
        floors = []
        for floor in self.floors:
            floor_occupied, floor_total = floor.occupancy_counts()
            floors.append(
                FloorStatus(
                    floor=floor.number,
                    total=floor_total,
                    occupied=floor_occupied,
                    available=floor_total - floor_occupied,
                )
            )
        occupancy_rate = (occupied / total * 100) if total > 0 else 0
        return ParkingStatus(
            total_slots=total,
            occupied_slots=occupied,
            available_slots=available,
            occupancy_rate=round(occupancy_rate, 2),
            floors=floors,
        )

    def find_ticket(self, registration: str) -> Optional[TicketSummary]:
        registration = VehicleExit(registration=registration).registration
        ticket = self.ticket_repo.get_active_by_registration(registration)
        return self._summarize(ticket) if ticket else None

    def get_ticket(self, ticket_id: int) -> Optional[TicketSummary]:
        ticket = self.ticket_repo.get_by_id(ticket_id)
        return self._summarize(ticket) if ticket else None

    def get_active_tickets(self) -> List[TicketSummary]:
        return [self._summarize(ticket) for ticket in self.ticket_repo.get_active_tickets()]

    def get_ticket_history(self) -> List[Ticket]:
        return self.ticket_repo.get_closed_tickets()

    def current_charge(self, registration: str) -> float:
        """Amount the session would be billed if the vehicle left now."""
        registration = VehicleExit(registration=registration).registration
        ticket = self.ticket_repo.get_active_by_registration(registration)
        if not ticket:
            raise VehicleNotFoundError(registration)
        return self.rate_card.charge(ticket.vehicle_type, ticket.duration_hours())

    def get_slot(self, floor_number: int, slot_id: int) -> ParkingSlot:
        slot = self._get_floor(floor_number).get_slot(slot_id)
        if slot is None:
            raise SlotNotFoundError(floor_number, slot_id)
        return slot

    def set_slot_status(self, floor_number: int, slot_id: int, status: SlotStatus) -> ParkingSlot:
        slot = self._get_floor(floor_number).set_slot_status(slot_id, status)
        logger.info(f"Floor {floor_number} slot {slot_id} set to {slot.status.value}")
        return slot

    def _get_floor(self, floor_number: int) -> ParkingFloor:
        if 1 <= floor_number <= len(self.floors):
            return self.floors[floor_number - 1]
        raise SlotNotFoundError(floor_number)

    def _counts(self):
        total = occupied = 0
        for floor in self.floors:
            floor_occupied, floor_total = floor.occupancy_counts()
            total += floor_total
            occupied += floor_occupied
        return total, occupied, total - occupied

    def _summarize(self, ticket: Ticket) -> TicketSummary:
        return TicketSummary(
            ticket_id=ticket.id,
            registration=ticket.registration,
            vehicle_type=ticket.vehicle_type,
            vehicle_label=self.rate_card.label(ticket.vehicle_type),
            hourly_rate=self.rate_card.hourly_rate(ticket.vehicle_type),
            floor=ticket.floor,
            slot_id=ticket.slot_id,
            entry_time=ticket.entry_time,
            exit_time=ticket.exit_time,
            status=ticket.status,
            amount_paid=ticket.amount_paid,
        )
