class ParkingError(ValueError):
    """Base class for every error the parking engine reports to its callers."""


class NoCapacityError(ParkingError):
    def __init__(self, vehicle_type):
        self.vehicle_type = vehicle_type
        super().__init__(f"No available {vehicle_type.value} slots")


class VehicleNotFoundError(ParkingError):
    def __init__(self, registration: str):
        self.registration = registration
        super().__init__(f"No active ticket for vehicle {registration}")


class AlreadyParkedError(ParkingError):
    def __init__(self, registration: str, ticket_id: int):
        self.registration = registration
        self.ticket_id = ticket_id
        super().__init__(f"Vehicle {registration} is already in the parking (ticket {ticket_id})")


class SlotNotFoundError(ParkingError):
    def __init__(self, floor: int, slot_id: int = None):
        self.floor = floor
        self.slot_id = slot_id
        if slot_id is None:
            super().__init__(f"Floor {floor} does not exist")
        else:
            super().__init__(f"Slot {slot_id} does not exist on floor {floor}")


class SlotStateError(ParkingError):
    pass


class TicketClosedError(ParkingError):
    def __init__(self, ticket_id: int):
        self.ticket_id = ticket_id
        super().__init__(f"Ticket {ticket_id} is already closed")
