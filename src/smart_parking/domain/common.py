from enum import Enum


class VehicleType(str, Enum):
    CAR = "car"
    BIKE = "bike"
    ELECTRIC_CAR = "electric_car"
    HANDICAPPED_CAR = "handicapped_car"
    HANDICAPPED_BIKE = "handicapped_bike"


class SlotStatus(str, Enum):
    FREE = "free"
    OCCUPIED = "occupied"
    RESERVED = "reserved"
    MAINTENANCE = "maintenance"


class TicketStatus(str, Enum):
    ACTIVE = "active"
    CLOSED = "closed"
