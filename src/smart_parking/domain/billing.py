import math
from types import MappingProxyType
from typing import Mapping, Tuple

from smart_parking.domain.common import VehicleType


CAR_HOURLY_RATE = 20.0
BIKE_HOURLY_RATE = 10.0
DAILY_MAX = 200.0

ELECTRIC_RATE_FACTOR = 0.8  # 20% off the car rate
HANDICAPPED_RATE_FACTOR = 0.5

VEHICLE_LABELS = MappingProxyType({
    VehicleType.CAR: "Car",
    VehicleType.BIKE: "Bike",
    VehicleType.ELECTRIC_CAR: "Electric Car",
    VehicleType.HANDICAPPED_CAR: "Handicapped Car",
    VehicleType.HANDICAPPED_BIKE: "Handicapped Bike",
})


class RateCard:
    """Immutable tariff: hourly rate and label per vehicle type, plus the daily cap.

    A session is billed per started hour: ``ceil(duration_hours) * rate``,
    never more than ``daily_max``. A zero-length session bills nothing.
    """

    def __init__(self, hourly_rates: Mapping[VehicleType, float], daily_max: float = DAILY_MAX):
        missing = [vt.value for vt in VehicleType if vt not in hourly_rates]
        if missing:
            raise ValueError(f"Missing hourly rate for: {', '.join(missing)}")
        if daily_max < 0:
            raise ValueError("daily_max must not be negative")
        self._hourly_rates = MappingProxyType(dict(hourly_rates))
        self._daily_max = float(daily_max)

    @classmethod
    def from_base_rates(
        cls, car_rate: float = CAR_HOURLY_RATE, bike_rate: float = BIKE_HOURLY_RATE, daily_max: float = DAILY_MAX
    ) -> "RateCard":
        return cls(
            {
                VehicleType.CAR: car_rate,
                VehicleType.BIKE: bike_rate,
                VehicleType.ELECTRIC_CAR: car_rate * ELECTRIC_RATE_FACTOR,
                VehicleType.HANDICAPPED_CAR: car_rate * HANDICAPPED_RATE_FACTOR,
                VehicleType.HANDICAPPED_BIKE: bike_rate * HANDICAPPED_RATE_FACTOR,
            },
            daily_max=daily_max,
        )

    @property
    def hourly_rates(self) -> Mapping[VehicleType, float]:
        return self._hourly_rates

    @property
    def daily_max(self) -> float:
        return self._daily_max

    def hourly_rate(self, vehicle_type: VehicleType) -> float:
        return self._hourly_rates[vehicle_type]

    def label(self, vehicle_type: VehicleType) -> str:
        return VEHICLE_LABELS[vehicle_type]

    @staticmethod
    def billed_hours(duration_hours: float) -> int:
        return math.ceil(max(0.0, duration_hours))

    def charge(self, vehicle_type: VehicleType, duration_hours: float) -> float:
        hours = self.billed_hours(duration_hours)
        return min(hours * self.hourly_rate(vehicle_type), self._daily_max)

    def quote(self, vehicle_type: VehicleType, duration_hours: float) -> Tuple[int, float]:
        """Return ``(billed_hours, charge)`` for a session of the given length."""
        return self.billed_hours(duration_hours), self.charge(vehicle_type, duration_hours)

    def __repr__(self) -> str:
        rates = ", ".join(f"{k.value}={v}" for k, v in self._hourly_rates.items())
        return f"RateCard({rates}, daily_max={self._daily_max})"


DEFAULT_RATE_CARD = RateCard.from_base_rates()
