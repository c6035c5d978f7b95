import pytest
from freezegun import freeze_time
from datetime import datetime, timezone

from smart_parking.application.services.parking_service import ParkingFacility
from smart_parking.application.services.analytics_service import AnalyticsService
from smart_parking.config.settings_env import Settings
from smart_parking.domain.billing import RateCard
from smart_parking.domain.common import VehicleType
from smart_parking.infrastructure.persistence.in_memory_repositories import InMemoryTicketRepository
from smart_parking.schemas.parking import FacilityConfig


START = datetime(2025, 3, 10, 8, 0, tzinfo=timezone.utc)


@pytest.fixture
def test_settings():
    """Provide test settings."""
    return Settings(
        DEV_MODE=False,
        PARKING_FLOORS=2,
        CAR_SLOTS_PER_FLOOR=3,
        BIKE_SLOTS_PER_FLOOR=2,
        ELECTRIC_CAR_SLOTS_PER_FLOOR=1,
        HANDICAPPED_CAR_SLOTS_PER_FLOOR=1,
        HANDICAPPED_BIKE_SLOTS_PER_FLOOR=1,
    )


@pytest.fixture
def rate_card():
    return RateCard.from_base_rates()


@pytest.fixture
def ticket_repo():
    return InMemoryTicketRepository()


@pytest.fixture
def facility_config():
    """Two floors with every slot type present."""
    return FacilityConfig(
        floor_count=2,
        car_slots_per_floor=3,
        bike_slots_per_floor=2,
        electric_car_slots_per_floor=1,
        handicapped_car_slots_per_floor=1,
        handicapped_bike_slots_per_floor=1,
    )


@pytest.fixture
def facility(facility_config, rate_card, ticket_repo):
    return ParkingFacility(facility_config, rate_card=rate_card, ticket_repo=ticket_repo)


@pytest.fixture
def small_facility():
    """One floor, two car slots, no bikes."""
    return ParkingFacility(FacilityConfig(floor_count=1, car_slots_per_floor=2, bike_slots_per_floor=0))


@pytest.fixture
def start_time():
    return START


@pytest.fixture
def frozen_clock():
    """Freeze wall-clock time at START; tests move it with ``tick`` / ``move_to``."""
    with freeze_time(START) as frozen:
        yield frozen


@pytest.fixture
def parked_car(facility, frozen_clock):
    """A car that entered at START."""
    return facility.park(VehicleType.CAR, "PARKED123")


@pytest.fixture
def analytics_service(facility):
    return AnalyticsService(facility)
