import pytest

from smart_parking.domain.billing import RateCard, DEFAULT_RATE_CARD, DAILY_MAX
from smart_parking.domain.common import VehicleType


def test_default_rate_card_rates():
    assert dict(DEFAULT_RATE_CARD.hourly_rates) == {
        VehicleType.CAR: 20.0,
        VehicleType.BIKE: 10.0,
        VehicleType.ELECTRIC_CAR: 16.0,
        VehicleType.HANDICAPPED_CAR: 10.0,
        VehicleType.HANDICAPPED_BIKE: 5.0,
    }
    assert DEFAULT_RATE_CARD.daily_max == DAILY_MAX == 200.0


def test_rate_card_is_read_only():
    with pytest.raises(TypeError):
        DEFAULT_RATE_CARD.hourly_rates[VehicleType.CAR] = 1.0


def test_rate_card_requires_every_vehicle_type():
    with pytest.raises(ValueError, match="Missing hourly rate"):
        RateCard({VehicleType.CAR: 20.0})


def test_rate_card_rejects_negative_cap():
    with pytest.raises(ValueError):
        RateCard.from_base_rates(daily_max=-1)


@pytest.mark.parametrize(
    "duration_hours, billed",
    [(0.0, 0), (0.01, 1), (1.0, 1), (1.0001, 2), (2.5, 3), (3.0, 3)],
)
def test_billed_hours_round_up(duration_hours, billed):
    assert RateCard.billed_hours(duration_hours) == billed


def test_charge_per_started_hour(rate_card):
    assert rate_card.charge(VehicleType.CAR, 0.2) == 20.0
    assert rate_card.charge(VehicleType.BIKE, 1.5) == 20.0
    assert rate_card.charge(VehicleType.ELECTRIC_CAR, 3.0) == 48.0
    assert rate_card.charge(VehicleType.HANDICAPPED_BIKE, 4.0) == 20.0


def test_charge_zero_duration_is_free(rate_card):
    assert rate_card.charge(VehicleType.CAR, 0.0) == 0.0


def test_charge_is_capped(rate_card):
    # 11 started hours of a car would be 220
    assert rate_card.charge(VehicleType.CAR, 10.5) == 200.0
    assert rate_card.charge(VehicleType.CAR, 72.0) == 200.0
    assert rate_card.quote(VehicleType.CAR, 10.5) == (11, 200.0)


@pytest.mark.parametrize("vehicle_type", list(VehicleType))
def test_charge_is_monotonic_and_bounded(rate_card, vehicle_type):
    durations = [i / 4 for i in range(0, 24 * 4 * 2)]
    charges = [rate_card.charge(vehicle_type, d) for d in durations]
    assert charges == sorted(charges)
    assert max(charges) <= rate_card.daily_max


def test_custom_base_rates():
    card = RateCard.from_base_rates(car_rate=30.0, bike_rate=8.0, daily_max=100.0)
    assert card.hourly_rate(VehicleType.ELECTRIC_CAR) == 24.0
    assert card.hourly_rate(VehicleType.HANDICAPPED_BIKE) == 4.0
    assert card.charge(VehicleType.CAR, 5.0) == 100.0
    assert card.label(VehicleType.ELECTRIC_CAR) == "Electric Car"
