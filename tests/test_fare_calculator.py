"""Tests for the fare calculator."""

import pytest

from subway_routing.application.services import FareCalculator
from subway_routing.domain.models import (
    Anonymous,
    Authenticated,
    Distance,
    Fare,
    FarePolicy,
    Line,
    RiderContext,
)


@pytest.fixture
def calculator() -> FareCalculator:
    """Create a calculator with the default fare policy."""
    return FareCalculator()


@pytest.mark.parametrize(
    ("km", "expected"),
    [
        (1, 1250),
        (10, 1250),
        (11, 1350),
        (15, 1350),
        (16, 1450),
        (50, 2050),
        (51, 2150),
        (58, 2150),
        (59, 2250),
        (66, 2250),
        (67, 2350),
    ],
)
def test_distance_fare_tiers(calculator: FareCalculator, km: int, expected: int) -> None:
    """Given a distance, when calculating the distance fare, then the tiered schedule applies."""
    assert calculator.distance_fare(Distance(km)) == Fare(expected)


def test_surcharge_is_the_maximum_not_the_sum(calculator: FareCalculator) -> None:
    """Given several ridden lines, when calculating, then only the highest surcharge is added."""
    lines = [Line("이호선", 0), Line("삼호선", 200), Line("신분당선", 1000)]

    fare = calculator.calculate(Distance(10), lines, Anonymous())

    assert fare == Fare(1250 + 1000)


def test_no_lines_means_no_surcharge(calculator: FareCalculator) -> None:
    """Given no ridden lines, when calculating, then no surcharge is added."""
    assert calculator.calculate(Distance(10), [], Anonymous()) == Fare(1250)


def test_anonymous_rider_pays_full_fare(calculator: FareCalculator) -> None:
    """Given an anonymous rider, when calculating, then no age discount applies."""
    fare = calculator.calculate(Distance(8), [Line("삼호선", 200)], Anonymous())

    assert fare == Fare(1450)


@pytest.mark.parametrize(
    ("age", "expected"),
    [
        (0, 0),
        (5, 0),
        (6, 550),
        (12, 550),
        (13, 880),
        (18, 880),
        (19, 1450),
        (22, 1450),
        (65, 1450),
    ],
)
def test_age_discount_bands(calculator: FareCalculator, age: int, expected: int) -> None:
    """Given an authenticated rider, when calculating, then the age band decides the discount."""
    fare = calculator.calculate(Distance(8), [Line("삼호선", 200)], Authenticated(age))

    assert fare == Fare(expected)


@pytest.mark.parametrize("km", [1, 10, 37, 50, 120])
def test_rider_below_minimum_age_rides_free(calculator: FareCalculator, km: int) -> None:
    """Given a rider younger than the free age limit, when calculating, then the fare is zero."""
    fare = calculator.calculate(Distance(km), [Line("신분당선", 1000)], Authenticated(3))

    assert fare == Fare(0)


def test_discount_never_goes_negative() -> None:
    """Given a fare below the deduction, when discounting, then the fare floors at zero."""
    calculator = FareCalculator(FarePolicy(base_fare=200, discount_deduction=350))

    assert calculator.calculate(Distance(5), [], Authenticated(10)) == Fare(0)
    assert calculator.calculate(Distance(5), [], Authenticated(15)) == Fare(0)


@pytest.mark.parametrize(
    "rider", [Anonymous(), Authenticated(8), Authenticated(16), Authenticated(40)]
)
def test_fare_is_monotonic_in_distance(calculator: FareCalculator, rider: RiderContext) -> None:
    """Given a fixed surcharge and rider, when distance grows, then the fare never decreases."""
    lines = [Line("삼호선", 200)]
    fares = [calculator.calculate(Distance(km), lines, rider) for km in range(1, 130)]

    assert all(earlier <= later for earlier, later in zip(fares, fares[1:], strict=False))


def test_custom_policy_is_used() -> None:
    """Given a tuned policy, when calculating, then its thresholds and increments apply."""
    policy = FarePolicy(
        base_fare=1000,
        first_tier_threshold=5,
        second_tier_threshold=20,
        first_tier_unit_distance=5,
        first_tier_unit_fare=50,
        second_tier_unit_distance=10,
        second_tier_unit_fare=200,
    )
    calculator = FareCalculator(policy)

    # 1000 + 3 * 50 (5..20km) + 1 * 200 (20..21km)
    assert calculator.distance_fare(Distance(21)) == Fare(1350)
    assert calculator.policy is policy


def test_breakdown_components_add_up(calculator: FareCalculator) -> None:
    """Given a discounted rider, when breaking the fare down, then components add up to the total."""
    breakdown = calculator.breakdown(Distance(8), [Line("삼호선", 200)], Authenticated(12))

    assert breakdown.distance_fare == 1250
    assert breakdown.surcharge == 200
    assert breakdown.total == 550
    assert breakdown.distance_fare + breakdown.surcharge - breakdown.discount == breakdown.total
