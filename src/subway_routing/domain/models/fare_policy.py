"""Fare policy domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class FarePolicy:
    """Tunable parameters of the distance, surcharge and age fare rules.

    Distances are in kilometers, amounts in won, percentages in whole
    percent. Age bands are half-open: a rider is free below
    ``free_age_limit``, a child below ``child_age_limit``, a teen below
    ``teen_age_limit`` and an adult otherwise.
    """

    base_fare: int = 1250
    first_tier_threshold: int = 10
    second_tier_threshold: int = 50
    first_tier_unit_distance: int = 5
    first_tier_unit_fare: int = 100
    second_tier_unit_distance: int = 8
    second_tier_unit_fare: int = 100
    free_age_limit: int = 6
    child_age_limit: int = 13
    teen_age_limit: int = 19
    discount_deduction: int = 350
    child_discount_percent: int = 50
    teen_discount_percent: int = 20
