"""Fare calculation from distance, ridden lines and rider age."""

import logging
import math
from collections.abc import Iterable

from subway_routing.domain.models.distance import Distance
from subway_routing.domain.models.fare import Fare
from subway_routing.domain.models.fare_breakdown import FareBreakdown
from subway_routing.domain.models.fare_policy import FarePolicy
from subway_routing.domain.models.line import Line
from subway_routing.domain.models.rider_context import Authenticated, RiderContext

logger = logging.getLogger(__name__)


class FareCalculator:
    """Applies the tiered distance fare, the line surcharge and the age discount.

    The fare is built in three steps:

    1. Distance fare: ``base_fare`` up to the first threshold, then one
       ``first_tier_unit_fare`` per started ``first_tier_unit_distance`` up to
       the second threshold, then one ``second_tier_unit_fare`` per started
       ``second_tier_unit_distance`` beyond it.
    2. Surcharge: the highest surcharge among the ridden lines is added once.
    3. Age discount for authenticated riders: free below ``free_age_limit``;
       children and teens pay ``discount_deduction`` less, then the band's
       percentage off the remainder.
    """

    def __init__(self, policy: FarePolicy | None = None) -> None:
        """Initialize with a fare policy, using the default policy if omitted."""
        self._policy = policy or FarePolicy()

    @property
    def policy(self) -> FarePolicy:
        return self._policy

    def calculate(self, distance: Distance, lines: Iterable[Line], rider: RiderContext) -> Fare:
        """Calculate the fare for a path."""
        return Fare(self.breakdown(distance, lines, rider).total)

    def breakdown(
        self, distance: Distance, lines: Iterable[Line], rider: RiderContext
    ) -> FareBreakdown:
        """Calculate the fare for a path, keeping each component."""
        distance_fare = self.distance_fare(distance)
        surcharge = self.surcharge(lines)
        fare = distance_fare + surcharge
        total = self.apply_age_discount(fare, rider)

        result = FareBreakdown(
            distance_fare=distance_fare.amount,
            surcharge=surcharge.amount,
            discount=fare.amount - total.amount,
            total=total.amount,
        )
        logger.debug(f"Fare for {distance.value}km: {result}")
        return result

    def distance_fare(self, distance: Distance) -> Fare:
        """Tiered fare for the travelled distance."""
        p = self._policy
        km = distance.value
        amount = p.base_fare

        if km > p.first_tier_threshold:
            within_first_tier = min(km, p.second_tier_threshold) - p.first_tier_threshold
            amount += (
                math.ceil(within_first_tier / p.first_tier_unit_distance) * p.first_tier_unit_fare
            )

        if km > p.second_tier_threshold:
            beyond_second_tier = km - p.second_tier_threshold
            amount += (
                math.ceil(beyond_second_tier / p.second_tier_unit_distance)
                * p.second_tier_unit_fare
            )

        return Fare(amount)

    @staticmethod
    def surcharge(lines: Iterable[Line]) -> Fare:
        """Highest surcharge among the ridden lines, or zero."""
        return max((line.surcharge for line in lines), default=Fare(0))

    def apply_age_discount(self, fare: Fare, rider: RiderContext) -> Fare:
        """Apply the age discount of an authenticated rider."""
        if not isinstance(rider, Authenticated):
            return fare

        p = self._policy
        age = rider.age
        if age < p.free_age_limit:
            return Fare(0)
        if age < p.child_age_limit:
            return self._discounted(fare, p.child_discount_percent)
        if age < p.teen_age_limit:
            return self._discounted(fare, p.teen_discount_percent)
        return fare

    def _discounted(self, fare: Fare, percent: int) -> Fare:
        remainder = max(fare.amount - self._policy.discount_deduction, 0)
        return Fare(remainder * (100 - percent) // 100)
