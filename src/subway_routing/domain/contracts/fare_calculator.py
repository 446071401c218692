"""Protocol for fare calculation."""

from collections.abc import Iterable
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from subway_routing.domain.models.distance import Distance
    from subway_routing.domain.models.fare import Fare
    from subway_routing.domain.models.line import Line
    from subway_routing.domain.models.rider_context import RiderContext


class FareCalculatorProtocol(Protocol):
    """Protocol for turning a travelled path into a fare."""

    def calculate(
        self, distance: "Distance", lines: Iterable["Line"], rider: "RiderContext"
    ) -> "Fare":
        """Calculate the fare for a path.

        Args:
            distance: Total travelled distance.
            lines: Lines ridden along the path.
            rider: Anonymous or authenticated rider.

        Returns:
            The fare, never negative.
        """
        ...
