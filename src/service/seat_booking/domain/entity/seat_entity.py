import attrs


@attrs.define(frozen=True)
class Seat:
    """
    A single seat in the chart.

    `id` is 1-based and stable; row and column are never stored on the seat,
    they follow from the id and the chart's row width.
    """

    id: int
    booked: bool = False

    @property
    def is_available(self) -> bool:
        return not self.booked

    def book(self) -> 'Seat':
        return attrs.evolve(self, booked=True)

    def release(self) -> 'Seat':
        return attrs.evolve(self, booked=False)
