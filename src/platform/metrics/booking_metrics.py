from prometheus_client import Counter, Gauge, Histogram


class BookingMetrics:
    """
    Seat Booking Metrics Collector

    Tracks reservation outcomes, commit races against the seat store, and
    how full the chart is.
    """

    def __init__(self) -> None:
        self.seat_reservation_requests = Counter(
            'seat_reservation_requests_total',
            'Total seat reservation requests',
            ['result'],  # result: success/invalid_request/insufficient_capacity/stale_snapshot/error
        )

        self.seat_reservation_duration = Histogram(
            'seat_reservation_duration_seconds',
            'Seat reservation processing time',
            buckets=[0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0, 2.0],
        )

        self.seat_commit_conflicts = Counter(
            'seat_commit_conflicts_total',
            'Compare-and-commit rejections caused by a concurrent booking',
        )

        self.seat_availability = Gauge(
            'seat_availability_ratio',
            'Available seats ratio of the seating chart',
        )

        self.seat_resets = Counter('seat_resets_total', 'Total seating chart resets')

    def record_reservation(self, *, result: str, duration: float) -> None:
        self.seat_reservation_requests.labels(result=result).inc()
        self.seat_reservation_duration.observe(duration)

    def record_commit_conflict(self) -> None:
        self.seat_commit_conflicts.inc()

    def record_reset(self) -> None:
        self.seat_resets.inc()

    def update_seat_availability(self, *, available: int, total: int) -> None:
        self.seat_availability.set(available / total if total else 0.0)


# Global metrics instance
metrics = BookingMetrics()
