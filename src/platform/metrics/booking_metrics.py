from prometheus_client import Counter, Histogram


class BookingMetrics:
    """
    Venue Booking Engine Metrics Collector

    Tracks booking outcomes, storage-level seat races and show lifecycle transitions
    """

    def __init__(self):
        # ========== Booking Transaction Metrics ==========
        self.booking_attempts = Counter(
            'venue_booking_attempts_total',
            'Booking requests by outcome',
            ['result'],  # result: confirmed/conflict/rejected/error
        )

        self.booking_races_retried = Counter(
            'venue_booking_races_retried_total',
            'Booking attempts that lost the seat reservation race and were retried',
        )

        self.booking_duration = Histogram(
            'venue_booking_duration_seconds',
            'Booking transaction duration including retries',
            buckets=[0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5],
        )

        self.seats_booked = Counter('venue_seats_booked_total', 'Seats confirmed by bookings')

        # ========== Show Lifecycle Metrics ==========
        self.show_status_transitions = Counter(
            'venue_show_status_transitions_total',
            'Show status transitions applied by reconciliation',
            ['from_status', 'to_status'],
        )

        self.show_reconcile_failures = Counter(
            'venue_show_reconcile_failures_total',
            'Shows whose reconciliation failed and was skipped',
        )

    # ========== Helper Methods ==========

    def record_booking(self, *, result: str, duration: float, seat_count: int = 0):
        self.booking_attempts.labels(result=result).inc()
        self.booking_duration.observe(duration)
        if seat_count:
            self.seats_booked.inc(seat_count)

    def record_race_retried(self):
        self.booking_races_retried.inc()

    def record_status_transition(self, *, from_status: str, to_status: str):
        self.show_status_transitions.labels(from_status=from_status, to_status=to_status).inc()

    def record_reconcile_failure(self):
        self.show_reconcile_failures.inc()


# Global metrics instance
metrics = BookingMetrics()
