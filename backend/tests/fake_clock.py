"""FakeClock: a callable clock for RoundLifecycle that only moves when told to."""

from datetime import datetime, timedelta, timezone

T0 = datetime(2026, 3, 10, 9, 0, 0, tzinfo=timezone.utc)


class FakeClock:

    def __init__(self, now: datetime = T0):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float) -> datetime:
        self.now = self.now + timedelta(seconds=seconds)
        return self.now
