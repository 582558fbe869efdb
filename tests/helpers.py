"""Shared test helpers."""

DAY = 60 * 60 * 24


class FakeClock:
    """Settable clock returning epoch seconds."""
    def __init__(self, now: float = 1_700_000_000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds
