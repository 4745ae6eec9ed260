class PowerupTimer:
    """Countdown gating a temporary paddle attribute.

    A timer that was never started reports done, so callers can restore the
    base attribute every frame without tracking whether a power-up ran.
    """

    def __init__(self):
        self.time_left = 0.0

    def start(self, length: float):
        self.time_left = length

    def update(self, dt: float):
        self.time_left -= dt

    def is_done(self) -> bool:
        return self.time_left <= 0
