TIMER_HZ = 60


class Timers:
    """Delay and sound timers, decremented by tick() at 60 Hz."""

    def __init__(self):
        self.delay = 0
        self.sound = 0

    def tick(self):
        # Delay timer
        if self.delay > 0:
            self.delay -= 1
        # Sound timer
        if self.sound > 0:
            self.sound -= 1

    def sound_active(self):
        return self.sound > 0
