"""Schedules the CPU against wall-clock time.

Instruction dispatch and timer decay run on two independent cadences: the
window calls run_cycles() and run_timers() from separate clock callbacks
with the elapsed seconds, and each converts time into a whole number of
cycles/ticks, carrying the remainder over to the next call.
"""

import logging

from .config import DEFAULT_CPU_HZ
from .errors import CPUFault
from .timers import TIMER_HZ

logger = logging.getLogger(__name__)

# float slack so 1/60 s at 60 Hz counts as one whole tick
EPSILON = 1e-6


class Driver:

    def __init__(self, cpu, renderer=None, audio=None, cpu_hz=DEFAULT_CPU_HZ, timer_hz=TIMER_HZ):
        self.cpu = cpu
        self.renderer = renderer
        self.audio = audio
        self.cpu_hz = cpu_hz
        self.timer_hz = timer_hz
        self.halted = False
        self.error = None
        self.cycle_count = 0
        self._cycle_budget = 0.0
        self._timer_budget = 0.0

    def step(self, keypad=None):
        if self.halted:
            return None
        try:
            output = self.cpu.cycle(keypad)
        except CPUFault as e:
            self.halted = True
            self.error = e
            logger.error("Emulation error: %s", e)
            raise
        self.cycle_count += 1
        if output.display_updated and self.renderer is not None:
            self.renderer(output.framebuffer)
        return output

    def run_cycles(self, dt, keypad=None):
        if self.halted:
            return 0
        self._cycle_budget += dt * self.cpu_hz
        count = int(self._cycle_budget + EPSILON)
        self._cycle_budget -= count
        for _ in range(count):
            self.step(keypad)
        return count

    def run_timers(self, dt):
        if self.halted:
            return 0
        self._timer_budget += dt * self.timer_hz
        ticks = int(self._timer_budget + EPSILON)
        self._timer_budget -= ticks
        for _ in range(ticks):
            self.cpu.tick_timers()
        if self.audio is not None:
            self.audio(self.cpu.sound_active())
        return ticks
