# We're subclassing pyglet (that'll handle graphics, sound output, and
# keyboard handling) and overriding whatever def we need from there. The
# CPU itself never sees pyglet: the window feeds it keypad snapshots through
# the Driver and forwards frames and the tone flag to Display and Beeper.

import logging

import pyglet
from pyglet.window import key

from .audio import Beeper
from .display import Display
from .driver import Driver
from .errors import CPUFault
from .keypad import KEY_LAYOUT, KeypadState

logger = logging.getLogger(__name__)


def build_keymap():
    keymap = {}
    for name, value in KEY_LAYOUT.items():
        symbol = getattr(key, "_" + name if name.isdigit() else name)
        keymap[symbol] = value
    return keymap


# Key mapping - maps physical keyboard keys to CHIP-8 keypad
keymap = build_keymap()


class Chip8Window(pyglet.window.Window):

    def __init__(self, cpu, config):
        self.display = Display(config.scale)
        super().__init__(self.display.width, self.display.height,
                         caption="CHIP-8 Emulator", resizable=False, vsync=False)

        self.cpu = cpu
        self.config = config
        self.keys = KeypadState()
        self.beeper = Beeper()
        self.driver = Driver(cpu, renderer=self.display, audio=self.beeper,
                             cpu_hz=config.cpu_hz, timer_hz=config.timer_hz)
        self.stepping = config.debug
        self.error = None

        self.display.render(cpu.framebuffer.snapshot())

        # Schedule CPU and timer ticks
        if not self.stepping:
            pyglet.clock.schedule_interval(self._cpu_tick, 1.0 / config.cpu_hz)
        pyglet.clock.schedule_interval(self._timer_tick, 1.0 / config.timer_hz)

    # ---- Input ----
    def on_key_press(self, symbol, modifiers):
        if symbol == key.ESCAPE:
            self.close()
        elif symbol in keymap:
            self.keys.press(keymap[symbol])
        elif symbol == key.F1:
            root = logging.getLogger()
            root.setLevel(logging.INFO if root.level == logging.DEBUG else logging.DEBUG)
            logger.info("Debug logging %s", "on" if root.level == logging.DEBUG else "off")
        elif symbol == key.SPACE and self.stepping:
            self._run(self.driver.step, self.keys.copy())
            logger.info(self.cpu.dump_registers())

    def on_key_release(self, symbol, modifiers):
        if symbol in keymap:
            self.keys.release(keymap[symbol])

    # ---- Drawing ----
    def on_draw(self):
        self.clear()
        self.display.draw()

    # ---- CPU cycle ----
    def _run(self, func, *args):
        try:
            func(*args)
        except CPUFault as e:
            self.error = e
            self.close()

    def _cpu_tick(self, dt):
        self._run(self.driver.run_cycles, dt, self.keys.copy())

    # ---- timers ----
    def _timer_tick(self, dt):
        self._run(self.driver.run_timers, dt)

    def close(self):
        pyglet.clock.unschedule(self._cpu_tick)
        pyglet.clock.unschedule(self._timer_tick)
        if self.beeper is not None:
            self.beeper.close()
            self.beeper = None
        super().close()
