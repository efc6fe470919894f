import argparse
from collections import namedtuple

from .timers import TIMER_HZ

# ---- Configuration ----
DEFAULT_SCALE = 10
DEFAULT_CPU_HZ = 600

Config = namedtuple("Config", "rom debug inspect scale cpu_hz timer_hz")


def positive_int(text):
    value = int(text)
    if value <= 0:
        raise argparse.ArgumentTypeError("must be a positive integer, got %s" % text)
    return value


def build_parser():
    parser = argparse.ArgumentParser(prog="chip8", description="CHIP-8 Emulator")
    parser.add_argument("rom", help="ROM file to load")
    parser.add_argument("-d", "--debug", action="store_true",
                        help="debug mode: verbose logging, step with Space")
    parser.add_argument("-i", "--inspect", action="store_true",
                        help="print the ROM's instructions and exit")
    parser.add_argument("-s", "--scale", type=positive_int, default=DEFAULT_SCALE,
                        help="pixel scale factor (default: %(default)s)")
    parser.add_argument("--cpu-hz", type=positive_int, default=DEFAULT_CPU_HZ,
                        help="instructions per second (default: %(default)s)")
    return parser


def parse_args(argv=None):
    args = build_parser().parse_args(argv)
    return Config(args.rom, args.debug, args.inspect, args.scale, args.cpu_hz, TIMER_HZ)
