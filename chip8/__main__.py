import logging
import sys

from .config import parse_args
from .cpu import CPU
from .disassembler import listing
from .errors import Chip8Error
from .rom import read_rom

logger = logging.getLogger("chip8")


def main(argv=None):
    config = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if config.debug else logging.INFO,
                        format="[%(levelname)s] %(name)s: %(message)s")

    try:
        if config.inspect:
            print(listing(read_rom(config.rom)))
            return 0
        cpu = CPU.from_config(config)
    except (OSError, Chip8Error) as e:
        logger.error("Cannot load ROM %s: %s", config.rom, e)
        return 1

    import pyglet
    from .window import Chip8Window

    window = Chip8Window(cpu, config)
    pyglet.app.run()
    if window.error is not None:
        logger.error("Emulation stopped: %s", window.error)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
