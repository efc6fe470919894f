# Memory - can hold up to 4096 bytes which includes: the fonts, a reserved
# interpreter area and the inputted ROM.
#
#   0x000 - 0x04F  system fonts (16 glyphs, 5 bytes each)
#   0x050 - 0x1FF  interpreter reserved
#   0x200 - 0xFFF  user space (ROM is copied here)

from .errors import AddressError, RomTooLargeError

MEMORY_SIZE = 4096
USER_SPACE = 0x200
MAX_ROM_SIZE = MEMORY_SIZE - USER_SPACE

# set fonts (binary pixel patterns)
FONTSET = bytes([
    0xF0, 0x90, 0x90, 0x90, 0xF0,  # 0
    0x20, 0x60, 0x20, 0x20, 0x70,  # 1
    0xF0, 0x10, 0xF0, 0x80, 0xF0,  # 2
    0xF0, 0x10, 0xF0, 0x10, 0xF0,  # 3
    0x90, 0x90, 0xF0, 0x10, 0x10,  # 4
    0xF0, 0x80, 0xF0, 0x10, 0xF0,  # 5
    0xF0, 0x80, 0xF0, 0x90, 0xF0,  # 6
    0xF0, 0x10, 0x20, 0x40, 0x40,  # 7
    0xF0, 0x90, 0xF0, 0x90, 0xF0,  # 8
    0xF0, 0x90, 0xF0, 0x10, 0xF0,  # 9
    0xF0, 0x90, 0xF0, 0x90, 0x90,  # A
    0xE0, 0x90, 0xE0, 0x90, 0xE0,  # B
    0xF0, 0x80, 0x80, 0x80, 0xF0,  # C
    0xE0, 0x90, 0x90, 0x90, 0xE0,  # D
    0xF0, 0x80, 0xF0, 0x80, 0xF0,  # E
    0xF0, 0x80, 0xF0, 0x80, 0x80   # F
])  # notice 80 bytes

GLYPH_SIZE = 5


def font_address(digit):
    """Address of the font glyph for hex digit `digit`."""
    return (digit & 0xF) * GLYPH_SIZE


class Memory:

    def __init__(self):
        self._data = bytearray(MEMORY_SIZE)
        self._data[:len(FONTSET)] = FONTSET

    def __getitem__(self, addr):
        return self.read(addr)

    def _check(self, addr):
        if not 0 <= addr < MEMORY_SIZE:
            raise AddressError("Memory address out of range: 0x%X" % addr)

    def read(self, addr):
        self._check(addr)
        return self._data[addr]

    def write(self, addr, value):
        self._check(addr)
        self._data[addr] = value & 0xFF

    def read_word(self, addr):
        # big-endian, both bytes must be addressable
        return (self.read(addr) << 8) | self.read(addr + 1)

    def load(self, rom):
        rom = bytes(rom)
        if len(rom) > MAX_ROM_SIZE:
            raise RomTooLargeError(
                "ROM is %d bytes, user space holds at most %d" % (len(rom), MAX_ROM_SIZE))
        self._data[USER_SPACE:USER_SPACE + len(rom)] = rom

    def dump(self, start=0, end=MEMORY_SIZE):
        return bytes(self._data[start:end])
