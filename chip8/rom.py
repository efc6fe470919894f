from pathlib import Path


def read_rom(path):
    # raw binary, no header
    return Path(path).read_bytes()


def write_rom(path, data):
    Path(path).write_bytes(bytes(data))


def assemble_words(*words):
    """Pack 16-bit opcode words into big-endian ROM bytes."""
    rom = bytearray()
    for word in words:
        rom += bytes([(word >> 8) & 0xFF, word & 0xFF])
    return bytes(rom)
