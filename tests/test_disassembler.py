from chip8.disassembler import disassemble, listing, mnemonic
from chip8.opcode import decode
from chip8.rom import assemble_words


def test_mnemonics():
    assert mnemonic(decode(0x12CD)) == "JP 0x2CD"
    assert mnemonic(decode(0x610A)) == "LD V1, 0x0A"
    assert mnemonic(decode(0xD015)) == "DRW V0, V1, 5"
    assert mnemonic(decode(0xFA33)) == "LD B, VA"
    assert mnemonic(decode(0xF30A)) == "LD V3, K"
    assert mnemonic(decode(0x00E0)) == "CLS"
    assert mnemonic(decode(0x5AB1)) == "UNKNOWN 0x5AB1"


def test_disassemble_addresses_from_origin():
    rom = assemble_words(0x00E0, 0x2206)
    assert list(disassemble(rom)) == [
        (0x200, 0x00E0, "CLS"),
        (0x202, 0x2206, "CALL 0x206"),
    ]


def test_trailing_byte_is_data():
    rom = assemble_words(0x00EE) + bytes([0x7F])
    entries = list(disassemble(rom))
    assert entries[-1] == (0x202, None, "DB 0x7F")


def test_listing():
    rom = assemble_words(0x12CD) + bytes([0x01])
    assert listing(rom).splitlines() == [
        "200: 12CD  JP 0x2CD",
        "202: 01    DB 0x01",
    ]
