"""Cowgod-style listing of a ROM, used by ``--inspect``."""

from .memory import USER_SPACE
from .opcode import Op, decode

# formats take the decoded Instruction
FORMATS = {
    Op.SYS: "SYS 0x{i.nnn:03X}",
    Op.CLS: "CLS",
    Op.RET: "RET",
    Op.JP: "JP 0x{i.nnn:03X}",
    Op.CALL: "CALL 0x{i.nnn:03X}",
    Op.JP_V0: "JP V0, 0x{i.nnn:03X}",
    Op.SE_VX_KK: "SE V{i.x:X}, 0x{i.kk:02X}",
    Op.SNE_VX_KK: "SNE V{i.x:X}, 0x{i.kk:02X}",
    Op.SE_VX_VY: "SE V{i.x:X}, V{i.y:X}",
    Op.SNE_VX_VY: "SNE V{i.x:X}, V{i.y:X}",
    Op.SKP: "SKP V{i.x:X}",
    Op.SKNP: "SKNP V{i.x:X}",
    Op.LD_VX_KK: "LD V{i.x:X}, 0x{i.kk:02X}",
    Op.ADD_VX_KK: "ADD V{i.x:X}, 0x{i.kk:02X}",
    Op.LD_VX_VY: "LD V{i.x:X}, V{i.y:X}",
    Op.OR: "OR V{i.x:X}, V{i.y:X}",
    Op.AND: "AND V{i.x:X}, V{i.y:X}",
    Op.XOR: "XOR V{i.x:X}, V{i.y:X}",
    Op.ADD: "ADD V{i.x:X}, V{i.y:X}",
    Op.SUB: "SUB V{i.x:X}, V{i.y:X}",
    Op.SHR: "SHR V{i.x:X}",
    Op.SUBN: "SUBN V{i.x:X}, V{i.y:X}",
    Op.SHL: "SHL V{i.x:X}",
    Op.LD_I: "LD I, 0x{i.nnn:03X}",
    Op.ADD_I_VX: "ADD I, V{i.x:X}",
    Op.LD_F_VX: "LD F, V{i.x:X}",
    Op.LD_B_VX: "LD B, V{i.x:X}",
    Op.LD_I_VX: "LD [I], V{i.x:X}",
    Op.LD_VX_I: "LD V{i.x:X}, [I]",
    Op.DRW: "DRW V{i.x:X}, V{i.y:X}, {i.n}",
    Op.LD_VX_DT: "LD V{i.x:X}, DT",
    Op.LD_DT_VX: "LD DT, V{i.x:X}",
    Op.LD_ST_VX: "LD ST, V{i.x:X}",
    Op.RND: "RND V{i.x:X}, 0x{i.kk:02X}",
    Op.LD_VX_K: "LD V{i.x:X}, K",
    Op.UNKNOWN: "UNKNOWN 0x{i.opcode:04X}",
}


def mnemonic(instruction):
    return FORMATS[instruction.op].format(i=instruction)


def disassemble(rom, origin=USER_SPACE):
    """Yield (address, opcode, text) for every word in `rom`.

    A trailing odd byte is reported as data with opcode None.
    """
    rom = bytes(rom)
    for offset in range(0, len(rom) - 1, 2):
        opcode = (rom[offset] << 8) | rom[offset + 1]
        yield origin + offset, opcode, mnemonic(decode(opcode))
    if len(rom) % 2:
        yield origin + len(rom) - 1, None, "DB 0x%02X" % rom[-1]


def listing(rom, origin=USER_SPACE):
    rom = bytes(rom)
    lines = []
    for addr, opcode, text in disassemble(rom, origin):
        word = "%04X" % opcode if opcode is not None else "%02X  " % rom[-1]
        lines.append("%03X: %s  %s" % (addr, word, text))
    return "\n".join(lines)
