"""Opcode decoding.

A CHIP-8 opcode is a 16-bit big-endian word made of four nibbles::

      c    x    y    n
    [15-12][11-8][7-4][3-0]

    c   opcode group          kk  low byte (bits 7-0)
    x   register index        nnn address (bits 11-0)
    y   register index        n   nibble / sub-operation

decode() is total: every word maps to an Instruction, patterns that do not
match any known instruction decode to Op.UNKNOWN.
"""

from collections import namedtuple
from enum import Enum


class Op(Enum):
    # control flow
    SYS = "SYS"            # 0nnn  legacy machine-code call, ignored
    CLS = "CLS"            # 00E0
    RET = "RET"            # 00EE
    JP = "JP"              # 1nnn
    CALL = "CALL"          # 2nnn
    JP_V0 = "JP_V0"        # Bnnn
    # conditional skips
    SE_VX_KK = "SE_VX_KK"    # 3xkk
    SNE_VX_KK = "SNE_VX_KK"  # 4xkk
    SE_VX_VY = "SE_VX_VY"    # 5xy0
    SNE_VX_VY = "SNE_VX_VY"  # 9xy0
    SKP = "SKP"              # Ex9E
    SKNP = "SKNP"            # ExA1
    # register immediate
    LD_VX_KK = "LD_VX_KK"    # 6xkk
    ADD_VX_KK = "ADD_VX_KK"  # 7xkk
    # register-register
    LD_VX_VY = "LD_VX_VY"    # 8xy0
    OR = "OR"                # 8xy1
    AND = "AND"              # 8xy2
    XOR = "XOR"              # 8xy3
    ADD = "ADD"              # 8xy4
    SUB = "SUB"              # 8xy5
    SHR = "SHR"              # 8xy6
    SUBN = "SUBN"            # 8xy7
    SHL = "SHL"              # 8xyE
    # index and memory
    LD_I = "LD_I"            # Annn
    ADD_I_VX = "ADD_I_VX"    # Fx1E
    LD_F_VX = "LD_F_VX"      # Fx29
    LD_B_VX = "LD_B_VX"      # Fx33
    LD_I_VX = "LD_I_VX"      # Fx55
    LD_VX_I = "LD_VX_I"      # Fx65
    # display
    DRW = "DRW"              # Dxyn
    # timers
    LD_VX_DT = "LD_VX_DT"    # Fx07
    LD_DT_VX = "LD_DT_VX"    # Fx15
    LD_ST_VX = "LD_ST_VX"    # Fx18
    # misc
    RND = "RND"              # Cxkk
    LD_VX_K = "LD_VX_K"      # Fx0A
    UNKNOWN = "UNKNOWN"


Instruction = namedtuple("Instruction", "op opcode x y n kk nnn")


# dispatch table, first match wins
PATTERNS = [
    (0xFFFF, 0x00E0, Op.CLS),
    (0xFFFF, 0x00EE, Op.RET),
    (0xF000, 0x0000, Op.SYS),

    (0xF000, 0x1000, Op.JP),
    (0xF000, 0x2000, Op.CALL),
    (0xF000, 0x3000, Op.SE_VX_KK),
    (0xF000, 0x4000, Op.SNE_VX_KK),
    (0xF00F, 0x5000, Op.SE_VX_VY),
    (0xF000, 0x6000, Op.LD_VX_KK),
    (0xF000, 0x7000, Op.ADD_VX_KK),

    (0xF00F, 0x8000, Op.LD_VX_VY),
    (0xF00F, 0x8001, Op.OR),
    (0xF00F, 0x8002, Op.AND),
    (0xF00F, 0x8003, Op.XOR),
    (0xF00F, 0x8004, Op.ADD),
    (0xF00F, 0x8005, Op.SUB),
    (0xF00F, 0x8006, Op.SHR),
    (0xF00F, 0x8007, Op.SUBN),
    (0xF00F, 0x800E, Op.SHL),

    (0xF00F, 0x9000, Op.SNE_VX_VY),
    (0xF000, 0xA000, Op.LD_I),
    (0xF000, 0xB000, Op.JP_V0),
    (0xF000, 0xC000, Op.RND),
    (0xF000, 0xD000, Op.DRW),

    (0xF0FF, 0xE09E, Op.SKP),
    (0xF0FF, 0xE0A1, Op.SKNP),

    (0xF0FF, 0xF007, Op.LD_VX_DT),
    (0xF0FF, 0xF00A, Op.LD_VX_K),
    (0xF0FF, 0xF015, Op.LD_DT_VX),
    (0xF0FF, 0xF018, Op.LD_ST_VX),
    (0xF0FF, 0xF01E, Op.ADD_I_VX),
    (0xF0FF, 0xF029, Op.LD_F_VX),
    (0xF0FF, 0xF033, Op.LD_B_VX),
    (0xF0FF, 0xF055, Op.LD_I_VX),
    (0xF0FF, 0xF065, Op.LD_VX_I),
]


def c(opcode):
    return (opcode & 0xF000) >> 12


def vx(opcode):
    return (opcode & 0x0F00) >> 8


def vy(opcode):
    return (opcode & 0x00F0) >> 4


def n(opcode):
    return opcode & 0x000F


def kk(opcode):
    return opcode & 0x00FF


def nnn(opcode):
    return opcode & 0x0FFF


def decode(opcode):
    opcode &= 0xFFFF
    op = Op.UNKNOWN
    for mask, pattern, candidate in PATTERNS:
        if (opcode & mask) == pattern:
            op = candidate
            break
    return Instruction(op, opcode, vx(opcode), vy(opcode), n(opcode), kk(opcode), nnn(opcode))
