import pytest

from chip8 import opcode
from chip8.opcode import Op, decode


def test_field_extraction():
    word = 0x1234
    assert opcode.c(word) == 0x1
    assert opcode.vx(word) == 0x2
    assert opcode.vy(word) == 0x3
    assert opcode.n(word) == 0x4
    assert opcode.kk(word) == 0x34
    assert opcode.nnn(word) == 0x234


@pytest.mark.parametrize("word, op", [
    (0x0000, Op.SYS),
    (0x0123, Op.SYS),
    (0x00E0, Op.CLS),
    (0x00EE, Op.RET),
    (0x12CD, Op.JP),
    (0x2ABC, Op.CALL),
    (0x3102, Op.SE_VX_KK),
    (0x4102, Op.SNE_VX_KK),
    (0x5120, Op.SE_VX_VY),
    (0x61FF, Op.LD_VX_KK),
    (0x7101, Op.ADD_VX_KK),
    (0x8120, Op.LD_VX_VY),
    (0x8121, Op.OR),
    (0x8122, Op.AND),
    (0x8123, Op.XOR),
    (0x8124, Op.ADD),
    (0x8125, Op.SUB),
    (0x8126, Op.SHR),
    (0x8127, Op.SUBN),
    (0x812E, Op.SHL),
    (0x9120, Op.SNE_VX_VY),
    (0xA300, Op.LD_I),
    (0xB300, Op.JP_V0),
    (0xC10F, Op.RND),
    (0xD125, Op.DRW),
    (0xE19E, Op.SKP),
    (0xE1A1, Op.SKNP),
    (0xF107, Op.LD_VX_DT),
    (0xF10A, Op.LD_VX_K),
    (0xF115, Op.LD_DT_VX),
    (0xF118, Op.LD_ST_VX),
    (0xF11E, Op.ADD_I_VX),
    (0xF129, Op.LD_F_VX),
    (0xF133, Op.LD_B_VX),
    (0xF155, Op.LD_I_VX),
    (0xF165, Op.LD_VX_I),
])
def test_decode(word, op):
    assert decode(word).op is op


@pytest.mark.parametrize("word", [0x5121, 0x8128, 0x812F, 0x9121, 0xE100, 0xF1FF, 0xF100])
def test_unrecognized_patterns_decode_to_unknown(word):
    ins = decode(word)
    assert ins.op is Op.UNKNOWN
    assert ins.opcode == word


def test_decode_is_total():
    for word in range(0x10000):
        assert isinstance(decode(word).op, Op)


def test_instruction_carries_fields():
    ins = decode(0xD125)
    assert (ins.x, ins.y, ins.n) == (1, 2, 5)
    ins = decode(0x2ABC)
    assert ins.nnn == 0xABC
    ins = decode(0x61FF)
    assert (ins.x, ins.kk) == (1, 0xFF)


def test_every_variant_is_reachable():
    seen = {decode(word).op for word in range(0x10000)}
    assert seen == set(Op)
