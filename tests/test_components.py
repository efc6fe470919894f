import pytest

from chip8.errors import AddressError, StackOverflowError, StackUnderflowError
from chip8.framebuffer import SCREEN_AREA, Framebuffer
from chip8.registers import RegisterFile
from chip8.stack import STACK_DEPTH, Stack
from chip8.timers import Timers


def test_registers_wrap_to_a_byte():
    regs = RegisterFile()
    regs[3] = 0x1FF
    assert regs[3] == 0xFF
    regs.index = 0x12345
    assert regs.index == 0x2345
    assert regs.flag == 0


def test_register_flag_is_normalized():
    regs = RegisterFile()
    regs.flag = 0x80
    assert regs.V[0xF] == 1
    regs.flag = 0
    assert regs.V[0xF] == 0


def test_stack_is_lifo():
    stack = Stack()
    stack.push(0x202)
    stack.push(0x30A)
    assert stack.peek() == 0x30A
    assert stack.addresses() == [0x202, 0x30A]
    assert stack.pop() == 0x30A
    assert stack.pop() == 0x202
    assert stack.peek() is None


def test_stack_bounds():
    stack = Stack()
    for addr in range(STACK_DEPTH):
        stack.push(addr)
    with pytest.raises(StackOverflowError):
        stack.push(0xFFF)
    for _ in range(STACK_DEPTH):
        stack.pop()
    with pytest.raises(StackUnderflowError):
        stack.pop()


def test_framebuffer_get_set_reset():
    fb = Framebuffer()
    fb.set(0, 1)
    fb.set(SCREEN_AREA - 1, 5)
    assert fb.get(0) == 1
    assert fb.get(SCREEN_AREA - 1) == 1
    assert fb.pixel(63, 31) == 1
    fb.reset()
    assert fb.snapshot() == bytes(SCREEN_AREA)


def test_framebuffer_bounds():
    fb = Framebuffer()
    with pytest.raises(AddressError):
        fb.get(SCREEN_AREA)
    with pytest.raises(AddressError):
        fb.set(-1, 1)


def test_framebuffer_str():
    fb = Framebuffer()
    fb.set(1, 1)
    lines = str(fb).splitlines()
    assert len(lines) == 32
    assert lines[0].startswith(".#..")


def test_timers_tick_and_floor():
    timers = Timers()
    timers.delay = 2
    timers.sound = 1
    assert timers.sound_active()
    timers.tick()
    assert (timers.delay, timers.sound) == (1, 0)
    assert not timers.sound_active()
    timers.tick()
    timers.tick()
    assert (timers.delay, timers.sound) == (0, 0)
