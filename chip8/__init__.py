"""CHIP-8 virtual machine."""

from .cpu import CPU, CycleOutput, State
from .driver import Driver
from .errors import (
    AddressError,
    Chip8Error,
    CPUFault,
    RomTooLargeError,
    StackOverflowError,
    StackUnderflowError,
)
from .keypad import KeypadState
from .opcode import Instruction, Op, decode

__version__ = "0.1.0"
