# CHIP8 Virtual Machine
# CPU - Cowgod's CHIP-8 Technical reference http://devernay.free.fr/hacks/chip8/C8TECH10.HTM
#
# cycle() fetches, decodes and executes one instruction. The delay and sound
# timers are NOT touched by cycle(); the driver calls tick_timers() at 60 Hz.

import logging
import random
from collections import namedtuple
from enum import Enum

from .errors import Chip8Error, CPUFault
from .framebuffer import Framebuffer, WIDTH, HEIGHT
from .keypad import KeypadState
from .memory import Memory, USER_SPACE, MEMORY_SIZE, font_address
from .opcode import Op, decode
from .registers import RegisterFile
from .rom import read_rom
from .stack import Stack
from .timers import Timers

logger = logging.getLogger(__name__)


class State(Enum):
    RUNNING = "Running"
    AWAITING_KEY = "AwaitingKey"


CycleOutput = namedtuple("CycleOutput", "display_updated framebuffer sound_active")


class CPU:

    def __init__(self, rom=None, rng=None):
        # ---- CPU state ----
        self.memory = Memory()          # fonts preloaded
        self.registers = RegisterFile()
        self.stack = Stack()
        self.framebuffer = Framebuffer()
        self.timers = Timers()
        self.keypad = KeypadState()
        self.pc = USER_SPACE            # program counter starts at 0x200
        self.opcode = 0
        self.awaiting_key = None        # register index while blocked on Fx0A
        self.rng = rng or random.Random()
        self._display_updated = False

        if rom is not None:
            self.load(rom)

        # Prepare opcode function map
        self.setup_funcmap()

    @classmethod
    def from_rom(cls, path, rng=None):
        logger.info("Loading ROM: %s", path)
        return cls(read_rom(path), rng=rng)

    @classmethod
    def from_config(cls, config):
        return cls.from_rom(config.rom)

    def load(self, rom):
        self.memory.load(rom)

    # ---- State ----
    @property
    def state(self):
        return State.RUNNING if self.awaiting_key is None else State.AWAITING_KEY

    @property
    def V(self):
        return self.registers.V

    @property
    def I(self):
        return self.registers.I

    # ---- Timers ----
    def tick_timers(self):
        self.timers.tick()

    def sound_active(self):
        return self.timers.sound_active()

    # ---- Cycle ----
    def cycle(self, keypad=None):
        if keypad is not None:
            self.keypad = KeypadState.from_sequence(keypad)
        self._display_updated = False

        if self.awaiting_key is not None:
            self._resume_on_key()
        else:
            pc = self.pc
            try:
                self.step()
            except CPUFault:
                raise
            except Chip8Error as e:
                raise CPUFault(pc, self.opcode, str(e)) from e

        return CycleOutput(self._display_updated, self.framebuffer.snapshot(), self.sound_active())

    def _resume_on_key(self):
        key = self.keypad.first_pressed()
        if key is None:
            return
        self.registers[self.awaiting_key] = key
        logger.debug("Key %X pressed, stored in V%X, resuming", key, self.awaiting_key)
        self.awaiting_key = None

    def step(self):
        # Fetch opcode, PC must stay inside memory after the advance
        if not 0 <= self.pc < MEMORY_SIZE - 2:
            self.opcode = 0
            raise CPUFault(self.pc, 0, "PC out of bounds: 0x%03X" % self.pc)
        self.opcode = self.memory.read_word(self.pc)
        self.pc += 2

        # Decode & dispatch
        ins = decode(self.opcode)
        self.funcmap[ins.op](ins)
        return ins

    # ---- Opcode function map ----
    def setup_funcmap(self):
        self.funcmap = {
            Op.SYS: self._0nnn,        # 0nnn - legacy machine code call
            Op.CLS: self._00E0,        # 00E0 - Clear the display
            Op.RET: self._00EE,        # 00EE - Return from a subroutine
            Op.JP: self._1nnn,         # 1nnn - Jump to address nnn
            Op.CALL: self._2nnn,       # 2nnn - Call subroutine at nnn
            Op.SE_VX_KK: self._3xkk,   # 3xkk - Skip next instruction if Vx == kk
            Op.SNE_VX_KK: self._4xkk,  # 4xkk - Skip next instruction if Vx != kk
            Op.SE_VX_VY: self._5xy0,   # 5xy0 - Skip next instruction if Vx == Vy
            Op.LD_VX_KK: self._6xkk,   # 6xkk - Set Vx = kk
            Op.ADD_VX_KK: self._7xkk,  # 7xkk - Set Vx = Vx + kk
            Op.LD_VX_VY: self._8xy0,   # 8xy0 .. 8xyE - register math and logic
            Op.OR: self._8xy1,
            Op.AND: self._8xy2,
            Op.XOR: self._8xy3,
            Op.ADD: self._8xy4,
            Op.SUB: self._8xy5,
            Op.SHR: self._8xy6,
            Op.SUBN: self._8xy7,
            Op.SHL: self._8xyE,
            Op.SNE_VX_VY: self._9xy0,  # 9xy0 - Skip next instruction if Vx != Vy
            Op.LD_I: self._Annn,       # Annn - Set I = nnn
            Op.JP_V0: self._Bnnn,      # Bnnn - Jump to nnn + V0
            Op.RND: self._Cxkk,        # Cxkk - Set Vx = random byte AND kk
            Op.DRW: self._Dxyn,        # Dxyn - Draw sprite
            Op.SKP: self._Ex9E,        # Ex9E - Skip if key Vx is pressed
            Op.SKNP: self._ExA1,       # ExA1 - Skip if key Vx is not pressed
            Op.LD_VX_DT: self._Fx07,   # Fx07 .. Fx65 - timers, memory, I and key input
            Op.LD_VX_K: self._Fx0A,
            Op.LD_DT_VX: self._Fx15,
            Op.LD_ST_VX: self._Fx18,
            Op.ADD_I_VX: self._Fx1E,
            Op.LD_F_VX: self._Fx29,
            Op.LD_B_VX: self._Fx33,
            Op.LD_I_VX: self._Fx55,
            Op.LD_VX_I: self._Fx65,
            Op.UNKNOWN: self._unknown,
        }

    def _skip(self):
        self.pc += 2

    # ---- Opcode Handlers ----

    def _unknown(self, ins):
        logger.warning("Unknown opcode: %04X at 0x%03X", ins.opcode, self.pc - 2)

    def _0nnn(self, ins):
        # 0nnn is ignored on modern interpreters
        logger.debug("SYS 0x%03X ignored", ins.nnn)

    def _00E0(self, ins):
        self.framebuffer.reset()
        self._display_updated = True
        logger.debug("Clear the display")

    def _00EE(self, ins):
        self.pc = self.stack.pop()
        logger.debug("Return to 0x%03X", self.pc)

    def _1nnn(self, ins):
        self.pc = ins.nnn
        logger.debug("Jump to address 0x%03X", ins.nnn)

    def _2nnn(self, ins):
        self.stack.push(self.pc)
        self.pc = ins.nnn
        logger.debug("Call subroutine at 0x%03X", ins.nnn)

    def _3xkk(self, ins):
        if self.V[ins.x] == ins.kk:
            self._skip()
            logger.debug("Skip next instruction: V%X == 0x%02X", ins.x, ins.kk)

    def _4xkk(self, ins):
        if self.V[ins.x] != ins.kk:
            self._skip()
            logger.debug("Skip next instruction: V%X != 0x%02X", ins.x, ins.kk)

    def _5xy0(self, ins):
        if self.V[ins.x] == self.V[ins.y]:
            self._skip()
            logger.debug("Skip next instruction: V%X == V%X", ins.x, ins.y)

    def _6xkk(self, ins):
        self.registers[ins.x] = ins.kk
        logger.debug("Set V%X = 0x%02X", ins.x, ins.kk)

    def _7xkk(self, ins):
        # no carry flag for the immediate add
        self.registers[ins.x] = self.V[ins.x] + ins.kk
        logger.debug("Add 0x%02X to V%X: 0x%02X", ins.kk, ins.x, self.V[ins.x])

    def _8xy0(self, ins):
        self.registers[ins.x] = self.V[ins.y]
        logger.debug("Copy V%X into V%X: 0x%02X", ins.y, ins.x, self.V[ins.x])

    def _8xy1(self, ins):
        self.registers[ins.x] = self.V[ins.x] | self.V[ins.y]
        logger.debug("V%X = V%X OR V%X -> 0x%02X", ins.x, ins.x, ins.y, self.V[ins.x])

    def _8xy2(self, ins):
        self.registers[ins.x] = self.V[ins.x] & self.V[ins.y]
        logger.debug("V%X = V%X AND V%X -> 0x%02X", ins.x, ins.x, ins.y, self.V[ins.x])

    def _8xy3(self, ins):
        self.registers[ins.x] = self.V[ins.x] ^ self.V[ins.y]
        logger.debug("V%X = V%X XOR V%X -> 0x%02X", ins.x, ins.x, ins.y, self.V[ins.x])

    def _8xy4(self, ins):
        total = self.V[ins.x] + self.V[ins.y]
        self.registers.flag = total > 0xFF
        self.registers[ins.x] = total
        logger.debug("Add V%X to V%X: 0x%02X, carry=%d", ins.y, ins.x, self.V[ins.x], total > 0xFF)

    def _subtract(self, x, minuend, subtrahend):
        # VF = 1 means NOT borrow
        no_borrow = minuend >= subtrahend
        self.registers.flag = no_borrow
        self.registers[x] = minuend - subtrahend
        logger.debug("Set V%X = 0x%02X - 0x%02X: 0x%02X, NOT borrow=%d",
                     x, minuend, subtrahend, self.V[x], no_borrow)

    def _8xy5(self, ins):
        self._subtract(ins.x, self.V[ins.x], self.V[ins.y])

    def _8xy7(self, ins):
        self._subtract(ins.x, self.V[ins.y], self.V[ins.x])

    def _8xy6(self, ins):
        value = self.V[ins.x]
        self.registers.flag = value & 0x01
        self.registers[ins.x] = value >> 1
        logger.debug("Shift V%X right by 1: 0x%02X, least significant bit=%d",
                     ins.x, self.V[ins.x], value & 0x01)

    def _8xyE(self, ins):
        value = self.V[ins.x]
        self.registers.flag = value & 0x80
        self.registers[ins.x] = value << 1
        logger.debug("Shift V%X left by 1: 0x%02X, most significant bit=%d",
                     ins.x, self.V[ins.x], value >> 7)

    def _9xy0(self, ins):
        if self.V[ins.x] != self.V[ins.y]:
            self._skip()
            logger.debug("Skip next instruction: V%X != V%X", ins.x, ins.y)

    def _Annn(self, ins):
        self.registers.index = ins.nnn
        logger.debug("Set I = 0x%03X", ins.nnn)

    def _Bnnn(self, ins):
        self.pc = ins.nnn + self.V[0]
        logger.debug("Jump to address V0 + 0x%03X = 0x%03X", ins.nnn, self.pc)

    def _Cxkk(self, ins):
        self.registers[ins.x] = self.rng.getrandbits(8) & ins.kk
        logger.debug("Set V%X = random_byte & 0x%02X -> 0x%02X", ins.x, ins.kk, self.V[ins.x])

    def _Dxyn(self, ins):
        x0 = self.V[ins.x] & (WIDTH - 1)
        y0 = self.V[ins.y] & (HEIGHT - 1)
        vram = self.framebuffer.vram
        self.registers.flag = 0
        for row in range(ins.n):
            sprite = self.memory.read(self.I + row)
            base = ((y0 + row) % HEIGHT) * WIDTH
            for col in range(8):
                if sprite & (0x80 >> col):
                    index = base + (x0 + col) % WIDTH
                    if vram[index]:
                        self.registers.flag = 1
                    vram[index] ^= 1
        self._display_updated = True
        logger.debug("Drew sprite at (%d, %d), collision=%d", x0, y0, self.registers.flag)

    def _Ex9E(self, ins):
        if self.keypad[self.V[ins.x]]:
            self._skip()
            logger.debug("Skip next instruction: key %X pressed", self.V[ins.x] & 0xF)

    def _ExA1(self, ins):
        if not self.keypad[self.V[ins.x]]:
            self._skip()
            logger.debug("Skip next instruction: key %X not pressed", self.V[ins.x] & 0xF)

    def _Fx07(self, ins):
        self.registers[ins.x] = self.timers.delay
        logger.debug("Set V%X = delay timer (%d)", ins.x, self.timers.delay)

    def _Fx0A(self, ins):
        # LD Vx, K: suspend until a key press is observed by cycle()
        self.awaiting_key = ins.x
        logger.debug("Waiting for key into V%X", ins.x)

    def _Fx15(self, ins):
        self.timers.delay = self.V[ins.x]
        logger.debug("Set delay timer = V%X (%d)", ins.x, self.timers.delay)

    def _Fx18(self, ins):
        self.timers.sound = self.V[ins.x]
        logger.debug("Set sound timer = V%X (%d)", ins.x, self.timers.sound)

    def _Fx1E(self, ins):
        self.registers.index = self.I + self.V[ins.x]
        logger.debug("Add V%X to I: 0x%03X", ins.x, self.I)

    def _Fx29(self, ins):
        self.registers.index = font_address(self.V[ins.x])
        logger.debug("Set I = glyph %X at 0x%03X", self.V[ins.x] & 0xF, self.I)

    def _Fx33(self, ins):
        value = self.V[ins.x]
        self.memory.write(self.I, value // 100)
        self.memory.write(self.I + 1, (value // 10) % 10)
        self.memory.write(self.I + 2, value % 10)
        logger.debug("Store BCD of V%X (%d) at 0x%03X", ins.x, value, self.I)

    def _Fx55(self, ins):
        for i in range(ins.x + 1):
            self.memory.write(self.I + i, self.V[i])
        logger.debug("Store V0..V%X at 0x%03X", ins.x, self.I)

    def _Fx65(self, ins):
        for i in range(ins.x + 1):
            self.registers[i] = self.memory.read(self.I + i)
        logger.debug("Load V0..V%X from 0x%03X", ins.x, self.I)

    # ---- Diagnostics ----
    def dump_registers(self):
        return "PC:%03X OP:%04X SP:%d DT:%02X ST:%02X %s" % (
            self.pc, self.opcode, len(self.stack), self.timers.delay, self.timers.sound,
            self.registers)
