class Chip8Error(Exception):
    pass


class AddressError(Chip8Error):
    pass


class StackOverflowError(Chip8Error):
    pass


class StackUnderflowError(Chip8Error):
    pass


class RomTooLargeError(Chip8Error):
    pass


class CPUFault(Chip8Error):
    """A fatal error raised while executing the instruction at `pc`."""

    def __init__(self, pc, opcode, reason):
        self.pc = pc
        self.opcode = opcode
        self.reason = reason
        super().__init__("Fault at PC=0x%03X opcode=%04X: %s" % (pc, opcode, reason))
