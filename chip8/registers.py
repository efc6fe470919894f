FLAG = 0xF


class RegisterFile:
    """V0..VF general registers plus the 16-bit index register I.

    VF doubles as the carry/borrow/collision flag. Nothing in here writes
    VF on its own; only the instructions that document a flag do.
    """

    def __init__(self):
        self.V = [0] * 16  # 16 general-purpose registers
        self.I = 0         # I register (memory pointer)

    def __getitem__(self, index):
        return self.V[index]

    def __setitem__(self, index, value):
        self.V[index] = value & 0xFF

    @property
    def flag(self):
        return self.V[FLAG]

    @flag.setter
    def flag(self, value):
        self.V[FLAG] = 1 if value else 0

    @property
    def index(self):
        return self.I

    @index.setter
    def index(self, value):
        self.I = value & 0xFFFF

    def __str__(self):
        regs = " ".join("V%X:%02X" % (i, v) for i, v in enumerate(self.V))
        return "%s I:%03X" % (regs, self.I)
