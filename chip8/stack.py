import numpy as np

from .errors import StackOverflowError, StackUnderflowError

STACK_DEPTH = 16


class Stack:
    """Return-address stack, 16 levels of 16-bit addresses."""

    def __init__(self):
        self._entries = np.zeros(STACK_DEPTH, dtype=np.uint16)
        self.sp = 0

    def __len__(self):
        return self.sp

    def push(self, addr):
        if self.sp >= STACK_DEPTH:
            raise StackOverflowError("Stack overflow on CALL (depth %d)" % STACK_DEPTH)
        self._entries[self.sp] = addr
        self.sp += 1

    def pop(self):
        if self.sp == 0:
            raise StackUnderflowError("Stack underflow on RET")
        self.sp -= 1
        return int(self._entries[self.sp])

    def peek(self):
        if self.sp == 0:
            return None
        return int(self._entries[self.sp - 1])

    def addresses(self):
        return [int(a) for a in self._entries[:self.sp]]
