# COSMAC VIP keypad        mapped to a modern keyboard
#   1 2 3 C                  1 2 3 4
#   4 5 6 D                  Q W E R
#   7 8 9 E                  A S D F
#   A 0 B F                  Z X C V

import numpy as np

KEY_COUNT = 16

# map binding keys
KEY_LAYOUT = {
    "1": 0x1, "2": 0x2, "3": 0x3, "4": 0xC,
    "Q": 0x4, "W": 0x5, "E": 0x6, "R": 0xD,
    "A": 0x7, "S": 0x8, "D": 0x9, "F": 0xE,
    "Z": 0xA, "X": 0x0, "C": 0xB, "V": 0xF,
}


class KeypadState:
    """Pressed/released flags for the 16 hex keys."""

    def __init__(self, pressed=()):
        self.keys = np.zeros(KEY_COUNT, dtype=bool)
        for k in pressed:
            self.keys[k] = True

    @classmethod
    def from_sequence(cls, flags):
        if isinstance(flags, KeypadState):
            return flags
        flags = list(flags)
        if len(flags) != KEY_COUNT:
            raise ValueError("Keypad snapshot needs %d keys, got %d" % (KEY_COUNT, len(flags)))
        state = cls()
        state.keys[:] = [bool(f) for f in flags]
        return state

    def __getitem__(self, key):
        return bool(self.keys[key & 0xF])

    def __setitem__(self, key, pressed):
        self.keys[key & 0xF] = bool(pressed)

    def __len__(self):
        return KEY_COUNT

    def __eq__(self, other):
        if not isinstance(other, KeypadState):
            return NotImplemented
        return bool(np.array_equal(self.keys, other.keys))

    def press(self, key):
        self[key] = True

    def release(self, key):
        self[key] = False

    def clear(self):
        self.keys[:] = False

    def pressed(self):
        return [int(k) for k in np.flatnonzero(self.keys)]

    def first_pressed(self):
        # lowest hex index wins
        pressed = np.flatnonzero(self.keys)
        return int(pressed[0]) if len(pressed) else None

    def copy(self):
        state = KeypadState()
        state.keys[:] = self.keys
        return state

    def __str__(self):
        return " ".join("%s:%d" % (name, int(self.keys[k])) for name, k in KEY_LAYOUT.items())
