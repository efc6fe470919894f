import random

import pytest

from chip8.cpu import CPU
from chip8.rom import assemble_words


@pytest.fixture
def make_cpu():
    """Build a CPU with the given opcode words loaded at 0x200."""
    def factory(*words, seed=0):
        return CPU(assemble_words(*words), rng=random.Random(seed))
    return factory
