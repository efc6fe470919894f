from .errors import AddressError

WIDTH, HEIGHT = 64, 32
SCREEN_AREA = WIDTH * HEIGHT


class Framebuffer:
    """64x32 display buffer, one byte per cell holding 0 or 1."""

    def __init__(self):
        self.vram = bytearray(SCREEN_AREA)

    def __len__(self):
        return SCREEN_AREA

    def reset(self):
        self.vram[:] = bytes(SCREEN_AREA)

    def _check(self, index):
        if not 0 <= index < SCREEN_AREA:
            raise AddressError("Framebuffer index out of range: %d" % index)

    def get(self, index):
        self._check(index)
        return self.vram[index]

    def set(self, index, value):
        self._check(index)
        self.vram[index] = 1 if value else 0

    def pixel(self, x, y):
        return self.vram[(y % HEIGHT) * WIDTH + (x % WIDTH)]

    def snapshot(self):
        return bytes(self.vram)

    def rows(self):
        for y in range(HEIGHT):
            yield self.vram[y * WIDTH:(y + 1) * WIDTH]

    def __str__(self):
        return "\n".join("".join("#" if c else "." for c in row) for row in self.rows())
