import numpy as np
import pyglet

from .framebuffer import WIDTH, HEIGHT

PIXEL_ON = (255, 255, 255)
PIXEL_OFF = (0, 0, 0)


class Display:
    """Paints framebuffer snapshots, upscaled on the CPU with numpy.repeat."""

    def __init__(self, scale):
        self.scale = scale
        self.width = WIDTH * scale
        self.height = HEIGHT * scale

        # Pre-allocated small framebuffer (64x32 RGBA)
        self._small_framebuf = np.zeros((HEIGHT, WIDTH, 4), dtype=np.uint8)
        self._small_framebuf[..., 3] = 255
        self._on = np.array(PIXEL_ON, dtype=np.uint8)
        self._off = np.array(PIXEL_OFF, dtype=np.uint8)

        # creating ImageData once, updated in place on every render
        self.image = pyglet.image.ImageData(
            self.width,
            self.height,
            'RGBA',
            bytes(self.width * self.height * 4)
        )

    def render(self, framebuffer):
        cells = np.frombuffer(bytes(framebuffer), dtype=np.uint8).reshape(HEIGHT, WIDTH)
        # pyglet's origin is bottom-left, CHIP-8's is top-left
        cells = cells[::-1].astype(bool)
        self._small_framebuf[..., :3] = np.where(cells[..., None], self._on, self._off)

        if self.scale != 1:
            scaled = np.repeat(np.repeat(self._small_framebuf, self.scale, axis=0), self.scale, axis=1)
        else:
            scaled = self._small_framebuf

        self.image.set_data('RGBA', self.width * 4, scaled.tobytes())

    __call__ = render

    def draw(self):
        self.image.blit(0, 0)
