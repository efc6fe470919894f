import logging

import pyglet
from pyglet.media import synthesis

logger = logging.getLogger(__name__)

TONE_HZ = 440
SAMPLE_RATE = 44100


def generate_beep(duration=0.5, frequency=TONE_HZ, sample_rate=SAMPLE_RATE):
    # square wave, like the original COSMAC VIP buzzer
    wave = synthesis.Square(duration=duration, frequency=frequency, sample_rate=sample_rate)
    return pyglet.media.StaticSource(wave)


class Beeper:
    """Plays a looping tone while the sound timer is active."""

    def __init__(self, frequency=TONE_HZ):
        self.player = pyglet.media.Player()
        self.player.loop = True
        self.player.queue(generate_beep(frequency=frequency))
        self.sound_playing = False

    def update(self, active):
        if active and not self.sound_playing:
            self.player.play()
            self.sound_playing = True
            logger.debug("Beep on")
        elif not active and self.sound_playing:
            self.player.pause()
            self.sound_playing = False
            logger.debug("Beep off")

    __call__ = update

    def close(self):
        self.player.delete()
