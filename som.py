import numpy as np
import pygame

from config import *


# Gera um efeito 8-bit (envelope ADSR simples + quantização em oitavos)
def synthesize(wave, frequency, duration, attack, decay, release, sample_rate=SAMPLE_RATE):
    frequencies = frequency if isinstance(frequency, (list, tuple)) else [frequency]
    n = int(sample_rate * duration)
    t = np.arange(n) / sample_rate

    envelope = np.select(
        [t < attack, t < attack + decay, t < duration - release],
        [t / attack, 1.0 - 0.2 * ((t - attack) / decay), 0.8],
        0.8 * (1 - (t - (duration - release)) / release),
    )

    out = np.zeros(n)
    for freq in frequencies:
        if wave == "square":
            osc = np.where(np.sin(2 * np.pi * freq * t) > 0, 0.5, -0.5)
        elif wave == "sawtooth":
            osc = 2 * (t * freq - np.floor(0.5 + t * freq))
        elif wave == "triangle":
            osc = 2 * np.abs(2 * (t * freq - np.floor(t * freq)) - 1) - 1
        else:
            osc = np.sin(2 * np.pi * freq * t)
        out += envelope * osc

    out /= len(frequencies)
    return np.round(out * 8) / 8


class SoundManager:
    def __init__(self, enabled=True):
        self.sounds = {}
        self.muted = False
        if enabled:
            self.initialize()

    def initialize(self):
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init(frequency=SAMPLE_RATE, size=-16, channels=1, buffer=512)
            self.sounds["paddle"] = self.make_sound(synthesize("square", 200, 0.1, 0.05, 0.01, 0.01))
        except pygame.error as e:
            print(f"[Som] Áudio indisponível, seguindo sem som: {e}")
            self.sounds = {}

    def make_sound(self, samples):
        rate, _, channels = pygame.mixer.get_init()
        if rate != SAMPLE_RATE:
            samples = np.interp(
                np.arange(int(len(samples) * rate / SAMPLE_RATE)) * SAMPLE_RATE / rate,
                np.arange(len(samples)),
                samples,
            )
        data = (samples * 32767).astype(np.int16)
        if channels > 1:
            data = np.repeat(data[:, None], channels, axis=1)
        sound = pygame.sndarray.make_sound(np.ascontiguousarray(data))
        sound.set_volume(SFX_VOLUME)
        return sound

    def toggle_mute(self):
        self.muted = not self.muted
        return self.muted

    def play(self, name):
        if self.muted or name not in self.sounds:
            return
        self.sounds[name].play()

    def notify_paddle_hit(self):
        self.play("paddle")
