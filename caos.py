import random
from dataclasses import dataclass, replace

from config import *
from cores import random_color, random_dark_color, transition_color


# Snapshot imutável dos parâmetros de jogo, válido por um tick
@dataclass(frozen=True)
class Params:
    ball_speed: float
    ball_size: float
    paddle_size: float
    paddle_width: float
    paddle_speed: float
    ball_gravity_x: float
    ball_gravity_y: float
    field_width: float
    field_height: float
    multiball: bool
    invert_controls: bool
    trail_effect: bool
    screen_shake: bool
    use_neon_effects: bool
    ball_color: str
    paddle_color: str
    background_color: str
    field_border_color: str


def default_params(**overrides):
    values = dict(DEFAULT_PARAMS)
    values.update(overrides)
    return Params(**values)


class ChaosParam:
    def __init__(self, name, lo, hi, value, is_boolean=False):
        self.name = name
        self.min = lo
        self.max = hi
        self.current = float(value)
        self.target = float(value)
        self.next_change = 0
        self.transition_start = 0
        self.transition_duration = 0
        self.is_boolean = is_boolean

    @property
    def value(self):
        if self.is_boolean:
            return self.current > 0.5
        return self.current

    def update(self, now, rng):
        if now >= self.next_change:
            self.target = self.min + rng.random() * (self.max - self.min)
            self.next_change = now + PARAM_CHANGE_MIN_MS + rng.random() * PARAM_CHANGE_JITTER_MS
            self.transition_start = now
            self.transition_duration = PARAM_TRANSITION_MIN_MS + rng.random() * PARAM_TRANSITION_JITTER_MS

        # Passo limitado por tick: a transição depende da taxa de frames
        if now < self.transition_start + self.transition_duration:
            progress = (now - self.transition_start) / self.transition_duration
            self.current += (self.target - self.current) * min(progress, PARAM_MAX_STEP)
        return self.value


class ColorParam:
    def __init__(self, name, value, generator):
        self.name = name
        self.current = value
        self.target = value
        self.next_change = 0
        self.generator = generator

    def update(self, now, rng):
        if now >= self.next_change:
            self.next_change = now + COLOR_CHANGE_MIN_MS + rng.random() * COLOR_CHANGE_JITTER_MS
            self.target = self.generator(rng)
        self.current = transition_color(self.current, self.target, COLOR_TRANSITION_SPEED)
        return self.current


COLOR_GENERATORS = {
    "ball_color": random_color,
    "paddle_color": random_color,
    "background_color": random_dark_color,
    "field_border_color": random_color,
}


# Sorteia e suaviza os parâmetros do jogo em agendas independentes.
# update(now) devolve o snapshot (Params) em vigor; nada muda até
# CHAOS_START_DELAY_MS depois do primeiro timestamp visto.
class ChaosEngine:
    def __init__(self, defaults=None, rng=None):
        self.defaults = defaults if defaults is not None else default_params()
        self.rng = rng if rng is not None else random.Random()
        self.reset()

    def reset(self):
        self.params = self.defaults
        self.start_time = None
        self.invert_next_change = 0
        self.chaos_params = [
            ChaosParam(name, lo, hi, getattr(self.defaults, name), name in CHAOS_BOOLEAN_PARAMS)
            for name, (lo, hi) in CHAOS_RANGES.items()
        ]
        self.color_params = [
            ColorParam(name, getattr(self.defaults, name), generator)
            for name, generator in COLOR_GENERATORS.items()
        ]

    def started(self, now):
        return self.start_time is not None and now - self.start_time >= CHAOS_START_DELAY_MS

    def update(self, now, active=True):
        if not active:
            return self.params

        if self.start_time is None:
            self.start_time = now
        if now - self.start_time < CHAOS_START_DELAY_MS:
            return self.params

        changes = {}
        for param in self.chaos_params:
            changes[param.name] = param.update(now, self.rng)
        for param in self.color_params:
            changes[param.name] = param.update(now, self.rng)

        # Inversão é re-sorteada a cada janela (não alterna)
        if now >= self.invert_next_change:
            changes["invert_controls"] = self.rng.random() < INVERT_PROBABILITY
            self.invert_next_change = now + INVERT_CHANGE_MIN_MS + self.rng.random() * INVERT_CHANGE_JITTER_MS

        self.params = replace(self.params, **changes)
        return self.params

    def param(self, name):
        for p in self.chaos_params:
            if p.name == name:
                return p
        raise KeyError(name)
