import re
import random

from config import *

_HEX_RE = re.compile(r"^#?([a-f\d]{2})([a-f\d]{2})([a-f\d]{2})$", re.IGNORECASE)


def hex_to_rgb(color):
    m = _HEX_RE.match(color or "")
    if not m:
        # Cor inválida vira branco
        return (255, 255, 255)
    return tuple(int(c, 16) for c in m.groups())


def rgb_to_hex(r, g, b):
    return "#%02x%02x%02x" % (int(r), int(g), int(b))


# Aproxima a cor atual da cor alvo (suavização exponencial por canal)
def transition_color(current, target, speed):
    cr, cg, cb = hex_to_rgb(current)
    tr, tg, tb = hex_to_rgb(target)
    return rgb_to_hex(
        cr + (tr - cr) * speed,
        cg + (tg - cg) * speed,
        cb + (tb - cb) * speed,
    )


def inverse_color(color):
    r, g, b = hex_to_rgb(color)
    return rgb_to_hex(255 - r, 255 - g, 255 - b)


def random_color(rng=random):
    return "#%06x" % int(rng.random() * COLOR_RANDOM_MAX)


# Só tons escuros (para o fundo)
def random_dark_color(rng=random):
    return "#%06x" % int(rng.random() * COLOR_DARK_RANDOM_MAX)
