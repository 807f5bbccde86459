from collections import namedtuple

# Retângulo do campo de jogo, em pixels do canvas
FieldRect = namedtuple("FieldRect", "x y width height")


def clamp(v, lo, hi):
    return max(lo, min(hi, v))


# Campo centralizado no canvas, proporcional a field_width/field_height
def field_rect(canvas_width, canvas_height, field_width_ratio, field_height_ratio):
    width = canvas_width * field_width_ratio
    height = canvas_height * field_height_ratio
    return FieldRect(
        (canvas_width - width) / 2,
        (canvas_height - height) / 2,
        width,
        height,
    )


def field_center(field):
    x, y, w, h = field
    return x + w / 2, y + h / 2
