from config import *
from campo import clamp

LEFT, RIGHT = "left", "right"
UP, DOWN, NONE = "up", "down", "none"


# Converte o estado das teclas em intenção, já aplicando a inversão de controles
def intent_from_keys(up, down, invert=False):
    if up and not down:
        intent = UP
    elif down and not up:
        intent = DOWN
    else:
        return NONE
    if invert:
        return DOWN if intent == UP else UP
    return intent


class Paddle:
    def __init__(self, x, y, side, params):
        self.x = x
        self.y = y
        self.side = side
        self.width = params.paddle_width
        self.height = params.paddle_size
        self.color = params.paddle_color

    @property
    def is_left(self):
        return self.side == LEFT

    @property
    def center_y(self):
        return self.y + self.height / 2

    def rect(self):
        return (self.x, self.y, self.width, self.height)

    # Largura/altura seguem o snapshot a cada tick
    def sync_dimensions(self, params):
        self.width = params.paddle_width
        self.height = params.paddle_size
        self.color = params.paddle_color

    # Cola a raquete na lateral do campo atual
    def place(self, field):
        fx, fy, fw, fh = field
        if self.is_left:
            self.x = fx + PADDLE_MARGIN
        else:
            self.x = fx + fw - PADDLE_MARGIN - self.width

    def clamp_to_field(self, field):
        fx, fy, fw, fh = field
        self.y = clamp(self.y, fy, fy + fh - self.height)

    def move_by_intent(self, intent, speed, field):
        if intent == UP:
            self.y -= speed
        elif intent == DOWN:
            self.y += speed
        self.clamp_to_field(field)

    # IA: velocidade constante na direção do alvo (oscila perto dele)
    def move_by_ai(self, target_y, field, speed):
        offset = target_y - self.center_y
        direction = (offset > 0) - (offset < 0)
        self.y += direction * speed * AI_SPEED_FACTOR
        self.clamp_to_field(field)
