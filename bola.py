import math
import random
from collections import deque

from config import *
from campo import field_center

ACTIVE = "active"
SCORE_COOLDOWN = "score_cooldown"
REMOVED = "removed"


# Bola: integração, colisões com paredes/raquetes e detecção de gol.
# on_score(side) recebe o lado que pontuou; on_paddle_hit() dispara a cada
# rebatida. Ambos são opcionais.
class Ball:
    def __init__(self, params, field, on_score=None, on_paddle_hit=None,
                 x=None, y=None, dx=None, dy=None, rng=None):
        self.params = params
        self.field = field
        self.on_score = on_score
        self.on_paddle_hit = on_paddle_hit
        self.rng = rng if rng is not None else random
        self.size = params.ball_size
        self.color = params.ball_color
        self.trail = deque(maxlen=TRAIL_LENGTH)
        self.pending_removal = False
        self.score_cooldown_until = None
        self.respawn_on_score = True

        if dx is not None and dy is not None:
            cx, cy = field_center(field)
            self.x = cx if x is None else x
            self.y = cy if y is None else y
            self.dx = dx
            self.dy = dy
        else:
            self.reset()

    @property
    def radius(self):
        return self.size / 2

    @property
    def state(self):
        if self.pending_removal:
            return REMOVED
        if self.score_cooldown_until is not None:
            return SCORE_COOLDOWN
        return ACTIVE

    # Recebe o snapshot e o campo do tick atual
    def sync(self, params, field):
        self.params = params
        self.field = field
        self.size = params.ball_size
        self.color = params.ball_color

    def reset(self, field=None, angle=None, direction=None):
        if field is not None:
            self.field = field
        self.x, self.y = field_center(self.field)

        # Ângulo com viés horizontal, em [-pi/5, pi/5)
        if angle is None:
            angle = self.rng.random() * math.pi / 2.5 - math.pi / 5
        if direction is None:
            direction = 1 if self.rng.random() < 0.5 else -1

        ball_speed = self.params.ball_speed
        min_speed = max(RESET_MIN_SPEED, ball_speed * 0.8)
        speed = min_speed + self.rng.random() * (ball_speed - min_speed)

        self.dx = math.cos(angle) * speed * direction
        self.dy = math.sin(angle) * speed

        # Nunca deixa a bola andar só na vertical
        if abs(self.dx) < RESET_MIN_DX:
            self.dx = direction * RESET_MIN_DX

    def integrate(self, gravity_x=None, gravity_y=None):
        if gravity_x is None:
            gravity_x = self.params.ball_gravity_x
        if gravity_y is None:
            gravity_y = self.params.ball_gravity_y
        self.dx += gravity_x
        self.dy += gravity_y
        self.x += self.dx
        self.y += self.dy

    def resolve_wall_collision(self, field=None, radius=None):
        fx, fy, fw, fh = field if field is not None else self.field
        r = self.radius if radius is None else radius
        collided = False

        # Teto
        if self.y - r < fy:
            self.y = fy + r
            self.dy = abs(self.dy)
            collided = True

        # Chão
        if self.y + r > fy + fh:
            self.y = fy + fh - r
            self.dy = -abs(self.dy)
            collided = True

        return collided

    def resolve_paddle_collision(self, paddle, radius=None):
        r = self.radius if radius is None else radius
        px, py, pw, ph = paddle.rect()

        ball_left = self.x - r
        ball_right = self.x + r
        ball_top = self.y - r
        ball_bottom = self.y + r

        if not (ball_right >= px and ball_left <= px + pw and
                ball_bottom >= py and ball_top <= py + ph):
            return False

        overlap_left = ball_right - px
        overlap_right = (px + pw) - ball_left
        overlap_top = ball_bottom - py
        overlap_bottom = (py + ph) - ball_top

        min_overlap = min(overlap_left, overlap_right, overlap_top, overlap_bottom)

        if min_overlap in (overlap_left, overlap_right):
            # --- Colisão LATERAL: inverte dx e encosta na face atingida ---
            if min_overlap == overlap_left:
                self.x = px - r
            else:
                self.x = px + pw + r
            self.dx = -self.dx

            # Centro da raquete devolve reto, pontas devolvem inclinado
            hit_position = (self.y - py) / ph
            self.dy = (hit_position - 0.5) * 2 * abs(self.dx)

            if abs(self.dx) < PADDLE_MIN_DX:
                direction = (self.dx > 0) - (self.dx < 0)
                if direction == 0:
                    direction = 1 if paddle.is_left else -1
                self.dx = direction * PADDLE_MIN_DX
        else:
            # --- Colisão no TOPO/BASE da raquete ---
            if min_overlap == overlap_top:
                self.y = py - r
                self.dy = -abs(self.dy)
            else:
                self.y = py + ph + r
                self.dy = abs(self.dy)

        self.dx *= PADDLE_SPEEDUP
        self.dy *= PADDLE_SPEEDUP
        return True

    # Gol quando a bola inteira passou da linha lateral
    def check_scoring(self, now):
        fx, fy, fw, fh = self.field
        r = self.radius

        if self.x + r < fx:
            side = "right"
        elif self.x - r > fx + fw:
            side = "left"
        else:
            return None

        if self.on_score:
            self.on_score(side)

        if self.respawn_on_score:
            self.score_cooldown_until = now + SCORE_COOLDOWN_MS
            self.reset()
        else:
            self.pending_removal = True
        return side

    def tick(self, now, left_paddle, right_paddle, shake=0, spawn_multiball=None):
        if self.pending_removal:
            return shake
        if self.score_cooldown_until is not None:
            if now < self.score_cooldown_until:
                return shake
            self.score_cooldown_until = None

        if self.params.trail_effect:
            self.trail.append({"x": self.x, "y": self.y, "size": self.size})
        else:
            self.trail.clear()

        self.integrate()

        if self.resolve_wall_collision():
            shake += SHAKE_WALL

        # Só testa a raquete para a qual a bola está indo
        paddle_hit = False
        if self.dx < 0:
            paddle_hit = self.resolve_paddle_collision(left_paddle)
        elif self.dx > 0:
            paddle_hit = self.resolve_paddle_collision(right_paddle)

        if paddle_hit:
            shake += SHAKE_PADDLE
            if self.on_paddle_hit:
                self.on_paddle_hit()
            if (spawn_multiball and self.params.multiball
                    and self.rng.random() < MULTIBALL_HIT_CHANCE):
                spawn_multiball(self)

        self.check_scoring(now)
        return shake
