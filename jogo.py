import math
import random
from dataclasses import dataclass

from config import *
from campo import field_rect, field_center
from caos import ChaosEngine, default_params
from raquete import Paddle, LEFT, RIGHT, NONE
from bola import Ball


# Sequência de multiball: uma bola nova por intervalo, avançada dentro do tick
@dataclass
class SpawnSequence:
    pending: int
    next_fire_at: float


# Orquestra raquetes, bolas e o caos a cada tick. Único dono do estado
# mutável; placar, som e tamanho do canvas entram pelo construtor e a
# apresentação lê snapshot() depois de cada tick().
class Game:
    def __init__(self, width=WIDTH, height=HEIGHT, on_score=None, on_paddle_hit=None,
                 defaults=None, max_balls=MAX_BALLS, size_provider=None, rng=None):
        self.width = width
        self.height = height
        self.size_provider = size_provider
        self.on_score = on_score
        self.on_paddle_hit = on_paddle_hit
        self.defaults = defaults if defaults is not None else default_params()
        self.max_balls = max_balls
        self.rng = rng if rng is not None else random.Random()
        self.chaos = ChaosEngine(self.defaults, self.rng)
        self.active = True
        self.reset_state()

    def reset_state(self):
        self.params = self.defaults
        self.score = {LEFT: 0, RIGHT: 0}
        self.ai = {LEFT: True, RIGHT: True}
        self.intents = {LEFT: NONE, RIGHT: NONE}
        self.shake = 0
        self.now = 0
        self.multiball_active = False
        self.last_multiball_time = None
        self.sequence = None

        field = self.field()
        paddle_y = field.y + (field.height - self.params.paddle_size) / 2
        self.left_paddle = Paddle(0, paddle_y, LEFT, self.params)
        self.right_paddle = Paddle(0, paddle_y, RIGHT, self.params)
        self.left_paddle.place(field)
        self.right_paddle.place(field)
        self.balls = [self.new_ball(field)]

    def reset(self):
        self.chaos.reset()
        self.reset_state()
        self.active = True
        print("[Jogo] Partida reiniciada.")

    # --------- Colaboradores ---------
    def canvas_size(self):
        if self.size_provider is not None:
            return self.size_provider()
        return self.width, self.height

    def resize(self, width, height):
        self.width = width
        self.height = height
        field = self.field()
        for paddle in (self.left_paddle, self.right_paddle):
            paddle.place(field)
            paddle.y = field.y + (field.height - paddle.height) / 2

    def field(self, params=None):
        params = params if params is not None else self.params
        w, h = self.canvas_size()
        return field_rect(w, h, params.field_width, params.field_height)

    def notify_score(self, side):
        self.score[side] += 1
        if self.on_score:
            self.on_score(side)

    # --------- Entrada ---------
    def take_control(self, side):
        self.ai[side] = False

    def set_intent(self, side, intent):
        self.intents[side] = intent

    def toggle_pause(self):
        self.active = not self.active
        return self.active

    # --------- Bolas ---------
    def new_ball(self, field, **kwargs):
        return Ball(self.params, field, self.notify_score, self.on_paddle_hit, rng=self.rng, **kwargs)

    # Prefere bolas vindo na direção da raquete; depois a mais próxima em y
    def nearest_ball(self, paddle):
        if not self.balls:
            return None

        center = paddle.center_y
        incoming = [b for b in self.balls
                    if (b.dx < 0 and paddle.is_left) or (b.dx > 0 and not paddle.is_left)]
        candidates = incoming or self.balls
        return min(candidates, key=lambda b: abs(b.y - center))

    def create_multiball(self, source):
        if len(self.balls) >= self.max_balls:
            return None
        if not self.params.multiball:
            return None
        if self.last_multiball_time is not None and self.now - self.last_multiball_time < MULTIBALL_MIN_INTERVAL_MS:
            return None

        mirror = 1 if self.rng.random() < 0.5 else -1
        ball = self.new_ball(
            self.field(),
            x=source.x,
            y=source.y,
            dx=-source.dx * (0.8 + self.rng.random() * 0.4),
            dy=source.dy * mirror * (0.8 + self.rng.random() * 0.4),
        )
        self.balls.append(ball)
        self.last_multiball_time = self.now
        return ball

    def start_multiball_sequence(self, now):
        self.cancel_multiball_sequence()
        self.sequence = SpawnSequence(self.max_balls - len(self.balls), now + MULTIBALL_SEQUENCE_INTERVAL_MS)
        print(f"[Jogo] Multiball! Até {self.sequence.pending} bolas novas.")

    def cancel_multiball_sequence(self):
        self.sequence = None

    def advance_multiball_sequence(self, now, field):
        seq = self.sequence
        if seq is None or now < seq.next_fire_at:
            return
        if seq.pending <= 0 or not self.params.multiball or len(self.balls) >= self.max_balls:
            self.sequence = None
            return

        angle = self.rng.random() * math.pi * 2
        cx, cy = field_center(field)
        self.balls.append(self.new_ball(
            field,
            x=cx,
            y=cy,
            dx=math.cos(angle) * self.params.ball_speed,
            dy=math.sin(angle) * self.params.ball_speed,
        ))
        self.shake = SHAKE_SEQUENCE_SPAWN
        seq.pending -= 1
        seq.next_fire_at = now + MULTIBALL_SEQUENCE_INTERVAL_MS
        if seq.pending <= 0:
            self.sequence = None

    def update_multiball(self, now):
        if self.params.multiball:
            if not self.multiball_active and len(self.balls) < self.max_balls:
                self.multiball_active = True
                self.start_multiball_sequence(now)
        else:
            self.multiball_active = False
            self.cancel_multiball_sequence()
            # Bolas extras somem no próximo gol em vez de voltar ao centro
            for ball in self.balls[1:]:
                ball.respawn_on_score = False

    # --------- Loop ---------
    def tick(self, now):
        self.now = now
        if not self.active:
            return self.snapshot()

        self.shake *= SHAKE_DECAY
        if self.shake < 0.1:
            self.shake = 0

        self.params = self.chaos.update(now, self.active)
        field = self.field()

        for paddle in (self.left_paddle, self.right_paddle):
            paddle.sync_dimensions(self.params)
            paddle.place(field)
            paddle.clamp_to_field(field)

            if self.ai[paddle.side]:
                target = self.nearest_ball(paddle)
                target_y = target.y if target is not None else field_center(field)[1]
                paddle.move_by_ai(target_y, field, self.params.paddle_speed)
            else:
                paddle.move_by_intent(self.intents[paddle.side], self.params.paddle_speed, field)

        # Percorre a lista viva: bolas criadas por rebatida já andam neste tick
        shake = self.shake
        i = 0
        while i < len(self.balls):
            ball = self.balls[i]
            ball.sync(self.params, field)
            shake = ball.tick(now, self.left_paddle, self.right_paddle, shake, self.create_multiball)
            i += 1
        self.shake = shake

        self.balls = [b for b in self.balls if not b.pending_removal]
        if not self.balls:
            self.balls.append(self.new_ball(field))

        self.update_multiball(now)
        self.advance_multiball_sequence(now, field)
        return self.snapshot()

    def snapshot(self):
        field = self.field()
        paddles = {}
        for paddle in (self.left_paddle, self.right_paddle):
            paddles[paddle.side] = {
                "x": paddle.x,
                "y": paddle.y,
                "width": paddle.width,
                "height": paddle.height,
                "color": paddle.color,
                "ai": self.ai[paddle.side],
            }
        return {
            "field": field._asdict(),
            "params": self.params,
            "paddles": paddles,
            "balls": [
                {
                    "x": b.x,
                    "y": b.y,
                    "size": b.size,
                    "color": b.color,
                    "state": b.state,
                    "trail": [dict(p) for p in b.trail],
                }
                for b in self.balls
            ],
            "score": dict(self.score),
            "shake": self.shake,
            "active": self.active,
            "chaos": self.chaos.started(self.now),
        }
