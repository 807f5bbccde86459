import math
import random
import argparse

import pygame

from config import *
from cores import hex_to_rgb, inverse_color
from jogo import Game
from raquete import LEFT, RIGHT, intent_from_keys
from som import SoundManager

LEFT_KEYS = {"up": (pygame.K_w,), "down": (pygame.K_s,)}
RIGHT_KEYS = {"up": (pygame.K_UP,), "down": (pygame.K_DOWN,)}


# Seta do indicador de gravidade, limitada a metade da altura do campo
def gravity_arrow(field, gravity_x, gravity_y, scale=2000):
    cx = field["x"] + field["width"] / 2
    cy = field["y"] + field["height"] / 2
    ex = gravity_x * scale
    ey = gravity_y * scale
    length = math.hypot(ex, ey)
    max_length = field["height"] / 2
    if length > max_length:
        ex *= max_length / length
        ey *= max_length / length
    return (cx, cy), (cx + ex, cy + ey)


def blend(color, background, alpha):
    return tuple(int(b + (c - b) * alpha) for c, b in zip(color, background))


def pressed(keys, bindings):
    return any(keys[k] for k in bindings)


def draw_field(surface, snap, w, h):
    params = snap["params"]
    f = snap["field"]
    rect = pygame.Rect(int(f["x"]), int(f["y"]), int(f["width"]), int(f["height"]))
    pygame.draw.rect(surface, hex_to_rgb(params.background_color), rect)
    pygame.draw.rect(surface, hex_to_rgb(params.field_border_color), rect, 3)

    # Linha central tracejada
    midline = hex_to_rgb(inverse_color(params.background_color)) if params.use_neon_effects else COLOR_MIDLINE
    y = f["y"]
    while y < f["y"] + f["height"]:
        pygame.draw.line(surface, midline, (w // 2, y), (w // 2, min(y + 10, f["y"] + f["height"])), 2)
        y += 25

    start, end = gravity_arrow(f, params.ball_gravity_x, params.ball_gravity_y)
    if start != end:
        pygame.draw.line(surface, COLOR_GRAVITY, start, end, 4)
        angle = math.atan2(end[1] - start[1], end[0] - start[0])
        head = [
            end,
            (end[0] - 10 * math.cos(angle - math.pi / 6), end[1] - 10 * math.sin(angle - math.pi / 6)),
            (end[0] - 10 * math.cos(angle + math.pi / 6), end[1] - 10 * math.sin(angle + math.pi / 6)),
        ]
        pygame.draw.polygon(surface, COLOR_GRAVITY, head)


def draw_entities(surface, snap):
    background = hex_to_rgb(snap["params"].background_color)

    for p in snap["paddles"].values():
        radius = int(min(8, p["width"] / 2, p["height"] / 2))
        pygame.draw.rect(
            surface, hex_to_rgb(p["color"]),
            (int(p["x"]), int(p["y"]), int(p["width"]), int(p["height"])),
            border_radius=radius,
        )

    for b in snap["balls"]:
        color = hex_to_rgb(b["color"])
        trail = b["trail"]
        for i, point in enumerate(trail):
            k = i / len(trail)
            r = max(1, int(point["size"] / 2 * (0.3 + 0.7 * k)))
            pygame.draw.circle(surface, blend(color, background, k), (int(point["x"]), int(point["y"])), r)
        pygame.draw.circle(surface, color, (int(b["x"]), int(b["y"])), max(1, int(b["size"] / 2)))


def draw_hud(surface, snap, font, bigfont, w, h):
    score = snap["score"]
    score_text = bigfont.render(f"{score[LEFT]}  :  {score[RIGHT]}", True, COLOR_SCORE)
    surface.blit(score_text, (w // 2 - score_text.get_width() // 2, 4))

    left = font.render("IA" if snap["paddles"][LEFT]["ai"] else "Humano (W/S)", True, COLOR_LABEL)
    right = font.render("IA" if snap["paddles"][RIGHT]["ai"] else "Humano (setas)", True, COLOR_LABEL)
    surface.blit(left, (12, 8))
    surface.blit(right, (w - right.get_width() - 12, 8))

    if snap["params"].invert_controls:
        warn = font.render("CONTROLES INVERTIDOS!", True, COLOR_WARNING)
        surface.blit(warn, (w // 2 - warn.get_width() // 2, h - warn.get_height() - 6))

    if not snap["active"]:
        pause = bigfont.render("PAUSA", True, COLOR_PAUSE)
        surface.blit(pause, (w // 2 - pause.get_width() // 2, h // 2 - pause.get_height() // 2))


def shake_offset(snap):
    if not snap["params"].screen_shake:
        return 0, 0
    amount = snap["shake"]
    ox = (random.random() - 0.5) * amount * 10 + (random.random() - 0.5) * 2
    oy = (random.random() - 0.5) * amount * 10 + (random.random() - 0.5) * 2
    return int(ox), int(oy)


def main():
    parser = argparse.ArgumentParser(description="Pong Caos - Cliente")
    parser.add_argument("--width", type=int, default=WIDTH, help=f"Largura da janela (default: {WIDTH})")
    parser.add_argument("--height", type=int, default=HEIGHT, help=f"Altura da janela (default: {HEIGHT})")
    parser.add_argument("--fps", type=int, default=FPS, help=f"Quadros por segundo (default: {FPS})")
    parser.add_argument("--mute", action="store_true", help="Desliga o som")
    parser.add_argument("--human-left", action="store_true", help="Raquete esquerda começa com humano")
    parser.add_argument("--human-right", action="store_true", help="Raquete direita começa com humano")
    args = parser.parse_args()

    pygame.init()
    pygame.display.set_caption("Pong Caos")
    pygame.display.set_mode((args.width, args.height), pygame.RESIZABLE)
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("Arial", 16, bold=True)
    bigfont = pygame.font.SysFont("Arial", 32, bold=True)

    sound = SoundManager(enabled=not args.mute)

    def on_score(side):
        print(f"[Cliente] Ponto para o lado {'esquerdo' if side == LEFT else 'direito'}")

    game = Game(
        on_score=on_score,
        on_paddle_hit=sound.notify_paddle_hit,
        size_provider=lambda: pygame.display.get_surface().get_size(),
    )
    if args.human_left:
        game.take_control(LEFT)
    if args.human_right:
        game.take_control(RIGHT)

    print(f"[Cliente] Iniciando em {args.width}x{args.height} a {args.fps} FPS")

    running = True
    while running:
        # -------- Eventos --------
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.VIDEORESIZE:
                game.resize(event.w, event.h)
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_p:
                    game.toggle_pause()
                elif event.key == pygame.K_r:
                    game.reset()
                elif event.key == pygame.K_m:
                    print(f"[Cliente] Som {'desligado' if sound.toggle_mute() else 'ligado'}")
                elif event.key in LEFT_KEYS["up"] + LEFT_KEYS["down"]:
                    game.take_control(LEFT)
                elif event.key in RIGHT_KEYS["up"] + RIGHT_KEYS["down"]:
                    game.take_control(RIGHT)

        # Intenção já chega ao núcleo com a inversão aplicada
        keys = pygame.key.get_pressed()
        invert = game.params.invert_controls
        game.set_intent(LEFT, intent_from_keys(pressed(keys, LEFT_KEYS["up"]), pressed(keys, LEFT_KEYS["down"]), invert))
        game.set_intent(RIGHT, intent_from_keys(pressed(keys, RIGHT_KEYS["up"]), pressed(keys, RIGHT_KEYS["down"]), invert))

        snap = game.tick(pygame.time.get_ticks())

        # -------- Render --------
        screen = pygame.display.get_surface()
        w, h = screen.get_size()
        frame = pygame.Surface((w, h))
        frame.fill(hex_to_rgb(snap["params"].background_color))
        draw_field(frame, snap, w, h)
        draw_entities(frame, snap)

        screen.fill(hex_to_rgb(snap["params"].background_color))
        screen.blit(frame, shake_offset(snap))
        draw_hud(screen, snap, font, bigfont, w, h)

        pygame.display.flip()
        clock.tick(args.fps)

    print("[Cliente] Encerrando.")
    pygame.quit()


if __name__ == "__main__":
    main()
