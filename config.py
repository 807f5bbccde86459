# Configurações compartilhadas pelo núcleo da simulação e pelo cliente pygame

WIDTH, HEIGHT = 800, 480
FPS = 60

# Parâmetros padrão (snapshot inicial, antes do caos começar)
DEFAULT_PARAMS = {
    "ball_speed": 3.5,
    "ball_size": 10,
    "paddle_size": 100,
    "paddle_width": 15,
    "paddle_speed": 8,
    "ball_gravity_x": 0.0,
    "ball_gravity_y": 0.0,
    "field_width": 0.9,
    "field_height": 0.9,
    "multiball": False,
    "invert_controls": False,
    "trail_effect": True,
    "screen_shake": True,
    "use_neon_effects": True,
    "ball_color": "#ff00ff",
    "paddle_color": "#00ffff",
    "background_color": "#0a0a12",
    "field_border_color": "#1c1c35",
}

# --------- Caos ---------
CHAOS_START_DELAY_MS = 10000  # 10s de jogo "normal" antes do caos

# (min, max) de cada parâmetro contínuo sorteado pelo caos
CHAOS_RANGES = {
    "ball_speed": (2, 7),
    "ball_size": (5, 15),
    "paddle_size": (60, 130),
    "paddle_width": (10, 25),
    "paddle_speed": (5, 12),
    "ball_gravity_x": (-0.02, 0.02),
    "ball_gravity_y": (-0.1, 0.1),
    "field_width": (0.7, 0.95),
    "field_height": (0.7, 0.95),
    "multiball": (0, 1),
}
CHAOS_BOOLEAN_PARAMS = ("multiball",)

PARAM_CHANGE_MIN_MS = 5000
PARAM_CHANGE_JITTER_MS = 5000
PARAM_TRANSITION_MIN_MS = 2000
PARAM_TRANSITION_JITTER_MS = 1000
PARAM_MAX_STEP = 0.1  # no máximo 10% da distância restante por tick

COLOR_CHANGE_MIN_MS = 2000
COLOR_CHANGE_JITTER_MS = 6000
COLOR_TRANSITION_SPEED = 0.02
COLOR_RANDOM_MAX = 16777215
COLOR_DARK_RANDOM_MAX = 4210752  # < #404040, fundo sempre escuro

INVERT_CHANGE_MIN_MS = 10000
INVERT_CHANGE_JITTER_MS = 10000
INVERT_PROBABILITY = 0.15

# --------- Bola ---------
TRAIL_LENGTH = 10
SCORE_COOLDOWN_MS = 500
RESET_MIN_SPEED = 2
RESET_MIN_DX = 1
PADDLE_MIN_DX = 2
PADDLE_SPEEDUP = 1.1

SHAKE_WALL = 1
SHAKE_PADDLE = 3
SHAKE_SEQUENCE_SPAWN = 5
SHAKE_DECAY = 0.92

# --------- Multiball ---------
MAX_BALLS = 5
MULTIBALL_HIT_CHANCE = 0.05
MULTIBALL_SEQUENCE_INTERVAL_MS = 300
MULTIBALL_MIN_INTERVAL_MS = 500

# --------- Raquetes ---------
PADDLE_MARGIN = 10  # distância da raquete até a borda do campo
AI_SPEED_FACTOR = 0.8

# --------- Som ---------
SAMPLE_RATE = 44100
SFX_VOLUME = 0.18 * 0.7

# --------- Cores (render) ---------
COLOR_SCORE = (250, 250, 250)
COLOR_LABEL = (200, 255, 200)
COLOR_WARNING = (255, 120, 120)
COLOR_GRAVITY = (255, 255, 0)
COLOR_MIDLINE = (0, 255, 255)
COLOR_PAUSE = (180, 220, 255)
