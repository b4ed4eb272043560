from __future__ import annotations

"""Game configuration constants for Flappy Bird."""

# Canvas
SCREEN_WIDTH = 360
SCREEN_HEIGHT = 640
FPS = 60

# Fixed simulation step. Gravity, jump and pipe speeds are per-tick impulses,
# so changing TICK_MS changes the feel unless they are rescaled with it.
TICK_MS = 20
MAX_TICKS_PER_FRAME = 5

# Physics (px/tick)
GRAVITY = 1
JUMP_IMPULSE = -12

# Bird
BIRD_X = 50
BIRD_START_Y = SCREEN_HEIGHT // 2
BIRD_WIDTH = 34
BIRD_HEIGHT = 24
BIRD_IMAGE = "bird.png"

# Pipes
PIPE_WIDTH = 64
PIPE_SPAWN_INTERVAL = 200  # px between consecutive pairs

# Difficulty hit-boxes: (y offset from mid-screen) for EASY, MEDIUM, HARD
BUTTON_X = 100
BUTTON_WIDTH = 160
BUTTON_HEIGHT = 50
BUTTON_OFFSETS = (-50, 10, 70)

# Palette
COL_SKY_TOP = (135, 206, 235)
COL_SKY_BOTTOM = (196, 234, 250)
COL_PIPE = (0, 200, 0)
COL_PIPE_EDGE = (0, 120, 0)
COL_BIRD_FALLBACK = (255, 200, 0)
COL_TEXT = (255, 255, 255)
COL_TEXT_DIM = (225, 235, 245)
