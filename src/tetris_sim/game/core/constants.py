# src/tetris_sim/game/core/constants.py
from __future__ import annotations

# Board / cell encoding
EMPTY_CELL: int = 0

# Classic tetromino set size
CLASSIC_NUM_PIECES: int = 7

# Playfield geometry (visible rows + hidden spawn rows above them)
BOARD_COLS: int = 10
VISIBLE_ROWS: int = 20
HIDDEN_ROWS: int = 2

# Spawn row: origin sits one row above the grid so the footprint lands in the hidden rows
SPAWN_ROW: int = -1

# Gravity curve, in frames
BASE_FALL_INTERVAL: int = 30
FALL_INTERVAL_STEP: int = 2
MIN_FALL_INTERVAL: int = 5
SOFT_DROP_INTERVAL: int = 2

# Piece locks once the grounded counter exceeds this many frames
LOCK_DELAY_FRAMES: int = 24

# Scoring
LINE_CLEAR_AWARDS: tuple[int, int, int, int, int] = (0, 100, 300, 500, 800)
HARD_DROP_BONUS_PER_CELL: int = 2
LINES_PER_LEVEL: int = 10

# Rotation kicks as (d_col, d_row), tried in this order
ROTATION_KICKS: tuple[tuple[int, int], ...] = (
    (0, 0),
    (-1, 0),
    (1, 0),
    (0, -1),
    (-2, 0),
    (2, 0),
)

# Persistence
HIGH_SCORE_KEY: str = "tetris_high_score_v1"
HIGH_SCORE_RECORD_LEN: int = 4

# RNG
RNG_DEFAULT_SEED: int = 0x12345678

# Joypad
NUM_BUTTONS: int = 16
