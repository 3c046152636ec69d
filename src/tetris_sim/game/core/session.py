# src/tetris_sim/game/core/session.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from tetris_sim.core.game.config import GameConfig
from tetris_sim.game.core.board import Board
from tetris_sim.game.core.clock import Clock, MonotonicClock
from tetris_sim.game.core.controller import ActivePieceController
from tetris_sim.game.core.input import ButtonSource, HeldButtons, InputEdgeDetector
from tetris_sim.game.core.rng import XorShift32
from tetris_sim.game.core.rules import ScoreKeeper
from tetris_sim.game.core.storage import ByteStore, MemoryStore
from tetris_sim.game.core.timing import TimingController
from tetris_sim.game.core.types import ActivePiece, Button, PieceType, SessionStatus, State
from tetris_sim.utils.logging import setup_logger

LOG = setup_logger(name="tetris_sim.session", use_rich=True, level="info")

_U32 = 0xFFFFFFFF


@dataclass(frozen=True)
class TickResult:
    """What happened during one tick (game events, not a reward)."""

    locked: bool = False
    cleared_lines: int = 0
    restarted: bool = False
    game_over: bool = False


class GameSession:
    """
    One game: board, active/next piece, RNG, timing, score and input edges.

    Contracts:
      - tick() advances exactly one frame; all mutation is applied before it returns.
      - While paused or game over only the pause and restart edges are handled.
      - restart() reseeds from the clock, clears the board, resets score/lines/level
        and resynchronizes input edges; a pending high score is flushed, then
        merged with the stored record (the larger value wins).
      - Sessions share nothing; any number may coexist.
    """

    def __init__(
            self,
            cfg: Optional[GameConfig] = None,
            *,
            store: Optional[ByteStore] = None,
            clock: Optional[Clock] = None,
            board: Optional[Board] = None,
            seed: Optional[int] = None,
    ) -> None:
        self.cfg = cfg or GameConfig()
        self.store: ByteStore = store if store is not None else MemoryStore()
        self.clock: Clock = clock or MonotonicClock()

        if board is not None and (board.h != self.cfg.height or board.w != self.cfg.width):
            raise ValueError(
                f"board is {board.h}x{board.w}, config expects {self.cfg.height}x{self.cfg.width}"
            )
        self.board = board if board is not None else Board.empty(h=self.cfg.height, w=self.cfg.width)

        self.rng = XorShift32()
        self.controller = ActivePieceController(board=self.board, rng=self.rng)
        self.timing = TimingController(self.cfg.timing.to_params())
        self.scores = ScoreKeeper(store=self.store, cfg=self.cfg.scoring.to_score_config())
        self.input = InputEdgeDetector()
        self._idle = HeldButtons()

        self.seed = 0
        self.frame = 0
        self.paused = False
        self.game_over = False
        self.closed = False

        if seed is None:
            seed = self.cfg.seed if self.cfg.seed is not None else self.clock.millis()
        # a caller-provided board is kept as-is for the first game only
        self._start(int(seed), clear_board=board is None)

    # ---- lifecycle -----------------------------------------------------------------

    def restart(self, seed: Optional[int] = None) -> None:
        s = int(seed) if seed is not None else self.clock.millis()
        self._start(s, clear_board=True)

    def close(self) -> None:
        if self.closed:
            return
        self.scores.flush()
        self.closed = True

    def __enter__(self) -> "GameSession":
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    def _start(self, seed: int, *, clear_board: bool) -> None:
        self.seed = int(seed) & _U32
        if clear_board:
            self.board.reset()
        self.rng.seed(self.seed)
        self.scores.flush()
        self.scores.reset()
        self.scores.load_high_score()
        self.timing.reset()
        self.paused = False
        self.game_over = False
        self.frame = 0
        self.input.sync()

        self.controller.prime()
        self._spawn()
        LOG.info(f"[session] start seed={self.seed} high_score={self.scores.high_score}")

    # ---- per-frame -----------------------------------------------------------------

    def tick(self, source: Optional[ButtonSource] = None) -> TickResult:
        self.frame += 1
        self.input.update(source if source is not None else self._idle, port=self.cfg.port)
        keys = self.cfg.buttons

        if self.input.pressed(keys.pause):
            self.toggle_pause()
        if self.input.pressed(keys.restart):
            self.restart()
            return TickResult(restarted=True)
        if self.paused or self.game_over:
            return TickResult(game_over=self.game_over)

        if self.input.pressed(keys.left):
            self.controller.move(-1, 0)
        if self.input.pressed(keys.right):
            self.controller.move(1, 0)
        if self.input.pressed(keys.rotate_cw):
            self.controller.rotate(+1)
        if self.input.pressed(keys.rotate_ccw):
            self.controller.rotate(-1)

        locked = False
        cleared = 0
        if self.input.pressed(keys.hard_drop):
            cleared = self.hard_drop()
            locked = True
            if self.game_over:
                return TickResult(locked=True, cleared_lines=cleared, game_over=True)

        soft = self.input.down(keys.soft_drop)
        if self.timing.tick(self.controller, level=self.scores.level, soft_drop=soft):
            cleared += self._lock_and_advance()
            locked = True

        return TickResult(locked=locked, cleared_lines=cleared, game_over=self.game_over)

    def step(self, buttons: Iterable[Button | int] = ()) -> TickResult:
        """Tick with the given buttons held this frame (headless drivers)."""
        return self.tick(HeldButtons(buttons))

    # ---- actions -------------------------------------------------------------------

    def move(self, dx: int, dy: int) -> bool:
        if not self.is_playing:
            return False
        return self.controller.move(dx, dy)

    def rotate(self, direction: int) -> bool:
        if not self.is_playing:
            return False
        return self.controller.rotate(direction)

    def hard_drop(self) -> int:
        """Drop to the floor, award the per-cell bonus and lock immediately. Returns lines cleared."""
        if not self.is_playing:
            return 0
        d = self.controller.drop_to_floor()
        self.scores.award_hard_drop(d)
        return self._lock_and_advance()

    def toggle_pause(self) -> None:
        self.paused = not self.paused

    # ---- internals -----------------------------------------------------------------

    def _spawn(self) -> None:
        if not self.controller.spawn():
            self.game_over = True
            LOG.info(
                f"[session] game over score={self.scores.score} lines={self.scores.lines} "
                f"level={self.scores.level}"
            )

    def _lock_and_advance(self) -> int:
        self.controller.lock()
        cleared = self.board.clear_full_rows()
        self.scores.award_clears(cleared)
        self.timing.reset()
        self._spawn()
        return int(cleared)

    # ---- snapshot ------------------------------------------------------------------

    @property
    def is_playing(self) -> bool:
        return not (self.paused or self.game_over)

    @property
    def status(self) -> SessionStatus:
        if self.game_over:
            return SessionStatus.GAME_OVER
        if self.paused:
            return SessionStatus.PAUSED
        return SessionStatus.PLAYING

    @property
    def active(self) -> ActivePiece:
        return self.controller.active

    @property
    def next_kind(self) -> PieceType:
        return self.controller.next_kind

    @property
    def score(self) -> int:
        return int(self.scores.score)

    @property
    def lines(self) -> int:
        return int(self.scores.lines)

    @property
    def level(self) -> int:
        return int(self.scores.level)

    @property
    def high_score(self) -> int:
        return int(self.scores.high_score)

    def state(self) -> State:
        ap = self.controller.active
        ghost = 0 if self.game_over else self.controller.hard_drop_distance()
        return State(
            grid=self.board.snapshot(),
            active=ap,
            ghost_distance=int(ghost),
            next_kind=self.controller.next_kind,
            score=self.score,
            lines=self.lines,
            level=self.level,
            high_score=self.high_score,
            paused=bool(self.paused),
            game_over=bool(self.game_over),
        )


__all__ = ["GameSession", "TickResult"]
