# src/tetris_sim/game/core/rules.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from tetris_sim.game.core.constants import (
    HARD_DROP_BONUS_PER_CELL,
    HIGH_SCORE_KEY,
    LINE_CLEAR_AWARDS,
    LINES_PER_LEVEL,
)
from tetris_sim.game.core.storage import ByteStore, StorageError, pack_u32_le, unpack_u32_le
from tetris_sim.utils.logging import setup_logger

LOG = setup_logger(name="tetris_sim.rules", use_rich=True, level="info")


@dataclass(frozen=True)
class ScoreConfig:
    awards: tuple[int, int, int, int, int] = LINE_CLEAR_AWARDS
    hard_drop_bonus: int = HARD_DROP_BONUS_PER_CELL
    lines_per_level: int = LINES_PER_LEVEL
    high_score_key: str = HIGH_SCORE_KEY


def score_for_clears(cleared: int, level: int, cfg: ScoreConfig) -> int:
    n = int(cleared)
    if n <= 0:
        return 0
    n = min(n, len(cfg.awards) - 1)
    return int(cfg.awards[n]) * int(level)


def level_for_lines(lines: int, cfg: ScoreConfig) -> int:
    return 1 + max(0, int(lines)) // int(cfg.lines_per_level)


class ScoreKeeper:
    """
    Score, lines, level and the persisted high score.

    The high score is written through the store whenever the score beats it.
    A failed write leaves high_score_dirty set; it is retried on the next
    update (or via flush()).
    """

    def __init__(self, *, store: ByteStore, cfg: Optional[ScoreConfig] = None) -> None:
        self.cfg = cfg or ScoreConfig()
        self.store = store
        self.score = 0
        self.lines = 0
        self.level = 1
        self.high_score = 0
        self.high_score_dirty = False

    def reset(self) -> None:
        self.score = 0
        self.lines = 0
        self.level = 1

    def load_high_score(self) -> int:
        """
        Merge the stored record into the in-memory high score.

        The larger value wins. An in-memory value the store has not caught up
        with (a failed save) stays dirty so the next flush retries it.
        """
        try:
            raw = self.store.load(self.cfg.high_score_key)
        except StorageError as e:
            LOG.warning(f"[score] high score unavailable, keeping {self.high_score}: {e}")
            return self.high_score
        stored = unpack_u32_le(raw)
        if stored >= self.high_score:
            self.high_score = stored
            self.high_score_dirty = False
        return self.high_score

    def award_clears(self, cleared: int) -> int:
        """Apply a line clear at the current level; returns the points awarded."""
        pts = score_for_clears(cleared, self.level, self.cfg)
        self.score += pts
        self.lines += max(0, int(cleared))
        self.level = max(self.level, level_for_lines(self.lines, self.cfg))
        self._check_high_score()
        return pts

    def award_hard_drop(self, cells: int) -> int:
        pts = max(0, int(cells)) * int(self.cfg.hard_drop_bonus)
        self.score += pts
        self._check_high_score()
        return pts

    def _check_high_score(self) -> None:
        if self.score > self.high_score:
            self.high_score = self.score
            self.high_score_dirty = True
        self.flush()

    def flush(self) -> bool:
        """Write the high score if dirty. Returns True when nothing is left pending."""
        if not self.high_score_dirty:
            return True
        try:
            self.store.save(self.cfg.high_score_key, pack_u32_le(self.high_score))
        except StorageError as e:
            LOG.warning(f"[score] failed to persist high score {self.high_score}: {e}")
            return False
        self.high_score_dirty = False
        LOG.debug(f"[score] high score saved: {self.high_score}")
        return True


__all__ = ["ScoreConfig", "ScoreKeeper", "level_for_lines", "score_for_clears"]
