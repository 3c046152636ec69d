# tests/test_rules.py
from __future__ import annotations

from typing import Optional

from tetris_sim.game.core.constants import HIGH_SCORE_KEY
from tetris_sim.game.core.rules import ScoreConfig, ScoreKeeper, level_for_lines, score_for_clears
from tetris_sim.game.core.storage import MemoryStore, StorageError, pack_u32_le


class FlakyStore:
    """MemoryStore that fails while `broken` is set."""

    def __init__(self) -> None:
        self.inner = MemoryStore()
        self.broken = True

    def save(self, key: str, data: bytes) -> None:
        if self.broken:
            raise StorageError("disk full")
        self.inner.save(key, data)

    def load(self, key: str) -> Optional[bytes]:
        if self.broken:
            raise StorageError("unreadable")
        return self.inner.load(key)


def test_line_clear_awards_scale_with_level() -> None:
    cfg = ScoreConfig()
    assert score_for_clears(0, 5, cfg) == 0
    assert score_for_clears(1, 1, cfg) == 100
    assert score_for_clears(2, 1, cfg) == 300
    assert score_for_clears(3, 3, cfg) == 1500
    assert score_for_clears(4, 2, cfg) == 1600


def test_level_formula() -> None:
    cfg = ScoreConfig()
    assert level_for_lines(0, cfg) == 1
    assert level_for_lines(9, cfg) == 1
    assert level_for_lines(10, cfg) == 2
    assert level_for_lines(25, cfg) == 3


def test_award_uses_level_before_the_clear() -> None:
    sk = ScoreKeeper(store=MemoryStore())
    sk.lines = 8
    assert sk.award_clears(2) == 300
    assert (sk.lines, sk.level) == (10, 2)
    assert sk.award_clears(1) == 200
    assert sk.score == 500


def test_level_never_decreases() -> None:
    sk = ScoreKeeper(store=MemoryStore())
    sk.level = 5
    assert sk.award_clears(1) == 500
    assert sk.level == 5


def test_new_high_score_is_persisted_little_endian() -> None:
    store = MemoryStore()
    sk = ScoreKeeper(store=store)
    sk.award_clears(4)
    assert sk.high_score == 800
    assert store.records[HIGH_SCORE_KEY] == b"\x20\x03\x00\x00"
    assert not sk.high_score_dirty


def test_lower_score_does_not_touch_the_record() -> None:
    store = MemoryStore({HIGH_SCORE_KEY: pack_u32_le(5000)})
    sk = ScoreKeeper(store=store)
    assert sk.load_high_score() == 5000
    sk.award_clears(1)
    sk.award_hard_drop(10)
    assert sk.high_score == 5000
    assert store.saves == 0


def test_hard_drop_bonus() -> None:
    sk = ScoreKeeper(store=MemoryStore())
    assert sk.award_hard_drop(20) == 40
    assert sk.award_hard_drop(0) == 0
    assert sk.score == 40


def test_short_or_missing_record_loads_as_zero() -> None:
    assert ScoreKeeper(store=MemoryStore()).load_high_score() == 0
    assert ScoreKeeper(store=MemoryStore({HIGH_SCORE_KEY: b"\x01\x02"})).load_high_score() == 0


def test_failed_save_keeps_record_dirty_until_flush_succeeds() -> None:
    store = FlakyStore()
    sk = ScoreKeeper(store=store)
    assert sk.load_high_score() == 0

    sk.award_clears(1)
    assert sk.high_score == 100
    assert sk.high_score_dirty
    assert not sk.flush()

    store.broken = False
    assert sk.flush()
    assert not sk.high_score_dirty
    assert store.inner.records[HIGH_SCORE_KEY] == pack_u32_le(100)


def test_reset_keeps_high_score() -> None:
    sk = ScoreKeeper(store=MemoryStore())
    sk.award_clears(3)
    sk.reset()
    assert (sk.score, sk.lines, sk.level) == (0, 0, 1)
    assert sk.high_score == 500


def test_unreadable_store_keeps_in_memory_high_score() -> None:
    store = FlakyStore()
    store.broken = False
    sk = ScoreKeeper(store=store)
    sk.award_clears(2)
    assert sk.high_score == 300

    store.broken = True
    assert sk.load_high_score() == 300
    assert sk.high_score == 300
