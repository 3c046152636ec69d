# src/tetris_sim/cli/play.py
from __future__ import annotations

import argparse
from pathlib import Path
from typing import Optional, Sequence

from tetris_sim.core.config.io import load_play_config


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Play tetris-sim (pygame).")
    ap.add_argument("--config", type=Path, default=None, help="YAML play config (see configs/play.yaml)")
    ap.add_argument("--seed", type=int, default=None, help="first-game seed (default: clock)")
    ap.add_argument("--fps", type=int, default=None)
    ap.add_argument("--cell", type=int, default=None)
    ap.add_argument("--store-dir", type=Path, default=None, help="directory for the high-score record")
    ap.add_argument("--log-level", type=str, default=None)
    ap.add_argument(
        "overrides",
        nargs="*",
        help="dotlist overrides, e.g. game.timing.lock_delay_frames=30",
    )
    return ap


def _cli_overrides(args: argparse.Namespace) -> list[str]:
    out: list[str] = []
    if args.seed is not None:
        out.append(f"game.seed={int(args.seed)}")
    if args.fps is not None:
        out.append(f"fps={int(args.fps)}")
    if args.cell is not None:
        out.append(f"cell={int(args.cell)}")
    if args.store_dir is not None:
        out.append(f"store_dir={args.store_dir}")
    if args.log_level is not None:
        out.append(f"log_level={args.log_level}")
    return out


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    cfg = load_play_config(args.config, overrides=[*args.overrides, *_cli_overrides(args)])

    # pygame is only needed for the interactive loop
    from tetris_sim.game.rendering.pygame.app import run_play

    return run_play(cfg)


if __name__ == "__main__":
    raise SystemExit(main())
