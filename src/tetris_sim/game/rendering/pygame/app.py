# src/tetris_sim/game/rendering/pygame/app.py
from __future__ import annotations

import pygame

from tetris_sim.core.config.root import PlayConfig
from tetris_sim.game.core.session import GameSession
from tetris_sim.game.core.storage import DirectoryStore
from tetris_sim.game.rendering.pygame.keyboard import KeyboardButtons
from tetris_sim.game.rendering.pygame.renderer import TetrisRenderer
from tetris_sim.utils.logging import set_level, setup_logger

LOG = setup_logger(name="tetris_sim.play", use_rich=True, level="info")


def run_play(cfg: PlayConfig) -> int:
    """One simulation tick per rendered frame at cfg.fps until the window is closed or Esc is pressed."""
    set_level(cfg.log_level)

    store = DirectoryStore(cfg.store_dir)
    session = GameSession(cfg.game, store=store)
    LOG.info(f"[play] store={store.root} fps={cfg.fps} seed={session.seed}")

    pygame.init()
    try:
        renderer = TetrisRenderer(
            cell=cfg.cell,
            hidden_rows=cfg.game.hidden_rows,
            show_grid_lines=cfg.show_grid,
        )
        screen, layout = renderer.init_window(board_h=session.board.h, board_w=session.board.w)
        clock = pygame.time.Clock()
        buttons = KeyboardButtons()

        running = True
        while running:
            clock.tick(cfg.fps)

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
            if not running:
                break

            buttons.poll()
            result = session.tick(buttons)
            if result.locked and result.cleared_lines > 0:
                LOG.debug(f"[play] cleared={result.cleared_lines} score={session.score} level={session.level}")

            renderer.render(screen=screen, state=session.state(), layout=layout)
            pygame.display.flip()
    finally:
        session.close()
        pygame.quit()

    LOG.info(f"[play] bye score={session.score} high_score={session.high_score}")
    return 0


__all__ = ["run_play"]
