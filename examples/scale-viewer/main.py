"""Scale Viewer - sort the quantities, then walk the scale stages.

Exercises ScaleScene: the ordering puzzle, stage navigation, layout,
smoothed animation and camera framing.

Controls:
  Click   Move a tile between the lists
  Drag    Insert a tile at any position
  Enter   Check the order (once every tile is placed)
  R       Retry after a wrong answer
  S       Skip the puzzle
  Space   Continue after solving the puzzle
  Right   Next scale
  Left    Previous scale
  Esc     Quit
"""
from __future__ import annotations

import logging
import random
import sys

import pygame

from scale_stages import PUZZLE_COMPLETE, STAGE_CHANGED, PuzzlePhase, ScaleConfig, ScaleScene

from ui.constants import BG_COLOR, FPS, SCREEN_H, SCREEN_W, STATUS_H, TPS
from ui.puzzle_panel import PuzzlePanel
from ui.stages import draw_stage_title, draw_stages, draw_status_bar

logger = logging.getLogger("scale_viewer")


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption("Scale Viewer")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("arial", 15)
    big_font = pygame.font.SysFont("arial", 26, bold=True)

    scene = ScaleScene(
        config=ScaleConfig(tps=TPS),
        aspect=SCREEN_W / (SCREEN_H - STATUS_H),
        rng=random.Random(),
    )
    panel = PuzzlePanel(scene.puzzle)
    scene.bus.subscribe(
        STAGE_CHANGED,
        lambda signal, data: logger.info("Stage %s -> %s", data["old"], data["new"]),
    )

    # The scene starts navigating as soon as the puzzle is solved; keep the
    # result on screen until the player continues.
    celebrating = False

    def on_complete(signal: str, data: dict) -> None:
        nonlocal celebrating
        celebrating = True

    scene.bus.subscribe(PUZZLE_COMPLETE, on_complete)

    running = True
    while running:
        frame_seconds = clock.tick(FPS) / 1000.0
        in_puzzle = celebrating or not scene.navigator.started

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif celebrating:
                    if event.key in (pygame.K_SPACE, pygame.K_RETURN):
                        celebrating = False
                elif not scene.navigator.started:
                    if event.key == pygame.K_RETURN:
                        scene.puzzle.validate()
                    elif event.key == pygame.K_r and scene.puzzle.phase is PuzzlePhase.FAIL:
                        scene.puzzle.reset()
                    elif event.key == pygame.K_s:
                        scene.start()
                elif event.key == pygame.K_RIGHT:
                    scene.advance()
                elif event.key == pygame.K_LEFT:
                    scene.retreat()

            elif in_puzzle and event.type == pygame.MOUSEBUTTONDOWN:
                if event.button == 1:
                    panel.mouse_down(event.pos)

            elif in_puzzle and event.type == pygame.MOUSEBUTTONUP:
                if event.button == 1:
                    panel.mouse_up(event.pos)

        # --- Tick ---
        scene.advance_time(frame_seconds)

        # --- Render ---
        screen.fill(BG_COLOR)
        frame = scene.frame()
        if celebrating or not scene.navigator.started:
            panel.draw(screen, font)
            if celebrating:
                status = "Space: explore the scales   Esc: quit"
            else:
                status = "Click or drag tiles   Enter: check   S: skip   Esc: quit"
        else:
            draw_stages(screen, font, frame, scene.catalog, scene.config)
            draw_stage_title(screen, big_font, font, frame)
            status = f"Stage {frame.active_index + 1}/{len(scene.catalog)}   Left/Right: navigate   Esc: quit"
        draw_status_bar(screen, font, status)

        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
