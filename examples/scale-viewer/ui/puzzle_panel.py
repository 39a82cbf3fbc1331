"""Two-list puzzle panel: click to move a tile across, drag to insert it anywhere."""
from __future__ import annotations

import pygame

from scale_stages import PLACED, UNPLACED, OrderingPuzzle, PuzzlePhase

from ui.constants import (
    DRAG_THRESHOLD,
    FAIL_COLOR,
    PANEL_BG,
    PANEL_BORDER,
    PANEL_PAD,
    PLACED_H,
    PLACED_TOP,
    PROMPT_COLOR,
    SCREEN_W,
    SUCCESS_COLOR,
    TEXT_COLOR,
    TEXT_DIM,
    TILE_BG,
    TILE_BORDER,
    TILE_GAP,
    TILE_H,
    TILE_HIGHLIGHT,
    TILE_PLACED,
    TILE_W,
    UNPLACED_H,
    UNPLACED_TOP,
)

_PLACED_AREA = pygame.Rect(PANEL_PAD, PLACED_TOP, SCREEN_W - 2 * PANEL_PAD, PLACED_H)
_UNPLACED_AREA = pygame.Rect(PANEL_PAD, UNPLACED_TOP, SCREEN_W - 2 * PANEL_PAD, UNPLACED_H)
_BUTTON = pygame.Rect(SCREEN_W // 2 - 90, UNPLACED_TOP + UNPLACED_H + 24, 180, 40)


def tile_rects(area: pygame.Rect, count: int) -> list[pygame.Rect]:
    """Tile positions inside ``area``, wrapping left to right."""
    per_row = max(1, (area.width - TILE_GAP) // (TILE_W + TILE_GAP))
    rects = []
    for i in range(count):
        row, col = divmod(i, per_row)
        rects.append(pygame.Rect(
            area.x + TILE_GAP + col * (TILE_W + TILE_GAP),
            area.y + TILE_GAP + row * (TILE_H + TILE_GAP),
            TILE_W,
            TILE_H,
        ))
    return rects


class PuzzlePanel:
    """Translates pointer events into OrderingPuzzle calls."""

    def __init__(self, puzzle: OrderingPuzzle) -> None:
        self.puzzle = puzzle
        self._press_pos: tuple[int, int] | None = None
        self._pressed: tuple[str, str] | None = None  # (item_id, source list)

    def _hit(self, pos: tuple[int, int]) -> tuple[str, int | None] | None:
        """Return ``(list_name, tile_index)`` under ``pos``; index None for empty area."""
        for name, area, items in (
            (PLACED, _PLACED_AREA, self.puzzle.placed),
            (UNPLACED, _UNPLACED_AREA, self.puzzle.unplaced),
        ):
            for i, rect in enumerate(tile_rects(area, len(items))):
                if rect.collidepoint(pos):
                    return name, i
            if area.collidepoint(pos):
                return name, None
        return None

    def mouse_down(self, pos: tuple[int, int]) -> None:
        if self.puzzle.phase is not PuzzlePhase.PLAYING:
            return
        if _BUTTON.collidepoint(pos) and self.puzzle.can_validate:
            self.puzzle.validate()
            return
        hit = self._hit(pos)
        if hit is None or hit[1] is None:
            return
        name, index = hit
        items = self.puzzle.placed if name == PLACED else self.puzzle.unplaced
        item_id = items[index].id
        if self.puzzle.pick_up(item_id, name):
            self._press_pos = pos
            self._pressed = (item_id, name)

    def mouse_up(self, pos: tuple[int, int]) -> None:
        if self._press_pos is None or self._pressed is None:
            return
        dx = pos[0] - self._press_pos[0]
        dy = pos[1] - self._press_pos[1]
        item_id, source = self._pressed
        self._press_pos = None
        self._pressed = None

        if dx * dx + dy * dy <= DRAG_THRESHOLD * DRAG_THRESHOLD:
            self.puzzle.cancel_drag()
            if source == UNPLACED:
                self.puzzle.select(item_id)
            else:
                self.puzzle.deselect(item_id)
            return

        hit = self._hit(pos)
        if hit is None:
            self.puzzle.cancel_drag()
            return
        name, index = hit
        if name == PLACED and index is None:
            index = len(self.puzzle.placed)
        elif name == UNPLACED:
            index = None
        self.puzzle.drop(name, index)

    def draw(self, surface: pygame.Surface, font: pygame.font.Font) -> None:
        phase = self.puzzle.phase
        if phase is PuzzlePhase.SUCCESS:
            self._centered(surface, font, "Correct! You sorted them perfectly. Press Space to explore.", SUCCESS_COLOR, 300)
            return
        if phase is PuzzlePhase.FAIL:
            self._centered(surface, font, "Not quite right. Press R to try again.", FAIL_COLOR, 300)
            return

        self._centered(
            surface, font, "Sort the tiles from smallest to largest (left to right)",
            PROMPT_COLOR, 40,
        )
        dragged = self.puzzle.drag.item_id if self.puzzle.drag is not None else None
        for area, items, fill in (
            (_PLACED_AREA, self.puzzle.placed, TILE_PLACED),
            (_UNPLACED_AREA, self.puzzle.unplaced, TILE_BG),
        ):
            pygame.draw.rect(surface, PANEL_BG, area)
            pygame.draw.rect(surface, PANEL_BORDER, area, 1)
            numbered = area is _PLACED_AREA
            for i, (item, rect) in enumerate(zip(items, tile_rects(area, len(items)))):
                pygame.draw.rect(surface, fill, rect)
                border = TILE_HIGHLIGHT if item.id == dragged else TILE_BORDER
                pygame.draw.rect(surface, border, rect, 1)
                text = f"{i + 1}. {item.label}" if numbered else item.label
                surface.blit(font.render(text, True, TEXT_COLOR), (rect.x + 6, rect.y + 7))

        if not self.puzzle.placed:
            hint = font.render("Drag & drop or click items here", True, TEXT_DIM)
            surface.blit(hint, (_PLACED_AREA.centerx - hint.get_width() // 2, _PLACED_AREA.centery))

        if self.puzzle.can_validate:
            pygame.draw.rect(surface, TILE_PLACED, _BUTTON)
            pygame.draw.rect(surface, TILE_BORDER, _BUTTON, 1)
            label = font.render("Check Order", True, TEXT_COLOR)
            surface.blit(label, (_BUTTON.centerx - label.get_width() // 2, _BUTTON.y + 12))

    @staticmethod
    def _centered(
        surface: pygame.Surface, font: pygame.font.Font, text: str,
        color: tuple[int, int, int], y: int,
    ) -> None:
        rendered = font.render(text, True, color)
        surface.blit(rendered, (SCREEN_W // 2 - rendered.get_width() // 2, y))
