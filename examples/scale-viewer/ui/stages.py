"""Draw the current RenderFrame as projected circles with labels."""
from __future__ import annotations

import pygame

from scale_stages import RenderFrame, ScaleConfig, StageCatalog, project
from scale_stages.catalog import scientific_parts

from ui.constants import SCREEN_H, SCREEN_W, STATUS_BG, STATUS_H, TEXT_COLOR, TEXT_DIM

_MIN_PIXELS = 1
_LABEL_MIN_PIXELS = 6


def _scientific_text(text: str) -> str:
    parts = scientific_parts(text)
    if parts is None:
        return f"({text})" if text else ""
    base, exponent = parts
    if base:
        return f"({base} x 10^{exponent})"
    return f"(10^{exponent})"


def _draw_body(
    surface: pygame.Surface,
    font: pygame.font.Font,
    frame: RenderFrame,
    config: ScaleConfig,
    radius: float,
    position: tuple[float, float, float],
    color: pygame.Color,
    label: str,
) -> None:
    viewport = (SCREEN_W, SCREEN_H - STATUS_H)
    projected = project(
        frame.camera.position, frame.camera.look_at, position, viewport, config.fov
    )
    if projected is None:
        return
    sx, sy, ppu = projected
    pixels = max(_MIN_PIXELS, int(radius * ppu))
    if sx + pixels < 0 or sx - pixels > SCREEN_W:
        return
    pygame.draw.circle(surface, color, (int(sx), int(sy)), pixels)
    if pixels >= _LABEL_MIN_PIXELS and label:
        text = font.render(label, True, color)
        surface.blit(text, (int(sx) - text.get_width() // 2, int(sy) - pixels - 18))


def draw_stages(
    surface: pygame.Surface,
    font: pygame.font.Font,
    frame: RenderFrame,
    catalog: StageCatalog,
    config: ScaleConfig,
) -> None:
    """Draw the reference body first, then every visible stage body."""
    if frame.reference is not None:
        stage = catalog.get(frame.reference.stage_id)
        _draw_body(
            surface, font, frame, config,
            frame.reference.radius, frame.reference.position,
            pygame.Color(stage.color), stage.label,
        )
    for body in frame.bodies:
        stage = catalog.get(body.stage_id)
        _draw_body(
            surface, font, frame, config,
            body.radius, body.position,
            pygame.Color(stage.color), stage.label,
        )


def draw_stage_title(
    surface: pygame.Surface, big_font: pygame.font.Font, font: pygame.font.Font,
    frame: RenderFrame,
) -> None:
    stage = frame.stage
    if stage is None:
        return
    color = pygame.Color(stage.color)
    title = big_font.render(f"{stage.label} {_scientific_text(stage.scientific)}", True, color)
    surface.blit(title, (SCREEN_W // 2 - title.get_width() // 2, 16))
    if stage.value_label:
        value = font.render(stage.value_label, True, TEXT_COLOR)
        surface.blit(value, (SCREEN_W // 2 - value.get_width() // 2, 52))


def draw_status_bar(surface: pygame.Surface, font: pygame.font.Font, text: str) -> None:
    y = SCREEN_H - STATUS_H
    pygame.draw.rect(surface, STATUS_BG, (0, y, SCREEN_W, STATUS_H))
    surface.blit(font.render(text, True, TEXT_DIM), (10, y + 10))
