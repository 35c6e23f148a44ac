"""
SkyRenderer — maps NightSky state onto terminal cells.

Pure function of the scene and a viewport: no scene state is touched.
Positions stay floating point in the simulation and are truncated to
whole cells here only.

Draw order (later cells overwrite earlier ones at the same position):
    background → stars → shooting stars (head, then trail) → satellites

Usage:
    frame = render_sky(sky, Viewport(0, 0, cols, rows))
    for cell in frame.cells: ...
"""

from __future__ import annotations
import math
from typing import TYPE_CHECKING

from core.types import CellDraw, SkyFrame, Viewport
from rendering.palette import Colors, Glyphs, star_style

if TYPE_CHECKING:
    from sky.entities import Satellite, ShootingStar, Star
    from sky.night_sky import NightSky


TRAIL_LENGTH = 3
TRAIL_STEP_X = 0.5
TRAIL_STEP_Y = 0.25


def _cell(viewport: Viewport, col: int, row: int, glyph: str, fg) -> CellDraw:
    return CellDraw(viewport.x + col, viewport.y + row, glyph, fg, Colors.SKY_BG)


def render_stars(stars: list[Star], frame_count: int,
                 viewport: Viewport) -> list[CellDraw]:
    cells = []
    for star in stars:
        if not viewport.contains(star.x, star.y):
            continue
        glyph, color = star_style(star.displayed_brightness(frame_count))
        cells.append(_cell(viewport, star.x, star.y, glyph, color))
    return cells


def render_shooting_star(meteor: ShootingStar, viewport: Viewport) -> list[CellDraw]:
    """Head plus trail; nothing at all when the head is off screen."""
    col, row = int(meteor.x), int(meteor.y)
    if not viewport.contains(col, row):
        return []

    cells = [_cell(viewport, col, row, Glyphs.METEOR_HEAD, Colors.METEOR_HEAD)]
    for i in range(1, TRAIL_LENGTH + 1):
        trail_col = int(meteor.x - i * TRAIL_STEP_X)
        trail_row = int(meteor.y - i * TRAIL_STEP_Y)
        if viewport.contains(trail_col, trail_row):
            cells.append(_cell(viewport, trail_col, trail_row,
                               Glyphs.METEOR_TRAIL, Colors.METEOR_TRAIL))
    return cells


def render_satellite(satellite: Satellite, viewport: Viewport) -> list[CellDraw]:
    col, row = int(satellite.x), int(satellite.y)
    if not viewport.contains(col, row):
        return []
    blink = (math.sin(satellite.blink_phase) + 1.0) / 2.0
    return [_cell(viewport, col, row, Glyphs.SATELLITE, Colors.satellite(blink))]


def render_sky(sky: NightSky, viewport: Viewport) -> SkyFrame:
    frame = SkyFrame(viewport=viewport, background=Colors.SKY_BG)
    frame.cells.extend(render_stars(sky.stars, sky.frame_count, viewport))
    for meteor in sky.shooting_stars:
        frame.cells.extend(render_shooting_star(meteor, viewport))
    for satellite in sky.satellites:
        frame.cells.extend(render_satellite(satellite, viewport))
    return frame
