"""
NightSky — the animated scene.

Owns every entity, rolls spawns, ages and culls transient objects and
keeps the frame counter that drives twinkling. A terminal resize is
handled by building a new NightSky; nothing survives across sizes.
"""

from __future__ import annotations
import logging
import numpy as np
from typing import Optional

from core.types import SkyFrame, Viewport
from rendering.sky_renderer import render_sky
from .entities import (
    Star, ShootingStar, Satellite,
    make_star, make_shooting_star, make_satellite,
)

logger = logging.getLogger(__name__)


STARS_PER_CELL_DIVISOR = 20
MAX_STARS = 300

# Spawn rolls: draw in [0, ROLL) and spawn when below THRESHOLD
METEOR_ROLL, METEOR_THRESHOLD = 100, 2          # 2% per frame
SATELLITE_ROLL, SATELLITE_THRESHOLD = 300, 1    # ~0.33% per frame


def star_count_for(width: int, height: int) -> int:
    return min((width * height) // STARS_PER_CELL_DIVISOR, MAX_STARS)


class NightSky:
    """
    Scene state for one viewport size.

    Parameters
    ----------
    width, height : sky size in terminal cells (non-negative)
    rng           : random generator used for every spawn (default: fresh)
    """

    def __init__(self, width: int, height: int,
                 rng: Optional[np.random.Generator] = None):
        self.width = max(0, int(width))
        self.height = max(0, int(height))
        self.rng = rng if rng is not None else np.random.default_rng()

        self.stars: list[Star] = [
            make_star(self.rng, self.width, self.height)
            for _ in range(star_count_for(self.width, self.height))
        ]
        self.shooting_stars: list[ShootingStar] = []
        self.satellites: list[Satellite] = []
        self.frame_count = 0

        logger.debug("New sky %dx%d with %d stars",
                     self.width, self.height, len(self.stars))

    # ── Spawn rolls ──────────────────────────────────────────────────────────

    def _roll(self, roll: int, threshold: int) -> bool:
        return int(self.rng.integers(0, roll)) < threshold

    def _spawn_shooting_star(self) -> None:
        if self._roll(METEOR_ROLL, METEOR_THRESHOLD):
            self.shooting_stars.append(
                make_shooting_star(self.rng, self.width, self.height))

    def _spawn_satellite(self) -> None:
        if not self.satellites and self._roll(SATELLITE_ROLL, SATELLITE_THRESHOLD):
            self.satellites.append(
                make_satellite(self.rng, self.width, self.height))

    # ── Frame update ─────────────────────────────────────────────────────────

    def update(self) -> None:
        """
        Advance the scene by one tick.

        Objects spawned during this tick are neither advanced nor culled
        until the next one.
        """
        self.frame_count += 1

        existing = len(self.shooting_stars)
        self._spawn_shooting_star()
        meteors, spawned = self.shooting_stars[:existing], self.shooting_stars[existing:]
        for meteor in meteors:
            meteor.update()
        self.shooting_stars = [
            s for s in meteors
            if s.is_alive() and s.x < self.width
        ] + spawned

        existing = len(self.satellites)
        self._spawn_satellite()
        satellites, spawned = self.satellites[:existing], self.satellites[existing:]
        for satellite in satellites:
            satellite.update(self.width)
        # Satellite.update wraps x > width back to 0, so this only drops a
        # satellite sitting exactly on the right edge.
        self.satellites = [s for s in satellites if s.x < self.width] + spawned

    # ── Rendering ────────────────────────────────────────────────────────────

    def render(self, viewport: Viewport) -> SkyFrame:
        """Cell draws for the current state. Does not modify the scene."""
        return render_sky(self, viewport)

    def resized(self, width: int, height: int) -> "NightSky":
        """Fresh sky for a new size, sharing this sky's generator."""
        return NightSky(width, height, self.rng)
