"""
Sky entities — stars, shooting stars and satellites.

Star          — fixed grid position, base brightness, twinkle speed
ShootingStar  — short-lived meteor moving down-and-right
Satellite     — slow blinking light crossing the sky left to right

Every factory takes an explicit numpy Generator so that creation is
deterministic for a seeded generator.
"""

from __future__ import annotations
import math
import numpy as np
from dataclasses import dataclass


# Shooting star ranges
METEOR_SPEED_RANGE = (2.0, 4.0)
METEOR_LIFETIME_RANGE = (15, 30)
METEOR_DROP_RATIO = 0.5          # y advance per unit of x advance

# Satellite ranges
SATELLITE_SPEED_RANGE = (0.3, 0.8)
SATELLITE_EDGE_MARGIN = 5        # rows kept clear at top and bottom
SATELLITE_BLINK_STEP = 0.1


def uniform_int(rng: np.random.Generator, low: int, high: int) -> int:
    """Integer in [low, high). An empty range collapses to low."""
    if high <= low:
        return int(low)
    return int(rng.integers(low, high))


@dataclass(frozen=True, slots=True)
class Star:
    x: int
    y: int
    brightness: int        # 1..5
    twinkle_speed: float   # radians per frame, 0.1..0.5

    def twinkle(self, frame_count: float) -> float:
        """Twinkle factor in [0, 1]."""
        return (math.sin(frame_count * self.twinkle_speed) + 1.0) / 2.0

    def displayed_brightness(self, frame_count: float) -> int:
        """Brightness actually shown at this frame, 0..5."""
        return int(self.brightness * self.twinkle(frame_count))


@dataclass(slots=True)
class ShootingStar:
    x: float
    y: float
    speed: float
    lifetime: int = 0
    max_lifetime: int = 20

    def update(self) -> None:
        self.x += self.speed
        self.y += self.speed * METEOR_DROP_RATIO
        self.lifetime += 1

    def is_alive(self) -> bool:
        return self.lifetime < self.max_lifetime


@dataclass(slots=True)
class Satellite:
    x: float
    y: float
    speed: float
    blink_phase: float = 0.0

    def update(self, width: int) -> None:
        self.x += self.speed
        self.blink_phase += SATELLITE_BLINK_STEP

        # re-enter from the left edge
        if self.x > width:
            self.x = 0.0


def make_star(rng: np.random.Generator, width: int, height: int) -> Star:
    return Star(
        x=uniform_int(rng, 0, width),
        y=uniform_int(rng, 0, height),
        brightness=uniform_int(rng, 1, 6),
        twinkle_speed=float(rng.uniform(0.1, 0.5)),
    )


def make_shooting_star(rng: np.random.Generator, width: int, height: int) -> ShootingStar:
    """
    New meteor somewhere in the upper half of the sky.

    x in [0, width), y in [0, height // 2), both whole cells.
    """
    return ShootingStar(
        x=float(uniform_int(rng, 0, width)),
        y=float(uniform_int(rng, 0, height // 2)),
        speed=float(rng.uniform(*METEOR_SPEED_RANGE)),
        lifetime=0,
        max_lifetime=uniform_int(rng, *METEOR_LIFETIME_RANGE),
    )


def make_satellite(rng: np.random.Generator, width: int, height: int) -> Satellite:
    """
    New satellite entering at the left edge.

    Skies shorter than two margins have no room for the margin band,
    so the satellite flies along row 0.
    """
    if height < 2 * SATELLITE_EDGE_MARGIN:
        y = 0
    else:
        y = uniform_int(rng, SATELLITE_EDGE_MARGIN, height - SATELLITE_EDGE_MARGIN)
    return Satellite(
        x=0.0,
        y=float(y),
        speed=float(rng.uniform(*SATELLITE_SPEED_RANGE)),
        blink_phase=float(rng.uniform(0.0, 2.0 * math.pi)),
    )
