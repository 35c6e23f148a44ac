"""
Sky package — the animated night sky scene.

Main exports:
    NightSky      — scene: owns entities, spawns, ages and culls them
    Star          — fixed twinkling star
    ShootingStar  — short-lived meteor
    Satellite     — slow blinking satellite
"""
from .entities import (
    Star,
    ShootingStar,
    Satellite,
    make_star,
    make_shooting_star,
    make_satellite,
)
from .night_sky import NightSky, star_count_for

__all__ = [
    "NightSky",
    "star_count_for",
    "Star",
    "ShootingStar",
    "Satellite",
    "make_star",
    "make_shooting_star",
    "make_satellite",
]
