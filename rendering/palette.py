"""
Night sky palette

Colours and glyphs for every drawable in the scene. All colours are
24-bit RGB; the terminal layer approximates them where needed.
"""

from core.types import RGB


class Colors:
    """
    Fixed colour palette for the night sky

    Star colours run from a dim grey-blue to pure white,
    meteors are warm orange, satellites near-white with a blue tint.
    """

    # Background
    SKY_BG = RGB(10, 10, 30)          # Deep night blue

    # Stars by displayed brightness
    STAR_FAINT = RGB(100, 100, 120)   # Dim grey-blue
    STAR_DIM = RGB(150, 150, 180)     # Medium grey-blue
    STAR_MEDIUM = RGB(200, 200, 220)  # Pale blue-white
    STAR_BRIGHT = RGB(230, 230, 250)  # Near white
    STAR_BRILLIANT = RGB(255, 255, 255)

    # Shooting stars
    METEOR_HEAD = RGB(255, 200, 100)  # Warm orange
    METEOR_TRAIL = RGB(200, 150, 50)  # Orange-brown

    # Satellites: brightness channel range and blue shift
    SATELLITE_MIN = 200
    SATELLITE_SPAN = 55
    SATELLITE_BLUE_SHIFT = 50

    @staticmethod
    def satellite(blink: float) -> RGB:
        """
        Satellite light for a blink factor

        Args:
            blink: Blink factor (0-1)

        Returns:
            Near-white colour, blue channel lifted and capped at 255
        """
        level = int(Colors.SATELLITE_MIN + blink * Colors.SATELLITE_SPAN)
        return RGB(level, level, min(level + Colors.SATELLITE_BLUE_SHIFT, 255))


class Glyphs:
    STAR_DOT = "·"
    STAR_BULLET = "•"
    STAR_SPARK = "✦"
    METEOR_HEAD = "☄"
    METEOR_TRAIL = "·"
    SATELLITE = "◆"


# displayed brightness -> (glyph, colour)
BRIGHTNESS_BUCKETS: dict[int, tuple[str, RGB]] = {
    0: (Glyphs.STAR_DOT, Colors.STAR_FAINT),
    1: (Glyphs.STAR_DOT, Colors.STAR_FAINT),
    2: (Glyphs.STAR_BULLET, Colors.STAR_DIM),
    3: (Glyphs.STAR_BULLET, Colors.STAR_MEDIUM),
    4: (Glyphs.STAR_SPARK, Colors.STAR_BRIGHT),
    5: (Glyphs.STAR_SPARK, Colors.STAR_BRILLIANT),
}


def star_style(brightness: int) -> tuple[str, RGB]:
    """Glyph and colour for a displayed brightness; out-of-range values clamp."""
    return BRIGHTNESS_BUCKETS[max(0, min(5, brightness))]
