"""Cartesian to polar transforms shared by every hue based colour model"""

__all__ = ['ACHROMATIC_EPSILON', 'normalize_hue', 'to_polar', 'from_polar', 'interpolate_hue']

import math
from typing import Final, Tuple

ACHROMATIC_EPSILON: Final[float] = 1e-4
"""Chroma under which a colour is treated as achromatic and given a hue of 0"""


def normalize_hue(h: float) -> float:
    """
    Wrap a hue angle in the range 0.0 - 360.0 (excluded)

    :param h:           Hue in degrees
    :return:            Normalised hue
    """
    h = math.fmod(h, 360.0)
    if h < 0.0:
        h += 360.0
    # fmod of a tiny negative value plus 360 rounds up to 360.0
    if h >= 360.0 or h == 0.0:
        return 0.0
    return h


def to_polar(x: float, y: float) -> Tuple[float, float]:
    """
    Convert a point of a Cartesian plane to chroma and hue

    :param x:           Abscissa, e.g. a* or u*
    :param y:           Ordinate, e.g. b* or v*
    :return:            Tuple of chroma and hue in degrees
    """
    c = math.hypot(x, y)
    if c < ACHROMATIC_EPSILON:
        return c, 0.0
    return c, normalize_hue(math.degrees(math.atan2(y, x)))


def from_polar(c: float, h: float) -> Tuple[float, float]:
    """
    Convert chroma and hue to a point of a Cartesian plane

    :param c:           Chroma
    :param h:           Hue in degrees, any real value
    :return:            Tuple of x and y
    """
    hr = math.radians(normalize_hue(h))
    return c * math.cos(hr), c * math.sin(hr)


def interpolate_hue(h1: float, h2: float, pct: float) -> float:
    """
    Interpolate two hues along the shortest arc of the colour wheel

    :param h1:          First hue in degrees
    :param h2:          Second hue in degrees
    :param pct:         Percentage value in the range 0.0 - 1.0
    :return:            Interpolated hue, normalised
    """
    delta = normalize_hue(h2 - h1)
    if delta > 180.0:
        delta -= 360.0
    return normalize_hue(h1 + delta * pct)
