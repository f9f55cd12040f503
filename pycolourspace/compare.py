"""Colour difference and contrast measures"""
from __future__ import annotations

__all__ = ['delta_e_cie76', 'delta_e_ciede2000', 'wcag_luminance', 'wcag_contrast_ratio']

import math
from typing import Any

from .colourspace import ColourSpace
from .rgbspace import D65, LINEAR_SRGB


def delta_e_cie76(c1: ColourSpace[Any], c2: ColourSpace[Any], /) -> float:
    """
    CIE76 colour difference, the euclidean distance in Lab D65

    :param c1:          First colour
    :param c2:          Second colour
    :return:            Delta E
    """
    l1, a1, b1 = c1.to_lab(white=D65)
    l2, a2, b2 = c2.to_lab(white=D65)
    return math.sqrt((l2 - l1) ** 2 + (a2 - a1) ** 2 + (b2 - b1) ** 2)


def delta_e_ciede2000(
    c1: ColourSpace[Any], c2: ColourSpace[Any], /, kl: float = 1.0, kc: float = 1.0, kh: float = 1.0
) -> float:
    """
    CIEDE2000 colour difference, computed in Lab D65.

    Sharma, Wu and Dalal, "The CIEDE2000 Color-Difference Formula: Implementation Notes,
    Supplementary Test Data, and Mathematical Observations", 2005.

    :param c1:          Reference colour
    :param c2:          Sample colour
    :param kl:          Lightness weighting factor, defaults to 1.0
    :param kc:          Chroma weighting factor, defaults to 1.0
    :param kh:          Hue weighting factor, defaults to 1.0
    :return:            Delta E
    """
    l1, a1, b1 = c1.to_lab(white=D65)
    l2, a2, b2 = c2.to_lab(white=D65)

    c_bar7 = ((math.hypot(a1, b1) + math.hypot(a2, b2)) / 2) ** 7
    g = 0.5 * (1 - math.sqrt(c_bar7 / (c_bar7 + 25 ** 7)))
    a1p, a2p = (1 + g) * a1, (1 + g) * a2
    c1p, c2p = math.hypot(a1p, b1), math.hypot(a2p, b2)
    h1p = math.degrees(math.atan2(b1, a1p)) % 360 if a1p or b1 else 0.0
    h2p = math.degrees(math.atan2(b2, a2p)) % 360 if a2p or b2 else 0.0

    dlp = l2 - l1
    dcp = c2p - c1p
    if c1p * c2p == 0:
        dhp = 0.0
    elif abs(h2p - h1p) <= 180:
        dhp = h2p - h1p
    elif h2p - h1p > 180:
        dhp = h2p - h1p - 360
    else:
        dhp = h2p - h1p + 360
    dhp_big = 2 * math.sqrt(c1p * c2p) * math.sin(math.radians(dhp / 2))

    l_barp = (l1 + l2) / 2
    c_barp = (c1p + c2p) / 2
    if c1p * c2p == 0:
        h_barp = h1p + h2p
    elif abs(h1p - h2p) <= 180:
        h_barp = (h1p + h2p) / 2
    elif h1p + h2p < 360:
        h_barp = (h1p + h2p + 360) / 2
    else:
        h_barp = (h1p + h2p - 360) / 2

    t = (
        1
        - 0.17 * math.cos(math.radians(h_barp - 30))
        + 0.24 * math.cos(math.radians(2 * h_barp))
        + 0.32 * math.cos(math.radians(3 * h_barp + 6))
        - 0.20 * math.cos(math.radians(4 * h_barp - 63))
    )
    d_theta = 30 * math.exp(-(((h_barp - 275) / 25) ** 2))
    c_barp7 = c_barp ** 7
    rc = 2 * math.sqrt(c_barp7 / (c_barp7 + 25 ** 7))
    sl = 1 + 0.015 * (l_barp - 50) ** 2 / math.sqrt(20 + (l_barp - 50) ** 2)
    sc = 1 + 0.045 * c_barp
    sh = 1 + 0.015 * c_barp * t
    rt = -math.sin(math.radians(2 * d_theta)) * rc

    dl, dc, dh = dlp / (kl * sl), dcp / (kc * sc), dhp_big / (kh * sh)
    return math.sqrt(dl ** 2 + dc ** 2 + dh ** 2 + rt * dc * dh)


def wcag_luminance(colour: ColourSpace[Any], /) -> float:
    """
    Relative luminance as defined by WCAG 2

    :param colour:      Any colour
    :return:            Luminance in the range 0.0 (black) - 1.0 (white) for in gamut colours
    """
    r, g, b = colour.to_rgb(LINEAR_SRGB)
    return 0.2126 * r + 0.7152 * g + 0.0722 * b


def wcag_contrast_ratio(c1: ColourSpace[Any], c2: ColourSpace[Any], /) -> float:
    """
    Contrast ratio as defined by WCAG 2, independent of the order of the colours

    :param c1:          First colour
    :param c2:          Second colour
    :return:            Ratio in the range 1.0 - 21.0
    """
    lum1, lum2 = sorted((wcag_luminance(c1), wcag_luminance(c2)), reverse=True)
    return (lum1 + 0.05) / (lum2 + 0.05)
