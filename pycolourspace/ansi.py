"""Terminal ANSI palettes and the RGB to palette matcher"""
from __future__ import annotations

__all__ = [
    'ANSI16_CODES', 'ANSI16_PALETTE', 'ANSI256_PALETTE',
    'rgb_to_ansi16', 'rgb_to_ansi256', 'ansi16_to_rgb', 'ansi256_to_rgb',
    'ansi16_to_ansi256', 'ansi256_to_ansi16'
]

from types import MappingProxyType
from typing import Final, Mapping, Tuple

from .misc import clamp_value, round_half_up, to_8bit
from .types import Tup3

ANSI16_CODES: Final[Tuple[int, ...]] = (*range(30, 38), *range(40, 48), *range(90, 98), *range(100, 108))
"""SGR foreground (30-37, 90-97) and background (40-47, 100-107) colour codes"""


def _ansi16_entry(code: int) -> Tup3[float]:
    colour = code % 10
    if colour in {0, 7}:
        level = {30: 0, 37: 192, 90: 128, 97: 255}[code]
        return level / 255, level / 255, level / 255
    mul = 1.0 if code >= 90 else 0.5
    return (colour & 1) * mul, ((colour >> 1) & 1) * mul, ((colour >> 2) & 1) * mul


ANSI16_PALETTE: Final[Mapping[int, Tup3[float]]] = MappingProxyType({
    code: _ansi16_entry(code) for code in (*range(30, 38), *range(90, 98))
})
"""Representative sRGB colour of each foreground code"""


def _ansi256_entry(code: int) -> Tup3[float]:
    if code < 8:
        return ANSI16_PALETTE[code + 30]
    if code < 16:
        return ANSI16_PALETTE[code - 8 + 90]
    if code >= 232:
        level = ((code - 232) * 10 + 8) / 255
        return level, level, level
    c = code - 16
    rem = c % 36
    return (c // 36) / 5, (rem // 6) / 5, (rem % 6) / 5


ANSI256_PALETTE: Final[Tuple[Tup3[float], ...]] = tuple(_ansi256_entry(code) for code in range(256))
"""Representative sRGB colour of each 256 colours index"""


def _foreground(code: int) -> int:
    return code - 10 if 40 <= code <= 47 or 100 <= code <= 107 else code


def rgb_to_ansi16(r: float, g: float, b: float) -> int:
    """
    Match an sRGB colour to an ANSI 16 colours foreground code.
    Each channel is classified as off or on, and the brightness selects the bright variant.

    :param r:           Red value in the range 0.0 - 1.0
    :param g:           Green value in the range 0.0 - 1.0
    :param b:           Blue value in the range 0.0 - 1.0
    :return:            Code in 30 - 37 or 90 - 97
    """
    r, g, b = (clamp_value(x, 0.0, 1.0) for x in (r, g, b))
    value = round_half_up(max(r, g, b) * 100)
    if value == 30:
        return 30
    ansi = 30 + ((round_half_up(b) << 2) | (round_half_up(g) << 1) | round_half_up(r))
    return ansi + 60 if value // 50 == 2 else ansi


def rgb_to_ansi256(r: float, g: float, b: float) -> int:
    """
    Match an sRGB colour to an ANSI 256 colours index.
    Grays go to the 24 steps ramp, other colours to the 6x6x6 cube.

    :param r:           Red value in the range 0.0 - 1.0
    :param g:           Green value in the range 0.0 - 1.0
    :param b:           Blue value in the range 0.0 - 1.0
    :return:            Index in 16 - 255
    """
    ri, gi, bi = to_8bit(r), to_8bit(g), to_8bit(b)
    if ri == gi == bi:
        if ri < 8:
            return 16
        if ri > 248:
            return 231
        return round_half_up((ri - 8) / 247 * 24) + 232
    r, g, b = (clamp_value(x, 0.0, 1.0) for x in (r, g, b))
    return 16 + 36 * round_half_up(r * 5) + 6 * round_half_up(g * 5) + round_half_up(b * 5)


def ansi16_to_rgb(code: int) -> Tup3[float]:
    return ANSI16_PALETTE[_foreground(code)]


def ansi256_to_rgb(code: int) -> Tup3[float]:
    return ANSI256_PALETTE[code]


def ansi16_to_ansi256(code: int) -> int:
    code = _foreground(code)
    return code - 30 if code < 90 else code - 82


def ansi256_to_ansi16(code: int) -> int:
    if code < 8:
        return code + 30
    if code < 16:
        return code - 8 + 90
    return rgb_to_ansi16(*ANSI256_PALETTE[code])
