"""Hexadecimal strings and packed integers codec"""
from __future__ import annotations

__all__ = ['RenderCondition', 'parse_hex', 'format_hex', 'pack_argb', 'unpack_argb']

import re
from enum import Enum
from typing import Final, Pattern, Tuple

from ._logging import logger
from .exception import FormatError
from .misc import to_8bit

_HEX_RE: Final[Pattern[str]] = re.compile(r'#?([0-9a-fA-F]{3,4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})')


class RenderCondition(Enum):
    """When to render the alpha channel"""
    AUTO = 'auto'
    """Only when the colour is not fully opaque"""
    ALWAYS = 'always'
    NEVER = 'never'


def parse_hex(text: str, /) -> Tuple[float, float, float, float]:
    """
    Parse a hexadecimal colour in the format #RGB, #RGBA, #RRGGBB or #RRGGBBAA.
    The leading "#" is optional and the digits are case-insensitive.

    .. code-block:: python

        >>> parse_hex('#3a30')
        (0.2, 0.6666666666666666, 0.2, 0.0)

    :param text:        Hexadecimal string
    :return:            Tuple of R, G, B and alpha values in the range 0.0 - 1.0
    """
    if not isinstance(text, str) or not (match := _HEX_RE.fullmatch(text)):
        logger.debug('parse_hex: rejected {!r}', text)
        raise FormatError(f'parse_hex: "{text}" is not a 3, 4, 6 or 8 digits hexadecimal colour')
    digits = match.group(1)
    if len(digits) <= 4:
        digits = ''.join(d * 2 for d in digits)
    channels = [int(digits[i:i + 2], 16) / 255 for i in range(0, len(digits), 2)]
    if len(channels) == 3:
        channels.append(1.0)
    r, g, b, a = channels
    return r, g, b, a


def format_hex(
    r: float, g: float, b: float, a: float = 1.0, /, *,
    with_hash: bool = True, render_alpha: RenderCondition = RenderCondition.AUTO
) -> str:
    """
    Format unit interval channels to a lowercase hexadecimal string.
    Channels are clamped to the range 0.0 - 1.0 before quantisation.

    :param r:               Red value
    :param g:               Green value
    :param b:               Blue value
    :param a:               Alpha value
    :param with_hash:       Prefix the output with "#", defaults to True
    :param render_alpha:    When to append the alpha byte, defaults to RenderCondition.AUTO
    :return:                Hexadecimal string
    """
    values = [r, g, b]
    if render_alpha is RenderCondition.ALWAYS or (render_alpha is RenderCondition.AUTO and a != 1.0):
        values.append(a)
    return ('#' if with_hash else '') + ''.join(f'{to_8bit(v):02x}' for v in values)


def pack_argb(r: float, g: float, b: float, a: float = 1.0, /) -> int:
    """
    Pack unit interval channels into a 32 bits integer 0xAARRGGBB

    :return:            Packed integer
    """
    return (to_8bit(a) << 24) | (to_8bit(r) << 16) | (to_8bit(g) << 8) | to_8bit(b)


def unpack_argb(argb: int, /) -> Tuple[float, float, float, float]:
    """
    Unpack a 32 bits integer 0xAARRGGBB

    :param argb:        Packed integer
    :return:            Tuple of R, G, B and alpha values in the range 0.0 - 1.0
    """
    if isinstance(argb, bool) or not isinstance(argb, int) or not 0 <= argb <= 0xFFFFFFFF:
        logger.debug('unpack_argb: rejected {!r}', argb)
        raise FormatError(f'unpack_argb: {argb!r} is not an unsigned 32 bits integer')
    return (
        ((argb >> 16) & 0xFF) / 255,
        ((argb >> 8) & 0xFF) / 255,
        (argb & 0xFF) / 255,
        ((argb >> 24) & 0xFF) / 255,
    )
