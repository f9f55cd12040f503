"""Miscellaneous and utility functions"""

__all__ = ['clamp_value', 'round_half_up', 'to_8bit']

import math

from .types import Nb


def clamp_value(val: Nb, min_val: Nb, max_val: Nb) -> Nb:
    """
    Clamp value val between min_val and max_val

    :param val:         Value to clamp
    :param min_val:     Minimum value
    :param max_val:     Maximum value
    :return:            Clamped value
    """
    return min_val if val < min_val else max_val if val > max_val else val  # type: ignore


def round_half_up(val: float) -> int:
    """
    Round to the nearest integer, halves going up (round() rounds them to even)

    :param val:         Value to round
    :return:            Rounded integer
    """
    return math.floor(val + 0.5)


def to_8bit(val: float) -> int:
    """
    Quantise a unit interval channel to the range 0 - 255, clamping out of gamut values

    :param val:         Channel value
    :return:            Integer in the range 0 - 255
    """
    return round_half_up(clamp_value(val, 0.0, 1.0) * 255)
