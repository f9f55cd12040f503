# pycolourspace: Conversions between colour models for single colour samples.
# Copyright (C) 2024 pycolourspace contributors
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Lesser General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# pycolourspace is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
# GNU Lesser General Public License for more details.
#
# You should have received a copy of the GNU Lesser General Public License
# along with this program. If not, see http://www.gnu.org/licenses/.
"""White points, transfer functions and RGB colour space descriptors"""
from __future__ import annotations

__all__ = [
    'WhitePoint', 'TransferFunction', 'RGBColourSpace',
    'ILLUMINANT_A', 'D50', 'D55', 'D65', 'D75', 'ILLUMINANT_E', 'WHITE_POINTS',
    'LINEAR', 'SRGB_TRANSFER', 'BT2020_TRANSFER', 'ROMM_TRANSFER', 'gamma_transfer',
    'SRGB', 'LINEAR_SRGB', 'ADOBE_RGB', 'DISPLAY_P3', 'BT2020', 'ROMM_RGB',
    'RGB_COLOUR_SPACES', 'get_rgb_space', 'chromatic_adaptation_matrix'
]

import math
from functools import lru_cache
from types import MappingProxyType
from typing import Any, Callable, Final, Mapping, NamedTuple, Tuple

import numpy as np
from numpy.typing import NDArray

from ._logging import logger
from .exception import DomainError
from .types import Tup3


class WhitePoint(NamedTuple):
    """Reference white, given by its tristimulus values normalised to Yn = 1"""

    name: str
    """Illuminant name"""

    tristimulus: Tup3[float]
    """Xn, Yn, Zn"""

    @property
    def chromaticity(self) -> Tuple[float, float]:
        """
        CIE 1931 xy chromaticity of the white point

        :return:            Tuple of x and y
        """
        x, y, z = self.tristimulus
        total = x + y + z
        return x / total, y / total

    def __str__(self) -> str:
        return self.name


# http://www.brucelindbloom.com/index.html?Eqn_ChromAdapt.html (2° observer)
ILLUMINANT_A: Final[WhitePoint] = WhitePoint('A', (1.09850, 1.00000, 0.35585))
D50: Final[WhitePoint] = WhitePoint('D50', (0.96422, 1.00000, 0.82521))
D55: Final[WhitePoint] = WhitePoint('D55', (0.95682, 1.00000, 0.92149))
D65: Final[WhitePoint] = WhitePoint('D65', (0.95047, 1.00000, 1.08883))
D75: Final[WhitePoint] = WhitePoint('D75', (0.94972, 1.00000, 1.22638))
ILLUMINANT_E: Final[WhitePoint] = WhitePoint('E', (1.00000, 1.00000, 1.00000))

WHITE_POINTS: Final[Mapping[str, WhitePoint]] = MappingProxyType({
    wp.name: wp for wp in (ILLUMINANT_A, D50, D55, D65, D75, ILLUMINANT_E)
})


class TransferFunction(NamedTuple):
    """Pair of functions between encoded (gamma corrected) and linear light values"""

    name: str

    encode: Callable[[float], float]
    """Linear to encoded"""

    decode: Callable[[float], float]
    """Encoded to linear"""


def _identity(x: float) -> float:
    return x


def _srgb_encode(x: float) -> float:
    if x <= 0.0031308:
        return x * 12.92
    return 1.055 * x ** (1 / 2.4) - 0.055


def _srgb_decode(x: float) -> float:
    if x <= 0.04045:
        return x / 12.92
    return ((x + 0.055) / 1.055) ** 2.4


# ITU-R BT.2020, 12 bits constants
_BT2020_ALPHA: Final[float] = 1.09929682680944
_BT2020_BETA: Final[float] = 0.018053968510807


def _bt2020_encode(x: float) -> float:
    if x < _BT2020_BETA:
        return 4.5 * x
    return _BT2020_ALPHA * x ** 0.45 - (_BT2020_ALPHA - 1)


def _bt2020_decode(x: float) -> float:
    if x < _BT2020_BETA * 4.5:
        return x / 4.5
    return ((x + _BT2020_ALPHA - 1) / _BT2020_ALPHA) ** (1 / 0.45)


_ROMM_ET: Final[float] = 1 / 512


def _romm_encode(x: float) -> float:
    if x < _ROMM_ET:
        return 16 * x
    return x ** (1 / 1.8)


def _romm_decode(x: float) -> float:
    if x < 16 * _ROMM_ET:
        return x / 16
    return x ** 1.8


def gamma_transfer(gamma: float, name: str | None = None) -> TransferFunction:
    """
    Make a pure power law transfer function, extended to negative values by symmetry

    :param gamma:       Decoding exponent
    :param name:        Optional name, defaults to "gamma <gamma>"
    :return:            TransferFunction object
    """
    def _encode(x: float) -> float:
        return math.copysign(abs(x) ** (1 / gamma), x)

    def _decode(x: float) -> float:
        return math.copysign(abs(x) ** gamma, x)

    return TransferFunction(name or f'gamma {gamma}', _encode, _decode)


LINEAR: Final[TransferFunction] = TransferFunction('linear', _identity, _identity)
SRGB_TRANSFER: Final[TransferFunction] = TransferFunction('sRGB', _srgb_encode, _srgb_decode)
BT2020_TRANSFER: Final[TransferFunction] = TransferFunction('BT.2020', _bt2020_encode, _bt2020_decode)
ROMM_TRANSFER: Final[TransferFunction] = TransferFunction('ROMM', _romm_encode, _romm_decode)


def _readonly(arr: NDArray[np.float64]) -> NDArray[np.float64]:
    arr.setflags(write=False)
    return arr


class RGBColourSpace:
    """
    Descriptor of an RGB-like colour space: white point, transfer function and primaries.

    Instances are shared, never copied, by the RGB values referencing them.
    """

    __slots__ = ('name', 'white', 'transfer', 'primaries', 'matrix', 'inverse')

    name: str
    """Colour space name"""

    white: WhitePoint
    """Reference white"""

    transfer: TransferFunction
    """Transfer function"""

    primaries: Tuple[Tuple[float, float], Tuple[float, float], Tuple[float, float]]
    """xy chromaticities of the red, green and blue primaries"""

    matrix: NDArray[np.float64]
    """Linear RGB to XYZ matrix"""

    inverse: NDArray[np.float64]
    """XYZ to linear RGB matrix"""

    def __init__(
        self, name: str, white: WhitePoint, transfer: TransferFunction,
        primaries: Tuple[Tuple[float, float], Tuple[float, float], Tuple[float, float]]
    ) -> None:
        """
        Make a new RGB colour space, deriving its matrices from the primaries

        :param name:            Colour space name
        :param white:           Reference white
        :param transfer:        Transfer function
        :param primaries:       xy chromaticities of the red, green and blue primaries
        """
        self.name = name
        self.white = white
        self.transfer = transfer
        self.primaries = primaries
        self.matrix = _readonly(self.rgb_to_xyz_matrix(white, primaries))
        self.inverse = _readonly(np.linalg.inv(self.matrix))

        if not np.allclose(self.matrix @ self.inverse, np.identity(3), atol=1e-12):
            logger.warning('RGBColourSpace: matrices of {} are badly conditioned', name)
        logger.debug('RGBColourSpace: built {} (white {}, transfer {})', name, white.name, transfer.name)

    @staticmethod
    def rgb_to_xyz_matrix(
        white: WhitePoint, primaries: Tuple[Tuple[float, float], Tuple[float, float], Tuple[float, float]]
    ) -> NDArray[np.float64]:
        """
        Compute the linear RGB to XYZ matrix of a set of primaries

        :param white:           Reference white
        :param primaries:       xy chromaticities of the red, green and blue primaries
        :return:                3x3 matrix
        """
        # http://www.brucelindbloom.com/index.html?Eqn_RGB_XYZ_Matrix.html
        xyz_primaries = np.array(
            [[x / y for x, y in primaries],
             [1.0, 1.0, 1.0],
             [(1 - x - y) / y for x, y in primaries]],
            np.float64
        )
        scale = np.linalg.solve(xyz_primaries, np.array(white.tristimulus, np.float64))
        return xyz_primaries * scale

    def same_gamut(self, other: RGBColourSpace) -> bool:
        """
        Tell if both spaces only differ by their transfer function

        :param other:           Other colour space
        :return:                True if white point and primaries are identical
        """
        return self.white == other.white and self.primaries == other.primaries

    def __reduce__(self) -> Tuple[Any, ...]:
        # registered spaces are restored as the shared instances
        if RGB_COLOUR_SPACES.get(self.name) is self:
            return get_rgb_space, (self.name, )
        return self.__class__, (self.name, self.white, self.transfer, self.primaries)

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({self.name!r})'


_SRGB_PRIMARIES: Final = ((0.64, 0.33), (0.30, 0.60), (0.15, 0.06))

SRGB: Final[RGBColourSpace] = RGBColourSpace('sRGB', D65, SRGB_TRANSFER, _SRGB_PRIMARIES)
LINEAR_SRGB: Final[RGBColourSpace] = RGBColourSpace('Linear sRGB', D65, LINEAR, _SRGB_PRIMARIES)
ADOBE_RGB: Final[RGBColourSpace] = RGBColourSpace(
    'Adobe RGB', D65, gamma_transfer(563 / 256, 'Adobe RGB'),
    ((0.64, 0.33), (0.21, 0.71), (0.15, 0.06))
)
DISPLAY_P3: Final[RGBColourSpace] = RGBColourSpace(
    'Display P3', D65, SRGB_TRANSFER,
    ((0.680, 0.320), (0.265, 0.690), (0.150, 0.060))
)
BT2020: Final[RGBColourSpace] = RGBColourSpace(
    'BT.2020', D65, BT2020_TRANSFER,
    ((0.708, 0.292), (0.170, 0.797), (0.131, 0.046))
)
ROMM_RGB: Final[RGBColourSpace] = RGBColourSpace(
    'ROMM RGB', D50, ROMM_TRANSFER,
    ((0.7347, 0.2653), (0.1596, 0.8404), (0.0366, 0.0001))
)

RGB_COLOUR_SPACES: Final[Mapping[str, RGBColourSpace]] = MappingProxyType({
    space.name: space for space in (SRGB, LINEAR_SRGB, ADOBE_RGB, DISPLAY_P3, BT2020, ROMM_RGB)
})


def get_rgb_space(name: str) -> RGBColourSpace:
    """
    Look up a named RGB colour space, case-insensitively

    :param name:            Colour space name, e.g. "sRGB" or "Display P3"
    :return:                RGBColourSpace object
    """
    for key, space in RGB_COLOUR_SPACES.items():
        if key.casefold() == name.casefold():
            return space
    raise DomainError(f'get_rgb_space: unknown RGB colour space "{name}"')


# Bradford cone response matrix
_BRADFORD: Final[NDArray[np.float64]] = _readonly(np.array(
    [(0.8951, 0.2664, -0.1614),
     (-0.7502, 1.7135, 0.0367),
     (0.0389, -0.0685, 1.0296)],
    np.float64
))


@lru_cache(maxsize=None)
def chromatic_adaptation_matrix(src: WhitePoint, dst: WhitePoint) -> NDArray[np.float64]:
    """
    Bradford chromatic adaptation matrix, to be applied on column XYZ vectors

    :param src:             White point of the source XYZ values
    :param dst:             White point wanted
    :return:                3x3 matrix
    """
    # http://www.brucelindbloom.com/index.html?Eqn_ChromAdapt.html
    rho_src = _BRADFORD @ np.array(src.tristimulus, np.float64)
    rho_dst = _BRADFORD @ np.array(dst.tristimulus, np.float64)
    return _readonly(np.linalg.inv(_BRADFORD) @ np.diag(rho_dst / rho_src) @ _BRADFORD)
