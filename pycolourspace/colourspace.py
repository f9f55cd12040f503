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
"""Colourspace module"""
from __future__ import annotations

__all__ = [
    'ColourSpace',
    'RGB', 'HSV', 'HSL', 'HWB', 'CMYK',
    'XYZ', 'Lab', 'Luv', 'LCHab', 'LCHuv',
    'Oklab', 'Oklch',
    'Ansi16', 'Ansi256',
    'MODEL_CLASSES', 'convert'
]

from abc import ABC
from types import MappingProxyType
from typing import Any, ClassVar, Dict, Final, Iterable, Mapping, Optional, Tuple, Type, TypeVar, Union, cast

from typing_extensions import Annotated

from .ansi import ANSI16_CODES
from .codec import RenderCondition, format_hex, pack_argb, parse_hex, unpack_argb
from .colour_conv import adapt_xyz
from .convert import WHITE_RELATIVE_MODELS, Ref, convert_values
from .misc import clamp_value, to_8bit
from .polar import interpolate_hue
from .rgbspace import D65, SRGB, RGBColourSpace, WhitePoint
from .types import (
    Byte, ColourModel, Hue, NamedSequence, OneOf, Pct, Real, T_co, Unit, check_annotations, check_value
)

CM = ColourModel

Ansi16Code = Annotated[int, OneOf(ANSI16_CODES)]
Ansi256Code = Annotated[int, OneOf(range(256))]

_ColourSpaceT = TypeVar('_ColourSpaceT', bound='ColourSpace[Any]')
_HCT = TypeVar('_HCT', bound='_HueBased')
_CMYKT = TypeVar('_CMYKT', bound='CMYK')


class ColourSpace(NamedSequence[T_co], ABC):
    """
    Base class of the colour values.

    Colour values are immutable. Their components are reachable by name, by index and by unpacking,
    the alpha value and the reference (RGB colour space or white point) are not part of the sequence.
    """

    __slots__ = ('alpha', )

    alpha: Unit
    """Alpha value, 1.0 is fully opaque"""

    model: ClassVar[ColourModel]
    """Colour model tag"""

    _ref_field: ClassVar[Optional[str]] = None
    _hue_field: ClassVar[Optional[str]] = None

    def __init__(self, values: Iterable[T_co], alpha: float = 1.0, ref: Any = None) -> None:
        self._fill(values, alpha, ref)
        check_annotations(self)

    def _fill(self, values: Iterable[Any], alpha: float, ref: Any) -> None:
        for name, value in zip(self._fields, values):
            self._set(name, value)
        self._set('alpha', alpha)
        if self._ref_field:
            self._set(self._ref_field, ref)

    @classmethod
    def _make(cls: Type[_ColourSpaceT], values: Iterable[Any], alpha: float = 1.0, ref: Any = None) -> _ColourSpaceT:
        """Build a value without range checks, for conversion results"""
        obj = cls.__new__(cls)
        obj._fill(values, alpha, ref)
        return obj

    @property
    def _ref(self) -> Ref:
        return getattr(self, self._ref_field) if self._ref_field else None

    def _ref_kwargs(self) -> Dict[str, Any]:
        return {self._ref_field: self._ref} if self._ref_field else {}

    def _key(self) -> Tuple[Any, ...]:
        return type(self), tuple(self), self.alpha, self._ref

    def __eq__(self, __o: object) -> bool:
        if not isinstance(__o, ColourSpace):
            return NotImplemented
        return self._key() == __o._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __reduce__(self) -> Tuple[Any, ...]:
        return self._make, (tuple(self), self.alpha, self._ref)

    def __str__(self) -> str:
        clsname = self.__class__.__name__
        values = ['%s=%r' % (k, getattr(self, k)) for k in self._fields]
        values.append('alpha=%r' % self.alpha)
        if self._ref_field:
            values.append('%s=%s' % (self._ref_field, self._ref))
        return '%s(%s)' % (clsname, ', '.join(values))

    def with_alpha(self: _ColourSpaceT, alpha: float, /) -> _ColourSpaceT:
        """
        Copy the current object with a new alpha value

        :param alpha:       Alpha value in the range 0.0 - 1.0
        :return:            New colourspace object
        """
        check_value(alpha, Unit, 'alpha')
        return self._make(tuple(self), alpha, self._ref)

    def interpolate(self: _ColourSpaceT, nobj: ColourSpace[Any], pct: float, /) -> _ColourSpaceT:
        """
        Interpolate the colour values of the current object with nobj
        and returns a new interpolated object.
        Hues follow the shortest arc of the colour wheel.

        :param nobj:            Second colourspace, converted to the model of the current object if needed
        :param pct:             Percentage value in the range 0.0 - 1.0
        :return:                New colourspace object
        """
        check_value(pct, Pct, 'pct')
        if type(nobj) is not type(self) or nobj._ref is not self._ref:
            nobj = convert(nobj, self.model, **self._ref_kwargs())
        values = [
            interpolate_hue(v1, v2, pct) if name == self._hue_field else (1 - pct) * v1 + pct * v2
            for name, v1, v2 in zip(self._fields, self, nobj)
        ]
        return self._make(values, (1 - pct) * self.alpha + pct * nobj.alpha, self._ref)

    def convert_to(
        self, target: Union[ColourModel, RGBColourSpace], /, *,
        space: Optional[RGBColourSpace] = None, white: Optional[WhitePoint] = None
    ) -> ColourSpace[Any]:
        """
        Convert current object to another colour model

        :param target:      Colour model, or an RGB colour space as a shorthand for RGB in that space
        :param space:       RGB colour space of an RGB result.
                            Defaults to the current space for RGB objects, sRGB otherwise
        :param white:       White point of a XYZ, Lab, Luv, LCHab or LCHuv result.
                            Defaults to the white point flowing through the conversion
        :return:            Colourspace object, the current object itself if target is its own model
        """
        return convert(self, target, space=space, white=white)

    def to_rgb(self, space: Optional[RGBColourSpace] = None) -> RGB:
        """
        Convert current object to an RGB object

        :param space:       RGB colour space, see convert_to
        :return:            RGB object
        """
        return cast(RGB, convert(self, CM.RGB, space=space))

    def to_srgb(self) -> RGB:
        """
        Convert current object to an RGB object in the sRGB colour space

        :return:            RGB object
        """
        return self.to_rgb(SRGB)

    def to_hsv(self) -> HSV:
        return cast(HSV, convert(self, CM.HSV))

    def to_hsl(self) -> HSL:
        return cast(HSL, convert(self, CM.HSL))

    def to_hwb(self) -> HWB:
        return cast(HWB, convert(self, CM.HWB))

    def to_cmyk(self) -> CMYK:
        return cast(CMYK, convert(self, CM.CMYK))

    def to_xyz(self, white: Optional[WhitePoint] = None) -> XYZ:
        """
        Convert current object to a XYZ object

        :param white:       White point, see convert_to
        :return:            XYZ object
        """
        return cast(XYZ, convert(self, CM.XYZ, white=white))

    def to_lab(self, white: Optional[WhitePoint] = None) -> Lab:
        return cast(Lab, convert(self, CM.LAB, white=white))

    def to_luv(self, white: Optional[WhitePoint] = None) -> Luv:
        return cast(Luv, convert(self, CM.LUV, white=white))

    def to_lch_ab(self, white: Optional[WhitePoint] = None) -> LCHab:
        return cast(LCHab, convert(self, CM.LCHAB, white=white))

    def to_lch_uv(self, white: Optional[WhitePoint] = None) -> LCHuv:
        return cast(LCHuv, convert(self, CM.LCHUV, white=white))

    def to_oklab(self) -> Oklab:
        return cast(Oklab, convert(self, CM.OKLAB))

    def to_oklch(self) -> Oklch:
        return cast(Oklch, convert(self, CM.OKLCH))

    def to_ansi16(self) -> Ansi16:
        return cast(Ansi16, convert(self, CM.ANSI16))

    def to_ansi256(self) -> Ansi256:
        return cast(Ansi256, convert(self, CM.ANSI256))

    def to_hex(self, *, with_hash: bool = True, render_alpha: RenderCondition = RenderCondition.AUTO) -> str:
        """
        Convert current object to a hexadecimal string of its sRGB values

        :param with_hash:       Prefix the output with "#", defaults to True
        :param render_alpha:    When to append the alpha byte, defaults to RenderCondition.AUTO
        :return:                Hexadecimal string such as "#8cc864"
        """
        r, g, b = self.to_srgb()
        return format_hex(r, g, b, self.alpha, with_hash=with_hash, render_alpha=render_alpha)


class RGB(ColourSpace[float]):
    """
    RGB colourspace in range 0.0 - 1.0, attached to an RGB colour space.
    Values outside the range are out of gamut colours and are kept as is.
    """

    __slots__ = ('r', 'g', 'b', 'space')

    _fields = ('r', 'g', 'b')
    _ref_field = 'space'
    model = CM.RGB

    r: Real
    """Red value"""

    g: Real
    """Green value"""

    b: Real
    """Blue value"""

    space: RGBColourSpace
    """RGB colour space of the values"""

    def __init__(self, r: float, g: float, b: float, alpha: float = 1.0, space: RGBColourSpace = SRGB) -> None:
        """
        Make a new RGB colourspace object

        :param r:           Red value
        :param g:           Green value
        :param b:           Blue value
        :param alpha:       Alpha value in the range 0.0 - 1.0, defaults to 1.0
        :param space:       RGB colour space, defaults to sRGB
        """
        super().__init__((r, g, b), alpha, space)

    @classmethod
    def from_ints(cls, r: int, g: int, b: int, alpha: int = 255, space: RGBColourSpace = SRGB) -> RGB:
        """
        Make a new RGB object from integers in the range 0 - 255

        :param alpha:       Alpha value in the range 0 - 255, defaults to 255
        :param space:       RGB colour space, defaults to sRGB
        :return:            RGB object
        """
        for name, val in zip(('r', 'g', 'b', 'alpha'), (r, g, b, alpha)):
            check_value(val, Byte, name)
        return cls(r / 255, g / 255, b / 255, alpha / 255, space)

    @classmethod
    def from_hex(cls, text: str, /, space: RGBColourSpace = SRGB) -> RGB:
        """
        Make a new RGB object from a hexadecimal string, see codec.parse_hex

        :param text:        String such as "#8cc864", "8cc864" or "#3a30"
        :param space:       RGB colour space, defaults to sRGB
        :return:            RGB object
        """
        r, g, b, a = parse_hex(text)
        return cls(r, g, b, a, space)

    @classmethod
    def from_argb_int(cls, argb: int, /, space: RGBColourSpace = SRGB) -> RGB:
        """
        Make a new RGB object from a packed integer 0xAARRGGBB

        :param argb:        Unsigned 32 bits integer
        :param space:       RGB colour space, defaults to sRGB
        :return:            RGB object
        """
        r, g, b, a = unpack_argb(argb)
        return cls(r, g, b, a, space)

    def to_argb_int(self) -> int:
        """
        Pack the current channels in an integer 0xAARRGGBB, without changing the colour space

        :return:            Unsigned 32 bits integer
        """
        return pack_argb(self.r, self.g, self.b, self.alpha)

    def to_ints(self) -> Tuple[int, int, int]:
        """
        Quantise the current channels to the range 0 - 255

        :return:            Tuple of three integers
        """
        return to_8bit(self.r), to_8bit(self.g), to_8bit(self.b)

    def clamp(self) -> RGB:
        """
        Clamp the channels in the range 0.0 - 1.0

        :return:            RGB object, the current object itself if already in gamut
        """
        clamped = tuple(clamp_value(v, 0.0, 1.0) for v in self)
        return self if clamped == tuple(self) else self._make(clamped, self.alpha, self.space)


class _HueBased(ColourSpace[float], ABC):
    """Base class for hue based cylindrical models of RGB"""

    __slots__ = ()

    _hue_field = 'h'

    h: Hue
    """Hue angle in degrees"""

    @classmethod
    def from_percentages(cls: Type[_HCT], h: float, x: float, y: float, alpha: float = 1.0) -> _HCT:
        """
        Make a new object from a hue in degrees and two values in the range 0 - 100

        :param h:           Hue in degrees
        :param x:           Second component in percent
        :param y:           Third component in percent
        :param alpha:       Alpha value in the range 0.0 - 1.0, defaults to 1.0
        :return:            Hue based object
        """
        return cls(h, x / 100, y / 100, alpha)


class HSV(_HueBased):
    """HSV colourspace, saturation and value in range 0.0 - 1.0"""

    __slots__ = ('h', 's', 'v')

    _fields = ('h', 's', 'v')
    model = CM.HSV

    s: Unit
    """Saturation value"""

    v: Unit
    """Value"""

    def __init__(self, h: float, s: float, v: float, alpha: float = 1.0) -> None:
        super().__init__((h, s, v), alpha)


class HSL(_HueBased):
    """HSL colourspace, saturation and lightness in range 0.0 - 1.0"""

    __slots__ = ('h', 's', 'l')

    _fields = ('h', 's', 'l')
    model = CM.HSL

    s: Unit
    """Saturation value"""

    l: Unit
    """Lightness value"""

    def __init__(self, h: float, s: float, l: float, alpha: float = 1.0) -> None:
        super().__init__((h, s, l), alpha)


class HWB(_HueBased):
    """HWB colourspace, whiteness and blackness in range 0.0 - 1.0"""

    __slots__ = ('h', 'w', 'b')

    _fields = ('h', 'w', 'b')
    model = CM.HWB

    w: Unit
    """Whiteness value"""

    b: Unit
    """Blackness value"""

    def __init__(self, h: float, w: float, b: float, alpha: float = 1.0) -> None:
        super().__init__((h, w, b), alpha)


class CMYK(ColourSpace[float]):
    """CMYK colourspace in range 0.0 - 1.0"""

    __slots__ = ('c', 'm', 'y', 'k')

    _fields = ('c', 'm', 'y', 'k')
    model = CM.CMYK

    c: Unit
    """Cyan value"""

    m: Unit
    """Magenta value"""

    y: Unit
    """Yellow value"""

    k: Unit
    """Key (black) value"""

    def __init__(self, c: float, m: float, y: float, k: float, alpha: float = 1.0) -> None:
        super().__init__((c, m, y, k), alpha)

    @classmethod
    def from_percentages(cls: Type[_CMYKT], c: float, m: float, y: float, k: float, alpha: float = 1.0) -> _CMYKT:
        """
        Make a new CMYK object from values in the range 0 - 100

        :return:            CMYK object
        """
        return cls(c / 100, m / 100, y / 100, k / 100, alpha)


class _WhiteRelative(ColourSpace[float], ABC):
    """Base class for the models defined relative to a reference white"""

    __slots__ = ()

    _ref_field = 'white'

    white: WhitePoint
    """Reference white"""


class XYZ(_WhiteRelative):
    """CIE 1931 XYZ colourspace, Y of the reference white is 1.0"""

    __slots__ = ('x', 'y', 'z', 'white')

    _fields = ('x', 'y', 'z')
    model = CM.XYZ

    x: Real
    y: Real
    z: Real

    def __init__(self, x: float, y: float, z: float, alpha: float = 1.0, white: WhitePoint = D65) -> None:
        """
        Make a new XYZ colourspace object

        :param x:           X value
        :param y:           Y value, luminance
        :param z:           Z value
        :param alpha:       Alpha value in the range 0.0 - 1.0, defaults to 1.0
        :param white:       Reference white, defaults to D65
        """
        super().__init__((x, y, z), alpha, white)

    def adapt_to(self, white: WhitePoint, /) -> XYZ:
        """
        Apply a Bradford chromatic adaptation to another reference white

        :param white:       Target white point
        :return:            XYZ object, the current object itself if white is already its white point
        """
        if white == self.white:
            return self
        return self._make(adapt_xyz(self.x, self.y, self.z, self.white, white), self.alpha, white)


class Lab(_WhiteRelative):
    """CIE L*a*b* colourspace, lightness in range 0.0 - 100.0"""

    __slots__ = ('l', 'a', 'b', 'white')

    _fields = ('l', 'a', 'b')
    model = CM.LAB

    l: Real
    """Lightness value"""

    a: Real
    """Green-red axis"""

    b: Real
    """Blue-yellow axis"""

    def __init__(self, l: float, a: float, b: float, alpha: float = 1.0, white: WhitePoint = D65) -> None:
        super().__init__((l, a, b), alpha, white)


class Luv(_WhiteRelative):
    """CIE L*u*v* colourspace, lightness in range 0.0 - 100.0"""

    __slots__ = ('l', 'u', 'v', 'white')

    _fields = ('l', 'u', 'v')
    model = CM.LUV

    l: Real
    u: Real
    v: Real

    def __init__(self, l: float, u: float, v: float, alpha: float = 1.0, white: WhitePoint = D65) -> None:
        super().__init__((l, u, v), alpha, white)


class LCHab(_WhiteRelative):
    """
    LCHab colourspace object based on polar coordinates
    Cylindrical model of the Lab colourspace
    """

    __slots__ = ('l', 'c', 'h', 'white')

    _fields = ('l', 'c', 'h')
    _hue_field = 'h'
    model = CM.LCHAB

    l: Real
    """Lightness value"""

    c: Real
    """Chroma, relative saturation"""

    h: Hue
    """Hue angle in degrees"""

    def __init__(self, l: float, c: float, h: float, alpha: float = 1.0, white: WhitePoint = D65) -> None:
        super().__init__((l, c, h), alpha, white)


class LCHuv(_WhiteRelative):
    """
    LCHuv colourspace object based on polar coordinates
    Cylindrical model of the Luv colourspace
    """

    __slots__ = ('l', 'c', 'h', 'white')

    _fields = ('l', 'c', 'h')
    _hue_field = 'h'
    model = CM.LCHUV

    l: Real
    c: Real
    h: Hue

    def __init__(self, l: float, c: float, h: float, alpha: float = 1.0, white: WhitePoint = D65) -> None:
        super().__init__((l, c, h), alpha, white)


class Oklab(ColourSpace[float]):
    """Oklab perceptual colourspace, lightness in range 0.0 - 1.0"""

    __slots__ = ('l', 'a', 'b')

    _fields = ('l', 'a', 'b')
    model = CM.OKLAB

    l: Real
    a: Real
    b: Real

    def __init__(self, l: float, a: float, b: float, alpha: float = 1.0) -> None:
        super().__init__((l, a, b), alpha)


class Oklch(ColourSpace[float]):
    """Cylindrical model of the Oklab colourspace"""

    __slots__ = ('l', 'c', 'h')

    _fields = ('l', 'c', 'h')
    _hue_field = 'h'
    model = CM.OKLCH

    l: Real
    c: Real
    h: Hue

    def __init__(self, l: float, c: float, h: float, alpha: float = 1.0) -> None:
        super().__init__((l, c, h), alpha)


class _AnsiBased(ColourSpace[int], ABC):
    """Base class for terminal palette codes"""

    __slots__ = ('code', )

    _fields = ('code', )

    def interpolate(self: _ColourSpaceT, nobj: ColourSpace[Any], pct: float, /) -> _ColourSpaceT:
        """
        Interpolate in sRGB and match the result back to the palette

        :param nobj:            Second colourspace
        :param pct:             Percentage value in the range 0.0 - 1.0
        :return:                New colourspace object
        """
        return cast(_ColourSpaceT, convert(self.to_srgb().interpolate(nobj, pct), self.model))


class Ansi16(_AnsiBased):
    """ANSI 16 colours code, foreground (30 - 37, 90 - 97) or background (40 - 47, 100 - 107)"""

    __slots__ = ()

    model = CM.ANSI16

    code: Ansi16Code

    def __init__(self, code: int, alpha: float = 1.0) -> None:
        super().__init__((code, ), alpha)


class Ansi256(_AnsiBased):
    """ANSI 256 colours index in range 0 - 255"""

    __slots__ = ()

    model = CM.ANSI256

    code: Ansi256Code

    def __init__(self, code: int, alpha: float = 1.0) -> None:
        super().__init__((code, ), alpha)


MODEL_CLASSES: Final[Mapping[ColourModel, Type[ColourSpace[Any]]]] = MappingProxyType({
    cls.model: cls for cls in (RGB, HSV, HSL, HWB, CMYK, XYZ, Lab, Luv, LCHab, LCHuv, Oklab, Oklch, Ansi16, Ansi256)
})


def convert(
    colour: ColourSpace[Any], target: Union[ColourModel, RGBColourSpace], /, *,
    space: Optional[RGBColourSpace] = None, white: Optional[WhitePoint] = None
) -> ColourSpace[Any]:
    """
    Convert a colour value to another colour model, keeping its alpha value

    :param colour:      Colourspace object
    :param target:      Colour model, or an RGB colour space as a shorthand for RGB in that space
    :param space:       RGB colour space of an RGB result.
                        Defaults to the source space for RGB sources, sRGB otherwise
    :param white:       White point of a XYZ, Lab, Luv, LCHab or LCHuv result
    :return:            Colourspace object, colour itself if it is already what was asked
    """
    if isinstance(target, RGBColourSpace):
        target, space = CM.RGB, target

    if target is colour.model:
        if target is CM.RGB:
            unchanged = space is None or space is colour._ref
        elif target in WHITE_RELATIVE_MODELS:
            unchanged = white is None or white == colour._ref
        else:
            unchanged = True
        if unchanged:
            return colour

    values, ref = convert_values(colour.model, tuple(colour), colour._ref, target, space=space, white=white)
    return MODEL_CLASSES[target]._make(values, colour.alpha, ref)
