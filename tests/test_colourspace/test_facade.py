import copy
import pickle
from typing import Any, List

import pytest
import pytest_check as check
from pycolourspace import (
    CMYK, D50, D65, DISPLAY_P3, HSL, HSV, HWB, LINEAR_SRGB, RGB, SRGB, XYZ, Ansi16, Ansi256, ColourModel,
    ColourSpace, DomainError, LCHab, LCHuv, Lab, Luv, Oklab, Oklch, convert
)

SAMPLES: List[ColourSpace[Any]] = [
    RGB(0.2, 0.4, 0.6, 0.5),
    RGB(0.2, 0.4, 0.6, space=DISPLAY_P3),
    HSV(200, 0.3, 0.7),
    HSL(20, 0.6, 0.3),
    HWB(300, 0.1, 0.2),
    CMYK(0.1, 0.2, 0.3, 0.4),
    XYZ(0.3, 0.4, 0.5),
    XYZ(0.3, 0.4, 0.5, white=D50),
    Lab(40, -20, 30),
    Luv(60, 20, -30, white=D50),
    LCHab(70, 30, 120),
    LCHuv(30, 40, 350),
    Oklab(0.6, 0.1, -0.1),
    Oklch(0.4, 0.1, 200),
    Ansi16(93),
    Ansi16(104),
    Ansi256(0),
    Ansi256(100),
    Ansi256(250),
]


@pytest.mark.parametrize('colour', SAMPLES, ids=str)
def test_identity(colour: ColourSpace[Any]) -> None:
    check.is_true(colour.convert_to(colour.model) is colour)
    check.is_true(convert(colour, colour.model) is colour)
    check.is_true(colour.convert_to(colour.model, white=getattr(colour, 'white', None)) is colour)


def test_identity_rgb_space() -> None:
    rgb = RGB(0.2, 0.4, 0.6, space=DISPLAY_P3)
    check.is_true(rgb.to_rgb() is rgb)
    check.is_true(rgb.to_rgb(DISPLAY_P3) is rgb)
    check.is_true(rgb.convert_to(DISPLAY_P3) is rgb)
    srgb = rgb.to_srgb()
    check.is_true(srgb.space is SRGB)
    check.is_true(srgb.to_srgb() is srgb)
    check.is_true(HSV(0, 0, 0).to_rgb().space is SRGB)
    check.is_true(HSV(0, 0, 0).to_rgb(LINEAR_SRGB).space is LINEAR_SRGB)


@pytest.mark.parametrize('colour', SAMPLES, ids=str)
def test_total(colour: ColourSpace[Any]) -> None:
    for model in ColourModel:
        res = colour.convert_to(model)
        check.equal(res.model, model)
        check.equal(res.alpha, colour.alpha)


@pytest.mark.parametrize('model', [m for m in ColourModel if m not in {ColourModel.ANSI16, ColourModel.ANSI256}])
def test_round_trip(model: ColourModel) -> None:
    for rgb in (RGB(0.2, 0.4, 0.6), RGB(0.9, 0.1, 0.05), RGB(0.5, 0.5, 0.5), RGB(1, 1, 1), RGB(0, 0, 0)):
        back = rgb.convert_to(model).to_srgb()
        check.equal(tuple(back), pytest.approx(tuple(rgb), abs=1e-4))


def test_degenerate_inputs() -> None:
    for colour in (RGB(0, 0, 0), RGB(1, 1, 1), RGB(0.5, 0.5, 0.5), XYZ(0, 0, 0), Lab(0, 0, 0), Luv(0, 0, 0), Oklab(0, 0, 0)):
        for model in ColourModel:
            res = colour.convert_to(model)
            if res._hue_field:
                check.equal(getattr(res, res._hue_field), 0.0)


def test_alpha() -> None:
    rgb = RGB(1, 0, 0, 0.25)
    check.equal(rgb.to_lab().alpha, 0.25)
    check.equal(rgb.to_ansi256().alpha, 0.25)
    check.equal(rgb.to_ansi256().to_srgb().alpha, 0.25)
    opaque = rgb.with_alpha(1.0)
    check.equal(opaque.alpha, 1.0)
    check.equal(tuple(opaque), tuple(rgb))
    check.not_equal(opaque, rgb)
    with pytest.raises(DomainError):
        rgb.with_alpha(1.5)
    with pytest.raises(DomainError):
        RGB(0, 0, 0, -0.1)


def test_sequence() -> None:
    lab = Lab(50, 10, -20, 0.5)
    l, a, b = lab
    check.equal((l, a, b), (50, 10, -20))
    check.equal(len(lab), 3)
    check.equal(lab[1], 10)
    check.equal(lab[-1], -20)
    check.equal(lab[:2], (50, 10))
    check.equal(lab._asdict(), {'l': 50, 'a': 10, 'b': -20})
    check.equal(len(CMYK(0, 0, 0, 0)), 4)
    check.equal(tuple(Ansi256(42)), (42, ))


def test_immutable() -> None:
    rgb = RGB(0.1, 0.2, 0.3)
    with pytest.raises(AttributeError):
        rgb.r = 0.5  # type: ignore[misc]
    with pytest.raises(AttributeError):
        rgb.alpha = 0.5  # type: ignore[misc]
    with pytest.raises(AttributeError):
        del rgb.g
    check.is_true(copy.copy(rgb) is rgb)
    check.is_true(copy.deepcopy(rgb) is rgb)


def test_equality_hash() -> None:
    check.equal(RGB(0.1, 0.2, 0.3), RGB(0.1, 0.2, 0.3))
    check.equal(hash(RGB(0.1, 0.2, 0.3)), hash(RGB(0.1, 0.2, 0.3)))
    check.not_equal(RGB(0.1, 0.2, 0.3), RGB(0.1, 0.2, 0.3, space=LINEAR_SRGB))
    check.not_equal(Lab(50, 0, 0), Lab(50, 0, 0, white=D50))
    check.not_equal(Lab(50, 0, 0), Oklab(50, 0, 0))
    check.equal(Lab(50, 0, 0), Lab(50, 0, 0, white=D65))
    check.equal(len({HSV(10, 0.5, 0.5), HSV(10, 0.5, 0.5), HSV(10, 0.5, 0.6)}), 2)
    check.not_equal(RGB(0.1, 0.2, 0.3), (0.1, 0.2, 0.3))


def test_str() -> None:
    check.equal(str(HSV(10, 0.5, 0.25)), 'HSV(h=10, s=0.5, v=0.25, alpha=1.0)')
    check.equal(repr(RGB(1.0, 0.0, 0.0)), 'RGB(r=1.0, g=0.0, b=0.0, alpha=1.0, space=sRGB)')
    check.equal(str(Lab(50, 0, 0, white=D50)), 'Lab(l=50, a=0, b=0, alpha=1.0, white=D50)')


def test_interpolate() -> None:
    res = RGB(0, 0, 0, 0.0).interpolate(RGB(1, 1, 1, 1.0), 0.25)
    check.equal(tuple(res), pytest.approx((0.25, 0.25, 0.25)))
    check.equal(res.alpha, pytest.approx(0.25))

    hsv = HSV(350, 1, 1).interpolate(HSV(10, 1, 1), 0.5)
    check.equal(hsv.h, pytest.approx(0.0))
    lch = LCHab(50, 20, 300).interpolate(LCHab(50, 20, 100), 0.5)
    check.equal(lch.h, pytest.approx(20.0))

    mixed = Lab(50, 0, 0).interpolate(RGB(1, 1, 1), 1.0)
    check.is_true(isinstance(mixed, Lab))
    check.equal(tuple(mixed), pytest.approx((100.0, 0.0, 0.0), abs=1e-4))

    ansi = Ansi16(30).interpolate(Ansi16(97), 1.0)
    check.equal(ansi, Ansi16(97))

    with pytest.raises(DomainError):
        RGB(0, 0, 0).interpolate(RGB(1, 1, 1), 1.5)


def test_to_hex() -> None:
    check.equal(RGB.from_ints(140, 200, 100).to_hex(), '#8cc864')
    check.equal(RGB(0, 0, 0).to_hex(with_hash=False), '000000')
    check.equal(RGB(0, 0, 0, 0.5).to_hex(), '#00000080')
    check.equal(HSL(0, 1.0, 0.5).to_hex(), '#ff0000')
    check.equal(RGB(1.2, -0.1, 0.5).to_hex(), '#ff0080')


@pytest.mark.parametrize('colour', SAMPLES, ids=str)
def test_pickle(colour: ColourSpace[Any]) -> None:
    restored = pickle.loads(pickle.dumps(colour))
    check.equal(restored, colour)
    check.equal(hash(restored), hash(colour))
    check.is_true(type(restored) is type(colour))
    with pytest.raises(AttributeError):
        restored.alpha = 0.5  # type: ignore[misc]


def test_pickle_rgb_space() -> None:
    rgb = pickle.loads(pickle.dumps(RGB(0.2, 0.4, 0.6, 0.5, space=DISPLAY_P3)))
    check.is_true(rgb.space is DISPLAY_P3)
    check.is_true(rgb.to_rgb(DISPLAY_P3) is rgb)
    check.is_true(pickle.loads(pickle.dumps(SRGB)) is SRGB)
    lab = pickle.loads(pickle.dumps(Lab(50, 10, -10, white=D50)))
    check.equal(lab.white, D50)
    check.is_true(lab.to_lab(white=D50) is lab)
