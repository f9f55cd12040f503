from typing import Tuple

import pytest
import pytest_check as check
from pycolourspace import (
    CMYK, D50, D65, DISPLAY_P3, HSL, HSV, HWB, LINEAR_SRGB, ROMM_RGB, RGB, SRGB, XYZ, DomainError
)


@pytest.mark.parametrize(
    'rgb, xyz',
    [
        ((0, 0, 0), (0.0, 0.0, 0.0)),
        ((255, 0, 0), (0.412456, 0.212673, 0.019334)),
        ((92, 191, 84), (0.246435, 0.401751, 0.148417)),
        ((255, 255, 255), (0.950470, 1.0, 1.088830)),
    ]
)
def test_rgb_to_xyz(rgb: Tuple[int, int, int], xyz: Tuple[float, float, float]) -> None:
    res = RGB.from_ints(*rgb).to_xyz()
    check.equal(res.white, D65)
    check.equal(tuple(res), pytest.approx(xyz, abs=5e-5))


@pytest.mark.parametrize(
    'rgb, lab',
    [
        ((0, 0, 0), (0.0, 0.0, 0.0)),
        ((255, 0, 0), (53.2408, 80.0925, 67.2032)),
        ((92, 191, 84), (69.5940, -50.1108, 44.6468)),
        ((255, 255, 255), (100.0, 0.0, 0.0)),
    ]
)
def test_rgb_to_lab(rgb: Tuple[int, int, int], lab: Tuple[float, float, float]) -> None:
    check.equal(tuple(RGB.from_ints(*rgb).to_lab()), pytest.approx(lab, abs=5e-3))


@pytest.mark.parametrize(
    'rgb, luv',
    [
        ((0, 0, 0), (0.0, 0.0, 0.0)),
        ((255, 0, 0), (53.2408, 175.0151, 37.7564)),
        ((92, 191, 84), (69.5940, -46.2383, 63.2284)),
    ]
)
def test_rgb_to_luv(rgb: Tuple[int, int, int], luv: Tuple[float, float, float]) -> None:
    check.equal(tuple(RGB.from_ints(*rgb).to_luv()), pytest.approx(luv, abs=5e-3))


def test_rgb_to_lch() -> None:
    red = RGB(1.0, 0.0, 0.0)
    check.equal(tuple(red.to_lch_ab()), pytest.approx((53.2408, 104.5518, 39.9990), abs=5e-3))
    check.equal(tuple(red.to_lch_uv()), pytest.approx((53.2408, 179.0414, 12.1740), abs=5e-3))


def test_rgb_to_hsv_hsl() -> None:
    rgb = RGB.from_ints(140, 200, 100)
    check.equal(tuple(rgb.to_hsv()), pytest.approx((96.0, 0.5, 0.784), abs=5e-3))
    check.equal(tuple(rgb.to_hsl()), pytest.approx((96.0, 0.476, 0.588), abs=5e-3))


def test_rgb_to_cmyk() -> None:
    check.equal(tuple(RGB.from_ints(140, 200, 100).to_cmyk()), pytest.approx((0.30, 0.0, 0.50, 0.22), abs=5e-3))
    check.equal(tuple(RGB(0, 0, 0).to_cmyk()), (0.0, 0.0, 0.0, 1.0))


@pytest.mark.parametrize(
    'hex_str, hwb',
    [
        ('#996666', (0.0, 0.4, 0.4)),
        ('#998066', (30.0, 0.4, 0.4)),
        ('#999966', (60.0, 0.4, 0.4)),
        ('#809966', (90.0, 0.4, 0.4)),
        ('#669966', (120.0, 0.4, 0.4)),
        ('#80ff00', (90.0, 0.0, 0.0)),
        ('#0080ff', (210.0, 0.0, 0.0)),
    ]
)
def test_rgb_to_hwb(hex_str: str, hwb: Tuple[float, float, float]) -> None:
    h, w, b = RGB.from_hex(hex_str).to_hwb()
    check.equal(h, pytest.approx(hwb[0], abs=0.6))
    check.equal(w, pytest.approx(hwb[1], abs=5e-3))
    check.equal(b, pytest.approx(hwb[2], abs=5e-3))


def test_achromatic() -> None:
    check.equal(tuple(RGB(0, 0, 0).to_hsv()), (0.0, 0.0, 0.0))
    h, s, l = RGB(1, 1, 1).to_hsl()
    check.equal((s, l), (0.0, 1.0))
    for v in (0, 51, 102, 153, 204, 255):
        h, w, b = RGB.from_ints(v, v, v).to_hwb()
        check.equal(h, 0.0)
        check.equal(w, pytest.approx(v / 255))
        check.equal(b, pytest.approx(1 - v / 255))


def test_linear_srgb() -> None:
    check.equal(RGB.from_ints(128, 128, 128).to_rgb(LINEAR_SRGB).r, pytest.approx(0.21586, abs=1e-5))
    check.equal(RGB.from_ints(8, 8, 8).to_rgb(LINEAR_SRGB).r, pytest.approx(0.00242, abs=1e-5))
    check.equal(RGB(0.21586, 0.0, 1.0, space=LINEAR_SRGB).to_srgb().to_ints(), (128, 0, 255))


def test_rgb_spaces() -> None:
    p3 = RGB(1.0, 0.0, 0.0).to_rgb(DISPLAY_P3)
    check.is_true(p3.space is DISPLAY_P3)
    check.equal(tuple(p3), pytest.approx((0.9175, 0.2003, 0.1386), abs=2e-3))
    check.equal(tuple(p3.to_srgb()), pytest.approx((1.0, 0.0, 0.0), abs=1e-6))

    romm = RGB(1.0, 1.0, 1.0, space=ROMM_RGB)
    xyz = romm.to_xyz()
    check.equal(xyz.white, D50)
    check.equal(tuple(xyz), pytest.approx(D50.tristimulus, abs=1e-6))
    check.equal(tuple(romm.to_srgb()), pytest.approx((1.0, 1.0, 1.0), abs=1e-4))


def test_rgb_to_xyz_white() -> None:
    xyz = RGB(1.0, 1.0, 1.0).to_xyz(white=D50)
    check.equal(xyz.white, D50)
    check.equal(tuple(xyz), pytest.approx(D50.tristimulus, abs=1e-4))
    back = xyz.to_srgb()
    check.equal(tuple(back), pytest.approx((1.0, 1.0, 1.0), abs=1e-4))


def test_out_of_gamut_kept() -> None:
    rgb = XYZ(0.9, 0.1, 0.0).to_srgb()
    check.is_true(rgb.r > 1.0 or rgb.g < 0.0 or rgb.b < 0.0)
    check.equal(tuple(rgb.to_xyz()), pytest.approx((0.9, 0.1, 0.0), abs=1e-6))
    check.equal(rgb.to_ints()[0], 255)
    clamped = rgb.clamp()
    check.is_true(all(0.0 <= v <= 1.0 for v in clamped))
    check.is_true(clamped.clamp() is clamped)


def test_from_ints() -> None:
    rgb = RGB.from_ints(51, 102, 153, 0)
    check.equal(tuple(rgb), pytest.approx((0.2, 0.4, 0.6)))
    check.equal(rgb.alpha, 0.0)
    check.equal(rgb.to_ints(), (51, 102, 153))
    check.is_true(rgb.space is SRGB)
    with pytest.raises(DomainError):
        RGB.from_ints(256, 0, 0)
    with pytest.raises(DomainError):
        RGB.from_ints(0, 0, 0, -1)
    with pytest.raises(DomainError):
        RGB.from_ints(0.5, 0, 0)  # type: ignore[arg-type]


def test_argb_int() -> None:
    rgb = RGB.from_argb_int(0x80FF8000)
    check.equal(rgb.to_ints(), (255, 128, 0))
    check.equal(rgb.alpha, pytest.approx(128 / 255))
    check.equal(rgb.to_argb_int(), 0x80FF8000)
    check.equal(RGB(1, 1, 1).to_argb_int(), 0xFFFFFFFF)


def test_from_percentages() -> None:
    check.equal(HSV.from_percentages(120, 50, 100), HSV(120, 0.5, 1.0))
    check.equal(HSL.from_percentages(240, 100, 25, 0.5), HSL(240, 1.0, 0.25, 0.5))
    check.equal(HWB.from_percentages(0, 20, 30), HWB(0, 0.2, 0.3))
    check.equal(CMYK.from_percentages(0, 50, 100, 10), CMYK(0.0, 0.5, 1.0, 0.1))
