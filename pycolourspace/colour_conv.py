"""Conversion formulas between colour models, working on plain floats"""
import colorsys
from typing import Final, Optional, Tuple

import numpy as np
from numpy.typing import NDArray

from .polar import ACHROMATIC_EPSILON, from_polar, normalize_hue, to_polar
from .rgbspace import RGBColourSpace, WhitePoint, chromatic_adaptation_matrix

# CIE constants, the exact rational values rather than 0.008856 / 903.3
κ: Final[float] = 24389 / 27
ϵ: Final[float] = 216 / 24389

# https://bottosson.github.io/posts/oklab/
_OKLAB_M1: Final[NDArray[np.float64]] = np.array(
    [(0.4122214708, 0.5363325363, 0.0514459929),
     (0.2119034982, 0.6806995451, 0.1073969566),
     (0.0883024619, 0.2817188376, 0.6299787005)],
    np.float64
)
_OKLAB_M2: Final[NDArray[np.float64]] = np.array(
    [(0.2104542553, 0.7936177850, -0.0040720468),
     (1.9779984951, -2.4285922050, 0.4505937099),
     (0.0259040371, 0.7827717662, -0.8086757660)],
    np.float64
)
_OKLAB_M1_INV: Final[NDArray[np.float64]] = np.linalg.inv(_OKLAB_M1)
_OKLAB_M2_INV: Final[NDArray[np.float64]] = np.linalg.inv(_OKLAB_M2)


def _as_tup3(vec: NDArray[np.float64]) -> Tuple[float, float, float]:
    return float(vec[0]), float(vec[1]), float(vec[2])


def _hue(r: float, g: float, b: float, mx: float, delta: float) -> float:
    if delta < ACHROMATIC_EPSILON:
        return 0.0
    if mx == r:
        h = (g - b) / delta
    elif mx == g:
        h = 2 + (b - r) / delta
    else:
        h = 4 + (r - g) / delta
    return normalize_hue(h * 60)


# -------------------------------------------------------------------------
# ---------------------------- RGB Conversions ----------------------------
# -------------------------------------------------------------------------
def rgb_to_xyz(r: float, g: float, b: float, space: RGBColourSpace) -> Tuple[float, float, float]:
    # http://www.brucelindbloom.com/index.html?Eqn_RGB_to_XYZ.html
    decode = space.transfer.decode
    linear = np.array((decode(r), decode(g), decode(b)), np.float64)
    return _as_tup3(space.matrix @ linear)


def rgb_to_rgb(r: float, g: float, b: float, src: RGBColourSpace, dst: RGBColourSpace) -> Tuple[float, float, float]:
    if src is dst:
        return r, g, b
    if src.same_gamut(dst):
        decode, encode = src.transfer.decode, dst.transfer.encode
        return encode(decode(r)), encode(decode(g)), encode(decode(b))
    return xyz_to_rgb(*rgb_to_xyz(r, g, b, src), dst, src.white)


def rgb_to_hsv(r: float, g: float, b: float) -> Tuple[float, float, float]:
    mx, mn = max(r, g, b), min(r, g, b)
    delta = mx - mn
    s = 0.0 if mx == 0 else delta / mx
    return _hue(r, g, b, mx, delta), s, mx


def rgb_to_hsl(r: float, g: float, b: float) -> Tuple[float, float, float]:
    mx, mn = max(r, g, b), min(r, g, b)
    delta = mx - mn
    l = (mx + mn) / 2
    if delta == 0:
        s = 0.0
    else:
        denominator = mx + mn if l <= 0.5 else 2 - mx - mn
        s = 0.0 if denominator == 0 else delta / denominator
    return _hue(r, g, b, mx, delta), s, l


def rgb_to_hwb(r: float, g: float, b: float) -> Tuple[float, float, float]:
    # https://www.w3.org/TR/css-color-4/#rgb-to-hwb
    mx, mn = max(r, g, b), min(r, g, b)
    return _hue(r, g, b, mx, mx - mn), mn, 1 - mx


def rgb_to_cmyk(r: float, g: float, b: float) -> Tuple[float, float, float, float]:
    k = 1 - max(r, g, b)
    if k == 1:
        return 0.0, 0.0, 0.0, 1.0
    return (1 - r - k) / (1 - k), (1 - g - k) / (1 - k), (1 - b - k) / (1 - k), k


def lrgb_to_oklab(r: float, g: float, b: float) -> Tuple[float, float, float]:
    lms = np.cbrt(_OKLAB_M1 @ np.array((r, g, b), np.float64))
    return _as_tup3(_OKLAB_M2 @ lms)


# -------------------------------------------------------------------------
# ------------------------ Cylindrical Conversions ------------------------
# -------------------------------------------------------------------------
def hsv_to_rgb(h: float, s: float, v: float) -> Tuple[float, float, float]:
    return colorsys.hsv_to_rgb(normalize_hue(h) / 360, s, v)


def hsv_to_hsl(h: float, s: float, v: float) -> Tuple[float, float, float]:
    l = v * (1 - s / 2)
    denominator = min(l, 1 - l)
    return normalize_hue(h), 0.0 if denominator == 0 else (v - l) / denominator, l


def hsl_to_rgb(h: float, s: float, l: float) -> Tuple[float, float, float]:
    return colorsys.hls_to_rgb(normalize_hue(h) / 360, l, s)


def hsl_to_hsv(h: float, s: float, l: float) -> Tuple[float, float, float]:
    v = l + s * min(l, 1 - l)
    return normalize_hue(h), 0.0 if v == 0 else 2 * (1 - l / v), v


def hwb_to_rgb(h: float, w: float, b: float) -> Tuple[float, float, float]:
    # https://www.w3.org/TR/css-color-4/#hwb-to-rgb
    if w + b >= 1:
        gray = w / (w + b)
        return gray, gray, gray
    scale = 1 - w - b
    r, g, bl = hsl_to_rgb(h, 1.0, 0.5)
    return r * scale + w, g * scale + w, bl * scale + w


def hsv_to_hwb(h: float, s: float, v: float) -> Tuple[float, float, float]:
    return normalize_hue(h), (1 - s) * v, 1 - v


def hwb_to_hsv(h: float, w: float, b: float) -> Tuple[float, float, float]:
    if w + b >= 1:
        return normalize_hue(h), 0.0, w / (w + b)
    v = 1 - b
    return normalize_hue(h), 0.0 if v == 0 else 1 - w / v, v


def cmyk_to_rgb(c: float, m: float, y: float, k: float) -> Tuple[float, float, float]:
    return (1 - c) * (1 - k), (1 - m) * (1 - k), (1 - y) * (1 - k)


# -------------------------------------------------------------------------
# ---------------------------- XYZ Conversions ----------------------------
# -------------------------------------------------------------------------
def adapt_xyz(x: float, y: float, z: float, src: WhitePoint, dst: WhitePoint) -> Tuple[float, float, float]:
    if src == dst:
        return x, y, z
    return _as_tup3(chromatic_adaptation_matrix(src, dst) @ np.array((x, y, z), np.float64))


def xyz_to_rgb(
    x: float, y: float, z: float, space: RGBColourSpace, white: Optional[WhitePoint] = None
) -> Tuple[float, float, float]:
    # http://www.brucelindbloom.com/index.html?Eqn_XYZ_to_RGB.html
    if white is not None:
        x, y, z = adapt_xyz(x, y, z, white, space.white)
    encode = space.transfer.encode
    r, g, b = _as_tup3(space.inverse @ np.array((x, y, z), np.float64))
    return encode(r), encode(g), encode(b)


def _lab_f(t: float) -> float:
    return t ** (1 / 3) if t > ϵ else (κ * t + 16) / 116


def xyz_to_lab(x: float, y: float, z: float, white: WhitePoint) -> Tuple[float, float, float]:
    # http://www.brucelindbloom.com/index.html?Eqn_XYZ_to_Lab.html
    xn, yn, zn = white.tristimulus
    fx, fy, fz = _lab_f(x / xn), _lab_f(y / yn), _lab_f(z / zn)
    return 116 * fy - 16, 500 * (fx - fy), 200 * (fy - fz)


def _uv_prime(x: float, y: float, z: float) -> Tuple[float, float]:
    denominator = x + 15 * y + 3 * z
    if denominator == 0:
        return 0.0, 0.0
    return 4 * x / denominator, 9 * y / denominator


def xyz_to_luv(x: float, y: float, z: float, white: WhitePoint) -> Tuple[float, float, float]:
    # http://www.brucelindbloom.com/index.html?Eqn_XYZ_to_Luv.html
    yr = y / white.tristimulus[1]
    l = 116 * yr ** (1 / 3) - 16 if yr > ϵ else κ * yr
    if l == 0:
        return 0.0, 0.0, 0.0
    up, vp = _uv_prime(x, y, z)
    upn, vpn = _uv_prime(*white.tristimulus)
    return l, 13 * l * (up - upn), 13 * l * (vp - vpn)


# -------------------------------------------------------------------------
# ------------------------ Perceptual Conversions -------------------------
# -------------------------------------------------------------------------
def lab_to_xyz(l: float, a: float, b: float, white: WhitePoint) -> Tuple[float, float, float]:
    # http://www.brucelindbloom.com/index.html?Eqn_Lab_to_XYZ.html
    fy = (l + 16) / 116
    fx = a / 500 + fy
    fz = fy - b / 200

    xr = fx ** 3 if fx ** 3 > ϵ else (116 * fx - 16) / κ
    yr = fy ** 3 if l > κ * ϵ else l / κ
    zr = fz ** 3 if fz ** 3 > ϵ else (116 * fz - 16) / κ
    xn, yn, zn = white.tristimulus
    return xr * xn, yr * yn, zr * zn


def luv_to_xyz(l: float, u: float, v: float, white: WhitePoint) -> Tuple[float, float, float]:
    # http://www.brucelindbloom.com/index.html?Eqn_Luv_to_XYZ.html
    if l == 0:
        return 0.0, 0.0, 0.0
    y = (((l + 16) / 116) ** 3 if l > κ * ϵ else l / κ) * white.tristimulus[1]
    upn, vpn = _uv_prime(*white.tristimulus)
    up = u / (13 * l) + upn
    vp = v / (13 * l) + vpn
    if vp == 0:
        return 0.0, y, 0.0
    return y * 9 * up / (4 * vp), y, y * (12 - 3 * up - 20 * vp) / (4 * vp)


def oklab_to_lrgb(l: float, a: float, b: float) -> Tuple[float, float, float]:
    lms = (_OKLAB_M2_INV @ np.array((l, a, b), np.float64)) ** 3
    return _as_tup3(_OKLAB_M1_INV @ lms)


def lab_to_lch(l: float, a: float, b: float) -> Tuple[float, float, float]:
    """Lab, Luv and Oklab to their cylindrical model"""
    c, h = to_polar(a, b)
    return l, c, h


def lch_to_lab(l: float, c: float, h: float) -> Tuple[float, float, float]:
    """LCHab, LCHuv and Oklch to their Cartesian model"""
    a, b = from_polar(c, h)
    return l, a, b
