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
"""Conversion graph between colour models"""
from __future__ import annotations

__all__ = [
    'WHITE_RELATIVE_MODELS', 'EDGES', 'ROUTES',
    'route', 'describe_route', 'convert_values'
]

from collections import deque
from types import MappingProxyType
from typing import Callable, Dict, Final, FrozenSet, List, Mapping, Optional, Tuple, Union

from ._logging import logger
from .ansi import (
    ansi16_to_ansi256, ansi16_to_rgb, ansi256_to_ansi16, ansi256_to_rgb, rgb_to_ansi16, rgb_to_ansi256
)
from .colour_conv import (
    adapt_xyz, cmyk_to_rgb, hsl_to_hsv, hsl_to_rgb, hsv_to_hsl, hsv_to_hwb, hsv_to_rgb, hwb_to_hsv, hwb_to_rgb,
    lab_to_lch, lab_to_xyz, lch_to_lab, lrgb_to_oklab, luv_to_xyz, oklab_to_lrgb, rgb_to_cmyk, rgb_to_hsl,
    rgb_to_hsv, rgb_to_hwb, rgb_to_rgb, rgb_to_xyz, xyz_to_lab, xyz_to_luv, xyz_to_rgb
)
from .rgbspace import LINEAR_SRGB, SRGB, RGBColourSpace, WhitePoint
from .types import ColourModel

CM = ColourModel

Ref = Union[RGBColourSpace, WhitePoint, None]
"""RGB colour space of RGB values, white point of white-relative values, None otherwise"""
Values = Tuple[float, ...]
Edge = Callable[[Values, Ref, RGBColourSpace], Tuple[Values, Ref]]
"""Direct conversion taking the values, their reference and the RGB space to produce if the edge ends on RGB"""

WHITE_RELATIVE_MODELS: Final[FrozenSet[ColourModel]] = frozenset({CM.XYZ, CM.LAB, CM.LUV, CM.LCHAB, CM.LCHUV})


def _to_srgb(values: Values, ref: Ref) -> Values:
    assert isinstance(ref, RGBColourSpace)
    r, g, b = values
    return rgb_to_rgb(r, g, b, ref, SRGB)


def _from_srgb(values: Values, space: RGBColourSpace) -> Tuple[Values, Ref]:
    r, g, b = values
    return rgb_to_rgb(r, g, b, SRGB, space), space


def _white(ref: Ref) -> WhitePoint:
    assert isinstance(ref, WhitePoint)
    return ref


# -------------------------------------------------------------------------
# ------------------------------ RGB family -------------------------------
# -------------------------------------------------------------------------
def _rgb_xyz(v: Values, ref: Ref, space: RGBColourSpace) -> Tuple[Values, Ref]:
    assert isinstance(ref, RGBColourSpace)
    return rgb_to_xyz(*v, ref), ref.white


def _xyz_rgb(v: Values, ref: Ref, space: RGBColourSpace) -> Tuple[Values, Ref]:
    return xyz_to_rgb(*v, space, _white(ref)), space


def _rgb_oklab(v: Values, ref: Ref, space: RGBColourSpace) -> Tuple[Values, Ref]:
    assert isinstance(ref, RGBColourSpace)
    return lrgb_to_oklab(*rgb_to_rgb(*v, ref, LINEAR_SRGB)), None


def _oklab_rgb(v: Values, ref: Ref, space: RGBColourSpace) -> Tuple[Values, Ref]:
    return rgb_to_rgb(*oklab_to_lrgb(*v), LINEAR_SRGB, space), space


def _from_rgb(func: Callable[..., Values]) -> Edge:
    def _edge(v: Values, ref: Ref, space: RGBColourSpace) -> Tuple[Values, Ref]:
        return func(*_to_srgb(v, ref)), None
    return _edge


def _to_rgb(func: Callable[..., Values]) -> Edge:
    def _edge(v: Values, ref: Ref, space: RGBColourSpace) -> Tuple[Values, Ref]:
        return _from_srgb(func(*v), space)
    return _edge


def _plain(func: Callable[..., Values]) -> Edge:
    def _edge(v: Values, ref: Ref, space: RGBColourSpace) -> Tuple[Values, Ref]:
        return func(*v), ref
    return _edge


def _with_white(func: Callable[..., Values]) -> Edge:
    def _edge(v: Values, ref: Ref, space: RGBColourSpace) -> Tuple[Values, Ref]:
        return func(*v, _white(ref)), ref
    return _edge


# -------------------------------------------------------------------------
# ----------------------------- Terminal codes ----------------------------
# -------------------------------------------------------------------------
def _rgb_ansi16(v: Values, ref: Ref, space: RGBColourSpace) -> Tuple[Values, Ref]:
    return (rgb_to_ansi16(*_to_srgb(v, ref)),), None


def _rgb_ansi256(v: Values, ref: Ref, space: RGBColourSpace) -> Tuple[Values, Ref]:
    return (rgb_to_ansi256(*_to_srgb(v, ref)),), None


def _ansi16_rgb(v: Values, ref: Ref, space: RGBColourSpace) -> Tuple[Values, Ref]:
    return _from_srgb(ansi16_to_rgb(int(v[0])), space)


def _ansi256_rgb(v: Values, ref: Ref, space: RGBColourSpace) -> Tuple[Values, Ref]:
    return _from_srgb(ansi256_to_rgb(int(v[0])), space)


def _ansi16_ansi256(v: Values, ref: Ref, space: RGBColourSpace) -> Tuple[Values, Ref]:
    return (ansi16_to_ansi256(int(v[0])),), None


def _ansi256_ansi16(v: Values, ref: Ref, space: RGBColourSpace) -> Tuple[Values, Ref]:
    return (ansi256_to_ansi16(int(v[0])),), None


EDGES: Final[Mapping[Tuple[ColourModel, ColourModel], Edge]] = MappingProxyType({
    (CM.RGB, CM.XYZ): _rgb_xyz,
    (CM.XYZ, CM.RGB): _xyz_rgb,
    (CM.RGB, CM.HSV): _from_rgb(rgb_to_hsv),
    (CM.HSV, CM.RGB): _to_rgb(hsv_to_rgb),
    (CM.RGB, CM.HSL): _from_rgb(rgb_to_hsl),
    (CM.HSL, CM.RGB): _to_rgb(hsl_to_rgb),
    (CM.RGB, CM.HWB): _from_rgb(rgb_to_hwb),
    (CM.HWB, CM.RGB): _to_rgb(hwb_to_rgb),
    (CM.RGB, CM.CMYK): _from_rgb(rgb_to_cmyk),
    (CM.CMYK, CM.RGB): _to_rgb(cmyk_to_rgb),
    (CM.RGB, CM.OKLAB): _rgb_oklab,
    (CM.OKLAB, CM.RGB): _oklab_rgb,
    (CM.RGB, CM.ANSI16): _rgb_ansi16,
    (CM.ANSI16, CM.RGB): _ansi16_rgb,
    (CM.RGB, CM.ANSI256): _rgb_ansi256,
    (CM.ANSI256, CM.RGB): _ansi256_rgb,
    (CM.HSV, CM.HSL): _plain(hsv_to_hsl),
    (CM.HSL, CM.HSV): _plain(hsl_to_hsv),
    (CM.HSV, CM.HWB): _plain(hsv_to_hwb),
    (CM.HWB, CM.HSV): _plain(hwb_to_hsv),
    (CM.ANSI16, CM.ANSI256): _ansi16_ansi256,
    (CM.ANSI256, CM.ANSI16): _ansi256_ansi16,
    (CM.XYZ, CM.LAB): _with_white(xyz_to_lab),
    (CM.LAB, CM.XYZ): _with_white(lab_to_xyz),
    (CM.XYZ, CM.LUV): _with_white(xyz_to_luv),
    (CM.LUV, CM.XYZ): _with_white(luv_to_xyz),
    (CM.LAB, CM.LCHAB): _plain(lab_to_lch),
    (CM.LCHAB, CM.LAB): _plain(lch_to_lab),
    (CM.LUV, CM.LCHUV): _plain(lab_to_lch),
    (CM.LCHUV, CM.LUV): _plain(lch_to_lab),
    (CM.OKLAB, CM.OKLCH): _plain(lab_to_lch),
    (CM.OKLCH, CM.OKLAB): _plain(lch_to_lab),
})
"""Direct conversions, every other pair goes through the shortest chain of them"""


def _build_routes(
    edges: Mapping[Tuple[ColourModel, ColourModel], Edge]
) -> Dict[Tuple[ColourModel, ColourModel], Tuple[ColourModel, ...]]:
    adjacency: Dict[ColourModel, List[ColourModel]] = {model: [] for model in ColourModel}
    for src, dst in edges:
        adjacency[src].append(dst)

    routes: Dict[Tuple[ColourModel, ColourModel], Tuple[ColourModel, ...]] = {}
    for start in ColourModel:
        parents: Dict[ColourModel, Optional[ColourModel]] = {start: None}
        queue = deque([start])
        while queue:
            node = queue.popleft()
            for nxt in adjacency[node]:
                if nxt not in parents:
                    parents[nxt] = node
                    queue.append(nxt)
        for end in parents:
            path = [end]
            while (parent := parents[path[-1]]) is not None:
                path.append(parent)
            routes[start, end] = tuple(reversed(path))

    logger.debug('convert: built {} routes from {} edges', len(routes), len(edges))
    return routes


ROUTES: Final[Mapping[Tuple[ColourModel, ColourModel], Tuple[ColourModel, ...]]] = MappingProxyType(
    _build_routes(EDGES)
)
"""Shortest chain of models between every pair of models, both ends included"""


def route(src: ColourModel, dst: ColourModel) -> Tuple[ColourModel, ...]:
    """
    Get the chain of models a conversion goes through

    :param src:         Source model
    :param dst:         Target model
    :return:            Tuple of models, starting with src and ending with dst
    """
    return ROUTES[src, dst]


def describe_route(path: Tuple[ColourModel, ...], /) -> str:
    """
    Render a chain of models, e.g. "RGB -> XYZ -> LAB"

    :param path:        Tuple of models, such as the one returned by route
    :return:            Models joined by arrows
    """
    return ' -> '.join(map(str, path))


def _walk(path: Tuple[ColourModel, ...], values: Values, ref: Ref, space: RGBColourSpace) -> Tuple[Values, Ref]:
    for i, (src, dst) in enumerate(zip(path, path[1:]), 2):
        values, ref = EDGES[src, dst](values, ref, space if i == len(path) else SRGB)
    return values, ref


def convert_values(
    model: ColourModel, values: Values, ref: Ref, target: ColourModel, /, *,
    space: Optional[RGBColourSpace] = None, white: Optional[WhitePoint] = None
) -> Tuple[Values, Ref]:
    """
    Convert the components of a colour to another model.

    Intermediate RGB values are sRGB.
    Without ``white``, white-relative results keep the white point flowing through the chain,
    that is the source's own white or the white of the RGB space the chain starts from.

    :param model:       Source model
    :param values:      Source components
    :param ref:         RGB colour space of RGB values, white point of white-relative values, None otherwise
    :param target:      Target model
    :param space:       RGB colour space of RGB results, defaults to the source space for RGB sources, sRGB otherwise
    :param white:       White point of white-relative results
    :return:            Tuple of the target components and their reference
    """
    if white is not None and target in WHITE_RELATIVE_MODELS and ref != white:
        values, ref = _walk(ROUTES[model, CM.XYZ], values, ref, SRGB)
        x, y, z = values
        values, ref = adapt_xyz(x, y, z, _white(ref), white), white
        model = CM.XYZ

    path = ROUTES[model, target]
    logger.trace(
        'convert: {} -> {} via {}', lambda: model, lambda: target, lambda: describe_route(path), lazy=True
    )
    values, ref = _walk(path, values, ref, space or SRGB)

    if target is CM.RGB and space is not None and ref is not space:
        assert isinstance(ref, RGBColourSpace)
        r, g, b = values
        values, ref = rgb_to_rgb(r, g, b, ref, space), space
    return values, ref
