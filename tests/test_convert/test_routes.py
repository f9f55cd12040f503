from typing import Tuple

import pytest
import pytest_check as check
from pycolourspace import ROUTES, ColourModel, route
from pycolourspace.convert import EDGES, WHITE_RELATIVE_MODELS, convert_values
from pycolourspace.rgbspace import D50, D65, LINEAR_SRGB, SRGB

CM = ColourModel


def test_all_pairs() -> None:
    check.equal(len(ROUTES), len(ColourModel) ** 2)
    for (src, dst), path in ROUTES.items():
        check.equal(path[0], src)
        check.equal(path[-1], dst)
        for hop in zip(path, path[1:]):
            check.is_true(hop in EDGES)


def test_same_model() -> None:
    for model in ColourModel:
        check.equal(route(model, model), (model, ))


@pytest.mark.parametrize(
    'src, dst, path',
    [
        (CM.RGB, CM.LAB, (CM.RGB, CM.XYZ, CM.LAB)),
        (CM.HSV, CM.LCHAB, (CM.HSV, CM.RGB, CM.XYZ, CM.LAB, CM.LCHAB)),
        (CM.HSV, CM.HSL, (CM.HSV, CM.HSL)),
        (CM.HWB, CM.HSV, (CM.HWB, CM.HSV)),
        (CM.OKLCH, CM.RGB, (CM.OKLCH, CM.OKLAB, CM.RGB)),
        (CM.ANSI16, CM.ANSI256, (CM.ANSI16, CM.ANSI256)),
        (CM.LCHUV, CM.LCHAB, (CM.LCHUV, CM.LUV, CM.XYZ, CM.LAB, CM.LCHAB)),
        (CM.CMYK, CM.ANSI256, (CM.CMYK, CM.RGB, CM.ANSI256)),
    ]
)
def test_shortest_route(src: ColourModel, dst: ColourModel, path: Tuple[ColourModel, ...]) -> None:
    check.equal(route(src, dst), path)


def test_routes_are_shortest() -> None:
    # every direct edge is used as such
    for src, dst in EDGES:
        check.equal(len(route(src, dst)), 2)
    check.equal(max(len(p) for p in ROUTES.values()), 6)


def test_white_relative_models() -> None:
    check.equal(WHITE_RELATIVE_MODELS, {CM.XYZ, CM.LAB, CM.LUV, CM.LCHAB, CM.LCHUV})


def test_convert_values() -> None:
    values, ref = convert_values(CM.RGB, (1.0, 1.0, 1.0), SRGB, CM.XYZ)
    check.equal(values, pytest.approx(D65.tristimulus))
    check.equal(ref, D65)

    values, ref = convert_values(CM.RGB, (1.0, 1.0, 1.0), SRGB, CM.XYZ, white=D50)
    check.equal(values, pytest.approx(D50.tristimulus))
    check.equal(ref, D50)

    values, ref = convert_values(CM.HSV, (0.0, 0.0, 1.0), None, CM.RGB, space=LINEAR_SRGB)
    check.equal(values, pytest.approx((1.0, 1.0, 1.0)))
    check.is_true(ref is LINEAR_SRGB)

    values, ref = convert_values(CM.ANSI256, (196, ), None, CM.ANSI16)
    check.equal(values, (91, ))
    check.is_none(ref)
