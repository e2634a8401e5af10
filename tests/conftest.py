"""Shared test fixtures."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
import pytest

from stylesheet.engine.precompute import StyleCompiler
from stylesheet.utils import matrix_math


def apply_to_point(matrix, point: Sequence[float]) -> tuple[float, float, float]:
    """Transform a 2D/3D point as a row vector and divide out w.

    ``matrix`` is a (4, 4) array or 16 flat row-major values.
    """
    m = np.asarray(matrix, dtype=np.float64)
    if m.shape != (4, 4):
        m = matrix_math.from_values(m)
    x, y = float(point[0]), float(point[1])
    z = float(point[2]) if len(point) > 2 else 0.0
    row = np.array([x, y, z, 1.0]) @ m
    w = row[3] if abs(row[3]) > 1e-12 else 1.0
    return (float(row[0] / w), float(row[1] / w), float(row[2] / w))

IDENTITY = [
    1.0, 0.0, 0.0, 0.0,
    0.0, 1.0, 0.0, 0.0,
    0.0, 0.0, 1.0, 0.0,
    0.0, 0.0, 0.0, 1.0,
]

PLAIN_STYLE = {"opacity": 0.5, "backgroundColor": "#4ECDC4", "margin": 4}

TRANSFORMED_STYLE = {
    "opacity": 0.5,
    "shadowOffset": {"width": 1, "height": 2},
    "transform": [
        {"translate": [10, 20]},
        {"rotate": "45deg"},
        {"scale": 2},
    ],
}


@pytest.fixture
def dev_compiler() -> StyleCompiler:
    return StyleCompiler(dev=True)


@pytest.fixture
def fast_compiler() -> StyleCompiler:
    return StyleCompiler(dev=False)


@pytest.fixture(params=[True, False], ids=["dev", "fast"])
def compiler(request) -> StyleCompiler:
    return StyleCompiler(dev=request.param)


@pytest.fixture
def plain_style() -> dict:
    return dict(PLAIN_STYLE)


@pytest.fixture
def transformed_style() -> dict:
    return {
        "opacity": 0.5,
        "shadowOffset": {"width": 1, "height": 2},
        "transform": [dict(op) for op in TRANSFORMED_STYLE["transform"]],
    }
