#!/usr/bin/env python3

# Copyright (C) 2024-2026 The weierstrass developers
#
# This file is part of weierstrass. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of weierstrass including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `weierstrass.curve_explorer` module."

import pytest

from weierstrass.curve import WeierstrassCurve
from weierstrass.curve_explorer import find_subgroup_points
from weierstrass.curves import bn128, ec11_12, secp256k1
from weierstrass.exceptions import WeierstrassTypeError, WeierstrassValueError


def test_find_subgroup_points() -> None:
    ec = ec11_12
    points = find_subgroup_points(ec)
    assert len(points) == ec.n
    assert points[0] == ec.generator
    assert points[5] == ec.point(2, 0)
    assert points[-1] == ec.INF
    assert len(set(points)) == len(points)

    # 3G generates a subgroup of order 4
    points = find_subgroup_points(ec, ec.point(1, 9))
    assert points == [ec.point(1, 9), ec.point(2, 0), ec.point(1, 2), ec.INF]

    # 4G generates a subgroup of order 3
    points = find_subgroup_points(ec, ec.point(0, 6))
    assert points == [ec.point(0, 6), ec.point(0, 5), ec.INF]

    points = find_subgroup_points(ec, ec.INF)
    assert points == [ec.INF]


def test_ecf() -> None:
    ec = WeierstrassCurve(9739, 497, (1804, 5368))
    points = find_subgroup_points(ec)
    assert len(points) == 9735
    assert ec.mult(len(points), ec.generator) == ec.INF


def test_exceptions() -> None:
    for ec in (bn128, secp256k1):
        with pytest.raises(WeierstrassValueError, match="p is too big"):
            find_subgroup_points(ec)

    with pytest.raises(WeierstrassTypeError, match="point belongs to a different curve"):
        find_subgroup_points(ec11_12, WeierstrassCurve(13, 0, (1, 9)).generator)
