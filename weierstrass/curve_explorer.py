#!/usr/bin/env python3

# Copyright (C) 2024-2026 The weierstrass developers
#
# This file is part of weierstrass. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of weierstrass including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""WeierstrassCurve explorer functions.

These functions are meant to explore low-cardinality curves,
for didactical (and fun) reason only.
"""

from typing import List, Optional

from weierstrass.curve import CurvePoint, WeierstrassCurve
from weierstrass.exceptions import WeierstrassValueError


def find_subgroup_points(
    ec: WeierstrassCurve, G: Optional[CurvePoint] = None
) -> List[CurvePoint]:
    """Return the points of the G-generated subgroup, if p is low.

    The points are G, 2G, 3G, ... up to the point at infinity included.
    G defaults to the curve generator.

    Very unsophisticated walk-through approach,
    for didactical sake only.
    """
    if ec.p > 10000:
        err_msg = f"p is too big to count all subgroup points: {ec.p}"
        raise WeierstrassValueError(err_msg)

    if G is None:
        G = ec.generator
    ec.require_point(G)

    # Hasse theorem: the group has at most p + 1 + 2*sqrt(p) points
    max_points = 2 * ec.p + 2
    points: List[CurvePoint] = [G]
    while not points[-1].is_infinity:
        if len(points) > max_points:
            raise WeierstrassValueError("point not on curve: no subgroup found")
        points.append(ec.add(points[-1], G))

    return points
