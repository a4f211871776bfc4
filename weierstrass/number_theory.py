#!/usr/bin/env python3

# Copyright (C) 2024-2026 The weierstrass developers
#
# This file is part of weierstrass. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of weierstrass including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Number theory and modular arithmetic functions.

Extended Euclidean Algorithm, see
https://en.wikipedia.org/wiki/Extended_Euclidean_algorithm
"""

from typing import Tuple

from weierstrass.alias import HEX_THRESHOLD
from weierstrass.exceptions import InvalidModulusError, NoInverseError
from weierstrass.utils import hex_string


def xgcd(a: int, b: int) -> Tuple[int, int, int]:
    """Return (g, s, t) such that a*s + b*t = g = gcd(a, b).

    The larger of a and b is taken as the initial remainder,
    while s is always the coefficient of a and t the one of b.
    The returned g is never negative.
    """

    if a > b:
        r0, r1 = a, b
        s0, s1 = 1, 0
        t0, t1 = 0, 1
    else:
        r0, r1 = b, a
        s0, s1 = 0, 1
        t0, t1 = 1, 0

    while r1 != 0:
        q, r = divmod(r0, r1)
        r0, r1 = r1, r
        s0, s1 = s1, s0 - q * s1
        t0, t1 = t1, t0 - q * t1

    if r0 < 0:
        return -r0, -s0, -t0
    return r0, s0, t0


def _int_repr(i: int) -> str:
    return f"{hex_string(i)}" if i > HEX_THRESHOLD else f"{i}"


def mod(a: int, m: int) -> int:
    """Return the Euclidean remainder of a (mod m), i.e. in [0, m-1].

    The result does not depend on the sign of a.
    """

    if m <= 0:
        raise InvalidModulusError(f"non positive modulus: {m}")
    return a % m


def mod_inv(a: int, m: int) -> int:
    """Return the inverse of a (mod m). m does not have to be a prime.

    The result is the least non-negative residue i
    such that a*i = 1 (mod m).
    """

    if m <= 0:
        raise InvalidModulusError(f"non positive modulus: {m}")

    g, s, _ = xgcd(a, m)
    if g == 1:
        return mod(s, m)
    err_msg = "No inverse for "
    err_msg += _int_repr(mod(a, m))
    err_msg += " mod "
    err_msg += _int_repr(m)
    raise NoInverseError(err_msg)
