#!/usr/bin/env python3

# Copyright (C) 2024-2026 The weierstrass developers
#
# This file is part of weierstrass. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of weierstrass including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic WeierstrassCurve and CurvePoint classes.

The elliptic curve is the set of points (x, y)
that are solutions to a Weierstrass equation y^2 = x^3 + a*x + b,
with x, y, a, and b in Fp (p being a prime),
together with a point at infinity INF.

The group law only needs p and a (b is implicit in the points),
so a curve is defined by the field prime p, the coefficient a,
and a generator point G.

Each CurvePoint is bound to the curve it has been built for:
points from different curves cannot be mixed.
"""

import logging
from collections.abc import Sequence as SequenceCollection
from typing import Any, List, Optional, Sequence

from weierstrass.alias import HEX_THRESHOLD, Coordinates, Integer
from weierstrass.exceptions import WeierstrassTypeError, WeierstrassValueError
from weierstrass.number_theory import mod, mod_inv
from weierstrass.utils import hex_string, int_from_integer

_LOGGER = logging.getLogger(__name__)


def _is_sequence(xy: object) -> bool:
    "Return True if xy is a sequence, but not a string or bytes."
    return isinstance(xy, SequenceCollection) and not isinstance(xy, (str, bytes))


class CurvePoint:
    """Point of a WeierstrassCurve, in affine coordinates.

    The point at infinity has no coordinates.
    Points are immutable values: the group law
    always returns new points.
    """

    __slots__ = ("_ec", "_xy")

    def __init__(self, ec: "WeierstrassCurve", xy: Optional[Coordinates]) -> None:
        if not isinstance(ec, WeierstrassCurve):
            raise WeierstrassTypeError("not a WeierstrassCurve")
        if xy is not None:
            if not _is_sequence(xy):
                raise WeierstrassTypeError("not a point")
            if len(xy) != 2:
                raise WeierstrassValueError("point must be a sequence[int, int]")
            xy = int_from_integer(xy[0]), int_from_integer(xy[1])
        object.__setattr__(self, "_ec", ec)
        object.__setattr__(self, "_xy", xy)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def curve(self) -> "WeierstrassCurve":
        return self._ec

    @property
    def is_infinity(self) -> bool:
        return self._xy is None

    @property
    def x(self) -> int:
        if self._xy is None:
            raise WeierstrassValueError("INF has no x-coordinate")
        return self._xy[0]

    @property
    def y(self) -> int:
        if self._xy is None:
            raise WeierstrassValueError("INF has no y-coordinate")
        return self._xy[1]

    def coordinates(self) -> Optional[Coordinates]:
        "Return the affine coordinates, None for the point at infinity."
        return self._xy

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CurvePoint):
            return NotImplemented
        return self._ec == other._ec and self._xy == other._xy

    def __hash__(self) -> int:
        return hash((self._ec, self._xy))

    def __repr__(self) -> str:
        if self._xy is None:
            return "CurvePoint(INF)"
        return f"CurvePoint({self._xy[0]}, {self._xy[1]})"

    def __add__(self, other: object) -> "CurvePoint":
        if not isinstance(other, CurvePoint):
            return NotImplemented
        return self._ec.add(self, other)

    def __neg__(self) -> "CurvePoint":
        return self._ec.negate(self)

    def __sub__(self, other: object) -> "CurvePoint":
        if not isinstance(other, CurvePoint):
            return NotImplemented
        return self._ec.add(self, self._ec.negate(other))

    def __mul__(self, m: object) -> "CurvePoint":
        if isinstance(m, bool) or not isinstance(m, int):
            return NotImplemented
        return self._ec.mult(m, self)

    __rmul__ = __mul__


class WeierstrassCurve:
    """Curve parameters: field prime p, coefficient a, and generator G.

    The optional n is the order of the generator:
    if provided, it is checked to satisfy n*G = INF.

    A curve is immutable: its identity, i.e. (p, a, G),
    is fixed at construction.
    """

    __slots__ = ("_p", "_a", "_n", "_name", "_key", "_G", "_INF")

    def __init__(
        self,
        p: Integer,
        a: Integer,
        G: Sequence[Integer],
        n: Optional[Integer] = None,
        name: Optional[str] = None,
    ) -> None:

        p = int_from_integer(p)
        a = int_from_integer(a)

        # Fermat test will do as _probabilistic_ primality test...
        if p < 3 or p % 2 == 0 or pow(2, p - 1, p) != 1:
            err_msg = "p is not prime: "
            err_msg += f"'{hex_string(p)}'" if p > HEX_THRESHOLD else f"{p}"
            raise WeierstrassValueError(err_msg)

        # a is an element of Fp, e.g. a = -3 is stored as p - 3
        a = mod(a, p)

        if G is None:
            raise WeierstrassValueError("INF point cannot be a generator")
        if not _is_sequence(G):
            raise WeierstrassTypeError("not a point")
        if len(G) != 2:
            raise WeierstrassValueError("Generator must a be a sequence[int, int]")
        xy_G = int_from_integer(G[0]), int_from_integer(G[1])

        set_ = object.__setattr__
        set_(self, "_p", p)
        set_(self, "_a", a)
        set_(self, "_name", name)
        set_(self, "_key", (p, a, xy_G))
        set_(self, "_G", CurvePoint(self, xy_G))
        set_(self, "_INF", CurvePoint(self, None))

        if n is None:
            set_(self, "_n", None)
        else:
            n = int_from_integer(n)
            if n < 1:
                raise WeierstrassValueError(f"non positive n: {n}")
            if not self.mult(n, self._G).is_infinity:
                err_msg = "n is not the generator order: "
                err_msg += f"'{hex_string(n)}'" if n > HEX_THRESHOLD else f"{n}"
                raise WeierstrassValueError(err_msg)
            set_(self, "_n", n)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def p(self) -> int:
        "The field prime (modulus)."
        return self._p

    @property
    def a(self) -> int:
        "The linear coefficient of the curve equation."
        return self._a

    @property
    def n(self) -> Optional[int]:
        "The order of the generator, if known."
        return self._n

    @property
    def name(self) -> Optional[str]:
        return self._name

    @property
    def generator(self) -> CurvePoint:
        return self._G

    @property
    def INF(self) -> CurvePoint:
        "The point at infinity, i.e. the group identity."
        return self._INF

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WeierstrassCurve):
            return NotImplemented
        return self is other or self._key == other._key

    def __hash__(self) -> int:
        return hash(self._key)

    def __str__(self) -> str:
        result = "Curve" if self._name is None else f"Curve {self._name}"
        if self._p > HEX_THRESHOLD:
            result += f"\n p   = {hex_string(self._p)}"
        else:
            result += f"\n p   = {self._p}"

        if self._a > HEX_THRESHOLD:
            result += f"\n a   = {hex_string(self._a)}"
        else:
            result += f"\n a   = {self._a}"

        x_G, y_G = self._key[2]
        if self._p > HEX_THRESHOLD:
            result += f"\n x_G = {hex_string(x_G)}"
            result += f"\n y_G = {hex_string(y_G)}"
        else:
            result += f"\n x_G = {x_G}"
            result += f"\n y_G = {y_G}"

        if self._n is not None:
            if self._n > HEX_THRESHOLD:
                result += f"\n n   = {hex_string(self._n)}"
            else:
                result += f"\n n   = {self._n}"
        return result

    def __repr__(self) -> str:
        result = "WeierstrassCurve("
        x_G, y_G = self._key[2]
        if self._p > HEX_THRESHOLD:
            result += f"'{hex_string(self._p)}', '{hex_string(self._a)}'"
            result += f", ('{hex_string(x_G)}', '{hex_string(y_G)}')"
        else:
            result += f"{self._p}, {self._a}, ({x_G}, {y_G})"
        if self._n is not None:
            result += (
                f", '{hex_string(self._n)}'"
                if self._n > HEX_THRESHOLD
                else f", {self._n}"
            )
        result += ")"
        return result

    def point(self, x: Integer, y: Integer) -> CurvePoint:
        """Return the curve point (x, y).

        The input coordinates are not checked to be on the curve.
        """
        return CurvePoint(self, (x, y))

    def require_point(self, Q: object) -> None:
        """Require Q to be a CurvePoint of this curve.

        An Error is raised if not.
        """
        if not isinstance(Q, CurvePoint):
            raise WeierstrassTypeError("not a CurvePoint")
        if Q.curve != self:
            raise WeierstrassTypeError("point belongs to a different curve")

    def negate(self, Q: CurvePoint) -> CurvePoint:
        """Return the opposite point.

        The input point is not checked to be on the curve.
        """
        self.require_point(Q)
        xy = Q.coordinates()
        if xy is None:
            return self._INF
        return CurvePoint(self, (xy[0], mod(self._p - xy[1], self._p)))

    def add(self, Q: CurvePoint, R: CurvePoint) -> CurvePoint:
        """Return the sum of two points.

        Formulas are the affine chord-and-tangent rules, see
        https://en.wikipedia.org/wiki/Elliptic_curve_point_multiplication
        """
        self.require_point(Q)
        self.require_point(R)
        return CurvePoint(self, self._add_aff(Q.coordinates(), R.coordinates()))

    def double(self, Q: CurvePoint) -> CurvePoint:
        "Return the sum of the point with itself."
        self.require_point(Q)
        return CurvePoint(self, self._double_aff(Q.coordinates()))

    def _add_aff(
        self, Q: Optional[Coordinates], R: Optional[Coordinates]
    ) -> Optional[Coordinates]:
        if Q is None:
            return R
        if R is None:
            return Q

        p = self._p
        if mod(Q[0], p) == mod(R[0], p):
            if mod(Q[1], p) == mod(R[1], p):  # point doubling
                return self._double_aff(Q)
            # opposite points
            return None

        lam = mod((R[1] - Q[1]) * mod_inv(R[0] - Q[0], p), p)
        x = mod(lam * lam - Q[0] - R[0], p)
        y = mod(lam * (Q[0] - x) - Q[1], p)
        return x, y

    def _double_aff(self, Q: Optional[Coordinates]) -> Optional[Coordinates]:
        if Q is None:
            return None

        p = self._p
        # vertical tangent
        if mod(Q[1], p) == 0:
            return None

        lam = mod((3 * Q[0] * Q[0] + self._a) * mod_inv(2 * Q[1], p), p)
        x = mod(lam * lam - 2 * Q[0], p)
        y = mod(lam * (Q[0] - x) - Q[1], p)
        return x, y

    def mult(self, m: Integer, Q: CurvePoint) -> CurvePoint:
        """Scalar multiplication of a curve point.

        This implementation uses 'double & add' algorithm:
        the 2^i * Q multiples are computed first,
        then the one matching the highest set bit of m is added
        and that bit cleared, until m is exhausted.
        It is not constant-time.

        The m coefficient is not reduced mod n.
        """
        self.require_point(Q)
        m = int_from_integer(m)
        if m < 0:
            raise WeierstrassValueError(f"negative m: {hex(m)}")
        if m == 0:
            return self._INF

        _LOGGER.debug("scalar multiplication, %d-bit coefficient", m.bit_length())

        doublings: List[Optional[Coordinates]] = [Q.coordinates()]
        for _ in range(1, m.bit_length()):
            doublings.append(self._double_aff(doublings[-1]))

        R: Optional[Coordinates] = None
        while m > 0:
            i = m.bit_length() - 1
            R = self._add_aff(R, doublings[i])
            # remove the bit just accounted for
            m ^= 1 << i
        return CurvePoint(self, R)
