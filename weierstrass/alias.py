#!/usr/bin/env python3

# Copyright (C) 2024-2026 The weierstrass developers
#
# This file is part of weierstrass. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of weierstrass including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Aliases

mypy aliases, documenting also coding input conventions.
"""

from typing import Tuple, Union

# hex-string or bytes representation of an int
#
# e.g.:
# 3735928559
# "0xdeadbeef"
# "deadbeef"
# b"\xde\xad\xbe\xef"
#
# use weierstrass.utils.int_from_integer to convert Integer to int
#
# curve parameters (p, a, n), generator coordinates,
# and scalars are all accepted as Integer
Integer = Union[bytes, str, int]

# Elliptic curve point in affine coordinates.
#
# The point at infinity has no coordinates:
# CurvePoint.coordinates() returns None for it
Coordinates = Tuple[int, int]

# the threshold above which integers are rendered as hex-strings
# in error messages and curve representations
HEX_THRESHOLD = 0xFFFFFFFF
