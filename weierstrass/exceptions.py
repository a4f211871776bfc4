#!/usr/bin/env python3

# Copyright (C) 2024-2026 The weierstrass developers
#
# This file is part of weierstrass. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of weierstrass including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Exception classes.

These are only meant to discriminate between Exceptions being raised
by weierstrass from those raised by other codebase.

Users are usually better off just dealing with the regular
ValueError and TypeError
from which the weierstrass versions are derived.
"""


class WeierstrassValueError(ValueError):
    pass


class WeierstrassTypeError(TypeError):
    pass


class NoInverseError(WeierstrassValueError):
    "The value shares a common factor with the modulus."


class InvalidModulusError(WeierstrassValueError):
    "The modulus is not a positive integer."
