#!/usr/bin/env python3

# Copyright (C) 2024-2026 The weierstrass developers
#
# This file is part of weierstrass. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of weierstrass including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Named elliptic curves.

* bn128 (alt_bn128), the pairing-friendly curve of
  https://eips.ethereum.org/EIPS/eip-197
* secp256k1, from SEC 2 v.2 curves
  http://www.secg.org/sec2-v2.pdf
* ec11_12, a toy curve y^2 = x^3 + 3 over F_11
  whose generator (4, 10) has order 12

Parameters are read from the json file in the data directory
and loaded once, at import time.
"""

import json
import logging
from os import path
from typing import Dict

from weierstrass.curve import WeierstrassCurve

_LOGGER = logging.getLogger(__name__)

datadir = path.join(path.dirname(__file__), "data")


def _load_curves(filename: str) -> Dict[str, WeierstrassCurve]:
    with open(filename, "r", encoding="ascii") as file_:
        params = json.load(file_)
    curves: Dict[str, WeierstrassCurve] = {}
    for ec_name, ec_params in params.items():
        curves[ec_name] = WeierstrassCurve(
            ec_params["p"], ec_params["a"], ec_params["G"], ec_params["n"], ec_name
        )
    _LOGGER.debug("loaded %d curves from %s", len(curves), filename)
    return curves


CURVES = _load_curves(path.join(datadir, "curves.json"))

ec11_12 = CURVES["ec11_12"]
bn128 = CURVES["bn128"]
secp256k1 = CURVES["secp256k1"]
