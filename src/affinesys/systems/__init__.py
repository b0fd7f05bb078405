# Copyright (C) 2025 Gil Benezer
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published
# by the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU Affero General Public License for more details.
#
# You should have received a copy of the GNU Affero General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.

"""
System-Description Layer
========================

The affine variant family consumed and produced by discretize():

- base: abstract classes with explicit field traits
- continuous / discrete: concrete variants
- correspondence: continuous ↔ discrete registry
- traits: predicate and dimension functions
"""

from .base import (
    AbstractContinuousSystem,
    AbstractDiscreteSystem,
    AbstractSystem,
    AffineSystemBase,
    BlackBoxSystemBase,
)
from .continuous import *  # noqa: F401,F403
from .continuous import CONTINUOUS_VARIANTS
from .correspondence import (
    BUILTIN_PAIRS,
    VARIANT_REGISTRY,
    VariantRegistry,
    complementary_type,
)
from .discrete import *  # noqa: F401,F403
from .discrete import DISCRETE_VARIANTS
from .traits import (
    inputdim,
    isaffine,
    iscontinuous,
    iscontrolled,
    isconstrained,
    isdiscrete,
    islinear,
    isnoisy,
    noisedim,
    statedim,
)

__all__ = (
    [
        "AbstractSystem",
        "AbstractContinuousSystem",
        "AbstractDiscreteSystem",
        "AffineSystemBase",
        "BlackBoxSystemBase",
        "CONTINUOUS_VARIANTS",
        "DISCRETE_VARIANTS",
        "VariantRegistry",
        "VARIANT_REGISTRY",
        "BUILTIN_PAIRS",
        "complementary_type",
        "isaffine",
        "islinear",
        "iscontrolled",
        "isnoisy",
        "isconstrained",
        "iscontinuous",
        "isdiscrete",
        "statedim",
        "inputdim",
        "noisedim",
    ]
    + [cls.__name__ for cls in CONTINUOUS_VARIANTS]
    + [cls.__name__ for cls in DISCRETE_VARIANTS]
)
