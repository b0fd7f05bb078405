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
Type System for affinesys

- core: array aliases, semantic matrix types, field names, bundles
- backends: backend literal, method names, defaults
- utilities: type guards and shape helpers
- protocols: structural interfaces for systems and algorithms
"""

from .backends import (
    DEFAULT_DTYPE,
    VALID_BACKENDS,
    Backend,
    DiscretizationMethod,
    validate_backend,
)
from .core import (
    DYNAMICS_FIELD_ORDER,
    SET_FIELD_ORDER,
    ArrayLike,
    CanonicalParameters,
    ConstraintSet,
    DiscreteConstructor,
    DynamicsValues,
    FieldNames,
    InputMatrix,
    NoiseMatrix,
    NumpyArray,
    OffsetVector,
    ScalarLike,
    SetValues,
    StateMatrix,
)
from .protocols import (
    AffineSystemProtocol,
    DiscretizationAlgorithmProtocol,
    FieldTraitsProtocol,
)
from .utilities import (
    get_array_shape,
    get_backend,
    is_jax,
    is_matrix,
    is_numpy,
    is_sympy,
    is_torch,
    is_vector,
)

__all__ = [
    # core
    "ArrayLike",
    "NumpyArray",
    "ScalarLike",
    "StateMatrix",
    "InputMatrix",
    "OffsetVector",
    "NoiseMatrix",
    "ConstraintSet",
    "DYNAMICS_FIELD_ORDER",
    "SET_FIELD_ORDER",
    "FieldNames",
    "DynamicsValues",
    "SetValues",
    "CanonicalParameters",
    "DiscreteConstructor",
    # backends
    "Backend",
    "DiscretizationMethod",
    "VALID_BACKENDS",
    "DEFAULT_DTYPE",
    "validate_backend",
    # utilities
    "is_numpy",
    "is_torch",
    "is_jax",
    "is_sympy",
    "get_backend",
    "get_array_shape",
    "is_vector",
    "is_matrix",
    # protocols
    "FieldTraitsProtocol",
    "AffineSystemProtocol",
    "DiscretizationAlgorithmProtocol",
]
