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
affinesys - Discretization of Continuous-Time Affine Systems
============================================================

Maps continuous-time affine systems

    dx/dt = A x + B u + c + D w

to their discrete-time equivalents

    x[k+1] = Ad x[k] + Bd u[k] + cd + Dd w[k]

under a sampling period, with exact (matrix exponential) or forward Euler
algorithms, on NumPy, PyTorch, JAX or SymPy data.

Quick Start
-----------
>>> import numpy as np
>>> from affinesys import discretize, Euler
>>> from affinesys.systems import LinearControlContinuousSystem
>>>
>>> sys_c = LinearControlContinuousSystem(np.array([[-1.0]]), np.array([[1.0]]))
>>> sys_d = discretize(sys_c, 0.1)
>>> sys_d_euler = discretize(sys_c, 0.1, algorithm=Euler)
"""

from .config import DEFAULT_ALGORITHM, DiscretizationConfig, validate_dt
from .discretization import (
    DiscretizationAlgorithm,
    Euler,
    EulerDiscretization,
    Exact,
    ExactDiscretization,
    FieldMask,
    apply_kernel,
    available_algorithms,
    complementary_type,
    default_complementary_constructor,
    discretize,
    extract_parameters,
    get_algorithm,
    register_algorithm,
)
from .errors import (
    DimensionMismatchError,
    DiscretizationError,
    MissingFieldError,
    NotAffineError,
    NotContinuousError,
    RegistrationError,
    SingularStateMatrixError,
    UnknownVariantCorrespondenceError,
)
from .systems import VARIANT_REGISTRY, isaffine


# ============================================================================
# Version Information
# ============================================================================

__version__ = "0.1.0"
__author__ = "Gil Benezer"


__all__ = [
    # Pipeline
    "discretize",
    "apply_kernel",
    "extract_parameters",
    "complementary_type",
    "default_complementary_constructor",
    "FieldMask",
    # Algorithms
    "DiscretizationAlgorithm",
    "ExactDiscretization",
    "EulerDiscretization",
    "Exact",
    "Euler",
    "register_algorithm",
    "get_algorithm",
    "available_algorithms",
    # Systems
    "VARIANT_REGISTRY",
    "isaffine",
    # Configuration
    "DiscretizationConfig",
    "DEFAULT_ALGORITHM",
    "validate_dt",
    # Errors
    "DiscretizationError",
    "NotAffineError",
    "NotContinuousError",
    "SingularStateMatrixError",
    "UnknownVariantCorrespondenceError",
    "DimensionMismatchError",
    "MissingFieldError",
    "RegistrationError",
]
