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
Core Types - Fundamental Building Blocks

Defines the basic types used by the system-description layer and the
discretization core:
- Multi-backend array types (NumPy, PyTorch, JAX, SymPy)
- Semantic matrix types for the affine dynamics x' = Ax + Bu + c + Dw
- Field names and parameter bundles passed between components
- Constructor signatures for rebuilding discrete systems

Mathematical Form
-----------------
Continuous:  dx/dt  = A x + B u + c + D w
Discrete:    x[k+1] = Ad x[k] + Bd u[k] + cd + Dd w[k]

Usage
-----
>>> from affinesys.types.core import StateMatrix, InputMatrix, OffsetVector
>>>
>>> def euler_state(A: StateMatrix, dt: float) -> StateMatrix:
...     return np.eye(A.shape[0]) + dt * A
"""

from typing import TYPE_CHECKING, Any, Callable, Sequence, Tuple, Union

import numpy as np

if TYPE_CHECKING:
    import jax.numpy as jnp
    import sympy as sp
    import torch


# ============================================================================
# Basic Array Types - Multi-Backend Support
# ============================================================================

ArrayLike = Union[np.ndarray, "torch.Tensor", "jnp.ndarray", "sp.MatrixBase"]
"""
Array-like type supporting multiple backends.

Can be NumPy array, PyTorch tensor, JAX array, or SymPy matrix.

Shape conventions:
- Vectors: (n,) for array backends, (n, 1) for SymPy
- Matrices: (m, n)
"""

NumpyArray = np.ndarray

ScalarLike = Union[float, int, np.number, "torch.Tensor", "jnp.ndarray", "sp.Expr"]
"""
Scalar value in any backend.

The sampling period may be a SymPy symbol when discretizing symbolically.
"""


# ============================================================================
# Matrix Types - Semantic Naming by Role
# ============================================================================

StateMatrix = ArrayLike
"""
State matrix A (nx, nx).

Examples
--------
>>> A: StateMatrix = np.array([[0.0, 1.0], [-2.0, -3.0]])
>>> Ad: StateMatrix = scipy.linalg.expm(A * dt)
"""

InputMatrix = ArrayLike
"""
Input matrix B (nx, nu).

Maps the control input to the state derivative (continuous) or to the
next state (discrete).
"""

OffsetVector = ArrayLike
"""
Constant affine term c (nx,).

Represents drift that does not depend on state, input or noise,
e.g. gravity in a linearised mechanical model.
"""

NoiseMatrix = ArrayLike
"""
Noise matrix D (nx, nw).

Maps the noise realisation w to the state derivative. Discretized with the
same linear kernel as the input matrix.
"""

ConstraintSet = Any
"""
Opaque constraint-set object (state, input or noise set).

The discretization core never inspects sets; they are copied through to the
discrete system unchanged (identity preserved).
"""


# ============================================================================
# Field Names
# ============================================================================

DYNAMICS_FIELD_ORDER: Tuple[str, ...] = ("A", "B", "c", "D")
"""Canonical order of the dynamics fields subject to discretization."""

SET_FIELD_ORDER: Tuple[str, ...] = ("X", "U", "W")
"""Canonical order of the constraint-set fields (state, input, noise)."""

FieldNames = Tuple[str, ...]


# ============================================================================
# Parameter Bundles
# ============================================================================

DynamicsValues = Tuple[ArrayLike, ...]
"""
Ordered dynamics values, one per present dynamics field.

The order matches the variant's dynamics_fields(); the reconstructor relies
on it when assigning fields positionally.
"""

SetValues = Tuple[ConstraintSet, ...]
"""Ordered constraint sets, one per present set field."""

CanonicalParameters = Tuple[StateMatrix, InputMatrix, OffsetVector, NoiseMatrix]
"""The canonical 4-tuple (A, B, c, D) every kernel consumes and produces."""


# ============================================================================
# Function Types
# ============================================================================

DiscreteConstructor = Callable[[Sequence[ArrayLike], Sequence[ConstraintSet]], Any]
"""
Signature of a system constructor used by discretize().

Receives the discretized dynamics values and the untouched set values and
returns the new discrete-time system.

Examples
--------
>>> def as_tuple(disc_values, set_values):
...     return tuple(disc_values)
>>> Ad, Bd = discretize(sys_c, 0.1, constructor=as_tuple)
"""


__all__ = [
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
]
