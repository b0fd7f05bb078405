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
Backend and Method Types

Defines types related to:
- Computational backends (NumPy, PyTorch, JAX, SymPy)
- Discretization method names

Usage
-----
>>> from affinesys.types.backends import Backend, validate_backend
>>>
>>> backend: Backend = validate_backend('numpy')
"""

from typing import Literal

import numpy as np

# ============================================================================
# Backend Types
# ============================================================================

Backend = Literal["numpy", "torch", "jax", "sympy"]
"""
Backend identifier for numerical computation.

Valid values:
- 'numpy': NumPy arrays, SciPy linear algebra (default, always available)
- 'torch': PyTorch tensors (optional extra)
- 'jax': JAX arrays (optional extra)
- 'sympy': SymPy matrices for closed-form symbolic discretization

The backend is never chosen explicitly by the caller of discretize(); it is
detected from the type of the state matrix, and results stay in that
backend.
"""

DiscretizationMethod = Literal["exact", "euler"]
"""
Names of the built-in discretization algorithms.

- 'exact': matrix exponential, requires invertible A (alias 'zoh')
- 'euler': first-order approximation (alias 'forward_euler')

Further names can be added at runtime through register_algorithm().
"""


# ============================================================================
# Constants - Valid Values
# ============================================================================

VALID_BACKENDS = ("numpy", "torch", "jax", "sympy")
"""Tuple of valid backend names."""

DEFAULT_DTYPE = np.float64
"""Default numerical precision for zero padding of NumPy inputs."""


def validate_backend(backend: str) -> Backend:
    """
    Validate and normalize backend string.

    Parameters
    ----------
    backend : str
        Backend name to validate

    Returns
    -------
    Backend
        Validated backend (typed)

    Raises
    ------
    ValueError
        If backend is not valid

    Examples
    --------
    >>> validate_backend('numpy')
    'numpy'
    >>> validate_backend('pytorch')  # ValueError
    """
    if backend not in VALID_BACKENDS:
        raise ValueError(f"Invalid backend '{backend}'. " f"Choose from: {VALID_BACKENDS}")
    return backend


__all__ = [
    "Backend",
    "DiscretizationMethod",
    "VALID_BACKENDS",
    "DEFAULT_DTYPE",
    "validate_backend",
]
