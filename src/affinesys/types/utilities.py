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
Type Guards and Shape Helpers

Backend detection by array type and backend-independent shape queries.
Optional backends are imported lazily so that a missing torch or jax never
breaks NumPy-only use.

Usage
-----
>>> from affinesys.types.utilities import get_backend, get_array_shape
>>>
>>> get_backend(np.eye(2))
'numpy'
>>> get_array_shape(sympy.Matrix([[1, 2]]))
(1, 2)
"""

from typing import Tuple

import numpy as np

from .backends import Backend
from .core import ArrayLike


# ============================================================================
# Type Guards
# ============================================================================


def is_numpy(x: ArrayLike) -> bool:
    """
    Check if array is NumPy ndarray.

    Examples
    --------
    >>> is_numpy(np.array([1, 2, 3]))
    True
    """
    return isinstance(x, np.ndarray)


def is_torch(x: ArrayLike) -> bool:
    """
    Check if array is PyTorch tensor.

    Returns False when torch is not installed.
    """
    try:
        import torch

        return isinstance(x, torch.Tensor)
    except ImportError:
        return False


def is_jax(x: ArrayLike) -> bool:
    """
    Check if array is JAX array.

    Returns False when jax is not installed.
    """
    try:
        import jax

        return isinstance(x, jax.Array)
    except ImportError:
        return False


def is_sympy(x: ArrayLike) -> bool:
    """
    Check if array is a SymPy matrix (mutable or immutable).

    Examples
    --------
    >>> import sympy as sp
    >>> is_sympy(sp.Matrix([[1]]))
    True
    >>> is_sympy(np.eye(1))
    False
    """
    import sympy as sp

    return isinstance(x, sp.MatrixBase)


def get_backend(x: ArrayLike) -> Backend:
    """
    Detect backend from array type.

    Parameters
    ----------
    x : ArrayLike
        Array to check

    Returns
    -------
    Backend
        'numpy', 'torch', 'jax' or 'sympy'

    Raises
    ------
    TypeError
        If backend cannot be determined

    Examples
    --------
    >>> get_backend(np.array([1, 2, 3]))
    'numpy'
    >>> get_backend(sympy.eye(2))
    'sympy'
    """
    if is_numpy(x):
        return "numpy"
    elif is_sympy(x):
        return "sympy"
    elif is_torch(x):
        return "torch"
    elif is_jax(x):
        return "jax"
    else:
        raise TypeError(f"Unknown backend for type {type(x)}")


# ============================================================================
# Shape Helpers
# ============================================================================


def get_array_shape(x: ArrayLike) -> Tuple[int, ...]:
    """
    Get the shape of an array in any backend.

    SymPy matrices are always two-dimensional, so a SymPy column vector
    reports (n, 1).

    Examples
    --------
    >>> get_array_shape(np.zeros((3, 2)))
    (3, 2)
    """
    return tuple(int(d) for d in x.shape)


def is_vector(x: ArrayLike) -> bool:
    """
    Check if x is a vector for its backend.

    One-dimensional arrays are vectors; for SymPy, column matrices (n, 1)
    are vectors.

    Examples
    --------
    >>> is_vector(np.zeros(3))
    True
    >>> is_vector(np.zeros((3, 1)))
    False
    >>> is_vector(sympy.zeros(3, 1))
    True
    """
    shape = get_array_shape(x)
    if is_sympy(x):
        return shape[1] == 1
    return len(shape) == 1


def is_matrix(x: ArrayLike) -> bool:
    """Check if x is two-dimensional (any SymPy matrix counts)."""
    return len(get_array_shape(x)) == 2


__all__ = [
    "is_numpy",
    "is_torch",
    "is_jax",
    "is_sympy",
    "get_backend",
    "get_array_shape",
    "is_vector",
    "is_matrix",
]
