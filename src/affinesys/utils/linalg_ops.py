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
Backend-Dispatched Linear Algebra

The few dense linear-algebra primitives the discretization kernels need,
each evaluated in the backend of its input:

==============  ==================  =========================  ==========================  ===============
Primitive       NumPy               PyTorch                    JAX                         SymPy
==============  ==================  =========================  ==========================  ===============
expm            scipy.linalg.expm   torch.linalg.matrix_exp    jax.scipy.linalg.expm       Matrix.exp()
inv             numpy.linalg.inv    torch.linalg.inv           jnp.linalg.inv              Matrix.inv()
matrix_rank     numpy (SVD)         numpy (SVD, detached)      numpy (SVD)                 Matrix.rank()
==============  ==================  =========================  ==========================  ===============

SciPy's expm uses scaling-and-squaring with Padé approximation, which is the
numerically stable choice for the exact kernel.

Zero-dimensional matrices (0, 0) are handled explicitly: the exponential and
inverse of an empty matrix are empty, and an empty matrix has full rank.
"""

from typing import Optional, Tuple

import numpy as np
from scipy import linalg as scipy_linalg

from affinesys.types.backends import DEFAULT_DTYPE
from affinesys.types.core import ArrayLike
from affinesys.types.utilities import get_array_shape, get_backend


def num_rows(M: ArrayLike) -> int:
    """Number of rows of a matrix, or length of a vector."""
    return get_array_shape(M)[0]


def _float_dtype(M: np.ndarray):
    return np.result_type(M.dtype, DEFAULT_DTYPE)


# ============================================================================
# Constructors (in the backend of a reference array)
# ============================================================================


def eye(n: int, like: ArrayLike) -> ArrayLike:
    """
    Identity matrix of size n in the backend of `like`.

    Examples
    --------
    >>> eye(2, np.zeros((2, 2)))
    array([[1., 0.],
           [0., 1.]])
    """
    backend = get_backend(like)
    if backend == "numpy":
        return np.eye(n, dtype=_float_dtype(like))
    if backend == "torch":
        import torch

        return torch.eye(n, dtype=like.dtype, device=like.device)
    if backend == "jax":
        import jax.numpy as jnp

        return jnp.eye(n, dtype=like.dtype)
    import sympy as sp

    return sp.eye(n)


def zeros_matrix(shape: Tuple[int, int], like: ArrayLike) -> ArrayLike:
    """All-zero matrix of the given shape in the backend of `like`."""
    backend = get_backend(like)
    if backend == "numpy":
        return np.zeros(shape, dtype=_float_dtype(like))
    if backend == "torch":
        import torch

        return torch.zeros(shape, dtype=like.dtype, device=like.device)
    if backend == "jax":
        import jax.numpy as jnp

        return jnp.zeros(shape, dtype=like.dtype)
    import sympy as sp

    return sp.zeros(*shape)


def zeros_vector(n: int, like: ArrayLike) -> ArrayLike:
    """
    All-zero vector of length n in the backend of `like`.

    SymPy vectors are column matrices (n, 1).
    """
    if get_backend(like) == "sympy":
        import sympy as sp

        return sp.zeros(n, 1)
    return zeros_matrix((n,), like)


# ============================================================================
# Dense Primitives
# ============================================================================


def expm(M: ArrayLike) -> ArrayLike:
    """
    Matrix exponential exp(M).

    Examples
    --------
    >>> expm(np.array([[-1.0]]))
    array([[0.36787944]])
    """
    n = num_rows(M)
    backend = get_backend(M)
    if n == 0:
        return zeros_matrix((0, 0), M)
    if backend == "numpy":
        return scipy_linalg.expm(np.asarray(M, dtype=_float_dtype(M)))
    if backend == "torch":
        import torch

        return torch.linalg.matrix_exp(M)
    if backend == "jax":
        from jax.scipy.linalg import expm as jax_expm

        return jax_expm(M)
    return M.exp()


def inv(M: ArrayLike) -> ArrayLike:
    """Matrix inverse."""
    n = num_rows(M)
    backend = get_backend(M)
    if n == 0:
        return zeros_matrix((0, 0), M)
    if backend == "numpy":
        return np.linalg.inv(M)
    if backend == "torch":
        import torch

        return torch.linalg.inv(M)
    if backend == "jax":
        import jax.numpy as jnp

        return jnp.linalg.inv(M)
    return M.inv()


def matmul(X: ArrayLike, Y: ArrayLike) -> ArrayLike:
    """Matrix product X @ Y (matrix-vector when Y is a vector)."""
    return X @ Y


def matrix_rank(M: ArrayLike, tol: Optional[float] = None) -> int:
    """
    Rank of a matrix.

    Numeric backends are evaluated in NumPy via SVD (the rank is a
    validation, not part of any differentiable path). `tol` is the singular
    value threshold; None uses NumPy's default S.max() * max(M.shape) * eps.
    SymPy matrices use exact rank, which for symbolic entries is the
    generic rank.
    """
    n = num_rows(M)
    if n == 0:
        return 0
    backend = get_backend(M)
    if backend == "sympy":
        return int(M.rank())
    if backend == "torch":
        M_np = M.detach().cpu().numpy()
    else:
        M_np = np.asarray(M)
    return int(np.linalg.matrix_rank(M_np, tol=tol))


def has_full_rank(M: ArrayLike, tol: Optional[float] = None) -> bool:
    """True iff rank(M) equals its number of rows (empty matrices included)."""
    return matrix_rank(M, tol=tol) == num_rows(M)


__all__ = [
    "num_rows",
    "eye",
    "zeros_matrix",
    "zeros_vector",
    "expm",
    "inv",
    "matmul",
    "matrix_rank",
    "has_full_rank",
]
