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
Unit Tests for Backend-Dispatched Linear Algebra

Tests cover:
- Constructors in the backend of a reference array
- expm / inv / matrix_rank per backend
- Zero-dimensional matrices
"""

import numpy as np
import pytest
import sympy as sp
from numpy.testing import assert_allclose
from scipy.linalg import expm as scipy_expm

from affinesys.utils import linalg_ops


# ============================================================================
# Test: Constructors
# ============================================================================


class TestConstructors:
    """eye / zeros follow the reference backend."""

    def test_numpy_eye_is_float(self):
        eye = linalg_ops.eye(3, np.zeros((3, 3), dtype=int))
        assert eye.dtype == np.float64
        assert_allclose(eye, np.eye(3))

    def test_numpy_eye_keeps_complex(self):
        eye = linalg_ops.eye(2, np.zeros((2, 2), dtype=complex))
        assert eye.dtype == np.complex128

    def test_numpy_zeros(self):
        assert linalg_ops.zeros_matrix((2, 3), np.eye(2)).shape == (2, 3)
        assert linalg_ops.zeros_vector(2, np.eye(2)).shape == (2,)

    def test_sympy(self):
        ref = sp.eye(2)
        assert linalg_ops.eye(2, ref) == sp.eye(2)
        assert linalg_ops.zeros_matrix((2, 3), ref) == sp.zeros(2, 3)
        assert linalg_ops.zeros_vector(2, ref).shape == (2, 1)

    def test_torch(self):
        torch = pytest.importorskip("torch")
        ref = torch.zeros(2, 2, dtype=torch.float64)
        eye = linalg_ops.eye(2, ref)
        assert isinstance(eye, torch.Tensor)
        assert eye.dtype == torch.float64
        assert linalg_ops.zeros_vector(2, ref).shape == (2,)

    def test_jax(self):
        jnp = pytest.importorskip("jax.numpy")
        ref = jnp.zeros((2, 2))
        eye = linalg_ops.eye(2, ref)
        assert eye.dtype == ref.dtype
        assert linalg_ops.zeros_vector(2, ref).shape == (2,)

    def test_num_rows(self):
        assert linalg_ops.num_rows(np.zeros((4, 2))) == 4
        assert linalg_ops.num_rows(np.zeros(3)) == 3
        assert linalg_ops.num_rows(sp.zeros(5, 1)) == 5


# ============================================================================
# Test: Dense Primitives
# ============================================================================


class TestExpm:
    """Matrix exponential."""

    def test_numpy(self):
        A = np.array([[0.0, 1.0], [-2.0, -3.0]])
        assert_allclose(linalg_ops.expm(A), scipy_expm(A))

    def test_numpy_integer(self):
        assert_allclose(linalg_ops.expm(np.zeros((2, 2), dtype=int)), np.eye(2))

    def test_sympy_symbolic(self):
        t = sp.Symbol("t")
        result = linalg_ops.expm(sp.Matrix([[-t, 0], [0, -2 * t]]))
        assert sp.simplify(result[0, 0] - sp.exp(-t)) == 0
        assert sp.simplify(result[1, 1] - sp.exp(-2 * t)) == 0

    def test_torch(self):
        torch = pytest.importorskip("torch")
        A = np.array([[0.0, 1.0], [-2.0, -3.0]])
        result = linalg_ops.expm(torch.tensor(A))
        assert isinstance(result, torch.Tensor)
        assert_allclose(result.numpy(), scipy_expm(A), rtol=1e-10)

    def test_jax(self):
        jnp = pytest.importorskip("jax.numpy")
        A = np.array([[0.0, 1.0], [-2.0, -3.0]])
        result = linalg_ops.expm(jnp.asarray(A))
        assert_allclose(np.asarray(result), scipy_expm(A), rtol=1e-4, atol=1e-6)

    def test_empty(self):
        assert linalg_ops.expm(np.zeros((0, 0))).shape == (0, 0)


class TestInv:
    """Matrix inverse."""

    def test_numpy(self):
        A = np.array([[2.0, 0.0], [0.0, 4.0]])
        assert_allclose(linalg_ops.inv(A), np.diag([0.5, 0.25]))

    def test_sympy(self):
        a = sp.Symbol("a", nonzero=True)
        assert linalg_ops.inv(sp.Matrix([[a]])) == sp.Matrix([[1 / a]])

    def test_empty(self):
        assert linalg_ops.inv(np.zeros((0, 0))).shape == (0, 0)


class TestRank:
    """Rank and full-rank checks."""

    def test_numpy(self):
        assert linalg_ops.matrix_rank(np.eye(3)) == 3
        assert linalg_ops.matrix_rank(np.array([[1.0, 2.0], [2.0, 4.0]])) == 1
        assert linalg_ops.matrix_rank(np.zeros((2, 2))) == 0

    def test_tolerance(self):
        A = np.diag([1.0, 1e-9])
        assert linalg_ops.matrix_rank(A) == 2
        assert linalg_ops.matrix_rank(A, tol=1e-6) == 1

    def test_sympy(self):
        a = sp.Symbol("a")
        assert linalg_ops.matrix_rank(sp.Matrix([[a, 0], [0, 1]])) == 2
        assert linalg_ops.matrix_rank(sp.Matrix([[1, 2], [2, 4]])) == 1

    def test_torch_with_grad(self):
        torch = pytest.importorskip("torch")
        A = torch.eye(2, dtype=torch.float64, requires_grad=True)
        assert linalg_ops.matrix_rank(A) == 2

    def test_full_rank(self):
        assert linalg_ops.has_full_rank(np.eye(2))
        assert not linalg_ops.has_full_rank(np.zeros((2, 2)))

    def test_empty_is_full_rank(self):
        assert linalg_ops.matrix_rank(np.zeros((0, 0))) == 0
        assert linalg_ops.has_full_rank(np.zeros((0, 0)))


class TestMatmul:
    def test_matrix_vector(self):
        assert_allclose(linalg_ops.matmul(np.eye(2) * 2, np.ones(2)), [2.0, 2.0])

    def test_sympy(self):
        assert linalg_ops.matmul(sp.eye(2), sp.Matrix([1, 2])) == sp.Matrix([1, 2])
