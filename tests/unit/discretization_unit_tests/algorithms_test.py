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
Unit Tests for Discretization Algorithms

Tests cover:
- Canonical 4-argument kernels (Exact, Euler)
- Singular state matrices
- Tag semantics (immutability, equality, hashing)
- Structural protocol conformance
"""

import numpy as np
import pytest
from numpy.testing import assert_allclose
from scipy.linalg import expm

from affinesys.discretization import (
    DiscretizationAlgorithm,
    Euler,
    EulerDiscretization,
    Exact,
    ExactDiscretization,
)
from affinesys.errors import SingularStateMatrixError
from affinesys.types import DiscretizationAlgorithmProtocol


@pytest.fixture
def canonical():
    A = np.array([[0.0, 1.0], [-2.0, -3.0]])
    B = np.array([[0.0], [1.0]])
    c = np.array([0.0, 9.81])
    D = np.array([[0.0], [0.5]])
    return A, B, c, D


# ============================================================================
# Test: Exact Kernel
# ============================================================================


class TestExactKernel:
    """Matrix-exponential discretization."""

    def test_state_matrix(self, canonical):
        A, B, c, D = canonical
        Ad, _, _, _ = Exact.discretize(0.1, A, B, c, D)
        assert_allclose(Ad, expm(0.1 * A))

    def test_common_factor(self, canonical):
        A, B, c, D = canonical
        Ad, Bd, cd, Dd = Exact.discretize(0.1, A, B, c, D)
        M = np.linalg.inv(A) @ (Ad - np.eye(2))

        assert_allclose(Bd, M @ B)
        assert_allclose(cd, M @ c)
        assert_allclose(Dd, M @ D)

    def test_step_response_steady_state(self):
        # x' = -x + u: with u = 1 held, x converges to 1
        A = np.array([[-1.0]])
        B = np.array([[1.0]])
        Ad, Bd, _, _ = Exact.discretize(0.5, A, B, np.zeros(1), np.zeros((1, 1)))

        x = np.zeros(1)
        for _ in range(200):
            x = Ad @ x + Bd @ np.ones(1)
        assert_allclose(x, [1.0], rtol=1e-10)

    def test_singular(self):
        Z = np.zeros((2, 2))
        with pytest.raises(SingularStateMatrixError, match=r"rank 0 < 2"):
            Exact.discretize(1.0, Z, Z, np.zeros(2), Z)

    def test_rank_deficient(self):
        A = np.array([[1.0, 2.0], [2.0, 4.0]])
        with pytest.raises(SingularStateMatrixError, match=r"rank 1 < 2"):
            Exact.discretize(1.0, A, np.eye(2), np.zeros(2), np.eye(2))

    def test_integer_input(self):
        A = np.array([[-1, 0], [0, -2]])
        Ad, Bd, cd, Dd = Exact.discretize(1, A, np.eye(2, dtype=int), np.zeros(2), np.eye(2))
        assert Ad.dtype == np.float64
        assert_allclose(Ad, np.diag(np.exp([-1.0, -2.0])))


# ============================================================================
# Test: Euler Kernel
# ============================================================================


class TestEulerKernel:
    """First-order discretization."""

    def test_values(self, canonical):
        A, B, c, D = canonical
        Ad, Bd, cd, Dd = Euler.discretize(0.1, A, B, c, D)

        assert_allclose(Ad, np.eye(2) + 0.1 * A)
        assert_allclose(Bd, 0.1 * B)
        assert_allclose(cd, 0.1 * c)
        assert_allclose(Dd, 0.1 * D)

    def test_singular_allowed(self):
        Z = np.zeros((2, 2))
        Ad, Bd, cd, Dd = Euler.discretize(1.0, Z, Z, np.zeros(2), Z)
        assert_allclose(Ad, np.eye(2))
        assert_allclose(Bd, Z)

    def test_inputs_unchanged(self, canonical):
        A, B, c, D = canonical
        copies = [v.copy() for v in canonical]
        Euler.discretize(0.1, A, B, c, D)
        for original, copy in zip(canonical, copies):
            assert_allclose(original, copy)


# ============================================================================
# Test: Tag Semantics
# ============================================================================


class TestTags:
    """Algorithms are immutable value-like tags."""

    def test_equality_by_type(self):
        assert ExactDiscretization() == Exact
        assert EulerDiscretization() == Euler
        assert Exact != Euler

    def test_hashable(self):
        assert hash(ExactDiscretization()) == hash(Exact)
        assert len({Exact, ExactDiscretization(), Euler}) == 2

    def test_options_participate_in_equality(self):
        assert ExactDiscretization(rank_tol=1e-8) != Exact
        assert ExactDiscretization(rank_tol=1e-8) == ExactDiscretization(rank_tol=1e-8)

    def test_immutable(self):
        with pytest.raises(AttributeError, match="immutable"):
            Exact.name = "other"
        with pytest.raises(AttributeError):
            Exact._rank_tol = 1.0

    def test_repr(self):
        assert repr(Exact) == "ExactDiscretization()"
        assert repr(Euler) == "EulerDiscretization()"
        assert repr(ExactDiscretization(rank_tol=0.001)) == "ExactDiscretization(rank_tol=0.001)"

    def test_names(self):
        assert Exact.name == "exact"
        assert Euler.name == "euler"
        assert Exact.rank_tol is None

    def test_abstract(self):
        with pytest.raises(TypeError):
            DiscretizationAlgorithm()

    def test_protocol(self):
        assert isinstance(Exact, DiscretizationAlgorithmProtocol)
        assert isinstance(Euler, DiscretizationAlgorithmProtocol)

    def test_subclass(self):
        class Doubling(DiscretizationAlgorithm):
            def discretize(self, dt, A, B, c, D):
                return 2 * A, 2 * B, 2 * c, 2 * D

        algorithm = Doubling()
        assert algorithm == Doubling()
        assert algorithm != Euler
        Ad, _, _, _ = algorithm.discretize(0.1, np.eye(1), np.eye(1), np.zeros(1), np.eye(1))
        assert_allclose(Ad, [[2.0]])
