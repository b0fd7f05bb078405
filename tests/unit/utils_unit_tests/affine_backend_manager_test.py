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
Unit Tests for BackendManager

Tests cover:
1. Backend availability detection
2. Backend detection
3. Conversion into the backend of a reference array
4. Error handling
"""

import numpy as np
import pytest
import sympy as sp
from numpy.testing import assert_allclose

torch_available = True
try:
    import torch
except ImportError:
    torch_available = False

jax_available = True
try:
    import jax.numpy as jnp
except ImportError:
    jax_available = False

from affinesys.utils import BackendManager


@pytest.fixture
def mgr():
    return BackendManager()


# ============================================================================
# Test Class 1: Availability
# ============================================================================


class TestAvailability:
    """Backend availability."""

    def test_core_backends_always_available(self, mgr):
        assert "numpy" in mgr.available_backends
        assert "sympy" in mgr.available_backends

    def test_optional_backends(self, mgr):
        assert mgr.check_available("torch") == torch_available
        assert mgr.check_available("jax") == jax_available

    def test_available_backends_is_a_copy(self, mgr):
        mgr.available_backends.append("fake")
        assert "fake" not in mgr.available_backends

    def test_require_invalid_backend(self, mgr):
        with pytest.raises(ValueError, match="Invalid backend"):
            mgr.require_backend("tensorflow")

    @pytest.mark.skipif(torch_available, reason="PyTorch installed")
    def test_require_missing_torch(self, mgr):
        with pytest.raises(RuntimeError, match="pip install torch"):
            mgr.require_backend("torch")

    def test_repr(self, mgr):
        assert repr(mgr).startswith("BackendManager(available=")


# ============================================================================
# Test Class 2: Detection
# ============================================================================


class TestDetection:
    def test_detect(self, mgr):
        assert mgr.detect(np.eye(2)) == "numpy"
        assert mgr.detect(sp.eye(2)) == "sympy"

    def test_detect_unknown(self, mgr):
        with pytest.raises(TypeError):
            mgr.detect("not an array")


# ============================================================================
# Test Class 3: Conversion
# ============================================================================


class TestConvertLike:
    """Conversion into the backend of a reference array."""

    def test_same_backend_is_identity(self, mgr):
        B = np.ones((2, 1))
        assert mgr.convert_like(B, np.eye(2)) is B

    def test_numpy_to_sympy(self, mgr):
        B = mgr.convert_like(np.array([[1.0, 2.0]]), sp.eye(2))
        assert isinstance(B, sp.MatrixBase)
        assert B.shape == (1, 2)

    def test_numpy_vector_to_sympy_column(self, mgr):
        c = mgr.convert_like(np.array([1.0, 2.0]), sp.eye(2))
        assert c.shape == (2, 1)

    def test_sympy_to_numpy(self, mgr):
        B = mgr.convert_like(sp.Matrix([[1, 2]]), np.eye(2))
        assert isinstance(B, np.ndarray)
        assert_allclose(B, [[1.0, 2.0]])

    def test_symbolic_sympy_to_numpy_fails(self, mgr):
        with pytest.raises(TypeError, match="symbolic"):
            mgr.convert_like(sp.Matrix([[sp.Symbol("x")]]), np.eye(1))

    @pytest.mark.skipif(not torch_available, reason="PyTorch not installed")
    def test_numpy_to_torch_follows_reference_dtype(self, mgr):
        ref = torch.eye(2, dtype=torch.float32)
        B = mgr.convert_like(np.ones((2, 1)), ref)
        assert isinstance(B, torch.Tensor)
        assert B.dtype == torch.float32
        assert B.device == ref.device

    @pytest.mark.skipif(not torch_available, reason="PyTorch not installed")
    def test_torch_to_numpy(self, mgr):
        B = mgr.convert_like(torch.ones(2, 1, requires_grad=True), np.eye(2))
        assert isinstance(B, np.ndarray)

    @pytest.mark.skipif(not jax_available, reason="JAX not installed")
    def test_numpy_to_jax(self, mgr):
        ref = jnp.eye(2)
        B = mgr.convert_like(np.ones((2, 1)), ref)
        assert not isinstance(B, np.ndarray)
        assert B.dtype == ref.dtype

    @pytest.mark.skipif(not jax_available, reason="JAX not installed")
    def test_jax_to_sympy(self, mgr):
        B = mgr.convert_like(jnp.ones((2, 1)), sp.eye(2))
        assert isinstance(B, sp.MatrixBase)
