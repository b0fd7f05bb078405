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
Backend Manager for Multi-Backend Array Handling

Handles:
- Backend detection from array types
- Backend availability checking
- Conversion of an array into the backend of a reference array

The discretization core never picks a backend on its own: the state matrix
decides, and the remaining dynamics parameters are brought into the same
backend before a kernel runs.
"""

from typing import List

import numpy as np

from affinesys.types.backends import Backend, validate_backend
from affinesys.types.core import ArrayLike
from affinesys.types.utilities import get_backend


class BackendManager:
    """
    Manages backend detection, availability and conversion.

    Supports NumPy, PyTorch, JAX and SymPy.

    Example:
        >>> mgr = BackendManager()
        >>> mgr.detect(np.eye(2))
        'numpy'
        >>> B = mgr.convert_like(np.ones((2, 1)), sympy.eye(2))
        >>> type(B)
        <class 'sympy.matrices.dense.MutableDenseMatrix'>
    """

    def __init__(self):
        self._available_backends = self._detect_available_backends()

    # ========================================================================
    # Properties
    # ========================================================================

    @property
    def available_backends(self) -> List[Backend]:
        """Get list of available backends"""
        return self._available_backends.copy()

    # ========================================================================
    # Backend Detection
    # ========================================================================

    def _detect_available_backends(self) -> List[Backend]:
        """
        Detect which backends are available in the current environment.

        Returns:
            List of available backend names
        """
        # NumPy and SymPy are core dependencies
        available: List[Backend] = ["numpy", "sympy"]

        try:
            import torch  # noqa: F401

            available.append("torch")
        except ImportError:
            pass

        try:
            import jax  # noqa: F401

            available.append("jax")
        except ImportError:
            pass

        return available

    def detect(self, array: ArrayLike) -> Backend:
        """
        Detect backend from array type.

        Args:
            array: Input array/tensor/matrix

        Returns:
            Backend identifier

        Raises:
            TypeError: If array type is not recognized
        """
        return get_backend(array)

    def check_available(self, backend: Backend) -> bool:
        """
        Check if a backend is available.

        Args:
            backend: Backend name to check

        Returns:
            True if backend is available, False otherwise
        """
        return backend in self._available_backends

    def require_backend(self, backend: Backend):
        """
        Raise error if backend is not available.

        Raises:
            RuntimeError: If backend is not available
        """
        backend = validate_backend(backend)
        if not self.check_available(backend):
            if backend == "torch":
                msg = "PyTorch backend not available. Install with: pip install torch"
            elif backend == "jax":
                msg = "JAX backend not available. Install with: pip install jax jaxlib"
            else:
                msg = f"Backend '{backend}' not available"

            raise RuntimeError(msg)

    # ========================================================================
    # Array Conversion
    # ========================================================================

    def convert_like(self, array: ArrayLike, reference: ArrayLike) -> ArrayLike:
        """
        Convert array to the backend of a reference array.

        No-op (same object returned) when both already share a backend.
        Torch results take the reference's dtype and device.

        Args:
            array: Array to convert
            reference: Array whose backend is the target

        Returns:
            Array in the reference's backend

        Example:
            >>> mgr = BackendManager()
            >>> A = torch.eye(2, dtype=torch.float64)
            >>> c = mgr.convert_like(np.zeros(2), A)
            >>> c.dtype
            torch.float64
        """
        source = self.detect(array)
        target = self.detect(reference)

        if source == target:
            return array

        self.require_backend(target)

        if target == "sympy":
            import sympy as sp

            return sp.Matrix(self._to_numpy(array, source).tolist())

        array_np = self._to_numpy(array, source)

        if target == "numpy":
            return array_np

        if target == "torch":
            import torch

            return torch.as_tensor(array_np, dtype=reference.dtype, device=reference.device)

        if target == "jax":
            import jax.numpy as jnp

            return jnp.asarray(array_np, dtype=reference.dtype)

        raise TypeError(f"Cannot convert {type(array)} to backend '{target}'")

    def _to_numpy(self, array: ArrayLike, source: Backend) -> np.ndarray:
        if source == "numpy":
            return array
        if source == "torch":
            return array.detach().cpu().numpy()
        if source == "jax":
            return np.asarray(array)
        if source == "sympy":
            # Symbolic entries cannot be represented numerically
            if array.free_symbols:
                raise TypeError(
                    "Cannot convert a symbolic SymPy matrix to a numeric backend; "
                    "make the state matrix symbolic instead"
                )
            return np.array(array.tolist(), dtype=float)
        raise TypeError(f"Unknown source array type: {type(array)}")

    def __repr__(self) -> str:
        return f"BackendManager(available={self._available_backends})"


__all__ = ["BackendManager"]
