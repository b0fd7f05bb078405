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
Discretization Algorithms
=========================

Algorithm tags and their kernels. Every algorithm implements one canonical
transform of the full parameter set of the affine system

    dx/dt = A x + B u + c + D w

into the parameters of its discrete-time equivalent

    x[k+1] = Ad x[k] + Bd u[k] + cd + Dd w[k]

Missing parameters are padded with zeros by the dispatcher before a kernel
is called, so kernels never see partial input.

Built-in Algorithms
-------------------
ExactDiscretization (Exact)
    Integrates the ODE over [t, t + dt] with u, w held constant:

        Ad = expm(A dt)
        Bd = A⁻¹ (Ad - I) B
        cd = A⁻¹ (Ad - I) c
        Dd = A⁻¹ (Ad - I) D

    Exact for any dt, requires A invertible. O(n³).

EulerDiscretization (Euler)
    First-order truncation of the exact result:

        Ad = I + dt A,  Bd = dt B,  cd = dt c,  Dd = dt D

    No invertibility requirement. O(n²).

Adding an Algorithm
-------------------
>>> class TustinDiscretization(DiscretizationAlgorithm):
...     name = "tustin"
...     def discretize(self, dt, A, B, c, D):
...         ...
...         return Ad, Bd, cd, Dd
>>>
>>> register_algorithm("tustin", TustinDiscretization())
>>> sys_d = discretize(sys_c, 0.1, algorithm="tustin")

References
----------
https://en.wikipedia.org/wiki/Discretization#Discretization_of_linear_state_space_models
"""

from abc import ABC, abstractmethod
from typing import ClassVar, Optional

from affinesys.config import DEFAULT_RANK_TOL
from affinesys.errors import SingularStateMatrixError
from affinesys.types.core import (
    CanonicalParameters,
    InputMatrix,
    NoiseMatrix,
    OffsetVector,
    ScalarLike,
    StateMatrix,
)
from affinesys.utils import linalg_ops


class DiscretizationAlgorithm(ABC):
    """
    Abstract base for discretization algorithms.

    Instances are immutable, stateless tags: two instances of the same
    class with the same options compare equal and hash equal.
    """

    name: ClassVar[str] = ""

    __slots__ = ()

    @abstractmethod
    def discretize(
        self,
        dt: ScalarLike,
        A: StateMatrix,
        B: InputMatrix,
        c: OffsetVector,
        D: NoiseMatrix,
    ) -> CanonicalParameters:
        """
        Canonical 4-argument transform.

        Parameters
        ----------
        dt : ScalarLike
            Sampling period
        A : StateMatrix
            State matrix (n, n)
        B : InputMatrix
            Input matrix (n, m)
        c : OffsetVector
            Offset vector (n,)
        D : NoiseMatrix
            Noise matrix (n, p)

        Returns
        -------
        CanonicalParameters
            (Ad, Bd, cd, Dd), each in the backend of A
        """

    def _options(self) -> tuple:
        return ()

    def __eq__(self, other) -> bool:
        return type(self) is type(other) and self._options() == other._options()

    def __hash__(self) -> int:
        return hash((type(self), self._options()))

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class ExactDiscretization(DiscretizationAlgorithm):
    """
    Exact discretization via the matrix exponential.

    Parameters
    ----------
    rank_tol : Optional[float]
        Singular value threshold used to decide whether A is invertible.
        None uses NumPy's default tolerance.

    Raises
    ------
    SingularStateMatrixError
        From discretize() when rank(A) < n

    Examples
    --------
    >>> Ad, Bd, cd, Dd = Exact.discretize(
    ...     1.0, np.array([[-1.0]]), np.array([[1.0]]), np.zeros(1), np.zeros((1, 1))
    ... )
    >>> Ad
    array([[0.36787944]])
    >>> Bd
    array([[0.63212056]])
    """

    name = "exact"

    __slots__ = ("_rank_tol",)

    def __init__(self, rank_tol: Optional[float] = DEFAULT_RANK_TOL):
        object.__setattr__(self, "_rank_tol", rank_tol)

    @property
    def rank_tol(self) -> Optional[float]:
        return self._rank_tol

    def _options(self) -> tuple:
        return (self._rank_tol,)

    def discretize(
        self,
        dt: ScalarLike,
        A: StateMatrix,
        B: InputMatrix,
        c: OffsetVector,
        D: NoiseMatrix,
    ) -> CanonicalParameters:
        n = linalg_ops.num_rows(A)
        if not linalg_ops.has_full_rank(A, tol=self._rank_tol):
            raise SingularStateMatrixError(
                f"Exact discretization for a singular state matrix (rank "
                f"{linalg_ops.matrix_rank(A, tol=self._rank_tol)} < {n}) is not "
                f"implemented; use the EulerDiscretization algorithm"
            )

        Ad = linalg_ops.expm(A * dt)
        M = linalg_ops.matmul(linalg_ops.inv(A), Ad - linalg_ops.eye(n, A))
        Bd = linalg_ops.matmul(M, B)
        cd = linalg_ops.matmul(M, c)
        Dd = linalg_ops.matmul(M, D)
        return Ad, Bd, cd, Dd

    def __repr__(self) -> str:
        if self._rank_tol is None:
            return "ExactDiscretization()"
        return f"ExactDiscretization(rank_tol={self._rank_tol})"


class EulerDiscretization(DiscretizationAlgorithm):
    """
    Forward Euler (first-order) discretization.

    Examples
    --------
    >>> Ad, Bd, cd, Dd = Euler.discretize(
    ...     1.0, np.zeros((2, 2)), np.zeros((2, 2)), np.zeros(2), np.zeros((2, 2))
    ... )
    >>> Ad
    array([[1., 0.],
           [0., 1.]])
    """

    name = "euler"

    __slots__ = ()

    def discretize(
        self,
        dt: ScalarLike,
        A: StateMatrix,
        B: InputMatrix,
        c: OffsetVector,
        D: NoiseMatrix,
    ) -> CanonicalParameters:
        n = linalg_ops.num_rows(A)
        Ad = linalg_ops.eye(n, A) + A * dt
        Bd = B * dt
        cd = c * dt
        Dd = D * dt
        return Ad, Bd, cd, Dd


Exact = ExactDiscretization()
"""Default exact algorithm tag."""

Euler = EulerDiscretization()
"""Default Euler algorithm tag."""


__all__ = [
    "DiscretizationAlgorithm",
    "ExactDiscretization",
    "EulerDiscretization",
    "Exact",
    "Euler",
]
