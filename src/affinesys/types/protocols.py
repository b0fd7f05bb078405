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
Structural Subtyping Protocols

Protocols describing what the discretization core needs from its
collaborators, so that user-defined system classes and algorithms work
without inheriting from the library's base classes.

**FieldTraitsProtocol**:
    Any system exposing dynamics_fields() / set_fields() and the named
    attributes. This is all the parameter extractor relies on.

**AffineSystemProtocol**:
    FieldTraitsProtocol plus the isaffine() and iscontinuous() traits
    checked by discretize().

**DiscretizationAlgorithmProtocol**:
    Anything with the canonical 4-argument discretize(dt, A, B, c, D).

Examples
--------
>>> from affinesys.types.protocols import AffineSystemProtocol
>>>
>>> class MySystem:
...     @classmethod
...     def dynamics_fields(cls): return ("A",)
...     @classmethod
...     def set_fields(cls): return ()
...     @classmethod
...     def isaffine(cls): return True
...     @classmethod
...     def iscontinuous(cls): return True
...     def __init__(self, A): self.A = A
>>>
>>> isinstance(MySystem(np.eye(2)), AffineSystemProtocol)
True
"""

from typing import Protocol, runtime_checkable

from .core import (
    CanonicalParameters,
    FieldNames,
    InputMatrix,
    NoiseMatrix,
    OffsetVector,
    ScalarLike,
    StateMatrix,
)


@runtime_checkable
class FieldTraitsProtocol(Protocol):
    """Explicit, per-variant declaration of dynamics and set fields."""

    @classmethod
    def dynamics_fields(cls) -> FieldNames:
        """Ordered dynamics field names, a subsequence of ('A', 'B', 'c', 'D')."""
        ...

    @classmethod
    def set_fields(cls) -> FieldNames:
        """Ordered set field names, a subsequence of ('X', 'U', 'W')."""
        ...


@runtime_checkable
class AffineSystemProtocol(FieldTraitsProtocol, Protocol):
    """System whose affineness and time domain can be queried before extraction."""

    @classmethod
    def isaffine(cls) -> bool:
        """True iff the dynamics decompose as Ax + Bu + c + Dw."""
        ...

    @classmethod
    def iscontinuous(cls) -> bool:
        """True iff the system evolves in continuous time."""
        ...


@runtime_checkable
class DiscretizationAlgorithmProtocol(Protocol):
    """Canonical discretization transform."""

    def discretize(
        self,
        dt: ScalarLike,
        A: StateMatrix,
        B: InputMatrix,
        c: OffsetVector,
        D: NoiseMatrix,
    ) -> CanonicalParameters:
        """Return the discretized (A_d, B_d, c_d, D_d)."""
        ...


__all__ = [
    "FieldTraitsProtocol",
    "AffineSystemProtocol",
    "DiscretizationAlgorithmProtocol",
]
