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
System Base Classes
===================

Abstract interfaces for the system-description layer consumed by the
discretization core.

Architecture Overview
--------------------
AbstractSystem
    Immutable value object. Every concrete variant declares, explicitly and
    at class level, its ordered dynamics fields (subsequence of A, B, c, D)
    and its ordered set fields (subsequence of X, U, W). Nothing is
    discovered by introspection.

AbstractContinuousSystem / AbstractDiscreteSystem
    Time-domain markers. The correspondence registry pairs one variant of
    each kind.

AffineSystemBase
    Positional constructor (dynamics values first, then set values, both in
    declared order), eager shape validation, and matrix/set accessors.

Class Traits
------------
    dynamics_fields()  ordered dynamics field names
    set_fields()       ordered set field names
    isaffine()         dynamics decompose as Ax + Bu + c + Dw
    islinear()         affine without offset term
    iscontrolled()     has input matrix or input set
    isnoisy()          has noise matrix or noise set
    isconstrained()    has at least one constraint set
    iscontinuous() / isdiscrete()

Examples
--------
>>> class MyContinuousSystem(AffineSystemBase, AbstractContinuousSystem):
...     _DYNAMICS_FIELDS = ("A", "B")
...     _SET_FIELDS = ("U",)
>>>
>>> s = MyContinuousSystem(np.eye(2), np.ones((2, 1)), U)
>>> s.statedim, s.inputdim
(2, 1)
>>> s.inputset is U
True
"""

from abc import ABC
from typing import Any, ClassVar, Dict, Tuple

from affinesys.errors import DimensionMismatchError, MissingFieldError
from affinesys.types.core import (
    DYNAMICS_FIELD_ORDER,
    SET_FIELD_ORDER,
    ArrayLike,
    ConstraintSet,
    FieldNames,
    InputMatrix,
    NoiseMatrix,
    OffsetVector,
    StateMatrix,
)
from affinesys.types.utilities import get_array_shape, is_matrix, is_vector


def _is_subsequence(fields: FieldNames, order: FieldNames) -> bool:
    positions = []
    for name in fields:
        if name not in order:
            return False
        positions.append(order.index(name))
    return positions == sorted(positions) and len(set(positions)) == len(positions)


# ============================================================================
# Abstract System
# ============================================================================


class AbstractSystem(ABC):
    """
    Base class for all systems.

    Subclasses declare _DYNAMICS_FIELDS, _SET_FIELDS and _IS_AFFINE.
    Declarations are validated when the subclass is created, so a variant
    with misordered or unknown field names fails at import.

    Instances are immutable: attributes can only be assigned during
    construction.
    """

    _DYNAMICS_FIELDS: ClassVar[FieldNames] = ()
    _SET_FIELDS: ClassVar[FieldNames] = ()
    _IS_AFFINE: ClassVar[bool] = False
    _TIME_DOMAIN: ClassVar[str] = ""

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if not _is_subsequence(tuple(cls._DYNAMICS_FIELDS), DYNAMICS_FIELD_ORDER):
            raise TypeError(
                f"{cls.__name__}._DYNAMICS_FIELDS={cls._DYNAMICS_FIELDS} must be an ordered "
                f"subsequence of {DYNAMICS_FIELD_ORDER}"
            )
        if not _is_subsequence(tuple(cls._SET_FIELDS), SET_FIELD_ORDER):
            raise TypeError(
                f"{cls.__name__}._SET_FIELDS={cls._SET_FIELDS} must be an ordered "
                f"subsequence of {SET_FIELD_ORDER}"
            )
        if cls._DYNAMICS_FIELDS and "A" not in cls._DYNAMICS_FIELDS:
            raise TypeError(f"{cls.__name__} declares dynamics fields without a state matrix 'A'")

    # ========================================================================
    # Field Traits
    # ========================================================================

    @classmethod
    def dynamics_fields(cls) -> FieldNames:
        """Ordered names of the fields subject to discretization."""
        return tuple(cls._DYNAMICS_FIELDS)

    @classmethod
    def set_fields(cls) -> FieldNames:
        """Ordered names of the constraint-set fields."""
        return tuple(cls._SET_FIELDS)

    # ========================================================================
    # Structural Traits
    # ========================================================================

    @classmethod
    def isaffine(cls) -> bool:
        return cls._IS_AFFINE

    @classmethod
    def islinear(cls) -> bool:
        return cls._IS_AFFINE and "c" not in cls._DYNAMICS_FIELDS

    @classmethod
    def iscontrolled(cls) -> bool:
        return "B" in cls._DYNAMICS_FIELDS or "U" in cls._SET_FIELDS

    @classmethod
    def isnoisy(cls) -> bool:
        return "D" in cls._DYNAMICS_FIELDS or "W" in cls._SET_FIELDS

    @classmethod
    def isconstrained(cls) -> bool:
        return len(cls._SET_FIELDS) > 0

    @classmethod
    def iscontinuous(cls) -> bool:
        return cls._TIME_DOMAIN == "continuous"

    @classmethod
    def isdiscrete(cls) -> bool:
        return cls._TIME_DOMAIN == "discrete"

    # ========================================================================
    # Immutability
    # ========================================================================

    def __setattr__(self, name: str, value: Any):
        raise AttributeError(f"{self.__class__.__name__} is immutable; cannot set '{name}'")

    def __delattr__(self, name: str):
        raise AttributeError(f"{self.__class__.__name__} is immutable; cannot delete '{name}'")

    def _assign(self, name: str, value: Any):
        object.__setattr__(self, name, value)

    # ========================================================================
    # Dimensions (overridden by concrete bases)
    # ========================================================================

    @property
    def statedim(self) -> int:
        raise NotImplementedError

    @property
    def inputdim(self) -> int:
        return 0

    @property
    def noisedim(self) -> int:
        return 0


class AbstractContinuousSystem(AbstractSystem):
    """Continuous-time system: x' = f(x, u, w)."""

    _TIME_DOMAIN = "continuous"


class AbstractDiscreteSystem(AbstractSystem):
    """Discrete-time system: x[k+1] = f(x[k], u[k], w[k])."""

    _TIME_DOMAIN = "discrete"


# ============================================================================
# Affine Systems
# ============================================================================


class AffineSystemBase(AbstractSystem):
    """
    Shared implementation for the affine variant family.

    The constructor is positional over dynamics_fields() + set_fields():

        Variant(*dynamics_values, *set_values)

    Keyword arguments by field name are also accepted. Arrays and set
    objects are stored as given (no copy, no conversion), so identity is
    preserved through discretization.

    Raises
    ------
    MissingFieldError
        If a declared field is not supplied, or unknown/extra values are
    DimensionMismatchError
        If a matrix or vector does not match the state dimension
    """

    _IS_AFFINE = True

    def __init__(self, *values: Any, **named: Any):
        fields = self.dynamics_fields() + self.set_fields()

        if len(values) > len(fields):
            raise MissingFieldError(
                f"{self.__class__.__name__} takes {len(fields)} fields {fields}, "
                f"got {len(values)} positional values"
            )

        assigned: Dict[str, Any] = dict(zip(fields, values))
        for name, value in named.items():
            if name not in fields:
                raise MissingFieldError(
                    f"{self.__class__.__name__} has no field '{name}'; fields are {fields}"
                )
            if name in assigned:
                raise MissingFieldError(
                    f"{self.__class__.__name__} got multiple values for field '{name}'"
                )
            assigned[name] = value

        missing = [name for name in fields if name not in assigned]
        if missing:
            raise MissingFieldError(
                f"{self.__class__.__name__} is missing field(s) {missing}; fields are {fields}"
            )

        for name in fields:
            self._assign(name, assigned[name])

        self._validate_dimensions()

    def _validate_dimensions(self):
        name = self.__class__.__name__
        A = self.A
        if not is_matrix(A):
            raise DimensionMismatchError(f"{name}: state matrix A must be 2-D, got shape {get_array_shape(A)}")
        n_rows, n_cols = get_array_shape(A)
        if n_rows != n_cols:
            raise DimensionMismatchError(f"{name}: state matrix A must be square, got shape {(n_rows, n_cols)}")

        for field in ("B", "D"):
            if field in self.dynamics_fields():
                M = getattr(self, field)
                shape = get_array_shape(M)
                if len(shape) != 2 or shape[0] != n_rows:
                    raise DimensionMismatchError(
                        f"{name}: matrix {field} must have shape ({n_rows}, m), got {shape}"
                    )

        if "c" in self.dynamics_fields():
            c = self.c
            shape = get_array_shape(c)
            if not is_vector(c) or shape[0] != n_rows:
                raise DimensionMismatchError(
                    f"{name}: offset vector c must have length {n_rows}, got shape {shape}"
                )

    # ========================================================================
    # Dimensions
    # ========================================================================

    @property
    def statedim(self) -> int:
        return get_array_shape(self.A)[0]

    @property
    def inputdim(self) -> int:
        if "B" in self.dynamics_fields():
            return get_array_shape(self.B)[1]
        return 0

    @property
    def noisedim(self) -> int:
        if "D" in self.dynamics_fields():
            return get_array_shape(self.D)[1]
        return 0

    # ========================================================================
    # Accessors
    # ========================================================================

    def _field_or_error(self, field: str, label: str) -> Any:
        if field not in self.dynamics_fields() + self.set_fields():
            raise AttributeError(f"{self.__class__.__name__} has no {label}")
        return getattr(self, field)

    @property
    def state_matrix(self) -> StateMatrix:
        return self.A

    @property
    def input_matrix(self) -> InputMatrix:
        return self._field_or_error("B", "input matrix")

    @property
    def affine_term(self) -> OffsetVector:
        return self._field_or_error("c", "affine term")

    @property
    def noise_matrix(self) -> NoiseMatrix:
        return self._field_or_error("D", "noise matrix")

    @property
    def stateset(self) -> ConstraintSet:
        return self._field_or_error("X", "state constraint set")

    @property
    def inputset(self) -> ConstraintSet:
        return self._field_or_error("U", "input constraint set")

    @property
    def noiseset(self) -> ConstraintSet:
        return self._field_or_error("W", "noise constraint set")

    def parameters(self) -> Dict[str, ArrayLike]:
        """Dynamics fields by name, in declared order."""
        return {name: getattr(self, name) for name in self.dynamics_fields()}

    def __repr__(self) -> str:
        dims = f"statedim={self.statedim}"
        if self.inputdim:
            dims += f", inputdim={self.inputdim}"
        if self.noisedim:
            dims += f", noisedim={self.noisedim}"
        return f"{self.__class__.__name__}({dims})"


# ============================================================================
# Black-Box Systems
# ============================================================================


class BlackBoxSystemBase(AbstractSystem):
    """
    System given only by a vector field or map f and its state dimension.

    Not affine: there is no matrix decomposition to discretize, so these
    variants are rejected by discretize() before any numerical work.

    Constructor: Variant(f, statedim, *set_values)
    """

    _IS_AFFINE = False

    def __init__(self, f, statedim: int, *set_values: ConstraintSet):
        if not callable(f):
            raise TypeError(f"{self.__class__.__name__}: f must be callable")
        if len(set_values) != len(self.set_fields()):
            raise MissingFieldError(
                f"{self.__class__.__name__} expects set fields {self.set_fields()}, "
                f"got {len(set_values)} values"
            )
        self._assign("f", f)
        self._assign("_statedim", int(statedim))
        for name, value in zip(self.set_fields(), set_values):
            self._assign(name, value)

    @property
    def statedim(self) -> int:
        return self._statedim

    @property
    def stateset(self) -> ConstraintSet:
        if "X" not in self.set_fields():
            raise AttributeError(f"{self.__class__.__name__} has no state constraint set")
        return self.X

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(statedim={self.statedim})"


__all__ = [
    "AbstractSystem",
    "AbstractContinuousSystem",
    "AbstractDiscreteSystem",
    "AffineSystemBase",
    "BlackBoxSystemBase",
]
