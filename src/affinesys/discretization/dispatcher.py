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
Kernel Dispatcher
=================

Adapts any subset of dynamics values to the canonical 4-argument kernel
signature and trims the kernel output back to the supplied subset.

    apply_kernel(algorithm, dt, *values, fields=None)

Padding (n = rows of A):
- missing B → zeros (n, n)
- missing c → zeros (n,)
- missing D → zeros (n, n)

The padded values never leave the dispatcher; the returned tuple has one
entry per supplied value, in the order supplied.

Present Fields
--------------
Which slots the values occupy is given explicitly through `fields`, either a
FieldMask or a sequence of field names. Without `fields`, slots are inferred
from arity and shape:

=============  ==============
Values         Slots
=============  ==============
()             ()
(A,)           (A,)
(A, M)         (A, B)
(A, v)         (A, c)
(A, B, v)      (A, B, c)
(A, B, M)      (A, B, D)
(A, B, c, D)   (A, B, c, D)
=============  ==============

M is a matrix, v a vector. The (A, D) case is indistinguishable from (A, B)
by shape; both are discretized identically so the inferred slot does not
change the result.

Examples
--------
>>> Ad, Bd = apply_kernel(Exact, 0.1, A, B)
>>> (Ad,) = apply_kernel(Euler, 0.1, A)
>>> Ad, Dd = apply_kernel(Exact, 0.1, A, D, fields=FieldMask.A | FieldMask.D)
>>> apply_kernel(Exact, 0.1)
()
"""

import enum
import logging
from typing import Optional, Sequence, Tuple, Union

from affinesys.errors import DimensionMismatchError
from affinesys.types.core import DYNAMICS_FIELD_ORDER, ArrayLike, FieldNames, ScalarLike
from affinesys.types.utilities import get_array_shape, is_matrix, is_sympy, is_vector
from affinesys.utils import linalg_ops
from affinesys.utils.backend_manager import BackendManager

from .algorithms import DiscretizationAlgorithm

logger = logging.getLogger(__name__)

_backend_manager = BackendManager()


class FieldMask(enum.Flag):
    """
    Present dynamics fields.

    Examples
    --------
    >>> FieldMask.from_fields(("A", "c")).fields
    ('A', 'c')
    >>> (FieldMask.A | FieldMask.B).fields
    ('A', 'B')
    """

    A = enum.auto()
    B = enum.auto()
    C = enum.auto()
    D = enum.auto()

    @classmethod
    def from_fields(cls, fields: Sequence[str]) -> "FieldMask":
        """
        Build a mask from field names in canonical order.

        Raises
        ------
        ValueError
            If a name is unknown, repeated, or out of canonical order
        """
        fields = tuple(fields)
        unknown = [name for name in fields if name not in DYNAMICS_FIELD_ORDER]
        if unknown:
            raise ValueError(
                f"Unknown dynamics field(s) {unknown}. Choose from: {list(DYNAMICS_FIELD_ORDER)}"
            )
        if len(set(fields)) != len(fields):
            raise ValueError(f"Repeated dynamics field in {fields}")
        if list(fields) != [name for name in DYNAMICS_FIELD_ORDER if name in fields]:
            raise ValueError(
                f"Dynamics fields {fields} are not in canonical order {DYNAMICS_FIELD_ORDER}"
            )

        mask = cls(0)
        for name in fields:
            mask |= _FIELD_TO_FLAG[name]
        return mask

    @property
    def fields(self) -> FieldNames:
        """Present field names in canonical order."""
        return tuple(name for name in DYNAMICS_FIELD_ORDER if _FIELD_TO_FLAG[name] in self)


_FIELD_TO_FLAG = {"A": FieldMask.A, "B": FieldMask.B, "c": FieldMask.C, "D": FieldMask.D}


def infer_fields(*values: ArrayLike) -> FieldNames:
    """
    Infer the slots occupied by positional dynamics values.

    Raises
    ------
    ValueError
        If more than four values are given
    DimensionMismatchError
        If a value's shape matches no slot
    """
    nvals = len(values)
    if nvals > 4:
        raise ValueError(f"At most 4 dynamics values (A, B, c, D) can be given, got {nvals}")
    if nvals == 0:
        return ()
    if nvals == 1:
        return ("A",)
    if nvals == 4:
        return DYNAMICS_FIELD_ORDER

    last = values[-1]
    if nvals == 2:
        if is_vector(last):
            return ("A", "c")
        if is_matrix(last):
            return ("A", "B")
    else:
        if is_vector(last):
            return ("A", "B", "c")
        if is_matrix(last):
            return ("A", "B", "D")

    raise DimensionMismatchError(
        f"Cannot infer dynamics field for a value of shape {get_array_shape(last)}; "
        f"pass fields= explicitly"
    )


def _resolve_fields(
    values: Tuple[ArrayLike, ...], fields: Union[FieldMask, Sequence[str], None]
) -> FieldNames:
    if fields is None:
        names = infer_fields(*values)
    elif isinstance(fields, FieldMask):
        names = fields.fields
    else:
        names = FieldMask.from_fields(fields).fields

    if len(names) != len(values):
        raise ValueError(
            f"{len(values)} dynamics value(s) given for fields {names}"
        )
    if names and names[0] != "A":
        raise ValueError(f"Dynamics values must include the state matrix A, got fields {names}")
    return names


def _check_shapes(named: dict):
    A = named["A"]
    shape_A = get_array_shape(A)
    if len(shape_A) != 2 or shape_A[0] != shape_A[1]:
        raise DimensionMismatchError(f"A must be a square matrix, got shape {shape_A}")
    n = shape_A[0]

    for name in ("B", "D"):
        if name in named:
            shape = get_array_shape(named[name])
            if not is_matrix(named[name]) or shape[0] != n:
                raise DimensionMismatchError(
                    f"{name} must be a matrix with {n} rows, got shape {shape}"
                )
    if "c" in named:
        shape = get_array_shape(named["c"])
        if not is_vector(named["c"]) or shape[0] != n:
            raise DimensionMismatchError(f"c must be a vector of length {n}, got shape {shape}")


def apply_kernel(
    algorithm: DiscretizationAlgorithm,
    dt: ScalarLike,
    *values: ArrayLike,
    fields: Optional[Union[FieldMask, Sequence[str]]] = None,
) -> Tuple[ArrayLike, ...]:
    """
    Discretize any subset of (A, B, c, D) with a 4-argument kernel.

    Parameters
    ----------
    algorithm : DiscretizationAlgorithm
        Algorithm whose kernel is applied
    dt : ScalarLike
        Sampling period, passed to the kernel unchecked
    *values : ArrayLike
        0 to 4 dynamics values, A first
    fields : Optional[Union[FieldMask, Sequence[str]]]
        Slots occupied by `values`. Inferred from shapes if None.

    Returns
    -------
    Tuple[ArrayLike, ...]
        Discretized values, one per input value, in input order. Every
        output is in the backend of A; other inputs are converted to it.

    Raises
    ------
    ValueError
        If values are given without A, or `fields` disagrees with the
        number of values
    DimensionMismatchError
        If the shapes are inconsistent with A
    SingularStateMatrixError
        From the exact kernel when A is singular

    Examples
    --------
    >>> A = np.array([[-1.0]])
    >>> B = np.array([[1.0]])
    >>> Ad, Bd = apply_kernel(Exact, 1.0, A, B)
    >>> float(Ad[0, 0]), float(Bd[0, 0])
    (0.36787944117144233, 0.6321205588285577)
    """
    names = _resolve_fields(values, fields)
    if not names:
        return ()

    named = dict(zip(names, values))
    A = named["A"]
    for name in names[1:]:
        value = _backend_manager.convert_like(named[name], A)
        if name == "c" and is_sympy(named[name]) and not is_sympy(A):
            # SymPy column vector into a numeric backend
            value = value.reshape(-1)
        named[name] = value
    _check_shapes(named)

    n = linalg_ops.num_rows(A)
    B = named.get("B")
    c = named.get("c")
    D = named.get("D")
    if B is None:
        B = linalg_ops.zeros_matrix((n, n), A)
    if c is None:
        c = linalg_ops.zeros_vector(n, A)
    if D is None:
        D = linalg_ops.zeros_matrix((n, n), A)

    logger.debug(
        "Applying %s kernel to fields %s (n=%d, dt=%s)",
        type(algorithm).__name__,
        names,
        n,
        dt,
    )
    Ad, Bd, cd, Dd = algorithm.discretize(dt, A, B, c, D)

    result = {"A": Ad, "B": Bd, "c": cd, "D": Dd}
    return tuple(result[name] for name in names)


__all__ = ["FieldMask", "infer_fields", "apply_kernel"]
