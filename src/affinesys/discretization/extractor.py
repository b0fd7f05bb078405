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
Parameter Extractor

Pulls the dynamics values and the constraint sets out of an affine system,
in the order the system's variant declares them.

Any object satisfying FieldTraitsProtocol (dynamics_fields / set_fields
classmethods plus an isaffine trait) can be extracted from, whether or not
it inherits from the affinesys base classes.

Examples
--------
>>> sys_c = ConstrainedLinearControlContinuousSystem(A, B, X, U)
>>> extract_parameters(sys_c)
((A, B), (X, U))
>>> extract_field_names(sys_c)
('A', 'B')
"""

from typing import Any, Tuple

from affinesys.errors import MissingFieldError, NotAffineError
from affinesys.systems.traits import isaffine
from affinesys.types.core import DynamicsValues, FieldNames, SetValues


def _declared_fields(system: Any) -> Tuple[FieldNames, FieldNames]:
    try:
        dynamics_fields = tuple(system.dynamics_fields())
        set_fields = tuple(system.set_fields())
    except AttributeError:
        raise MissingFieldError(
            f"{type(system).__name__} does not declare dynamics_fields() and set_fields()"
        ) from None
    return dynamics_fields, set_fields


def _collect(system: Any, fields: FieldNames) -> tuple:
    missing = [name for name in fields if not hasattr(system, name)]
    if missing:
        raise MissingFieldError(
            f"{type(system).__name__} declares field(s) {missing} but does not define them"
        )
    return tuple(getattr(system, name) for name in fields)


def extract_field_names(system: Any) -> FieldNames:
    """
    Ordered names of the system's dynamics fields.

    Raises
    ------
    MissingFieldError
        If the system does not declare its fields
    """
    return _declared_fields(system)[0]


def extract_parameters(system: Any) -> Tuple[DynamicsValues, SetValues]:
    """
    Extract dynamics values and constraint sets from an affine system.

    Parameters
    ----------
    system : AffineSystemProtocol
        System to extract from

    Returns
    -------
    Tuple[DynamicsValues, SetValues]
        (dynamics_values, set_values), each ordered as declared by the
        system's variant. Set objects are returned as-is.

    Raises
    ------
    NotAffineError
        If the system is not affine
    MissingFieldError
        If a declared field is not present on the system, or the system
        does not declare its fields at all

    Examples
    --------
    >>> sys_c = AffineContinuousSystem(np.eye(2), np.ones(2))
    >>> dyn, sets = extract_parameters(sys_c)
    >>> len(dyn), sets
    (2, ())
    """
    if not isaffine(system):
        raise NotAffineError(
            f"{type(system).__name__} is not affine; only systems of the form "
            f"x' = Ax + Bu + c + Dw can be discretized"
        )

    dynamics_fields, set_fields = _declared_fields(system)
    return _collect(system, dynamics_fields), _collect(system, set_fields)


__all__ = ["extract_parameters", "extract_field_names"]
