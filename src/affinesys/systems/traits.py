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
Trait Predicates and Dimension Queries

Function forms of the class traits, accepting either a system instance or a
system class. Objects that only satisfy the structural protocols (and do not
inherit from AbstractSystem) are supported as long as they define the
corresponding classmethod.

Examples
--------
>>> isaffine(LinearContinuousSystem)
True
>>> isaffine(BlackBoxContinuousSystem(f, 2))
False
>>> statedim(LinearControlContinuousSystem(np.eye(3), np.ones((3, 2))))
3
"""

from typing import Any


def _trait(system: Any, name: str) -> bool:
    method = getattr(system, name, None)
    if method is None:
        return False
    return bool(method())


def isaffine(system: Any) -> bool:
    """True iff the dynamics decompose as Ax + Bu + c + Dw."""
    return _trait(system, "isaffine")


def islinear(system: Any) -> bool:
    return _trait(system, "islinear")


def iscontrolled(system: Any) -> bool:
    return _trait(system, "iscontrolled")


def isnoisy(system: Any) -> bool:
    return _trait(system, "isnoisy")


def isconstrained(system: Any) -> bool:
    return _trait(system, "isconstrained")


def iscontinuous(system: Any) -> bool:
    return _trait(system, "iscontinuous")


def isdiscrete(system: Any) -> bool:
    return _trait(system, "isdiscrete")


def statedim(system: Any) -> int:
    return system.statedim


def inputdim(system: Any) -> int:
    return system.inputdim


def noisedim(system: Any) -> int:
    return system.noisedim


__all__ = [
    "isaffine",
    "islinear",
    "iscontrolled",
    "isnoisy",
    "isconstrained",
    "iscontinuous",
    "isdiscrete",
    "statedim",
    "inputdim",
    "noisedim",
]
