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
Discrete-Time System Variants

The first-order affine family x[k+1] = Ax + Bu + c + Dw, one class per
combination of present fields, plus the black-box variants.

Naming follows the structure of the dynamics:
    [Noisy][Constrained](Linear|Affine)[Control]DiscreteSystem

Examples
--------
>>> A = np.array([[0.0, 1.0], [-2.0, -3.0]])
>>> B = np.array([[0.0], [1.0]])
>>> sys_d = LinearControlDiscreteSystem(A, B)
>>> sys_d.statedim, sys_d.inputdim
(2, 1)
>>>
>>> sys_d = ConstrainedLinearControlDiscreteSystem(A, B, X, U)
>>> sys_d.set_fields()
('X', 'U')
"""

from .base.system_base import (
    AbstractDiscreteSystem,
    AffineSystemBase,
    BlackBoxSystemBase,
)


class LinearDiscreteSystem(AffineSystemBase, AbstractDiscreteSystem):
    """x[k+1] = Ax"""

    _DYNAMICS_FIELDS = ("A",)


class AffineDiscreteSystem(AffineSystemBase, AbstractDiscreteSystem):
    """x[k+1] = Ax + c"""

    _DYNAMICS_FIELDS = ("A", "c")


class LinearControlDiscreteSystem(AffineSystemBase, AbstractDiscreteSystem):
    """x[k+1] = Ax + Bu"""

    _DYNAMICS_FIELDS = ("A", "B")


class AffineControlDiscreteSystem(AffineSystemBase, AbstractDiscreteSystem):
    """x[k+1] = Ax + Bu + c"""

    _DYNAMICS_FIELDS = ("A", "B", "c")


class ConstrainedLinearDiscreteSystem(AffineSystemBase, AbstractDiscreteSystem):
    """x[k+1] = Ax, x ∈ X"""

    _DYNAMICS_FIELDS = ("A",)
    _SET_FIELDS = ("X",)


class ConstrainedAffineDiscreteSystem(AffineSystemBase, AbstractDiscreteSystem):
    """x[k+1] = Ax + c, x ∈ X"""

    _DYNAMICS_FIELDS = ("A", "c")
    _SET_FIELDS = ("X",)


class ConstrainedLinearControlDiscreteSystem(AffineSystemBase, AbstractDiscreteSystem):
    """x[k+1] = Ax + Bu, x ∈ X, u ∈ U"""

    _DYNAMICS_FIELDS = ("A", "B")
    _SET_FIELDS = ("X", "U")


class ConstrainedAffineControlDiscreteSystem(AffineSystemBase, AbstractDiscreteSystem):
    """x[k+1] = Ax + Bu + c, x ∈ X, u ∈ U"""

    _DYNAMICS_FIELDS = ("A", "B", "c")
    _SET_FIELDS = ("X", "U")


class NoisyLinearDiscreteSystem(AffineSystemBase, AbstractDiscreteSystem):
    """x[k+1] = Ax + Dw"""

    _DYNAMICS_FIELDS = ("A", "D")


class NoisyConstrainedLinearDiscreteSystem(AffineSystemBase, AbstractDiscreteSystem):
    """x[k+1] = Ax + Dw, x ∈ X, w ∈ W"""

    _DYNAMICS_FIELDS = ("A", "D")
    _SET_FIELDS = ("X", "W")


class NoisyLinearControlDiscreteSystem(AffineSystemBase, AbstractDiscreteSystem):
    """x[k+1] = Ax + Bu + Dw"""

    _DYNAMICS_FIELDS = ("A", "B", "D")


class NoisyConstrainedLinearControlDiscreteSystem(AffineSystemBase, AbstractDiscreteSystem):
    """x[k+1] = Ax + Bu + Dw, x ∈ X, u ∈ U, w ∈ W"""

    _DYNAMICS_FIELDS = ("A", "B", "D")
    _SET_FIELDS = ("X", "U", "W")


class NoisyAffineControlDiscreteSystem(AffineSystemBase, AbstractDiscreteSystem):
    """x[k+1] = Ax + Bu + c + Dw"""

    _DYNAMICS_FIELDS = ("A", "B", "c", "D")


class NoisyConstrainedAffineControlDiscreteSystem(AffineSystemBase, AbstractDiscreteSystem):
    """x[k+1] = Ax + Bu + c + Dw, x ∈ X, u ∈ U, w ∈ W"""

    _DYNAMICS_FIELDS = ("A", "B", "c", "D")
    _SET_FIELDS = ("X", "U", "W")


class BlackBoxDiscreteSystem(BlackBoxSystemBase, AbstractDiscreteSystem):
    """x[k+1] = f(x)"""


class ConstrainedBlackBoxDiscreteSystem(BlackBoxSystemBase, AbstractDiscreteSystem):
    """x[k+1] = f(x), x ∈ X"""

    _SET_FIELDS = ("X",)


DISCRETE_VARIANTS = (
    LinearDiscreteSystem,
    AffineDiscreteSystem,
    LinearControlDiscreteSystem,
    AffineControlDiscreteSystem,
    ConstrainedLinearDiscreteSystem,
    ConstrainedAffineDiscreteSystem,
    ConstrainedLinearControlDiscreteSystem,
    ConstrainedAffineControlDiscreteSystem,
    NoisyLinearDiscreteSystem,
    NoisyConstrainedLinearDiscreteSystem,
    NoisyLinearControlDiscreteSystem,
    NoisyConstrainedLinearControlDiscreteSystem,
    NoisyAffineControlDiscreteSystem,
    NoisyConstrainedAffineControlDiscreteSystem,
    BlackBoxDiscreteSystem,
    ConstrainedBlackBoxDiscreteSystem,
)


__all__ = [cls.__name__ for cls in DISCRETE_VARIANTS] + ["DISCRETE_VARIANTS"]
