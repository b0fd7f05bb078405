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
Continuous-Time System Variants

The first-order affine family dx/dt = Ax + Bu + c + Dw, one class per
combination of present fields, plus the black-box variants.

Naming follows the structure of the dynamics:
    [Noisy][Constrained](Linear|Affine)[Control]ContinuousSystem

Examples
--------
>>> A = np.array([[0.0, 1.0], [-2.0, -3.0]])
>>> B = np.array([[0.0], [1.0]])
>>> sys_c = LinearControlContinuousSystem(A, B)
>>> sys_c.statedim, sys_c.inputdim
(2, 1)
>>>
>>> sys_c = ConstrainedLinearControlContinuousSystem(A, B, X, U)
>>> sys_c.set_fields()
('X', 'U')
"""

from .base.system_base import (
    AbstractContinuousSystem,
    AffineSystemBase,
    BlackBoxSystemBase,
)


class LinearContinuousSystem(AffineSystemBase, AbstractContinuousSystem):
    """dx/dt = Ax"""

    _DYNAMICS_FIELDS = ("A",)


class AffineContinuousSystem(AffineSystemBase, AbstractContinuousSystem):
    """dx/dt = Ax + c"""

    _DYNAMICS_FIELDS = ("A", "c")


class LinearControlContinuousSystem(AffineSystemBase, AbstractContinuousSystem):
    """dx/dt = Ax + Bu"""

    _DYNAMICS_FIELDS = ("A", "B")


class AffineControlContinuousSystem(AffineSystemBase, AbstractContinuousSystem):
    """dx/dt = Ax + Bu + c"""

    _DYNAMICS_FIELDS = ("A", "B", "c")


class ConstrainedLinearContinuousSystem(AffineSystemBase, AbstractContinuousSystem):
    """dx/dt = Ax, x ∈ X"""

    _DYNAMICS_FIELDS = ("A",)
    _SET_FIELDS = ("X",)


class ConstrainedAffineContinuousSystem(AffineSystemBase, AbstractContinuousSystem):
    """dx/dt = Ax + c, x ∈ X"""

    _DYNAMICS_FIELDS = ("A", "c")
    _SET_FIELDS = ("X",)


class ConstrainedLinearControlContinuousSystem(AffineSystemBase, AbstractContinuousSystem):
    """dx/dt = Ax + Bu, x ∈ X, u ∈ U"""

    _DYNAMICS_FIELDS = ("A", "B")
    _SET_FIELDS = ("X", "U")


class ConstrainedAffineControlContinuousSystem(AffineSystemBase, AbstractContinuousSystem):
    """dx/dt = Ax + Bu + c, x ∈ X, u ∈ U"""

    _DYNAMICS_FIELDS = ("A", "B", "c")
    _SET_FIELDS = ("X", "U")


class NoisyLinearContinuousSystem(AffineSystemBase, AbstractContinuousSystem):
    """dx/dt = Ax + Dw"""

    _DYNAMICS_FIELDS = ("A", "D")


class NoisyConstrainedLinearContinuousSystem(AffineSystemBase, AbstractContinuousSystem):
    """dx/dt = Ax + Dw, x ∈ X, w ∈ W"""

    _DYNAMICS_FIELDS = ("A", "D")
    _SET_FIELDS = ("X", "W")


class NoisyLinearControlContinuousSystem(AffineSystemBase, AbstractContinuousSystem):
    """dx/dt = Ax + Bu + Dw"""

    _DYNAMICS_FIELDS = ("A", "B", "D")


class NoisyConstrainedLinearControlContinuousSystem(AffineSystemBase, AbstractContinuousSystem):
    """dx/dt = Ax + Bu + Dw, x ∈ X, u ∈ U, w ∈ W"""

    _DYNAMICS_FIELDS = ("A", "B", "D")
    _SET_FIELDS = ("X", "U", "W")


class NoisyAffineControlContinuousSystem(AffineSystemBase, AbstractContinuousSystem):
    """dx/dt = Ax + Bu + c + Dw"""

    _DYNAMICS_FIELDS = ("A", "B", "c", "D")


class NoisyConstrainedAffineControlContinuousSystem(AffineSystemBase, AbstractContinuousSystem):
    """dx/dt = Ax + Bu + c + Dw, x ∈ X, u ∈ U, w ∈ W"""

    _DYNAMICS_FIELDS = ("A", "B", "c", "D")
    _SET_FIELDS = ("X", "U", "W")


class BlackBoxContinuousSystem(BlackBoxSystemBase, AbstractContinuousSystem):
    """dx/dt = f(x)"""


class ConstrainedBlackBoxContinuousSystem(BlackBoxSystemBase, AbstractContinuousSystem):
    """dx/dt = f(x), x ∈ X"""

    _SET_FIELDS = ("X",)


CONTINUOUS_VARIANTS = (
    LinearContinuousSystem,
    AffineContinuousSystem,
    LinearControlContinuousSystem,
    AffineControlContinuousSystem,
    ConstrainedLinearContinuousSystem,
    ConstrainedAffineContinuousSystem,
    ConstrainedLinearControlContinuousSystem,
    ConstrainedAffineControlContinuousSystem,
    NoisyLinearContinuousSystem,
    NoisyConstrainedLinearContinuousSystem,
    NoisyLinearControlContinuousSystem,
    NoisyConstrainedLinearControlContinuousSystem,
    NoisyAffineControlContinuousSystem,
    NoisyConstrainedAffineControlContinuousSystem,
    BlackBoxContinuousSystem,
    ConstrainedBlackBoxContinuousSystem,
)


__all__ = [cls.__name__ for cls in CONTINUOUS_VARIANTS] + ["CONTINUOUS_VARIANTS"]
