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
Unit Tests for the Type Reconstructor
"""

import numpy as np
import pytest

from affinesys.discretization import complementary_type, default_complementary_constructor
from affinesys.errors import MissingFieldError, UnknownVariantCorrespondenceError
from affinesys.systems import (
    AbstractContinuousSystem,
    AffineSystemBase,
    ConstrainedLinearControlContinuousSystem,
    ConstrainedLinearControlDiscreteSystem,
    NoisyAffineControlContinuousSystem,
    NoisyAffineControlDiscreteSystem,
)


class TestDefaultConstructor:
    """Positional construction of the discrete counterpart."""

    def test_builds_counterpart(self):
        A, B = np.eye(2), np.ones((2, 1))
        X, U = object(), object()
        build = default_complementary_constructor(ConstrainedLinearControlContinuousSystem(A, B, X, U))

        Ad, Bd = 0.5 * A, 0.1 * B
        sys_d = build((Ad, Bd), (X, U))

        assert type(sys_d) is ConstrainedLinearControlDiscreteSystem
        assert sys_d.A is Ad
        assert sys_d.B is Bd
        assert sys_d.X is X
        assert sys_d.U is U

    def test_dynamics_then_sets(self):
        sys_c = NoisyAffineControlContinuousSystem(
            np.eye(2), np.ones((2, 1)), np.zeros(2), np.ones((2, 2))
        )
        build = default_complementary_constructor(sys_c)
        sys_d = build((np.eye(2), np.ones((2, 1)), np.ones(2), np.zeros((2, 2))), ())
        assert type(sys_d) is NoisyAffineControlDiscreteSystem
        np.testing.assert_allclose(sys_d.c, np.ones(2))

    def test_wrong_arity(self):
        A, B = np.eye(2), np.ones((2, 1))
        build = default_complementary_constructor(
            ConstrainedLinearControlContinuousSystem(A, B, None, None)
        )
        with pytest.raises(MissingFieldError):
            build((A, B), (None,))

    def test_unknown_variant_fails_early(self):
        class Orphan(AffineSystemBase, AbstractContinuousSystem):
            _DYNAMICS_FIELDS = ("A",)

        with pytest.raises(UnknownVariantCorrespondenceError):
            default_complementary_constructor(Orphan(np.eye(1)))

    def test_complementary_type_reexport(self):
        assert (
            complementary_type(ConstrainedLinearControlContinuousSystem)
            is ConstrainedLinearControlDiscreteSystem
        )
