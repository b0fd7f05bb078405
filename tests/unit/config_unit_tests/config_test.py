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
Unit Tests for Discretization Configuration
"""

import warnings

import numpy as np
import pytest
import sympy as sp

from affinesys.config import (
    DEFAULT_ALGORITHM,
    DEFAULT_RANK_TOL,
    DiscretizationConfig,
    validate_dt,
)
from affinesys.discretization import available_algorithms


class TestDefaults:
    def test_default_algorithm_is_registered(self):
        assert DEFAULT_ALGORITHM == "exact"
        assert DEFAULT_ALGORITHM in available_algorithms()

    def test_default_rank_tol(self):
        assert DEFAULT_RANK_TOL is None

    def test_config_is_a_dict(self):
        config: DiscretizationConfig = {"dt": 0.1, "algorithm": "euler"}
        assert config["dt"] == 0.1
        assert DiscretizationConfig.__annotations__.keys() >= {"dt", "algorithm"}


class TestValidateDt:
    """Sampling period validation."""

    @pytest.mark.parametrize("dt", [0.1, 1, np.float64(0.5), np.array(0.25)])
    def test_valid_returned_unchanged(self, dt):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            assert validate_dt(dt) is dt

    @pytest.mark.parametrize("dt", [0.0, -0.1, -1])
    def test_non_positive_warns(self, dt):
        with pytest.warns(UserWarning, match="Non-positive sampling period"):
            assert validate_dt(dt) == dt

    @pytest.mark.parametrize("dt", [float("nan"), float("inf"), np.inf])
    def test_non_finite(self, dt):
        with pytest.raises(ValueError, match="must be finite"):
            validate_dt(dt)

    @pytest.mark.parametrize("dt", ["0.1", None, [0.1], 1j])
    def test_wrong_type(self, dt):
        with pytest.raises(TypeError, match="real number"):
            validate_dt(dt)

    def test_symbolic(self):
        T = sp.Symbol("T")
        assert validate_dt(T) is T

    def test_sympy_number(self):
        assert validate_dt(sp.Rational(1, 10)) == sp.Rational(1, 10)
        with pytest.warns(UserWarning):
            validate_dt(sp.Integer(0))

    def test_torch_scalar(self):
        torch = pytest.importorskip("torch")
        dt = torch.tensor(0.1)
        assert validate_dt(dt) is dt
