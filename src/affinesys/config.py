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
Discretization Configuration

Defaults and validation for discretize() options.

Usage
-----
>>> from affinesys.config import DiscretizationConfig, validate_dt
>>>
>>> config: DiscretizationConfig = {'dt': 0.01, 'algorithm': 'euler'}
>>> dt = validate_dt(config['dt'])
"""

import math
import numbers
import warnings
from typing import Optional

from typing_extensions import TypedDict

from affinesys.types.backends import DiscretizationMethod
from affinesys.types.core import ScalarLike


class DiscretizationConfig(TypedDict, total=False):
    """
    Configuration for discretizing an affine system.

    Attributes
    ----------
    dt : float
        Sampling period ΔT
    algorithm : DiscretizationMethod
        Registered algorithm name

    Examples
    --------
    >>> config: DiscretizationConfig = {
    ...     'dt': 0.01,
    ...     'algorithm': 'exact',
    ... }
    >>> sys_d = discretize(sys_c, **config)
    """

    dt: float
    algorithm: DiscretizationMethod


DEFAULT_ALGORITHM: DiscretizationMethod = "exact"
"""Algorithm used by discretize() when none is given."""

DEFAULT_RANK_TOL: Optional[float] = None
"""
Singular value threshold for rank(A) in the exact kernel.

None uses NumPy's default, S.max() * max(A.shape) * eps.
"""


def validate_dt(dt: ScalarLike) -> ScalarLike:
    """
    Validate a sampling period.

    Real numbers must be finite. Zero or negative periods are degenerate
    but still computable, so they produce a UserWarning rather than an
    error. SymPy expressions are accepted unchecked.

    Parameters
    ----------
    dt : ScalarLike
        Sampling period

    Returns
    -------
    ScalarLike
        The same dt

    Raises
    ------
    ValueError
        If dt is NaN or infinite
    TypeError
        If dt is neither a real number nor a SymPy expression

    Examples
    --------
    >>> validate_dt(0.1)
    0.1
    >>> validate_dt(float('nan'))  # ValueError
    """
    import sympy as sp

    if isinstance(dt, sp.Basic):
        if dt.is_number:
            dt_value = float(dt)
        else:
            return dt
    elif isinstance(dt, numbers.Real):
        dt_value = float(dt)
    elif getattr(dt, "shape", None) == ():
        # 0-d array or tensor
        dt_value = float(dt)
    else:
        raise TypeError(f"Sampling period must be a real number, got {type(dt).__name__}")

    if not math.isfinite(dt_value):
        raise ValueError(f"Sampling period must be finite, got {dt_value}")

    if dt_value <= 0:
        warnings.warn(
            f"Non-positive sampling period dt={dt_value}; the discretized "
            f"system does not advance forward in time.",
            UserWarning,
            stacklevel=3,
        )

    return dt


__all__ = [
    "DiscretizationConfig",
    "DEFAULT_ALGORITHM",
    "DEFAULT_RANK_TOL",
    "validate_dt",
]
