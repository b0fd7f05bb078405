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
Discretize - Continuous to Discrete Affine Systems
==================================================

Converts a continuous-time affine system

    dx/dt = A x + B u + c + D w,   x ∈ X, u ∈ U, w ∈ W

into its discrete-time counterpart under sampling period dt

    x[k+1] = Ad x[k] + Bd u[k] + cd + Dd w[k],   x ∈ X, u ∈ U, w ∈ W

Pipeline
--------
1. validate dt (finite; warn if dt ≤ 0)
2. resolve the algorithm (tag, tag class or registered name)
3. extract dynamics values and constraint sets (rejects non-affine and
   discrete-time systems)
4. apply the algorithm's kernel to the present dynamics fields
5. build the result with the caller's constructor, or the discrete
   counterpart of the system's variant

Constraint sets are passed through unchanged (same objects).

Usage
-----
>>> from affinesys import discretize, Exact, Euler
>>> from affinesys.systems import LinearControlContinuousSystem
>>>
>>> sys_c = LinearControlContinuousSystem(np.array([[-1.0]]), np.array([[1.0]]))
>>> sys_d = discretize(sys_c, 1.0)
>>> type(sys_d).__name__
'LinearControlDiscreteSystem'
>>> sys_d.A
array([[0.36787944]])
>>>
>>> # Singular A: fall back to Euler
>>> sys_d = discretize(LinearContinuousSystem(np.zeros((2, 2))), 1.0, algorithm=Euler)
"""

import logging
from typing import Any, Optional

from affinesys.config import validate_dt
from affinesys.errors import NotContinuousError
from affinesys.systems.traits import iscontinuous
from affinesys.types.core import DiscreteConstructor, ScalarLike

from .dispatcher import apply_kernel
from .extractor import extract_field_names, extract_parameters
from .method_registry import AlgorithmSpec, get_algorithm
from .reconstructor import default_complementary_constructor

logger = logging.getLogger(__name__)


def discretize(
    system: Any,
    dt: ScalarLike,
    algorithm: AlgorithmSpec = None,
    constructor: Optional[DiscreteConstructor] = None,
) -> Any:
    """
    Discretize a continuous-time affine system.

    Parameters
    ----------
    system : AffineSystemProtocol
        Continuous-time affine system
    dt : ScalarLike
        Sampling period. May be a SymPy symbol for symbolic systems.
    algorithm : AlgorithmSpec
        Algorithm tag (Exact, Euler), tag class, or registered name
        ('exact', 'zoh', 'euler', 'forward_euler'). Defaults to Exact.
    constructor : Optional[DiscreteConstructor]
        Called as constructor(dynamics_values, set_values). Defaults to the
        positional constructor of the system's discrete counterpart.

    Returns
    -------
    Any
        The discrete-time system (or whatever `constructor` returns)

    Raises
    ------
    ValueError
        If dt is not finite, or the algorithm name is unknown
    NotAffineError
        If the system is not affine
    NotContinuousError
        If the system is not continuous-time
    MissingFieldError
        If the system lacks a field its variant declares
    SingularStateMatrixError
        If the exact algorithm is used with a singular A
    UnknownVariantCorrespondenceError
        If no discrete counterpart is registered and no constructor is given

    Warns
    -----
    UserWarning
        If dt ≤ 0

    Examples
    --------
    >>> sys_c = ConstrainedLinearControlContinuousSystem(A, B, X, U)
    >>> sys_d = discretize(sys_c, 0.1, algorithm="zoh")
    >>> sys_d.stateset is X and sys_d.inputset is U
    True
    >>>
    >>> Ad, Bd = discretize(sys_c, 0.1, constructor=lambda dyn, sets: dyn)
    """
    validate_dt(dt)
    algorithm = get_algorithm(algorithm)

    dynamics_values, set_values = extract_parameters(system)
    if not iscontinuous(system):
        raise NotContinuousError(
            f"{type(system).__name__} is not a continuous-time system; "
            f"only continuous-time systems can be discretized"
        )
    fields = extract_field_names(system)

    if constructor is None:
        constructor = default_complementary_constructor(system)

    logger.debug(
        "Discretizing %s with %r (dt=%s, fields=%s)",
        type(system).__name__,
        algorithm,
        dt,
        fields,
    )
    discrete_values = apply_kernel(algorithm, dt, *dynamics_values, fields=fields)
    return constructor(discrete_values, set_values)


__all__ = ["discretize"]
