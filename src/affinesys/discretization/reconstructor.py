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
Type Reconstructor

Builds the discrete-time counterpart of a continuous-time system from its
discretized dynamics values and its untouched constraint sets.
"""

import logging
from typing import Any, Sequence

from affinesys.systems.correspondence import complementary_type
from affinesys.types.core import ArrayLike, ConstraintSet, DiscreteConstructor

logger = logging.getLogger(__name__)


def default_complementary_constructor(system: Any) -> DiscreteConstructor:
    """
    Constructor for the discrete counterpart of a system's variant.

    The counterpart is resolved immediately, so an unregistered variant
    fails here rather than after the kernel has run.

    Parameters
    ----------
    system : AbstractSystem
        Continuous-time system

    Returns
    -------
    DiscreteConstructor
        (dynamics_values, set_values) -> discrete system. Values are
        assigned positionally, dynamics first and then sets, in the
        variant's declared order.

    Raises
    ------
    UnknownVariantCorrespondenceError
        If no counterpart is registered for the system's variant

    Examples
    --------
    >>> build = default_complementary_constructor(sys_c)
    >>> sys_d = build((Ad, Bd), (X, U))
    >>> type(sys_d).__name__
    'ConstrainedLinearControlDiscreteSystem'
    """
    discrete_cls = complementary_type(type(system))

    def construct(dynamics_values: Sequence[ArrayLike], set_values: Sequence[ConstraintSet]):
        logger.debug("Constructing %s", discrete_cls.__name__)
        return discrete_cls(*dynamics_values, *set_values)

    return construct


__all__ = ["complementary_type", "default_complementary_constructor"]
