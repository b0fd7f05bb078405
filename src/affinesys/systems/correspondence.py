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
Continuous/Discrete Variant Correspondence
==========================================

Explicit bidirectional registry pairing every continuous-time variant with
its discrete-time counterpart.

Every pair is validated when registered:
- the continuous class is a continuous system, the discrete class a
  discrete system
- both declare the same dynamics fields and the same set fields
- neither side is already paired

The built-in table is checked for totality when this module is imported
(verify_complete), so a continuous variant without a counterpart is an
import-time error rather than a failure inside discretize().

Usage
-----
>>> from affinesys.systems.correspondence import VARIANT_REGISTRY
>>>
>>> VARIANT_REGISTRY.discrete_counterpart(LinearControlContinuousSystem)
<class 'affinesys.systems.discrete.LinearControlDiscreteSystem'>
>>> VARIANT_REGISTRY.continuous_counterpart(LinearControlDiscreteSystem)
<class 'affinesys.systems.continuous.LinearControlContinuousSystem'>

Registering a user-defined pair:

>>> VARIANT_REGISTRY.register(MyContinuousSystem, MyDiscreteSystem)
"""

import logging
from typing import Dict, Iterable, List, Tuple, Type

from affinesys.errors import RegistrationError, UnknownVariantCorrespondenceError

from . import continuous, discrete
from .base.system_base import (
    AbstractContinuousSystem,
    AbstractDiscreteSystem,
    AbstractSystem,
)

logger = logging.getLogger(__name__)


class VariantRegistry:
    """
    Bidirectional continuous ↔ discrete variant table.

    Examples
    --------
    >>> registry = VariantRegistry()
    >>> registry.register(LinearContinuousSystem, LinearDiscreteSystem)
    >>> registry.discrete_counterpart(LinearContinuousSystem)
    <class '...LinearDiscreteSystem'>
    >>> len(registry)
    1
    """

    def __init__(self):
        self._to_discrete: Dict[Type[AbstractSystem], Type[AbstractSystem]] = {}
        self._to_continuous: Dict[Type[AbstractSystem], Type[AbstractSystem]] = {}

    def register(
        self,
        continuous_cls: Type[AbstractContinuousSystem],
        discrete_cls: Type[AbstractDiscreteSystem],
    ):
        """
        Register a continuous/discrete pair.

        Raises
        ------
        RegistrationError
            If the classes have the wrong time domain, mismatched field
            shapes, or either side is already registered
        """
        if not (isinstance(continuous_cls, type) and issubclass(continuous_cls, AbstractContinuousSystem)):
            raise RegistrationError(f"{continuous_cls!r} is not a continuous-time system class")
        if not (isinstance(discrete_cls, type) and issubclass(discrete_cls, AbstractDiscreteSystem)):
            raise RegistrationError(f"{discrete_cls!r} is not a discrete-time system class")

        if continuous_cls.dynamics_fields() != discrete_cls.dynamics_fields():
            raise RegistrationError(
                f"Dynamics fields differ: {continuous_cls.__name__}{continuous_cls.dynamics_fields()} "
                f"vs {discrete_cls.__name__}{discrete_cls.dynamics_fields()}"
            )
        if continuous_cls.set_fields() != discrete_cls.set_fields():
            raise RegistrationError(
                f"Set fields differ: {continuous_cls.__name__}{continuous_cls.set_fields()} "
                f"vs {discrete_cls.__name__}{discrete_cls.set_fields()}"
            )
        if continuous_cls.isaffine() != discrete_cls.isaffine():
            raise RegistrationError(
                f"{continuous_cls.__name__} and {discrete_cls.__name__} disagree on affineness"
            )

        if continuous_cls in self._to_discrete:
            raise RegistrationError(
                f"{continuous_cls.__name__} is already paired with "
                f"{self._to_discrete[continuous_cls].__name__}"
            )
        if discrete_cls in self._to_continuous:
            raise RegistrationError(
                f"{discrete_cls.__name__} is already paired with "
                f"{self._to_continuous[discrete_cls].__name__}"
            )

        self._to_discrete[continuous_cls] = discrete_cls
        self._to_continuous[discrete_cls] = continuous_cls
        logger.debug("Registered %s <-> %s", continuous_cls.__name__, discrete_cls.__name__)

    def discrete_counterpart(self, continuous_cls: Type[AbstractSystem]) -> Type[AbstractSystem]:
        """
        Discrete variant paired with a continuous variant.

        Raises
        ------
        UnknownVariantCorrespondenceError
            If the variant is not registered
        """
        try:
            return self._to_discrete[continuous_cls]
        except KeyError:
            raise UnknownVariantCorrespondenceError(
                f"No discrete counterpart registered for {getattr(continuous_cls, '__name__', continuous_cls)}; "
                f"register one with VARIANT_REGISTRY.register(continuous_cls, discrete_cls)"
            ) from None

    def continuous_counterpart(self, discrete_cls: Type[AbstractSystem]) -> Type[AbstractSystem]:
        """
        Continuous variant paired with a discrete variant.

        Raises
        ------
        UnknownVariantCorrespondenceError
            If the variant is not registered
        """
        try:
            return self._to_continuous[discrete_cls]
        except KeyError:
            raise UnknownVariantCorrespondenceError(
                f"No continuous counterpart registered for {getattr(discrete_cls, '__name__', discrete_cls)}"
            ) from None

    def verify_complete(self, continuous_variants: Iterable[Type[AbstractSystem]]):
        """
        Check that every given continuous variant has a counterpart.

        Raises
        ------
        RegistrationError
            Listing every variant without a counterpart
        """
        missing = [cls.__name__ for cls in continuous_variants if cls not in self._to_discrete]
        if missing:
            raise RegistrationError(f"Continuous variants without a discrete counterpart: {missing}")

    def pairs(self) -> List[Tuple[Type[AbstractSystem], Type[AbstractSystem]]]:
        """All registered (continuous, discrete) pairs in registration order."""
        return list(self._to_discrete.items())

    def __contains__(self, cls) -> bool:
        return cls in self._to_discrete or cls in self._to_continuous

    def __len__(self) -> int:
        return len(self._to_discrete)

    def __repr__(self) -> str:
        return f"VariantRegistry({len(self)} pairs)"


# ============================================================================
# Built-in Table
# ============================================================================

BUILTIN_PAIRS = (
    (continuous.LinearContinuousSystem, discrete.LinearDiscreteSystem),
    (continuous.AffineContinuousSystem, discrete.AffineDiscreteSystem),
    (continuous.LinearControlContinuousSystem, discrete.LinearControlDiscreteSystem),
    (continuous.AffineControlContinuousSystem, discrete.AffineControlDiscreteSystem),
    (continuous.ConstrainedLinearContinuousSystem, discrete.ConstrainedLinearDiscreteSystem),
    (continuous.ConstrainedAffineContinuousSystem, discrete.ConstrainedAffineDiscreteSystem),
    (
        continuous.ConstrainedLinearControlContinuousSystem,
        discrete.ConstrainedLinearControlDiscreteSystem,
    ),
    (
        continuous.ConstrainedAffineControlContinuousSystem,
        discrete.ConstrainedAffineControlDiscreteSystem,
    ),
    (continuous.NoisyLinearContinuousSystem, discrete.NoisyLinearDiscreteSystem),
    (
        continuous.NoisyConstrainedLinearContinuousSystem,
        discrete.NoisyConstrainedLinearDiscreteSystem,
    ),
    (continuous.NoisyLinearControlContinuousSystem, discrete.NoisyLinearControlDiscreteSystem),
    (
        continuous.NoisyConstrainedLinearControlContinuousSystem,
        discrete.NoisyConstrainedLinearControlDiscreteSystem,
    ),
    (continuous.NoisyAffineControlContinuousSystem, discrete.NoisyAffineControlDiscreteSystem),
    (
        continuous.NoisyConstrainedAffineControlContinuousSystem,
        discrete.NoisyConstrainedAffineControlDiscreteSystem,
    ),
    (continuous.BlackBoxContinuousSystem, discrete.BlackBoxDiscreteSystem),
    (continuous.ConstrainedBlackBoxContinuousSystem, discrete.ConstrainedBlackBoxDiscreteSystem),
)

VARIANT_REGISTRY = VariantRegistry()

for _continuous_cls, _discrete_cls in BUILTIN_PAIRS:
    VARIANT_REGISTRY.register(_continuous_cls, _discrete_cls)

VARIANT_REGISTRY.verify_complete(continuous.CONTINUOUS_VARIANTS)


def complementary_type(cls: Type[AbstractSystem]) -> Type[AbstractSystem]:
    """
    Counterpart of a variant in the other time domain.

    Examples
    --------
    >>> complementary_type(NoisyLinearContinuousSystem)
    <class '...NoisyLinearDiscreteSystem'>
    >>> complementary_type(NoisyLinearDiscreteSystem)
    <class '...NoisyLinearContinuousSystem'>

    Raises
    ------
    UnknownVariantCorrespondenceError
        If the variant is not registered
    """
    if isinstance(cls, type) and issubclass(cls, AbstractDiscreteSystem):
        return VARIANT_REGISTRY.continuous_counterpart(cls)
    return VARIANT_REGISTRY.discrete_counterpart(cls)


__all__ = ["VariantRegistry", "VARIANT_REGISTRY", "BUILTIN_PAIRS", "complementary_type"]
