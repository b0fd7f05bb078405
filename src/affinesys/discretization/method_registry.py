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
Discretization Algorithm Registry and Normalization
===================================================

Registry of discretization algorithms with support for:
- Name normalization ('ZOH' → 'zoh' → 'exact')
- Resolution of tags, tag classes and names to algorithm instances
- Registration of user-defined algorithms

Canonical Names
---------------
=========  ===========================  =======================
Name       Aliases                      Algorithm
=========  ===========================  =======================
exact      zoh, zero_order_hold         ExactDiscretization
euler      forward_euler                EulerDiscretization
=========  ===========================  =======================

Usage Examples
--------------
>>> from affinesys.discretization.method_registry import get_algorithm
>>>
>>> get_algorithm('ZOH')
ExactDiscretization()
>>> get_algorithm(EulerDiscretization)
EulerDiscretization()
>>> available_algorithms()
['euler', 'exact']

Notes
-----
- Normalization is case-insensitive and idempotent
- Registration is expected at import time; the registry is read-only
  during discretization
"""

import logging
from typing import Dict, Iterable, List, Optional, Type, Union

from affinesys.config import DEFAULT_ALGORITHM
from affinesys.errors import RegistrationError

from .algorithms import DiscretizationAlgorithm, Euler, Exact

logger = logging.getLogger(__name__)

AlgorithmSpec = Union[DiscretizationAlgorithm, Type[DiscretizationAlgorithm], str, None]
"""Anything get_algorithm() resolves: a tag, a tag class, a name, or None (default)."""


# ============================================================================
# Registry Tables
# ============================================================================

_ALGORITHMS: Dict[str, DiscretizationAlgorithm] = {}
"""Canonical name → algorithm instance."""

_ALIASES: Dict[str, str] = {}
"""Alias → canonical name."""


def normalize_algorithm_name(name: str) -> str:
    """
    Normalize an algorithm name or alias to its canonical name.

    Unknown names are returned lower-cased so that the caller can report
    them; normalization is idempotent.

    Examples
    --------
    >>> normalize_algorithm_name('Forward_Euler')
    'euler'
    >>> normalize_algorithm_name('exact')
    'exact'
    """
    key = name.strip().lower()
    return _ALIASES.get(key, key)


def register_algorithm(
    name: str,
    algorithm: DiscretizationAlgorithm,
    aliases: Iterable[str] = (),
    overwrite: bool = False,
):
    """
    Register a discretization algorithm under a name.

    Parameters
    ----------
    name : str
        Canonical name (case-insensitive)
    algorithm : DiscretizationAlgorithm
        Algorithm instance
    aliases : Iterable[str]
        Alternative names resolving to `name`
    overwrite : bool
        Allow replacing an existing registration

    Raises
    ------
    RegistrationError
        If `algorithm` is not a DiscretizationAlgorithm instance, an alias
        would shadow a canonical name, or the name or an alias is taken
        and overwrite is False. Overwriting a name that is currently an
        alias turns it into a canonical name.

    Examples
    --------
    >>> register_algorithm('tustin', TustinDiscretization(), aliases=('bilinear',))
    >>> get_algorithm('bilinear')
    TustinDiscretization()
    """
    if not isinstance(algorithm, DiscretizationAlgorithm):
        raise RegistrationError(
            f"Algorithm must be a DiscretizationAlgorithm instance, got {type(algorithm).__name__}"
        )

    key = name.strip().lower()
    alias_keys = [alias.strip().lower() for alias in aliases]

    shadowing = [alias for alias in alias_keys if alias == key or alias in _ALGORITHMS]
    if shadowing:
        raise RegistrationError(
            f"Algorithm alias(es) {shadowing} would shadow a canonical algorithm name"
        )

    if not overwrite:
        if key in _ALGORITHMS or key in _ALIASES:
            raise RegistrationError(f"Algorithm name '{key}' is already registered")
        taken = [alias for alias in alias_keys if alias in _ALIASES]
        if taken:
            raise RegistrationError(f"Algorithm alias(es) {taken} are already registered")

    # A canonical name is never also an alias.
    _ALIASES.pop(key, None)
    _ALGORITHMS[key] = algorithm
    for alias in alias_keys:
        _ALIASES[alias] = key
    logger.debug("Registered algorithm '%s' (%r), aliases=%s", key, algorithm, alias_keys)


def get_algorithm(spec: AlgorithmSpec = None) -> DiscretizationAlgorithm:
    """
    Resolve an algorithm specification to an algorithm instance.

    Parameters
    ----------
    spec : AlgorithmSpec
        - DiscretizationAlgorithm instance: returned as-is
        - DiscretizationAlgorithm subclass: instantiated with no arguments
        - str: registered name or alias (case-insensitive)
        - None: DEFAULT_ALGORITHM

    Returns
    -------
    DiscretizationAlgorithm

    Raises
    ------
    ValueError
        If a name is not registered (lists the choices)
    TypeError
        If spec is none of the above

    Examples
    --------
    >>> get_algorithm() == Exact
    True
    >>> get_algorithm('forward_euler') == Euler
    True
    """
    if spec is None:
        spec = DEFAULT_ALGORITHM

    if isinstance(spec, DiscretizationAlgorithm):
        return spec

    if isinstance(spec, type) and issubclass(spec, DiscretizationAlgorithm):
        return spec()

    if isinstance(spec, str):
        key = normalize_algorithm_name(spec)
        try:
            return _ALGORITHMS[key]
        except KeyError:
            choices = sorted(_ALGORITHMS) + sorted(_ALIASES)
            raise ValueError(
                f"Unknown discretization algorithm '{spec}'. Choose from: {choices}"
            ) from None

    raise TypeError(
        f"algorithm must be a DiscretizationAlgorithm, a subclass of it, or a name; "
        f"got {type(spec).__name__}"
    )


def available_algorithms(include_aliases: bool = False) -> List[str]:
    """
    Sorted names of the registered algorithms.

    Examples
    --------
    >>> available_algorithms()
    ['euler', 'exact']
    >>> 'zoh' in available_algorithms(include_aliases=True)
    True
    """
    names = sorted(_ALGORITHMS)
    if include_aliases:
        names += sorted(_ALIASES)
    return names


def unregister_algorithm(name: str) -> Optional[DiscretizationAlgorithm]:
    """
    Remove an algorithm and its aliases. Returns the removed algorithm, or
    None if `name` was not registered.

    Built-in algorithms can be removed too; intended for tests and plugins
    that replace them.
    """
    key = normalize_algorithm_name(name)
    algorithm = _ALGORITHMS.pop(key, None)
    for alias in [alias for alias, target in _ALIASES.items() if target == key]:
        del _ALIASES[alias]
    return algorithm


# ============================================================================
# Built-in Algorithms
# ============================================================================

register_algorithm("exact", Exact, aliases=("zoh", "zero_order_hold"))
register_algorithm("euler", Euler, aliases=("forward_euler",))


__all__ = [
    "AlgorithmSpec",
    "normalize_algorithm_name",
    "register_algorithm",
    "get_algorithm",
    "available_algorithms",
    "unregister_algorithm",
]
