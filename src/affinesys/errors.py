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
Discretization Errors

Exception hierarchy raised by the system-description layer and the
discretization core.

Every error derives from DiscretizationError, and additionally from the
builtin exception class that describes the failure, so callers can catch
either the library-specific or the generic class:

    DiscretizationError
    ├── NotAffineError                     (ValueError)
    ├── NotContinuousError                 (TypeError)
    ├── SingularStateMatrixError           (ValueError)
    ├── UnknownVariantCorrespondenceError  (ValueError)
    ├── DimensionMismatchError             (ValueError)
    ├── MissingFieldError                  (TypeError)
    └── RegistrationError                  (TypeError)

All failures are deterministic functions of the input; none is retried.

Examples
--------
>>> try:
...     discretize(system, 0.1, algorithm=Exact)
... except SingularStateMatrixError:
...     sys_d = discretize(system, 0.1, algorithm=Euler)
"""


class DiscretizationError(Exception):
    """Base class for all errors raised by affinesys."""


class NotAffineError(DiscretizationError, ValueError):
    """
    System dynamics are not of the form x' = Ax + Bu + c + Dw.

    Raised before any numerical work is done.
    """


class NotContinuousError(DiscretizationError, TypeError):
    """A discrete-time (or untimed) system was passed where a continuous-time one is required."""


class SingularStateMatrixError(DiscretizationError, ValueError):
    """
    Exact discretization requested for a state matrix without full rank.

    The closed form A⁻¹(exp(AΔT) - I) needs A invertible; use the Euler
    algorithm instead.
    """


class UnknownVariantCorrespondenceError(DiscretizationError, ValueError):
    """No discrete counterpart is registered for a continuous variant (or vice versa)."""


class DimensionMismatchError(DiscretizationError, ValueError):
    """A matrix or vector has a shape incompatible with the state dimension."""


class MissingFieldError(DiscretizationError, TypeError):
    """A system instance lacks a field its variant declares."""


class RegistrationError(DiscretizationError, TypeError):
    """A variant pair or algorithm cannot be registered."""


__all__ = [
    "DiscretizationError",
    "NotAffineError",
    "NotContinuousError",
    "SingularStateMatrixError",
    "UnknownVariantCorrespondenceError",
    "DimensionMismatchError",
    "MissingFieldError",
    "RegistrationError",
]
