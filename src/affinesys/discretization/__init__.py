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
Discretization Core
===================

Maps continuous-time affine systems to their discrete-time equivalents.

- algorithms: algorithm tags and their 4-argument kernels
- method_registry: name/alias resolution and registration
- extractor: dynamics values and constraint sets of a system
- dispatcher: padding to (A, B, c, D), kernel call, trimming
- reconstructor: discrete counterpart constructor
- discretize: the top-level pipeline
"""

from .algorithms import (
    DiscretizationAlgorithm,
    Euler,
    EulerDiscretization,
    Exact,
    ExactDiscretization,
)
from .discretize import discretize
from .dispatcher import FieldMask, apply_kernel, infer_fields
from .extractor import extract_field_names, extract_parameters
from .method_registry import (
    available_algorithms,
    get_algorithm,
    normalize_algorithm_name,
    register_algorithm,
    unregister_algorithm,
)
from .reconstructor import complementary_type, default_complementary_constructor

__all__ = [
    "DiscretizationAlgorithm",
    "ExactDiscretization",
    "EulerDiscretization",
    "Exact",
    "Euler",
    "discretize",
    "FieldMask",
    "apply_kernel",
    "infer_fields",
    "extract_parameters",
    "extract_field_names",
    "available_algorithms",
    "get_algorithm",
    "normalize_algorithm_name",
    "register_algorithm",
    "unregister_algorithm",
    "complementary_type",
    "default_complementary_constructor",
]
