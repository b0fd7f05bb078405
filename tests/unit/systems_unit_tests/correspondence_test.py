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
Unit Tests for the Continuous/Discrete Variant Correspondence

Tests cover:
- Built-in table totality and bidirectionality
- Field-shape agreement of every registered pair
- Registration validation (kinds, fields, duplicates)
- Unknown-variant lookups
- complementary_type in both directions
"""

import pytest

from affinesys.errors import RegistrationError, UnknownVariantCorrespondenceError
from affinesys.systems import (
    BUILTIN_PAIRS,
    CONTINUOUS_VARIANTS,
    DISCRETE_VARIANTS,
    VARIANT_REGISTRY,
    AbstractContinuousSystem,
    AbstractDiscreteSystem,
    AffineSystemBase,
    BlackBoxContinuousSystem,
    BlackBoxDiscreteSystem,
    LinearContinuousSystem,
    LinearControlContinuousSystem,
    LinearControlDiscreteSystem,
    LinearDiscreteSystem,
    NoisyLinearContinuousSystem,
    NoisyLinearDiscreteSystem,
    VariantRegistry,
    complementary_type,
)


class UnpairedContinuousSystem(AffineSystemBase, AbstractContinuousSystem):
    _DYNAMICS_FIELDS = ("A", "B")
    _SET_FIELDS = ("U",)


class UnpairedDiscreteSystem(AffineSystemBase, AbstractDiscreteSystem):
    _DYNAMICS_FIELDS = ("A", "B")
    _SET_FIELDS = ("U",)


# ============================================================================
# Test: Built-in Table
# ============================================================================


class TestBuiltinTable:
    """Test the registry populated at import."""

    def test_every_continuous_variant_is_paired(self):
        for cls in CONTINUOUS_VARIANTS:
            assert cls in VARIANT_REGISTRY

    def test_every_discrete_variant_is_paired(self):
        for cls in DISCRETE_VARIANTS:
            assert cls in VARIANT_REGISTRY

    def test_table_size(self):
        assert len(VARIANT_REGISTRY) == len(BUILTIN_PAIRS) == len(CONTINUOUS_VARIANTS) == 16

    @pytest.mark.parametrize("continuous_cls,discrete_cls", BUILTIN_PAIRS)
    def test_pairs_share_field_shape(self, continuous_cls, discrete_cls):
        assert continuous_cls.dynamics_fields() == discrete_cls.dynamics_fields()
        assert continuous_cls.set_fields() == discrete_cls.set_fields()
        assert continuous_cls.iscontinuous()
        assert discrete_cls.isdiscrete()

    @pytest.mark.parametrize("continuous_cls,discrete_cls", BUILTIN_PAIRS)
    def test_bidirectional(self, continuous_cls, discrete_cls):
        assert VARIANT_REGISTRY.discrete_counterpart(continuous_cls) is discrete_cls
        assert VARIANT_REGISTRY.continuous_counterpart(discrete_cls) is continuous_cls

    def test_names_correspond(self):
        for continuous_cls, discrete_cls in VARIANT_REGISTRY.pairs():
            assert continuous_cls.__name__.replace("Continuous", "Discrete") == discrete_cls.__name__

    def test_repr(self):
        assert repr(VARIANT_REGISTRY) == "VariantRegistry(16 pairs)"


# ============================================================================
# Test: complementary_type
# ============================================================================


class TestComplementaryType:
    """Test counterpart resolution in both directions."""

    def test_continuous_to_discrete(self):
        assert complementary_type(NoisyLinearContinuousSystem) is NoisyLinearDiscreteSystem

    def test_discrete_to_continuous(self):
        assert complementary_type(NoisyLinearDiscreteSystem) is NoisyLinearContinuousSystem

    def test_black_box(self):
        assert complementary_type(BlackBoxContinuousSystem) is BlackBoxDiscreteSystem

    def test_unknown_variant(self):
        with pytest.raises(UnknownVariantCorrespondenceError, match="UnpairedContinuousSystem"):
            complementary_type(UnpairedContinuousSystem)

    def test_unknown_discrete_variant(self):
        with pytest.raises(UnknownVariantCorrespondenceError):
            complementary_type(UnpairedDiscreteSystem)

    def test_unknown_is_value_error(self):
        with pytest.raises(ValueError):
            complementary_type(UnpairedContinuousSystem)


# ============================================================================
# Test: Registration
# ============================================================================


class TestRegistration:
    """Test validation on a fresh registry."""

    @pytest.fixture
    def registry(self):
        return VariantRegistry()

    def test_register_and_lookup(self, registry):
        registry.register(UnpairedContinuousSystem, UnpairedDiscreteSystem)
        assert registry.discrete_counterpart(UnpairedContinuousSystem) is UnpairedDiscreteSystem
        assert registry.continuous_counterpart(UnpairedDiscreteSystem) is UnpairedContinuousSystem
        assert len(registry) == 1

    def test_wrong_time_domain(self, registry):
        with pytest.raises(RegistrationError, match="not a continuous-time"):
            registry.register(LinearDiscreteSystem, LinearContinuousSystem)

    def test_not_a_class(self, registry):
        with pytest.raises(RegistrationError):
            registry.register(LinearContinuousSystem, "LinearDiscreteSystem")

    def test_dynamics_fields_differ(self, registry):
        with pytest.raises(RegistrationError, match="Dynamics fields differ"):
            registry.register(LinearContinuousSystem, LinearControlDiscreteSystem)

    def test_set_fields_differ(self, registry):
        with pytest.raises(RegistrationError, match="Set fields differ"):
            registry.register(LinearControlContinuousSystem, UnpairedDiscreteSystem)

    def test_affineness_differs(self, registry):
        class FieldlessAffineContinuousSystem(AffineSystemBase, AbstractContinuousSystem):
            pass

        with pytest.raises(RegistrationError, match="affineness"):
            registry.register(FieldlessAffineContinuousSystem, BlackBoxDiscreteSystem)

    def test_duplicate_continuous(self, registry):
        registry.register(LinearControlContinuousSystem, LinearControlDiscreteSystem)

        class OtherLinearControlDiscreteSystem(AffineSystemBase, AbstractDiscreteSystem):
            _DYNAMICS_FIELDS = ("A", "B")

        with pytest.raises(RegistrationError, match="already paired"):
            registry.register(LinearControlContinuousSystem, OtherLinearControlDiscreteSystem)

    def test_duplicate_discrete(self, registry):
        registry.register(LinearControlContinuousSystem, LinearControlDiscreteSystem)

        class OtherLinearControlContinuousSystem(AffineSystemBase, AbstractContinuousSystem):
            _DYNAMICS_FIELDS = ("A", "B")

        with pytest.raises(RegistrationError, match="already paired"):
            registry.register(OtherLinearControlContinuousSystem, LinearControlDiscreteSystem)

    def test_registration_error_is_type_error(self, registry):
        with pytest.raises(TypeError):
            registry.register(LinearDiscreteSystem, LinearContinuousSystem)

    def test_verify_complete(self, registry):
        registry.register(LinearContinuousSystem, LinearDiscreteSystem)
        registry.verify_complete([LinearContinuousSystem])

        with pytest.raises(RegistrationError, match="NoisyLinearContinuousSystem"):
            registry.verify_complete([LinearContinuousSystem, NoisyLinearContinuousSystem])

    def test_contains(self, registry):
        registry.register(LinearContinuousSystem, LinearDiscreteSystem)
        assert LinearContinuousSystem in registry
        assert LinearDiscreteSystem in registry
        assert NoisyLinearContinuousSystem not in registry
