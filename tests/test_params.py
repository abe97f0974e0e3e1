"""Tests for cost parameter profiles."""

import dataclasses

import pytest

from passwordhasher import (DEFAULT_KEY_LENGTH, DEFAULT_SALT_LENGTH, ErrorKind,
                            InvalidParameter, ParameterProfile)


class TestDefaults:
    def test_default_profile(self):
        p = ParameterProfile.default()
        assert (p.memory_cost, p.iterations, p.parallelism) == (65536, 3, 2)
        assert p.salt_length == DEFAULT_SALT_LENGTH == 16
        assert p.key_length == DEFAULT_KEY_LENGTH == 32

    def test_custom_keeps_default_salt_length(self):
        p = ParameterProfile.custom(32768, 2, 1, 64)
        assert p == ParameterProfile(32768, 2, 1, 16, 64)

    def test_compared_by_value(self):
        assert ParameterProfile.default() == ParameterProfile()
        assert ParameterProfile.default() != ParameterProfile.custom(32768, 2, 1, 32)

    def test_immutable(self):
        p = ParameterProfile.default()
        with pytest.raises(dataclasses.FrozenInstanceError):
            p.iterations = 1


class TestValidation:
    @pytest.mark.parametrize("field", ["memory_cost", "iterations", "parallelism",
                                       "salt_length", "key_length"])
    @pytest.mark.parametrize("value", [0, -1])
    def test_non_positive_rejected(self, field, value):
        with pytest.raises(InvalidParameter) as exc:
            ParameterProfile(**{field: value})
        assert exc.value.kind is ErrorKind.INVALID_PARAMETER

    @pytest.mark.parametrize("value", [1.5, "3", True, None])
    def test_non_integer_rejected(self, value):
        with pytest.raises(InvalidParameter):
            ParameterProfile(iterations=value)

    def test_argon2_bounds(self):
        with pytest.raises(InvalidParameter):
            ParameterProfile(memory_cost=8, parallelism=2)
        with pytest.raises(InvalidParameter):
            ParameterProfile(salt_length=4)
        with pytest.raises(InvalidParameter):
            ParameterProfile(key_length=2)
        with pytest.raises(InvalidParameter):
            ParameterProfile(memory_cost=2**32)

    def test_weaker_than(self):
        default = ParameterProfile.default()
        assert ParameterProfile(memory_cost=1024).weaker_than(default)
        assert not ParameterProfile(iterations=4).weaker_than(default)
