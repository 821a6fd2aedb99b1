"""Tests for the generator registry.

This module tests:
- Lookup by canonical name and legacy alias
- Registration of generators and aliases
- Name resolution
"""

from __future__ import annotations

import pytest

from generators import registry
from generators.multiprime import MultiplePrimeGenerator
from generators.park_miller import ParkMillerGenerator
from generators.shuffled import ShuffledGenerator

# =============================================================================
# Tests for lookup
# =============================================================================


def test_builtin_names() -> None:
    assert registry.available_generators() == ["multiprime", "park_miller", "shuffled"]


@pytest.mark.parametrize(
    ("name", "cls"),
    [
        ("shuffled", ShuffledGenerator),
        ("method1", ShuffledGenerator),
        ("multiprime", MultiplePrimeGenerator),
        ("method2", MultiplePrimeGenerator),
        ("park_miller", ParkMillerGenerator),
        ("method3", ParkMillerGenerator),
    ],
)
def test_get_generator_by_name_or_alias(name: str, cls: type) -> None:
    gen = registry.get_generator(name, seed=7)
    assert isinstance(gen, cls)
    assert gen.state_dict() == cls(seed=7).state_dict()


def test_get_generator_unknown() -> None:
    with pytest.raises(KeyError, match="Available"):
        registry.get_generator("mersenne")


# =============================================================================
# Tests for registration
# =============================================================================


def test_register_generator_duplicate() -> None:
    name = "_tmp_gen"
    registry.register_generator(name, ParkMillerGenerator)
    try:
        with pytest.raises(ValueError):
            registry.register_generator(name, ParkMillerGenerator)
        assert isinstance(registry.get_generator(name), ParkMillerGenerator)
    finally:
        registry.GENERATORS.pop(name, None)


def test_register_generator_clashes_with_alias() -> None:
    with pytest.raises(ValueError):
        registry.register_generator("method1", ShuffledGenerator)


def test_register_alias_unknown_target() -> None:
    with pytest.raises(KeyError):
        registry.register_alias("_tmp_alias", "missing")


def test_register_alias_duplicate() -> None:
    with pytest.raises(ValueError):
        registry.register_alias("method3", "park_miller")


# =============================================================================
# Tests for resolve_name
# =============================================================================


def test_resolve_name() -> None:
    assert registry.resolve_name("method2") == "multiprime"
    assert registry.resolve_name("multiprime") == "multiprime"
