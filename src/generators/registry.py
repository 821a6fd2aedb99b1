"""Registry for generator variants.

This module provides a small factory layer so callers pick a variant by
name once, at construction time, and then only talk to the Generator
protocol.

Adding a new variant:
1. Subclass generators.base.BaseGenerator (or satisfy core.protocols.Generator)
2. Register it here with register_generator(name, factory)
3. It becomes available to core.config and the texrand CLI by name

Example:
    >>> from generators.registry import get_generator
    >>> gen = get_generator("park_miller", seed=1)
    >>> draws = gen.eval_array(8)
"""

from __future__ import annotations

from collections.abc import Callable

from core.logging import get_logger
from core.protocols import Generator
from generators.multiprime import MultiplePrimeGenerator
from generators.park_miller import ParkMillerGenerator
from generators.shuffled import ShuffledGenerator

__all__ = [
    "GENERATORS",
    "ALIASES",
    "register_generator",
    "register_alias",
    "resolve_name",
    "get_generator",
    "available_generators",
]

logger = get_logger(__name__)

# Factory functions take a seed and return a seeded generator
GeneratorFactory = Callable[[int], Generator]

# Global registries
GENERATORS: dict[str, GeneratorFactory] = {}
ALIASES: dict[str, str] = {}


def register_generator(name: str, factory: GeneratorFactory) -> None:
    """Register a generator factory.

    Args:
        name: Unique name for the variant.
        factory: Callable that takes a seed and returns a Generator.

    Raises:
        ValueError: If name is already registered (as a name or alias).
    """
    if name in GENERATORS or name in ALIASES:
        raise ValueError(f"Generator '{name}' is already registered")
    GENERATORS[name] = factory


def register_alias(alias: str, name: str) -> None:
    """Register an alternative name for an existing variant.

    Raises:
        ValueError: If alias is taken.
        KeyError: If name is not registered.
    """
    if alias in GENERATORS or alias in ALIASES:
        raise ValueError(f"Generator '{alias}' is already registered")
    if name not in GENERATORS:
        raise KeyError(f"Cannot alias unknown generator '{name}'")
    ALIASES[alias] = name


def resolve_name(name: str) -> str:
    """Map an alias to its canonical name.

    Raises:
        KeyError: If name is neither registered nor an alias.
    """
    canonical = ALIASES.get(name, name)
    if canonical not in GENERATORS:
        available = ", ".join(available_generators())
        raise KeyError(f"Unknown generator '{name}'. Available: {available}")
    return canonical


def get_generator(name: str, seed: int = 1) -> Generator:
    """Get a seeded generator instance from the registry.

    Args:
        name: Registered name or alias.
        seed: Seed passed to the factory.

    Returns:
        A freshly seeded Generator.

    Raises:
        KeyError: If name is not registered.
    """
    canonical = resolve_name(name)
    logger.debug("building generator %s with seed %d", canonical, seed)
    return GENERATORS[canonical](seed)


def available_generators() -> list[str]:
    """Return sorted canonical names."""
    return sorted(GENERATORS.keys())


# =============================================================================
# Register built-in variants
# =============================================================================

register_generator(ShuffledGenerator.name, ShuffledGenerator)
register_generator(MultiplePrimeGenerator.name, MultiplePrimeGenerator)
register_generator(ParkMillerGenerator.name, ParkMillerGenerator)

register_alias("method1", ShuffledGenerator.name)
register_alias("method2", MultiplePrimeGenerator.name)
register_alias("method3", ParkMillerGenerator.name)
