"""Config loading and generator construction utilities."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from core.protocols import Generator
from core.types import GeneratorConfig

_CONFIG_KEYS = {"name", "seed"}


def load_json(path: Path) -> dict[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        return json.load(f)


def _parse_value(raw: str) -> Any:
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


def apply_overrides(config: dict[str, Any], overrides: list[str]) -> dict[str, Any]:
    """Return a copy of config with dotted key=value overrides applied.

    Values are parsed as JSON when possible ("seed=5" gives an int),
    otherwise kept as strings.
    """
    result = json.loads(json.dumps(config))
    for item in overrides:
        if "=" not in item:
            raise ValueError(f"Override must be key=value, got: {item}")
        path, raw_val = item.split("=", 1)
        keys = path.split(".")
        target = result
        for key in keys[:-1]:
            if key not in target or not isinstance(target[key], dict):
                target[key] = {}
            target = target[key]
        target[keys[-1]] = _parse_value(raw_val)
    return result


def parse_generator_config(raw: dict[str, Any]) -> GeneratorConfig:
    """Validate a raw mapping and turn it into a GeneratorConfig.

    Raises:
        TypeError: If raw is not a dict or seed is not an integer.
        ValueError: If name is missing or unknown keys are present.
    """
    if not isinstance(raw, dict):
        raise TypeError(f"Generator config must be a dict, got {type(raw).__name__}")
    unknown = set(raw) - _CONFIG_KEYS
    if unknown:
        raise ValueError(f"Unknown generator config keys: {sorted(unknown)}")
    name = raw.get("name")
    if not isinstance(name, str) or not name:
        raise ValueError("Generator config requires a non-empty 'name'")
    seed = raw.get("seed", 1)
    if isinstance(seed, bool) or not isinstance(seed, int):
        raise TypeError(f"seed must be an integer, got {seed!r}")
    return GeneratorConfig(name=name, seed=seed)


def build_generator(config: GeneratorConfig | dict[str, Any]) -> Generator:
    """Instantiate the configured generator through the registry."""
    from generators.registry import get_generator

    if not isinstance(config, GeneratorConfig):
        config = parse_generator_config(config)
    return get_generator(config.name, seed=config.seed)


def load_generator_config(path: Path, overrides: list[str] | None = None) -> GeneratorConfig:
    """Load a JSON generator config from disk and apply overrides."""
    raw = load_json(path)
    if overrides:
        raw = apply_overrides(raw, overrides)
    return parse_generator_config(raw)
