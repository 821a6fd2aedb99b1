"""Tests for the texrand command line runner.

This module tests:
- Argument parsing, including --log-level
- The draws, perm, checks and hist modes
- Config files with --set overrides
- Exit codes for bad input
- Modes run on generators registered without BaseGenerator
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from core.logging import LOGGER_NAME
from diagnostics.runner import main, parse_args
from generators import registry


class MinimalStandard:
    """Park-Miller stream implementing only the Generator protocol."""

    def __init__(self, seed: int = 1) -> None:
        self.ix = abs(seed)

    def seed(self, s: int) -> None:
        self.ix = abs(s)

    def eval(self) -> float:
        self.ix = (16807 * self.ix) % 2147483647
        return self.ix * 4.656612875e-10

    def eval_into(self, n: int, out) -> None:
        for k in range(n):
            out[k] = self.eval()


@pytest.fixture(autouse=True)
def restore_package_logger():
    logger = logging.getLogger(LOGGER_NAME)
    handlers = list(logger.handlers)
    level = logger.level
    yield
    logger.handlers = handlers
    logger.setLevel(level)


def _stdout_json(capsys: pytest.CaptureFixture[str]) -> dict:
    return json.loads(capsys.readouterr().out)


# =============================================================================
# Tests for argument parsing
# =============================================================================


def test_parse_args_defaults() -> None:
    args = parse_args(["draws"])
    assert args.generator == "park_miller"
    assert args.seed == 1
    assert args.overrides == []


# =============================================================================
# Tests for the run modes
# =============================================================================


def test_draws(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["draws", "--generator", "method3", "--seed", "1", "--count", "2"]) == 0
    payload = _stdout_json(capsys)
    assert payload["generator"] == "park_miller"
    assert payload["draws"] == [16807 * 4.656612875e-10, 282475249 * 4.656612875e-10]


def test_perm(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["perm", "--seed", "1", "--length", "10"]) == 0
    assert _stdout_json(capsys)["perm"] == [5, 4, 2, 9, 8, 7, 3, 6, 1, 0]


def test_checks(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["checks", "--generator", "shuffled", "--seed", "4"]) == 0
    assert _stdout_json(capsys)["checks"]["passed"] is True


def test_hist(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    out = tmp_path / "h.png"
    assert main(["hist", "--generator", "multiprime", "--count", "500", "--out", str(out)]) == 0
    assert _stdout_json(capsys)["histogram"] == str(out)
    assert out.exists()


# =============================================================================
# Tests for config files and overrides
# =============================================================================


def test_config_file_with_override(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "gen.json"
    path.write_text(json.dumps({"name": "method2", "seed": 99}))
    assert main(["draws", "--config", str(path), "--set", "seed=1", "--count", "1"]) == 0
    payload = _stdout_json(capsys)
    assert payload["generator"] == "multiprime"
    assert payload["seed"] == 1
    assert payload["draws"] == [1398 * 1.00010001e-4]


def test_set_without_config(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["draws", "--set", "name=method1", "--count", "1", "--seed", "0"]) == 0
    assert _stdout_json(capsys)["draws"] == [157787 * 1.400512e-6]


# =============================================================================
# Tests for error exits
# =============================================================================


def test_unknown_generator(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["draws", "--generator", "nope"]) == 1
    assert "error" in json.loads(capsys.readouterr().err.strip().splitlines()[-1])


def test_negative_length(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["perm", "--length", "-3"]) == 1
    assert ">= 0" in capsys.readouterr().err


def test_log_level_case_insensitive(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["draws", "--count", "1", "--log-level", "debug"]) == 0
    assert len(_stdout_json(capsys)["draws"]) == 1


def test_unknown_log_level_is_usage_error(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["draws", "--log-level", "loud"])
    assert excinfo.value.code == 2
    assert "--log-level" in capsys.readouterr().err


# =============================================================================
# Tests for generators without BaseGenerator
# =============================================================================


class TestProtocolOnlyGenerator:
    """Modes that only need seed/eval/eval_into work without BaseGenerator."""

    @pytest.fixture(autouse=True)
    def register_minimal(self):
        registry.register_generator("_minimal_cli", MinimalStandard)
        yield
        registry.GENERATORS.pop("_minimal_cli", None)

    def test_perm(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["perm", "--generator", "_minimal_cli", "--seed", "1", "--length", "10"]) == 0
        assert _stdout_json(capsys)["perm"] == [5, 4, 2, 9, 8, 7, 3, 6, 1, 0]

    def test_draws(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["draws", "--generator", "_minimal_cli", "--count", "1"]) == 0
        assert _stdout_json(capsys)["draws"] == [16807 * 4.656612875e-10]

    def test_hist(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        out = tmp_path / "minimal.png"
        assert main(["hist", "--generator", "_minimal_cli", "--count", "200", "--out", str(out)]) == 0
        assert out.exists()
