"""
Shared pytest fixtures for digestfmt tests.

- isolated_env: every test runs in an empty cwd with no DIGESTFMT_ env vars
  and an unconfigured "digestfmt" logger
- registry / formatter: a private registry and a formatter built on it
- unavailable: factory for strategies that behave like disabled algorithms
"""

import logging
import os
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any

import pytest

from digestfmt import formatter as formatter_module
from digestfmt.formatter import HashFormatter
from digestfmt.hashing import HashAlgorithmRegistry, HashStrategy


class UnavailableStrategy(HashStrategy):
    """Strategy whose hasher can never be created, like a disabled algorithm."""

    def __init__(self, name: str, digest_size: int = 32) -> None:
        self._name = name
        self._digest_size = digest_size

    @property
    def algorithm_name(self) -> str:
        return self._name

    @property
    def digest_size(self) -> int:
        return self._digest_size

    def create_hasher(self) -> Any:
        raise ValueError(f"unsupported hash type {self._name}")


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Run each test in tmp_path with a clean environment and logger."""
    for key in list(os.environ):
        if key.upper().startswith("DIGESTFMT_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(formatter_module, "_default_formatter", None)
    yield tmp_path
    log = logging.getLogger("digestfmt")
    for handler in list(log.handlers):
        log.removeHandler(handler)
        handler.close()
    log.propagate = True
    log.setLevel(logging.NOTSET)


@pytest.fixture
def registry() -> HashAlgorithmRegistry:
    return HashAlgorithmRegistry()


@pytest.fixture
def formatter(registry: HashAlgorithmRegistry) -> HashFormatter:
    return HashFormatter(registry=registry)


@pytest.fixture
def unavailable() -> Callable[..., UnavailableStrategy]:
    return UnavailableStrategy


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[str], Path]:
    """Write a .digestfmt/config.toml in the test cwd."""

    def write(content: str) -> Path:
        config_path = tmp_path / ".digestfmt" / "config.toml"
        config_path.parent.mkdir(parents=True, exist_ok=True)
        config_path.write_text(content)
        return config_path

    return write
