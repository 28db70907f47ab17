"""Shared test fixtures for jnlpforge."""

from __future__ import annotations

import os
import threading
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import pytest

from jnlpforge.config import ForgeSettings
from jnlpforge.models.artifacts import Artifact
from jnlpforge.models.config import KeyConfig

# A fixed point in time; sources and targets are dated relative to it
BASE_MTIME_NS = 1_700_000_000 * 1_000_000_000


# ---------------------------------------------------------------------------
# Recording process runner
# ---------------------------------------------------------------------------


def classify(command: str, args: Sequence[str]) -> str:
    """Name the tool operation an invocation stands for."""
    if args and args[0] == "umf":
        return "manifest"
    if args and args[0] == "-verify":
        return "verify"
    if args and args[0] == "-genkey":
        return "keygen"
    return "sign"


@dataclass
class Invocation:
    command: str
    args: list[str]

    @property
    def operation(self) -> str:
        return classify(self.command, self.args)


@dataclass
class FakeRunner:
    """ProcessRunner double: records invocations, returns configured exit codes.

    ``exit_codes`` maps an operation name (``manifest``, ``sign``, ``verify``,
    ``keygen``) to the exit code to return; anything unlisted succeeds.
    ``fail_jar`` restricts failures to invocations mentioning that jar name.
    """

    exit_codes: dict[str, int] = field(default_factory=dict)
    fail_jar: str | None = None
    calls: list[Invocation] = field(default_factory=list)
    _lock: threading.Lock = field(default_factory=threading.Lock)

    def run(self, command: str, args: Sequence[str]) -> int:
        invocation = Invocation(command, list(args))
        with self._lock:
            self.calls.append(invocation)
        code = self.exit_codes.get(invocation.operation, 0)
        if self.fail_jar is not None and not any(a.endswith(self.fail_jar) for a in args):
            return 0
        return code

    def of(self, operation: str) -> list[Invocation]:
        return [c for c in self.calls if c.operation == operation]

    def count(self, operation: str) -> int:
        return len(self.of(operation))


@pytest.fixture
def fake_runner() -> FakeRunner:
    """Provide a runner that records every tool invocation and succeeds."""
    return FakeRunner()


@pytest.fixture
def make_runner() -> Callable[..., FakeRunner]:
    """Factory fixture: a FakeRunner with configured exit codes."""

    def _factory(**exit_codes: int) -> FakeRunner:
        fail_jar = exit_codes.pop("fail_jar", None)
        return FakeRunner(exit_codes=dict(exit_codes), fail_jar=fail_jar)

    return _factory


# ---------------------------------------------------------------------------
# File system
# ---------------------------------------------------------------------------


def set_mtime(path: Path, mtime_ns: int) -> None:
    os.utime(path, ns=(mtime_ns, mtime_ns))


@pytest.fixture
def touch() -> Callable[[Path, int], None]:
    """Provide ``touch(path, mtime_ns)`` for dating files explicitly."""
    return set_mtime


@pytest.fixture
def tmp_dir(tmp_path: Path) -> Path:
    """Provide a temporary directory for test artifacts."""
    return tmp_path


@pytest.fixture
def source_dir(tmp_dir: Path) -> Path:
    path = tmp_dir / "classpath"
    path.mkdir()
    return path


@pytest.fixture
def output_dir(tmp_dir: Path) -> Path:
    return tmp_dir / "webstart"


@pytest.fixture
def make_jar(source_dir: Path) -> Callable[..., Path]:
    """Factory fixture: write a fake jar with a controlled modification time."""

    def _factory(
        name: str,
        content: bytes | None = None,
        mtime_ns: int = BASE_MTIME_NS,
    ) -> Path:
        path = source_dir / name
        path.write_bytes(content if content is not None else f"jar:{name}".encode())
        set_mtime(path, mtime_ns)
        return path

    return _factory


@pytest.fixture
def make_artifact(make_jar: Callable[..., Path]) -> Callable[..., Artifact]:
    """Factory fixture: write a jar and return the matching Artifact."""

    def _factory(name: str, main: bool = False, **overrides: Any) -> Artifact:
        path = make_jar(name, **overrides)
        return Artifact(
            source_path=path,
            logical_name=name,
            is_main=main,
            byte_size=path.stat().st_size,
        )

    return _factory


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------


@pytest.fixture
def key_config(tmp_dir: Path) -> KeyConfig:
    """A signing identity without a TSA URL."""
    return KeyConfig(
        key_store=tmp_dir / "keys" / "signing.jks",
        store_password="store-secret",
        alias="webstart",
        key_password="key-secret",
    )


@pytest.fixture
def tsa_key_config(key_config: KeyConfig) -> KeyConfig:
    """A signing identity with a TSA URL."""
    return key_config.model_copy(update={"tsa_url": "http://tsa.example.com"})


@pytest.fixture
def settings() -> ForgeSettings:
    return ForgeSettings(max_workers=4)
