"""Process runner boundary for the external JDK tools.

Defines the ``ProcessRunner`` Protocol every tool invocation goes through
(``jar``, ``jarsigner``, ``keytool``), along with the default
``SubprocessRunner``. Tests substitute a recording fake instead of
spawning real processes.
"""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Sequence
from typing import Protocol, runtime_checkable

logger = logging.getLogger(__name__)

# Options whose following argument is a secret and must never be logged
_SECRET_OPTIONS = frozenset({"-storepass", "-storePass", "-keypass"})

# Shell convention for "command not found"
EXIT_COMMAND_NOT_FOUND = 127


# ---------------------------------------------------------------------------
# Protocol
# ---------------------------------------------------------------------------


@runtime_checkable
class ProcessRunner(Protocol):
    """Protocol for external process execution.

    Any object with a ``run(command, args) -> int`` method satisfies this
    protocol. The return value is the process exit status; zero means
    success.
    """

    def run(self, command: str, args: Sequence[str]) -> int:
        """Run *command* with *args* to completion and return its exit code."""
        ...


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def redact_args(args: Sequence[str]) -> list[str]:
    """Return *args* with every password argument replaced by ``****``."""
    redacted: list[str] = []
    hide_next = False
    for arg in args:
        redacted.append("****" if hide_next else arg)
        hide_next = arg in _SECRET_OPTIONS
    return redacted


def format_command(command: str, args: Sequence[str]) -> str:
    """Render a command line for logging, secrets redacted."""
    return " ".join([command, *redact_args(args)])


# ---------------------------------------------------------------------------
# Default implementation
# ---------------------------------------------------------------------------


class SubprocessRunner:
    """Runs tools via ``subprocess.run`` and relays their output to logging.

    Blocks until the process exits; there is no timeout. A missing
    executable is reported as exit code 127 rather than raised, so callers
    translate it into the same failure as any other non-zero exit.
    """

    def run(self, command: str, args: Sequence[str]) -> int:
        logger.debug("running %s", format_command(command, args))
        try:
            result = subprocess.run(
                [command, *args],
                capture_output=True,
                text=True,
                check=False,
            )
        except FileNotFoundError:
            logger.error("%s: command not found", command)
            return EXIT_COMMAND_NOT_FOUND

        for line in result.stdout.splitlines():
            logger.debug("%s: %s", command, line)
        err_level = logging.WARNING if result.returncode else logging.DEBUG
        for line in result.stderr.splitlines():
            logger.log(err_level, "%s: %s", command, line)
        return result.returncode
