"""Tests for the process runner boundary."""

from __future__ import annotations

import logging
import subprocess
import sys

from jnlpforge.core.process_runner import (
    EXIT_COMMAND_NOT_FOUND,
    ProcessRunner,
    SubprocessRunner,
    format_command,
    redact_args,
)


class TestRedaction:
    def test_passwords_are_hidden(self):
        args = ["-keystore", "ks.jks", "-storepass", "s3cret", "-keypass", "k3y", "app.jar"]
        assert redact_args(args) == [
            "-keystore", "ks.jks", "-storepass", "****", "-keypass", "****", "app.jar",
        ]

    def test_keytool_spelling_is_hidden(self):
        assert redact_args(["-storePass", "s3cret"]) == ["-storePass", "****"]

    def test_format_command(self):
        assert format_command("jarsigner", ["-storepass", "x", "a.jar"]) == (
            "jarsigner -storepass **** a.jar"
        )


class TestSubprocessRunner:
    def test_satisfies_protocol(self, fake_runner):
        assert isinstance(SubprocessRunner(), ProcessRunner)
        assert isinstance(fake_runner, ProcessRunner)

    def test_returns_exit_code(self):
        runner = SubprocessRunner()
        assert runner.run(sys.executable, ["-c", "raise SystemExit(0)"]) == 0
        assert runner.run(sys.executable, ["-c", "raise SystemExit(3)"]) == 3

    def test_missing_command_is_127(self, caplog):
        caplog.set_level(logging.ERROR, logger="jnlpforge")
        code = SubprocessRunner().run("definitely-not-a-jdk-tool-xyz", [])
        assert code == EXIT_COMMAND_NOT_FOUND
        assert "command not found" in caplog.text

    def test_stderr_of_failed_process_is_logged(self, caplog):
        caplog.set_level(logging.DEBUG, logger="jnlpforge")
        SubprocessRunner().run(
            sys.executable,
            ["-c", "import sys; sys.stderr.write('jarsigner: bad keystore\\n'); sys.exit(1)"],
        )
        warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
        assert any("bad keystore" in r.getMessage() for r in warnings)

    def test_does_not_raise_on_failure(self, monkeypatch):
        calls = []

        def fake_run(cmd, **kwargs):
            calls.append((cmd, kwargs))
            return subprocess.CompletedProcess(cmd, 9, stdout="", stderr="")

        monkeypatch.setattr(subprocess, "run", fake_run)
        assert SubprocessRunner().run("jar", ["umf", "m", "a.jar"]) == 9
        assert calls[0][0] == ["jar", "umf", "m", "a.jar"]
        assert calls[0][1]["check"] is False
