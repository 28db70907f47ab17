"""Build error taxonomy.

Every error here is fatal to the current build pass: there is no retry and
no partial success. Missing *optional* configuration (no manifest, no
KeyConfig) is never an error; it only degrades the output and is logged.
"""

from __future__ import annotations

from pathlib import Path


class BuildError(RuntimeError):
    """Base class for everything that aborts a build pass."""


class ConfigurationMissing(BuildError):
    """Raised when a configuration required by an operation is absent."""

    def __init__(self, which: str) -> None:
        self.which = which
        super().__init__(f"{which} must be set")


class TsaRequiredButMissing(BuildError):
    """Raised when timestamping was requested but no TSA URL is configured."""

    def __init__(self) -> None:
        super().__init__("tsa usage enabled but tsa url is not provided")


class ExternalProcessFailed(BuildError):
    """Raised when an external tool exits with a non-zero status."""

    operation = "external process"

    def __init__(self, exit_code: int, target: Path | None = None) -> None:
        self.exit_code = exit_code
        self.target = target
        where = f" for {target}" if target is not None else ""
        super().__init__(f"{self.operation} failed{where}: exit code {exit_code}")


class ManifestMergeFailed(ExternalProcessFailed):
    operation = "manifest change"


class SignFailed(ExternalProcessFailed):
    operation = "sign"


class VerifyFailed(ExternalProcessFailed):
    operation = "verify"


class KeyGenFailed(ExternalProcessFailed):
    operation = "key gen"


class BuildIOError(BuildError):
    """Raised when a copy, write or delete in the file system fails."""

    def __init__(self, operation: str, path: Path, reason: str = "") -> None:
        self.operation = operation
        self.path = path
        detail = f": {reason}" if reason else ""
        super().__init__(f"{operation} failed for {path}{detail}")


class ProjectFileError(BuildError):
    """Raised when a project file cannot be read or does not validate."""
