"""Jar signing and verification via ``jarsigner``.

Timestamp authority policy
--------------------------
The policy is decided once per pass, before any jar is touched:

=================  ==============  ======================================
``tsa_url``        ``use_tsa``     outcome
=================  ==============  ======================================
set                true            sign with ``-tsa <url>``
set                false           sign without timestamp (explicit opt-out)
missing            true            ``TsaRequiredButMissing``, nothing signed
missing            false           sign without timestamp
=================  ==============  ======================================

``use_tsa=None`` defers to the KeyConfig: true exactly when it has a URL.
Every fresh jar is then signed and immediately verified with the same
keystore credentials, each jar in its own task.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from enum import Enum
from pathlib import Path

from jnlpforge.core.errors import SignFailed, TsaRequiredButMissing, VerifyFailed
from jnlpforge.core.fanout import run_parallel
from jnlpforge.core.process_runner import ProcessRunner
from jnlpforge.models.config import KeyConfig

logger = logging.getLogger(__name__)


class TsaPolicy(str, Enum):
    """Whether signatures carry a trusted timestamp."""

    TIMESTAMPED = "timestamped"
    UNTIMESTAMPED = "untimestamped"


def resolve_tsa_policy(key_config: KeyConfig, use_tsa: bool | None) -> TsaPolicy:
    """Evaluate the TSA policy table for *key_config*.

    Raises
    ------
    TsaRequiredButMissing
        If timestamping is requested but no TSA URL is configured.
    """
    if use_tsa is None:
        use_tsa = key_config.tsa_url is not None
    if key_config.tsa_url is not None:
        return TsaPolicy.TIMESTAMPED if use_tsa else TsaPolicy.UNTIMESTAMPED
    if use_tsa:
        raise TsaRequiredButMissing()
    return TsaPolicy.UNTIMESTAMPED


def sign_args(key_config: KeyConfig, jar: Path, policy: TsaPolicy) -> list[str]:
    """Build the ``jarsigner`` argument list for signing *jar*."""
    tsa: list[str] = []
    if policy is TsaPolicy.TIMESTAMPED and key_config.tsa_url is not None:
        tsa = ["-tsa", key_config.tsa_url]
    return [
        *tsa,
        "-keystore", str(key_config.key_store.absolute()),
        "-storepass", key_config.store_password,
        "-keypass", key_config.key_password,
        str(jar.absolute()),
        key_config.alias,
    ]


def verify_args(key_config: KeyConfig, jar: Path) -> list[str]:
    """Build the ``jarsigner -verify`` argument list for *jar*."""
    return [
        "-verify",
        "-keystore", str(key_config.key_store.absolute()),
        "-storepass", key_config.store_password,
        "-keypass", key_config.key_password,
        str(jar.absolute()),
    ]


class Signer:
    """Signs and verifies fresh jars with the configured identity.

    Parameters
    ----------
    runner:
        Process runner used to invoke ``jarsigner``.
    key_config:
        Signing identity. ``None`` leaves jars unsigned.
    use_tsa:
        Explicit timestamping request, or ``None`` to derive it.
    jarsigner_tool:
        Name or path of the ``jarsigner`` executable.
    max_workers:
        Upper bound on concurrently processed jars.
    """

    def __init__(
        self,
        runner: ProcessRunner,
        key_config: KeyConfig | None,
        use_tsa: bool | None = None,
        *,
        jarsigner_tool: str = "jarsigner",
        max_workers: int = 8,
    ) -> None:
        self._runner = runner
        self._key_config = key_config
        self._use_tsa = use_tsa
        self._jarsigner_tool = jarsigner_tool
        self._max_workers = max_workers

    @property
    def enabled(self) -> bool:
        return self._key_config is not None

    def check_policy(self) -> TsaPolicy | None:
        """Resolve the TSA policy, or ``None`` when signing is not configured."""
        if self._key_config is None:
            return None
        return resolve_tsa_policy(self._key_config, self._use_tsa)

    def sign(self, jars: Sequence[Path]) -> list[Path]:
        """Sign and verify every jar; return the jars signed."""
        if self._key_config is None:
            logger.info("missing KeyConfig, leaving jar files unsigned")
            return []

        policy = resolve_tsa_policy(self._key_config, self._use_tsa)
        if policy is TsaPolicy.TIMESTAMPED:
            logger.info("signing jars with tsa usage")
        else:
            logger.info("signing jars without using tsa")

        key_config = self._key_config
        return run_parallel(
            lambda jar: self._sign_and_verify(key_config, jar, policy),
            list(jars),
            max_workers=self._max_workers,
            name="sign",
        )

    def _sign_and_verify(self, key_config: KeyConfig, jar: Path, policy: TsaPolicy) -> Path:
        rc = self._runner.run(self._jarsigner_tool, sign_args(key_config, jar, policy))
        if rc != 0:
            raise SignFailed(rc, jar)
        rc = self._runner.run(self._jarsigner_tool, verify_args(key_config, jar))
        if rc != 0:
            raise VerifyFailed(rc, jar)
        logger.debug("signed and verified %s", jar.name)
        return jar
