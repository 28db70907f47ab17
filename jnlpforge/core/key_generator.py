"""Signing key generation via ``keytool -genkey``.

Independent of the build pass. Both a GenConfig and a KeyConfig are
required; nothing is executed unless both are present.
"""

from __future__ import annotations

import logging

from jnlpforge.core.errors import ConfigurationMissing, KeyGenFailed
from jnlpforge.core.file_ops import ensure_directory
from jnlpforge.core.process_runner import ProcessRunner
from jnlpforge.models.config import GenConfig, KeyConfig

logger = logging.getLogger(__name__)


def keygen_args(gen_config: GenConfig, key_config: KeyConfig) -> list[str]:
    """Build the ``keytool`` argument list for generating the signing key."""
    return [
        "-genkey",
        "-dname", gen_config.distinguished_name,
        "-validity", str(gen_config.validity_days),
        "-keystore", str(key_config.key_store.absolute()),
        "-storePass", key_config.store_password,
        "-keypass", key_config.key_password,
        "-alias", key_config.alias,
    ]


class KeyGenerator:
    """Creates the signing key described by a GenConfig/KeyConfig pair."""

    def __init__(self, runner: ProcessRunner, *, keytool: str = "keytool") -> None:
        self._runner = runner
        self._keytool = keytool

    def generate(
        self, gen_config: GenConfig | None, key_config: KeyConfig | None
    ) -> KeyConfig:
        """Generate the key and return the KeyConfig it was stored under.

        Raises
        ------
        ConfigurationMissing
            If either configuration is ``None``.
        KeyGenFailed
            If ``keytool`` exits non-zero.
        """
        if gen_config is None:
            raise ConfigurationMissing("gen_config")
        if key_config is None:
            raise ConfigurationMissing("key_config")

        logger.info("creating webstart key in %s", key_config.key_store)
        ensure_directory(key_config.key_store.parent)
        rc = self._runner.run(self._keytool, keygen_args(gen_config, key_config))
        if rc != 0:
            raise KeyGenFailed(rc, key_config.key_store)
        return key_config
