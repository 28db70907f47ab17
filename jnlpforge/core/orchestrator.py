"""Build orchestrator — the central coordinator for a webstart build pass.

The BuildOrchestrator wires together the AssetStager, ManifestExtender,
Signer, DescriptorGenerator, ExtrasCopier and OutputReconciler into a
single build pass over one output directory.

Pass ordering:

    stage -> (extend manifests -> sign, fresh jars only)
        -> descriptors -> extras -> reconcile

Manifest extension and signing only ever see the jars copied by this pass;
descriptors, extras and cleanup run every time. If a fresh jar cannot be
re-manifested or signed, the copies made by the pass are removed again so
the next pass stages them anew.
"""

from __future__ import annotations

import logging
from pathlib import Path

from jnlpforge.config import ForgeSettings
from jnlpforge.core.asset_stager import AssetStager
from jnlpforge.core.descriptor_generator import DescriptorGenerator
from jnlpforge.core.errors import BuildError, BuildIOError
from jnlpforge.core.extras_copier import ExtrasCopier
from jnlpforge.core.file_ops import delete_path, ensure_directory
from jnlpforge.core.key_generator import KeyGenerator
from jnlpforge.core.manifest_extender import ManifestExtender
from jnlpforge.core.output_reconciler import OutputReconciler
from jnlpforge.core.process_runner import ProcessRunner, SubprocessRunner
from jnlpforge.core.signer import Signer, TsaPolicy
from jnlpforge.models.config import BuildConfig
from jnlpforge.models.reports import BuildReport

logger = logging.getLogger(__name__)


class BuildOrchestrator:
    """Central build orchestrator.

    Parameters
    ----------
    config:
        The build configuration for this invocation.
    runner:
        Process runner for the external JDK tools. Defaults to
        ``SubprocessRunner``.
    settings:
        Runtime settings (tool names, worker bound). Uses defaults if not
        provided.
    """

    def __init__(
        self,
        config: BuildConfig,
        *,
        runner: ProcessRunner | None = None,
        settings: ForgeSettings | None = None,
    ) -> None:
        self.config = config
        self.settings = settings or ForgeSettings()
        self.runner: ProcessRunner = runner or SubprocessRunner()

        output = config.output
        self.stager = AssetStager(output)
        self.manifest_extender = ManifestExtender(
            self.runner,
            config.manifest,
            jar_tool=self.settings.jar_tool,
            max_workers=self.settings.max_workers,
        )
        self.signer = Signer(
            self.runner,
            config.key_config,
            config.effective_use_tsa,
            jarsigner_tool=self.settings.jarsigner_tool,
            max_workers=self.settings.max_workers,
        )
        self.descriptor_generator = DescriptorGenerator(output)
        self.extras_copier = ExtrasCopier(output)
        self.reconciler = OutputReconciler(output)

        self.last_report: BuildReport | None = None

    # ------------------------------------------------------------------
    # Build pass
    # ------------------------------------------------------------------

    def build(self) -> Path:
        """Run one complete build pass and return the output directory.

        Any ``BuildError`` aborts the pass; ``last_report`` is only set
        when the pass completes.
        """
        config = self.config
        ensure_directory(config.output)

        fresh = self.stager.stage(config.artifacts)

        policy: TsaPolicy | None = None
        extended: list[Path] = []
        signed: list[Path] = []
        if fresh:
            try:
                # Fail on a broken TSA setup before any jar is rewritten
                policy = self.signer.check_policy()
                extended = self.manifest_extender.extend(fresh)
                signed = self.signer.sign(fresh)
            except BuildError:
                self._discard(fresh)
                raise
        else:
            logger.info("no fresh jars to sign")

        descriptors = self.descriptor_generator.generate(
            config.artifacts, config.descriptors
        )
        extras = self.extras_copier.copy(config.extras)

        staged = [pair.target for pair in self.stager.plan(config.artifacts)]
        deleted = self.reconciler.reconcile([*staged, *extras, *descriptors])

        self.last_report = BuildReport(
            output=config.output,
            staged=staged,
            fresh=fresh,
            manifests_extended=extended,
            signed=signed,
            timestamped=bool(signed) and policy is TsaPolicy.TIMESTAMPED,
            descriptors=descriptors,
            extras=extras,
            deleted=deleted,
        )
        return config.output

    def _discard(self, fresh: list[Path]) -> None:
        """Remove the copies of a failed pass so the next pass re-stages them.

        A staged copy keeps its source's mtime, so a jar left behind after a
        failed manifest or signing step would look up to date forever.
        """
        for target in fresh:
            try:
                delete_path(target)
            except BuildIOError as exc:
                logger.warning("could not discard %s: %s", target, exc)

    # ------------------------------------------------------------------
    # Key generation
    # ------------------------------------------------------------------

    def generate_key(self) -> None:
        """Generate the signing key from this configuration's Gen/KeyConfig."""
        KeyGenerator(self.runner, keytool=self.settings.keytool_tool).generate(
            self.config.gen_config, self.config.key_config
        )
