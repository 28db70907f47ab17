"""jnlpforge: Incremental, Signed Java Web Start Distributions.

One build pass turns a resolved classpath into a deployable webstart
directory:
  - jars copied only when their source is newer than the staged copy
  - manifests extended with ``jar umf`` (optional)
  - jars signed and verified with ``jarsigner``, optionally timestamped
  - JNLP descriptors rendered by pluggable strategies
  - extra files copied verbatim
  - everything else in the output directory removed
"""

__version__ = "0.1.0"
__description__ = "Incremental, signed Java Web Start distributions"

from jnlpforge.core.orchestrator import BuildOrchestrator
from jnlpforge.core.key_generator import KeyGenerator
from jnlpforge.cli.app import app as cli

__all__ = ["BuildOrchestrator", "KeyGenerator", "cli", "__version__"]
