"""Build pass components: staging, manifest extension, signing, descriptors,
extras, cleanup, orchestration and key generation."""
