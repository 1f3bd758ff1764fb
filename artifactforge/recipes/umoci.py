from __future__ import annotations

from artifactforge.models.platforms import DEFAULT_PLATFORMS
from artifactforge.recipes._gomodule import GoModule


class Umoci(GoModule):
    name = "umoci"
    version = "0.6.0"
    platforms = DEFAULT_PLATFORMS
    repository = "opencontainers/umoci"
    package = "./cmd/umoci"
