from __future__ import annotations

from artifactforge.models.platforms import DEFAULT_PLATFORMS
from artifactforge.recipes._gomodule import GoModule


class Skopeo(GoModule):
    name = "skopeo"
    version = "1.21.0"
    platforms = DEFAULT_PLATFORMS
    repository = "containers/skopeo"
    package = "./cmd/skopeo"
    # pure-Go signing, no gpgme or btrfs headers needed
    build_tags = ("containers_image_openpgp", "exclude_graphdriver_btrfs")
