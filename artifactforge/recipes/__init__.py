"""Recipe catalog.

``CATALOG`` maps every recipe name to its class. ``DEFAULT_BUILD`` is the
declared set a plain ``artifactforge build`` runs: every recipe that
supports all four platforms, listed leaves first. Darwin-only recipes
(json-c, libuv, mbedtls, libwebsockets) are built on request with
``--only``.
"""

from __future__ import annotations

from artifactforge.core.recipe import Recipe
from artifactforge.recipes.argocd import Argocd
from artifactforge.recipes.awscli2 import Awscli2
from artifactforge.recipes.bat import Bat
from artifactforge.recipes.bottom import Bottom
from artifactforge.recipes.cmake import Cmake
from artifactforge.recipes.cue import Cue
from artifactforge.recipes.direnv import Direnv
from artifactforge.recipes.doppler import Doppler
from artifactforge.recipes.fd import Fd
from artifactforge.recipes.file import File
from artifactforge.recipes.fluxcd import Fluxcd
from artifactforge.recipes.go import Go
from artifactforge.recipes.golangci_lint import GolangciLint
from artifactforge.recipes.gpg import Gpg
from artifactforge.recipes.helm import Helm
from artifactforge.recipes.jq import Jq
from artifactforge.recipes.json_c import JsonC
from artifactforge.recipes.just import Just
from artifactforge.recipes.k9s import K9s
from artifactforge.recipes.kubeseal import Kubeseal
from artifactforge.recipes.lazygit import Lazygit
from artifactforge.recipes.libassuan import Libassuan
from artifactforge.recipes.libevent import Libevent
from artifactforge.recipes.libgcrypt import Libgcrypt
from artifactforge.recipes.libgpg_error import LibgpgError
from artifactforge.recipes.libksba import Libksba
from artifactforge.recipes.libuv import Libuv
from artifactforge.recipes.libwebsockets import Libwebsockets
from artifactforge.recipes.mbedtls import Mbedtls
from artifactforge.recipes.ncurses import Ncurses
from artifactforge.recipes.neovim import Neovim
from artifactforge.recipes.nnn import Nnn
from artifactforge.recipes.npth import Npth
from artifactforge.recipes.openapi_generator_cli import OpenapiGeneratorCli
from artifactforge.recipes.openjdk import Openjdk
from artifactforge.recipes.pkg_config import PkgConfig
from artifactforge.recipes.readline import Readline
from artifactforge.recipes.ripgrep import Ripgrep
from artifactforge.recipes.skopeo import Skopeo
from artifactforge.recipes.starship import Starship
from artifactforge.recipes.terraform import Terraform
from artifactforge.recipes.tmux import Tmux
from artifactforge.recipes.ttyd import Ttyd
from artifactforge.recipes.umoci import Umoci
from artifactforge.recipes.yq import Yq
from artifactforge.recipes.zlib import Zlib
from artifactforge.recipes.zsh import Zsh

# Dependencies first, then tools, alphabetically within each group
DEFAULT_BUILD: tuple[type[Recipe], ...] = (
    Libevent,
    LibgpgError,
    Libassuan,
    Libgcrypt,
    Libksba,
    Ncurses,
    Npth,
    Openjdk,
    PkgConfig,
    Readline,
    Cmake,
    Go,
    Zlib,
    Argocd,
    Awscli2,
    Bat,
    Bottom,
    Cue,
    Direnv,
    Doppler,
    Fd,
    Fluxcd,
    GolangciLint,
    Gpg,
    Helm,
    Jq,
    Just,
    K9s,
    Kubeseal,
    Lazygit,
    Neovim,
    Nnn,
    OpenapiGeneratorCli,
    Ripgrep,
    Skopeo,
    Starship,
    Terraform,
    Tmux,
    Ttyd,
    Umoci,
    Yq,
    Zsh,
)

CATALOG: dict[str, type[Recipe]] = {
    recipe.name: recipe
    for recipe in (*DEFAULT_BUILD, JsonC, Libuv, Mbedtls, Libwebsockets)
}

__all__ = [
    "CATALOG",
    "DEFAULT_BUILD",
    "Argocd",
    "Awscli2",
    "Bat",
    "Bottom",
    "Cmake",
    "Cue",
    "Direnv",
    "Doppler",
    "Fd",
    "File",
    "Fluxcd",
    "Go",
    "GolangciLint",
    "Gpg",
    "Helm",
    "Jq",
    "JsonC",
    "Just",
    "K9s",
    "Kubeseal",
    "Lazygit",
    "Libassuan",
    "Libevent",
    "Libgcrypt",
    "LibgpgError",
    "Libksba",
    "Libuv",
    "Libwebsockets",
    "Mbedtls",
    "Ncurses",
    "Neovim",
    "Nnn",
    "Npth",
    "OpenapiGeneratorCli",
    "Openjdk",
    "PkgConfig",
    "Readline",
    "Ripgrep",
    "Skopeo",
    "Starship",
    "Terraform",
    "Tmux",
    "Ttyd",
    "Umoci",
    "Yq",
    "Zlib",
    "Zsh",
]
