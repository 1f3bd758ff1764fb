"""Shell script helpers shared by recipes."""

from __future__ import annotations

import textwrap

OUTPUT = '"$BUILD_OUTPUT"'


def shell(text: str) -> str:
    """Dedent a recipe script and drop surrounding blank lines."""
    return textwrap.dedent(text).strip("\n")


def include_flags(*prefixes: str) -> str:
    return " ".join(f"-I{p}/include" for p in prefixes)


def link_flags(*prefixes: str) -> str:
    """``-L`` flags followed by matching ``-rpath`` flags, in argument order."""
    search = [f"-L{p}/lib" for p in prefixes]
    rpath = [f"-Wl,-rpath,{p}/lib" for p in prefixes]
    return " ".join(search + rpath)
