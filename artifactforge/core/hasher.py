"""Content addressing for artifact specs.

A spec's address is the SHA-256 of its identity serialised as canonical
JSON, so equal content always yields the same ``sha256:<hex>`` address
and the spec store can shard on the hex digest.
"""

from __future__ import annotations

import hashlib
import json
from typing import Any

ADDRESS_PREFIX = "sha256:"


def canonical_json_bytes(obj: Any) -> bytes:
    """Serialise *obj* with sorted keys, compact separators, ASCII-only, UTF-8."""
    return json.dumps(
        obj, sort_keys=True, separators=(",", ":"), ensure_ascii=True
    ).encode("utf-8")


def sha256_hex(data: bytes) -> str:
    return hashlib.sha256(data).hexdigest()


def content_address(obj: Any) -> str:
    """Address of a JSON-serialisable object, as used by handles and the spec store."""
    return f"{ADDRESS_PREFIX}{sha256_hex(canonical_json_bytes(obj))}"


def extract_digest(address: str) -> str:
    """Bare hex digest of *address*; bare digests pass through unchanged."""
    return address.removeprefix(ADDRESS_PREFIX)
