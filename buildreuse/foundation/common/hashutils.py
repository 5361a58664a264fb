from __future__ import annotations

"""Hashing helpers used to derive stable keys for external caches."""

import json
from typing import Any, Final, Iterable

from blake3 import blake3

__all__ = ["hash_bytes", "canonical_json", "compute_lookup_key"]

_BLAKE3_PREFIX: Final[str] = "blake3:"


def hash_bytes(data: bytes) -> str:
    """Return a ``blake3:``-prefixed hex digest of ``data``."""

    payload = data if isinstance(data, bytes) else bytes(data)
    return f"{_BLAKE3_PREFIX}{blake3(payload).hexdigest()}"


def canonical_json(value: Any) -> str:
    """Serialize ``value`` with sorted keys and no insignificant whitespace."""

    return json.dumps(value, sort_keys=True, separators=(",", ":"), default=str)


def compute_lookup_key(
    namespace: str,
    runtime_version: str,
    runtime_provider: str,
    features: Any,
    dependencies: Iterable[str],
) -> str:
    """Return the key a caller-side cache of lookup results should use.

    The key covers every input the lookup depends on: the resolved namespace,
    the runtime selectors, a digest of the feature configuration and a digest
    of the dependency set. Dependency order and duplicates do not affect it.
    """

    features_hash = hash_bytes(canonical_json(features or {}).encode())
    deps_hash = hash_bytes("\x1f".join(sorted(set(dependencies))).encode())
    payload = "\x1f".join(
        (namespace or "", runtime_version or "", runtime_provider or "", features_hash, deps_hash)
    ).encode()
    return hash_bytes(payload)
