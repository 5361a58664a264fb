"""Interfaces to the artifact store and platform, plus in-memory versions."""

from __future__ import annotations

from typing import Dict, Iterable, List, Mapping, Sequence

from .errors import NotFoundError
from .models import Artifact, BuildRequest, Selector

__all__ = [
    "ArtifactStore",
    "PlatformResolver",
    "MemoryArtifactStore",
    "StaticPlatformResolver",
]


class ArtifactStore:
    """Interface to list artifacts by namespace and label selectors."""

    async def list(self, namespace: str, selectors: Sequence[Selector]) -> Sequence[Artifact]:
        """Return artifacts in ``namespace`` satisfying every selector.

        Implementations raise :class:`~.errors.StoreError` on failure.
        """
        raise NotImplementedError


class PlatformResolver:
    """Interface to resolve the namespace artifacts for a request live in."""

    async def resolve_namespace(self, request: BuildRequest) -> str:
        """Return the artifact namespace or raise :class:`~.errors.NotFoundError`."""
        raise NotImplementedError


class MemoryArtifactStore(ArtifactStore):
    """In-memory store preserving insertion order within each namespace."""

    def __init__(self, artifacts: Iterable[Artifact] = ()) -> None:
        self._items: Dict[str, Dict[str, Artifact]] = {}
        for artifact in artifacts:
            self.add(artifact)

    # utility --------------------------------------------------------------
    def add(self, artifact: Artifact) -> None:
        self._items.setdefault(artifact.namespace, {})[artifact.name] = artifact

    def remove(self, namespace: str, name: str) -> None:
        self._items.get(namespace, {}).pop(name, None)

    # interface ------------------------------------------------------------
    async def list(self, namespace: str, selectors: Sequence[Selector]) -> List[Artifact]:
        result: List[Artifact] = []
        for artifact in self._items.get(namespace, {}).values():
            labels = artifact.selector_labels()
            if all(selector.matches(labels) for selector in selectors):
                result.append(artifact)
        return result


class StaticPlatformResolver(PlatformResolver):
    """Resolve namespaces from a fixed mapping of request namespace to target.

    Requests from namespaces missing in the mapping raise
    :class:`~.errors.NotFoundError`, as when no platform is installed.
    """

    def __init__(self, namespaces: Mapping[str, str] | None = None) -> None:
        self._namespaces = dict(namespaces or {})

    async def resolve_namespace(self, request: BuildRequest) -> str:
        try:
            return self._namespaces[request.namespace]
        except KeyError:
            raise NotFoundError(f"no platform for namespace {request.namespace!r}") from None
