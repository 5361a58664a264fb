"""Look up reusable artifacts for a build request."""

from __future__ import annotations

import asyncio
import logging
from typing import List, Sequence

from . import metrics
from .config import ReuseConfig
from .errors import NotFoundError
from .matcher import Matcher
from .models import (
    KIND_LABEL,
    RUNTIME_PROVIDER_LABEL,
    RUNTIME_VERSION_LABEL,
    Artifact,
    ArtifactKind,
    BuildRequest,
    Selector,
)
from .store import ArtifactStore, PlatformResolver

__all__ = ["ArtifactLookup", "LOOKUP_KINDS"]

logger = logging.getLogger(__name__)

LOOKUP_KINDS = (ArtifactKind.PLATFORM, ArtifactKind.EXTERNAL)


class ArtifactLookup:
    """Retrieve candidate artifacts from a store and keep those that match."""

    def __init__(
        self,
        store: ArtifactStore,
        platform: PlatformResolver,
        matcher: Matcher,
        *,
        config: ReuseConfig | None = None,
    ) -> None:
        self.store = store
        self.platform = platform
        self.matcher = matcher
        self.config = config or ReuseConfig(default_version=matcher.default_version)

    async def resolve_namespace(self, request: BuildRequest) -> str:
        try:
            return await self.platform.resolve_namespace(request)
        except NotFoundError:
            logger.debug(
                "No platform found for request %s, using namespace %s",
                request.name,
                request.namespace,
            )
            return request.namespace

    def selectors(self, request: BuildRequest, extra: Sequence[Selector] = ()) -> List[Selector]:
        """Return the selectors a lookup for ``request`` lists with."""
        return [
            Selector.one_of(KIND_LABEL, *(k.value for k in LOOKUP_KINDS)),
            Selector.equals(RUNTIME_VERSION_LABEL, request.runtime_version),
            Selector.equals(RUNTIME_PROVIDER_LABEL, request.runtime_provider),
            *extra,
        ]

    async def find(
        self,
        request: BuildRequest,
        *extra_selectors: Selector,
        timeout: float | None = None,
    ) -> List[Artifact]:
        """Return artifacts able to satisfy ``request`` in store order.

        ``timeout`` (or ``ReuseConfig.lookup_timeout``) bounds the store read;
        on expiry :class:`TimeoutError` is raised and nothing is returned.
        Store errors and feature decode errors propagate unchanged.
        """

        metrics.lookup_total.inc()
        try:
            namespace = await self.resolve_namespace(request)
            selectors = self.selectors(request, extra_selectors)
            limit = timeout if timeout is not None else self.config.lookup_timeout
            listing = self.store.list(namespace, selectors)
            if limit is not None:
                candidates = await asyncio.wait_for(listing, timeout=limit)
            else:
                candidates = await listing
            metrics.lookup_candidates_total.inc(len(candidates))

            matches = [a for a in candidates if self.matcher.request_matches(request, a)]
        except Exception:
            metrics.lookup_failures_total.inc()
            raise
        metrics.lookup_matches_total.inc(len(matches))
        logger.debug(
            "Lookup for request %s in namespace %s: %d candidates, %d matches",
            request.name,
            namespace,
            len(candidates),
            len(matches),
        )
        return matches
