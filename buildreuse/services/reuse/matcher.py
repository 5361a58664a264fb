"""Decide whether an artifact can satisfy a build request."""

from __future__ import annotations

import logging
from typing import Iterable

from .catalog import FeatureCatalog
from .equivalence import FeatureEquivalence
from .models import Artifact, ArtifactPhase, BuildRequest

__all__ = ["DEFAULT_BUILD_VERSION", "Matcher", "dependencies_contain"]

logger = logging.getLogger(__name__)

DEFAULT_BUILD_VERSION = "2.0.0"


def dependencies_contain(provided: Iterable[str], required: Iterable[str]) -> bool:
    """Return ``True`` when every item of ``required`` appears in ``provided``."""
    return set(required).issubset(provided)


class Matcher:
    """Status gate, feature equivalence and dependency containment.

    The matcher holds no mutable state; the same instance may serve concurrent
    callers as long as each passes its own snapshots.
    """

    def __init__(
        self,
        catalog: FeatureCatalog,
        *,
        default_version: str = DEFAULT_BUILD_VERSION,
    ) -> None:
        self.catalog = catalog
        self.default_version = default_version
        self.features = FeatureEquivalence(catalog)

    # Step 1 ---------------------------------------------------------------
    def status_matches(self, request: BuildRequest, artifact: Artifact) -> bool:
        if artifact.phase is ArtifactPhase.ERROR:
            logger.debug(
                "Artifact %s has a phase of Error (namespace %s)",
                artifact.name,
                request.namespace,
            )
            return False
        if artifact.version != request.version:
            logger.debug(
                "Request %s and artifact %s versions do not match (namespace %s)",
                request.name,
                artifact.name,
                request.namespace,
            )
            return False
        if artifact.runtime_provider != request.runtime_provider:
            logger.debug(
                "Request %s and artifact %s runtime providers do not match (namespace %s)",
                request.name,
                artifact.name,
                request.namespace,
            )
            return False
        if artifact.runtime_version != request.runtime_version:
            logger.debug(
                "Request %s and artifact %s runtime versions do not match (namespace %s)",
                request.name,
                artifact.name,
                request.namespace,
            )
            return False
        if len(request.dependencies) != len(artifact.dependencies):
            # informational; containment is checked after features
            logger.debug(
                "Request %s and artifact %s have a different number of dependencies (namespace %s)",
                request.name,
                artifact.name,
                request.namespace,
            )
        return True

    # Step 2 + 3 -----------------------------------------------------------
    def request_matches(self, request: BuildRequest, artifact: Artifact) -> bool:
        """Return whether ``artifact`` meets the requirements of ``request``.

        Raises :class:`~buildreuse.services.reuse.errors.DecodeError` when a
        feature configuration cannot be decoded.
        """

        logger.debug(
            "Matching request %s with artifact %s (namespace %s)",
            request.name,
            artifact.name,
            request.namespace,
        )
        if not self.status_matches(request, artifact):
            return False
        # An artifact inherits the build-influencing features of the request
        # that produced it, so those must agree for the artifact to be usable.
        if not self.features.match(request.features, artifact.features):
            logger.debug(
                "Request %s and artifact %s features do not match (namespace %s)",
                request.name,
                artifact.name,
                request.namespace,
            )
            return False
        if not dependencies_contain(artifact.dependencies, request.dependencies):
            logger.debug(
                "Request %s and artifact %s dependencies do not match (namespace %s)",
                request.name,
                artifact.name,
                request.namespace,
            )
            return False
        logger.debug(
            "Matched request %s with artifact %s (namespace %s)",
            request.name,
            artifact.name,
            request.namespace,
        )
        return True

    # Deduplication --------------------------------------------------------
    def artifacts_equivalent(self, first: Artifact, second: Artifact) -> bool:
        """Return whether two artifacts are interchangeable."""

        # an unset version is filled in with the default on initialization
        version = first.version or self.default_version
        if version != second.version:
            return False
        if len(first.dependencies) != len(second.dependencies):
            return False
        if not self.features.match(first.features, second.features):
            return False
        return dependencies_contain(first.dependencies, second.dependencies)

    def find_equivalent(
        self, artifact: Artifact, candidates: Iterable[Artifact]
    ) -> Artifact | None:
        """Return the first candidate equivalent to ``artifact``, if any.

        ``artifact`` itself (same name and namespace) is skipped.
        """

        for candidate in candidates:
            if candidate.name == artifact.name and candidate.namespace == artifact.namespace:
                continue
            if self.artifacts_equivalent(artifact, candidate):
                return candidate
        return None
