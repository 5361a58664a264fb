"""Public API surface for the buildreuse package."""

from __future__ import annotations

from .services.reuse import (
    Artifact,
    ArtifactKind,
    ArtifactLookup,
    ArtifactPhase,
    BuildRequest,
    DecodeError,
    FeatureCatalog,
    FeatureDescriptor,
    FeatureEquivalence,
    Matcher,
    NotFoundError,
    StoreError,
    default_catalog,
)

__all__ = [
    "Artifact",
    "ArtifactKind",
    "ArtifactLookup",
    "ArtifactPhase",
    "BuildRequest",
    "DecodeError",
    "FeatureCatalog",
    "FeatureDescriptor",
    "FeatureEquivalence",
    "Matcher",
    "NotFoundError",
    "StoreError",
    "default_catalog",
]
