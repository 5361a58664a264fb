"""Artifact reuse: decide whether an existing build output satisfies a request."""

from .catalog import (
    ComparableOptions,
    CustomComparable,
    DefaultComparable,
    FeatureCatalog,
    FeatureDescriptor,
)
from .config import ReuseConfig, load_reuse_config
from .equivalence import FeatureEquivalence
from .errors import DecodeError, NotFoundError, ReuseError, StoreError
from .features import BUILTIN_FEATURES, QuarkusOptions, default_catalog
from .lookup import ArtifactLookup
from .matcher import DEFAULT_BUILD_VERSION, Matcher, dependencies_contain
from .models import (
    Artifact,
    ArtifactKind,
    ArtifactPhase,
    BuildRequest,
    Selector,
    artifact_from_mapping,
    request_from_mapping,
)
from .store import (
    ArtifactStore,
    MemoryArtifactStore,
    PlatformResolver,
    StaticPlatformResolver,
)

__all__ = [
    "ComparableOptions",
    "CustomComparable",
    "DefaultComparable",
    "FeatureCatalog",
    "FeatureDescriptor",
    "ReuseConfig",
    "load_reuse_config",
    "FeatureEquivalence",
    "DecodeError",
    "NotFoundError",
    "ReuseError",
    "StoreError",
    "BUILTIN_FEATURES",
    "QuarkusOptions",
    "default_catalog",
    "ArtifactLookup",
    "DEFAULT_BUILD_VERSION",
    "Matcher",
    "dependencies_contain",
    "Artifact",
    "ArtifactKind",
    "ArtifactPhase",
    "BuildRequest",
    "Selector",
    "artifact_from_mapping",
    "request_from_mapping",
    "ArtifactStore",
    "MemoryArtifactStore",
    "PlatformResolver",
    "StaticPlatformResolver",
]
