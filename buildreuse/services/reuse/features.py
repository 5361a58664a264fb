"""Built-in feature descriptors."""

from __future__ import annotations

from typing import List, Optional

from pydantic import ConfigDict, Field

from .catalog import (
    ComparableOptions,
    CustomComparable,
    FeatureCatalog,
    FeatureDescriptor,
)

__all__ = ["QuarkusOptions", "BUILTIN_FEATURES", "default_catalog"]


class QuarkusOptions(ComparableOptions):
    enabled: Optional[bool] = None
    package_types: List[str] = Field(default_factory=lambda: ["fast-jar"], alias="packageTypes")

    model_config = ConfigDict(populate_by_name=True)

    def equivalent_to(self, other: ComparableOptions) -> bool:
        # an artifact packaged in several modes covers any subset of them
        if not isinstance(other, QuarkusOptions):
            return False
        if self.enabled != other.enabled:
            return False
        return set(other.package_types).issubset(self.package_types)


BUILTIN_FEATURES: tuple[FeatureDescriptor, ...] = (
    FeatureDescriptor(
        "builder",
        influences_build=True,
        description="Build strategy, properties and tasks",
    ),
    FeatureDescriptor(
        "quarkus",
        influences_build=True,
        comparison=CustomComparable(QuarkusOptions),
        description="Packaging modes of the runtime",
    ),
    FeatureDescriptor("jvm", influences_build=True, description="JVM options baked into the image"),
    FeatureDescriptor("registry", influences_build=True, description="Image registry settings"),
    FeatureDescriptor("cron", description="Scheduled execution"),
    FeatureDescriptor("health", description="Liveness and readiness probes"),
    FeatureDescriptor("mount", description="Volumes and configuration mounts"),
)


def default_catalog() -> FeatureCatalog:
    """Return a new catalog holding :data:`BUILTIN_FEATURES`."""
    return FeatureCatalog(BUILTIN_FEATURES)
