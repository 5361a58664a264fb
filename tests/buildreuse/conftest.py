"""Shared fixtures for buildreuse tests."""

from __future__ import annotations

from typing import Optional

import pytest

from buildreuse.services.reuse import metrics
from buildreuse.services.reuse.catalog import (
    ComparableOptions,
    CustomComparable,
    FeatureCatalog,
    FeatureDescriptor,
)
from buildreuse.services.reuse.matcher import Matcher
from buildreuse.services.reuse.models import (
    Artifact,
    ArtifactKind,
    ArtifactPhase,
    BuildRequest,
)


class WindowOptions(ComparableOptions):
    """Either a point (``value``) or an inclusive range (``low``..``high``)."""

    low: Optional[int] = None
    high: Optional[int] = None
    value: Optional[int] = None

    def equivalent_to(self, other: ComparableOptions) -> bool:
        assert isinstance(other, WindowOptions)
        if self.value is not None:
            return other.value == self.value
        if other.value is None or self.low is None or self.high is None:
            return False
        return self.low <= other.value <= self.high


@pytest.fixture
def catalog() -> FeatureCatalog:
    return FeatureCatalog(
        [
            FeatureDescriptor("sched", influences_build=True),
            FeatureDescriptor("builder", influences_build=True),
            FeatureDescriptor(
                "window",
                influences_build=True,
                comparison=CustomComparable(WindowOptions),
            ),
            FeatureDescriptor("logging"),
        ]
    )


@pytest.fixture
def matcher(catalog: FeatureCatalog) -> Matcher:
    return Matcher(catalog, default_version="2.0.0")


@pytest.fixture
def make_request():
    def factory(**overrides) -> BuildRequest:
        values = dict(
            name="req",
            namespace="ns",
            version="2.0.0",
            runtime_version="1.0",
            runtime_provider="X",
            dependencies=("a", "b"),
            features={},
        )
        values.update(overrides)
        return BuildRequest(**values)

    return factory


@pytest.fixture
def make_artifact():
    def factory(**overrides) -> Artifact:
        values = dict(
            name="kit",
            namespace="ns",
            kind=ArtifactKind.PLATFORM,
            phase=ArtifactPhase.READY,
            version="2.0.0",
            runtime_version="1.0",
            runtime_provider="X",
            dependencies=("a", "b"),
            features={},
        )
        values.update(overrides)
        return Artifact(**values)

    return factory


@pytest.fixture(autouse=True)
def _reset_metrics():
    metrics.reset_metrics()
    yield
    metrics.reset_metrics()
