"""Shared data models for the artifact reuse service."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping, Tuple

__all__ = [
    "ArtifactKind",
    "ArtifactPhase",
    "BuildRequest",
    "Artifact",
    "Selector",
    "KIND_LABEL",
    "RUNTIME_VERSION_LABEL",
    "RUNTIME_PROVIDER_LABEL",
    "request_from_mapping",
    "artifact_from_mapping",
]

KIND_LABEL = "buildreuse.io/kind"
RUNTIME_VERSION_LABEL = "buildreuse.io/runtime.version"
RUNTIME_PROVIDER_LABEL = "buildreuse.io/runtime.provider"


class ArtifactKind(str, Enum):
    PLATFORM = "platform"
    EXTERNAL = "external"
    USER = "user"


class ArtifactPhase(str, Enum):
    NONE = ""
    INITIALIZATION = "Initialization"
    WAITING_FOR_PLATFORM = "Waiting For Platform"
    BUILD_SUBMITTED = "Build Submitted"
    BUILD_RUNNING = "Build Running"
    READY = "Ready"
    CANNOT_BUILD = "Cannot Build"
    ERROR = "Error"


def _str_tuple(value: object) -> Tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,)
    return tuple(str(v) for v in value)  # type: ignore[union-attr]


@dataclass(frozen=True)
class BuildRequest:
    """Desired deployable unit whose build output may be satisfied by reuse."""

    name: str
    namespace: str
    version: str = ""
    runtime_version: str = ""
    runtime_provider: str = ""
    dependencies: Tuple[str, ...] = ()
    features: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "dependencies", _str_tuple(self.dependencies))


@dataclass(frozen=True)
class Artifact:
    """Previously produced build output that may be reused."""

    name: str
    namespace: str
    kind: ArtifactKind = ArtifactKind.PLATFORM
    phase: ArtifactPhase = ArtifactPhase.NONE
    version: str = ""
    runtime_version: str = ""
    runtime_provider: str = ""
    dependencies: Tuple[str, ...] = ()
    features: Mapping[str, Any] = field(default_factory=dict)
    labels: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "dependencies", _str_tuple(self.dependencies))
        object.__setattr__(self, "kind", ArtifactKind(self.kind))
        object.__setattr__(self, "phase", ArtifactPhase(self.phase))

    def selector_labels(self) -> Dict[str, str]:
        """Labels a store indexes this artifact under."""
        labels = dict(self.labels)
        labels[KIND_LABEL] = self.kind.value
        labels[RUNTIME_VERSION_LABEL] = self.runtime_version
        labels[RUNTIME_PROVIDER_LABEL] = self.runtime_provider
        return labels


@dataclass(frozen=True)
class Selector:
    """Label requirement applied by an artifact store when listing."""

    key: str
    operator: str = "="
    values: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if self.operator not in {"=", "in"}:
            raise ValueError(f"unsupported selector operator: {self.operator!r}")
        object.__setattr__(self, "values", _str_tuple(self.values))

    @classmethod
    def equals(cls, key: str, value: str) -> "Selector":
        return cls(key, "=", (value,))

    @classmethod
    def one_of(cls, key: str, *values: str) -> "Selector":
        return cls(key, "in", tuple(values))

    def matches(self, labels: Mapping[str, str]) -> bool:
        if self.key not in labels:
            return False
        value = labels[self.key]
        if self.operator == "=":
            return len(self.values) == 1 and value == self.values[0]
        return value in self.values


_REQUEST_FIELDS = (
    "name",
    "namespace",
    "version",
    "runtime_version",
    "runtime_provider",
    "dependencies",
    "features",
)

_ARTIFACT_FIELDS = _REQUEST_FIELDS + ("kind", "phase", "labels")


def _pick(data: Mapping[str, Any], fields: Tuple[str, ...], what: str) -> Dict[str, Any]:
    if not isinstance(data, Mapping):
        raise TypeError(f"{what} must be a mapping")
    unknown = set(data) - set(fields)
    if unknown:
        raise ValueError(f"unknown {what} fields: {', '.join(sorted(unknown))}")
    values = {k: data[k] for k in fields if k in data and data[k] is not None}
    for key in ("name", "namespace", "version", "runtime_version", "runtime_provider"):
        if key in values:
            values[key] = str(values[key])
    for key in ("name", "namespace"):
        if key not in values:
            raise ValueError(f"{what} requires {key!r}")
    return values


def request_from_mapping(data: Mapping[str, Any]) -> BuildRequest:
    """Build a :class:`BuildRequest` from a plain mapping (e.g. parsed YAML)."""
    return BuildRequest(**_pick(data, _REQUEST_FIELDS, "request"))


def artifact_from_mapping(data: Mapping[str, Any]) -> Artifact:
    """Build an :class:`Artifact` from a plain mapping (e.g. parsed YAML)."""
    return Artifact(**_pick(data, _ARTIFACT_FIELDS, "artifact"))
