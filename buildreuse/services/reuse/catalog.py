"""Feature descriptors and the catalog the matcher iterates over.

Each descriptor states whether its configuration influences the produced
artifact and how two configurations are compared. The comparison is chosen
per descriptor: :class:`DefaultComparable` compares the raw option mappings
structurally, :class:`CustomComparable` decodes both sides into a pydantic
model and asks the artifact's value whether it covers the request's.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Mapping, Tuple, Type, Union

from pydantic import BaseModel, ConfigDict, ValidationError

from .errors import DecodeError

__all__ = [
    "ComparableOptions",
    "DefaultComparable",
    "CustomComparable",
    "Comparison",
    "FeatureDescriptor",
    "FeatureCatalog",
]


class ComparableOptions(BaseModel):
    """Typed feature options that define their own equivalence relation.

    ``equivalent_to`` is evaluated on the artifact's value with the request's
    value as argument. It need not be symmetric.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    def equivalent_to(self, other: "ComparableOptions") -> bool:
        raise NotImplementedError


@dataclass(frozen=True)
class DefaultComparable:
    """Exact structural equality of the raw option mappings."""


@dataclass(frozen=True)
class CustomComparable:
    """Decode into ``model`` and compare with ``model.equivalent_to``."""

    model: Type[ComparableOptions]


Comparison = Union[DefaultComparable, CustomComparable]


@dataclass(frozen=True)
class FeatureDescriptor:
    id: str
    influences_build: bool = False
    comparison: Comparison = field(default_factory=DefaultComparable)
    description: str = ""

    @property
    def is_custom(self) -> bool:
        return isinstance(self.comparison, CustomComparable)

    def decode(self, raw: Mapping[str, Any]) -> Any:
        """Convert a raw option mapping into the descriptor's typed form.

        Default-comparable descriptors have no typed form; a plain ``dict``
        copy is returned.
        """

        if not isinstance(self.comparison, CustomComparable):
            return dict(raw)
        try:
            return self.comparison.model.model_validate(dict(raw))
        except ValidationError as exc:
            raise DecodeError(self.id, str(exc)) from exc


class FeatureCatalog:
    """Fixed, ordered set of known feature descriptors."""

    def __init__(self, descriptors: Iterable[FeatureDescriptor] = ()) -> None:
        entries: Dict[str, FeatureDescriptor] = {}
        for descriptor in descriptors:
            if not isinstance(descriptor.id, str) or not descriptor.id.strip():
                raise ValueError("feature id must be a non-empty string")
            if descriptor.id in entries:
                raise ValueError(f"Duplicate feature id: {descriptor.id}")
            entries[descriptor.id] = descriptor
        self._descriptors: Tuple[FeatureDescriptor, ...] = tuple(
            entries[key] for key in sorted(entries)
        )
        self._by_id = entries

    def descriptors(self) -> Tuple[FeatureDescriptor, ...]:
        """Return every descriptor ordered lexicographically by id."""
        return self._descriptors

    def build_influencing(self) -> Tuple[FeatureDescriptor, ...]:
        return tuple(d for d in self._descriptors if d.influences_build)

    def get(self, feature_id: str) -> FeatureDescriptor | None:
        return self._by_id.get(feature_id)

    def __contains__(self, feature_id: object) -> bool:
        return feature_id in self._by_id

    def __len__(self) -> int:
        return len(self._descriptors)

    def __repr__(self) -> str:
        ids = ", ".join(d.id for d in self._descriptors)
        return f"FeatureCatalog([{ids}])"
