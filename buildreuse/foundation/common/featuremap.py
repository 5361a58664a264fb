"""Shape helpers for feature configuration blobs.

Feature configuration arrives as a loosely typed mapping of feature id to an
option mapping. Optional features may instead live below the reserved
``addons`` key, which holds a nested mapping of the same shape.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Dict

__all__ = [
    "ADDONS_KEY",
    "FeatureMap",
    "FeatureShapeError",
    "find_feature",
    "strict_equal",
    "to_feature_map",
]

ADDONS_KEY = "addons"

FeatureMap = Dict[str, Dict[str, Any]]


class FeatureShapeError(TypeError):
    """Raised when a feature entry is not an option mapping."""

    def __init__(self, feature_id: str, message: str) -> None:
        super().__init__(f"feature {feature_id!r}: {message}")
        self.feature_id = feature_id
        self.reason = message


def _as_mapping(raw: object) -> Mapping[str, Any] | None:
    if isinstance(raw, Mapping):
        return raw
    dump = getattr(raw, "model_dump", None)
    if callable(dump):
        data = dump(exclude_none=True, by_alias=True)
        if isinstance(data, Mapping):
            return data
    return None


def to_feature_map(raw: object) -> FeatureMap:
    """Return ``raw`` as a ``{feature_id: {option: value}}`` dictionary.

    ``None`` yields an empty map. Pydantic models are dumped first, skipping
    unset options. A feature declared without options (``None``, as YAML
    parses a bare ``health:``) maps to ``{}``. Every other top-level value,
    ``addons`` included, must be a mapping; entries nested inside ``addons`` are kept as-is and only resolved
    by :func:`find_feature`.
    """

    if raw is None:
        return {}
    data = _as_mapping(raw)
    if data is None:
        raise FeatureShapeError("<root>", f"expected a mapping, got {type(raw).__name__}")
    result: FeatureMap = {}
    for key, value in data.items():
        if value is None:
            result[str(key)] = {}
            continue
        options = _as_mapping(value)
        if options is None:
            raise FeatureShapeError(
                str(key), f"expected an option mapping, got {type(value).__name__}"
            )
        result[str(key)] = dict(options)
    return result


def find_feature(features: FeatureMap, feature_id: str) -> Dict[str, Any] | None:
    """Look up ``feature_id`` at the top level, then below ``addons``.

    Returns ``None`` when the feature is not declared. An addon declared
    without options yields ``{}``; any other non-mapping addon entry counts
    as absent.
    """

    options = features.get(feature_id)
    if options is not None:
        return options
    addons = features.get(ADDONS_KEY)
    if addons is not None and feature_id in addons:
        if addons[feature_id] is None:
            return {}
        addon = _as_mapping(addons[feature_id])
        if addon is not None:
            return dict(addon)
    return None


def strict_equal(left: object, right: object) -> bool:
    """Deep structural equality without numeric or boolean coercion.

    Mappings must share the same keys, sequences the same order, and scalars
    the same concrete type, so ``1``, ``1.0`` and ``True`` are all distinct.
    """

    if isinstance(left, Mapping) or isinstance(right, Mapping):
        if not (isinstance(left, Mapping) and isinstance(right, Mapping)):
            return False
        if left.keys() != right.keys():
            return False
        return all(strict_equal(left[k], right[k]) for k in left)
    if _is_sequence(left) or _is_sequence(right):
        if not (_is_sequence(left) and _is_sequence(right)):
            return False
        if len(left) != len(right):  # type: ignore[arg-type]
            return False
        return all(strict_equal(a, b) for a, b in zip(left, right))  # type: ignore[call-overload]
    return type(left) is type(right) and left == right


def _is_sequence(value: object) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))
