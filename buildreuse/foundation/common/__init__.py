from .featuremap import (
    ADDONS_KEY,
    FeatureMap,
    FeatureShapeError,
    find_feature,
    strict_equal,
    to_feature_map,
)
from .hashutils import canonical_json, compute_lookup_key, hash_bytes

__all__ = [
    "ADDONS_KEY",
    "FeatureMap",
    "FeatureShapeError",
    "find_feature",
    "strict_equal",
    "to_feature_map",
    "canonical_json",
    "compute_lookup_key",
    "hash_bytes",
]
