"""Per-feature equivalence of two feature configurations."""

from __future__ import annotations

import logging
from typing import Any

from buildreuse.foundation.common.featuremap import (
    FeatureMap,
    FeatureShapeError,
    find_feature,
    strict_equal,
    to_feature_map,
)

from .catalog import FeatureCatalog, FeatureDescriptor
from .errors import DecodeError

__all__ = ["FeatureEquivalence"]

logger = logging.getLogger(__name__)


def _normalize(raw: object) -> FeatureMap:
    try:
        return to_feature_map(raw)
    except FeatureShapeError as exc:
        raise DecodeError(exc.feature_id, exc.reason) from exc


class FeatureEquivalence:
    """Compare build-influencing features of a request and an artifact.

    Only descriptors flagged ``influences_build`` take part. A feature declared
    on just one side is a mismatch; a feature declared on neither is ignored.
    """

    def __init__(self, catalog: FeatureCatalog) -> None:
        self.catalog = catalog

    def match(self, request_features: Any, artifact_features: Any) -> bool:
        requested = _normalize(request_features)
        provided = _normalize(artifact_features)

        for descriptor in self.catalog.build_influencing():
            req_opts = find_feature(requested, descriptor.id)
            art_opts = find_feature(provided, descriptor.id)

            if req_opts is None and art_opts is None:
                continue
            if req_opts is None or art_opts is None:
                logger.debug(
                    "Feature %s declared on one side only (request=%s, artifact=%s)",
                    descriptor.id,
                    req_opts is not None,
                    art_opts is not None,
                )
                return False
            if not self._feature_matches(descriptor, req_opts, art_opts):
                logger.debug("Feature %s configuration differs", descriptor.id)
                return False
        return True

    @staticmethod
    def _feature_matches(
        descriptor: FeatureDescriptor,
        request_options: dict[str, Any],
        artifact_options: dict[str, Any],
    ) -> bool:
        if descriptor.is_custom:
            request_value = descriptor.decode(request_options)
            artifact_value = descriptor.decode(artifact_options)
            # receiver is the artifact: "does what was built cover what is asked"
            return bool(artifact_value.equivalent_to(request_value))
        return strict_equal(request_options, artifact_options)
