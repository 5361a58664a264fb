"""Exceptions raised by the artifact reuse service."""

from __future__ import annotations

__all__ = ["ReuseError", "NotFoundError", "StoreError", "DecodeError"]


class ReuseError(Exception):
    """Base class for artifact reuse failures."""


class NotFoundError(ReuseError):
    """The requested object does not exist (for example, no build platform)."""


class StoreError(ReuseError):
    """Listing artifacts from the backing store failed."""


class DecodeError(ReuseError):
    """Feature configuration could not be converted into its typed form."""

    def __init__(self, feature_id: str, message: str) -> None:
        super().__init__(f"cannot decode feature {feature_id!r}: {message}")
        self.feature_id = feature_id
