from __future__ import annotations

"""Prometheus metrics for artifact lookups."""

from prometheus_client import Counter, generate_latest, REGISTRY as global_registry

__all__ = [
    "lookup_total",
    "lookup_failures_total",
    "lookup_candidates_total",
    "lookup_matches_total",
    "collect_metrics",
    "reset_metrics",
]

lookup_total = Counter(
    "artifact_lookup_total",
    "Total number of artifact lookups performed",
    registry=global_registry,
)

lookup_failures_total = Counter(
    "artifact_lookup_failures_total",
    "Total number of artifact lookups that raised",
    registry=global_registry,
)

lookup_candidates_total = Counter(
    "artifact_lookup_candidates_total",
    "Total number of candidate artifacts returned by the store",
    registry=global_registry,
)

lookup_matches_total = Counter(
    "artifact_lookup_matches_total",
    "Total number of candidate artifacts that satisfied the request",
    registry=global_registry,
)

_ALL = (lookup_total, lookup_failures_total, lookup_candidates_total, lookup_matches_total)


def collect_metrics() -> str:
    """Return metrics in text exposition format."""
    return generate_latest(global_registry).decode()


def reset_metrics() -> None:
    """Helper for tests to clear recorded counter values."""
    # Prometheus counters expose no public reset API; fall back to the backing
    # value object for test isolation.
    for counter in _ALL:
        counter._value.set(0)  # type: ignore[attr-defined]
