from __future__ import annotations

from buildreuse.foundation.common.hashutils import (
    canonical_json,
    compute_lookup_key,
    hash_bytes,
)


def test_hash_bytes_prefix_and_determinism():
    digest = hash_bytes(b"payload")
    assert digest.startswith("blake3:")
    assert digest == hash_bytes(b"payload")
    assert digest != hash_bytes(b"other")


def test_canonical_json_sorts_keys():
    assert canonical_json({"b": 1, "a": {"d": 2, "c": 3}}) == '{"a":{"c":3,"d":2},"b":1}'


def test_lookup_key_ignores_dependency_order_and_duplicates():
    k1 = compute_lookup_key("ns", "1.0", "X", {"sched": {"cron": "*"}}, ["a", "b"])
    k2 = compute_lookup_key("ns", "1.0", "X", {"sched": {"cron": "*"}}, ["b", "a", "a"])
    assert k1 == k2


def test_lookup_key_changes_with_each_component():
    base = compute_lookup_key("ns", "1.0", "X", {}, ["a"])
    assert compute_lookup_key("other", "1.0", "X", {}, ["a"]) != base
    assert compute_lookup_key("ns", "1.1", "X", {}, ["a"]) != base
    assert compute_lookup_key("ns", "1.0", "Y", {}, ["a"]) != base
    assert compute_lookup_key("ns", "1.0", "X", {"sched": {}}, ["a"]) != base
    assert compute_lookup_key("ns", "1.0", "X", {}, ["a", "b"]) != base
