from __future__ import annotations

from typing import Optional

import pytest
from pydantic import BaseModel

from buildreuse.foundation.common.featuremap import (
    ADDONS_KEY,
    FeatureShapeError,
    find_feature,
    strict_equal,
    to_feature_map,
)


class _Builder(BaseModel):
    strategy: Optional[str] = None
    verbose: Optional[bool] = None


class _Features(BaseModel):
    builder: Optional[_Builder] = None
    addons: Optional[dict] = None


def test_to_feature_map_none_is_empty():
    assert to_feature_map(None) == {}


def test_to_feature_map_copies_option_mappings():
    raw = {"builder": {"strategy": "pod"}}
    result = to_feature_map(raw)
    assert result == {"builder": {"strategy": "pod"}}
    result["builder"]["strategy"] = "routine"
    assert raw["builder"]["strategy"] == "pod"


def test_to_feature_map_dumps_pydantic_models_without_unset_options():
    features = _Features(builder=_Builder(strategy="pod"))
    assert to_feature_map(features) == {"builder": {"strategy": "pod"}}


def test_to_feature_map_rejects_scalar_feature():
    with pytest.raises(FeatureShapeError) as excinfo:
        to_feature_map({"builder": "pod"})
    assert excinfo.value.feature_id == "builder"


def test_to_feature_map_rejects_non_mapping_root():
    with pytest.raises(FeatureShapeError):
        to_feature_map(["builder"])


def test_find_feature_prefers_top_level():
    features = to_feature_map(
        {"sched": {"cron": "top"}, ADDONS_KEY: {"sched": {"cron": "addon"}}}
    )
    assert find_feature(features, "sched") == {"cron": "top"}


def test_find_feature_falls_back_to_addons():
    features = to_feature_map({ADDONS_KEY: {"sched": {"cron": "addon"}}})
    assert find_feature(features, "sched") == {"cron": "addon"}


def test_find_feature_ignores_non_mapping_addon():
    features = to_feature_map({ADDONS_KEY: {"sched": "nope"}})
    assert find_feature(features, "sched") is None


def test_find_feature_missing():
    assert find_feature({}, "sched") is None


def test_find_feature_declared_without_options():
    assert find_feature({"sched": {}}, "sched") == {}


@pytest.mark.parametrize(
    "left,right,expected",
    [
        ({"a": 1}, {"a": 1}, True),
        ({"a": 1}, {"a": 1.0}, False),
        ({"a": True}, {"a": 1}, False),
        ({"a": [1, 2]}, {"a": [2, 1]}, False),
        ({"a": [1, 2]}, {"a": (1, 2)}, True),
        ({"a": {"b": "x"}}, {"a": {"b": "x"}}, True),
        ({"a": {"b": "x"}}, {"a": {"b": "x", "c": None}}, False),
        ({"a": "1"}, {"a": ["1"]}, False),
        ({}, {}, True),
    ],
)
def test_strict_equal(left, right, expected):
    assert strict_equal(left, right) is expected
    assert strict_equal(right, left) is expected


def test_to_feature_map_feature_without_options_is_empty_mapping():
    assert to_feature_map({"health": None, "builder": {"strategy": "pod"}}) == {
        "health": {},
        "builder": {"strategy": "pod"},
    }


@pytest.mark.parametrize("value", ["pod", ["pod"], 3])
def test_to_feature_map_still_rejects_scalars_and_lists(value):
    with pytest.raises(FeatureShapeError) as excinfo:
        to_feature_map({"builder": value})
    assert excinfo.value.reason.startswith("expected an option mapping")


def test_find_feature_addon_without_options_is_declared():
    features = to_feature_map({ADDONS_KEY: {"sched": None}})
    assert find_feature(features, "sched") == {}


def test_to_feature_map_addons_without_entries():
    features = to_feature_map({ADDONS_KEY: None})
    assert features == {ADDONS_KEY: {}}
    assert find_feature(features, "sched") is None
