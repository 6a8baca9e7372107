from __future__ import annotations

from typezero.inference import infer_schema
from typezero.literal_stats import collect_literal_stats, enum_values, share_literals_by_shape
from typezero.paths import escape_path_segment, join_path


def test_paths_escape_dots() -> None:
    assert escape_path_segment("gpt-3.5") == "gpt-3\\.5"
    assert escape_path_segment("a\\b") == "a\\\\b"
    assert join_path("", "a") == "a"
    assert join_path("a", "b.c") == "a.b\\.c"


def test_arrays_are_transparent_in_paths() -> None:
    data = {"items": [{"status": "open"}, {"status": "closed"}, {"status": "open"}]}
    stats = collect_literal_stats(data)
    assert list(stats) == ["items.status"]
    assert list(stats["items.status"]) == ["open", "closed"]


def test_only_keyed_strings_and_numbers_are_recorded() -> None:
    data = {"s": "x", "n": 2, "f": 1.5, "b": True, "z": None, "tags": ["a", "b"], "bad": float("nan")}
    stats = collect_literal_stats(data)
    assert set(stats) == {"s", "n", "f"}


def test_root_array_of_objects_uses_field_names() -> None:
    stats = collect_literal_stats([{"kind": "a"}, {"kind": "b"}])
    assert list(stats["kind"]) == ["a", "b"]


def test_array_sample_cap() -> None:
    data = [{"v": i} for i in range(100)]
    assert len(collect_literal_stats(data)["v"]) == 25
    assert len(collect_literal_stats(data, array_sample_size=10)["v"]) == 10


def test_budget_truncates_silently() -> None:
    data = [{"v": i} for i in range(20)]
    # root list + (object + leaf) per element
    stats = collect_literal_stats(data, budget=7)
    assert list(stats["v"]) == [0, 1, 2]
    assert collect_literal_stats(data, budget=0) == {}


def test_depth_cap() -> None:
    data = {"a": {"b": {"c": "x"}}}
    assert collect_literal_stats(data, max_depth=2) == {}
    assert "a.b.c" in collect_literal_stats(data, max_depth=3)


def test_enum_threshold_boundaries() -> None:
    stats = {
        "one": {"a": None},
        "two": {"a": None, "b": None},
        "eight": {str(i): None for i in range(8)},
        "nine": {str(i): None for i in range(9)},
    }
    assert enum_values(stats, "one", "string") is None
    assert enum_values(stats, "two", "string") == ["a", "b"]
    assert enum_values(stats, "eight", "string") == [str(i) for i in range(8)]
    assert enum_values(stats, "nine", "string") is None
    assert enum_values(stats, "missing", "string") is None
    assert enum_values(None, "two", "string") is None


def test_enum_values_filter_by_kind() -> None:
    stats = {"v": {1: None, 2: None, "x": None}}
    assert enum_values(stats, "v", "number") == [1, 2]
    assert enum_values(stats, "v", "string") is None
    assert enum_values(stats, "v", "boolean") is None


def test_nested_arrays_of_objects_keep_field_paths() -> None:
    stats = collect_literal_stats({"a": [[{"s": "x"}, {"s": "y"}]], "tags": [["p", "q"]]})
    assert list(stats) == ["a.s"]
    assert list(stats["a.s"]) == ["x", "y"]


def test_share_literals_by_shape_pools_every_site() -> None:
    data = {"a": [{"s": "x"}, {"s": "y"}], "b": [{"s": "p"}], "c": {"t": "z"}}
    stats = collect_literal_stats(data)
    shared = share_literals_by_shape(infer_schema(data), stats)
    assert list(shared["a.s"]) == ["x", "y", "p"]
    assert list(shared["b.s"]) == ["x", "y", "p"]
    assert list(shared["c.t"]) == ["z"]
    assert list(stats["a.s"]) == ["x", "y"]
    assert share_literals_by_shape(infer_schema(data), None) is None
