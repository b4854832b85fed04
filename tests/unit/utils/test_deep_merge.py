from __future__ import annotations

from cfnmerge.core.utils.merge import deep_merge, merge_arrays


def test_deep_merge_nested_dicts() -> None:
    base = {"template": {"encoding": "utf-8", "import_token": "# @import"}, "logging": {"level": "WARNING"}}
    override = {"template": {"encoding": "latin-1"}}

    merged = deep_merge(base, override)

    assert merged == {
        "template": {"encoding": "latin-1", "import_token": "# @import"},
        "logging": {"level": "WARNING"},
    }


def test_deep_merge_does_not_mutate_inputs() -> None:
    base = {"a": {"b": 1}}
    override = {"a": {"c": 2}}

    deep_merge(base, override)

    assert base == {"a": {"b": 1}}
    assert override == {"a": {"c": 2}}


def test_deep_merge_scalar_replaces_dict() -> None:
    assert deep_merge({"a": {"b": 1}}, {"a": None}) == {"a": None}


def test_merge_arrays_replaces_by_default() -> None:
    assert merge_arrays(["Resources", "Outputs"], ["Globals"]) == ["Globals"]


def test_merge_arrays_empty_override_keeps_base() -> None:
    assert merge_arrays(["Resources"], []) == ["Resources"]


def test_merge_arrays_plus_appends() -> None:
    assert merge_arrays(["Resources"], ["+", "Rules", "Globals"]) == ["Resources", "Rules", "Globals"]


def test_merge_arrays_equals_replaces() -> None:
    assert merge_arrays(["Resources"], ["=", "Outputs"]) == ["Outputs"]
