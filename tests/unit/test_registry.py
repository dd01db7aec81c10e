"""Tests for restricted registry views."""

import pytest

from scoping import InvalidIdentifier, ScopedRegistry, ScopePath, restrict_view


def test_restrict_view_scenario():
    view = restrict_view({"hist1-var": 5, "other-var": 9}, ["hist1"])
    assert view == {"var": 5}
    assert dict(view) == {"var": 5}


def test_view_excludes_siblings_ancestors_and_prefix_lookalikes():
    ambient = {
        "hist1": "ancestor-level",
        "hist1-var": "mine",
        "hist1-stats-mean": 3.5,
        "hist10-var": "lookalike",
        "hist2-var": "sibling",
        "nav": "root",
    }
    view = restrict_view(ambient, ["hist1"])
    assert sorted(view) == ["stats-mean", "var"]
    assert "var" in view
    assert "nav" not in view
    with pytest.raises(KeyError):
        view["nav"]


def test_writes_and_deletes_pass_through_with_prefix():
    ambient = {"hist2-var": "untouched"}
    view = restrict_view(ambient, ["hist1"])

    view["var"] = "height"
    assert ambient["hist1-var"] == "height"

    view["var"] = "weight"
    assert ambient == {"hist1-var": "weight", "hist2-var": "untouched"}

    del view["var"]
    assert ambient == {"hist2-var": "untouched"}
    with pytest.raises(KeyError):
        del view["var"]


def test_missing_key_reports_local_name():
    view = restrict_view({}, ["hist1"])
    with pytest.raises(KeyError) as excinfo:
        view["var"]
    assert excinfo.value.args == ("var",)
    assert view.get("var", "fallback") == "fallback"


def test_view_reflects_later_ambient_changes():
    ambient = {}
    view = restrict_view(ambient, ["hist1"])
    assert len(view) == 0
    ambient["hist1-bins"] = 30
    assert len(view) == 1
    assert view["bins"] == 30


@pytest.mark.parametrize("key", ["", "a--b", "-a", "a-"])
def test_malformed_keys_are_rejected(key):
    view = restrict_view({}, ["hist1"])
    with pytest.raises(InvalidIdentifier):
        view[key] = 1
    assert key not in view


@pytest.mark.parametrize("ambient, scope, expected", [
    ({"hist1--x": 1, "hist1-var": 5, "hist2-var": 7}, ["hist1"], {"-x": 1, "var": 5}),
    ({"my-key-": 1, "c": 2}, [], {"my-key-": 1, "c": 2}),
])
def test_listed_keys_are_readable_even_if_not_writable(ambient, scope, expected):
    view = restrict_view(ambient, scope)
    assert dict(view) == expected
    assert sorted(dict(view)) == sorted(view)
    assert view == expected
    assert all(key in view for key in view)

    key = next(k for k in expected if not k.isalnum())
    with pytest.raises(InvalidIdentifier):
        view[key] = 0
    del view[key]
    assert key not in view


def test_non_string_keys_are_ignored():
    view = restrict_view({1: "int key", "hist1-var": "x"}, ["hist1"])
    assert list(view) == ["var"]
    assert 1 not in view


def test_nested_views():
    ambient = {"hist1-stats-mean": 2.0, "hist1-var": "x"}
    outer = restrict_view(ambient, ["hist1"])
    inner = outer.scoped("stats")
    assert inner == {"mean": 2.0}
    assert inner.scope == ScopePath(("hist1", "stats"))

    restricted_twice = restrict_view(outer, ["stats"])
    assert restricted_twice.ambient is ambient
    assert restricted_twice == {"mean": 2.0}

    inner["std"] = 0.5
    assert ambient["hist1-stats-std"] == 0.5
    assert outer["stats-std"] == 0.5


def test_root_view_exposes_everything():
    ambient = {"a-b": 1, "c": 2}
    view = restrict_view(ambient, [])
    assert view == ambient


def test_iteration_tolerates_mutation():
    ambient = {"m-a": 1, "m-b": 2, "n-c": 3}
    view = restrict_view(ambient, "m")
    for key in view:
        del view[key]
    assert ambient == {"n-c": 3}


def test_to_dict_and_repr():
    view = ScopedRegistry({"m-a": 1}, ScopePath(("m",)))
    assert view.to_dict() == {"a": 1}
    assert "'m'" in repr(view)
