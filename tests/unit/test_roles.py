"""Tests for view builder and behavior binder decorators."""

import logging

import pytest

from scoping import InvalidIdentifier, current_scope, module_server, module_ui, render_text


@module_ui
def stats_ui(ns):
    return [ns("mean"), ns("std")]


@module_ui
def histogram_ui(ns, label="Variable"):
    return {"label": label, "var": ns("var"), "plot": ns("plot"), "stats": stats_ui("stats")}


@module_server
def stats_server(input, output, session, values):
    output["mean"] = render_text(lambda: sum(values) / len(values))
    return session.path.qualified


@module_server
def histogram_server(input, output, session, values):
    output["plot"] = render_text(lambda: f"plot of {input.get('var')}")
    nested = stats_server("stats", values)
    return {"scope": session.path.qualified, "nested": nested, "visible": dict(input)}


def test_view_builder_composes_nested_ids():
    markup = histogram_ui("hist1", label="Pick one")
    assert markup == {
        "label": "Pick one",
        "var": "hist1-var",
        "plot": "hist1-plot",
        "stats": ["hist1-stats-mean", "hist1-stats-std"],
    }
    assert current_scope().is_root


def test_view_builder_rejects_bad_id_before_running():
    calls = []

    @module_ui
    def counter_ui(ns):
        calls.append(ns)

    with pytest.raises(InvalidIdentifier):
        counter_ui("bad-id")
    with pytest.raises(InvalidIdentifier):
        counter_ui("")
    assert calls == []


def test_behavior_binder_sees_only_its_scope(memory_session):
    memory_session.input.update({"hist1-var": "height", "hist2-var": "weight", "nav": "home"})

    first = histogram_server("hist1", [1.0, 3.0])
    second = histogram_server("hist2", [10.0, 30.0])

    assert first == {"scope": "hist1", "nested": "hist1-stats", "visible": {"var": "height"}}
    assert second["visible"] == {"var": "weight"}
    assert sorted(memory_session.output) == [
        "hist1-plot", "hist1-stats-mean", "hist2-plot", "hist2-stats-mean",
    ]
    assert memory_session.output["hist1-plot"].evaluate() == "plot of height"
    assert memory_session.output["hist2-stats-mean"].evaluate() == 20.0


def test_behavior_binder_requires_session():
    with pytest.raises(RuntimeError):
        histogram_server("hist1", [1.0])


def test_duplicate_binding_warns(memory_session, caplog):
    with caplog.at_level(logging.WARNING):
        stats_server("stats", [1.0])
        stats_server("stats", [2.0])
    assert any("bound more than once" in record.message for record in caplog.records)
    assert memory_session.output["stats-mean"].evaluate() == 2.0


def test_roles_are_tagged():
    assert histogram_ui.role == "view"
    assert histogram_server.role == "behavior"
    assert histogram_ui.__name__ == "histogram_ui"
