"""Namespaced composition of dashboard modules."""

from .identifiers import (
    SEPARATOR,
    InvalidIdentifier,
    Namespace,
    ScopePath,
    compose,
    ns,
    split_qualified,
    validate_identifier,
)
from .registry import ScopedRegistry, restrict_view
from .render import (
    OutputDirective,
    render_markdown,
    render_metric,
    render_plot,
    render_table,
    render_text,
    render_ui,
)
from .roles import BehaviorBinder, ViewBuilder, module_server, module_ui
from .session import Reactive, ScopedSession, Session, current_scope, current_session, enter_scope

__all__ = [
    "SEPARATOR",
    "InvalidIdentifier",
    "Namespace",
    "ScopePath",
    "compose",
    "ns",
    "split_qualified",
    "validate_identifier",
    "ScopedRegistry",
    "restrict_view",
    "OutputDirective",
    "render_markdown",
    "render_metric",
    "render_plot",
    "render_table",
    "render_text",
    "render_ui",
    "BehaviorBinder",
    "ViewBuilder",
    "module_server",
    "module_ui",
    "Reactive",
    "ScopedSession",
    "Session",
    "current_scope",
    "current_session",
    "enter_scope",
]
