"""
View builders and behavior binders.

A dashboard module is two functions connected only by the id they are called
with:

- the **view builder** lays out widgets and output slots, using the
  ``Namespace`` it receives to key them;
- the **behavior binder** reads inputs and registers outputs through views
  restricted to the same scope.

They stay separate because each can be called from a different place: the
binder usually needs data (often itself reactive) that only exists once the
server side of the parent module has run.

    @module_ui
    def counter_ui(ns):
        st.button("Add", key=ns("add"))
        output_slot(ns("total"))

    @module_server
    def counter_server(input, output, session):
        output["total"] = render_text(lambda: input.get("add"))

    counter_ui("left"); counter_server("left")
"""

import functools
from typing import Any, Callable, Protocol

from scoping.identifiers import Namespace
from scoping.registry import ScopedRegistry
from scoping.session import ScopedSession, current_session, enter_scope


class ViewBuilder(Protocol):
    def __call__(self, ns: Namespace, *args: Any, **kwargs: Any) -> Any: ...


class BehaviorBinder(Protocol):
    def __call__(
        self,
        input: ScopedRegistry,
        output: ScopedRegistry,
        session: ScopedSession,
        *args: Any,
        **kwargs: Any
    ) -> Any: ...


def module_ui(fn: ViewBuilder) -> Callable[..., Any]:
    """Turn ``fn(ns, ...)`` into ``ui(id, ...)`` composed under the current scope."""

    @functools.wraps(fn)
    def wrapper(id: str, *args: Any, **kwargs: Any) -> Any:
        with enter_scope(id) as path:
            return fn(Namespace(path), *args, **kwargs)

    wrapper.role = "view"
    return wrapper


def module_server(fn: BehaviorBinder) -> Callable[..., Any]:
    """Turn ``fn(input, output, session, ...)`` into ``server(id, ...)``."""

    @functools.wraps(fn)
    def wrapper(id: str, *args: Any, **kwargs: Any) -> Any:
        session = current_session()
        with enter_scope(id) as path:
            session.mark_bound(path)
            scoped = session.scope(path)
            return fn(scoped.input, scoped.output, scoped, *args, **kwargs)

    wrapper.role = "behavior"
    return wrapper
