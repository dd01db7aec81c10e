"""
Streamlit adapter: wires view builders and behavior binders into a script run.

Streamlit re-executes the app script on every interaction, so each run:

1. builds a new :class:`Session` over ``st.session_state`` (widget key -> value)
   with a fresh output registry; only the session id persists between reruns,
2. runs the root behavior binder, which registers output directives and
   reactives but evaluates nothing,
3. runs the root view builder; each :func:`output_slot` evaluates its
   directive at the point it is drawn, after the widgets it reads exist.
"""

import uuid
from typing import Any, Callable

import matplotlib.pyplot as plt
import streamlit as st

from config.config import SESSION_ID_STATE_KEY
from scoping.render import OutputDirective
from scoping.session import Session, current_session
from utils.logging import get_logger

logger = get_logger(__name__)


def streamlit_session() -> Session:
    """Session bound to the current Streamlit browser session."""
    if SESSION_ID_STATE_KEY not in st.session_state:
        st.session_state[SESSION_ID_STATE_KEY] = uuid.uuid4().hex
    return Session(st.session_state, {}, session_id=st.session_state[SESSION_ID_STATE_KEY])


def emit(directive: OutputDirective) -> Any:
    """Evaluate ``directive`` and draw the result with the matching Streamlit call."""
    value = directive.evaluate()

    if directive.kind == "plot":
        st.pyplot(value, **directive.options)
        plt.close(value)
    elif directive.kind == "text":
        st.write(value)
    elif directive.kind == "table":
        st.dataframe(value, **directive.options)
    elif directive.kind == "markdown":
        st.markdown(value)
    elif directive.kind == "metric":
        label, metric_value, *rest = value
        st.metric(label=label, value=metric_value, delta=rest[0] if rest else None)
    # "ui" directives draw their own widgets while being evaluated

    return value


def output_slot(qualified_id: str) -> Any:
    """Draw the output registered under ``qualified_id`` in the current session."""
    session = current_session()
    directive = session.output.get(qualified_id)
    if directive is None:
        logger.warning(f"No output registered for {qualified_id!r} in session {session.id}")
        st.info(f"⏳ Output `{qualified_id}` is not bound yet.")
        return None
    return emit(directive)


class App:
    """Root view builder plus root behavior binder for one Streamlit script."""

    def __init__(self, ui: Callable[..., Any], server: Callable[..., Any]):
        self.ui = ui
        self.server = server

    def run(self) -> Any:
        # New Session per rerun; only the session id lives in st.session_state.
        session = streamlit_session()
        with session.activate():
            root = session.scope()
            self.server(root.input, root.output, root)
            return self.ui(root.ns)
