"""
Per-session ambient registries and the currently active scope.

A :class:`Session` owns the three registries the host keeps for one browser
session: input values, output directives and reactive computations, all keyed
by qualified id. Modules never touch them directly; they receive a
:class:`ScopedSession` whose views are restricted to their own scope.

The active session and scope are tracked with ``contextvars``. Streamlit runs
every browser session's script in its own thread, and asyncio hosts run each
session in its own task, so two sessions never observe each other's state no
matter how the host interleaves them.
"""

import uuid
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, Callable, Dict, Iterator, MutableMapping, Optional, Set

from scoping.identifiers import Namespace, ScopeLike, ScopePath
from scoping.registry import ScopedRegistry
from utils.logging import get_logger

logger = get_logger(__name__)

_MISSING = object()

_current_session: ContextVar[Optional["Session"]] = ContextVar("scoping_session", default=None)
_current_scope: ContextVar[ScopePath] = ContextVar("scoping_scope", default=ScopePath())


class Reactive:
    """Lazily computed value keyed by qualified id, cached until invalidated."""

    def __init__(self, qualified_id: str, fn: Callable[[], Any]):
        self.qualified_id = qualified_id
        self._fn = fn
        self._value: Any = _MISSING

    @property
    def is_cached(self) -> bool:
        return self._value is not _MISSING

    def invalidate(self) -> None:
        self._value = _MISSING

    def __call__(self) -> Any:
        if self._value is _MISSING:
            logger.debug(f"Computing reactive {self.qualified_id!r}")
            self._value = self._fn()
        return self._value

    def __repr__(self) -> str:
        return f"Reactive({self.qualified_id!r}, cached={self.is_cached})"


class Session:
    """Ambient input, output and reactive registries for one host session."""

    def __init__(
        self,
        inputs: MutableMapping,
        outputs: Optional[MutableMapping] = None,
        session_id: Optional[str] = None
    ):
        self.id = session_id or uuid.uuid4().hex
        self.input = inputs
        self.output: MutableMapping = outputs if outputs is not None else {}
        self.reactives: Dict[str, Reactive] = {}
        self._bound: Set[ScopePath] = set()

    def scope(self, path: ScopeLike = None) -> "ScopedSession":
        return ScopedSession(self, ScopePath.coerce(path))

    def register_reactive(self, qualified_id: str, fn: Callable[[], Any]) -> Reactive:
        reactive = Reactive(qualified_id, fn)
        if qualified_id in self.reactives:
            logger.debug(f"Replacing reactive {qualified_id!r} in session {self.id}")
        self.reactives[qualified_id] = reactive
        return reactive

    def mark_bound(self, path: ScopePath) -> None:
        """Record a behavior binding for ``path``; warns when bound twice in one run."""
        if path in self._bound:
            logger.warning(
                f"Scope {path.qualified!r} bound more than once in session {self.id}; "
                "later outputs replace earlier ones"
            )
        self._bound.add(path)

    def begin_run(self) -> None:
        """Reset per-run state when a host reuses one Session across reruns."""
        for reactive in self.reactives.values():
            reactive.invalidate()
        self._bound.clear()

    @contextmanager
    def activate(self) -> Iterator["Session"]:
        """Make this the current session (and root the scope) for the block."""
        session_token = _current_session.set(self)
        scope_token = _current_scope.set(ScopePath.root())
        try:
            yield self
        finally:
            _current_scope.reset(scope_token)
            _current_session.reset(session_token)

    def __repr__(self) -> str:
        return f"Session(id={self.id!r}, outputs={len(self.output)}, reactives={len(self.reactives)})"


class ScopedSession:
    """A session as seen from one module instance."""

    def __init__(self, session: Session, path: ScopePath):
        self.session = session
        self.path = path
        self.ns = Namespace(path)
        self.input: ScopedRegistry = ScopedRegistry(session.input, path)
        self.output: ScopedRegistry = ScopedRegistry(session.output, path)

    def child(self, identifier: str) -> "ScopedSession":
        return ScopedSession(self.session, self.path.child(identifier))

    def reactive(self, leaf: str) -> Callable[[Callable[[], Any]], Reactive]:
        """Decorator registering ``fn`` as a cached computation under ``leaf``."""
        qualified_id = self.ns(leaf)

        def decorator(fn: Callable[[], Any]) -> Reactive:
            return self.session.register_reactive(qualified_id, fn)

        return decorator

    def __repr__(self) -> str:
        return f"ScopedSession(path={self.path.qualified!r}, session={self.session.id!r})"


def current_session() -> Session:
    session = _current_session.get()
    if session is None:
        raise RuntimeError("No active session; call module servers inside Session.activate()")
    return session


def current_scope() -> ScopePath:
    return _current_scope.get()


@contextmanager
def enter_scope(identifier: str) -> Iterator[ScopePath]:
    """Push ``identifier`` onto the current scope for the duration of the block."""
    path = current_scope().child(identifier)
    token = _current_scope.set(path)
    logger.debug(f"Entered scope {path.qualified!r}")
    try:
        yield path
    finally:
        _current_scope.reset(token)
