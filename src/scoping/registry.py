"""
Restricted views over an ambient id-keyed registry.

The host keeps flat mappings from qualified id to value (widget state,
registered outputs). A module must only see its own slice of them.
:func:`restrict_view` returns a :class:`ScopedRegistry` exposing exactly the
entries under ``scope + SEPARATOR`` with that prefix stripped. Reads, writes
and deletes pass through to the ambient mapping; nothing is copied, so the
view always reflects the current host state.
"""

from collections.abc import MutableMapping
from typing import Any, Generic, Iterator, TypeVar

from scoping.identifiers import ScopeLike, ScopePath, validate_qualified
from utils.logging import get_logger

logger = get_logger(__name__)

V = TypeVar("V")


class ScopedRegistry(MutableMapping, Generic[V]):
    """Mutable mapping view of ``ambient`` limited to the keys under ``scope``."""

    def __init__(self, ambient: MutableMapping, scope: ScopeLike = None):
        if isinstance(ambient, ScopedRegistry):
            # Nest against the real backing store so prefixes accumulate once.
            scope = ScopePath(ambient.scope.segments + ScopePath.coerce(scope).segments)
            ambient = ambient.ambient
        self._ambient = ambient
        self._scope = ScopePath.coerce(scope)
        self._prefix = self._scope.prefix

    @property
    def scope(self) -> ScopePath:
        return self._scope

    @property
    def ambient(self) -> MutableMapping:
        return self._ambient

    def qualify(self, key: str) -> str:
        """Ambient key for a key local to this view, validated for writes."""
        return self._prefix + validate_qualified(key)

    def _lookup_key(self, key: object) -> str:
        # Every key yielded by __iter__ must be readable through this lookup.
        if not isinstance(key, str) or not key:
            raise KeyError(key)
        return self._prefix + key

    def __getitem__(self, key: str) -> V:
        qualified = self._lookup_key(key)
        try:
            return self._ambient[qualified]
        except KeyError:
            raise KeyError(key) from None

    def __setitem__(self, key: str, value: V) -> None:
        qualified = self.qualify(key)
        logger.debug(f"Set {qualified!r} via scope {self._scope.qualified!r}")
        self._ambient[qualified] = value

    def __delitem__(self, key: str) -> None:
        qualified = self._lookup_key(key)
        try:
            del self._ambient[qualified]
        except KeyError:
            raise KeyError(key) from None

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str) or not key:
            return False
        return self._prefix + key in self._ambient

    def __iter__(self) -> Iterator[str]:
        # Snapshot keys so callers may mutate the view while iterating.
        for key in list(self._ambient.keys()):
            if isinstance(key, str) and self._scope.contains(key):
                yield key[len(self._prefix):]

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def scoped(self, identifier: str) -> "ScopedRegistry[V]":
        """View of the child scope ``identifier``."""
        return ScopedRegistry(self._ambient, self._scope.child(identifier))

    def to_dict(self) -> dict:
        return {key: self._ambient[self._prefix + key] for key in self}

    def __repr__(self) -> str:
        return f"ScopedRegistry(scope={self._scope.qualified!r}, keys={list(self)!r})"


def restrict_view(registry: MutableMapping, scope_path: ScopeLike) -> ScopedRegistry[Any]:
    """
    Restrict ``registry`` to the entries under ``scope_path``.

    Args:
        registry: Ambient mapping from qualified id to value, or another view
        scope_path: Scope to restrict to (root exposes every string key)

    Returns:
        ScopedRegistry whose keys are relative to ``scope_path``
    """
    return ScopedRegistry(registry, scope_path)
