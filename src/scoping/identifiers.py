"""
Identifier composition for nested dashboard modules.

A module instance lives under a scope path (the ids of every enclosing module,
outermost first). Its controls and outputs are addressed by qualified ids made
by joining that path and a local leaf id with ``ID_SEPARATOR``:

    >>> compose([], "hist1")
    'hist1'
    >>> compose(["hist1"], "var")
    'hist1-var'
    >>> ns(["hist1"]).child("stats")("mean")
    'hist1-stats-mean'

The separator is reserved. No single identifier may contain it, so a qualified
id always splits back into exactly one path.
"""

from dataclasses import dataclass
from typing import Any, Sequence, Tuple, Union

from config.config import ID_SEPARATOR

SEPARATOR = ID_SEPARATOR


class InvalidIdentifier(ValueError):
    """Raised when an identifier is empty, not a string, or contains the separator."""

    def __init__(self, identifier: Any, reason: str):
        self.identifier = identifier
        self.reason = reason
        super().__init__(f"Invalid identifier {identifier!r}: {reason}")


def validate_identifier(identifier: Any) -> str:
    """
    Check a single (unqualified) identifier.

    Args:
        identifier: Candidate identifier

    Returns:
        The identifier unchanged

    Raises:
        InvalidIdentifier: If it is not a non-empty string free of the separator
    """
    if not isinstance(identifier, str):
        raise InvalidIdentifier(identifier, f"must be a str, not {type(identifier).__name__}")
    if not identifier:
        raise InvalidIdentifier(identifier, "must not be empty")
    if SEPARATOR in identifier:
        raise InvalidIdentifier(identifier, f"must not contain the reserved separator {SEPARATOR!r}")
    return identifier


@dataclass(frozen=True)
class ScopePath:
    """Immutable nesting path from the application root to a module instance."""

    segments: Tuple[str, ...] = ()

    def __post_init__(self):
        segments = tuple(self.segments)
        for segment in segments:
            validate_identifier(segment)
        object.__setattr__(self, "segments", segments)

    @classmethod
    def root(cls) -> "ScopePath":
        return cls(())

    @classmethod
    def parse(cls, qualified: str) -> "ScopePath":
        """Split a qualified id back into its path; ``""`` is the root."""
        if not isinstance(qualified, str):
            raise InvalidIdentifier(qualified, f"must be a str, not {type(qualified).__name__}")
        if qualified == "":
            return cls.root()
        return cls(tuple(qualified.split(SEPARATOR)))

    @classmethod
    def coerce(cls, scope: Union["ScopePath", Sequence[str], str, None]) -> "ScopePath":
        """Accept a ScopePath, a sequence of identifiers, a qualified string or None."""
        if scope is None:
            return cls.root()
        if isinstance(scope, ScopePath):
            return scope
        if isinstance(scope, str):
            return cls.parse(scope)
        return cls(tuple(scope))

    @property
    def is_root(self) -> bool:
        return not self.segments

    @property
    def depth(self) -> int:
        return len(self.segments)

    @property
    def parent(self) -> "ScopePath":
        if self.is_root:
            raise ValueError("The root scope has no parent")
        return ScopePath(self.segments[:-1])

    @property
    def qualified(self) -> str:
        return SEPARATOR.join(self.segments)

    @property
    def prefix(self) -> str:
        """Key prefix owned by this scope (empty for root)."""
        return self.qualified + SEPARATOR if self.segments else ""

    def child(self, identifier: str) -> "ScopePath":
        return ScopePath(self.segments + (validate_identifier(identifier),))

    def __truediv__(self, identifier: str) -> "ScopePath":
        return self.child(identifier)

    def compose(self, leaf: str) -> str:
        return self.prefix + validate_identifier(leaf)

    def contains(self, qualified: str) -> bool:
        """True if ``qualified`` addresses an entry strictly inside this scope."""
        return isinstance(qualified, str) and qualified.startswith(self.prefix) and len(qualified) > len(self.prefix)

    def __str__(self) -> str:
        return self.qualified

    def __repr__(self) -> str:
        return f"ScopePath({self.qualified!r})"


ScopeLike = Union[ScopePath, Sequence[str], str, None]


def compose(scope_path: ScopeLike, leaf: str) -> str:
    """
    Join a scope path and a leaf identifier into a qualified identifier.

    Args:
        scope_path: The caller's accumulated path (empty or None for root)
        leaf: Identifier chosen locally by the module

    Returns:
        Qualified identifier, e.g. ``"hist1-var"``

    Raises:
        InvalidIdentifier: If the leaf or any path segment is malformed
    """
    return ScopePath.coerce(scope_path).compose(leaf)


def split_qualified(qualified: str) -> ScopePath:
    """Inverse of :func:`compose`: every segment must be a valid identifier."""
    return ScopePath.parse(qualified)


def validate_qualified(key: Any) -> str:
    """Check a relative qualified key such as ``"var"`` or ``"stats-mean"``."""
    if not isinstance(key, str):
        raise InvalidIdentifier(key, f"must be a str, not {type(key).__name__}")
    if ScopePath.parse(key).is_root:
        raise InvalidIdentifier(key, "must not be empty")
    return key


class Namespace:
    """Callable that qualifies leaf ids for one scope; handed to view builders."""

    __slots__ = ("path",)

    def __init__(self, path: ScopeLike = None):
        self.path = ScopePath.coerce(path)

    def __call__(self, leaf: str) -> str:
        return self.path.compose(leaf)

    def child(self, identifier: str) -> "Namespace":
        return Namespace(self.path.child(identifier))

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Namespace) and other.path == self.path

    def __hash__(self) -> int:
        return hash(self.path)

    def __repr__(self) -> str:
        return f"Namespace({self.path.qualified!r})"


def ns(scope: ScopeLike = None) -> Namespace:
    """Build a :class:`Namespace` for ``scope``."""
    return Namespace(scope)
