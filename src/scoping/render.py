"""Output directives registered by behavior binders and drawn by the host."""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict

OUTPUT_KINDS = ("plot", "text", "table", "markdown", "metric", "ui")


@dataclass(frozen=True)
class OutputDirective:
    kind: str
    fn: Callable[[], Any]
    options: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        if self.kind not in OUTPUT_KINDS:
            raise ValueError(f"Unknown output kind {self.kind!r}; expected one of {OUTPUT_KINDS}")
        if not callable(self.fn):
            raise TypeError(f"Output {self.kind!r} needs a callable, got {type(self.fn).__name__}")

    def evaluate(self) -> Any:
        return self.fn()


def render_plot(fn: Callable[[], Any] = None, **options: Any):
    """Wrap a figure-producing callable; ``options`` go to ``st.pyplot``.

    Usable bare (``@render_plot``) or with options (``@render_plot(clear_figure=True)``).
    """
    if fn is None:
        return lambda f: OutputDirective("plot", f, dict(options))
    return OutputDirective("plot", fn, dict(options))


def render_text(fn: Callable[[], Any]) -> OutputDirective:
    return OutputDirective("text", fn)


def render_table(fn: Callable[[], Any]) -> OutputDirective:
    return OutputDirective("table", fn)


def render_markdown(fn: Callable[[], Any]) -> OutputDirective:
    return OutputDirective("markdown", fn)


def render_metric(fn: Callable[[], Any]) -> OutputDirective:
    """``fn`` returns ``(label, value)`` or ``(label, value, delta)``."""
    return OutputDirective("metric", fn)


def render_ui(fn: Callable[[], Any]) -> OutputDirective:
    """``fn`` draws widgets itself, for controls whose options depend on reactive data."""
    return OutputDirective("ui", fn)
