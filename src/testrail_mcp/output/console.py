"""Rich rendering to strings.

Commands build Rich renderables and print them through :func:`render`,
which captures output in memory so formatters keep returning ``str``.
Rich drops ANSI codes on its own when the target is not a terminal.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console, RenderableType
from rich.theme import Theme

DEFAULT_WIDTH = 120

TR_THEME = Theme(
    {
        "tr.ok": "bold green",
        "tr.error": "bold red",
        "tr.op": "bold cyan",
        "tr.category": "magenta",
        "tr.required": "bold",
        "tr.optional": "dim",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Console writing into a private buffer, themed with :data:`TR_THEME`."""
    return Console(
        file=StringIO(),
        theme=TR_THEME,
        no_color=no_color,
        highlight=False,
        width=width or DEFAULT_WIDTH,
    )


def get_output(console: Console) -> str:
    """Text written so far to a console from :func:`create_console`."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def render(renderable: RenderableType, *, no_color: bool = False, width: int | None = None) -> str:
    """Print *renderable* on a fresh buffered console and return the text."""
    console = create_console(no_color=no_color, width=width)
    console.print(renderable)
    return get_output(console)
