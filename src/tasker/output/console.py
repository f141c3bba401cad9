"""Rich console and theme used by the renderers.

Renderers draw into a console backed by a StringIO buffer and return the
text, so commands decide where it goes (stdout or stderr). Rich drops the
color codes when it is not writing to a terminal.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

TASKER_THEME = Theme(
    {
        "tasker.ok": "bold green",
        "tasker.error": "bold red",
        "tasker.warning": "bold yellow",
        "tasker.op": "bold cyan",
        "tasker.key": "dim",
        "tasker.id": "bold blue",
        "tasker.title": "bold",
        "tasker.done": "green",
        "tasker.pending": "yellow",
    }
)

DONE_ICON = "✅"
PENDING_ICON = "❌"

# Wide enough for the six-column task table without wrapping timestamps.
DEFAULT_WIDTH = 120


def create_console(*, width: int = DEFAULT_WIDTH) -> Console:
    """A themed console that records into memory instead of a terminal."""
    return Console(file=StringIO(), theme=TASKER_THEME, highlight=False, width=width)


def get_output(console: Console) -> str:
    buffer = console.file
    if not isinstance(buffer, StringIO):
        raise TypeError("console was not created by create_console()")
    return buffer.getvalue()


def done_icon(done: bool) -> str:
    return DONE_ICON if done else PENDING_ICON
