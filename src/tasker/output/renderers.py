"""Rich renderers for task results, dispatched on ``result.op``.

Each renderer draws into a StringIO-backed console from
:func:`~tasker.output.console.create_console`; :func:`render_result`
returns the captured text.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from tasker.output.console import create_console, done_icon, get_output

if TYPE_CHECKING:
    from collections.abc import Callable

    from rich.console import Console

    from tasker.services.result import ServiceResult

    Renderer = Callable[[ServiceResult, Console, bool], None]

_NOT_AVAILABLE = "N/A"
_FIELD_STYLES = {"id": "tasker.id", "title": "tasker.title"}


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render *result* as human-readable text (no ANSI codes off a terminal)."""
    console = create_console()
    if result.ok:
        _OP_RENDERERS.get(result.op, _render_summary)(result, console, verbose)
    else:
        _render_error(result, console, verbose)
    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """One line per task id, the export path, or ``OK: <op>`` / ``ERROR: <op> — <msg>``."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    data = result.data
    if isinstance(data.get("items"), list):
        return "\n".join(str(item["id"]) for item in data["items"] if "id" in item)
    for key in ("id", "path"):
        if key in data:
            return str(data[key])
    return f"OK: {result.op}"


def _or_na(value: Any) -> str:
    return str(value) if value else _NOT_AVAILABLE


def _summary(console: Console, op: str, fields: dict[str, Any]) -> None:
    """``OK  <op>`` followed by indented ``key: value`` lines."""
    console.print(Text("OK", style="tasker.ok"), Text(f" {op}", style="tasker.op"))
    for key, value in fields.items():
        console.print(
            Text(f"  {key}: ", style="tasker.key"),
            Text(str(value), style=_FIELD_STYLES.get(key, "")),
            sep="",
        )


def _task_panel(console: Console, task: dict[str, Any]) -> None:
    done = bool(task.get("done"))
    body = "\n".join(
        [
            f"Description: {_or_na(task.get('description'))}",
            f"Created At: {task.get('created_at', '')}",
            f"Completed At: {_or_na(task.get('completed_at'))}",
        ]
    )
    console.print(
        Panel(
            body,
            title=f"{done_icon(done)} {task.get('id', '?')} — {task.get('title', '')}",
            border_style="tasker.done" if done else "tasker.pending",
            expand=False,
        )
    )


def _task_table(items: list[dict[str, Any]]) -> Table:
    table = Table(pad_edge=False)
    table.add_column("", no_wrap=True)
    table.add_column("ID", style="tasker.id", no_wrap=True, justify="right")
    table.add_column("Title", style="tasker.title")
    table.add_column("Description")
    table.add_column("Created At", no_wrap=True)
    table.add_column("Completed At", no_wrap=True)
    for item in items:
        table.add_row(
            done_icon(bool(item.get("done"))),
            str(item.get("id", "")),
            str(item.get("title", "")),
            str(item.get("description", "")),
            str(item.get("created_at", "")),
            _or_na(item.get("completed_at")),
        )
    return table


def _render_error(result: ServiceResult, console: Console, verbose: bool) -> None:
    err = result.error
    console.print(
        Text("ERROR", style="tasker.error"),
        Text(f" {result.op}", style="tasker.op"),
        "—",
        err.message if err else "Unknown error",
    )
    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for key, value in err.detail.items():
            console.print(f"    {key}: {value}")


def _render_added(result: ServiceResult, console: Console, verbose: bool) -> None:
    _summary(console, result.op, {"id": result.data.get("id"), "title": result.data.get("title")})
    if verbose:
        _task_panel(console, result.data)


def _render_task(result: ServiceResult, console: Console, verbose: bool) -> None:
    _task_panel(console, result.data)


def _render_done(result: ServiceResult, console: Console, verbose: bool) -> None:
    if result.data.get("already_done"):
        console.print(Text("Task already done!", style="tasker.warning"))
    else:
        console.print(
            Text("Task marked as done: ", style="tasker.ok"),
            Text(str(result.data.get("title", "")), style="tasker.title"),
            sep="",
        )
    _task_panel(console, result.data)


def _render_list(result: ServiceResult, console: Console, verbose: bool) -> None:
    items = result.data.get("items", [])
    if not items:
        console.print("No tasks yet.")
        return
    console.print(_task_table(items))
    console.print(f"\n{result.data.get('count', len(items))} tasks")


def _render_export(result: ServiceResult, console: Console, verbose: bool) -> None:
    data = result.data
    _summary(console, result.op, {"path": data.get("path"), "count": data.get("count")})


def _render_summary(result: ServiceResult, console: Console, verbose: bool) -> None:
    _summary(console, result.op, result.data)


_OP_RENDERERS: dict[str, Renderer] = {
    "add": _render_added,
    "get": _render_task,
    "list": _render_list,
    "done": _render_done,
    "mark_done": _render_task,
    "export": _render_export,
}
