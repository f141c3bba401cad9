"""Tests for operation-specific Rich renderers."""

from tasker.output.renderers import render_quiet, render_result
from tasker.services.result import ServiceError, ServiceResult


def _ok(op: str, **data: object) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=dict(data))


def _task(**overrides: object) -> dict[str, object]:
    task: dict[str, object] = {
        "id": 1,
        "title": "Buy milk",
        "description": "",
        "done": False,
        "created_at": "2025-01-02 03:04:05",
        "completed_at": None,
    }
    task.update(overrides)
    return task


class TestErrorRenderer:
    def test_basic_error(self) -> None:
        result = ServiceResult(
            ok=False,
            op="done",
            error=ServiceError(code="NOT_FOUND", message="Task not found: 9"),
        )
        output = render_result(result)
        assert "ERROR" in output
        assert "done" in output
        assert "Task not found: 9" in output

    def test_verbose_shows_detail(self) -> None:
        result = ServiceResult(
            ok=False,
            op="done",
            error=ServiceError(code="NOT_FOUND", message="missing", detail={"id": 9}),
        )
        output = render_result(result, verbose=True)
        assert "detail" in output
        assert "id: 9" in output

    def test_no_error_object(self) -> None:
        assert "Unknown error" in render_result(ServiceResult(ok=False, op="test"))


class TestTaskRenderers:
    def test_add(self) -> None:
        output = render_result(_ok("add", **_task(id=12)))
        assert "OK" in output
        assert "12" in output
        assert "Buy milk" in output

    def test_list_table(self) -> None:
        items = [
            _task(id=1, title="Buy milk"),
            _task(id=2, title="Walk dog", done=True, completed_at="2025-01-03 10:00:00"),
        ]
        output = render_result(_ok("list", items=items, count=2))
        assert "Buy milk" in output
        assert "Walk dog" in output
        assert "✅" in output
        assert "❌" in output
        assert "N/A" in output
        assert "2 tasks" in output

    def test_list_empty(self) -> None:
        assert "No tasks yet." in render_result(_ok("list", items=[], count=0))

    def test_done_marked(self) -> None:
        data = _task(done=True, completed_at="2025-01-03 10:00:00", already_done=False)
        output = render_result(_ok("done", **data))
        assert "Task marked as done" in output
        assert "2025-01-03 10:00:00" in output

    def test_done_already(self) -> None:
        data = _task(done=True, completed_at="2025-01-03 10:00:00", already_done=True)
        output = render_result(_ok("done", **data))
        assert "already done" in output

    def test_description_placeholder(self) -> None:
        output = render_result(_ok("get", **_task(description="")))
        assert "Description: N/A" in output

    def test_export(self) -> None:
        output = render_result(_ok("export", path="/tmp/tasks.csv", count=3))
        assert "/tmp/tasks.csv" in output
        assert "3" in output

    def test_unknown_op_falls_back(self) -> None:
        output = render_result(_ok("mystery", answer=42))
        assert "mystery" in output
        assert "answer: 42" in output


class TestQuiet:
    def test_list_ids(self) -> None:
        items = [_task(id=1), _task(id=2)]
        assert render_quiet(_ok("list", items=items, count=2)) == "1\n2"

    def test_single_id(self) -> None:
        assert render_quiet(_ok("add", **_task(id=5))) == "5"

    def test_export_path(self) -> None:
        assert render_quiet(_ok("export", path="/tmp/t.csv", count=0)) == "/tmp/t.csv"

    def test_error(self) -> None:
        result = ServiceResult(
            ok=False, op="done", error=ServiceError(code="NOT_FOUND", message="nope")
        )
        assert render_quiet(result).startswith("ERROR: done")
