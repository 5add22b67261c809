from __future__ import annotations

import contextlib
import logging
from pathlib import Path
from typing import Iterator, List, NoReturn, Optional

import typer
from rich.console import Console
from rich.markup import escape

from mobilecases.core.config import settings
from mobilecases.logging_config import setup_logging
from mobilecases.services.testcases import (
    TestCaseError,
    TestCaseStore,
    collect_violations,
    delete_testcase,
    load_testcase,
    read_testcase,
    render_suite_report,
)
from mobilecases.services.testcases.errors import NotFoundError

app = typer.Typer(add_completion=False, help="Mobile test case store CLI")

# soft_wrap：长路径不折行
console = Console(soft_wrap=True, highlight=False)
err_console = Console(stderr=True, soft_wrap=True, highlight=False)

logger = logging.getLogger(__name__)


# ============================================================
# 小工具：输出
# - 状态信息走 rich（[MC] 前缀）
# - 原始数据（YAML / JSON / 列表行）走 typer.echo，保证原样输出
# ============================================================
def _info(msg: str) -> None:
    console.print(f"[cyan][MC][/cyan] {escape(msg)}")


def _ok(msg: str) -> None:
    console.print(f"[green][MC][OK][/green] {escape(msg)}")


def _fail(msg: str, code: int = 1) -> NoReturn:
    """
    统一失败出口：
    - 打印 FAIL 信息
    - 抛出 typer.Exit(code)
    """
    console.print(f"[red][MC][FAIL][/red] {escape(msg)}")
    raise typer.Exit(code)


@contextlib.contextmanager
def _handle_errors() -> Iterator[None]:
    """TestCaseError -> FAIL + 非零退出码"""
    try:
        yield
    except TestCaseError as e:
        logger.debug(f"Command failed: {type(e).__name__}: {e}")
        _fail(str(e))


def _read_content(content: Optional[str], file: Optional[Path]) -> str:
    if content is not None and file is not None:
        _fail("--content 与 --file 只能二选一", code=2)
    if content is not None:
        return content
    if file is not None:
        try:
            with open(file, "r", encoding="utf-8", newline="") as f:
                return f.read()
        except FileNotFoundError:
            _fail(f"File not found: {file}")
        except UnicodeDecodeError:
            _fail(f"File is not valid UTF-8: {file}")
        except OSError as e:
            _fail(f"Failed to read file: {file} ({e.strerror or e})")
    return typer.get_text_stream("stdin").read()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Manage mobile test cases stored as YAML files."""
    setup_logging("DEBUG" if verbose else settings.LOG_LEVEL, settings.LOG_FILE)


# ============================================================
# 命令：save / list / get / delete / run / run-suite / validate
# ============================================================
@app.command()
def save(
    filename: str = typer.Argument(..., help="Target filename (.yaml appended if missing)"),
    directory: Path = typer.Option(Path(settings.CASES_DIR), "--dir", "-d", help="Test case directory"),
    content: Optional[str] = typer.Option(None, "--content", "-c", help="YAML content"),
    file: Optional[Path] = typer.Option(None, "--file", "-f", help="Read YAML content from file"),
):
    """Validate YAML content and save it as a test case (stdin if no content given)."""
    text = _read_content(content, file)
    with _handle_errors():
        path = TestCaseStore(directory).save(filename, text)
    _ok(f"Saved: {path}")


@app.command("list")
def list_cases(
    directory: Path = typer.Option(Path(settings.CASES_DIR), "--dir", "-d", help="Test case directory"),
    platform: Optional[str] = typer.Option(None, "--platform", "-p", help="Filter by platform (case-insensitive)"),
):
    """List valid test cases in a directory."""
    with _handle_errors():
        summaries = TestCaseStore(directory).list_cases(platform)

    if not summaries:
        _info("No test cases found.")
        return

    for summary in summaries:
        typer.echo(summary.to_line())
    err_console.print(f"Total: {len(summaries)} test case(s)")


@app.command()
def get(path: Path = typer.Argument(..., help="Test case file path")):
    """Show metadata and raw YAML of a test case."""
    with _handle_errors():
        stored = read_testcase(path)

    tc = stored.testcase
    typer.echo("--- Metadata ---")
    typer.echo(f"ID: {tc.id}")
    typer.echo(f"Name: {tc.name}")
    typer.echo(f"Platform: {tc.platform}")
    typer.echo(f"Priority: {tc.priority}")
    typer.echo(f"Steps: {len(tc.steps)}")
    typer.echo("")
    typer.echo("--- YAML ---")
    typer.echo(stored.content, nl=False)


@app.command()
def delete(path: Path = typer.Argument(..., help="Test case file path")):
    """Delete a test case file (content is not validated)."""
    with _handle_errors():
        delete_testcase(path)
    _ok(f"Deleted: {path}")


@app.command()
def run(path: Path = typer.Argument(..., help="Test case file path")):
    """
    展示待执行的测试用例：
    - 只输出头信息与原始 YAML
    - 真正的设备执行由移动端自动化层负责
    """
    with _handle_errors():
        stored = read_testcase(path)

    tc = stored.testcase
    typer.echo(f"Execute test case: {tc.id} - {tc.name}")
    typer.echo(f"Platform: {tc.platform}")
    typer.echo(f"Steps: {len(tc.steps)}")
    typer.echo("")
    typer.echo(stored.content, nl=False)


@app.command("run-suite")
def run_suite(
    ids: List[str] = typer.Argument(..., help="Test case IDs, in execution order"),
    directory: Path = typer.Option(Path(settings.CASES_DIR), "--dir", "-d", help="Test case directory"),
    report: Optional[Path] = typer.Option(None, "--report", "-r", help="Report destination (announced only)"),
):
    """Assemble test cases matching IDs into a JSON suite report."""
    with _handle_errors():
        suite = TestCaseStore(directory).load_suite(ids)

    if not suite:
        _info(f"No test cases matched IDs: {', '.join(ids)}")
        return

    if report is not None:
        _ok(f"Suite loaded ({len(suite)} test cases). Report will be saved to: {report}")
    else:
        _ok(f"Suite loaded ({len(suite)} test cases):")
    typer.echo("")
    typer.echo(render_suite_report(suite))


@app.command()
def validate(
    path: Path = typer.Argument(..., help="Test case file path"),
    all_errors: bool = typer.Option(False, "--all-errors", help="Report every violation instead of the first"),
):
    """Validate a test case file without saving it."""
    with _handle_errors():
        try:
            with open(path, "r", encoding="utf-8", newline="") as f:
                text = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise NotFoundError(str(path)) from e
        tc = load_testcase(text)

    violations = collect_violations(tc)
    if not violations:
        _ok(f"Valid: {path} ({tc.id})")
        return

    if not all_errors:
        _fail(violations[0])

    for v in violations:
        console.print(f"[red]  - {escape(v)}[/red]")
    _fail(f"{len(violations)} violation(s) in {path}")


if __name__ == "__main__":
    app()
