"""configlint CLI — lint config files from the command line or start the service.

Exit codes for ``lint``:
    0  every file passed
    1  no files given
    2  at least one file had a fatal issue or could not be read
"""

from pathlib import Path
from typing import List, Optional

import typer

from configlint.config import APP_VERSION, get_settings
from configlint.linter import Issue, LintIOError, is_fatal, lint_engine
from configlint.logging_config import configure_logging

EXIT_OK = 0
EXIT_USAGE = 1
EXIT_FATAL = 2

app = typer.Typer(
    help="Lint YAML or JSON deployment configs, reporting structural or semantic issues.",
    no_args_is_help=True,
    add_completion=False,
)


def format_issue(path: str, issue: Issue) -> str:
    return f"  {path}:{issue.line} [{issue.severity}] {issue.message}"


def lint_one(path: Path, strict: bool, fix_suggestions: bool) -> bool:
    """Lint one file and print its issues. Returns True when the file is fatal."""
    try:
        issues = lint_engine.lint_file(path)
    except LintIOError as e:
        typer.echo(str(e), err=True)
        return True

    if not issues:
        typer.echo(f"{path}: OK")
        return False

    typer.echo(f"{path}:", err=True)
    for issue in issues:
        typer.echo(format_issue(str(path), issue), err=True)
        if fix_suggestions and issue.suggested_fix:
            typer.echo(f"    Fix suggestion: {issue.suggested_fix}", err=True)

    return is_fatal(issues, strict)


@app.command("lint")
def lint(
    paths: Optional[List[Path]] = typer.Argument(None, help="Config files to lint"),
    strict: bool = typer.Option(False, "--strict", help="Treat warnings as fatal"),
    fix_suggestions: bool = typer.Option(
        False, "--fix-suggestions", help="Show fix suggestions for each issue"
    ),
):
    """Lint one or more config files."""
    configure_logging(level="error", to_stderr=True)

    if not paths:
        typer.echo("Usage: configlint lint [--strict] [--fix-suggestions] <config-file>...", err=True)
        raise typer.Exit(code=EXIT_USAGE)

    exit_code = EXIT_OK
    for path in paths:
        if lint_one(path, strict, fix_suggestions):
            exit_code = EXIT_FATAL

    raise typer.Exit(code=exit_code)


@app.command("version")
def version():
    """Print the configlint version."""
    typer.echo(APP_VERSION)


@app.command("serve")
def serve(
    host: Optional[str] = typer.Option(None, "--host", help="Bind address (default: HOST env)"),
    port: Optional[int] = typer.Option(None, "--port", help="Listen port (default: PORT env)"),
):
    """Run the HTTP lint service."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "configlint.main:app",
        host=host or settings.HOST,
        port=port or settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    app()
