from __future__ import annotations

import logging
from datetime import date
from pathlib import Path
from typing import Any, Dict, Optional

import typer

from ..config import load_settings
from ..data import build_dataset, load_dataset
from ..queries import run_queries
from ..render.text_out import TASK_ORDER, format_report, format_task, write_report


def _setup_logging(project_root: Path) -> None:
    logs_dir = project_root / "logs"
    logs_dir.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        handlers=[
            logging.FileHandler(logs_dir / "roster.log", encoding="utf-8"),
            logging.StreamHandler(),
        ],
    )


def run_reports(
    project_root: Path,
    *,
    log_level: int | None = None,
    locale: str | None = None,
    pattern: str | None = None,
    data_path: Path | None = None,
    today: date | None = None,
) -> tuple[str, Dict[str, Any]]:
    _setup_logging(project_root)
    if log_level is not None:
        logging.getLogger().setLevel(log_level)
    settings = load_settings(project_root).override(pattern=pattern, locale=locale)
    ds = load_dataset(data_path) if data_path is not None else build_dataset()
    report = run_queries(ds, settings, today)
    text = format_report(report)
    write_report(text, report, project_root / "outputs")
    return text, report


def task_key(label: str) -> str:
    key = "task_" + label.strip().replace(".", "_")
    if key not in TASK_ORDER:
        raise typer.BadParameter(f"unknown task {label!r}; expected 1-11 or 4.1")
    return key


def _parse_today(raw: str | None) -> date | None:
    if raw is None:
        return None
    try:
        return date.fromisoformat(raw)
    except ValueError as exc:
        raise typer.BadParameter(f"--today must be YYYY-MM-DD, got {raw!r}") from exc


app = typer.Typer(add_completion=False, help="Academic roster reports")


@app.command("report")
def cli_report(
    locale: Optional[str] = typer.Option(None, help="Locale for dates (default from config)"),
    pattern: Optional[str] = typer.Option(None, help="CLDR date pattern (default from config)"),
    data: Optional[Path] = typer.Option(None, help="JSON dataset instead of the built-in sample"),
    today: Optional[str] = typer.Option(None, help="Reference day for ages, YYYY-MM-DD"),
    log_level: str = typer.Option("INFO", help="Log level"),
    root: Optional[Path] = typer.Option(None, help="Project root for configs/, logs/, outputs/ (default: cwd)"),
) -> None:
    level = getattr(logging, log_level.upper(), logging.INFO)
    text, _ = run_reports(
        root or Path.cwd(),
        log_level=level,
        locale=locale,
        pattern=pattern,
        data_path=data,
        today=_parse_today(today),
    )
    print(text)


@app.command("task")
def cli_task(
    number: str = typer.Argument(..., help="Task number, 1-11 or 4.1"),
    locale: Optional[str] = typer.Option(None, help="Locale for dates (default from config)"),
    pattern: Optional[str] = typer.Option(None, help="CLDR date pattern (default from config)"),
    data: Optional[Path] = typer.Option(None, help="JSON dataset instead of the built-in sample"),
    today: Optional[str] = typer.Option(None, help="Reference day for ages, YYYY-MM-DD"),
    log_level: str = typer.Option("WARNING", help="Log level"),
    root: Optional[Path] = typer.Option(None, help="Project root for configs/, logs/, outputs/ (default: cwd)"),
) -> None:
    key = task_key(number)
    level = getattr(logging, log_level.upper(), logging.WARNING)
    _, report = run_reports(
        root or Path.cwd(),
        log_level=level,
        locale=locale,
        pattern=pattern,
        data_path=data,
        today=_parse_today(today),
    )
    print(format_task(report, key))


if __name__ == "__main__":
    app()
