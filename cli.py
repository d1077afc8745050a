from __future__ import annotations

from datetime import date
from pathlib import Path
import typer
from rich.console import Console
from rich.table import Table

from config import SETTINGS
from translator.errors import TranslationError
from translator.factory import build_cache, build_orchestrator, build_usage_tracker
from translator.languages import filter_languages, get_default_languages
from utils.cache import FileCache
from utils.logging_config import configure_logging

app = typer.Typer(add_completion=False)
console = Console()


@app.command(help="Translate text with the Google Cloud Translation API")
def translate(
    text: str = typer.Argument(..., help="Text to translate"),
    target: str = typer.Option(SETTINGS.default_target_lang, "--target", "-t"),
    source: str = typer.Option("", "--source", "-s", help="Source language code, empty to auto-detect"),
    proxy: str | None = typer.Option(None, help="Proxy URL for the HTTP transport"),
    cache: bool = typer.Option(True, help="Use the persistent translation cache"),
    track: bool = typer.Option(True, help="Record character usage"),
    log_file: Path | None = typer.Option(None, help="Also write debug logs to this file"),
) -> None:
    configure_logging(log_file)
    orchestrator = build_orchestrator(
        SETTINGS,
        cache=build_cache(SETTINGS, persistent=cache),
        proxy=proxy,
    )
    try:
        result = orchestrator.translate(text, target, source)
    except TranslationError as exc:
        console.print(f"[red]{exc.message}[/red]")
        raise typer.Exit(code=1)

    if track:
        build_usage_tracker(SETTINGS).track_usage(result.char_count, source or "auto", target)
    console.print(result.translated_text)
    if result.detected_language:
        console.log(f"Detected source language: {result.detected_language}")


@app.command(help="List the languages offered to visitors")
def languages(
    enabled_only: bool = typer.Option(False, "--enabled", help="Only show enabled languages"),
) -> None:
    langs = filter_languages(SETTINGS.enabled_langs) if enabled_only else get_default_languages()
    table = Table("Code", "Name", "Native", "Flag")
    for lang in langs:
        table.add_row(lang.code, lang.name, lang.native_name, lang.flag)
    console.print(table)


@app.command(help="Show character usage for a month")
def usage(
    year: int = typer.Option(date.today().year),
    month: int = typer.Option(date.today().month, min=1, max=12),
) -> None:
    tracker = build_usage_tracker(SETTINGS)
    total = tracker.monthly_total(year, month)
    ratio = tracker.usage_ratio(year, month)
    console.print(
        f"{year:04d}-{month:02d}: {total} / {tracker.monthly_char_limit} characters "
        f"({ratio:.1%}), {tracker.monthly_calls(year, month)} calls"
    )
    for threshold in tracker.crossed_alerts(year, month):
        console.print(f"[yellow]Usage passed {threshold:.0%} of the monthly limit[/yellow]")


@app.command("cache-clear", help="Remove every entry from the persistent cache")
def cache_clear() -> None:
    removed = FileCache(SETTINGS.cache_path).clear()
    console.print(f"Removed {removed} cached translations")


if __name__ == "__main__":
    app()
