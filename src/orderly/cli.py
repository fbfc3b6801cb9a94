"""Command line interface for the Orderly project."""

from __future__ import annotations

import difflib
import logging
from functools import partial
from pathlib import Path
from typing import Any

import click
import yaml
from click.core import ParameterSource
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.syntax import Syntax

from orderly.classification import Category
from orderly.config import (
    ConfigError,
    ConfigManager,
    OrderlyConfig,
    merge_overrides,
    resolve_with_precedence,
)
from orderly.organization import EntryOutcome, RelocationExecutor
from orderly.system import (
    ListingError,
    SpecialFolder,
    SpecialFolderError,
    ensure_directory,
    list_entries,
    resolve_special_folder,
)

console = Console(soft_wrap=True)

_CATEGORY_FOLDERS = {
    Category.DOCUMENTS: SpecialFolder.DOCUMENTS,
    Category.PICTURES: SpecialFolder.PICTURES,
    Category.VIDEOS: SpecialFolder.VIDEOS,
}


def _handle_cli_error(
    message: str,
    *,
    code: str,
    json_output: bool,
    details: Any | None = None,
    original: Exception | None = None,
) -> None:
    """Emit a standardized error and terminate the command appropriately.

    Args:
        message: Human-readable error message.
        code: Machine-readable error identifier.
        json_output: Indicates whether JSON mode is active.
        details: Optional structured details to include in the payload.
        original: Original exception for chaining when not using JSON.

    Raises:
        SystemExit: When emitting JSON output to terminate the command.
        click.ClickException: For non-JSON flows to surface the error.
    """

    if json_output:
        payload: dict[str, Any] = {"error": {"code": code, "message": message}}
        if details is not None:
            payload["error"]["details"] = details
        console.print_json(data=payload)
        raise SystemExit(1)

    if isinstance(original, click.ClickException):
        raise original

    raise click.ClickException(message) from original


def _emit_message(message: Any, *, mode: str, quiet: bool, summary_only: bool) -> None:
    """Conditionally print CLI output according to quiet/summary settings.

    Args:
        message: Renderable or string to emit.
        mode: Output mode identifier (`detail`, `summary`, `warning`, `error`, or
            `report`; a report is printed even in quiet mode).
        quiet: Whether quiet mode is active.
        summary_only: Whether only summary lines should be emitted.
    """

    if quiet and mode not in {"error", "report"}:
        return

    if summary_only and mode not in {"summary", "report", "warning", "error"}:
        return

    console.print(message)


def _format_summary_line(command: str, root: Path | str, metrics: dict[str, Any]) -> str:
    """Return a consistent summary line for CLI commands."""

    parts = ", ".join(f"{key}={value}" for key, value in metrics.items())
    return f"[green]{command} summary for {escape(str(root))}: {parts}.[/green]"


def _report_outcome(outcome: EntryOutcome, *, quiet: bool, summary_only: bool) -> None:
    """Print the per-file notice for a moved or failed entry."""

    if outcome.status == "moved":
        _emit_message(
            f"Moved {escape(outcome.name)} -> {escape(str(outcome.destination))}",
            mode="detail",
            quiet=quiet,
            summary_only=summary_only,
        )
    elif outcome.status == "error":
        _emit_message(
            f"[red]Error moving {escape(outcome.name)}: {escape(outcome.error or '')}[/red]",
            mode="error",
            quiet=quiet,
            summary_only=summary_only,
        )


def _configure_logging(level: str) -> None:
    """Route library log records to stderr at the configured level."""

    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="orderly")
def cli() -> None:
    """Orderly moves new downloads into your Documents, Pictures, and Videos folders."""


@cli.command("run")
@click.option(
    "--source",
    type=click.Path(file_okay=False, path_type=str),
    help="Directory to organize instead of the Downloads folder.",
)
@click.option("--json", "json_output", is_flag=True, help="Emit JSON describing the run.")
@click.option("--summary", "summary_mode", is_flag=True, help="Only emit summary lines.")
@click.option(
    "--quiet", is_flag=True, help="Suppress everything except errors and the final summary."
)
@click.pass_context
def run(
    ctx: click.Context,
    source: str | None,
    json_output: bool,
    summary_mode: bool,
    quiet: bool,
) -> None:
    """Move recognized documents, pictures, and videos out of the Downloads folder.

    Each file lands in a "Recent Downloads" folder under the matching user folder,
    renamed with a numeric suffix when the name is already taken. Unrecognized
    files and subdirectories stay where they are. Failing to move an individual
    file is reported but does not change the exit status.

    Args:
        ctx: Click context used for parameter source inspection.
        source: Optional directory that replaces the Downloads folder.
        json_output: If True, emit a JSON document describing the run.
        summary_mode: When True, limit output to summary lines and errors.
        quiet: When True, print only per-file errors and the final summary line.

    Raises:
        click.ClickException: If configuration, folder lookup, or listing fails.
    """

    json_enabled = json_output
    try:
        manager = ConfigManager()
        cli_overrides = {"folders.downloads": source} if source else None
        config = manager.load(cli_overrides=cli_overrides)
        _configure_logging(config.logging.level)

        explicit_quiet = ctx.get_parameter_source("quiet") == ParameterSource.COMMANDLINE
        explicit_summary = ctx.get_parameter_source("summary_mode") == ParameterSource.COMMANDLINE

        quiet_enabled = quiet if explicit_quiet else config.cli.quiet_default
        summary_only = summary_mode if explicit_summary else config.cli.summary_default

        if json_output:
            if explicit_quiet and quiet_enabled:
                raise click.ClickException("--json cannot be combined with --quiet.")
            if explicit_summary and summary_only:
                raise click.ClickException("--json cannot be combined with --summary.")
            quiet_enabled = False
            summary_only = False

        if quiet_enabled and summary_only:
            raise click.ClickException(
                "Quiet and summary modes cannot both be enabled. Adjust CLI defaults or flags."
            )

        folders = {
            kind: resolve_special_folder(kind, getattr(config.folders, kind.value))
            for kind in SpecialFolder
        }
        source_dir = folders[SpecialFolder.DOWNLOADS]
        subfolder = config.organization.subfolder_name
        destinations = {
            category: folders[kind] / subfolder for category, kind in _CATEGORY_FOLDERS.items()
        }
        for directory in destinations.values():
            ensure_directory(directory)

        listing = list_entries(source_dir)

        reporter = None
        if not json_output:
            reporter = partial(_report_outcome, quiet=quiet_enabled, summary_only=summary_only)
        executor = RelocationExecutor(reporter=reporter)
        summary = executor.run(source_dir, listing, destinations.__getitem__)

        if json_output:
            console.print_json(
                data={
                    "context": {
                        "source": source_dir.as_posix(),
                        "destinations": {
                            category.value: path.as_posix()
                            for category, path in destinations.items()
                        },
                    },
                    "counts": summary.counts(),
                    "outcomes": [outcome.model_dump(mode="json") for outcome in summary.outcomes],
                }
            )
        else:
            _emit_message(
                _format_summary_line("Relocation", source_dir, summary.counts()),
                mode="report",
                quiet=quiet_enabled,
                summary_only=summary_only,
            )
    except ConfigError as exc:
        _handle_cli_error(str(exc), code="config_error", json_output=json_enabled, original=exc)
    except SpecialFolderError as exc:
        _handle_cli_error(
            f"{exc} Exiting.", code="special_folder_error", json_output=json_enabled, original=exc
        )
    except ListingError as exc:
        _handle_cli_error(str(exc), code="listing_error", json_output=json_enabled, original=exc)
    except click.ClickException as exc:
        _handle_cli_error(str(exc), code="cli_error", json_output=json_enabled, original=exc)
    except Exception as exc:
        _handle_cli_error(
            f"Unexpected error while organizing downloads: {exc}",
            code="internal_error",
            json_output=json_enabled,
            details={"exception": type(exc).__name__},
            original=exc,
        )


@cli.group()
def config() -> None:
    """Manage Orderly configuration files and overrides."""


@config.command("view")
@click.option("--no-env", is_flag=True, help="Ignore environment overrides when displaying output.")
def config_view(no_env: bool) -> None:
    """Display the effective configuration after applying precedence rules.

    Args:
        no_env: If True, ignore environment-derived overrides.

    Raises:
        click.ClickException: If configuration cannot be loaded.
    """
    manager = ConfigManager()
    try:
        loaded = manager.load(include_env=not no_env)
    except ConfigError as exc:
        raise click.ClickException(str(exc)) from exc

    yaml_text = yaml.safe_dump(loaded.model_dump(mode="python"), sort_keys=False)
    console.print(Syntax(yaml_text, "yaml", word_wrap=True))


@config.command("set")
@click.argument("key")
@click.option("--value", required=True, help="Value to assign to KEY.")
def config_set(key: str, value: str) -> None:
    """Persist a configuration value expressed as a dotted KEY.

    Args:
        key: Dotted path describing the configuration field to update.
        value: YAML-literal value to write into the configuration file.

    Raises:
        click.ClickException: If parsing, assignment, or validation fails.
    """
    manager = ConfigManager()
    try:
        manager.ensure_exists()
        file_data = manager.load_file_overrides()
    except ConfigError as exc:
        raise click.ClickException(str(exc)) from exc

    before = manager.read_text().splitlines()
    segments = [segment.strip() for segment in key.split(".") if segment.strip()]
    if not segments:
        raise click.ClickException(
            "KEY must specify a dotted path such as 'organization.subfolder_name'."
        )

    try:
        parsed_value = yaml.safe_load(value)
    except yaml.YAMLError as exc:
        raise click.ClickException(f"Unable to parse value: {exc}") from exc

    try:
        file_data = merge_overrides(file_data, {".".join(segments): parsed_value})
        resolve_with_precedence(defaults=OrderlyConfig(), file_overrides=file_data)
    except ConfigError as exc:
        raise click.ClickException(str(exc)) from exc

    manager.save(file_data)
    after = manager.read_text().splitlines()

    diff = list(
        difflib.unified_diff(
            before,
            after,
            fromfile="config.yaml (before)",
            tofile="config.yaml (after)",
            lineterm="",
        )
    )
    # The timestamp line always changes; anything beyond it is a real update.
    changed = [
        line
        for line in diff
        if line.startswith(("+", "-"))
        and not line.startswith(("+++", "---", "+# Last", "-# Last"))
    ]
    if not changed:
        console.print("[yellow]No changes applied; value already up to date.[/yellow]")
        return

    console.print(Syntax("\n".join(diff), "diff", word_wrap=False))
    console.print(f"[green]Updated {'.'.join(segments)}.[/green]")


def main() -> None:
    """Invoke the Click CLI as the console script entry point."""
    cli()


if __name__ == "__main__":
    main()
