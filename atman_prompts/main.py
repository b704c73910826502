"""
atman-prompts — CLI entrypoint.

Usage:
    atman-prompts --help
    atman-prompts -o .prompts -l en -l ja
    python -m atman_prompts --list-languages
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from atman_prompts import __version__
from atman_prompts.core.config.loader import DEFAULT_CONFIG, PromptsConfig
from atman_prompts.core.observability.logging_config import setup_logging


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__, prog_name="atman-prompts")
@click.option(
    "--output-dir",
    "-o",
    default=None,
    help="Output directory for prompt files (default: .prompts).",
)
@click.option(
    "--languages",
    "-l",
    "languages",
    multiple=True,
    help="Languages to generate. Repeatable; space- or comma-separated (default: en ja).",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to prompts.yml (default: auto-detect).",
)
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.option("--list-languages", is_flag=True, help="List bundled template languages and exit.")
@click.pass_context
def cli(
    ctx: click.Context,
    output_dir: str | None,
    languages: tuple[str, ...],
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
    as_json: bool,
    list_languages: bool,
) -> None:
    """atman-prompts — generate prompt files in a structured directory format.

    Existing files are never overwritten; they are reported as skipped.
    """
    config: PromptsConfig = (ctx.obj or {}).get("config", DEFAULT_CONFIG)

    # ── Logging setup (once, at process start) ──────────────────
    setup_logging(debug=debug, verbose=verbose, quiet=quiet)

    if list_languages:
        _list_languages(config, as_json)
        return

    from atman_prompts.core.config.loader import ConfigError, resolve_options, split_language_args

    try:
        options = resolve_options(
            output_dir=output_dir,
            languages=split_language_args(languages),
            verbose=verbose,
            config_path=Path(config_path) if config_path else None,
            config=config,
        )
    except ConfigError as e:
        if as_json:
            click.echo(json.dumps({"ok": False, "error": str(e)}, indent=2))
        else:
            click.secho(f"❌ {e}", fg="red", err=True)
        sys.exit(1)

    if not as_json and not quiet:
        if verbose:
            click.echo("🚀 Starting prompt file generation with options:")
            click.echo(f"   output_dir: {options.output_dir}")
            click.echo(f"   languages:  {', '.join(options.languages)}")
        else:
            click.echo("🚀 Generating prompt files...")

    from atman_prompts.core.use_cases.generate import generate_from_options

    report = generate_from_options(options, config)

    if as_json:
        click.echo(json.dumps(report.to_dict(), indent=2))
        sys.exit(report.exit_code)

    _print_report(report, verbose=verbose, quiet=quiet)
    sys.exit(report.exit_code)


def _list_languages(config: PromptsConfig, as_json: bool) -> None:
    from atman_prompts.core.services.template_repository import (
        available_languages,
        discover_template_files,
    )

    codes = available_languages(config.templates_root)
    if as_json:
        click.echo(json.dumps({
            "languages": [
                {"code": code, "templates": discover_template_files(code, config.templates_root)}
                for code in codes
            ],
        }, indent=2))
        return

    if not codes:
        click.secho("No bundled templates found.", fg="yellow")
        return

    click.secho("🌐 Available languages:", fg="cyan", bold=True)
    for code in codes:
        count = len(discover_template_files(code, config.templates_root))
        default = " (default)" if code in config.supported_languages else ""
        click.echo(f"   • {code}{default}: {count} template(s)")


def _print_report(report, *, verbose: bool, quiet: bool) -> None:
    """Print per-file outcomes and summary counts."""
    structure = report.structure
    if structure is not None and structure.base_error:
        click.secho(f"📁 Could not create directory structure: {structure.base_dir}", fg="red", err=True)
    elif structure is not None and not quiet:
        click.echo(f"📁 Created directory structure: {structure.base_dir}")

    created = report.created
    skipped = report.skipped
    failed = report.failed
    # Verbose runs already logged every file as it was processed
    list_files = not verbose and not quiet

    if created and not quiet:
        click.secho(f"✅ Created {len(created)} prompt files:", fg="green")
        if list_files:
            for r in created:
                click.echo(f"   - {r.path}")

    if skipped and not quiet:
        click.secho(f"⏭️  Skipped {len(skipped)} existing files:", fg="yellow")
        if list_files:
            for r in skipped:
                click.echo(f"   - {r.path}")

    if failed:
        click.secho(f"❌ Encountered {len(failed)} errors:", fg="red", bold=True, err=True)
        for r in failed:
            click.secho(f"   - {r.path}: {r.error}", fg="red", err=True)
        return

    click.secho("🎉 Prompt file generation completed successfully!", fg="green", bold=True)


if __name__ == "__main__":
    cli()
