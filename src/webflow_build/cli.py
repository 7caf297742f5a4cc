"""Command-line interface for webflow-build."""

import sys

import click

from webflow_build.build import SingleFileBuilder, SplitBuilder
from webflow_build.config import BuildSettings
from webflow_build.errors import BuildError
from webflow_build.output import BuildFormatter
from webflow_build.utils.console import _get_console, _rich_error
from webflow_build.version import get_version


def print_version(ctx, param, value):
    """Print version and exit."""
    if not value or ctx.resilient_parsing:
        return

    console = _get_console()
    if console:
        from rich.panel import Panel
        from rich.text import Text
        version_text = Text()
        version_text.append("webflow-build", style="bold cyan")
        version_text.append(f" version {get_version()}", style="white")
        console.print(Panel(version_text, border_style="cyan", expand=False))
    else:
        click.echo(f"webflow-build version {get_version()}")
    ctx.exit()


def _load_settings(**overrides) -> BuildSettings:
    try:
        return BuildSettings.from_project_file(**overrides)
    except BuildError as e:
        BuildFormatter().error(e)
        sys.exit(1)


@click.group(help="Build Webflow-ready HTML with API keys injected from .env")
@click.option('--version', is_flag=True, callback=print_version,
              expose_value=False, is_eager=True, help="Show version and exit.")
@click.pass_context
def cli(ctx):
    """Main entry point for webflow-build."""
    ctx.ensure_object(dict)


@cli.command(help="Build index-production.html with API keys injected")
@click.option('--env-file', help="Path to the .env file (default: .env)")
@click.option('--source', help="Source HTML file (default: index.html)")
@click.option('--output', '-o', help="Output file (default: index-production.html)")
@click.option('--dry-run', is_flag=True, help="Run every check without writing files")
@click.pass_context
def build(ctx, env_file, source, output, dry_run):
    """Single-file build: one embed containing the whole page."""
    settings = _load_settings(env_file=env_file, source=source, output=output, dry_run=dry_run)
    formatter = BuildFormatter(width=60)

    try:
        result = SingleFileBuilder(settings).build()
    except Exception as e:
        _rich_error(f"ERROR: Build failed: {e}")
        sys.exit(1)

    if not result.success:
        formatter.warnings(result.warnings)
        formatter.error(result.error)
        sys.exit(1)

    formatter.header("Building Production HTML with API Keys")
    formatter.progress(result, settings.source)
    formatter.warnings(result.warnings)
    formatter.single_file_summary(result)
    formatter.single_file_instructions(settings.output)


@cli.command(help="Build three Webflow embeds (CSS, HTML, JS) with API keys injected")
@click.option('--env-file', help="Path to the .env file (default: .env)")
@click.option('--source', help="Source HTML file (default: index.html)")
@click.option('--output-dir', '-o', help="Output directory (default: webflow-deploy)")
@click.option('--limit', type=click.IntRange(min=1), help="Character limit per embed (default: 50000)")
@click.option('--dry-run', is_flag=True, help="Run every check without writing files")
@click.pass_context
def split(ctx, env_file, source, output_dir, limit, dry_run):
    """Split build: stylesheet, body markup and script as separate embeds."""
    settings = _load_settings(env_file=env_file, source=source, output_dir=output_dir,
                              char_limit=limit, dry_run=dry_run)
    formatter = BuildFormatter(width=70)

    try:
        result = SplitBuilder(settings).build()
    except Exception as e:
        _rich_error(f"ERROR: Build failed: {e}")
        sys.exit(1)

    if not result.success:
        formatter.warnings(result.warnings)
        formatter.error(result.error)
        sys.exit(1)

    formatter.header("Building Webflow Split Files")
    formatter.progress(result, settings.source)
    # Size warnings are printed with the limit check below
    formatter.warnings(result.warnings, exclude=("SizeLimitExceeded",))
    formatter.split_summary(result, settings.output_dir)
    formatter.limit_summary(result)
    formatter.split_instructions(settings.output_dir, result.build_time)


def main():
    """Main entry point for the CLI."""
    try:
        cli(obj={})
    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
