"""CLI output for build results and deployment instructions."""

import click
from typing import List

from ..build.models import BuildResult
from ..errors import BuildError, BuildWarning
from ..utils.console import (
    _create_table,
    _print_table,
    _rich_blank_line,
    _rich_echo,
    _rich_error,
    _rich_info,
    _rich_panel,
    _rich_rule,
    _rich_success,
    _rich_warning,
)

SINGLE_FILE_STEPS = [
    "Open {output} in a text editor",
    "Copy ALL contents (Ctrl+A, Ctrl+C)",
    "In Webflow Designer:",
    "   - Add Custom Code embed element",
    "   - Paste the entire content",
    "   - Save and Publish",
]

SPLIT_STEPS = [
    "Open your page and click the gear icon (Page Settings)",
    "Go to Custom Code tab",
    'In "Inside <head> tag" field:',
    "   • Open: {output_dir}/webflow-head.html",
    "   • Copy ALL contents (Ctrl+A, Ctrl+C)",
    "   • Paste into Webflow",
    'In "Before </body> tag" field:',
    "   • Open: {output_dir}/webflow-body.html",
    "   • Copy ALL contents (Ctrl+A, Ctrl+C)",
    "   • Paste into Webflow",
    "Save Page Settings",
    "On the page canvas:",
    "   • Add a Custom Code element (from Add panel)",
    "   • Open: {output_dir}/webflow-html.html",
    "   • Copy ALL contents (Ctrl+A, Ctrl+C)",
    "   • Paste into the Custom Code element",
    "Publish your site!",
]


def numbered(steps: List[str]) -> List[str]:
    """Number the top-level steps, leaving indented sub-steps as they are."""
    lines = []
    number = 0
    for step in steps:
        if step.startswith(" "):
            lines.append(step)
        else:
            number += 1
            lines.append(f"{number}. {step}")
    return lines


class BuildFormatter:
    """Prints build progress, summaries and instructions for one command."""

    def __init__(self, width: int = 60):
        self.width = width

    def header(self, title: str):
        _rich_blank_line()
        _rich_rule(title, self.width)
        _rich_blank_line()

    def error(self, error: BuildError):
        _rich_error(f"ERROR: {error.message}")
        for line in error.details:
            _rich_echo(line, color="red", err=True)
        if error.remediation:
            _rich_blank_line(err=True)
            for line in error.remediation:
                _rich_echo(line, color="cyan", err=True)
        _rich_blank_line(err=True)

    def warning(self, warning: BuildWarning):
        _rich_warning(warning.message, symbol="warning")
        for detail in warning.details or []:
            click.echo(f"  - {detail}")

    def progress(self, result: BuildResult, source: str):
        """Echo the read/inject steps from the result of a finished build."""
        _rich_echo(f"Reading source file: {source}...")
        _rich_echo("Injecting environment variables...")
        if result.substitution is not None:
            for token, count in result.substitution.replaced.items():
                _rich_echo(f"  ✓ Replaced {count} occurrence(s) of {token}")

    def warnings(self, warnings: List[BuildWarning], exclude=()):
        for warning in warnings:
            if warning.kind not in exclude:
                self.warning(warning)

    def single_file_summary(self, result: BuildResult):
        artifact = result.artifacts[0]
        _rich_blank_line()
        if result.dry_run:
            _rich_info(f"Dry run: {artifact.path} was not written", symbol="info")
            _rich_success("Production build checked (dry run)", symbol="success")
        else:
            _rich_echo(f"Writing production file: {artifact.path}...")
            _rich_success("Production build complete!", symbol="success")

        _rich_blank_line()
        _rich_info("Build Details:")
        _rich_echo(f"  Output file: {artifact.path}")
        _rich_echo(f"  File size: {artifact.size_kb} KB")
        _rich_echo(f"  Build time: {result.build_time}")

    def split_summary(self, result: BuildResult, output_dir: str):
        if result.created_dir is not None:
            _rich_echo(f"Created output directory: {result.created_dir}/")

        _rich_blank_line()
        _rich_echo("Generating split files...")
        if result.dry_run:
            _rich_info(f"Dry run: nothing was written to {output_dir}/", symbol="info")
        else:
            _rich_success(f"Webflow split files created in {output_dir}/", symbol="success")

        rows = [
            (artifact.path.name, f"{artifact.size_kb} KB", f"{artifact.size:,} chars")
            for artifact in result.artifacts
        ]
        total = result.total_size
        rows.append(("Total size", f"{total / 1024:.2f} KB", f"{total:,} chars"))
        _rich_blank_line()
        _print_table(_create_table("File Sizes", ["File", "Size", "Characters"], rows), rows)

    def limit_summary(self, result: BuildResult):
        report = result.limit_report
        _rich_blank_line()
        _rich_info(f"Webflow Limit Check ({report.limit:,} chars per embed):")
        for check in report.checks:
            if check.passed:
                _rich_echo(f"  ✓ {check.name}: {check.size:,} chars", color="green")
            else:
                _rich_echo(f"  ❌ {check.name}: {check.size:,} chars (EXCEEDS LIMIT!)", color="red")

        _rich_blank_line()
        if report.all_passed:
            _rich_success("All files are within Webflow limits!", symbol="success")
        else:
            for warning in result.warnings:
                if warning.kind == "SizeLimitExceeded":
                    _rich_warning(warning.message, symbol="warning")

    def single_file_instructions(self, output: str):
        self.header("Next Steps")
        steps = "\n".join(numbered([step.format(output=output) for step in SINGLE_FILE_STEPS]))
        _rich_panel(steps, title="Deploy to Webflow", style="green")
        _rich_blank_line()
        _rich_warning(f"SECURITY: Never commit {output} to Git!", symbol="warning")
        _rich_blank_line()

    def split_instructions(self, output_dir: str, build_time: str):
        self.header("Webflow Deployment Instructions")
        steps = "\n".join(numbered([step.format(output_dir=output_dir) for step in SPLIT_STEPS]))
        _rich_panel(f"In Webflow Designer:\n\n{steps}", title="Deploy to Webflow", style="green")
        _rich_blank_line()
        _rich_echo(f"Build completed: {build_time}")
        _rich_blank_line()
        _rich_warning(f"SECURITY: Never commit {output_dir}/ folder to Git!", symbol="warning")
        _rich_blank_line()
