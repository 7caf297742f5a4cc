"""Split build: three embeds that each fit a Webflow custom code field.

1. webflow-head.html - CSS, for Page Settings "Inside <head> tag"
2. webflow-html.html - markup, for a Custom Code element on the canvas
3. webflow-body.html - JavaScript, for Page Settings "Before </body> tag"
"""

from pathlib import Path

from ..errors import BuildWarning
from .banner import render_part_banner
from .base import BaseBuilder
from .extractor import extract_regions
from .limits import check_limits
from .models import Artifact, BuildResult
from .substitutor import SubstitutionResult
from .writer import atomic_write, ensure_output_dir

HEAD_FILE = "webflow-head.html"
HTML_FILE = "webflow-html.html"
BODY_FILE = "webflow-body.html"


class SplitBuilder(BaseBuilder):
    """Injects the secrets and splits the page into three embeds.

    Tokens missing from the source are not reported here, unlike the
    single-file build.
    """

    command = "webflow-build split"

    def assemble(self, substitution: SubstitutionResult, timestamp: str) -> BuildResult:
        regions = extract_regions(substitution.content)
        output_dir = Path(self.settings.output_dir)

        parts = [
            (1, "HEAD", HEAD_FILE, "<style> block", regions.stylesheet),
            (2, "HTML", HTML_FILE, "</head><body> ... <script> markup", regions.body),
            (3, "BODY", BODY_FILE, "<script> block", regions.script),
        ]

        artifacts = []
        for part, label, filename, description, extraction in parts:
            if not extraction.found:
                self.warnings.append(BuildWarning(
                    kind="RegionNotFound",
                    message=f"No {description} found in source; {filename} will only contain the banner",
                ))
            artifacts.append(Artifact(
                name=label,
                path=output_dir / filename,
                content=render_part_banner(part, timestamp) + extraction.or_empty(),
                part=part,
            ))

        created_dir = None
        if not self.settings.dry_run:
            if ensure_output_dir(output_dir):
                created_dir = output_dir
            for artifact in artifacts:
                atomic_write(artifact.path, artifact.content)

        limit_report = check_limits(artifacts, self.settings.char_limit)
        if not limit_report.all_passed:
            self.warnings.append(BuildWarning(
                kind="SizeLimitExceeded",
                message="Some files exceed Webflow limits! Further optimization needed.",
                details=[check.name for check in limit_report.failures],
            ))

        return BuildResult(
            success=True,
            artifacts=artifacts,
            build_time=timestamp,
            limit_report=limit_report,
            created_dir=created_dir,
        )
