"""Single-file production build (index-production.html)."""

from pathlib import Path

from ..errors import BuildWarning
from .banner import render_production_banner
from .base import BaseBuilder
from .models import Artifact, BuildResult
from .substitutor import SubstitutionResult, find_residual_placeholders
from .writer import atomic_write


class SingleFileBuilder(BaseBuilder):
    """Injects the secrets and writes the whole page as one file."""

    command = "webflow-build build"
    check_placeholder_values = True

    def check_substitution(self, substitution: SubstitutionResult) -> None:
        for token in substitution.missing:
            self.warnings.append(BuildWarning(
                kind="PlaceholderNotFound",
                message=f'Placeholder "{token}" not found in source file',
            ))

        residual = find_residual_placeholders(substitution.content)
        if residual:
            self.warnings.append(BuildWarning(
                kind="ResidualPlaceholderDetected",
                message="Found unreplaced placeholders:",
                details=residual,
            ))

    def assemble(self, substitution: SubstitutionResult, timestamp: str) -> BuildResult:
        output_path = Path(self.settings.output)
        artifact = Artifact(
            name=output_path.name,
            path=output_path,
            content=render_production_banner(timestamp) + substitution.content,
        )

        if not self.settings.dry_run:
            atomic_write(artifact.path, artifact.content)

        return BuildResult(success=True, artifacts=[artifact], build_time=timestamp)
