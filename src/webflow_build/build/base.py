"""Shared pipeline for the single-file and split builders."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Mapping, Optional

from ..config import BuildSettings, load_secrets
from ..errors import BuildError, BuildWarning
from .banner import format_build_time
from .models import BuildResult
from .substitutor import SubstitutionResult, substitute_placeholders
from .template import read_source


class BaseBuilder(ABC):
    """Runs load -> read -> substitute, then hands off to ``assemble``.

    Fatal ``BuildError``s from any stage end the run and come back as a failed
    ``BuildResult``; nothing is written once a stage has failed.
    """

    command = "webflow-build"
    check_placeholder_values = False

    def __init__(self, settings: BuildSettings, environ: Optional[Mapping[str, str]] = None):
        self.settings = settings
        self.environ = environ
        self.warnings: List[BuildWarning] = []

    def build(self, build_time: Optional[datetime] = None) -> BuildResult:
        """Run the build.

        Args:
            build_time: Time recorded in the banners (defaults to now, UTC).

        Returns:
            BuildResult: Artifacts and warnings, or the first fatal error.
        """
        self.warnings.clear()
        try:
            secrets = load_secrets(
                self.settings.env_file,
                check_placeholders=self.check_placeholder_values,
                environ=self.environ,
                command=self.command,
            )
            source = read_source(self.settings.source)
            substitution = substitute_placeholders(source, secrets.replacements())
            self.check_substitution(substitution)
            result = self.assemble(substitution, format_build_time(build_time))
        except BuildError as e:
            return BuildResult.failed(e, self.warnings, dry_run=self.settings.dry_run)

        result.substitution = substitution
        result.dry_run = self.settings.dry_run
        result.warnings = self.warnings.copy()
        return result

    def check_substitution(self, substitution: SubstitutionResult) -> None:
        """Hook for advisory checks on the substituted document."""

    @abstractmethod
    def assemble(self, substitution: SubstitutionResult, timestamp: str) -> BuildResult:
        """Build the artifacts from the substituted document and write them."""
