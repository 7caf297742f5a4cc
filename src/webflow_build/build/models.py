"""Data models for build artifacts and results."""

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import List, Optional, TYPE_CHECKING

from ..errors import BuildError, BuildWarning

if TYPE_CHECKING:
    from .limits import LimitReport
    from .substitutor import SubstitutionResult


@dataclass
class Artifact:
    """One output file: a label, where it goes, and its full content."""
    name: str
    path: Path
    content: str
    part: Optional[int] = None

    @property
    def size(self) -> int:
        """UTF-8 encoded size in bytes."""
        return len(self.content.encode("utf-8"))

    @property
    def size_kb(self) -> str:
        return f"{self.size / 1024:.2f}"


@dataclass
class BuildResult:
    """Outcome of a build.

    ``success`` is False exactly when ``error`` is set; the pipeline stops at
    the first fatal error, so later fields may be empty in that case.
    """
    success: bool
    artifacts: List[Artifact] = field(default_factory=list)
    warnings: List[BuildWarning] = field(default_factory=list)
    error: Optional[BuildError] = None
    build_time: str = ""
    substitution: Optional['SubstitutionResult'] = None
    limit_report: Optional['LimitReport'] = None
    created_dir: Optional[Path] = None
    dry_run: bool = False

    @property
    def total_size(self) -> int:
        return sum(artifact.size for artifact in self.artifacts)

    @classmethod
    def failed(cls, error: BuildError, warnings: Optional[List[BuildWarning]] = None,
               dry_run: bool = False) -> 'BuildResult':
        return cls(success=False, error=error, warnings=list(warnings or []), dry_run=dry_run)
