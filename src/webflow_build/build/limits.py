"""Per-embed size checks against the Webflow character ceiling."""

from dataclasses import dataclass, field
from typing import List, Sequence

from ..constants import WEBFLOW_CHAR_LIMIT
from .models import Artifact


@dataclass
class LimitCheck:
    name: str
    size: int
    limit: int

    @property
    def passed(self) -> bool:
        return self.size <= self.limit


@dataclass
class LimitReport:
    limit: int
    checks: List[LimitCheck] = field(default_factory=list)

    @property
    def all_passed(self) -> bool:
        return all(check.passed for check in self.checks)

    @property
    def failures(self) -> List[LimitCheck]:
        return [check for check in self.checks if not check.passed]


def check_sizes(sizes: Sequence[tuple], limit: int = WEBFLOW_CHAR_LIMIT) -> LimitReport:
    """Classify ``(name, byte_size)`` pairs against ``limit``."""
    return LimitReport(limit=limit, checks=[LimitCheck(name, size, limit) for name, size in sizes])


def check_limits(artifacts: Sequence[Artifact], limit: int = WEBFLOW_CHAR_LIMIT) -> LimitReport:
    """Classify each artifact's UTF-8 size against ``limit``."""
    return check_sizes([(artifact.name, artifact.size) for artifact in artifacts], limit)
