"""Fatal build errors and advisory warnings.

Every fatal condition is a ``BuildError`` subclass carrying a ``kind`` tag,
optional detail lines (e.g. the missing keys) and remediation lines that the
CLI prints once before exiting with a non-zero status. Advisory conditions are
plain ``BuildWarning`` records and never change the exit status.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence


class BuildError(Exception):
    """Base class for fatal build failures."""

    kind = "BuildError"

    def __init__(self, message: str, details: Optional[Sequence[str]] = None,
                 remediation: Optional[Sequence[str]] = None):
        super().__init__(message)
        self.message = message
        self.details: List[str] = list(details or [])
        self.remediation: List[str] = list(remediation or [])


class ConfigMissingError(BuildError):
    kind = "ConfigMissing"

    def __init__(self, env_file: str, command: str = "webflow-build build"):
        super().__init__(
            f"{env_file} file not found!",
            remediation=[
                f"Please create a {env_file} file with your API keys:",
                "  1. Copy .env.example to .env",
                "  2. Add your actual API keys",
                f"  3. Run {command} again",
            ],
        )
        self.env_file = env_file


class RequiredKeyMissingError(BuildError):
    kind = "RequiredKeyMissing"

    def __init__(self, missing_keys: Sequence[str]):
        super().__init__(
            "Missing required environment variables:",
            details=[f"  - {key}" for key in missing_keys],
            remediation=["Please add these to your .env file and try again."],
        )
        self.missing_keys = list(missing_keys)


class PlaceholderValueError(BuildError):
    kind = "PlaceholderValueInvalid"

    def __init__(self, keys: Sequence[str]):
        super().__init__(
            "Found placeholder values in .env file!",
            details=[f"  - {key}" for key in keys],
            remediation=["Please replace all placeholder values with your actual API keys."],
        )
        self.keys = list(keys)


class SourceFileMissingError(BuildError):
    kind = "SourceFileMissing"

    def __init__(self, path: str):
        super().__init__(f"Source file {path} not found!")
        self.path = path


class FilesystemWriteError(BuildError):
    kind = "FilesystemWriteError"

    def __init__(self, path: str, error: OSError):
        # The OS error text is surfaced verbatim
        super().__init__(f"Failed to write {path}: {error}")
        self.path = path
        self.error = error


class ProjectConfigError(BuildError):
    kind = "ProjectConfigInvalid"

    def __init__(self, path: str, reason: str):
        super().__init__(
            f"Invalid project configuration in {path}: {reason}",
            remediation=[f"Fix or remove {path} and run the build again."],
        )
        self.path = path


@dataclass
class BuildWarning:
    """Advisory condition reported alongside a build result."""
    kind: str
    message: str
    details: Optional[List[str]] = None

    def __str__(self) -> str:
        return self.message
