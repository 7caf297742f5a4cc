"""Version management for webflow-build."""

import re
from importlib.metadata import PackageNotFoundError, version as _dist_version
from pathlib import Path

# Build-time version constant (injected during release builds)
__BUILD_VERSION__ = None


def get_version() -> str:
    """
    Get the current version.

    Tries the build-time constant, then installed package metadata, then the
    version line of pyproject.toml for source checkouts.

    Returns:
        str: Version string, or "unknown"
    """
    if __BUILD_VERSION__:
        return __BUILD_VERSION__

    try:
        return _dist_version("webflow-build")
    except PackageNotFoundError:
        pass

    pyproject_path = Path(__file__).parent.parent.parent / "pyproject.toml"
    if pyproject_path.exists():
        content = pyproject_path.read_text(encoding="utf-8")
        match = re.search(r'^version\s*=\s*["\']([^"\']+)["\']', content, re.MULTILINE)
        if match:
            return match.group(1)

    return "unknown"


__version__ = get_version()
