"""Configuration management for webflow-build.

Two kinds of configuration feed a build:

* secrets, read from the ``.env`` file and the process environment into an
  immutable ``Secrets`` object, and
* build settings (paths and limits), read from an optional
  ``webflow-build.yml`` with command-line overrides applied on top.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Mapping, Optional

import yaml
from dotenv import dotenv_values

from .constants import (
    DEFAULT_ENV_FILE,
    DEFAULT_OUTPUT_DIR,
    DEFAULT_OUTPUT_FILE,
    DEFAULT_SOURCE_FILE,
    PLACEHOLDER_KEYS,
    PLACEHOLDER_VALUE_DENYLIST,
    PROJECT_CONFIG_FILE,
    REQUIRED_KEYS,
    WEBFLOW_CHAR_LIMIT,
)
from .errors import (
    ConfigMissingError,
    PlaceholderValueError,
    ProjectConfigError,
    RequiredKeyMissingError,
)


@dataclass(frozen=True)
class Secrets:
    """The four values injected into the page."""
    claude_api_key: str
    webflow_api_token: str
    settings_collection_id: str
    contacts_collection_id: str

    @classmethod
    def from_mapping(cls, values: Mapping[str, str]) -> 'Secrets':
        return cls(
            claude_api_key=values["CLAUDE_API_KEY"],
            webflow_api_token=values["WEBFLOW_API_TOKEN"],
            settings_collection_id=values["WEBFLOW_SETTINGS_COLLECTION_ID"],
            contacts_collection_id=values["WEBFLOW_CONTACTS_COLLECTION_ID"],
        )

    def as_env(self) -> Dict[str, str]:
        """Return the secrets keyed by their environment variable names."""
        return {
            "CLAUDE_API_KEY": self.claude_api_key,
            "WEBFLOW_API_TOKEN": self.webflow_api_token,
            "WEBFLOW_SETTINGS_COLLECTION_ID": self.settings_collection_id,
            "WEBFLOW_CONTACTS_COLLECTION_ID": self.contacts_collection_id,
        }

    def replacements(self) -> Dict[str, str]:
        """Return the placeholder token -> value map, in fixed token order."""
        env = self.as_env()
        return {token: env[key] for token, key in PLACEHOLDER_KEYS.items()}


def find_placeholder_values(values: Mapping[str, str]) -> list:
    """Return required keys whose value still looks like a template default."""
    flagged = []
    for key in REQUIRED_KEYS:
        value = values.get(key, "").lower()
        if any(pattern in value for pattern in PLACEHOLDER_VALUE_DENYLIST):
            flagged.append(key)
    return flagged


def load_secrets(env_file: str = DEFAULT_ENV_FILE, check_placeholders: bool = False,
                 environ: Optional[Mapping[str, str]] = None,
                 command: str = "webflow-build build") -> Secrets:
    """Load and validate the required secrets.

    Variables already present in the process environment win over the file,
    even when set to an empty string, matching ``load_dotenv`` without
    ``override``. The environment itself is
    left untouched.

    Args:
        env_file: Path of the ``.env`` file. It must exist.
        check_placeholders: Reject values containing a denylisted default.
        environ: Environment to merge over the file (defaults to os.environ).
        command: Command name used in the remediation hint.

    Returns:
        Secrets: Validated secrets.

    Raises:
        ConfigMissingError: If ``env_file`` does not exist.
        RequiredKeyMissingError: If any required key is absent or empty.
        PlaceholderValueError: If ``check_placeholders`` and a value is a default.
    """
    if not Path(env_file).is_file():
        raise ConfigMissingError(env_file, command=command)

    if environ is None:
        environ = os.environ

    values = {k: v for k, v in dotenv_values(env_file).items() if v is not None}
    for key in REQUIRED_KEYS:
        if key in environ:
            values[key] = environ[key]

    missing = [key for key in REQUIRED_KEYS if not values.get(key)]
    if missing:
        raise RequiredKeyMissingError(missing)

    if check_placeholders:
        flagged = find_placeholder_values(values)
        if flagged:
            raise PlaceholderValueError(flagged)

    return Secrets.from_mapping(values)


@dataclass
class BuildSettings:
    """Paths and limits for a build run."""
    env_file: str = DEFAULT_ENV_FILE
    source: str = DEFAULT_SOURCE_FILE
    output: str = DEFAULT_OUTPUT_FILE
    output_dir: str = DEFAULT_OUTPUT_DIR
    char_limit: int = WEBFLOW_CHAR_LIMIT
    dry_run: bool = False

    @classmethod
    def from_project_file(cls, config_path: str = PROJECT_CONFIG_FILE, **overrides) -> 'BuildSettings':
        """Create settings from webflow-build.yml with command-line overrides.

        Args:
            config_path: Project file to read; a missing file means defaults.
            **overrides: Command-line values; ``None`` means "not given".

        Returns:
            BuildSettings: Defaults, then file values, then overrides.

        Raises:
            ProjectConfigError: If the file cannot be read or parsed.
        """
        settings = cls()

        path = Path(config_path)
        if path.exists():
            try:
                with open(path, 'r', encoding='utf-8') as f:
                    project_config = yaml.safe_load(f) or {}
            except (OSError, yaml.YAMLError) as e:
                raise ProjectConfigError(config_path, str(e))

            if not isinstance(project_config, dict):
                raise ProjectConfigError(config_path, "top level must be a mapping")

            build_config = project_config.get('build', {}) or {}
            if not isinstance(build_config, dict):
                raise ProjectConfigError(config_path, "'build' must be a mapping")

            for key in ('env_file', 'source', 'output', 'output_dir'):
                if key in build_config:
                    value = build_config[key]
                    if not isinstance(value, str) or not value.strip():
                        raise ProjectConfigError(config_path, f"'{key}' must be a non-empty string")
                    setattr(settings, key, value)

            if 'char_limit' in build_config:
                limit = build_config['char_limit']
                if isinstance(limit, bool) or not isinstance(limit, int) or limit <= 0:
                    raise ProjectConfigError(config_path, "'char_limit' must be a positive integer")
                settings.char_limit = limit

        for key, value in overrides.items():
            if value is not None:
                setattr(settings, key, value)

        return settings
