"""Shared fixtures: a throwaway project directory with .env and index.html."""

from datetime import datetime, timezone

import pytest

from webflow_build.constants import REQUIRED_KEYS

SECRETS = {
    "CLAUDE_API_KEY": "sk-ant-test-123",
    "WEBFLOW_API_TOKEN": "wf-token-456",
    "WEBFLOW_SETTINGS_COLLECTION_ID": "settings789",
    "WEBFLOW_CONTACTS_COLLECTION_ID": "contacts012",
}

SAMPLE_HTML = """<!DOCTYPE html>
<html>
<head>
<title>Networking Follow-Up</title>
<style>
body { color: #333; }
</style>
</head>
<body>
<div id="app">Hello</div>
<script>
const CLAUDE_KEY = "CLAUDE_API_KEY_PLACEHOLDER";
const WEBFLOW_TOKEN = "WEBFLOW_TOKEN_PLACEHOLDER";
const SETTINGS_ID = "SETTINGS_COLLECTION_ID_PLACEHOLDER";
const CONTACTS_ID = "CONTACTS_COLLECTION_ID_PLACEHOLDER";
const HEADERS = { "x-api-key": "CLAUDE_API_KEY_PLACEHOLDER" };
</script>
</body>
</html>
"""

BUILD_TIME = datetime(2025, 3, 4, 5, 6, 7, 890000, tzinfo=timezone.utc)


def write_env(path, values):
    path.write_text("".join(f"{key}={value}\n" for key, value in values.items()), encoding="utf-8")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep real process variables from leaking into the loader."""
    for key in REQUIRED_KEYS:
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def project(tmp_path, monkeypatch):
    """A working directory with a valid .env and index.html."""
    write_env(tmp_path / ".env", SECRETS)
    (tmp_path / "index.html").write_text(SAMPLE_HTML, encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    return tmp_path
