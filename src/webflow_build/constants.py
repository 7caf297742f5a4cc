"""Fixed names, tokens and limits shared by both build commands."""

import re

# Required keys, in the order they are reported when missing
REQUIRED_KEYS = (
    "CLAUDE_API_KEY",
    "WEBFLOW_API_TOKEN",
    "WEBFLOW_SETTINGS_COLLECTION_ID",
    "WEBFLOW_CONTACTS_COLLECTION_ID",
)

# Substrings marking a value still copied from .env.example (matched lowercased)
PLACEHOLDER_VALUE_DENYLIST = (
    "your_key_here",
    "your_token_here",
    "your_collection_id",
    "placeholder",
)

# Token in index.html -> required key whose value replaces it
PLACEHOLDER_KEYS = {
    "CLAUDE_API_KEY_PLACEHOLDER": "CLAUDE_API_KEY",
    "WEBFLOW_TOKEN_PLACEHOLDER": "WEBFLOW_API_TOKEN",
    "SETTINGS_COLLECTION_ID_PLACEHOLDER": "WEBFLOW_SETTINGS_COLLECTION_ID",
    "CONTACTS_COLLECTION_ID_PLACEHOLDER": "WEBFLOW_CONTACTS_COLLECTION_ID",
}

RESIDUAL_PLACEHOLDER_PATTERN = re.compile(r"[A-Z_]+_PLACEHOLDER")

DEFAULT_ENV_FILE = ".env"
DEFAULT_SOURCE_FILE = "index.html"
DEFAULT_OUTPUT_FILE = "index-production.html"
DEFAULT_OUTPUT_DIR = "webflow-deploy"
PROJECT_CONFIG_FILE = "webflow-build.yml"

# Webflow rejects custom code embeds above this many characters
WEBFLOW_CHAR_LIMIT = 50000

SPLIT_PART_COUNT = 3
