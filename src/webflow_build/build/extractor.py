"""Region extraction for the split build.

The split build assumes the source document has exactly one inline
``<style>`` block, then ``</head><body>``, then exactly one inline
``<script>`` block. Only the first match of each pattern is used: extra
style or script blocks are silently ignored, and attributes on the tags
(``<script src=...>``) are not recognised. Each extractor
returns an ``ExtractionResult``; callers decide what a missing region means.
"""

import re
from dataclasses import dataclass
from typing import Optional

STYLE_REGEX = re.compile(r"(<style>[\s\S]*?</style>)")
SCRIPT_REGEX = re.compile(r"(<script>[\s\S]*?</script>)")
BODY_REGEX = re.compile(r"</head>\s*<body>([\s\S]*?)<script>")


@dataclass(frozen=True)
class ExtractionResult:
    """Either a found region or nothing."""
    found: bool
    region: Optional[str] = None

    @classmethod
    def of(cls, region: str) -> 'ExtractionResult':
        return cls(found=True, region=region)

    @classmethod
    def not_found(cls) -> 'ExtractionResult':
        return cls(found=False)

    def or_empty(self) -> str:
        return self.region if self.found else ""


@dataclass(frozen=True)
class SplitRegions:
    stylesheet: ExtractionResult
    body: ExtractionResult
    script: ExtractionResult


def extract_stylesheet(content: str) -> ExtractionResult:
    """First ``<style>...</style>`` block, tags included."""
    match = STYLE_REGEX.search(content)
    return ExtractionResult.of(match.group(1)) if match else ExtractionResult.not_found()


def extract_script(content: str) -> ExtractionResult:
    """First ``<script>...</script>`` block, tags included."""
    match = SCRIPT_REGEX.search(content)
    return ExtractionResult.of(match.group(1)) if match else ExtractionResult.not_found()


def extract_body(content: str) -> ExtractionResult:
    """Markup between ``</head><body>`` and the next ``<script>``, stripped."""
    match = BODY_REGEX.search(content)
    return ExtractionResult.of(match.group(1).strip()) if match else ExtractionResult.not_found()


def extract_regions(content: str) -> SplitRegions:
    return SplitRegions(
        stylesheet=extract_stylesheet(content),
        body=extract_body(content),
        script=extract_script(content),
    )
