"""Placeholder token substitution."""

import re
from dataclasses import dataclass, field
from typing import Dict, List, Mapping

from ..constants import RESIDUAL_PLACEHOLDER_PATTERN


@dataclass
class SubstitutionResult:
    """Substituted text plus how often each token was replaced."""
    content: str
    counts: Dict[str, int] = field(default_factory=dict)

    @property
    def missing(self) -> List[str]:
        """Tokens that never occurred in the source, in map order."""
        return [token for token, count in self.counts.items() if count == 0]

    @property
    def replaced(self) -> Dict[str, int]:
        return {token: count for token, count in self.counts.items() if count > 0}


def check_tokens_disjoint(tokens) -> None:
    """Raise ValueError if any token is empty or contained in another."""
    tokens = list(tokens)
    for token in tokens:
        if not token:
            raise ValueError("Placeholder tokens must be non-empty")
    for i, token in enumerate(tokens):
        for j, other in enumerate(tokens):
            if i != j and token in other:
                raise ValueError(f"Placeholder token {token!r} overlaps {other!r}")


def substitute_placeholders(content: str, replacements: Mapping[str, str]) -> SubstitutionResult:
    """Replace every occurrence of each token with its value.

    All tokens are matched in one left-to-right pass over ``content``, so a
    value that happens to contain a token is never substituted again and the
    result does not depend on map order.

    Args:
        content: Source document text.
        replacements: Ordered mapping of literal token -> value.

    Returns:
        SubstitutionResult: Substituted text and per-token counts in map order.
    """
    check_tokens_disjoint(replacements.keys())
    counts = {token: 0 for token in replacements}
    if not replacements:
        return SubstitutionResult(content=content, counts=counts)

    # Longest first so alternation never stops at a shorter prefix
    ordered = sorted(replacements, key=len, reverse=True)
    pattern = re.compile("|".join(re.escape(token) for token in ordered))

    def _replace(match):
        token = match.group(0)
        counts[token] += 1
        return replacements[token]

    substituted = pattern.sub(_replace, content)
    return SubstitutionResult(content=substituted, counts=counts)


def find_residual_placeholders(content: str) -> List[str]:
    """Return distinct ``*_PLACEHOLDER`` tokens left in ``content``."""
    seen = []
    for match in RESIDUAL_PLACEHOLDER_PATTERN.finditer(content):
        token = match.group(0)
        if token not in seen:
            seen.append(token)
    return seen
