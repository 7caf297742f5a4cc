"""Output formatting and presentation layer for webflow-build."""

from .formatters import BuildFormatter, SINGLE_FILE_STEPS, SPLIT_STEPS

__all__ = [
    'BuildFormatter',
    'SINGLE_FILE_STEPS',
    'SPLIT_STEPS'
]
