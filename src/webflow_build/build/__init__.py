"""Build pipeline for the Webflow deployment files."""

from .single_file import SingleFileBuilder
from .split import SplitBuilder
from .models import Artifact, BuildResult
from .substitutor import (
    SubstitutionResult,
    substitute_placeholders,
    find_residual_placeholders,
    check_tokens_disjoint
)
from .extractor import (
    ExtractionResult,
    extract_regions,
    extract_stylesheet,
    extract_body,
    extract_script
)
from .limits import LimitReport, check_limits, check_sizes

__all__ = [
    # Builders
    'SingleFileBuilder',
    'SplitBuilder',
    'Artifact',
    'BuildResult',

    # Substitution
    'SubstitutionResult',
    'substitute_placeholders',
    'find_residual_placeholders',
    'check_tokens_disjoint',

    # Extraction
    'ExtractionResult',
    'extract_regions',
    'extract_stylesheet',
    'extract_body',
    'extract_script',

    # Limits
    'LimitReport',
    'check_limits',
    'check_sizes'
]
