"""js-dependency-extractor: list the dependencies required or imported by JS/TS sources."""

__version__ = "1.0.0"

from js_dependency_extractor.exceptions import ExtractionError
from js_dependency_extractor.models import ExtractionResult, ScanConfig
from js_dependency_extractor.orchestrator import extract, extract_dependencies
from js_dependency_extractor.patterns import PatternKind

__all__ = [
    "ExtractionError",
    "ExtractionResult",
    "PatternKind",
    "ScanConfig",
    "extract",
    "extract_dependencies",
]
