"""Inventory of error declarations in Python source modules.

Modules:
- loader.py: Resolve patterns into parsed and imported modules.
- walker.py: Lazy traversal of top-level declarations.
- extract.py: Sentinel and structured error classification.
- collect.py: Aggregation and deterministic ordering.
- report.py: CSV serialization.
- pipeline.py: The scan as a whole.
"""

from .errors import ErrorFinderError, LoadError, ReportWriteError
from .model import Definition, ErrorKind, ExportKind
from .pipeline import find_errors, run, scan

__all__ = [
	"Definition",
	"ErrorFinderError",
	"ErrorKind",
	"ExportKind",
	"LoadError",
	"ReportWriteError",
	"find_errors",
	"run",
	"scan",
]
