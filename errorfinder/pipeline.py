from __future__ import annotations

import logging
from typing import BinaryIO, List, Optional

from .capability import ErrorCapability
from .collect import collect_definitions, sort_definitions
from .config import Config
from .loader import load_modules
from .model import Definition, ScanResult
from .report import write_report
from .summarize import describe_summary, summarize_definitions
from .walker import top_level_declarations

logger = logging.getLogger(__name__)


def find_errors(
	patterns: List[str],
	capability: ErrorCapability,
	include_tests: bool = False,
) -> List[Definition]:
	"""Load, classify and sort. Raises LoadError before any extraction."""
	modules = load_modules(patterns, include_tests=include_tests)
	defs = collect_definitions(top_level_declarations(modules), capability)
	return sort_definitions(defs)


def scan(patterns: List[str], capability: ErrorCapability, config: Optional[Config] = None) -> ScanResult:
	config = config or Config()
	defs = find_errors(patterns, capability, include_tests=config.include_tests)
	summary = summarize_definitions(defs)
	logger.info(describe_summary(summary))
	return ScanResult(definitions=defs, summary=summary)


def run(
	patterns: List[str],
	out: BinaryIO,
	capability: ErrorCapability,
	config: Optional[Config] = None,
) -> None:
	result = scan(patterns, capability, config)
	write_report(result.definitions, out)
