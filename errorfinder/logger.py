"""Logging setup. Diagnostics go to stderr so the report can own stdout."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(
	level: str = "WARNING",
	log_file: Optional[str] = None,
	format_string: Optional[str] = None,
) -> logging.Logger:
	log_level = getattr(logging, level.upper(), logging.WARNING)
	formatter = logging.Formatter(format_string or DEFAULT_FORMAT)

	root_logger = logging.getLogger()
	root_logger.setLevel(log_level)
	root_logger.handlers.clear()

	console_handler = logging.StreamHandler(sys.stderr)
	console_handler.setLevel(log_level)
	console_handler.setFormatter(formatter)
	root_logger.addHandler(console_handler)

	if log_file:
		log_path = Path(log_file)
		log_path.parent.mkdir(parents=True, exist_ok=True)
		file_handler = logging.FileHandler(log_path, encoding="utf-8")
		file_handler.setLevel(log_level)
		file_handler.setFormatter(formatter)
		root_logger.addHandler(file_handler)

	return root_logger
