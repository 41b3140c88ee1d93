from __future__ import annotations


class ErrorFinderError(Exception):
	"""Base class for failures that abort a scan."""


class LoadError(ErrorFinderError):
	"""A requested pattern could not be resolved, parsed or imported."""

	def __init__(self, pattern: str, reason: str):
		super().__init__(f"loading {pattern}: {reason}")
		self.pattern = pattern
		self.reason = reason


class ReportWriteError(ErrorFinderError):
	"""The report stream rejected a write."""
