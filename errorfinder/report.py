"""CSV serialization of sorted definitions.

Columns, in order: error kind, export kind, import path, package name, name,
backing type name. Kinds are written by display name. The column order and
display names are a stable output contract.
"""

from __future__ import annotations

import csv
import io
import logging
from contextlib import contextmanager
from typing import Any, BinaryIO, Iterable, Iterator, List

from .errors import ReportWriteError
from .model import Definition, error_kind_from_display, export_kind_from_display

logger = logging.getLogger(__name__)

COLUMNS = ["ErrorKind", "ExportKind", "ImportPath", "PackageName", "Name", "BackingTypeName"]


@contextmanager
def open_report(stream: BinaryIO) -> Iterator[Any]:
	"""CSV writer whose pending rows reach the stream on every exit path."""
	pending = io.StringIO(newline="")
	failed = False
	try:
		yield csv.writer(pending, lineterminator="\n")
	except BaseException:
		failed = True
		raise
	finally:
		try:
			stream.write(pending.getvalue().encode("utf-8"))
			stream.flush()
		except (OSError, ValueError) as exc:
			if not failed:
				raise ReportWriteError(f"writing CSV: {exc}") from exc
			logger.warning("Flushing report after an earlier failure: %s", exc)


def write_report(defs: Iterable[Definition], stream: BinaryIO) -> None:
	with open_report(stream) as writer:
		for d in defs:
			writer.writerow(d.row())


def render_report(defs: Iterable[Definition]) -> str:
	buf = io.BytesIO()
	write_report(defs, buf)
	return buf.getvalue().decode("utf-8")


def read_report(text: str) -> List[Definition]:
	defs: List[Definition] = []
	for row in csv.reader(io.StringIO(text, newline="")):
		if len(row) != len(COLUMNS):
			raise ValueError(f"expected {len(COLUMNS)} fields, got {len(row)}: {row!r}")
		defs.append(
			Definition(
				error_kind=error_kind_from_display(row[0]),
				export_kind=export_kind_from_display(row[1]),
				import_path=row[2],
				package_name=row[3],
				name=row[4],
				backing_type_name=row[5],
			)
		)
	return defs
