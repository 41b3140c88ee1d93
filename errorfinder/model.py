from __future__ import annotations

import ast
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Dict, List, NamedTuple, Optional

from pydantic import BaseModel, ConfigDict, field_serializer


class ErrorKind(IntEnum):
	UNKNOWN = 0
	SENTINEL = 1
	STRUCTURED = 2

	@property
	def display(self) -> str:
		return _ERROR_KIND_NAMES[self]


class ExportKind(IntEnum):
	UNKNOWN = 0
	EXPORTED = 1
	UNEXPORTED = 2

	@property
	def display(self) -> str:
		return _EXPORT_KIND_NAMES[self]


# Display names are part of the report format.
_ERROR_KIND_NAMES: Dict[ErrorKind, str] = {
	ErrorKind.UNKNOWN: "Unknown",
	ErrorKind.SENTINEL: "Sentinel",
	ErrorKind.STRUCTURED: "Structured",
}

_EXPORT_KIND_NAMES: Dict[ExportKind, str] = {
	ExportKind.UNKNOWN: "Unknown",
	ExportKind.EXPORTED: "Exported",
	ExportKind.UNEXPORTED: "Unexported",
}


def error_kind_from_display(text: str) -> ErrorKind:
	for kind, name in _ERROR_KIND_NAMES.items():
		if name == text:
			return kind
	raise ValueError(f"unknown error kind: {text!r}")


def export_kind_from_display(text: str) -> ExportKind:
	for kind, name in _EXPORT_KIND_NAMES.items():
		if name == text:
			return kind
	raise ValueError(f"unknown export kind: {text!r}")


def export_kind(name: str) -> ExportKind:
	"""Visibility follows the leading-underscore naming convention."""
	if name.startswith("_"):
		return ExportKind.UNEXPORTED
	return ExportKind.EXPORTED


class Definition(BaseModel):
	model_config = ConfigDict(frozen=True)

	error_kind: ErrorKind = ErrorKind.UNKNOWN
	export_kind: ExportKind = ExportKind.UNKNOWN
	import_path: str
	package_name: str
	name: str
	backing_type_name: str

	@field_serializer("error_kind", "export_kind", when_used="json")
	def _kind_display(self, kind: IntEnum) -> str:
		return kind.display  # type: ignore[attr-defined]

	def row(self) -> List[str]:
		return [
			self.error_kind.display,
			self.export_kind.display,
			self.import_path,
			self.package_name,
			self.name,
			self.backing_type_name,
		]


class Summary(BaseModel):
	total: int
	per_kind: Dict[str, int]
	per_module: Dict[str, int]


class ScanResult(BaseModel):
	definitions: List[Definition]
	summary: Summary


@dataclass
class SourceFile:
	path: str
	tree: ast.Module


@dataclass
class TypeInfo:
	"""Resolved types for the names bound in one imported module."""

	namespace: Dict[str, Any]
	annotations: Dict[str, Any] = field(default_factory=dict)

	def lookup(self, name: str) -> Optional[Any]:
		return self.namespace.get(name)

	def type_of(self, name: str) -> Optional[type]:
		declared = self.annotations.get(name)
		if isinstance(declared, type):
			return declared
		if name in self.namespace:
			return type(self.namespace[name])
		return None


@dataclass
class LoadedModule:
	import_path: str
	name: str
	files: List[SourceFile]
	info: TypeInfo


class DeclarationContext(NamedTuple):
	decl: ast.stmt
	info: TypeInfo
	module: LoadedModule


def type_name(tp: type) -> str:
	"""Canonical dotted form of a class, independent of how it was spelled."""
	return f"{tp.__module__}.{tp.__qualname__}"
