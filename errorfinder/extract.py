from __future__ import annotations

from typing import Iterator

from .ast_parse import declared_names, is_type_declaration, is_value_declaration
from .capability import ErrorCapability
from .model import DeclarationContext, Definition, ErrorKind, export_kind, type_name


def extract_sentinels(ctx: DeclarationContext, capability: ErrorCapability) -> Iterator[Definition]:
	"""Names bound by a value declaration to something raisable."""
	if not is_value_declaration(ctx.decl):
		return
	for name in declared_names(ctx.decl):
		tp = ctx.info.type_of(name)
		if tp is None or not capability.implements(tp):
			continue
		yield Definition(
			error_kind=ErrorKind.SENTINEL,
			export_kind=export_kind(name),
			import_path=ctx.module.import_path,
			package_name=ctx.module.name,
			name=name,
			backing_type_name=type_name(tp),
		)


def extract_structured(ctx: DeclarationContext, capability: ErrorCapability) -> Iterator[Definition]:
	"""Classes declared in the module that are themselves error types."""
	if not is_type_declaration(ctx.decl):
		return
	name = ctx.decl.name  # type: ignore[attr-defined]
	cls = ctx.info.lookup(name)
	if not capability.implements(cls):
		return
	yield Definition(
		error_kind=ErrorKind.STRUCTURED,
		export_kind=export_kind(name),
		import_path=ctx.module.import_path,
		package_name=ctx.module.name,
		name=name,
		backing_type_name=type_name(cls),
	)
