from __future__ import annotations

from typing import Iterable, List, Tuple

from .capability import ErrorCapability
from .extract import extract_sentinels, extract_structured
from .model import DeclarationContext, Definition

SortKey = Tuple[int, int, str, str, str, str]


def collect_definitions(contexts: Iterable[DeclarationContext], capability: ErrorCapability) -> List[Definition]:
	defs: List[Definition] = []
	for ctx in contexts:
		defs.extend(extract_sentinels(ctx, capability))
		defs.extend(extract_structured(ctx, capability))
	return defs


def definition_sort_key(d: Definition) -> SortKey:
	return (
		int(d.error_kind),
		int(d.export_kind),
		d.import_path,
		d.package_name,
		d.name,
		d.backing_type_name,
	)


def compare_definitions(a: Definition, b: Definition) -> int:
	ka, kb = definition_sort_key(a), definition_sort_key(b)
	if ka < kb:
		return -1
	if ka > kb:
		return 1
	return 0


def sort_definitions(defs: Iterable[Definition]) -> List[Definition]:
	return sorted(defs, key=definition_sort_key)
