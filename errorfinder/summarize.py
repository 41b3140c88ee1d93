from __future__ import annotations

from typing import Dict, Iterable, List

from .model import Definition, ErrorKind, Summary


def summarize_definitions(defs: Iterable[Definition]) -> Summary:
	items: List[Definition] = list(defs)
	per_kind: Dict[str, int] = {
		ErrorKind.SENTINEL.display: 0,
		ErrorKind.STRUCTURED.display: 0,
	}
	per_module: Dict[str, int] = {}
	for d in items:
		per_kind[d.error_kind.display] = per_kind.get(d.error_kind.display, 0) + 1
		per_module[d.import_path] = per_module.get(d.import_path, 0) + 1
	return Summary(total=len(items), per_kind=per_kind, per_module=dict(sorted(per_module.items())))


def describe_summary(summary: Summary) -> str:
	parts: List[str] = []
	parts.append(f"{summary.total} error declarations in {len(summary.per_module)} modules")
	kinds = ", ".join(f"{name}: {count}" for name, count in summary.per_kind.items())
	parts.append(f"  {kinds}")
	return "\n".join(parts)
