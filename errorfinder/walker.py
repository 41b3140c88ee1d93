from __future__ import annotations

from typing import Iterable, Iterator

from .model import DeclarationContext, LoadedModule


def top_level_declarations(modules: Iterable[LoadedModule]) -> Iterator[DeclarationContext]:
	"""Yield every top-level statement of every file of every module, lazily.

	Order is module order, then file order, then statement order. Traversal
	stops as soon as the consumer stops pulling.
	"""
	for module in modules:
		for source in module.files:
			for decl in source.tree.body:
				yield DeclarationContext(decl, module.info, module)
