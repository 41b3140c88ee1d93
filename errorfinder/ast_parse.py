from __future__ import annotations

import ast
from typing import Iterator, List


def parse_python_file(path: str) -> ast.Module:
	with open(path, "r", encoding="utf-8") as fh:
		text = fh.read()
	return ast.parse(text, filename=path)


def is_value_declaration(node: ast.AST) -> bool:
	if isinstance(node, ast.Assign):
		return True
	# A bare annotation still declares a name with a static type.
	return isinstance(node, ast.AnnAssign) and isinstance(node.target, ast.Name)


def is_type_declaration(node: ast.AST) -> bool:
	return isinstance(node, ast.ClassDef)


def _target_names(target: ast.expr) -> Iterator[ast.Name]:
	if isinstance(target, ast.Name):
		yield target
	elif isinstance(target, (ast.Tuple, ast.List)):
		for elt in target.elts:
			yield from _target_names(elt)
	elif isinstance(target, ast.Starred):
		yield from _target_names(target.value)
	# Attribute and subscript targets bind no new name.


def declared_names(node: ast.stmt) -> List[str]:
	"""Names bound by a value declaration, in source order."""
	targets: List[ast.expr] = []
	if isinstance(node, ast.Assign):
		targets = list(node.targets)
	elif isinstance(node, ast.AnnAssign):
		targets = [node.target]
	names: List[str] = []
	for target in targets:
		for name in _target_names(target):
			names.append(name.id)
	return names
