"""Resolve scan patterns into parsed, imported modules.

A pattern names a directory, a single ``.py`` file, or a dotted import path.
A trailing ``...`` makes it recursive. Every file is parsed for its syntax
tree and then imported so that the names it binds can be resolved to their
runtime types.
"""

from __future__ import annotations

import importlib
import importlib.util
import inspect
import logging
import os
import pkgutil
import sys
from contextlib import contextmanager
from types import ModuleType
from typing import Any, Dict, Iterator, List, Optional, Tuple

from .ast_parse import parse_python_file
from .errors import LoadError
from .fs_scan import is_test_file, locate_module, scan_directory
from .model import LoadedModule, SourceFile, TypeInfo

logger = logging.getLogger(__name__)

RECURSIVE_SUFFIX = "..."

# (import root, module name, source path)
ModuleRef = Tuple[Optional[str], str, str]


def split_recursive(pattern: str) -> Tuple[str, bool]:
	if not pattern.endswith(RECURSIVE_SUFFIX):
		return pattern, False
	base = pattern[: -len(RECURSIVE_SUFFIX)]
	if base.endswith("/") and len(base) > 1:
		base = base[:-1]
	elif base.endswith(".") and base.strip(".") and not base.endswith("/."):
		base = base[:-1]
	return base or ".", True


def is_path_pattern(pattern: str) -> bool:
	if os.path.exists(pattern) or pattern.endswith(".py"):
		return True
	if pattern.startswith((".", "/", "~")):
		return True
	return os.sep in pattern or "/" in pattern


def _resolve_path(pattern: str, base: str, recursive: bool, include_tests: bool) -> List[ModuleRef]:
	path = os.path.abspath(os.path.expanduser(base))
	if os.path.isdir(path):
		files = scan_directory(path, recursive=recursive, include_tests=include_tests)
		if not files:
			raise LoadError(pattern, "no Python source files")
	elif os.path.isfile(path) and not recursive:
		files = [path]
	else:
		raise LoadError(pattern, "no such file or directory")
	refs: List[ModuleRef] = []
	for file_path in files:
		root, module_name = locate_module(file_path)
		refs.append((root, module_name, file_path))
	return refs


def _find_spec(pattern: str, name: str):
	try:
		spec = importlib.util.find_spec(name)
	except Exception as exc:
		raise LoadError(pattern, f"resolving {name}: {exc!r}") from exc
	if spec is None:
		raise LoadError(pattern, f"no module named {name!r}")
	return spec


def _source_of(pattern: str, name: str) -> str:
	spec = _find_spec(pattern, name)
	if not spec.has_location or not spec.origin or not spec.origin.endswith(".py"):
		raise LoadError(pattern, f"module {name!r} has no Python source")
	return spec.origin


def _resolve_import_path(pattern: str, base: str, recursive: bool, include_tests: bool) -> List[ModuleRef]:
	# Import paths resolve against the working directory first.
	root = os.getcwd()
	with _search_path(root):
		spec = _find_spec(pattern, base)
		refs: List[ModuleRef] = []
		if spec.origin and spec.origin.endswith(".py"):
			refs.append((root, base, spec.origin))
		elif not recursive:
			raise LoadError(pattern, f"module {base!r} has no Python source")
		if not recursive or spec.submodule_search_locations is None:
			return refs

		def onerror(name: str) -> None:
			raise LoadError(pattern, f"walking package {name!r} failed")

		try:
			names = sorted(
				info.name
				for info in pkgutil.walk_packages(spec.submodule_search_locations, prefix=base + ".", onerror=onerror)
			)
		except LoadError:
			raise
		except Exception as exc:
			raise LoadError(pattern, f"walking package {base}: {exc!r}") from exc
		for name in names:
			if not include_tests and is_test_file(name.rsplit(".", 1)[-1] + ".py"):
				continue
			refs.append((root, name, _source_of(pattern, name)))
	return refs


def resolve_pattern(pattern: str, include_tests: bool = False) -> List[ModuleRef]:
	base, recursive = split_recursive(pattern)
	if is_path_pattern(base):
		return _resolve_path(pattern, base, recursive, include_tests)
	return _resolve_import_path(pattern, base, recursive, include_tests)


@contextmanager
def _search_path(root: Optional[str]) -> Iterator[None]:
	if root is None or root in sys.path:
		yield
		return
	sys.path.insert(0, root)
	try:
		yield
	finally:
		try:
			sys.path.remove(root)
		except ValueError:
			pass


def _resolved_annotations(module: Any) -> Dict[str, Any]:
	try:
		return inspect.get_annotations(module, eval_str=True)
	except Exception as exc:
		logger.debug("Annotations of %s left unevaluated: %s", module.__name__, exc)
	try:
		raw = inspect.get_annotations(module)
	except Exception as exc:
		logger.debug("Annotations of %s unavailable: %s", module.__name__, exc)
		return {}
	return {k: v for k, v in raw.items() if not isinstance(v, str)}


def _execute(root: Optional[str], module_name: str, path: str, pattern: str) -> ModuleType:
	"""Run the file as a fresh module object, never reusing a cached one.

	The module occupies its ``sys.modules`` slot only while it executes, so
	relative imports work and the previous entry comes back afterwards.
	"""
	search_locations = None
	if os.path.basename(path) == "__init__.py":
		search_locations = [os.path.dirname(path)]
	spec = importlib.util.spec_from_file_location(
		module_name, path, submodule_search_locations=search_locations
	)
	if spec is None or spec.loader is None:
		raise LoadError(pattern, f"no loader for {path}")
	module = importlib.util.module_from_spec(spec)

	previous = sys.modules.get(module_name)
	sys.modules[module_name] = module
	try:
		with _search_path(root):
			spec.loader.exec_module(module)
	except Exception as exc:
		raise LoadError(pattern, f"importing {module_name}: {exc!r}") from exc
	finally:
		if previous is None:
			sys.modules.pop(module_name, None)
		else:
			sys.modules[module_name] = previous
	return module


def load_module(root: Optional[str], module_name: str, path: str, pattern: str) -> LoadedModule:
	try:
		tree = parse_python_file(path)
	except SyntaxError as exc:
		raise LoadError(pattern, f"syntax error in {path}: {exc.msg} (line {exc.lineno})") from exc
	except (OSError, UnicodeDecodeError) as exc:
		raise LoadError(pattern, f"reading {path}: {exc}") from exc

	module = _execute(root, module_name, path, pattern)
	info = TypeInfo(namespace=dict(vars(module)), annotations=_resolved_annotations(module))
	logger.debug("Loaded %s from %s", module_name, path)
	return LoadedModule(
		import_path=module_name,
		name=module_name.rsplit(".", 1)[-1],
		files=[SourceFile(path=path, tree=tree)],
		info=info,
	)


def load_modules(patterns: List[str], include_tests: bool = False) -> List[LoadedModule]:
	"""Load every module named by the patterns, failing on the first problem."""
	importlib.invalidate_caches()
	refs: List[Tuple[str, ModuleRef]] = []
	for pattern in patterns or ["."]:
		for ref in resolve_pattern(pattern, include_tests=include_tests):
			refs.append((pattern, ref))
	modules: List[LoadedModule] = []
	for pattern, (root, module_name, path) in refs:
		modules.append(load_module(root, module_name, path, pattern))
	logger.info("Loaded %d modules from %d patterns", len(modules), len(patterns or ["."]))
	return modules
