from __future__ import annotations

import fnmatch
import os
from typing import Iterable, List, Tuple


IGNORED_DIRS = {".git", "node_modules", "dist", "build", "__pycache__", ".venv", ".tox"}

TEST_FILE_PATTERNS = ("test_*.py", "*_test.py", "conftest.py")


def is_python_source(filename: str) -> bool:
	return filename.endswith(".py")


def is_test_file(filename: str) -> bool:
	return any(fnmatch.fnmatch(filename, pattern) for pattern in TEST_FILE_PATTERNS)


def find_import_root(directory: str) -> str:
	"""Walk up past every directory that is a regular package."""
	root = os.path.abspath(directory)
	while os.path.isfile(os.path.join(root, "__init__.py")):
		parent = os.path.dirname(root)
		if parent == root:
			break
		root = parent
	return root


def to_module_name(root: str, file_path: str) -> str:
	rel_path = os.path.relpath(file_path, root)
	without_ext = os.path.splitext(rel_path)[0]
	parts = []
	for part in without_ext.split(os.sep):
		if part == "__init__":
			continue
		parts.append(part)
	return ".".join(parts)


def locate_module(file_path: str) -> Tuple[str, str]:
	"""Return (import root, dotted module name) for a source file."""
	path = os.path.abspath(file_path)
	root = find_import_root(os.path.dirname(path))
	return root, to_module_name(root, path)


def _python_files(dirpath: str, filenames: Iterable[str], include_tests: bool) -> List[str]:
	files: List[str] = []
	for filename in sorted(filenames):
		if not is_python_source(filename):
			continue
		if not include_tests and is_test_file(filename):
			continue
		files.append(os.path.join(dirpath, filename))
	return files


def scan_directory(directory: str, recursive: bool = False, include_tests: bool = False) -> List[str]:
	"""List Python sources in a directory, ordered by directory then file name."""
	root = os.path.abspath(directory)
	if not recursive:
		entries = [e for e in os.listdir(root) if os.path.isfile(os.path.join(root, e))]
		return _python_files(root, entries, include_tests)

	files: List[str] = []
	for dirpath, dirnames, filenames in os.walk(root):
		dirnames[:] = sorted(d for d in dirnames if d not in IGNORED_DIRS)
		files.extend(_python_files(dirpath, filenames, include_tests))
	return files
