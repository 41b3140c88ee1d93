import os
import sys
from pathlib import Path
from textwrap import dedent

import pytest

TESTDATA = Path(__file__).parent / "testdata"


@pytest.fixture
def make_package(tmp_path):
	"""Write a throwaway package under tmp_path; purge its imports afterwards."""

	def _make(name, files):
		pkg = tmp_path / name
		pkg.mkdir(parents=True, exist_ok=True)
		init = pkg / "__init__.py"
		if not init.exists():
			init.write_text("")
		for filename, source in files.items():
			target = pkg / filename
			target.parent.mkdir(parents=True, exist_ok=True)
			target.write_text(dedent(source))
		return pkg

	yield _make

	root = str(tmp_path)
	for mod_name, mod in list(sys.modules.items()):
		origin = getattr(mod, "__file__", None) or ""
		if origin.startswith(root + os.sep):
			del sys.modules[mod_name]


@pytest.fixture
def uboat_dir():
	yield TESTDATA / "uboat"
	for mod_name in [m for m in sys.modules if m == "uboat" or m.startswith("uboat.")]:
		del sys.modules[mod_name]
