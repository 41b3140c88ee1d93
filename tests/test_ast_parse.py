import ast
from textwrap import dedent

from errorfinder.ast_parse import (
	declared_names,
	is_type_declaration,
	is_value_declaration,
	parse_python_file,
)


def _stmt(code):
	return ast.parse(dedent(code)).body[0]


def test_parse_python_file(tmp_path):
	p = tmp_path / "m.py"
	p.write_text("ErrA = ValueError('a')\n\nclass B(Exception):\n\tpass\n")
	tree = parse_python_file(str(p))
	assert [type(n) for n in tree.body] == [ast.Assign, ast.ClassDef]


def test_declared_names_simple_and_chained():
	assert declared_names(_stmt("a = 1")) == ["a"]
	assert declared_names(_stmt("a = b = 1")) == ["a", "b"]


def test_declared_names_unpacking():
	assert declared_names(_stmt("a, (b, c), *rest = x")) == ["a", "b", "c", "rest"]
	assert declared_names(_stmt("[a, b] = x")) == ["a", "b"]


def test_declared_names_skips_attribute_and_subscript_targets():
	assert declared_names(_stmt("obj.attr, d['k'], name = x")) == ["name"]


def test_declared_names_annotated():
	assert declared_names(_stmt("err: Exception = ValueError()")) == ["err"]
	assert declared_names(_stmt("err: Exception")) == ["err"]


def test_declaration_shapes():
	assert is_value_declaration(_stmt("a = 1"))
	assert is_value_declaration(_stmt("a: int"))
	assert not is_value_declaration(_stmt("obj.a: int = 1"))
	assert not is_value_declaration(_stmt("a += 1"))
	assert not is_value_declaration(_stmt("class A: pass"))
	assert is_type_declaration(_stmt("class A: pass"))
	assert not is_type_declaration(_stmt("def f(): pass"))
	assert not is_type_declaration(_stmt("import os"))
