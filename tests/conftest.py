"""Shared test fixtures for doccheck tests."""

from __future__ import annotations

from textwrap import dedent
from typing import Callable, List

import pytest

from doccheck.config import CheckConfig
from doccheck.java_parse import CompilationUnit, node_text, parse_java_source
from doccheck.model import Finding
from doccheck.traverse import traverse


@pytest.fixture
def parse_java() -> Callable[..., CompilationUnit]:
	"""Parse a (dedented) Java snippet without touching the filesystem."""

	def _parse(code: str, path: str = "Test.java") -> CompilationUnit:
		return parse_java_source(path, dedent(code).encode("utf-8"))

	return _parse


@pytest.fixture
def find_method(parse_java):
	"""Return the first method or constructor node with the given name."""

	def _find(code: str, name: str):
		unit = parse_java(code)
		stack = [unit.root]
		while stack:
			node = stack.pop(0)
			if node.type in ("method_declaration", "constructor_declaration"):
				if node_text(node.child_by_field_name("name")) == name:
					return node
			stack.extend(node.children)
		raise AssertionError(f"no method {name} in snippet")

	return _find


@pytest.fixture
def check_java(parse_java) -> Callable[..., List[Finding]]:
	"""Traverse a snippet and return its findings."""

	def _check(code: str, path: str = "Test.java", **options) -> List[Finding]:
		return traverse(parse_java(code, path), CheckConfig(**options))

	return _check


@pytest.fixture
def write_java(tmp_path):
	"""Write a Java file under tmp_path and return its path as a string."""

	def _write(rel_path: str, code: str) -> str:
		p = tmp_path / rel_path
		p.parent.mkdir(parents=True, exist_ok=True)
		p.write_text(dedent(code))
		return str(p)

	return _write
