from __future__ import annotations

import os
from dataclasses import dataclass
from typing import List, Optional

import tree_sitter_java
from tree_sitter import Language, Node, Parser, Tree

from .errors import ParseError
from .model import Position, Visibility


JAVA_LANGUAGE = Language(tree_sitter_java.language())

COMMENT_TYPES = {"line_comment", "block_comment", "comment"}

TYPE_DECLARATIONS = {
	"class_declaration",
	"interface_declaration",
	"enum_declaration",
	"record_declaration",
	"annotation_type_declaration",
}

PACKAGE_INFO_FILENAME = "package-info.java"


@dataclass(frozen=True)
class CompilationUnit:
	path: str
	source: bytes
	tree: Tree

	@property
	def root(self) -> Node:
		return self.tree.root_node

	@property
	def is_package_info(self) -> bool:
		return os.path.basename(self.path) == PACKAGE_INFO_FILENAME


def node_text(node: Optional[Node]) -> str:
	if node is None or node.text is None:
		return ""
	return node.text.decode("utf-8", errors="replace")


def node_position(path: str, node: Node) -> Position:
	row, column = node.start_point
	return Position(path=path, line=row + 1, column=column + 1)


def is_comment(node: Node) -> bool:
	return node.type in COMMENT_TYPES


def is_javadoc_comment(node: Node) -> bool:
	# "/**/" is an empty block comment, not documentation
	if node.type not in COMMENT_TYPES:
		return False
	text = node_text(node)
	return text.startswith("/**") and text != "/**/"


def get_modifiers(node: Node) -> Optional[Node]:
	for child in node.children:
		if child.type == "modifiers":
			return child
	return None


def declared_visibility(node: Node) -> Optional[Visibility]:
	modifiers = get_modifiers(node)
	if modifiers is None:
		return None
	for child in modifiers.children:
		if child.type == "public":
			return Visibility.PUBLIC
		if child.type == "protected":
			return Visibility.PROTECTED
		if child.type == "private":
			return Visibility.PRIVATE
	return None


def annotation_names(node: Node) -> List[str]:
	names: List[str] = []
	modifiers = get_modifiers(node)
	if modifiers is None:
		return names
	for child in modifiers.children:
		if child.type in ("marker_annotation", "annotation"):
			names.append(node_text(child.child_by_field_name("name")))
	return names


def formal_parameters(node: Node) -> List[Node]:
	params = node.child_by_field_name("parameters")
	if params is None:
		return []
	# the receiver parameter ("Foo this") is not a real argument
	return [p for p in params.named_children if p.type in ("formal_parameter", "spread_parameter")]


def package_name(node: Node) -> str:
	for child in node.named_children:
		if child.type in ("scoped_identifier", "identifier"):
			return node_text(child)
	return ""


def _first_error(node: Node) -> Optional[Node]:
	if node.type == "ERROR" or node.is_missing:
		return node
	for child in node.children:
		if child.has_error or child.is_missing:
			found = _first_error(child)
			if found is not None:
				return found
	return None


def parse_java_source(path: str, source: bytes) -> CompilationUnit:
	parser = Parser(JAVA_LANGUAGE)
	tree = parser.parse(source)
	if tree.root_node.has_error:
		bad = _first_error(tree.root_node)
		if bad is None:
			raise ParseError(path)
		position = node_position(path, bad)
		raise ParseError(path, position.line, position.column)
	return CompilationUnit(path=path, source=source, tree=tree)


def parse_java_file(path: str) -> CompilationUnit:
	with open(path, "rb") as fh:
		source = fh.read()
	return parse_java_source(path, source)
