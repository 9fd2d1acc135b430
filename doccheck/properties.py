"""Recognize trivial getters and setters.

A method is a trivial property accessor when its name, parameters, return
type and single body statement all agree on one property name, e.g.::

	int getBar() { return bar; }
	boolean isBaz() { return this.baz; }
	boolean notQux() { return !qux; }
	void setBar(int bar) { this.bar = bar; }

Anything that does not match exactly is not a property, so the method still
needs documentation.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from tree_sitter import Node

from .java_parse import formal_parameters, is_comment, node_text
from .model import PropertyKind, PropertyShape


VOID = "void"
BOOLEAN = "boolean"
OTHER = "other"

# (prefix, kind, parameter count, required return category);
# None as the return category means "anything but void"
PREFIXES: List[Tuple[str, PropertyKind, int, Optional[str]]] = [
	("get", PropertyKind.GETTER, 0, None),
	("has", PropertyKind.GETTER_HAS, 0, BOOLEAN),
	("is", PropertyKind.GETTER_IS, 0, BOOLEAN),
	("not", PropertyKind.GETTER_NOT, 0, BOOLEAN),
	("set", PropertyKind.SETTER, 1, VOID),
]

BOOLEAN_TYPES = {"boolean", "Boolean", "java.lang.Boolean"}


def lower_first(name: str) -> str:
	if not name:
		return name
	return name[0].lower() + name[1:]


def recognized_prefix(name: str) -> Optional[Tuple[str, PropertyKind, int, Optional[str]]]:
	for entry in PREFIXES:
		prefix = entry[0]
		if len(name) > len(prefix) and name.startswith(prefix) and name[len(prefix)].isupper():
			return entry
	return None


def return_category(method: Node) -> str:
	if method.child_by_field_name("dimensions") is not None:
		return OTHER
	type_node = method.child_by_field_name("type")
	if type_node is None:
		return OTHER
	if type_node.type == "void_type":
		return VOID
	if node_text(type_node) in BOOLEAN_TYPES:
		return BOOLEAN
	return OTHER


def body_statements(method: Node) -> Optional[List[Node]]:
	body = method.child_by_field_name("body")
	if body is None:
		return None
	return [child for child in body.named_children if not is_comment(child)]


def _names_property(expr: Optional[Node], name: str) -> bool:
	"""True for ``name`` or ``this.name``."""
	if expr is None:
		return False
	if expr.type == "identifier":
		return node_text(expr) == name
	if expr.type == "field_access":
		obj = expr.child_by_field_name("object")
		field = expr.child_by_field_name("field")
		return obj is not None and obj.type == "this" and node_text(field) == name
	return False


def _returned_expression(statement: Node) -> Optional[Node]:
	if statement.type != "return_statement":
		return None
	exprs = [child for child in statement.named_children if not is_comment(child)]
	if len(exprs) != 1:
		return None
	return exprs[0]


def _is_getter_body(statement: Node, name: str) -> bool:
	return _names_property(_returned_expression(statement), name)


def _is_not_getter_body(statement: Node, name: str) -> bool:
	expr = _returned_expression(statement)
	if expr is None or expr.type != "unary_expression":
		return False
	operator = expr.child_by_field_name("operator")
	if node_text(operator) != "!":
		return False
	return _names_property(expr.child_by_field_name("operand"), name)


def _is_setter_body(statement: Node, name: str) -> bool:
	if statement.type != "expression_statement":
		return False
	exprs = [child for child in statement.named_children if not is_comment(child)]
	if len(exprs) != 1 or exprs[0].type != "assignment_expression":
		return False
	assignment = exprs[0]
	if node_text(assignment.child_by_field_name("operator")) != "=":
		return False
	left = assignment.child_by_field_name("left")
	right = assignment.child_by_field_name("right")
	if left is None or left.type != "field_access":
		return False
	return _names_property(left, name) and right is not None and right.type == "identifier" and node_text(right) == name


def _matches_shape(
	method: Node,
	kind: PropertyKind,
	property_name: str,
	param_count: int,
	required_return: Optional[str],
) -> bool:
	if not property_name:
		return False
	params = formal_parameters(method)
	if len(params) != param_count:
		return False

	category = return_category(method)
	if required_return is None:
		if category == VOID:
			return False
	elif category != required_return:
		return False

	if kind == PropertyKind.SETTER:
		if params[0].type != "formal_parameter":
			return False
		if node_text(params[0].child_by_field_name("name")) != property_name:
			return False

	statements = body_statements(method)
	if statements is None or len(statements) != 1:
		return False
	statement = statements[0]

	if kind == PropertyKind.SETTER:
		return _is_setter_body(statement, property_name)
	if kind == PropertyKind.GETTER_NOT:
		return _is_not_getter_body(statement, property_name)
	return _is_getter_body(statement, property_name)


def classify(method: Node) -> Optional[PropertyShape]:
	"""Return the property a trivial accessor exposes, or None.

	Only ``method_declaration`` nodes can be properties. A name with a
	recognized prefix is only ever tried with that prefix; the prefix-less
	getter interpretation applies to the remaining zero-argument methods.
	"""
	if method.type != "method_declaration":
		return None
	name = node_text(method.child_by_field_name("name"))
	if not name:
		return None

	entry = recognized_prefix(name)
	if entry is not None:
		prefix, kind, param_count, required_return = entry
		property_name = lower_first(name[len(prefix):])
		if _matches_shape(method, kind, property_name, param_count, required_return):
			return PropertyShape(property_kind=kind, property_name=property_name)
		return None

	property_name = lower_first(name)
	if _matches_shape(method, PropertyKind.GETTER_NO_PREFIX, property_name, 0, None):
		return PropertyShape(property_kind=PropertyKind.GETTER_NO_PREFIX, property_name=property_name)
	return None
