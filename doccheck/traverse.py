from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Callable, List, Optional, Tuple

from tree_sitter import Node

from .config import CheckConfig
from .java_parse import (
	TYPE_DECLARATIONS,
	CompilationUnit,
	annotation_names,
	declared_visibility,
	formal_parameters,
	node_position,
	node_text,
	package_name,
)
from .javadoc import is_documented
from .model import Construct, ConstructKind, Finding, Visibility
from .policy import OVERRIDE_ANNOTATIONS, suppression_reason
from .properties import classify


logger = logging.getLogger(__name__)

FIELD_DECLARATIONS = {"field_declaration", "constant_declaration"}
CONSTRUCTOR_DECLARATIONS = {"constructor_declaration", "compact_constructor_declaration"}
# member defaults to public inside these
INTERFACE_LIKE = {"interface_declaration", "annotation_type_declaration"}


class _FileLogger(logging.LoggerAdapter):
	def process(self, msg, kwargs):
		return f"{self.extra['path']}: {msg}", kwargs


@dataclass(frozen=True)
class TraversalContext:
	"""State for one walk over one compilation unit.

	Entering a type returns a new context; ``findings`` is the one list shared
	by every context of the walk.
	"""

	unit: CompilationUnit
	config: CheckConfig
	log: logging.LoggerAdapter
	findings: List[Finding] = field(default_factory=list)
	enclosing: Tuple[str, ...] = ()
	interface_like: bool = False

	def enter(self, type_name: str, interface_like: bool) -> "TraversalContext":
		return replace(self, enclosing=self.enclosing + (type_name,), interface_like=interface_like)

	def report(self, construct: Construct) -> None:
		position = construct.position
		self.findings.append(
			Finding(
				path=self.unit.path,
				line=position.line if position else None,
				column=position.column if position else None,
				construct_name=construct.simple_name,
				kind=construct.kind,
			)
		)


def _visibility(node: Node, ctx: TraversalContext) -> Visibility:
	declared = declared_visibility(node)
	if declared is not None:
		return declared
	return Visibility.PUBLIC if ctx.interface_like else Visibility.PACKAGE


def _check(
	node: Node,
	construct: Construct,
	ctx: TraversalContext,
	extra_rule: Optional[Callable[[], Optional[str]]] = None,
) -> None:
	ctx.log.debug("visiting %s %s", construct.kind.value, construct.simple_name)
	reason = suppression_reason(construct, ctx.config)
	if reason is None and extra_rule is not None:
		reason = extra_rule()
	if reason is not None:
		ctx.log.debug("not required: %s (%s)", construct.simple_name, reason)
		return
	if is_documented(node):
		return
	ctx.log.debug("missing documentation: %s", construct.simple_name)
	ctx.report(construct)


def _visit_package(node: Node, ctx: TraversalContext) -> None:
	# ordinary files never document their package
	if not ctx.unit.is_package_info:
		return
	construct = Construct(
		kind=ConstructKind.PACKAGE,
		simple_name=package_name(node),
		visibility=Visibility.PUBLIC,
		position=node_position(ctx.unit.path, node),
	)
	_check(node, construct, ctx)


def _visit_type(node: Node, ctx: TraversalContext) -> None:
	name = node_text(node.child_by_field_name("name"))
	construct = Construct(
		kind=ConstructKind.TYPE,
		simple_name=name,
		visibility=_visibility(node, ctx),
		position=node_position(ctx.unit.path, node),
	)
	_check(node, construct, ctx)

	body = node.child_by_field_name("body")
	if body is not None:
		_visit_body(body, ctx.enter(name, node.type in INTERFACE_LIKE))


def _visit_body(body: Node, ctx: TraversalContext) -> None:
	for member in body.named_children:
		kind = member.type
		if kind in TYPE_DECLARATIONS:
			_visit_type(member, ctx)
		elif kind in FIELD_DECLARATIONS:
			_visit_field(member, ctx)
		elif kind == "method_declaration":
			_visit_method(member, ctx)
		elif kind in CONSTRUCTOR_DECLARATIONS:
			_visit_constructor(member, ctx)
		elif kind == "annotation_type_element_declaration":
			_visit_annotation_member(member, ctx)
		elif kind == "enum_constant":
			_visit_enum_constant(member, ctx)
		elif kind == "enum_body_declarations":
			_visit_body(member, ctx)


def _constructor_parameter_count(node: Node) -> int:
	if node.type == "compact_constructor_declaration":
		# a compact constructor takes the record's components
		record = node.parent.parent if node.parent is not None else None
		if record is not None and record.type == "record_declaration":
			return len(formal_parameters(record))
		return 0
	return len(formal_parameters(node))


def _visit_constructor(node: Node, ctx: TraversalContext) -> None:
	# tree-sitter keeps whatever identifier the source used; report the type's name
	if ctx.enclosing:
		name = ctx.enclosing[-1]
	else:
		name = node_text(node.child_by_field_name("name"))
	construct = Construct(
		kind=ConstructKind.CONSTRUCTOR,
		simple_name=name,
		owner_chain_name=".".join(ctx.enclosing),
		visibility=_visibility(node, ctx),
		position=node_position(ctx.unit.path, node),
		parameter_count=_constructor_parameter_count(node),
	)

	def noarg_rule() -> Optional[str]:
		if ctx.config.dont_require_noarg_constructor and construct.parameter_count == 0:
			return "noarg_constructor"
		return None

	_check(node, construct, ctx, noarg_rule)


def _visit_method(node: Node, ctx: TraversalContext) -> None:
	construct = Construct(
		kind=ConstructKind.METHOD,
		simple_name=node_text(node.child_by_field_name("name")),
		visibility=_visibility(node, ctx),
		position=node_position(ctx.unit.path, node),
		is_override_annotated=any(name in OVERRIDE_ANNOTATIONS for name in annotation_names(node)),
		parameter_count=len(formal_parameters(node)),
	)

	def trivial_property_rule() -> Optional[str]:
		if not ctx.config.dont_require_trivial_properties:
			return None
		shape = classify(node)
		if shape is None:
			return None
		ctx.log.debug("%s is a trivial %s for %s", construct.simple_name, shape.property_kind.value, shape.property_name)
		return "trivial_property"

	_check(node, construct, ctx, trivial_property_rule)


def _is_serial_version_uid(declaration: Node, declarator: Node) -> bool:
	if node_text(declarator.child_by_field_name("name")) != "serialVersionUID":
		return False
	if declarator.child_by_field_name("dimensions") is not None:
		return False
	return node_text(declaration.child_by_field_name("type")) in ("long", "Long")


def _visit_field(node: Node, ctx: TraversalContext) -> None:
	visibility = _visibility(node, ctx)
	for declarator in node.children_by_field_name("declarator"):
		construct = Construct(
			kind=ConstructKind.FIELD,
			simple_name=node_text(declarator.child_by_field_name("name")),
			visibility=visibility,
			position=node_position(ctx.unit.path, declarator),
		)

		def serial_rule(declarator: Node = declarator) -> Optional[str]:
			if _is_serial_version_uid(node, declarator):
				return "serial_version_uid"
			return None

		# documentation belongs to the whole declaration, not the declarator
		_check(node, construct, ctx, serial_rule)


def _visit_enum_constant(node: Node, ctx: TraversalContext) -> None:
	construct = Construct(
		kind=ConstructKind.ENUM_CONSTANT,
		simple_name=node_text(node.child_by_field_name("name")),
		visibility=Visibility.PUBLIC,
		position=node_position(ctx.unit.path, node),
	)
	_check(node, construct, ctx)


def _visit_annotation_member(node: Node, ctx: TraversalContext) -> None:
	construct = Construct(
		kind=ConstructKind.ANNOTATION_MEMBER,
		simple_name=node_text(node.child_by_field_name("name")),
		visibility=_visibility(node, ctx),
		position=node_position(ctx.unit.path, node),
	)
	_check(node, construct, ctx)


def traverse(unit: CompilationUnit, config: CheckConfig) -> List[Finding]:
	"""Walk one compilation unit and return its findings in source order."""
	ctx = TraversalContext(unit=unit, config=config, log=_FileLogger(logger, {"path": unit.path}))
	for child in unit.root.named_children:
		if child.type == "package_declaration":
			_visit_package(child, ctx)
		elif child.type in TYPE_DECLARATIONS:
			_visit_type(child, ctx)
	return sorted(ctx.findings, key=Finding.sort_key)
