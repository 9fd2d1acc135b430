from __future__ import annotations

from typing import Optional

from .config import CheckConfig
from .model import Construct, ConstructKind, Visibility


OVERRIDE_ANNOTATIONS = {"Override", "java.lang.Override"}


def kind_suppressed(kind: ConstructKind, config: CheckConfig) -> bool:
	if kind == ConstructKind.TYPE:
		return config.dont_require_type
	if kind in (ConstructKind.FIELD, ConstructKind.ENUM_CONSTANT):
		return config.dont_require_field
	if kind in (ConstructKind.METHOD, ConstructKind.CONSTRUCTOR, ConstructKind.ANNOTATION_MEMBER):
		return config.dont_require_method
	if kind == ConstructKind.PACKAGE:
		return False
	raise AssertionError(f"unhandled construct kind {kind!r}")


def name_suppressed(name: str, config: CheckConfig) -> bool:
	if config.dont_require is None or not name:
		return False
	return config.dont_require.search(name) is not None


def suppression_reason(construct: Construct, config: CheckConfig) -> Optional[str]:
	"""Name of the rule that exempts ``construct`` from reporting, or None.

	Packages are matched against ``dont_require`` by their full dotted name;
	every other construct by its simple name.
	"""
	if construct.kind == ConstructKind.METHOD and construct.is_override_annotated:
		return "override"
	if config.dont_require_private and construct.visibility == Visibility.PRIVATE:
		return "private"
	if kind_suppressed(construct.kind, config):
		return construct.kind.value
	if name_suppressed(construct.simple_name, config):
		return "name"
	return None
