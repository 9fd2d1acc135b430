from __future__ import annotations

from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict


class ConstructKind(str, Enum):
	TYPE = "type"
	CONSTRUCTOR = "constructor"
	METHOD = "method"
	FIELD = "field"
	ENUM_CONSTANT = "enum_constant"
	ANNOTATION_MEMBER = "annotation_member"
	PACKAGE = "package"


class Visibility(str, Enum):
	PUBLIC = "public"
	PROTECTED = "protected"
	PACKAGE = "package"
	PRIVATE = "private"


class PropertyKind(str, Enum):
	GETTER = "getter"
	GETTER_NO_PREFIX = "getter_no_prefix"
	GETTER_HAS = "getter_has"
	GETTER_IS = "getter_is"
	GETTER_NOT = "getter_not"
	SETTER = "setter"


class Position(BaseModel):
	model_config = ConfigDict(frozen=True)

	path: str
	line: int
	column: int


class Construct(BaseModel):
	"""One documentable element, snapshotted from a syntax tree node."""

	model_config = ConfigDict(frozen=True)

	kind: ConstructKind
	simple_name: str
	# "Outer.Inner" for constructors, empty otherwise
	owner_chain_name: str = ""
	visibility: Visibility = Visibility.PACKAGE
	position: Optional[Position] = None
	is_override_annotated: bool = False
	parameter_count: Optional[int] = None


class PropertyShape(BaseModel):
	model_config = ConfigDict(frozen=True)

	property_kind: PropertyKind
	property_name: str


class Finding(BaseModel):
	model_config = ConfigDict(frozen=True)

	path: str
	# None for directory-level findings (missing package-info.java)
	line: Optional[int] = None
	column: Optional[int] = None
	construct_name: str
	kind: ConstructKind

	def sort_key(self):
		return (self.path, self.line or 0, self.column or 0)

	def message(self) -> str:
		if self.line is None:
			return "missing package documentation: no file package-info.java"
		return f"missing documentation for {self.construct_name}"


class FileError(BaseModel):
	path: str
	message: str


class Summary(BaseModel):
	total: int
	per_kind: Dict[str, int]
	per_file: Dict[str, int]
	files_checked: int
	files_failed: int


class RunReport(BaseModel):
	files: List[str] = []
	findings: List[Finding] = []
	errors: List[FileError] = []

	@property
	def exit_code(self) -> int:
		if self.errors:
			return 2
		if self.findings:
			return 1
		return 0
