"""Run configuration: policy toggles and the two regular expressions."""

from __future__ import annotations

import re
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from .errors import ConfigError


class CheckConfig(BaseModel):
	model_config = ConfigDict(frozen=True)

	# Files and directories whose path matches are not checked.
	exclude: Optional[re.Pattern] = None
	# Constructs whose simple name (package: full name) matches are not reported.
	dont_require: Optional[re.Pattern] = None

	dont_require_private: bool = False
	dont_require_noarg_constructor: bool = False
	dont_require_trivial_properties: bool = False
	dont_require_type: bool = False
	dont_require_field: bool = False
	dont_require_method: bool = False
	require_package_info: bool = False

	relative: bool = False
	verbose: bool = False

	@field_validator("exclude", "dont_require", mode="before")
	@classmethod
	def _compile(cls, value: Any) -> Any:
		if value is None or isinstance(value, re.Pattern):
			return value
		if isinstance(value, str):
			if value == "":
				return None
			try:
				return re.compile(value)
			except re.error as e:
				raise ValueError(f"invalid regular expression {value!r}: {e}") from e
		raise ValueError(f"expected a regular expression string, got {type(value).__name__}")


def load_config(**options: Any) -> CheckConfig:
	"""Build a CheckConfig, turning validation failures into ConfigError."""
	try:
		return CheckConfig(**options)
	except ValidationError as e:
		messages = []
		for error in e.errors():
			field = ".".join(str(part) for part in error["loc"])
			messages.append(f"{field}: {error['msg']}")
		raise ConfigError("; ".join(messages)) from e
