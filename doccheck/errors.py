"""Exception taxonomy for the checker.

Configuration and input errors are fatal and stop a run before any file is
traversed. Parse errors concern a single file: the run coordinator records
them and moves on.
"""

from __future__ import annotations

from typing import Optional


class DocCheckError(Exception):
	"""Base class for every error raised by doccheck."""


class ConfigError(DocCheckError):
	"""Invalid configuration, such as a malformed regular expression."""


class InputError(DocCheckError):
	"""A command-line path does not exist or cannot be read."""

	def __init__(self, path: str, reason: str) -> None:
		super().__init__(f"{reason}: {path}")
		self.path = path
		self.reason = reason


class ParseError(DocCheckError):
	"""The parser reported a syntax error in a Java file."""

	def __init__(self, path: str, line: Optional[int] = None, column: Optional[int] = None) -> None:
		if line is None:
			detail = f"{path}: syntax error"
		else:
			detail = f"{path}:{line}:{column}: syntax error"
		super().__init__(detail)
		self.path = path
		self.line = line
		self.column = column
