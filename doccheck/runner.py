"""Run coordinator: discover files, parse, traverse, aggregate, format."""

from __future__ import annotations

import logging
import os
from typing import Iterable, List, Optional

from .config import CheckConfig
from .errors import InputError, ParseError
from .fs_scan import collect_java_files, directories_missing_package_info
from .java_parse import parse_java_file
from .model import ConstructKind, FileError, Finding, RunReport
from .traverse import traverse


logger = logging.getLogger(__name__)


def check_file(path: str, config: CheckConfig) -> List[Finding]:
	"""Parse and check one file.

	Raises InputError when the file cannot be read and ParseError when it does
	not parse.
	"""
	try:
		unit = parse_java_file(path)
	except OSError as e:
		raise InputError(path, f"Problem while reading ({e.strerror or e})") from e
	return traverse(unit, config)


def package_info_findings(files: Iterable[str]) -> List[Finding]:
	return [
		Finding(path=directory or os.curdir, construct_name=directory or os.curdir, kind=ConstructKind.PACKAGE)
		for directory in directories_missing_package_info(files)
	]


def check_paths(paths: Iterable[str], config: CheckConfig) -> RunReport:
	files = collect_java_files(paths, config.exclude)
	report = RunReport(files=files)
	for path in files:
		logger.debug("checking %s", path)
		try:
			report.findings.extend(check_file(path, config))
		except ParseError as e:
			logger.debug("parse failure in %s", path)
			report.errors.append(FileError(path=path, message=str(e)))
	if config.require_package_info:
		report.findings.extend(package_info_findings(files))
	report.findings.sort(key=Finding.sort_key)
	return report


def display_path(path: str, relative: bool, cwd: Optional[str] = None) -> str:
	if not relative or not os.path.isabs(path):
		return path
	return os.path.relpath(path, cwd or os.getcwd())


def format_finding(finding: Finding, relative: bool = False, cwd: Optional[str] = None) -> str:
	path = display_path(finding.path, relative, cwd)
	if finding.line is None:
		return f"{path}: {finding.message()}"
	return f"{path}:{finding.line}:{finding.column}: {finding.message()}"
