from __future__ import annotations

import logging
import os
import re
from typing import Iterable, List, Optional

from .errors import InputError
from .java_parse import PACKAGE_INFO_FILENAME


logger = logging.getLogger(__name__)

JAVA_EXTENSION = ".java"
SKIP_DIRS = {".git", ".hg", ".svn"}


def is_java_file(filename: str) -> bool:
	return filename.endswith(JAVA_EXTENSION)


def is_excluded(path: str, exclude: Optional[re.Pattern]) -> bool:
	return exclude is not None and exclude.search(path) is not None


def scan_directory(root: str, exclude: Optional[re.Pattern] = None) -> List[str]:
	files: List[str] = []
	for dirpath, dirnames, filenames in os.walk(root):
		dirnames[:] = [
			d for d in dirnames
			if d not in SKIP_DIRS and not is_excluded(os.path.join(dirpath, d), exclude)
		]
		for filename in filenames:
			path = os.path.join(dirpath, filename)
			if not is_java_file(filename) or not os.path.isfile(path):
				continue
			if is_excluded(path, exclude):
				logger.debug("excluded %s", path)
				continue
			files.append(path)
	return files


def collect_java_files(paths: Iterable[str], exclude: Optional[re.Pattern] = None) -> List[str]:
	"""Expand command-line paths into a sorted, duplicate-free list of Java files.

	No paths means the current working directory. A path that does not exist
	raises InputError before any file is returned.
	"""
	args = list(paths) or [os.getcwd()]
	for arg in args:
		if not os.path.exists(arg):
			raise InputError(arg, "File not found")

	files: List[str] = []
	for arg in args:
		if is_excluded(arg, exclude):
			logger.debug("excluded %s", arg)
			continue
		if os.path.isdir(arg):
			files.extend(scan_directory(arg, exclude))
		else:
			files.append(arg)
	return sorted(set(files))


def directories_missing_package_info(files: Iterable[str]) -> List[str]:
	missing = set()
	for path in files:
		directory = os.path.dirname(path)
		if not os.path.isfile(os.path.join(directory, PACKAGE_INFO_FILENAME)):
			missing.add(directory)
	return sorted(missing)
