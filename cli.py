from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

import uvicorn

from doccheck.config import load_config
from doccheck.errors import ConfigError, InputError
from doccheck.runner import check_paths, format_finding
from doccheck.summarize import summarize_report, summary_lines


TRUE_VALUES = {"true", "yes", "on", "1"}
FALSE_VALUES = {"false", "no", "off", "0"}

BOOLEAN_OPTIONS = [
	("dont_require_private", "Don't report problems in private constructs"),
	("dont_require_noarg_constructor", "Don't report problems in constructors with zero formal params"),
	("dont_require_trivial_properties", "Don't report problems in trivial getters and setters"),
	("dont_require_type", "Don't report problems in type declarations"),
	("dont_require_field", "Don't report problems in fields and enum constants"),
	("dont_require_method", "Don't report problems in methods, constructors and annotation members"),
	("require_package_info", "Require a package-info.java file in every directory with Java files"),
	("relative", "Report relative rather than absolute filenames"),
	("verbose", "Print diagnostic information"),
]


def parse_bool(value: str) -> bool:
	lowered = value.lower()
	if lowered in TRUE_VALUES:
		return True
	if lowered in FALSE_VALUES:
		return False
	raise argparse.ArgumentTypeError(f"expected a boolean, got {value!r}")


def build_parser() -> argparse.ArgumentParser:
	parser = argparse.ArgumentParser(
		prog="require-javadoc",
		description="Report Java declarations that lack a Javadoc comment",
	)
	parser.add_argument("paths", nargs="*", help="Java files or directories (default: current directory)")
	parser.add_argument("--exclude", metavar="REGEX", help="Don't check files or directories whose pathname matches")
	parser.add_argument(
		"--dont-require",
		metavar="REGEX",
		help="Don't report problems in constructs whose simple name (or package name) matches",
	)
	for dest, help_text in BOOLEAN_OPTIONS:
		parser.add_argument(
			_flag(dest),
			dest=dest,
			action=argparse.BooleanOptionalAction,
			default=False,
			help=help_text,
		)
	return parser


def _flag(dest: str) -> str:
	return "--" + dest.replace("_", "-")


def expand_boolean_values(argv: List[str]) -> List[str]:
	"""Rewrite ``--flag=BOOL`` as ``--flag`` or ``--no-flag``.

	Raises argparse.ArgumentTypeError for a value that is not a boolean.
	"""
	flags = {_flag(dest) for dest, _ in BOOLEAN_OPTIONS}
	expanded: List[str] = []
	for i, arg in enumerate(argv):
		if arg == "--":
			expanded.extend(argv[i:])
			break
		name, sep, value = arg.partition("=")
		if sep and name in flags:
			expanded.append(name if parse_bool(value) else "--no-" + name[2:])
		else:
			expanded.append(arg)
	return expanded


def run(argv: Optional[List[str]] = None) -> int:
	"""Run the checker and return the process exit code."""
	parser = build_parser()
	raw = list(sys.argv[1:] if argv is None else argv)
	try:
		raw = expand_boolean_values(raw)
	except argparse.ArgumentTypeError as e:
		parser.error(str(e))
	args = parser.parse_args(raw)
	options = vars(args)
	paths = options.pop("paths")

	try:
		config = load_config(**options)
	except ConfigError as e:
		print(f"require-javadoc: {e}", file=sys.stderr)
		return 2

	logging.basicConfig(
		level=logging.DEBUG if config.verbose else logging.WARNING,
		format="%(message)s",
		stream=sys.stderr,
	)

	try:
		report = check_paths(paths, config)
	except InputError as e:
		print(f"require-javadoc: {e}", file=sys.stderr)
		return 2

	for error in report.errors:
		print(error.message, file=sys.stderr)
	for finding in report.findings:
		print(format_finding(finding, relative=config.relative))
	if config.verbose:
		for line in summary_lines(summarize_report(report)):
			print(line, file=sys.stderr)
	return report.exit_code


def main() -> None:
	sys.exit(run())


def serve_main() -> None:
	parser = argparse.ArgumentParser(prog="require-javadoc-serve")
	parser.add_argument("--host", default="127.0.0.1")
	parser.add_argument("--port", type=int, default=8000)
	parser.add_argument("--reload", action="store_true")
	args = parser.parse_args()
	uvicorn.run("api:app", host=args.host, port=args.port, reload=args.reload)


if __name__ == "__main__":
	main()
