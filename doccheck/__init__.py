"""Checker that requires Javadoc comments on Java declarations.

Modules:
- fs_scan.py: Expanding command-line paths into the Java files to check.
- java_parse.py: tree-sitter parsing of Java sources and node helpers.
- javadoc.py: Deciding whether a declaration is documented.
- properties.py: Recognizing trivial getters and setters.
- policy.py: Rules that exempt a construct from reporting.
- traverse.py: Walking one compilation unit and collecting findings.
- runner.py: Checking a set of paths and formatting the results.
- model.py: Data structures for constructs, findings and reports.
- config.py: The run configuration.
- summarize.py: Deterministic counts over a run's findings.
"""

__all__ = [
	"config",
	"errors",
	"fs_scan",
	"java_parse",
	"javadoc",
	"model",
	"policy",
	"properties",
	"runner",
	"summarize",
	"traverse",
]
