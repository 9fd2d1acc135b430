from __future__ import annotations

from typing import Dict, List

from .model import RunReport, Summary


def summarize_report(report: RunReport) -> Summary:
	per_kind: Dict[str, int] = {}
	per_file: Dict[str, int] = {}
	for finding in report.findings:
		per_kind[finding.kind.value] = per_kind.get(finding.kind.value, 0) + 1
		per_file[finding.path] = per_file.get(finding.path, 0) + 1
	return Summary(
		total=len(report.findings),
		per_kind=dict(sorted(per_kind.items())),
		per_file=dict(sorted(per_file.items())),
		files_checked=len(report.files),
		files_failed=len(report.errors),
	)


def summary_lines(summary: Summary) -> List[str]:
	parts: List[str] = []
	parts.append(
		f"Checked {summary.files_checked} files: {summary.total} missing, "
		f"{summary.files_failed} unparseable"
	)
	if summary.per_kind:
		parts.append("  By kind: " + ", ".join(f"{k}={n}" for k, n in summary.per_kind.items()))
	if summary.per_file:
		parts.append(f"  Files with findings: {len(summary.per_file)}")
	return parts
