import os

import pytest

from doccheck.config import CheckConfig
from doccheck.errors import InputError
from doccheck.model import ConstructKind, Finding, RunReport
from doccheck.runner import check_file, check_paths, display_path, format_finding


UNDOCUMENTED = """\
class B {
  void b() {}
}
"""

DOCUMENTED = """\
/** A. */
class A {
  /** Does a. */
  void a() {}
}
"""


def test_clean_run(tmp_path, write_java):
	write_java("A.java", DOCUMENTED)
	report = check_paths([str(tmp_path)], CheckConfig())
	assert report.findings == []
	assert report.errors == []
	assert report.exit_code == 0


def test_findings_sorted_by_file_then_position(tmp_path, write_java):
	write_java("z/Z.java", UNDOCUMENTED)
	write_java("a/B.java", UNDOCUMENTED)
	report = check_paths([str(tmp_path)], CheckConfig())
	assert [(os.path.relpath(f.path, tmp_path), f.line) for f in report.findings] == [
		(os.path.join("a", "B.java"), 1),
		(os.path.join("a", "B.java"), 2),
		(os.path.join("z", "Z.java"), 1),
		(os.path.join("z", "Z.java"), 2),
	]
	assert report.exit_code == 1


def test_parse_error_is_recorded_and_run_continues(tmp_path, write_java):
	broken = write_java("Broken.java", "class Broken { void m( }\n")
	write_java("C.java", UNDOCUMENTED)
	report = check_paths([str(tmp_path)], CheckConfig())
	assert [e.path for e in report.errors] == [broken]
	assert "syntax error" in report.errors[0].message
	assert [f.construct_name for f in report.findings] == ["B", "b"]
	assert report.exit_code == 2


def test_exclude(tmp_path, write_java):
	write_java("gen/G.java", UNDOCUMENTED)
	write_java("A.java", DOCUMENTED)
	config = CheckConfig(exclude="gen")
	assert check_paths([str(tmp_path)], config).findings == []


def test_require_package_info(tmp_path, write_java):
	write_java("p/A.java", DOCUMENTED)
	write_java("q/A.java", DOCUMENTED)
	write_java("q/package-info.java", "/** Package q. */\npackage q;\n")
	report = check_paths([str(tmp_path)], CheckConfig(require_package_info=True))
	assert report.findings == [
		Finding(path=str(tmp_path / "p"), construct_name=str(tmp_path / "p"), kind=ConstructKind.PACKAGE)
	]
	assert format_finding(report.findings[0]).endswith(
		": missing package documentation: no file package-info.java"
	)


def test_undocumented_package_info(tmp_path, write_java):
	write_java("q/package-info.java", "package q;\n")
	report = check_paths([str(tmp_path)], CheckConfig())
	assert [(f.kind, f.construct_name) for f in report.findings] == [(ConstructKind.PACKAGE, "q")]


def test_unreadable_file(tmp_path):
	with pytest.raises(InputError):
		check_file(str(tmp_path), CheckConfig())


def test_format_finding():
	finding = Finding(path="/work/src/A.java", line=3, column=5, construct_name="foo", kind=ConstructKind.METHOD)
	assert format_finding(finding) == "/work/src/A.java:3:5: missing documentation for foo"
	assert format_finding(finding, relative=True, cwd="/work") == "src/A.java:3:5: missing documentation for foo"


def test_display_path_leaves_relative_paths():
	assert display_path("src/A.java", relative=True, cwd="/elsewhere") == "src/A.java"
	assert display_path("/abs/A.java", relative=False) == "/abs/A.java"


def test_exit_codes():
	finding = Finding(path="A.java", line=1, column=1, construct_name="A", kind=ConstructKind.TYPE)
	assert RunReport().exit_code == 0
	assert RunReport(findings=[finding]).exit_code == 1
