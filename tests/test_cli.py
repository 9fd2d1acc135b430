import argparse

import pytest

from cli import build_parser, expand_boolean_values, parse_bool, run


SOURCE = """\
/** A. */
class A {
  private int hidden;

  A() {}
}
"""


def test_parse_bool():
	assert parse_bool("TRUE") is True
	assert parse_bool("off") is False
	with pytest.raises(argparse.ArgumentTypeError):
		parse_bool("maybe")


def test_expand_boolean_values():
	argv = ["--relative=false", "--verbose=yes", "--exclude=x=y", "--", "--relative=true"]
	assert expand_boolean_values(argv) == ["--no-relative", "--verbose", "--exclude=x=y", "--", "--relative=true"]


def test_bare_flag_does_not_consume_path():
	args = build_parser().parse_args(["--relative", "src"])
	assert args.relative is True
	assert args.paths == ["src"]


def test_reports_and_exit_code(tmp_path, write_java, capsys):
	path = write_java("A.java", SOURCE)
	assert run([path]) == 1
	out = capsys.readouterr().out.splitlines()
	assert out == [
		f"{path}:3:15: missing documentation for hidden",
		f"{path}:5:3: missing documentation for A",
	]


def test_flags(tmp_path, write_java, capsys):
	path = write_java("A.java", SOURCE)
	assert run(["--dont-require-private", "--dont-require-noarg-constructor=true", path]) == 0
	assert capsys.readouterr().out == ""
	assert run(["--dont-require-private=false", "--dont-require-noarg-constructor", path]) == 1
	assert "hidden" in capsys.readouterr().out


def test_relative_output(tmp_path, write_java, capsys, monkeypatch):
	write_java("pkg/A.java", SOURCE)
	monkeypatch.chdir(tmp_path)
	assert run(["--relative", str(tmp_path / "pkg")]) == 1
	assert capsys.readouterr().out.startswith("pkg/A.java:3:15:")


def test_missing_path(tmp_path, capsys):
	assert run([str(tmp_path / "missing")]) == 2
	assert "File not found" in capsys.readouterr().err


def test_bad_regex(tmp_path, capsys):
	assert run(["--dont-require=(", str(tmp_path)]) == 2
	assert "dont_require" in capsys.readouterr().err


def test_bad_boolean(tmp_path):
	with pytest.raises(SystemExit) as excinfo:
		run(["--verbose=perhaps", str(tmp_path)])
	assert excinfo.value.code == 2


def test_parse_error_exit_code(tmp_path, write_java, capsys):
	write_java("Bad.java", "class {")
	assert run([str(tmp_path)]) == 2
	assert "syntax error" in capsys.readouterr().err


def test_verbose_prints_summary(tmp_path, write_java, capsys):
	path = write_java("A.java", SOURCE)
	assert run(["--verbose", path]) == 1
	assert "Checked 1 files: 2 missing" in capsys.readouterr().err
