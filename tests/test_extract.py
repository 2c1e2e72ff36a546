"""Tests for the line classifier, include resolver and package scan."""

from pathlib import Path

import pytest

from docmark.extract import (BODY, CODE, INCLUDE, LineClassifier,
                             PackageInfo, extract_lines, resolve_include)


class TestLineClassifier:
    """Classification of single lines."""

    def test_strips_prefix_and_one_space(self):
        classifier = LineClassifier(True)
        assert classifier.classify("#' Some text") == (BODY, "Some text")
        assert classifier.classify("#'  indented") == (BODY, " indented")

    def test_allows_leading_whitespace(self):
        assert LineClassifier(True).classify("    #' text") == (BODY, "text")

    def test_empty_documentation_line(self):
        assert LineClassifier(True).classify("#'") == (BODY, "")

    def test_code_is_discarded(self):
        classifier = LineClassifier(True)
        assert classifier.classify("def f(x):") == (CODE, "")
        assert classifier.classify("# ordinary comment") == (CODE, "")

    def test_include_directive(self):
        kind, path = LineClassifier(True).classify('#\' #include "head.md"')
        assert kind == INCLUDE
        assert path == "head.md"

    def test_form_feed_does_not_split_a_line(self, write_file):
        source = write_file("main.py", ["#' page\x0cbreak text", "x = 1"])
        assert extract_lines(source, True) == ["page\x0cbreak text"]

    def test_markdown_input_passes_through(self):
        classifier = LineClassifier(False)
        assert classifier.classify("def f(x):") == (BODY, "def f(x):")
        assert classifier.classify('#\' #include "x"') == (BODY,
                                                          '#\' #include "x"')


class TestIncludes:
    """Include expansion."""

    def test_include_is_inlined_in_place(self, write_file):
        write_file("inc.md", ["Hello", "World"])
        source = write_file("main.py", [
            "#' before",
            "x = 1",
            '#\' #include "inc.md"',
            "#' after",
        ])
        assert extract_lines(source, True) == [
            "before", "Hello", "World", "after"]

    def test_nested_include_stays_literal(self, write_file):
        write_file("other.md", ["never included"])
        write_file("inc.md", ["Hello", "World", '#\' #include "other.md"'])
        source = write_file("main.py", ['#\' #include "inc.md"'])
        assert extract_lines(source, True) == [
            "Hello", "World", '#\' #include "other.md"']

    def test_missing_include_raises(self, write_file):
        source = write_file("main.py", ['#\' #include "missing.md"'])
        with pytest.raises(OSError):
            extract_lines(source, True)

    def test_absolute_include_path(self, tmp_path, write_file):
        include = write_file("abs.md", ["absolute"])
        assert resolve_include(str(include), Path("/nonexistent")) == [
            "absolute"]

    def test_include_keeps_unicode_line_separators(self, write_file):
        write_file("inc.md", ["Hello\u2028World", "page\x0cbreak"])
        source = write_file("main.py", ['#\' #include "inc.md"'])
        assert extract_lines(source, True) == [
            "Hello\u2028World", "page\x0cbreak"]


class TestPackageInfo:
    """Package declaration scanning."""

    def test_tcl_package_provide(self, write_file):
        path = write_file("mkpkg.tcl", [
            "package require Tcl 8.6",
            "package provide mkpkg::util 0.6.1",
        ])
        assert PackageInfo.scan(path) == PackageInfo(
            "mkpkg::util", "0.6.1", "mkpkg")

    def test_python_version(self, write_file):
        path = write_file("tool.py", ['__version__ = "2.3.0"'])
        assert PackageInfo.scan(path) == PackageInfo("tool", "2.3.0", "tool")

    def test_unsupported_suffix(self, write_file):
        path = write_file("notes.txt", ["package provide foo 1.0"])
        assert PackageInfo.scan(path) == PackageInfo("", "", "notes")

    def test_no_declaration(self, write_file):
        path = write_file("empty.tcl", ["puts hello"])
        assert PackageInfo.scan(path) == PackageInfo("", "", "empty")


def test_undecodable_bytes_are_replaced(tmp_path):
    path = tmp_path / "a.tcl"
    path.write_bytes(b'set x "caf\xe9"\n#\' Doc\npackage provide a 1.0\n')
    assert extract_lines(path, True) == ["Doc"]
    assert PackageInfo.scan(path) == PackageInfo("a", "1.0", "a")
