"""Tests for the example section runner."""

import pytest

from docmark.emit import ConfigurationError
from docmark.examples import extract_example, run_example

MODULE = [
    "def hello(name):",
    "    return f'Hello {name}'",
    "",
    "#' ## <a name='usage'>USAGE</a>",
    "#'",
    "#' ```",
    "#' not_the_example()",
    "#' ```",
    "#'",
    "#' ## <a name='example'>EXAMPLE</a>",
    "#'",
    "#' Some words first.",
    "#'",
    "#' ```",
    "#' RESULT = hello('docmark')",
    "#' if RESULT:",
    "#'     LENGTH = len(RESULT)",
    "#' ```",
]


def test_extract_example(write_file):
    path = write_file("mod.py", MODULE)
    assert extract_example(path) == (
        "RESULT = hello('docmark')\n"
        "if RESULT:\n"
        "    LENGTH = len(RESULT)\n")


def test_extract_example_without_section(write_file):
    path = write_file("plain.py", ["#' ## Usage", "#' ```", "#' x", "#' ```"])
    assert extract_example(path) == ""


def test_run_example_uses_module_namespace(write_file):
    path = write_file("mod.py", MODULE)
    namespace = run_example(path)
    assert namespace["RESULT"] == "Hello docmark"
    assert namespace["LENGTH"] == len("Hello docmark")


def test_run_example_requires_python(write_file):
    path = write_file("mod.tcl", ["#' ## Example", "#' ```", "#' x", "#' ```"])
    with pytest.raises(ConfigurationError, match="Python"):
        run_example(path)


def test_run_example_requires_example(write_file):
    path = write_file("plain.py", ["x = 1"])
    with pytest.raises(ConfigurationError, match="no example"):
        run_example(path)
