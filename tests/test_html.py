"""Tests for image rewriting, rendering and HTML post processing."""

from pathlib import Path
import shutil

import pytest

from docmark import html as html_module
from docmark.html import (ProgramRenderer, finalize_html, find_renderer,
                          fix_html_lines, rewrite_images)


class TestRewriteImages:
    """Empty caption image rewriting."""

    def test_empty_caption_image(self):
        assert rewrite_images("![](pic.png)") == '<image src="pic.png"></img>'

    def test_several_images_in_one_line(self):
        assert rewrite_images("a ![](1.png) b ![](2.png)") == (
            'a <image src="1.png"></img> b <image src="2.png"></img>')

    def test_captioned_image_is_left_alone(self):
        assert rewrite_images("![caption](pic.png)") == "![caption](pic.png)"


class TestFixHtmlLines:
    """Synopsis and code language classes."""

    def test_synopsis_pre_blocks(self):
        html = "\n".join([
            "<h2><a name='synopsis'>SYNOPSIS</a></h2>",
            "<pre><code>usage</code></pre>",
            "<h2>Description</h2>",
            "<pre><code>other</code></pre>",
        ])
        assert fix_html_lines(html).split("\n") == [
            "<h2><a name='synopsis'>SYNOPSIS</a></h2>",
            "<pre class='synopsis'><code>usage</code></pre>",
            "<h2>Description</h2>",
            "<pre><code>other</code></pre>",
        ]

    def test_code_language_is_hoisted(self):
        line = "<pre class='code'><code class='python'>x = 1"
        assert fix_html_lines(line) == (
            "<pre class='code python'><code class='python'>x = 1")

    def test_commonmark_language_is_hoisted(self):
        line = '<pre><code class="language-tcl">puts hi'
        assert fix_html_lines(line) == (
            '<pre class="tcl"><code class="language-tcl">puts hi')

    def test_plain_html_is_unchanged(self):
        html = "<h1>T</h1>\n<p>text</p>\n<pre><code>x</code></pre>\n"
        assert fix_html_lines(html) == html


def test_finalize_html_with_title_block():
    fields = {"title": "X", "author": "Y", "date": "Z", "style": "<style/>"}
    page = finalize_html(fields, "<p>body</p>", True)
    assert page.startswith("<!DOCTYPE html>\n<html>")
    assert "<title>X</title>" in page
    assert '<meta name="author" content="Y">' in page
    assert "<style/>" in page
    assert '<div class="title"><h1>X</h1></div>' in page
    assert '<div class="author"><h3>Y</h3></div>' in page
    assert '<div class="date"><h3>Z</h3></div>' in page
    assert page.endswith("<p>body</p>\n</body>\n</html>\n")


def test_finalize_html_without_title_block():
    fields = {"title": "X", "author": "Y", "date": "Z", "style": ""}
    page = finalize_html(fields, "<p>body</p>\n", False)
    assert '<div class="title">' not in page
    assert "<title>X</title>" in page


def test_find_renderer_prefers_markdown(monkeypatch):
    found = {"markdown": "/usr/bin/markdown", "cmark": "/usr/bin/cmark"}
    monkeypatch.setattr(html_module.shutil, "which", found.get)
    assert find_renderer() == ProgramRenderer(Path("/usr/bin/markdown"))
    assert find_renderer("cmark") == ProgramRenderer(Path("/usr/bin/cmark"))


def test_find_renderer_none_available(monkeypatch):
    monkeypatch.setattr(html_module.shutil, "which", lambda name: None)
    assert find_renderer() is None
    assert find_renderer("cmark") is None


@pytest.mark.skipif(shutil.which("cat") is None, reason="needs cat")
def test_program_renderer_pipes_markdown():
    renderer = ProgramRenderer(Path(shutil.which("cat")))
    assert renderer.render("# Title\n") == "# Title\n"


@pytest.mark.skipif(shutil.which("false") is None, reason="needs false")
def test_program_renderer_failure():
    renderer = ProgramRenderer(Path(shutil.which("false")))
    with pytest.raises(RuntimeError, match="exit code 1"):
        renderer.render("text")
