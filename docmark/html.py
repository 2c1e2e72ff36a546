"""html: Markdown to HTML rendering and HTML post processing.

The actual Markdown to HTML conversion is done by an external program
(`markdown` or `cmark` by default) that reads Markdown on standard input and
writes HTML on standard output.  Before rendering, empty caption images are
rewritten to explicit image tags.  After rendering, `<pre>` elements of the
synopsis section and language tagged code blocks get extra CSS classes.

"""

# <----------------------------- 80 characters -----------------------------> #

from dataclasses import dataclass
from pathlib import Path
import re
import shutil  # Used for shutil.which()
import subprocess  # Used to execute the .md => .html converter program.
from typing import List, Optional, Pattern, Sequence

from .templates import HTML_CLOSE, HTML_TEMPLATE, HTML_TITLE

DEFAULT_PROGRAMS: Sequence[str] = ("markdown", "cmark")

IMAGE_PATTERN: Pattern = re.compile(r"!\[\]\((.+?)\)")
H2_PATTERN: Pattern = re.compile(r"^<h2>")
SYNOPSIS_PATTERN: Pattern = re.compile(r"^<h2>.*Synopsis", re.IGNORECASE)
PRE_PATTERN: Pattern = re.compile(r"<pre>")
CODE_CLASS_PATTERN: Pattern = re.compile(
    r"(<pre class='code)'(><code class=')(.+?)'>")
LANGUAGE_CLASS_PATTERN: Pattern = re.compile(
    r"<pre><code class=\"language-([^\"\s]+)\">")


def rewrite_images(line: str) -> str:
    """Rewrite `![](url)` into `<image src="url"></img>`.

    Images with a caption are left for the renderer.

    """
    return IMAGE_PATTERN.sub(r'<image src="\1"></img>', line)


# ProgramRenderer:
@dataclass(frozen=True)
class ProgramRenderer:
    """ProgramRenderer: Render Markdown with an external program.

    Attributes:
    * *program* (Path): The converter executable.

    Constructor:
    * ProgramRenderer(program)

    """

    program: Path

    # ProgramRenderer.render():
    def render(self, markdown: str) -> str:
        """Return the HTML rendering of *markdown*.

        Raises:
        * RuntimeError: If the converter program fails.

        """
        result: subprocess.CompletedProcess = subprocess.run(
            (str(self.program),), input=markdown.encode("utf-8"),
            capture_output=True)
        if result.returncode != 0:
            error: str = result.stderr.decode("utf-8", errors="replace")
            raise RuntimeError(
                f"{self.program} failed with exit code {result.returncode}: "
                f"{error.strip()}")
        return result.stdout.decode("utf-8", errors="replace")


def find_renderer(program: str = "") -> Optional[ProgramRenderer]:
    """Return a ProgramRenderer for *program* or for the first default.

    Arguments:
    * *program* (str):
      The converter program name or path.  If empty, `markdown` and then
      `cmark` are searched for on the `PATH`.

    Returns:
    * (Optional[ProgramRenderer]): None if no executable is found.

    """
    candidates: Sequence[str] = (program,) if program else DEFAULT_PROGRAMS
    candidate: str
    for candidate in candidates:
        which: Optional[str] = shutil.which(candidate)
        if which:
            return ProgramRenderer(Path(which))
    return None


def fix_html_lines(html: str) -> str:
    """Add synopsis and code language classes to rendered HTML.

    While inside a level 2 section whose heading contains "Synopsis", each
    `<pre>` becomes `<pre class='synopsis'>`.  A code block rendered as
    `<pre class='code'><code class='LANG'>` becomes
    `<pre class='code LANG'><code class='LANG'>`, and the CommonMark form
    `<pre><code class="language-LANG">` gets `class="LANG"` on its `<pre>`.

    """
    lines: List[str] = []
    synopsis: bool = False
    line: str
    for line in html.split("\n"):
        if H2_PATTERN.match(line):
            synopsis = bool(SYNOPSIS_PATTERN.match(line))
        if synopsis and PRE_PATTERN.search(line):
            line = PRE_PATTERN.sub("<pre class='synopsis'>", line, count=1)
        line = CODE_CLASS_PATTERN.sub(r"\1 \3'\2\3'>", line, count=1)
        line = LANGUAGE_CLASS_PATTERN.sub(
            r'<pre class="\1"><code class="language-\1">', line, count=1)
        lines.append(line)
    return "\n".join(lines)


def finalize_html(fields: dict, body: str, extracting: bool) -> str:
    """Return the complete HTML document.

    Arguments:
    * *fields* (dict): The Document template fields.
    * *body* (str): The post processed HTML body.
    * *extracting* (bool): If True, a title/author/date block is emitted.

    """
    parts: List[str] = [HTML_TEMPLATE.format(**fields)]
    if extracting:
        parts.append(HTML_TITLE.format(**fields))
    parts.append(body if body.endswith("\n") else body + "\n")
    parts.append(HTML_CLOSE)
    return "".join(parts)
