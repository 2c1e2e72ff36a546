"""frontmatter: Document metadata and the front matter state machine.

A front matter block is delimited by two `---` lines and must start within
the first four body lines.  Each `key: value` line with a lower case key is
kept in the raw block (for Pandoc output) and the `title`, `author`, `date`
and `style` keys also set the corresponding Document attribute.  As an
older alternative, lines 1 to 3 may start with `%` to give the title, the
author and the date respectively.

"""

# <----------------------------- 80 characters -----------------------------> #

from dataclasses import dataclass
import enum
from pathlib import Path
import re
import sys
from typing import Any, Dict, List, Pattern

import yaml

from .macros import Macros, today_text
from .templates import DEFAULT_STYLE, stylesheet_link

DELIMITER_PATTERN: Pattern = re.compile(r"^---")
KEY_VALUE_PATTERN: Pattern = re.compile(r"^\s*([a-z]+): +(.+)")
PERCENT_PATTERN: Pattern = re.compile(r"^%")
PERCENT_PREFIX_PATTERN: Pattern = re.compile(r"^% +")
PERCENT_FIELDS: Dict[int, str] = {1: "title", 2: "author", 3: "date"}
DOCUMENT_KEYS = ("title", "author", "date")

# Line numbers are counted from 1.
PERCENT_LINE_LIMIT: int = 4
FRONT_MATTER_LINE_LIMIT: int = 5


# Document:
@dataclass
class Document:
    """Document: Metadata of the document being generated.

    Attributes:
    * *title* (str): The document title.
    * *author* (str): The document author.
    * *date* (str): The document date (default: today as `YYYY-MM-DD`).
    * *style* (str): Either the built in `<style>` block or one or more
      stylesheet `<link>` elements.
    * *raw_front_matter* (str): The front matter block including both `---`
      delimiter lines, with every line terminated by a newline.

    Constructor:
    * Document(title, author, date, style, raw_front_matter)
    * Document.create(input_path, css)

    """

    title: str
    author: str = "NN"
    date: str = ""
    style: str = DEFAULT_STYLE
    raw_front_matter: str = ""

    # Document.create():
    @staticmethod
    def create(input_path: Path, css: str = "") -> "Document":
        """Return the default Document for *input_path*."""
        style: str = stylesheet_link(css) if css else DEFAULT_STYLE
        return Document(title=f"Documentation {input_path.stem}",
                        date=today_text(), style=style)

    # Document.fields():
    def fields(self) -> Dict[str, str]:
        """Return the template fields of the Document."""
        return {"title": self.title, "author": self.author,
                "date": self.date, "style": self.style}


class FrontMatterState(enum.Enum):
    """The states of FrontMatterParser."""

    BEFORE = "before"
    IN_FRONT_MATTER = "in_front_matter"
    AFTER = "after"


# FrontMatterParser:
class FrontMatterParser:
    """FrontMatterParser: Consume front matter lines from the body stream.

    Attributes:
    * *document* (Document): The Document that is filled in.
    * *macros* (Macros): Applied to each front matter line.
    * *css* (str): An extra stylesheet to link after a `style:` stylesheet.
    * *state* (FrontMatterState): The current state.

    Constructor:
    * FrontMatterParser(document, macros, css)

    """

    def __init__(self, document: Document, macros: Macros,
                 css: str = "") -> None:
        """Initialize a FrontMatterParser."""
        self.document: Document = document
        self.macros: Macros = macros
        self.css: str = css
        self.state: FrontMatterState = FrontMatterState.BEFORE
        self.style_set: bool = False
        self.raw_lines: List[str] = []

    # FrontMatterParser.feed():
    def feed(self, line_number: int, line: str) -> bool:
        """Offer one body line to the parser.

        Arguments:
        * *line_number* (int): The 1 based position of *line* in the body.
        * *line* (str): The body line.

        Returns:
        * (bool): True if the line was consumed as metadata and must not be
          forwarded to the body output.

        """
        if line_number < PERCENT_LINE_LIMIT and PERCENT_PATTERN.match(line):
            setattr(self.document, PERCENT_FIELDS[line_number],
                    PERCENT_PREFIX_PATTERN.sub("", line))
            return True

        state: FrontMatterState = self.state
        is_delimiter: bool = bool(DELIMITER_PATTERN.match(line))
        if state is FrontMatterState.BEFORE:
            if line_number >= FRONT_MATTER_LINE_LIMIT:
                self.state = FrontMatterState.AFTER
            elif is_delimiter:
                self.raw_lines.append(line)
                self.state = FrontMatterState.IN_FRONT_MATTER
                return True
        elif state is FrontMatterState.IN_FRONT_MATTER:
            if is_delimiter:
                self.raw_lines.append(line)
                self.close()
            else:
                self.key_value(self.macros.substitute(line))
            return True
        return False

    # FrontMatterParser.key_value():
    def key_value(self, line: str) -> None:
        """Record a substituted front matter line and apply its key."""
        self.raw_lines.append(line)
        match = KEY_VALUE_PATTERN.match(line)
        if match:
            key: str = match.group(1)
            value: str = match.group(2)
            if key == "style":
                self.set_style(value)
            elif key in DOCUMENT_KEYS:
                setattr(self.document, key, value)

    # FrontMatterParser.set_style():
    def set_style(self, href: str) -> None:
        """Link *href* as stylesheet, followed by the `css` stylesheet."""
        style: str = stylesheet_link(href)
        if self.css:
            style += "\n" + stylesheet_link(self.css)
        self.document.style = style
        self.style_set = True

    # FrontMatterParser.close():
    def close(self, tracing: str = "") -> None:
        """Finish the front matter block."""
        self.state = FrontMatterState.AFTER
        self.document.raw_front_matter = "".join(
            f"{line}\n" for line in self.raw_lines)
        if not self.style_set:
            css: str = self.yaml_css(tracing)
            if css:
                self.set_style(css)

    # FrontMatterParser.yaml_css():
    def yaml_css(self, tracing: str = "") -> str:
        """Return the `output: html_document: css:` entry or ""."""
        text: str = "\n".join(self.raw_lines[1:-1])
        data: Any = None
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as yaml_error:
            if tracing:
                print(f"{tracing}Front matter is not YAML: {yaml_error}")
        css: Any = None
        if isinstance(data, dict):
            output: Any = data.get("output")
            if isinstance(output, dict):
                html_document: Any = output.get("html_document")
                if isinstance(html_document, dict):
                    css = html_document.get("css")
        return css if isinstance(css, str) else ""

    # FrontMatterParser.finish():
    def finish(self, source: str = "") -> None:
        """Warn if the input ended inside an unterminated front matter."""
        if self.state is FrontMatterState.IN_FRONT_MATTER:
            self.document.raw_front_matter = "".join(
                f"{line}\n" for line in self.raw_lines)
            print(f"Warning: {source}: front matter block is never closed "
                  f"by a '---' line", file=sys.stderr)
