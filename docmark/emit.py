"""emit: Output modes and the extraction pipeline.

The output mode is one of `html`, `markdown` (alias `md`) or `pandoc`.
Each mode is an object with a `convert(input_path, output_path, options)`
method, registered by name in `MODES`.  When no mode is given, it is
inferred from the output file suffix (`.html` or `.md`).  A `.md` input file
is converted directly to HTML without looking for `#'` comment lines.

"""

# <----------------------------- 80 characters -----------------------------> #

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict, IO, List, Optional, Tuple

from .extract import PackageInfo, extract_lines
from .frontmatter import Document, FrontMatterParser
from .html import finalize_html, find_renderer, fix_html_lines, rewrite_images
from .macros import Macros
from .sections import SectionReorderer
from .templates import MARKDOWN_HEADER

MARKDOWN_SUFFIX: str = ".md"
HTML_SUFFIX: str = ".html"
MODE_ALIASES: Dict[str, str] = {"md": "markdown"}
SUFFIX_MODES: Dict[str, str] = {HTML_SUFFIX: "html", MARKDOWN_SUFFIX: "markdown"}


class ConfigurationError(RuntimeError):
    """Raised for unusable options before any file is read or written."""


# Options:
@dataclass(frozen=True)
class Options:
    """Options: The settings of one conversion run.

    Attributes:
    * *mode* (str): "", "html", "markdown", "md" or "pandoc".
      An empty mode is inferred from the output file suffix.
    * *css* (str): A stylesheet to link instead of the built in one.
    * *program* (str): The Markdown to HTML converter program.
      If empty, `markdown` and then `cmark` are searched for.
    * *renderer* (Any): An object with a `render(markdown) -> html` method.
      If None, one is created from *program* when HTML output is needed.
    * *quiet* (bool): If True, the success message is suppressed.

    Constructor:
    * Options(mode, css, program, renderer, quiet)

    """

    mode: str = ""
    css: str = ""
    program: str = ""
    renderer: Any = None
    quiet: bool = False


def transform(input_path: Path, extracting: bool, options: Options,
              tracing: str = "") -> Tuple[Document, List[str]]:
    """Run the line pipeline over *input_path*.

    Arguments:
    * *input_path* (Path): The file to read.
    * *extracting* (bool): True for source files using `#'` comments.
    * *options* (Options): Supplies the `css` stylesheet.

    Returns:
    * (Document): The document metadata.
    * (List[str]): The transformed body lines.

    Raises:
    * OSError: If the input or an include file can not be read.

    """
    next_tracing: str = tracing + " " if tracing else ""
    if tracing:
        print(f"{tracing}=>transform({input_path}, {extracting})")
    package: PackageInfo = PackageInfo.scan(input_path, tracing=next_tracing)
    lines: List[str] = extract_lines(input_path, extracting,
                                     tracing=next_tracing)
    document: Document = Document.create(input_path, options.css)
    macros: Macros = Macros(package)
    parser: FrontMatterParser = FrontMatterParser(
        document, macros, options.css)
    reorderer: SectionReorderer = SectionReorderer()

    body: List[str] = []
    line_number: int
    line: str
    for line_number, line in enumerate(lines, 1):
        if parser.feed(line_number, line):
            continue
        line = rewrite_images(macros.substitute(line))
        body.extend(reorderer.feed(line))
    body.extend(reorderer.finish())
    parser.finish(str(input_path))

    if tracing:
        print(f"{tracing}<=transform({input_path}, {extracting})"
              f"=>{document.title!r}, {len(body)} lines")
    return document, body


def write_text(output_path: Path, text: str, options: Options) -> None:
    """Write *text* into *output_path* and report success."""
    output_file: IO[str]
    with open(output_path, "w", encoding="utf-8") as output_file:
        output_file.write(text)
    if not options.quiet:
        print(f"Success: file {output_path} was written!")


# Mode:
class Mode:
    """Mode: Base class of the output modes.

    Sub-classes implement *render*() to turn the Document and body text
    into the text of the output file.

    """

    # Mode.convert():
    def convert(self, input_path: Path, output_path: Path,
                options: Options, tracing: str = "") -> None:
        """Convert *input_path* into *output_path*."""
        next_tracing: str = tracing + " " if tracing else ""
        if tracing:
            print(f"{tracing}=>{type(self).__name__}.convert("
                  f"{input_path}, {output_path})")
        extracting: bool = input_path.suffix != MARKDOWN_SUFFIX
        document: Document
        body: List[str]
        document, body = transform(input_path, extracting, options,
                                   tracing=next_tracing)
        body_text: str = "".join(f"{line}\n" for line in body)
        text: str = self.render(document, body_text, extracting, options)
        write_text(output_path, text, options)
        if tracing:
            print(f"{tracing}<={type(self).__name__}.convert("
                  f"{input_path}, {output_path})")

    # Mode.render():
    def render(self, document: Document, body_text: str, extracting: bool,
               options: Options) -> str:
        """Return the output file text."""
        raise NotImplementedError(f"{self}.render() is not implemented.")


class MarkdownMode(Mode):
    """Plain Markdown with a title, author and date heading block."""

    def render(self, document: Document, body_text: str, extracting: bool,
               options: Options) -> str:
        return MARKDOWN_HEADER.format(**document.fields()) + "\n" + body_text


class PandocMode(Mode):
    """Markdown preceded by the verbatim front matter block."""

    def render(self, document: Document, body_text: str, extracting: bool,
               options: Options) -> str:
        return document.raw_front_matter + "\n" + body_text


class HtmlMode(Mode):
    """A complete HTML document rendered by the external converter."""

    def render(self, document: Document, body_text: str, extracting: bool,
               options: Options) -> str:
        renderer: Any = options.renderer
        if renderer is None:
            raise ConfigurationError("HTML mode needs a Markdown renderer")
        html: str = fix_html_lines(renderer.render(body_text))
        return finalize_html(document.fields(), html, extracting)


MODES: Dict[str, Mode] = {
    "html": HtmlMode(),
    "markdown": MarkdownMode(),
    "pandoc": PandocMode(),
}


def register_mode(name: str, mode: Mode) -> None:
    """Register an additional output *mode* under *name*."""
    MODES[name] = mode


def resolve_mode(input_path: Path, output_path: Path, mode: str = "") -> str:
    """Return the registered mode name used for a conversion.

    Raises:
    * ConfigurationError: For an unknown explicit mode, a `.md` input with a
      non `.html` output, equal suffixes without explicit mode, or an
      output suffix that does not imply a mode.

    """
    name: str = MODE_ALIASES.get(mode, mode)
    if name and name not in MODES:
        known: str = ", ".join(sorted(tuple(MODES) + tuple(MODE_ALIASES)))
        raise ConfigurationError(
            f"Unknown mode '{mode}', must be one of: {known}")

    input_suffix: str = input_path.suffix
    output_suffix: str = output_path.suffix
    if input_suffix == MARKDOWN_SUFFIX:
        if output_suffix != HTML_SUFFIX:
            raise ConfigurationError(
                "For converting Markdown files directly the file extension "
                f"of the output file must be {HTML_SUFFIX}")
        return "html"
    if name:
        return name
    if input_suffix == output_suffix:
        raise ConfigurationError(
            "Input and output files must have different file extensions")
    inferred: Optional[str] = SUFFIX_MODES.get(output_suffix)
    if inferred is None:
        raise ConfigurationError(
            f"Unknown output file format '{output_suffix}', must be either "
            f"{HTML_SUFFIX} or {MARKDOWN_SUFFIX}")
    return inferred


def convert(input_path: Path, output_path: Path,
            options: Optional[Options] = None, tracing: str = "") -> str:
    """Extract the documentation of *input_path* into *output_path*.

    Arguments:
    * *input_path* (Path): The source file, or a `.md` file.
    * *output_path* (Path): The file to write.
    * *options* (Optional[Options]): The conversion options.

    Returns:
    * (str): The name of the mode that was used.

    Raises:
    * ConfigurationError: If the options are unusable.  This is detected
      before any file is read or written.
    * OSError: If a file can not be read or written.

    """
    next_tracing: str = tracing + " " if tracing else ""
    if tracing:
        print(f"{tracing}=>convert({input_path}, {output_path})")
    if options is None:
        options = Options()
    input_path = Path(input_path)
    output_path = Path(output_path)
    name: str = resolve_mode(input_path, output_path, options.mode)
    if name == "html" and options.renderer is None:
        renderer: Any = find_renderer(options.program)
        if renderer is None:
            wanted: str = options.program or "markdown or cmark"
            raise ConfigurationError(
                f"HTML output needs a Markdown to HTML converter, but "
                f"{wanted} was not found; install cmark "
                f"(https://github.com/commonmark/cmark) or name a converter "
                f"with --convert=PROG")
        options = replace(options, renderer=renderer)
    MODES[name].convert(input_path, output_path, options,
                        tracing=next_tracing)
    if tracing:
        print(f"{tracing}<=convert({input_path}, {output_path})=>{name}")
    return name
