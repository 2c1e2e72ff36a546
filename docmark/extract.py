"""extract: Pull documentation comment lines out of source files.

A documentation line is any line whose first non blank characters are the
`#'` comment prefix.  The prefix (and at most one following space) is
stripped and the remainder becomes Markdown body text.  A documentation line
of the form `#' #include "path"` is replaced by the verbatim content of the
named file.  Everything else is ordinary source code and is dropped.

Files are decoded as UTF-8; undecodable bytes become U+FFFD so that a stray
Latin-1 byte in a code line does not stop the extraction.

"""

# <----------------------------- 80 characters -----------------------------> #

from dataclasses import dataclass
from pathlib import Path
import re
from typing import Dict, IO, List, Optional, Pattern, Tuple

INCLUDE_PATTERN: Pattern = re.compile(r"^\s*#' +#include +\"(.*)\"")
COMMENT_PATTERN: Pattern = re.compile(r"^\s*#' ?(.*)")

# Line kinds returned by LineClassifier.classify():
BODY: str = "body"
INCLUDE: str = "include"
CODE: str = "code"

# Package declaration patterns keyed by file suffix.  Each pattern yields
# a (name, version) pair; a pattern with a single group yields only a version
# and the file stem is used as the name.
PACKAGE_PATTERNS: Dict[str, Pattern] = {
    ".tcl": re.compile(r"^\s*package\s+provide\s+([^\s]+)\s+([.0-9a-z]+)"),
    ".tm": re.compile(r"^\s*package\s+provide\s+([^\s]+)\s+([.0-9a-z]+)"),
    ".py": re.compile(r"^__version__\s*=\s*[\"']([^\"']+)[\"']"),
}


# PackageInfo:
@dataclass(frozen=True)
class PackageInfo:
    """PackageInfo: Package name and version declared by an input file.

    Attributes:
    * *name* (str): The declared package name or "" if not found.
    * *version* (str): The declared package version or "" if not found.
    * *basename* (str): The input file name without directory and suffix.

    Constructor:
    * PackageInfo(name, version, basename)
    * PackageInfo.scan(path)

    """

    name: str = ""
    version: str = ""
    basename: str = ""

    # PackageInfo.scan():
    @staticmethod
    def scan(path: Path, tracing: str = "") -> "PackageInfo":
        """Scan a file for its first package declaration.

        Arguments:
        * *path* (Path): The input file to scan.

        Returns:
        * (PackageInfo): The package information.  Name and version are
          empty if *path* has an unsupported suffix or no declaration.

        Raises:
        * OSError: If *path* can not be read.

        """
        if tracing:
            print(f"{tracing}=>PackageInfo.scan({path})")
        basename: str = path.stem
        info: PackageInfo = PackageInfo("", "", basename)
        pattern: Optional[Pattern] = PACKAGE_PATTERNS.get(path.suffix)
        if pattern is not None:
            input_file: IO[str]
            with open(path, "r", encoding="utf-8",
                      errors="replace") as input_file:
                line: str
                for line in input_file:
                    match = pattern.match(line)
                    if match:
                        groups: Tuple[str, ...] = match.groups()
                        if len(groups) == 2:
                            info = PackageInfo(groups[0], groups[1], basename)
                        else:
                            info = PackageInfo(basename, groups[0], basename)
                        break
        if tracing:
            print(f"{tracing}<=PackageInfo.scan({path})=>{info}")
        return info


# LineClassifier:
@dataclass(frozen=True)
class LineClassifier:
    """LineClassifier: Decide what to do with one raw input line.

    Attributes:
    * *extracting* (bool):
      True when the input is source code using the `#'` prefix convention.
      False when the input is already Markdown and every line is body text.

    Constructor:
    * LineClassifier(extracting)

    """

    extracting: bool = True

    # LineClassifier.classify():
    def classify(self, line: str) -> Tuple[str, str]:
        """Classify a single line.

        Arguments:
        * *line* (str): The raw line without its line terminator.

        Returns:
        * (str): One of `BODY`, `INCLUDE` or `CODE`.
        * (str): The body text, the include path, or "" for code.

        """
        if not self.extracting:
            return BODY, line
        match = INCLUDE_PATTERN.match(line)
        if match:
            return INCLUDE, match.group(1)
        match = COMMENT_PATTERN.match(line)
        if match:
            return BODY, match.group(1)
        return CODE, ""


def read_lines(text_file: IO[str]) -> List[str]:
    """Return the lines of *text_file* without their line terminators.

    Only newlines end a line; form feeds and other Unicode line separators
    stay part of the line text.

    """
    return [line[:-1] if line.endswith("\n") else line
            for line in text_file]


def resolve_include(include: str, base_directory: Path) -> List[str]:
    """Return the lines of an included file.

    Relative paths are taken relative to *base_directory* (the directory of
    the including file).  Included lines are never classified again, so an
    include directive inside an included file stays literal text.

    Raises:
    * OSError: If the include file can not be read.

    """
    include_path: Path = Path(include)
    if not include_path.is_absolute():
        include_path = base_directory / include_path
    include_file: IO[str]
    with open(include_path, "r", encoding="utf-8",
              errors="replace") as include_file:
        return read_lines(include_file)


def extract_lines(input_path: Path, extracting: bool,
                  tracing: str = "") -> List[str]:
    """Read *input_path* and return its documentation body lines.

    Arguments:
    * *input_path* (Path): The source or Markdown file to read.
    * *extracting* (bool): See LineClassifier.

    Returns:
    * (List[str]): The body lines with includes expanded.

    Raises:
    * OSError: If the input or an included file can not be read.

    """
    if tracing:
        print(f"{tracing}=>extract_lines({input_path}, {extracting})")
    classifier: LineClassifier = LineClassifier(extracting)
    base_directory: Path = input_path.parent
    body_lines: List[str] = []
    input_file: IO[str]
    with open(input_path, "r", encoding="utf-8",
              errors="replace") as input_file:
        raw_line: str
        for raw_line in read_lines(input_file):
            kind: str
            text: str
            kind, text = classifier.classify(raw_line)
            if kind == INCLUDE:
                if tracing:
                    print(f"{tracing}Including {text}")
                body_lines.extend(resolve_include(text, base_directory))
            elif kind == BODY:
                body_lines.append(text)
    if tracing:
        print(f"{tracing}<=extract_lines({input_path}, {extracting})"
              f"=>{len(body_lines)} lines")
    return body_lines
