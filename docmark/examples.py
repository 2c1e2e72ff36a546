"""examples: Run the example section embedded in a Python file.

The example is the first fenced code block after a level 2 or 3 heading
containing the word "Example", all inside `#'` documentation comments:

     ```
     #' ## <a name='example'>EXAMPLE</a>
     #'
     #' ```
     #' print(hello("world"))
     #' ```
     ```

The file is imported as a module first, so the example can use everything
the file defines.

"""

# <----------------------------- 80 characters -----------------------------> #

import importlib.util
from pathlib import Path
import re
from typing import Any, Dict, IO, List, Pattern

from .emit import ConfigurationError
from .extract import read_lines

EXAMPLE_HEADING_PATTERN: Pattern = re.compile(
    r"^\s*#'\s+#{2,3}\s.+Example", re.IGNORECASE)
FENCE_PATTERN: Pattern = re.compile(r"^\s*#'\s+>?\s*```")
CODE_PATTERN: Pattern = re.compile(r"^\s*#' ?(.*)")


def extract_example(path: Path) -> str:
    """Return the example code of *path* or "" if there is none."""
    code_lines: List[str] = []
    in_example: bool = False
    in_code: bool = False
    input_file: IO[str]
    with open(path, "r", encoding="utf-8", errors="replace") as input_file:
        line: str
        for line in read_lines(input_file):
            if in_code:
                if FENCE_PATTERN.match(line):
                    return "".join(f"{code}\n" for code in code_lines)
                match = CODE_PATTERN.match(line)
                if match:
                    code_lines.append(match.group(1))
            elif in_example:
                if FENCE_PATTERN.match(line):
                    in_code = True
            elif EXAMPLE_HEADING_PATTERN.match(line):
                in_example = True
    return ""


def run_example(path: Path, tracing: str = "") -> Dict[str, Any]:
    """Import *path* and execute its example code in the module namespace.

    Arguments:
    * *path* (Path): A Python (`.py`) file.

    Returns:
    * (Dict[str, Any]): The module namespace after the example ran.

    Raises:
    * ConfigurationError: If *path* is not a Python file or has no example.

    """
    if tracing:
        print(f"{tracing}=>run_example({path})")
    path = Path(path)
    if path.suffix != ".py":
        raise ConfigurationError(
            f"{path}: examples can only be run from Python (.py) files")
    code: str = extract_example(path)
    if not code:
        raise ConfigurationError(f"{path}: no example section found")

    spec: Any = importlib.util.spec_from_file_location(path.stem, path)
    module: Any = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    exec(compile(code, f"{path}:example", "exec"), module.__dict__)
    if tracing:
        print(f"{tracing}<=run_example({path})")
    return module.__dict__
