"""cli: The `docmark` command line program.

The command line usage is:

     ```
     docmark INFILE OUTFILE [--html|--md|--markdown|--pandoc] [--mode=MODE]
             [--css[=| ]CSS_FILE] [--convert[=| ]MD_PROG] [--quiet] [--trace]
     docmark INFILE --run
     docmark --help | --version | --license
     ```

"""

# <----------------------------- 80 characters -----------------------------> #

from dataclasses import dataclass, field
import os
from pathlib import Path
import shutil  # Used for shutil.which()
import sys
from typing import List, Optional, Sequence

from . import __version__
from .emit import ConfigurationError, Options, convert
from .examples import run_example

USAGE: str = f"""docmark {__version__} - extract documentation in Markdown and
convert it optionally into HTML.

Usage: docmark INFILE OUTFILE [--html|--md|--pandoc] [--css=FILE] ...

     INFILE: the input file with embedded Markdown text after #' comments,
        or a Markdown (.md) file to convert directly into HTML.
     OUTFILE: should have either the extension .html or .md
        for automatic selection of the correct output format.
        Deduction of the output format can be overridden by mode flags:
     --html: give HTML output even if OUTFILE extension is not .html
     --md, --markdown: give Markdown output even if OUTFILE extension is not .md
     --pandoc: give Markdown output that starts with the YAML header
     --mode=MODE: one of html, markdown, md or pandoc
     --css=FILE, --css FILE: link FILE instead of the built in stylesheet
     --convert=PROG, --convert PROG: the Markdown to HTML converter (default: markdown, cmark)
     --quiet: do not report the written file
     --trace: print tracing information
     --run: import INFILE (a Python file) and run its example section
     --help: show this help text
     --version: show the program version
     --license: show the license

  Example: extract the embedded documentation of a file as HTML:
       docmark module.py module.html
"""

LICENSE: str = "MIT License"

VALUE_FLAGS = ("--mode", "--css", "--convert")

MODE_FLAGS = {
    "--html": "html",
    "--md": "markdown",
    "--markdown": "markdown",
    "--pandoc": "pandoc",
}


# Arguments:
@dataclass
class Arguments:
    """Arguments: Command line arguments scanner.

    Attributes:
    * *arguments* (Sequence[str]): The command line arguments to process.
    * *files* (List[Path]): The INFILE and OUTFILE paths.
    * *mode* (str): The explicit mode or "".
    * *css* (str): The stylesheet to link or "".
    * *program* (str): The converter program or "".
    * *quiet* (bool): True if `--quiet` is present.
    * *tracing* (str): Non empty if `--trace` is present.
    * *run* (bool): True if `--run` is present.
    * *show* (str): "help", "version" or "license" when requested.
    * *pending* (str): A value flag (e.g. `--css`) waiting for its value.
    * *errors* (List[str]):
      The list of errors collected during command line parsing.

    Constructor:
    * Arguments(arguments)

    """

    arguments: Sequence[str]
    files: List[Path] = field(init=False, default_factory=list)
    mode: str = field(init=False, default="")
    css: str = field(init=False, default="")
    program: str = field(init=False, default="")
    quiet: bool = field(init=False, default=False)
    tracing: str = field(init=False, default="")
    run: bool = field(init=False, default=False)
    show: str = field(init=False, default="")
    pending: str = field(init=False, default="")
    errors: List[str] = field(init=False, default_factory=list)

    # Arguments.__post_init__():
    def __post_init__(self) -> None:
        """Scan the arguments of an Arguments object."""
        self.arguments = tuple(self.arguments)  # Ensure no more changes occur
        if not self.arguments:
            self.show = "help"
        argument: str
        for argument in self.arguments:
            if self.pending:
                self.set_value(self.pending, argument)
                self.pending = ""
            elif self.match_mode_flag(argument):
                pass
            elif self.match_value_flag(argument):
                pass
            elif self.match_switch_flag(argument):
                pass
            elif argument.startswith("--"):
                self.errors.append(
                    f"{argument} is not a recognized command line option")
            else:
                self.files.append(Path(argument))
        if self.pending:
            self.errors.append(f"{self.pending} needs a value")
        if not self.show:
            self.check_files()

    # Arguments.match_mode_flag():
    def match_mode_flag(self, argument: str) -> bool:
        """Match the `--html`, `--md`, `--markdown` and `--pandoc` flags."""
        mode: Optional[str] = MODE_FLAGS.get(argument)
        if mode is None:
            return False
        if self.mode and self.mode != mode:
            self.errors.append(
                f"{argument} conflicts with the earlier mode '{self.mode}'")
        self.mode = mode
        return True

    # Arguments.match_value_flag():
    def match_value_flag(self, argument: str) -> bool:
        """Match the `--mode`, `--css` and `--convert` flags.

        The value either follows an `=` (`--css=FILE`) or is the next
        argument (`--css FILE`).

        Arguments:
        * *argument* (str): The argument to match against.

        Returns:
        * (bool): True if a match is found and False otherwise.

        """
        flag: str
        separator: str
        value: str
        flag, separator, value = argument.partition("=")
        if flag not in VALUE_FLAGS:
            return False
        if separator:
            self.set_value(flag, value)
        else:
            self.pending = flag
        return True

    # Arguments.set_value():
    def set_value(self, flag: str, value: str) -> None:
        """Store the *value* of a value *flag*."""
        if flag == "--mode":
            self.mode = value
        elif flag == "--css":
            self.css = value
        elif shutil.which(value):
            self.program = value
        else:
            self.errors.append(
                f"'{flag}={value}': {value} executable not found")

    # Arguments.match_switch_flag():
    def match_switch_flag(self, argument: str) -> bool:
        """Match the flags that take no value."""
        if argument == "--quiet":
            self.quiet = True
        elif argument == "--trace":
            self.tracing = " "
        elif argument == "--run":
            self.run = True
        elif argument in ("--help", "-h"):
            self.show = "help"
        elif argument == "--version":
            self.show = self.show or "version"
        elif argument == "--license":
            self.show = self.show or "license"
        else:
            return False
        return True

    # Arguments.check_files():
    def check_files(self) -> None:
        """Verify the number and accessibility of the file arguments."""
        files: List[Path] = self.files
        wanted: int = 1 if self.run else 2
        if len(files) != wanted:
            self.errors.append(
                f"Expected {wanted} file argument(s), got {len(files)} "
                f"(use --help for usage)")
            return
        if not files[0].is_file():
            self.errors.append(f"{files[0]} is not a readable file")
        if not self.run and not self.check_file_writable(str(files[1])):
            self.errors.append(f"Unable to write to {files[1]}")

    # Arguments.check_file_writable():
    @staticmethod
    def check_file_writable(file_name: str) -> bool:
        """Check if a file is writable.

        Arguments:
        * *file_name* (str): The file name to check for writable.

        Returns:
        * (bool): True if writable and False otherwise.

        """
        if os.path.exists(file_name):
            if os.path.isfile(file_name):
                return os.access(file_name, os.W_OK)
            return False  # path is a dir, so cannot write as a file

        # target does not exist, check perms on parent dir
        parent_directory: str = os.path.dirname(file_name) or "."
        return os.access(parent_directory, os.W_OK)

    # Arguments.options():
    def options(self) -> Options:
        """Return the conversion Options."""
        return Options(mode=self.mode, css=self.css, program=self.program,
                       quiet=self.quiet)

    # Arguments.process():
    def process(self) -> int:
        """Process the command line Arguments and return the exit code."""
        tracing: str = self.tracing
        next_tracing: str = tracing + " " if tracing else ""
        if tracing:
            print(f"{tracing}=>Arguments.process()")

        return_code: int = 0
        if self.show == "help":
            print(USAGE)
        elif self.show == "version":
            print(__version__)
        elif self.show == "license":
            print(LICENSE)
        elif self.errors:
            error: str
            for error in self.errors:
                print(error, file=sys.stderr)
            return_code = 1
        else:
            try:
                if self.run:
                    run_example(self.files[0], tracing=next_tracing)
                else:
                    convert(self.files[0], self.files[1], self.options(),
                            tracing=next_tracing)
            except ConfigurationError as configuration_error:
                print(f"Error: {configuration_error}", file=sys.stderr)
                return_code = 1
            except OSError as os_error:
                print(f"Error: {os_error}", file=sys.stderr)
                return_code = 1
            except UnicodeError as unicode_error:
                print(f"Error: {unicode_error}", file=sys.stderr)
                return_code = 1
            except RuntimeError as runtime_error:
                print(f"Error: {runtime_error}", file=sys.stderr)
                return_code = 1

        if tracing:
            print(f"{tracing}<=Arguments.process()=>{return_code}")
        return return_code


def main(arguments: Optional[Sequence[str]] = None) -> int:
    """Extract documentation as requested on the command line."""
    if arguments is None:
        arguments = sys.argv[1:]
    return Arguments(arguments).process()
