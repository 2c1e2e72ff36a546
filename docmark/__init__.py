"""docmark: extract embedded Markdown DOCumentation from source files.

<!---------------------------------------- 100 characters ----------------------------------------->

## Table of Contents:

* [Introduction](#introduction)
* [Command Line](#command-line)
* [Documentation Strategy](#documentation-strategy)
* [License](#license)

## Introduction

`docmark` extracts the documentation that is embedded in source code as comment lines starting
with `#'` and writes it out as Markdown (`.md`) or HTML (`.html`).  The `#'` prefix works in any
language that uses `#` for comments (Python, Tcl, R, shell, ...).  A plain Markdown file can also
be converted directly into HTML.  The HTML conversion itself is done by an external Markdown
program (`markdown` or [cmark](https://github.com/commonmark/cmark)), so there is no static site
generator to install or set up.

## Command Line

The command line summary is:

     ```
     docmark INFILE OUTFILE [--html|--md|--pandoc] [--css=FILE] [--convert=PROG] [--quiet]
     ```

* The suffix of OUTFILE selects the output format: `.md` for Markdown, `.html` for HTML.
  `--html`, `--md` and `--pandoc` override this.  `--pandoc` writes Markdown that starts with the
  YAML front matter block, for further processing with [pandoc](https://pandoc.org).
* If INFILE ends with `.md`, it is converted directly and OUTFILE must end with `.html`.
* `--css=FILE` (or `--css FILE`) links FILE as stylesheet instead of using the built in one.
* `--convert=PROG` names the Markdown to HTML converter.

## Documentation Strategy

### Front Matter

The documentation can start with a YAML header delimited by `---` lines:

     ```
     #' ---
     #' title: mymodule __PKGVERSION__
     #' author: Jane Doe
     #' date: __DATE__
     #' style: mystyle.css
     #' ---
     ```

The `__PKGNAME__`, `__PKGVERSION__`, `__DATE__` and `__BASENAME__` macros are replaced anywhere in
the documentation.  The package name and version are taken from a `package provide` line in Tcl
files or from `__version__ = "..."` in Python files.

### Sections

Level 2 headings with an anchor (`## <a name='synopsis'>SYNOPSIS</a>`) structure the document.
Code blocks of a section named "Synopsis" are highlighted differently.  The entries of sections
anchored as `methods`, `options` or `commands` are sorted alphabetically by their bold term
(`**term**`), no matter in which order they were written.

### Includes

`#' #include "header.md"` inserts the content of another file.  Includes are not nested.
A relative include path is taken relative to the directory of the file that contains the
directive, not relative to the current working directory.

## License

This code is released under the [MIT license](https://mit-license.org/).

"""

from .emit import ConfigurationError, MODES, Options, convert, register_mode

__version__ = "0.1.0"

__all__ = ["ConfigurationError", "MODES", "Options", "convert",
           "register_mode", "__version__"]
