"""Shared fixtures for the docmark tests."""

from pathlib import Path
from typing import Callable, Optional, Sequence

import pytest


class FakeRenderer:
    """Stand in for the external Markdown to HTML program."""

    def __init__(self, html: Optional[str] = None) -> None:
        self.html = html
        self.markdown: Optional[str] = None

    def render(self, markdown: str) -> str:
        self.markdown = markdown
        if self.html is not None:
            return self.html
        return f"<p>\n{markdown}</p>\n"


@pytest.fixture
def write_file(tmp_path: Path) -> Callable[[str, Sequence[str]], Path]:
    """Return a function that writes lines into a file below tmp_path."""

    def write(name: str, lines: Sequence[str]) -> Path:
        path = tmp_path / name
        path.write_text("".join(f"{line}\n" for line in lines),
                        encoding="utf-8")
        return path

    return write

