"""sections: Alphabetical reordering of methods, options and commands.

A listing section starts with a line containing an anchor such as
`<a name='methods'>`.  Inside it, every line with a bold term (`**term**` or
`__term__`) starts a new entry and all following lines belong to that entry.
When the next `## <a name=...>` heading arrives, the entries are written out
sorted by term, followed by the heading itself.

"""

# <----------------------------- 80 characters -----------------------------> #

import enum
import re
from typing import Dict, List, Optional, Pattern

LISTING_PATTERN: Pattern = re.compile(
    r"<a\s+name='(methods|options|commands)'>")
HEADING_PATTERN: Pattern = re.compile(r"^## <a\s+name")
TERM_PATTERN: Pattern = re.compile(r"[*_]{2}([-a-zA-Z0-9_]+?)[*_]{2}")


class SectionState(enum.Enum):
    """The states of SectionReorderer."""

    PASSING = "passing"
    LISTING = "listing"


# SectionReorderer:
class SectionReorderer:
    """SectionReorderer: Buffer and sort the entries of listing sections.

    Attributes:
    * *state* (SectionState): PASSING or LISTING.
    * *entries* (Dict[str, List[str]]):
      The buffered entry lines keyed by term.  A term that occurs twice in
      one section keeps only its last entry.
    * *term* (Optional[str]): The term of the open entry or None.

    Constructor:
    * SectionReorderer()

    """

    def __init__(self) -> None:
        """Initialize a SectionReorderer."""
        self.state: SectionState = SectionState.PASSING
        self.entries: Dict[str, List[str]] = {}
        self.term: Optional[str] = None

    # SectionReorderer.feed():
    def feed(self, line: str) -> List[str]:
        """Process one line and return the lines that are ready for output.

        Arguments:
        * *line* (str): A body line (macros already substituted).

        Returns:
        * (List[str]): Zero or more output lines.  Buffered entry lines are
          withheld until the section ends.

        """
        output: List[str] = []
        listing: bool = self.state is SectionState.LISTING
        if listing and HEADING_PATTERN.match(line):
            output.extend(self.flush())
            listing = False
        if LISTING_PATTERN.search(line):
            self.entries = {}
            self.term = None
            self.state = SectionState.LISTING
            output.append(line)
            return output

        if listing:
            match = TERM_PATTERN.search(line)
            if match:
                self.term = match.group(1)
                self.entries[self.term] = [line]
                return output
            if self.term is not None:
                self.entries[self.term].append(line)
                return output
        output.append(line)
        return output

    # SectionReorderer.flush():
    def flush(self) -> List[str]:
        """Leave the listing section and return its sorted entry lines."""
        lines: List[str] = []
        term: str
        for term in sorted(self.entries):
            lines.extend(self.entries[term])
        self.entries = {}
        self.term = None
        self.state = SectionState.PASSING
        return lines

    # SectionReorderer.finish():
    def finish(self) -> List[str]:
        """Return the entries of a listing section still open at the end."""
        if self.state is SectionState.LISTING:
            return self.flush()
        return []
