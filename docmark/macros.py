"""macros: Placeholder substitution for documentation text."""

from dataclasses import dataclass, field
import datetime

from .extract import PackageInfo


def today_text() -> str:
    """Return the current date as `YYYY-MM-DD`."""
    return datetime.date.today().strftime("%Y-%m-%d")


# Macros:
@dataclass(frozen=True)
class Macros:
    """Macros: Replace `__PKGNAME__` style placeholders in a line.

    `__PKGNAME__` and `__PKGVERSION__` are only replaced when the package
    declaration supplied a value; otherwise they stay as literal text.

    Attributes:
    * *package* (PackageInfo): Supplies name, version and basename.
    * *date* (str): The `__DATE__` replacement (default: today).

    Constructor:
    * Macros(package, date)

    """

    package: PackageInfo
    date: str = field(default_factory=today_text)

    # Macros.substitute():
    def substitute(self, line: str) -> str:
        """Return *line* with every placeholder replaced."""
        package: PackageInfo = self.package
        if package.name:
            line = line.replace("__PKGNAME__", package.name)
        if package.version:
            line = line.replace("__PKGVERSION__", package.version)
        line = line.replace("__DATE__", self.date)
        return line.replace("__BASENAME__", package.basename)
