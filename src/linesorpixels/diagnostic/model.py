# topmark:header:start
#
#   project      : LinesOrPixels
#   file         : model.py
#   file_relpath : src/linesorpixels/diagnostic/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostics recorded while checking lines-or-pixels config values.

Checked getters append to a `DiagnosticLog` instead of raising, so one pass over
a document reports every malformed value. Each diagnostic remembers the TOML
location (``[scrolling].distance``) it refers to.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, cast

from yachalk import chalk

from linesorpixels.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

    from linesorpixels.config.logging import LopxLogger


logger: LopxLogger = get_logger(__name__)


class DiagnosticLevel(Enum):
    """Severity of a diagnostic.

    ``info`` notes a value that is simply not set; ``warning`` (wrong TOML type)
    and ``error`` (malformed text) both mean the value was rejected.
    """

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"

    @property
    def rejects_value(self) -> bool:
        """Return True if a diagnostic of this level means the value was rejected."""
        return self is not DiagnosticLevel.INFO

    @property
    def color(self) -> Callable[[str], str]:
        """Return the `yachalk` color function used for human-readable output."""
        return cast(
            "Callable[[str], str]",
            {
                DiagnosticLevel.INFO: chalk.blue,
                DiagnosticLevel.WARNING: chalk.yellow,
                DiagnosticLevel.ERROR: chalk.red_bright,
            }[self],
        )


@dataclass(frozen=True)
class Diagnostic:
    """A message about the value at ``location``."""

    level: DiagnosticLevel
    location: str
    message: str

    def render(self) -> str:
        """Return the ``[level] message`` line, colored by level."""
        return self.level.color(f"[{self.level.value}] {self.message}")

    def to_dict(self) -> dict[str, str]:
        """Return a JSON-friendly mapping of this diagnostic."""
        return {"level": self.level.value, "location": self.location, "message": self.message}


@dataclass
class DiagnosticLog:
    """Ordered collection of diagnostics for one checked document."""

    items: list[Diagnostic] = field(default_factory=lambda: [])

    def add(self, level: DiagnosticLevel, location: str, message: str) -> None:
        """Append a diagnostic about ``location``."""
        self.items.append(Diagnostic(level, location, message))
        logger.trace("Adding [%s] %s: %r", level.value, location, message)

    def add_info(self, location: str, message: str) -> None:
        """Add an ``info`` diagnostic."""
        self.add(DiagnosticLevel.INFO, location, message)

    def add_warning(self, location: str, message: str) -> None:
        """Add a ``warning`` diagnostic."""
        self.add(DiagnosticLevel.WARNING, location, message)

    def add_error(self, location: str, message: str) -> None:
        """Add an ``error`` diagnostic."""
        self.add(DiagnosticLevel.ERROR, location, message)

    def count(self, level: DiagnosticLevel) -> int:
        """Return the number of diagnostics at ``level``."""
        return sum(1 for d in self.items if d.level is level)

    def rejected(self) -> list[Diagnostic]:
        """Return the warnings and errors, i.e. the rejected values."""
        return [d for d in self.items if d.level.rejects_value]

    def summary(self) -> dict[str, Any]:
        """Return per-level counts plus the diagnostics themselves, for JSON output."""
        return {
            "counts": {level.value: self.count(level) for level in DiagnosticLevel},
            "diagnostics": [d.to_dict() for d in self.items],
        }

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.items)
