"""Core types."""

from __future__ import annotations
from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class MatchRecord:
    """A single matched span, offset into the text that was scanned."""
    start: int
    text: str

    @property
    def end(self) -> int:
        return self.start + len(self.text)


@dataclass(frozen=True, slots=True)
class ScanResult:
    """Every match of one pattern over one text, in scan order."""
    found: bool
    records: tuple[MatchRecord, ...] = ()

    @property
    def texts(self) -> list[str]:
        return [r.text for r in self.records]


@dataclass(slots=True)
class SanitizationReport:
    """Result of sanitizing a string."""
    original_string: str
    suggested_string: str
    matches: list[str] = field(default_factory=list)   # tag pass, then template pass

    def to_dict(self) -> dict:
        return {
            "originalString": self.original_string,
            "suggestedString": self.suggested_string,
            "matches": list(self.matches),
        }
