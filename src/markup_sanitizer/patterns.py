"""Equivalence classes and the composed tag / template patterns.

Every special character the grammar needs is matched through an
equivalence class: the literal glyph plus each alternate spelling that
denotes the same character once decoded (percent-encoding, named entity,
decimal and hex numeric references).  Payloads like ``&lt;script&#x3e``
therefore anchor exactly like ``<script>``.

All patterns here are compiled once at import and never mutated, so they
can be shared freely across threads.
"""

from __future__ import annotations
import re
from dataclasses import dataclass
from enum import Enum

FLAGS = re.IGNORECASE | re.DOTALL

# Numeric references may be zero-padded: &#60, &#060 ... &#00000060
MAX_ZERO_PADDING = 6


class Spelling(Enum):
    LITERAL = "literal"     # <
    PERCENT = "percent"     # %3c
    NAMED = "named"         # &lt
    DECIMAL = "decimal"     # &#60
    HEX = "hex"             # &#x3c


@dataclass(frozen=True, slots=True)
class Variant:
    """One spelling of a special character."""
    spelling: Spelling
    value: str

    @property
    def terminated(self) -> bool:
        """References may carry a trailing ';' (or omit it)."""
        return self.spelling in (Spelling.NAMED, Spelling.DECIMAL, Spelling.HEX)

    def to_regex(self, *, terminator: bool = True) -> str:
        padding = f"0{{0,{MAX_ZERO_PADDING}}}"
        if self.spelling is Spelling.LITERAL:
            fragment = re.escape(self.value)
        elif self.spelling is Spelling.PERCENT:
            fragment = "%" + self.value
        elif self.spelling is Spelling.NAMED:
            fragment = "&" + self.value
        elif self.spelling is Spelling.DECIMAL:
            fragment = "&#" + padding + self.value
        else:
            fragment = "&#x" + padding + self.value
        return fragment + ";?" if terminator and self.terminated else fragment


@dataclass(frozen=True, slots=True)
class EquivalenceClass:
    """All spellings of a single special character."""
    char: str
    variants: tuple[Variant, ...]

    @property
    def source(self) -> str:
        """Non-capturing alternation of every spelling."""
        return "(?:" + "|".join(v.to_regex() for v in self.variants) + ")"

    @property
    def bare_source(self) -> str:
        """Like ``source`` but without the optional trailing ';'.

        The tag and template grammars place their own terminator.
        """
        return "(?:" + "|".join(v.to_regex(terminator=False) for v in self.variants) + ")"

    def matches(self, text: str) -> bool:
        """True if ``text`` is exactly one spelling of this character."""
        return re.fullmatch(self.source, text, FLAGS) is not None


def build_class(
    char: str,
    *,
    percent: str,
    named: str,
    decimal: str,
    hexadecimal: str,
) -> EquivalenceClass:
    """Build the equivalence class for ``char`` from its encoded forms.

    Args:
        char: The literal glyph.
        percent: Hex byte of the percent-encoding, e.g. ``"3c"``.
        named: Entity name without ``&`` or ``;``, e.g. ``"lt"``.
        decimal: Code point in decimal, e.g. ``"60"``.
        hexadecimal: Code point in hex, e.g. ``"3c"``.
    """
    return EquivalenceClass(char=char, variants=(
        Variant(Spelling.LITERAL, char),
        Variant(Spelling.PERCENT, percent),
        Variant(Spelling.NAMED, named),
        Variant(Spelling.DECIMAL, decimal),
        Variant(Spelling.HEX, hexadecimal),
    ))


OPEN_ANGLE = build_class("<", percent="3c", named="lt", decimal="60", hexadecimal="3c")
CLOSE_ANGLE = build_class(">", percent="3e", named="gt", decimal="62", hexadecimal="3e")
DOUBLE_QUOTE = build_class('"', percent="22", named="quot", decimal="34", hexadecimal="22")
SINGLE_QUOTE = build_class("'", percent="27", named="apos", decimal="39", hexadecimal="27")
BACKTICK = build_class("`", percent="60", named="DiacriticalGrave", decimal="96", hexadecimal="60")
OPEN_BRACE = build_class("{", percent="7b", named="lcub", decimal="123", hexadecimal="7b")
CLOSE_BRACE = build_class("}", percent="7d", named="rcub", decimal="125", hexadecimal="7d")
SLASH = build_class("/", percent="2f", named="sol", decimal="47", hexadecimal="2f")

CLASSES: dict[str, EquivalenceClass] = {
    c.char: c for c in (
        OPEN_ANGLE, CLOSE_ANGLE,
        DOUBLE_QUOTE, SINGLE_QUOTE, BACKTICK,
        OPEN_BRACE, CLOSE_BRACE,
        SLASH,
    )
}


def _tag_span_source() -> str:
    opening = OPEN_ANGLE.bare_source
    closing = CLOSE_ANGLE.bare_source
    quoted = "|".join(
        f"{q.bare_source}.*{q.bare_source}" for q in (DOUBLE_QUOTE, SINGLE_QUOTE, BACKTICK)
    )
    return (
        # <<script collapses into a single start
        f"(?:{opening};?)+"
        # quoted attribute values may hold brackets; bare text stops at one
        f"(?:{quoted}|(?!{opening}|{closing}).)*"
        # unterminated tags still match
        f"(?:.*{closing};?)?"
    )


def _template_expression_source() -> str:
    ob, cb = OPEN_BRACE.bare_source, CLOSE_BRACE.bare_source
    return f"{ob};?{ob}.*{cb};?{cb};?"


TAG_SPAN: re.Pattern = re.compile(_tag_span_source(), FLAGS)
TEMPLATE_EXPRESSION: re.Pattern = re.compile(_template_expression_source(), FLAGS)
