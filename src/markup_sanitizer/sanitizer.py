"""Sanitizer — the main API.  Two fixed passes: tags first, then templates.

Usage:
    from markup_sanitizer import check_and_sanitize_string

    report = check_and_sanitize_string("Hi <script>alert(1)</script>{{x}}!")
    print(report.suggested_string)   # "Hi !"
    print(report.matches)            # ["<script>alert(1)</script>", "{{x}}"]

Each pass scans its input globally and, when anything matched, removes ONE
contiguous block running from the start of the first match to the end of the
last.  Text sitting between two matches goes too: evasions such as
``<SCRIPT>document.write("<SCRI");</SCRIPT>PT SRC=...>`` split the payload
across spans and the filler is part of it.
"""

from __future__ import annotations
import logging
import re
from dataclasses import dataclass

from .errors import InvalidInputKind
from .patterns import TAG_SPAN, TEMPLATE_EXPRESSION
from .types import MatchRecord, SanitizationReport, ScanResult

logger = logging.getLogger(__name__)


def scan(pattern: re.Pattern, text: str) -> ScanResult:
    """Find every non-overlapping match of ``pattern`` in ``text``.

    The cursor is local to the call; nothing is stored on the pattern.
    """
    records: list[MatchRecord] = []
    cursor = 0
    while cursor <= len(text):
        m = pattern.search(text, cursor)
        if m is None:
            break
        records.append(MatchRecord(start=m.start(), text=m.group()))
        # empty matches must still move the cursor
        cursor = m.end() if m.end() > m.start() else m.end() + 1
    return ScanResult(found=bool(records), records=tuple(records))


def excise(result: ScanResult, text: str) -> str:
    """Cut the block spanning the first match's start to the last match's end."""
    if not result.found:
        return text
    span_start = result.records[0].start
    span_end = result.records[-1].end
    return text[:span_start] + text[span_end:]


def tag_pass(text: str) -> tuple[str, ScanResult]:
    """Excise HTML/SVG tag-like spans."""
    result = scan(TAG_SPAN, text)
    logger.debug("tag pass: %d match(es)", len(result.records))
    return excise(result, text), result


def template_pass(text: str) -> tuple[str, ScanResult]:
    """Excise {{ ... }} template expressions."""
    result = scan(TEMPLATE_EXPRESSION, text)
    logger.debug("template pass: %d match(es)", len(result.records))
    return excise(result, text), result


@dataclass(frozen=True)
class SanitizerConfig:
    """Configuration for the Sanitizer."""
    strip_tags: bool = True        # pass 1
    strip_templates: bool = True   # pass 2, runs on the output of pass 1


class Sanitizer:
    """Two-pass markup sanitizer.

    Pass 1: tag-like spans (``<...>`` in any encoding)
    Pass 2: template expressions (``{{...}}`` in any encoding)

    Holds only its config; safe to share between threads.
    """

    def __init__(self, config: SanitizerConfig | None = None) -> None:
        self.config = config or SanitizerConfig()

    def sanitize(self, value: object) -> SanitizationReport:
        """Sanitize ``value``, which must be a ``str``.

        Raises InvalidInputKind before any scanning for non-text input.
        """
        if not isinstance(value, str):
            raise InvalidInputKind(value)

        suggested = value
        matches: list[str] = []

        if self.config.strip_tags:
            suggested, tags = tag_pass(suggested)
            matches.extend(tags.texts)

        if self.config.strip_templates:
            suggested, templates = template_pass(suggested)
            matches.extend(templates.texts)

        return SanitizationReport(
            original_string=value,
            suggested_string=suggested,
            matches=matches,
        )

    def sanitize_messages(
        self,
        messages: list[dict],
        *,
        content_key: str = "content",
    ) -> list[dict]:
        """Sanitize a list of OpenAI-format messages.

        Returns new message dicts with content sanitized.  Does NOT
        mutate the originals.
        """
        out: list[dict] = []
        for msg in messages:
            content = msg.get(content_key)
            if isinstance(content, str) and content:
                report = self.sanitize(content)
                out.append({**msg, content_key: report.suggested_string})
            else:
                out.append(msg)
        return out


_default = Sanitizer()


def check_and_sanitize_string(value: object) -> SanitizationReport:
    """Run both passes over ``value`` with the default configuration."""
    return _default.sanitize(value)
