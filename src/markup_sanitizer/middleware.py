"""OpenAI-compatible middleware — drop-in for any proxy that uses the
chat completions format.

Usage as a function wrapper:

    mw = SanitizeMiddleware.create()

    # Before handing user content to a renderer or provider
    safe_messages = mw.pre_send(messages)

    print(mw.stats)   # {"messages_seen": 3, "messages_changed": 1}
"""

from __future__ import annotations
import logging
from dataclasses import dataclass

from .sanitizer import Sanitizer, SanitizerConfig

logger = logging.getLogger(__name__)


@dataclass
class SanitizeMiddleware:
    """Middleware that strips injected markup from message content."""

    sanitizer: Sanitizer
    content_key: str = "content"
    messages_seen: int = 0
    messages_changed: int = 0

    @classmethod
    def create(
        cls,
        *,
        config: SanitizerConfig | None = None,
        content_key: str = "content",
    ) -> "SanitizeMiddleware":
        """Factory — creates a fresh middleware with zeroed counters."""
        return cls(sanitizer=Sanitizer(config), content_key=content_key)

    def pre_send(self, messages: list[dict]) -> list[dict]:
        """Sanitize outbound messages.  Originals are left untouched."""
        out = self.sanitizer.sanitize_messages(messages, content_key=self.content_key)
        # excision always shortens, so a changed message is a different string
        changed = sum(
            1 for before, after in zip(messages, out)
            if before.get(self.content_key) != after.get(self.content_key)
        )
        self.messages_seen += len(messages)
        self.messages_changed += changed
        if changed:
            logger.info("removed markup from %d message(s)", changed)
        return out

    def sanitize_text(self, text: str) -> str:
        """Sanitize a single string (convenience).  Not counted in stats."""
        return self.sanitizer.sanitize(text).suggested_string

    @property
    def stats(self) -> dict:
        return {
            "messages_seen": self.messages_seen,
            "messages_changed": self.messages_changed,
        }
