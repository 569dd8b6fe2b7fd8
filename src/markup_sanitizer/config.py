"""YAML/dict config loader for markup-sanitizer.

Supports loading from a YAML file or a plain dict (for embedding
in a larger gateway config).

Example YAML:

    markup_sanitizer:
      enabled: true
      strip_tags: true
      strip_templates: true
      content_key: content
"""

from __future__ import annotations
from pathlib import Path
from typing import Any

from .middleware import SanitizeMiddleware
from .sanitizer import SanitizerConfig


class _NoopMiddleware:
    """Pass-through middleware when sanitizing is disabled."""
    def pre_send(self, messages: list[dict]) -> list[dict]:
        return messages
    def sanitize_text(self, text: str) -> str:
        return text
    @property
    def stats(self) -> dict:
        return {"messages_seen": 0, "messages_changed": 0}


def load_config(data: dict[str, Any]) -> dict[str, Any]:
    """Normalize a config dict (from YAML or inline)."""
    # Support nested under "markup_sanitizer" key or flat
    if "markup_sanitizer" in data:
        data = data["markup_sanitizer"] or {}

    return {
        "enabled": data.get("enabled", True),
        "strip_tags": data.get("strip_tags", True),
        "strip_templates": data.get("strip_templates", True),
        "content_key": data.get("content_key", "content"),
    }


def load_from_yaml(path: str | Path) -> dict[str, Any]:
    """Load config from a YAML file."""
    import yaml  # optional dependency
    with open(path) as f:
        return load_config(yaml.safe_load(f) or {})


def create_middleware(config: dict[str, Any]) -> SanitizeMiddleware | _NoopMiddleware:
    """Create a fully configured middleware from a config dict."""
    cfg = load_config(config)

    if not cfg["enabled"]:
        return _NoopMiddleware()

    return SanitizeMiddleware.create(
        config=SanitizerConfig(
            strip_tags=cfg["strip_tags"],
            strip_templates=cfg["strip_templates"],
        ),
        content_key=cfg["content_key"],
    )
