"""Markup Sanitizer — strips encoded HTML/SVG tags and template expressions from text."""

from .sanitizer import (
    Sanitizer, SanitizerConfig,
    check_and_sanitize_string, scan, excise, tag_pass, template_pass,
)
from .middleware import SanitizeMiddleware
from .config import create_middleware, load_config, load_from_yaml
from .errors import InvalidInputKind
from .types import MatchRecord, ScanResult, SanitizationReport

__all__ = [
    "Sanitizer", "SanitizerConfig",
    "check_and_sanitize_string", "scan", "excise", "tag_pass", "template_pass",
    "SanitizeMiddleware",
    "create_middleware", "load_config", "load_from_yaml",
    "InvalidInputKind",
    "MatchRecord", "ScanResult", "SanitizationReport",
]
__version__ = "0.1.0"
