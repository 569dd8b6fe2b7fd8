"""Error types."""

from __future__ import annotations


class InvalidInputKind(TypeError):
    """Raised when the value handed to the sanitizer is not text."""

    def __init__(self, value: object) -> None:
        self.kind = type(value)
        super().__init__(f"{self.kind.__name__} is not a string")
