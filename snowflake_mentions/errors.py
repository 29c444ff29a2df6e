"""Exceptions raised at the library boundary."""

from __future__ import annotations


class InvalidInputError(TypeError):
    """Raised when something other than a str is handed to the scanner."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Expected str, got {type(value).__name__}")
