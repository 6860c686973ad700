"""Errors raised by the transformation layer."""

from typing import Any


class InvalidArgumentError(ValueError):
    """Raised when an operation receives an argument outside its domain"""

    def __init__(self, argument: str, value: Any):
        self.argument = argument
        self.value = value
        super().__init__(f"Invalid {argument}: {value}")
