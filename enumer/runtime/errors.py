"""Errors raised by companion matchers and codec adapters."""

from typing import Any, Sequence


class EnumError(Exception):
    """Base exception for run-time enumeration errors."""

    pass


class UnrecognizedValueError(EnumError, ValueError):
    """Text did not match any alias of the candidate values."""

    def __init__(self, type_name: str, text: Any, valid_values: Sequence[str]):
        self.type_name = type_name
        self.text = text
        self.valid_values = list(valid_values)
        super().__init__(
            f"invalid {type_name}: {text!r} is not one of "
            f"{', '.join(self.valid_values)}"
        )


class NullValueError(EnumError, ValueError):
    """A database value was NULL."""

    def __init__(self, type_name: str):
        self.type_name = type_name
        super().__init__(f"invalid {type_name}: cannot be null")


class NotAStringError(EnumError, TypeError):
    """A decoded value could not be coerced to text."""

    def __init__(self, type_name: str, value: Any):
        self.type_name = type_name
        self.value = value
        super().__init__(
            f"invalid {type_name}: {value!r} ({type(value).__name__}) is not a string"
        )
