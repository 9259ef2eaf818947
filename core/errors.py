"""Error kinds shared by the fraction and meow components."""
from __future__ import annotations


class InvalidArgumentError(ValueError):
    """Malformed argument: bad name, zero denominator, wrong type."""


class MissingArgumentError(InvalidArgumentError):
    """Required argument is absent (``None``)."""

    def __init__(self, param: str) -> None:
        super().__init__(f"Аргумент '{param}' не задан.")
        self.param = param


class OutOfRangeError(ValueError):
    def __init__(self, param: str, value: object, message: str) -> None:
        super().__init__(f"{message} ({param}={value!r})")
        self.param = param
        self.value = value


class FractionDivisionError(ZeroDivisionError):
    """Division by a fraction whose numerator is zero."""
