"""Immutable rational number value type."""
from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
from typing import Union

from core.errors import FractionDivisionError, InvalidArgumentError

Operand = Union["Fraction", int]


def gcd(a: int, b: int) -> int:
    """Euclid on absolute values. ``gcd(0, 0)`` has no meaning and is rejected."""
    a, b = abs(a), abs(b)
    if a == 0 and b == 0:
        raise InvalidArgumentError("НОД(0, 0) не определён.")
    while b != 0:
        a, b = b, a % b
    return a


def _check_int(value: object, param: str) -> int:
    # bool — подкласс int, но как часть дроби не годится
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(f"{param} должен быть целым числом, получено {value!r}.")
    return value


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_operand(value: object) -> bool:
    return isinstance(value, Fraction) or _is_int(value)


@dataclass(frozen=True, eq=False)
class Fraction:
    """
    Reduced fraction with a positive denominator.

    Instances never change after construction: ``with_numerator`` and
    ``with_denominator`` return new values. ``to_float`` is computed once per
    instance and cached.
    """

    numerator: int
    denominator: int = 1

    def __post_init__(self) -> None:
        num = _check_int(self.numerator, "Числитель")
        den = _check_int(self.denominator, "Знаменатель")
        if den == 0:
            raise InvalidArgumentError("Знаменатель не может быть нулевым.")
        if den < 0:
            num, den = -num, -den
        if num == 0:
            den = 1
        else:
            common = gcd(num, den)
            num, den = num // common, den // common
        object.__setattr__(self, "numerator", num)
        object.__setattr__(self, "denominator", den)

    @classmethod
    def coerce(cls, value: Operand) -> "Fraction":
        if isinstance(value, Fraction):
            return value
        return cls(_check_int(value, "Операнд"))

    # ---------- значение ----------
    @cached_property
    def _value(self) -> float:
        return self.numerator / self.denominator

    def to_float(self) -> float:
        return self._value

    def __float__(self) -> float:
        return self._value

    def clone(self) -> "Fraction":
        return Fraction(self.numerator, self.denominator)

    def __copy__(self) -> "Fraction":
        return self.clone()

    def with_numerator(self, value: int) -> "Fraction":
        return Fraction(value, self.denominator)

    def with_denominator(self, value: int) -> "Fraction":
        return Fraction(self.numerator, value)

    # ---------- арифметика ----------
    def __add__(self, other: Operand) -> "Fraction":
        if not _is_operand(other):
            return NotImplemented
        b = Fraction.coerce(other)
        return Fraction(
            self.numerator * b.denominator + b.numerator * self.denominator,
            self.denominator * b.denominator,
        )

    __radd__ = __add__

    def __sub__(self, other: Operand) -> "Fraction":
        if not _is_operand(other):
            return NotImplemented
        b = Fraction.coerce(other)
        return Fraction(
            self.numerator * b.denominator - b.numerator * self.denominator,
            self.denominator * b.denominator,
        )

    def __rsub__(self, other: int) -> "Fraction":
        if not _is_int(other):
            return NotImplemented
        return Fraction.coerce(other) - self

    def __mul__(self, other: Operand) -> "Fraction":
        if not _is_operand(other):
            return NotImplemented
        b = Fraction.coerce(other)
        return Fraction(self.numerator * b.numerator, self.denominator * b.denominator)

    __rmul__ = __mul__

    def __truediv__(self, other: Operand) -> "Fraction":
        if not _is_operand(other):
            return NotImplemented
        b = Fraction.coerce(other)
        if b.numerator == 0:
            raise FractionDivisionError("Деление на нулевую дробь.")
        return Fraction(self.numerator * b.denominator, self.denominator * b.numerator)

    def __rtruediv__(self, other: int) -> "Fraction":
        if not _is_int(other):
            return NotImplemented
        return Fraction.coerce(other) / self

    def __neg__(self) -> "Fraction":
        return Fraction(-self.numerator, self.denominator)

    def __abs__(self) -> "Fraction":
        return Fraction(abs(self.numerator), self.denominator)

    # цепочки вида f1.add(f2).divide(f3).subtract(5)
    def add(self, other: Operand) -> "Fraction":
        return self + other

    def subtract(self, other: Operand) -> "Fraction":
        return self - other

    def multiply(self, other: Operand) -> "Fraction":
        return self * other

    def divide(self, other: Operand) -> "Fraction":
        return self / other

    # ---------- сравнение ----------
    def compare(self, other: Operand) -> int:
        b = Fraction.coerce(other)
        left = self.numerator * b.denominator
        right = b.numerator * self.denominator
        return (left > right) - (left < right)

    # целое число равно дроби n/1, и хеш у них общий
    def __eq__(self, other: object) -> bool:
        if not _is_operand(other):
            return NotImplemented
        b = Fraction.coerce(other)  # type: ignore[arg-type]
        return self.numerator == b.numerator and self.denominator == b.denominator

    def __hash__(self) -> int:
        if self.denominator == 1:
            return hash(self.numerator)
        return hash((self.numerator, self.denominator))

    def __lt__(self, other: Operand) -> bool:
        if not _is_operand(other):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: Operand) -> bool:
        if not _is_operand(other):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: Operand) -> bool:
        if not _is_operand(other):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: Operand) -> bool:
        if not _is_operand(other):
            return NotImplemented
        return self.compare(other) >= 0

    def __str__(self) -> str:
        return f"{self.numerator}/{self.denominator}"
