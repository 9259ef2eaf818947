"""Entities that can meow (or at least try to)."""
from __future__ import annotations

import re
import sys
from enum import Enum
from typing import Optional, Protocol, TextIO, runtime_checkable

from core.errors import InvalidArgumentError, OutOfRangeError

NAME_MIN_LEN = 2
NAME_MAX_LEN = 50

# латиница, кириллица (включая ё/Ё) и пробельные символы
NAME_RE = re.compile(r"^[a-zA-Zа-яА-ЯёЁ\s]+$")


class MeowerKind(str, Enum):
    """Closed set of meowing entities; the value is the persisted kind tag."""

    CAT = "Cat"
    DOG = "Dog"


@runtime_checkable
class Meowable(Protocol):
    kind: MeowerKind
    label: str

    @property
    def name(self) -> str: ...

    def meow(self) -> str: ...


def validate_name(value: Optional[str]) -> str:
    if value is None or not value.strip():
        raise InvalidArgumentError("Имя не может быть пустым или содержать только пробелы.")
    name = value.strip()
    if not (NAME_MIN_LEN <= len(name) <= NAME_MAX_LEN):
        raise OutOfRangeError("name", name, f"Имя должно быть от {NAME_MIN_LEN} до {NAME_MAX_LEN} символов.")
    if not NAME_RE.match(name):
        raise InvalidArgumentError("Имя может содержать только буквы и пробелы.")
    return name


class _NamedMeower:
    kind: MeowerKind
    label: str

    def __init__(self, name: str, *, out: TextIO | None = None) -> None:
        self.name = name
        self._out = out

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        self._name = validate_name(value)

    def _say(self, text: str) -> str:
        line = f"{self.name}: {text}"
        print(line, file=self._out or sys.stdout)
        return line

    def __str__(self) -> str:
        return f"{self.label}: {self.name}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


class Cat(_NamedMeower):
    kind = MeowerKind.CAT
    label = "кот"

    def meow(self, times: Optional[int] = None) -> str:
        if times is None:
            return self._say("мяу!")
        if times < 1:
            raise OutOfRangeError("times", times, "Количество мяуканий должно быть не меньше 1.")
        return self._say("-".join(["мяу"] * times) + "!")


class Dog(_NamedMeower):
    kind = MeowerKind.DOG
    label = "собака"

    def meow(self) -> str:
        return self._say("гав! (пытается мяукнуть)")
