"""Scripted walkthrough of the meow and fraction components, no prompts."""
from __future__ import annotations

import sys
from typing import List, Optional, Sequence, TextIO

from core.logging import get_logger
from domain.fraction.models import Fraction
from domain.meow.models import Cat, Dog, Meowable
from domain.meow.sounder import Sounder
from storage.meow_log import MeowLogger

log = get_logger("demo")

DEFAULT_NAME = "Барсик"
FILLER_NAME = "Котик"


class DemoRunner:
    def __init__(self, meow_logger: MeowLogger, out: TextIO | None = None) -> None:
        self.meow_logger = meow_logger
        self.out = out or sys.stdout

    def _say(self, text: str = "") -> None:
        print(text, file=self.out)

    # ---------- Кошки ----------
    def run_meows(
        self,
        cat_name: str = DEFAULT_NAME,
        dog_name: str = DEFAULT_NAME,
        *,
        times: int = 3,
        extra_cats: Sequence[str] = (),
        group_size: int = 3,
        lookup_name: Optional[str] = None,
        keep_statistics: bool = False,
    ) -> None:
        log.info("demo.meows.start", cat=cat_name, dog=dog_name, group_size=group_size)
        self._say("Задание Кот.")

        cat = Cat(cat_name, out=self.out)
        self._say(f"Создан {cat}!")
        self._say("Вызов cat.meow():")
        cat.meow()
        self._say(f"Вызов cat.meow({times}):")
        cat.meow(times)

        dog = Dog(dog_name, out=self.out)
        self._say(f"Создана {dog}!")

        meowers: List[Meowable] = [cat, dog]
        meowers.extend(Cat(name, out=self.out) for name in extra_cats if name.strip())
        while len(meowers) < group_size:
            meowers.append(Cat(FILLER_NAME, out=self.out))

        self._say()
        self._say("Вызов Sounder.meow(meowers):")
        Sounder(self.meow_logger).meow(meowers)

        self._say()
        self._say("Статистика по мяуканьям для первого кота:")
        self.meow_logger.print_statistics_for(cat)
        self._say()
        self._say("Количество мяуканий по имени:")
        self.meow_logger.print_statistics_for_name(lookup_name or cat_name)
        self._say()
        self._say("Статистика всех мяукающих:")
        self.meow_logger.print_all_statistics()

        if not keep_statistics:
            self.meow_logger.clear_statistics()
        log.info("demo.meows.stop")

    # ---------- Дроби ----------
    def run_fractions(self) -> None:
        log.info("demo.fractions.start")
        self._say("Задание Дроби.")
        f1 = Fraction(1, 3)
        f2 = Fraction(2, 3)
        f3 = Fraction(-4, 5)
        f4 = Fraction(5)
        self._say(f"f1 = {f1}\nf2 = {f2}\nf3 = {f3}\nf4 = {f4}")

        self._say()
        self._say("Арифметические операции между дробями:")
        self._say(f"{f1} + {f2} = {f1 + f2}")
        self._say(f"{f2} - {f1} = {f2 - f1}")
        self._say(f"{f1} * {f2} = {f1 * f2}")
        self._say(f"{f1} / {f2} = {f1 / f2}")

        self._say()
        self._say("Операция дроби с целым числом:")
        self._say(f"{f1} + 2 = {f1 + 2}")
        self._say(f"{f1} - 2 = {f1 - 2}")

        self._say()
        chain = f1.add(f2).divide(f3).subtract(5)
        self._say(f"{f1}.add({f2}).divide({f3}).subtract(5) = {chain}")

        self._say()
        c1, c2 = Fraction(2, 4), Fraction(1, 2)
        self._say(f"{c1} == {c2} | {c1 == c2}")
        self._say(f"{f1} < {f2} | {f1 < f2}")

        self._say()
        original = Fraction(7, 8)
        clone = original.clone()
        self._say(f"original = {original}, clone = {clone}")

        self._say()
        self._say(f"{f3} как float = {f3.to_float()}")
        changed = f3.with_numerator(1).with_denominator(2)
        self._say(f"{f3} с числителем 1 и знаменателем 2: {changed}, как float = {changed.to_float()}")
        log.info("demo.fractions.stop")
