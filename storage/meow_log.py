"""Flat-file meow statistics store.

Each record is one ``KIND|NAME;COUNT`` line in a UTF-8 text file. The file is
the only source of truth: every call reopens and re-parses it, and every write
rewrites it whole. There is no locking and no atomic replace, so concurrent
writers can lose updates. Kind and name are not escaped; a ``|``, ``;`` or
newline inside them corrupts the record.
"""
from __future__ import annotations

import re
import sys
from pathlib import Path
from typing import Dict, List, Optional, TextIO, Tuple

from core.errors import MissingArgumentError, OutOfRangeError
from core.logging import get_logger
from domain.meow.models import Meowable
from reports.renderer import StatisticsReport

log = get_logger("storage.meow_log")

KEY_SEP = "|"
COUNT_SEP = ";"
NAME_SEP = ": "

# целое со знаком (только ASCII-цифры), пробелы по краям допустимы
_COUNT_RE = re.compile(r"^\s*[+-]?[0-9]+\s*$")
INT32_MIN, INT32_MAX = -(2**31), 2**31 - 1


def _parse_count(text: str) -> Optional[int]:
    """32-bit signed integer or ``None``; counts out of that range are dropped."""
    if not _COUNT_RE.match(text):
        return None
    value = int(text)
    if not (INT32_MIN <= value <= INT32_MAX):
        return None
    return value


def compose_key(kind: str, name: str) -> str:
    return f"{kind}{KEY_SEP}{name}"


def split_key(key: str) -> Optional[Tuple[str, str]]:
    parts = key.split(KEY_SEP)
    if len(parts) != 2:
        return None
    return parts[0], parts[1]


def entity_name(meower: Meowable) -> str:
    """Name part of ``"kind: name"``, or the whole rendering without a separator."""
    text = str(meower)
    idx = text.find(NAME_SEP)
    return text[idx + len(NAME_SEP):] if idx >= 0 else text


def entity_key(meower: Meowable) -> str:
    return compose_key(meower.kind.value, entity_name(meower))


class MeowLogger:
    def __init__(self, path: str | Path, report: StatisticsReport | None = None, *, out: TextIO | None = None) -> None:
        self.path = Path(path)
        self.report = report or StatisticsReport()
        self._out = out

    # ---------- Запись ----------
    def log_meow(self, meower: Optional[Meowable], times: int = 1) -> int:
        if meower is None:
            raise MissingArgumentError("meower")
        if times < 1:
            raise OutOfRangeError("times", times, "Количество мяуканий должно быть не меньше 1.")

        key = entity_key(meower)
        stats = self.read_statistics()
        stats[key] = stats.get(key, 0) + times
        self._save(stats)
        log.info("meow.logged", key=key, times=times, total=stats[key])
        return stats[key]

    def _save(self, stats: Dict[str, int]) -> None:
        if self.path.parent and not self.path.parent.exists():
            self.path.parent.mkdir(parents=True, exist_ok=True)
        lines = [f"{key}{COUNT_SEP}{count}\n" for key, count in stats.items()]
        with self.path.open("w", encoding="utf-8", newline="\n") as fh:
            fh.writelines(lines)

    def clear_statistics(self) -> None:
        if self.path.exists():
            self.path.write_text("", encoding="utf-8")
            log.info("meow.statistics.cleared", path=str(self.path))

    # ---------- Чтение ----------
    def read_statistics(self) -> Dict[str, int]:
        result: Dict[str, int] = {}
        if not self.path.exists():
            return result

        # utf-8-sig: файл мог быть записан с BOM
        with self.path.open("r", encoding="utf-8-sig") as fh:
            for lineno, raw in enumerate(fh, start=1):
                line = raw.rstrip("\r\n")
                if not line.strip():
                    continue
                parts = line.split(COUNT_SEP)
                count = _parse_count(parts[1]) if len(parts) == 2 else None
                if count is None:
                    log.debug("meow.statistics.dropped_line", lineno=lineno, line=line)
                    continue
                key = parts[0]
                result[key] = result.get(key, 0) + count
        return result

    def statistics_for(self, meower: Meowable) -> Optional[int]:
        return self.read_statistics().get(entity_key(meower))

    def statistics_for_name(self, name: str) -> List[Tuple[str, int]]:
        found: List[Tuple[str, int]] = []
        for key, count in self.read_statistics().items():
            parts = split_key(key)
            if parts is None:
                continue
            if parts[1] == name:
                found.append((key, count))
        return found

    # ---------- Отчёты ----------
    def _print(self, text: str) -> None:
        print(text, file=self._out or sys.stdout)

    def print_all_statistics(self) -> None:
        self._print(self.report.all_statistics(self.read_statistics()))

    def print_statistics_for(self, meower: Optional[Meowable]) -> None:
        if meower is None:
            self._print(self.report.no_entity())
            return
        key = entity_key(meower)
        count = self.statistics_for(meower)
        found = [(key, count)] if count is not None else []
        kind, name = meower.kind.value, entity_name(meower)
        self._print(self.report.matches(f"{kind} {name}", found))

    def print_statistics_for_name(self, name: Optional[str]) -> None:
        if name is None or not name.strip():
            self._print(self.report.no_name())
            return
        self._print(self.report.matches(name, self.statistics_for_name(name)))
