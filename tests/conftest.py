from __future__ import annotations
# mypy: ignore-errors

from pathlib import Path

import sys

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

import io

import pytest

from domain.meow.models import Cat, Dog
from reports.renderer import StatisticsReport
from storage.meow_log import MeowLogger


@pytest.fixture
def out() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def log_path(tmp_path) -> Path:
    return tmp_path / "meow.log"


@pytest.fixture
def meow_logger(log_path, out) -> MeowLogger:
    return MeowLogger(log_path, StatisticsReport(), out=out)


@pytest.fixture
def cat(out) -> Cat:
    return Cat("Барсик", out=out)


@pytest.fixture
def dog(out) -> Dog:
    return Dog("Шарик", out=out)
