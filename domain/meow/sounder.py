"""Batch invocation of meowing entities."""
from __future__ import annotations

from typing import Iterable, Optional

from core.errors import MissingArgumentError
from core.logging import get_logger
from domain.meow.models import Meowable
from storage.meow_log import MeowLogger

log = get_logger("sounder")


class Sounder:
    def __init__(self, meow_logger: MeowLogger) -> None:
        self.meow_logger = meow_logger

    def meow(self, meowers: Optional[Iterable[Optional[Meowable]]]) -> int:
        """Make every entity meow once, in order, logging each call.

        ``None`` entries are skipped. Returns how many entities meowed.
        """
        if meowers is None:
            raise MissingArgumentError("meowers")

        processed = 0
        for position, meower in enumerate(meowers):
            if meower is None:
                log.debug("sounder.skip_none", position=position)
                continue
            meower.meow()
            self.meow_logger.log_meow(meower)
            processed += 1
        return processed
