"""Environment configuration for the meow demo."""
from __future__ import annotations

from functools import cached_property
from pathlib import Path
import sys
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


def app_dir() -> Path:
    """Каталог запущенной программы; без неё (REPL, -c) — текущий каталог."""
    script = sys.argv[0] if sys.argv else ""
    if script and Path(script).is_file():
        return Path(script).resolve().parent
    return Path.cwd()


class Settings(BaseSettings):
    LOG_LEVEL: str = "INFO"
    ENV: str = "dev"
    DIAG: int = 0

    MEOW_LOG_FILE: str = "meow.log"
    MEOW_LOG_DIR: Optional[str] = None

    REPORTS_DIR: Optional[str] = None

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @cached_property
    def is_prod(self) -> bool:
        return self.ENV.lower() == "prod"

    @cached_property
    def is_diag(self) -> bool:
        return bool(int(self.DIAG))

    def meow_log_path(self) -> Path:
        base = Path(self.MEOW_LOG_DIR) if self.MEOW_LOG_DIR else app_dir()
        return base / self.MEOW_LOG_FILE


settings = Settings()
