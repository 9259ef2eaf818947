# main.py
import logging

from core.settings import settings
from core.logging import setup_logging

from reports.renderer import StatisticsReport
from storage.meow_log import MeowLogger

from demo.runner import DemoRunner


def app():
    # Логи
    setup_logging(settings.LOG_LEVEL, json_mode=settings.is_prod, diag=settings.is_diag)
    log = logging.getLogger("main")

    # --- Storage + reports ---
    report = StatisticsReport(settings.REPORTS_DIR)
    meow_logger = MeowLogger(settings.meow_log_path(), report)
    log.debug("meow log -> %s", meow_logger.path)

    runner = DemoRunner(meow_logger)
    runner.run_meows()
    print()
    runner.run_fractions()


if __name__ == "__main__":
    app()
