# reports/renderer.py
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple

import yaml
from jinja2 import ChoiceLoader, DictLoader, Environment, FileSystemLoader, select_autoescape

from core.logging import get_logger

log = get_logger("reports")

# -------------------------
# ДЕФОЛТНЫЕ ФРАЗЫ ОТЧЁТОВ (создаются только если файла нет)
# -------------------------
DEFAULT_MESSAGES_YAML = """\
version: 1
statistics:
  header: "Статистика мяуканий:"
  empty: "Статистика мяуканий отсутствует."
  not_found: "Для \\"{subject}\\" статистика не найдена."
  no_entity: "Сущность не задана."
  no_name: "Имя сущности не задано."
"""

# -------------------------
# ДЕФОЛТНЫЕ ШАБЛОНЫ (создаются только если файлов нет)
# -------------------------
ROW_MACRO_J2 = """\
{% macro row(item) -%}
{% if item.kind is not none %}{{ item.kind }} | {{ item.name }}: {{ item.count }}{% else %}{{ item.key }}: {{ item.count }}{% endif %}
{%- endmacro %}
"""

ALL_STATISTICS_J2 = """\
{% from "_row.j2" import row %}
{% if not rows %}
{{ messages.empty }}
{% else %}
{{ messages.header }}
{% for item in rows %}
{{ row(item) }}
{% endfor %}
{% endif %}
"""

MATCHES_J2 = """\
{% from "_row.j2" import row %}
{% if not rows %}
{{ messages.not_found | replace("{subject}", subject) }}
{% else %}
{% for item in rows %}
{{ row(item) }}
{% endfor %}
{% endif %}
"""

DEFAULT_TEMPLATES: Dict[str, str] = {
    "_row.j2": ROW_MACRO_J2,
    "all_statistics.j2": ALL_STATISTICS_J2,
    "matches.j2": MATCHES_J2,
}

MESSAGES_FILE = "messages.yml"


def _row(key: str, count: int) -> Dict[str, Any]:
    parts = key.split("|")
    if len(parts) == 2:
        return {"key": key, "kind": parts[0], "name": parts[1], "count": count}
    return {"key": key, "kind": None, "name": None, "count": count}


class StatisticsReport:
    """
    Рендер текстовых отчётов по статистике мяуканий.
    • Без каталога — только встроенные шаблоны и фразы.
    • С каталогом — дефолты создаются при отсутствии, их можно править.
    """

    def __init__(self, base_dir: str | Path | None = None) -> None:
        self.base: Optional[Path] = Path(base_dir) if base_dir else None
        self._messages: Optional[Dict[str, Any]] = None

        loaders: list = [DictLoader(DEFAULT_TEMPLATES)]
        if self.base is not None:
            self._ensure_files()
            loaders.insert(0, FileSystemLoader(self.base))

        self.env = Environment(
            loader=ChoiceLoader(loaders),
            autoescape=select_autoescape(
                enabled_extensions=(),
                default_for_string=False,
                default=False,
            ),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=False,
        )

    def _ensure_files(self) -> None:
        assert self.base is not None
        self.base.mkdir(parents=True, exist_ok=True)
        messages_path = self.base / MESSAGES_FILE
        if not messages_path.exists():
            messages_path.write_text(DEFAULT_MESSAGES_YAML, encoding="utf-8")
            log.debug("reports.default_created", file=str(messages_path))
        for name, body in DEFAULT_TEMPLATES.items():
            path = self.base / name
            if not path.exists():
                path.write_text(body, encoding="utf-8")
                log.debug("reports.default_created", file=str(path))

    @property
    def messages(self) -> Dict[str, Any]:
        if self._messages is None:
            raw = DEFAULT_MESSAGES_YAML
            if self.base is not None:
                raw = (self.base / MESSAGES_FILE).read_text(encoding="utf-8")
            data = yaml.safe_load(raw) or {}
            defaults = yaml.safe_load(DEFAULT_MESSAGES_YAML)["statistics"]
            self._messages = {**defaults, **(data.get("statistics") or {})}
        return self._messages

    def reload(self) -> None:
        """Горячая перезагрузка фраз и шаблонов."""
        self._messages = None
        self.env.cache.clear()

    def _render(self, template: str, **context: Any) -> str:
        tpl = self.env.get_template(template)
        return tpl.render(messages=self.messages, **context).rstrip("\n")

    # ---------- Отчёты ----------
    def all_statistics(self, stats: Mapping[str, int]) -> str:
        rows = [_row(key, count) for key, count in stats.items()]
        return self._render("all_statistics.j2", rows=rows)

    def matches(self, subject: str, found: Iterable[Tuple[str, int]]) -> str:
        rows = [_row(key, count) for key, count in found]
        return self._render("matches.j2", rows=rows, subject=subject)

    def no_entity(self) -> str:
        return str(self.messages["no_entity"])

    def no_name(self) -> str:
        return str(self.messages["no_name"])
