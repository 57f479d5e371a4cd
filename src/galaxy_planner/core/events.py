# src/galaxy_planner/core/events.py
"""
Log estruturado de eventos do Galaxy Planner.

O `EventLog` registra eventos como dicionários (e não como strings
livres), preservando a ordem real de emissão. Cada evento carrega o
nível, a mensagem, um timestamp UTC e os campos de escopo vinculados
(ambiente, namespace, dry-run), de forma que o histórico de uma execução
possa ser inspecionado em testes ou anexado ao manifest de plano.

Os eventos também são repassados ao logger `galaxy_planner` do módulo
`logging`, com os campos de escopo em `extra`.

Invariantes:
    - `events` cresce apenas por chamadas explícitas a `log`
    - Logs derivados por `bind` compartilham a mesma lista de eventos
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Union


LOGGER_NAME = "galaxy_planner"

_LEVELS: Dict[str, int] = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "warn": logging.WARNING,
    "error": logging.ERROR,
    "fatal": logging.CRITICAL,
    "panic": logging.CRITICAL,
}


def level_number(level: Union[str, int]) -> int:
    """Converte um nome de nível (`"info"`, `"error"`...) para o número do `logging`."""
    if isinstance(level, int):
        return level
    try:
        return _LEVELS[level.strip().lower()]
    except KeyError:
        raise ValueError(f"Unknown log level: {level!r}") from None


def configure_logging(level: Union[str, int] = "error") -> None:
    """Configura o logging padrão apenas se o root logger ainda não tiver handlers."""
    numeric = level_number(level)
    logging.getLogger(LOGGER_NAME).setLevel(numeric)
    root = logging.getLogger()
    if root.handlers:
        return
    logging.basicConfig(
        level=numeric,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


@dataclass
class EventLog:
    """Coletor ordenado de eventos estruturados com campos de escopo vinculados."""

    fields: Dict[str, Any] = field(default_factory=dict)
    events: List[Dict[str, Any]] = field(default_factory=list)

    def bind(self, **fields: Any) -> "EventLog":
        merged = dict(self.fields)
        merged.update(fields)
        return EventLog(fields=merged, events=self.events)

    def log(self, *, level: str, message: str, **extra: Any) -> None:
        event: Dict[str, Any] = {
            "level": level,
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        event.update(self.fields)
        event.update(extra)
        self.events.append(event)

        scope = {k: v for k, v in event.items() if k not in ("level", "message", "timestamp")}
        logging.getLogger(LOGGER_NAME).log(
            level_number(level), message, extra={"galaxy": scope}
        )

    def debug(self, message: str, **extra: Any) -> None:
        self.log(level="debug", message=message, **extra)

    def info(self, message: str, **extra: Any) -> None:
        self.log(level="info", message=message, **extra)

    def error(self, message: str, **extra: Any) -> None:
        self.log(level="error", message=message, **extra)
