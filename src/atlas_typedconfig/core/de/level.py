# src/atlas_typedconfig/core/de/level.py
"""Nível de log decodificável a partir de uma string do documento."""

from __future__ import annotations

from enum import IntEnum

from .errors import unknown_variant
from .protocol import Deserializer, Visitor


# valores de severidade no padrão syslog
class LogLevel(IntEnum):
    ERROR = 3
    WARNING = 4
    NOTICE = 5
    INFO = 6
    DEBUG = 7

    @classmethod
    def parse(cls, text: str) -> "LogLevel":
        """
        Converte `text` em `LogLevel`, sem diferenciar maiúsculas.

        Aceita `err`/`error`, `warn`/`warning`, `notice`, `info` e `debug`.
        """
        level = _ALIASES.get(text.lower())
        if level is None:
            raise unknown_variant(text, _ALIASES)
        return level

    @classmethod
    def __deserialize__(cls, deserializer: Deserializer) -> "LogLevel":
        return deserializer.deserialize_str(_LogLevelVisitor())


_ALIASES = {
    "err": LogLevel.ERROR,
    "error": LogLevel.ERROR,
    "warn": LogLevel.WARNING,
    "warning": LogLevel.WARNING,
    "notice": LogLevel.NOTICE,
    "info": LogLevel.INFO,
    "debug": LogLevel.DEBUG,
}


class _LogLevelVisitor(Visitor):
    expecting = "a log level"

    def visit_string(self, value: str) -> LogLevel:
        return LogLevel.parse(value)
