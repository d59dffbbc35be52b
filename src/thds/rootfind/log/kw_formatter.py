"""Compact single-line formatter that renders keyword context from KwLogger."""

import logging
import typing as ty

from .. import config
from .kw_logger import keyvals_from_record

MAX_MODULE_NAME_LEN = config.item("thds.rootfind.log.max_module_name_len", 40, parse=int)

_RESET = "\033[0m"
_LEVEL_COLORS = {
    logging.DEBUG: "\033[34m",  # blue
    logging.INFO: "\033[32m",  # green
    logging.WARNING: "\033[33;1m",  # bright yellow
    logging.ERROR: "\033[38;5;196;1m",  # bright red
    logging.CRITICAL: "\033[45;1m",  # magenta background
}


def log_level_color(levelno: int, base_levelname: str) -> str:
    threshold = max((lvl for lvl in _LEVEL_COLORS if lvl <= levelno), default=logging.DEBUG)
    name = base_levelname.lower() if levelno < logging.WARNING else base_levelname
    return f"{_LEVEL_COLORS[threshold]}{name}{_RESET}"


class ThdsCompactFormatter(logging.Formatter):
    @staticmethod
    def format_module_name(name: str) -> str:
        max_len = MAX_MODULE_NAME_LEN()
        compressed = (
            name if len(name) <= max_len else name[: max_len // 2 - 2] + "..." + name[-max_len // 2 + 1 :]
        )
        return f"{compressed:{max_len}}"

    def _format_exception_and_trace(self, record: logging.LogRecord) -> str:
        formatted = ""
        if record.exc_info and not record.exc_text:
            record.exc_text = self.formatException(record.exc_info)
        if record.exc_text:
            formatted += "\n" + record.exc_text
        if record.stack_info:
            formatted += "\n" + self.formatStack(record.stack_info)
        return formatted

    def format(self, record: logging.LogRecord) -> str:
        record.message = record.getMessage()
        levelname = log_level_color(record.levelno, f"{record.levelname:7}")
        kw_ctx: ty.Any = keyvals_from_record(record) or "()"
        short_name = self.format_module_name(record.name)
        return (
            f"{self.formatTime(record)} {levelname}  {short_name} {kw_ctx} {record.message}"
            + self._format_exception_and_trace(record)
        )
