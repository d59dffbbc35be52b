"""A LoggerAdapter that passes arbitrary keyword arguments through to the formatter,
so `logger.debug("checking", directory=p)` renders the key-value pairs in the output.
"""

import contextlib
import logging
from copy import copy
from typing import Any, Dict, MutableMapping, Optional

from .. import config
from ..stack_context import StackContext

LOGLEVEL = config.item("thds.rootfind.log.level", logging.INFO, parse=logging.getLevelName)
_LOGGING_KWARGS = ("exc_info", "stack_info", "stacklevel", "extra")
# accepted by the stdlib Logger directly; everything else becomes keyword context.

KW_REC_CTXT = "kw_context"
# attribute name of the key-value dict on each LogRecord; usable in format strings.


class _KwContext(Dict[str, Any]):
    def __str__(self):
        return "(" + ",".join(f"{k}={v}" for k, v in self.items()) + ")"


_LOG_CONTEXT: StackContext[_KwContext] = StackContext("ROOTFIND_LOG_CONTEXT", _KwContext())


@contextlib.contextmanager
def logger_context(**kwargs):
    """Add key-value pairs to every log statement made further down the stack."""
    with _LOG_CONTEXT.set(_KwContext(_LOG_CONTEXT(), **kwargs)):
        yield


def _embed_kw_context(kwargs: MutableMapping[str, Any]) -> MutableMapping[str, Any]:
    kw_context = _LOG_CONTEXT()
    kw_keys = [k for k in kwargs if k not in _LOGGING_KWARGS]
    if kw_keys:
        kw_context = copy(kw_context)
        kw_context.update((k, kwargs.pop(k)) for k in kw_keys)
    extra = kwargs["extra"] = kwargs.get("extra", dict())
    extra[KW_REC_CTXT] = kw_context
    return kwargs


class KwLogger(logging.LoggerAdapter):
    def process(self, msg, kwargs):
        return msg, _embed_kw_context(kwargs)


def keyvals_from_record(record: logging.LogRecord) -> Optional[Dict[str, Any]]:
    return getattr(record, KW_REC_CTXT, None)


def getLogger(name: Optional[str] = None) -> logging.LoggerAdapter:
    """Logger that accepts key/value context at the end of each call,
    e.g. `logger.info("found root", root=path)`.
    """
    logger = logging.getLogger(name)
    if logger.level == logging.NOTSET:
        logger.setLevel(LOGLEVEL())
    return KwLogger(logger, dict())
