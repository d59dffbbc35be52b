"""Values that are set for the duration of a `with` block, and visible
to everything called beneath it on the current thread (or asyncio task).

Used for thread-local config overrides and for keyword logging context.
"""
import contextlib as cl
import contextvars as cv
import typing as ty

T = ty.TypeVar("T")


@cl.contextmanager
def _scoped(contextvar: cv.ContextVar[T], value: T) -> ty.Iterator[T]:
    token = contextvar.set(value)
    try:
        yield value
    finally:
        contextvar.reset(token)


class StackContext(ty.Generic[T]):
    """A ContextVar that may only be set for the extent of a stack frame.

    Create these at module scope, like the ContextVar underneath.
    """

    def __init__(self, debug_name: str, default: T):
        self._contextvar = cv.ContextVar(debug_name, default=default)

    def set(self, value: T) -> ty.ContextManager[T]:
        return _scoped(self._contextvar, value)

    def __call__(self) -> T:
        return self._contextvar.get()
