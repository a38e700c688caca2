from __future__ import annotations

import dataclasses
import logging
import reprlib
from functools import wraps
from typing import Any, Callable, Mapping, Sequence, TypeVar, cast

import numpy as np

F = TypeVar("F", bound=Callable[..., Any])

_repr = reprlib.Repr()
_repr.maxother = 120
_repr.maxstring = 60

MAX_ITEMS = 5


def _truncated(items: Sequence[str], total: int) -> str:
    shown = list(items[:MAX_ITEMS])
    if total > MAX_ITEMS:
        shown.append(f"+{total - MAX_ITEMS} more")
    return ", ".join(shown)


def _safe_repr(value: Any) -> str:
    """Short single-line rendering of call arguments and results."""

    if isinstance(value, np.ndarray):
        return f"ndarray{tuple(value.shape)}"
    if isinstance(value, tuple) and hasattr(value, "_fields"):
        return "(" + ", ".join(f"{v:.4g}" if isinstance(v, float) else _repr.repr(v) for v in value) + ")"
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        names = [fld.name for fld in dataclasses.fields(value)]
        parts = [f"{n}={_safe_repr(getattr(value, n))}" for n in names[:MAX_ITEMS]]
        return f"{type(value).__name__}({_truncated(parts, len(names))})"
    if isinstance(value, Mapping):
        keys = list(value)[:MAX_ITEMS]
        parts = [f"{_repr.repr(k)}: {_safe_repr(value[k])}" for k in keys]
        return "{" + _truncated(parts, len(value)) + "}"
    if isinstance(value, (list, tuple)):
        parts = [_safe_repr(item) for item in value[:MAX_ITEMS]]
        return f"[{_truncated(parts, len(value))}]"
    return _repr.repr(value)


def _format_call(args: Sequence[Any], kwargs: Mapping[str, Any]) -> str:
    rendered = [_safe_repr(arg) for arg in args]
    rendered.extend(f"{key}={_safe_repr(val)}" for key, val in kwargs.items())
    return ", ".join(rendered)


def debug_log_call(logger: logging.Logger, *, log_result: bool = True) -> Callable[[F], F]:
    """Log entry, exit and failures of the wrapped function at DEBUG level."""

    def decorator(func: F) -> F:
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any):
            tracing = logger.isEnabledFor(logging.DEBUG)
            if tracing:
                logger.debug("-> %s(%s)", func.__qualname__, _format_call(args, kwargs))
            try:
                result = func(*args, **kwargs)
            except Exception:
                if tracing:
                    logger.exception("!! %s raised", func.__qualname__)
                raise
            if tracing:
                logger.debug(
                    "<- %s = %s",
                    func.__qualname__,
                    _safe_repr(result) if log_result else "...",
                )
            return result

        return cast(F, wrapper)

    return decorator


__all__ = ["debug_log_call"]
