from __future__ import annotations

import dataclasses
import enum
import inspect
import logging
import reprlib
from functools import wraps
from typing import Any, Callable, Iterable, MutableMapping, Optional, Sequence, Set, TypeVar, cast

import numpy as np

F = TypeVar("F", bound=Callable[..., Any])

_repr = reprlib.Repr()
_repr.maxother = 120
_repr.maxlist = 8
_repr.maxtuple = 8
_repr.maxset = 8
_repr.maxdict = 8

_MAX_ITEMS = 6
_MAX_LENGTH = 300


def _format_float(value: float) -> str:
    return f"{value:.6g}"


def _safe_repr(value: Any, depth: int = 0) -> str:
    """Bounded repr for solver arguments: positions, handles, loci, stores."""

    if depth > 2:
        return "..."
    if isinstance(value, enum.Enum):
        return value.name
    if isinstance(value, float):
        return _format_float(value)
    if isinstance(value, np.ndarray):
        return f"ndarray(shape={tuple(value.shape)}, dtype={value.dtype})"
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        parts = []
        for f in dataclasses.fields(value)[:_MAX_ITEMS]:
            parts.append(f"{f.name}={_safe_repr(getattr(value, f.name), depth + 1)}")
        return f"{type(value).__name__}({', '.join(parts)})"
    if isinstance(value, (list, tuple, set, frozenset)):
        items = [_safe_repr(item, depth + 1) for item in list(value)[:_MAX_ITEMS]]
        if len(value) > _MAX_ITEMS:
            items.append("...")
        if isinstance(value, tuple):
            return "(" + ", ".join(items) + ")"
        if isinstance(value, list):
            return "[" + ", ".join(items) + "]"
        return "{" + ", ".join(items) + "}"
    if isinstance(value, (int, str, bool)) or value is None:
        return _repr.repr(value)
    # stores and catalogues: show the type only
    rendered = f"<{type(value).__name__}>"
    return rendered[:_MAX_LENGTH]


def _format_arguments(args: Sequence[Any], kwargs: MutableMapping[str, Any]) -> str:
    parts = [_safe_repr(arg) for arg in args]
    parts.extend(f"{key}={_safe_repr(val)}" for key, val in kwargs.items())
    return ", ".join(parts) if parts else "no-args"


def debug_log_call(
    logger: logging.Logger, *, name: Optional[str] = None, log_result: bool = True
) -> Callable[[F], F]:
    """Decorator emitting DEBUG entry/exit records for ``func``."""

    def decorator(func: F) -> F:
        if getattr(func, "_debug_logging_wrapped", False):
            return func
        qualname = name or getattr(func, "__qualname__", func.__name__)

        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any):
            if not logger.isEnabledFor(logging.DEBUG):
                return func(*args, **kwargs)
            logger.debug("Entering %s (%s)", qualname, _format_arguments(args, kwargs))
            try:
                result = func(*args, **kwargs)
            except Exception as exc:
                logger.debug("Exception in %s: %s", qualname, exc)
                raise
            if log_result:
                logger.debug("Exiting %s -> %s", qualname, _safe_repr(result))
            else:
                logger.debug("Exiting %s", qualname)
            return result

        setattr(wrapper, "_debug_logging_wrapped", True)
        return cast(F, wrapper)

    return decorator


def apply_debug_logging(
    namespace: MutableMapping[str, Any],
    *,
    logger: Optional[logging.Logger] = None,
    skip: Optional[Iterable[str]] = None,
) -> None:
    """Wrap every function defined in ``namespace``'s module with :func:`debug_log_call`."""

    module_name = namespace.get("__name__")
    logger = logger or logging.getLogger(module_name if isinstance(module_name, str) else __name__)
    skip_set: Set[str] = set(skip or [])

    for attr, value in list(namespace.items()):
        if attr in skip_set or attr.startswith("__"):
            continue
        if inspect.isfunction(value) and value.__module__ == module_name:
            namespace[attr] = debug_log_call(logger, name=attr)(value)


__all__ = ["debug_log_call", "apply_debug_logging"]
