from __future__ import annotations

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


def _component_repr(coord: Any) -> Optional[str]:
    count = getattr(coord, "component_count", None)
    if not isinstance(count, int) or not hasattr(coord, "distance"):
        return None
    try:
        parts = ", ".join(f"{float(coord[i]):.6g}" for i in range(count))
    except (TypeError, ValueError, IndexError):
        return None
    return f"({parts})"


def _safe_repr(value: Any, *, max_items: int = 4, max_length: int = 300) -> str:
    if isinstance(value, np.ndarray):
        if value.size <= max_items:
            return f"ndarray({_repr.repr(value.tolist())})"
        return f"ndarray(shape={tuple(value.shape)}, dtype={value.dtype})"

    rendered_point = _component_repr(value)
    if rendered_point is not None:
        return rendered_point

    if hasattr(value, "p0") and hasattr(value, "p1"):
        return f"{_safe_repr(value.p0)}-{_safe_repr(value.p1)}"

    if isinstance(value, (list, tuple)):
        items = [_safe_repr(item) for item in value[:max_items]]
        if len(value) > max_items:
            items.append(f"... +{len(value) - max_items}")
        open_br, close_br = ("(", ")") if isinstance(value, tuple) else ("[", "]")
        return f"{open_br}{', '.join(items)}{close_br}"

    rendered = _repr.repr(value)
    if len(rendered) > max_length:
        return rendered[:max_length] + "... (truncated)"
    return rendered


def _format_arguments(args: Sequence[Any], kwargs: MutableMapping[str, Any]) -> str:
    parts = [_safe_repr(arg) for arg in args]
    parts.extend(f"{key}={_safe_repr(value)}" for key, value in kwargs.items())
    return ", ".join(parts) if parts else "no-args"


def debug_log_call(
    logger: logging.Logger, *, name: Optional[str] = None, log_result: bool = True
) -> Callable[[F], F]:
    """Return a decorator that traces calls to *func* at DEBUG level."""

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
            except Exception:
                logger.debug("Exception in %s", qualname, exc_info=True)
                raise
            if log_result:
                logger.debug("Exiting %s -> %s", qualname, _safe_repr(result))
            else:
                logger.debug("Exiting %s", qualname)
            return result

        setattr(wrapper, "_debug_logging_wrapped", True)
        return cast(F, wrapper)

    return decorator


def _wrap_class(cls: type, logger: logging.Logger, skip: Set[str]) -> None:
    for attr_name, attr_value in list(cls.__dict__.items()):
        if attr_name.startswith("__"):
            continue
        qualified = f"{cls.__name__}.{attr_name}"
        if attr_name in skip or qualified in skip:
            continue
        if isinstance(attr_value, (staticmethod, classmethod)):
            wrapped = debug_log_call(logger, name=qualified)(attr_value.__func__)
            setattr(cls, attr_name, type(attr_value)(wrapped))
        elif inspect.isfunction(attr_value):
            setattr(cls, attr_name, debug_log_call(logger, name=qualified)(attr_value))


def apply_debug_logging(
    namespace: MutableMapping[str, Any],
    *,
    logger: Optional[logging.Logger] = None,
    skip: Optional[Iterable[str]] = None,
) -> None:
    """Wrap the functions and classes defined in *namespace* with call tracing."""

    module_name = namespace.get("__name__")
    logger = logger or logging.getLogger(module_name or __name__)
    skip_set: Set[str] = set(skip or [])

    for name, value in list(namespace.items()):
        if name in skip_set or getattr(value, "__module__", None) != module_name:
            continue
        if inspect.isfunction(value):
            namespace[name] = debug_log_call(logger, name=name)(value)
        elif inspect.isclass(value):
            _wrap_class(value, logger, skip_set)
