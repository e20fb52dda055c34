"""Decorators for the suggestion engine."""

import functools
import inspect
import logging
import time
import traceback
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import Any, TypeVar

from .logging import lint_file_ctx

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


@contextmanager
def _tracked(kind: str, containing_file: str | None) -> Iterator[None]:
    token = lint_file_ctx.set(containing_file)
    start_time = time.perf_counter()
    try:
        yield
    except Exception as e:
        duration = time.perf_counter() - start_time
        logger.error("Failed %s validation after %.4fs: %s", kind, duration, str(e))
        logger.debug("Traceback: %s", traceback.format_exc())
        raise
    else:
        duration = time.perf_counter() - start_time
        logger.debug("Completed %s validation in %.4fs", kind, duration)
    finally:
        lint_file_ctx.reset(token)


def track_validation(kind: str) -> Callable[[F], F]:
    """Decorator to track validations with timing and error logging.

    Works on both coroutines and plain functions. The ``containing_file``
    argument of the wrapped function, when present, is stored in a
    ContextVar so every log line emitted during the validation carries the
    file name.

    Args:
        kind: Name of the validation being tracked

    Returns:
        Decorated function with validation tracking
    """

    def decorator(func: F) -> F:
        signature = inspect.signature(func)

        def containing_file_of(args: tuple, kwargs: dict) -> str | None:
            bound = signature.bind_partial(*args, **kwargs)
            return bound.arguments.get("containing_file")

        if inspect.iscoroutinefunction(func):

            @functools.wraps(func)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                with _tracked(kind, containing_file_of(args, kwargs)):
                    return await func(*args, **kwargs)

            return async_wrapper  # type: ignore[return-value]

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            with _tracked(kind, containing_file_of(args, kwargs)):
                return func(*args, **kwargs)

        return wrapper  # type: ignore[return-value]

    return decorator
