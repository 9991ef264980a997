"""
Ordered fallback extraction.

Optional catalog fields are read through a tuple of extraction strategies
evaluated in order; the first value that is neither None nor an empty string
wins. Keeping the order in data makes the precedence explicit and lets each
strategy be tested on its own.
"""

from typing import Any, Callable, Sequence, TypeVar

T = TypeVar("T")

Strategy = Callable[..., Any]


def is_present(value: Any) -> bool:
    return value is not None and value != ""


def first_present(strategies: Sequence[Strategy], *args: Any, default: T) -> Any:
    """
    Return the first present value produced by ``strategies``.

    Args:
        strategies: Callables evaluated in order with ``*args``
        default: Value returned when no strategy yields a present value

    Example:
        >>> first_present((lambda d: d.get("a"), lambda d: d.get("b")), {"b": 2}, default=0)
        2
    """
    for strategy in strategies:
        value = strategy(*args)
        if is_present(value):
            return value
    return default
