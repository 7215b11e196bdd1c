"""
Ranked extraction strategies.

Each extractor lists its strategies as ``(name, callable)`` pairs in priority
order; ``run_strategies`` evaluates them until one produces a non-empty
result.
"""
from __future__ import annotations

from typing import Callable, List, Optional, Sequence, Tuple, TypeVar

from ..logger import get_logger

logger = get_logger(__name__)

T = TypeVar("T")

Strategy = Tuple[str, Callable[[], Optional[T]]]

# Errors a strategy may hit on malformed markup or structured data
STRATEGY_ERRORS = (
    AttributeError,
    KeyError,
    TypeError,
    ValueError,
    IndexError,
)


def _is_empty(value: object) -> bool:
    if value is None:
        return True
    if isinstance(value, (str, list, tuple, dict, set)):
        return len(value) == 0
    return False


def run_strategies(
    strategies: Sequence[Strategy[T]],
    *,
    label: str,
) -> Tuple[Optional[str], Optional[T]]:
    """
    Evaluate strategies in order and return the first non-empty result.

    A strategy that raises one of ``STRATEGY_ERRORS`` is logged and treated
    as having found nothing.

    Args:
        strategies: ``(name, callable)`` pairs in priority order
        label: Field name used in log messages

    Returns:
        ``(strategy_name, value)`` of the winning strategy, or ``(None, None)``
    """
    for name, strategy in strategies:
        try:
            value = strategy()
        except STRATEGY_ERRORS as e:
            logger.warning("%s strategy %s failed: %s", label.upper(), name, e)
            continue

        if not _is_empty(value):
            logger.debug("%s found via %s", label.upper(), name)
            return name, value

    logger.debug("%s no strategy produced a value", label.upper())
    return None, None


def unique(values: Sequence[str]) -> List[str]:
    """Deduplicate while keeping the first occurrence of each value."""
    seen = set()
    result = []
    for value in values:
        if value not in seen:
            seen.add(value)
            result.append(value)
    return result
