"""
Services for Sorting app.
This is the public API other apps use to reorder todo items.
"""
from collections.abc import Sequence
from typing import Any, List

from .strategies import DEFAULT_STRATEGY, get_sort_key


class InvalidInputError(ValueError):
    """Raised when the items to sort are not a sequence."""


def sort_todos(todos: Sequence, sort_by: str = DEFAULT_STRATEGY) -> List[Any]:
    """
    Return a new list holding the same todos, ordered by the given strategy.

    The input sequence and its items are left untouched. Unknown strategy
    keys fall back to creation date ordering; callers that must reject
    unknown keys check `is_valid_strategy` first.

    Raises:
        InvalidInputError: If todos is not a sequence.
    """
    if not isinstance(todos, Sequence) or isinstance(todos, (str, bytes, bytearray)):
        raise InvalidInputError('Todos must be an array')

    # Keys are computed once per todo; sorted() is stable, so equal keys keep input order
    return sorted(todos, key=get_sort_key(sort_by))
