"""
Sorting strategies for todo items.

Each strategy is defined by a sort key computed once per record; its
three-way comparator (negative / zero / positive) compares those keys, so
both always agree. Records are read field by field and are never modified;
a record may be a mapping (decoded JSON) or any object exposing attributes.

Date handling:
    Date fields accept ISO-8601 date or date-time text, date/datetime
    objects, or numbers (milliseconds since the Unix epoch). Naive values
    are read as UTC. Absent, empty, unparseable or out-of-range dates map
    to EARLIEST, so they sort last under "newest first" and first among
    dated items under "due date ascending".

Title handling:
    Titles compare case-insensitively with accents folded away, accents
    only breaking ties. Characters are grouped the way common collations
    order them: whitespace, then punctuation and symbols, then digits, then
    letters; code point order applies inside a group.
"""
import math
import unicodedata
from collections.abc import Mapping
from datetime import date, datetime, time, timezone
from typing import Any, Callable, Dict, List, Tuple

from django.utils.dateparse import parse_date, parse_datetime

from .dtos import StrategyInfo

Comparator = Callable[[Any, Any], int]
SortKey = Callable[[Any], Tuple]

EARLIEST = -math.inf

DEFAULT_STRATEGY = 'createdAt'

NO_DESCRIPTION = 'No description available'

PRIORITY_RANK: Dict[str, int] = {'HIGH': 1, 'MEDIUM': 2, 'LOW': 3}
DEFAULT_PRIORITY_RANK = PRIORITY_RANK['MEDIUM']

# Character groups for title ordering
_SPACE, _PUNCTUATION, _DIGIT, _LETTER = range(4)


# =============================================================================
# Field Access
# =============================================================================

def _field(todo: Any, name: str) -> Any:
    """Read a field from a mapping or an attribute-style record."""
    if isinstance(todo, Mapping):
        return todo.get(name)
    return getattr(todo, name, None)


def to_instant(value: Any) -> float:
    """
    Convert a date-like value into a sortable POSIX timestamp.

    Returns EARLIEST for anything that cannot be read as a date.
    """
    if value is None or isinstance(value, bool):
        return EARLIEST

    if isinstance(value, (int, float)):
        try:
            seconds = float(value) / 1000
        except OverflowError:
            # Integers beyond the float range
            return EARLIEST
        return seconds if math.isfinite(seconds) else EARLIEST

    if isinstance(value, datetime):
        moment = value
    elif isinstance(value, date):
        moment = datetime.combine(value, time.min)
    elif isinstance(value, str):
        moment = _parse_text(value.strip())
        if moment is None:
            return EARLIEST
    else:
        return EARLIEST

    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.timestamp()


def _parse_text(text: str):
    try:
        parsed = parse_datetime(text)
        if parsed is not None:
            return parsed
        day = parse_date(text)
    except ValueError:
        # Well formed but out of range, e.g. "2024-13-45"
        return None
    if day is None:
        return None
    return datetime.combine(day, time.min)


def _compare(a, b) -> int:
    return (a > b) - (a < b)


def _newest_first(todo: Any) -> float:
    return -to_instant(_field(todo, 'createdAt'))


def _priority_rank(todo: Any) -> int:
    priority = _field(todo, 'priority')
    if not isinstance(priority, str):
        return DEFAULT_PRIORITY_RANK
    return PRIORITY_RANK.get(priority, DEFAULT_PRIORITY_RANK)


def _char_group(ch: str) -> int:
    if ch.isspace():
        return _SPACE
    if ch.isdigit():
        return _DIGIT
    if ch.isalpha():
        return _LETTER
    return _PUNCTUATION


def _title(todo: Any) -> str:
    title = _field(todo, 'title')
    if not title:
        return ''
    return title if isinstance(title, str) else str(title)


# =============================================================================
# Sort Keys
# =============================================================================

def created_at_key(todo: Any) -> Tuple:
    """Newest first."""
    return (_newest_first(todo),)


def priority_key(todo: Any) -> Tuple:
    """HIGH → MEDIUM → LOW, unknown priorities rank as MEDIUM."""
    return (_priority_rank(todo), _newest_first(todo))


def due_date_key(todo: Any) -> Tuple:
    """Items with a due date first, earliest due date first."""
    due = _field(todo, 'dueDate')
    if due:
        return (0, to_instant(due), _newest_first(todo))
    return (1, 0.0, _newest_first(todo))


def alphabetical_key(todo: Any) -> Tuple:
    """Case-insensitive title order; accents only break ties."""
    folded = _title(todo).casefold()
    decomposed = unicodedata.normalize('NFKD', folded)
    base = tuple(
        (_char_group(ch), ch) for ch in decomposed if not unicodedata.combining(ch)
    )
    return (base, folded)


def completion_key(todo: Any) -> Tuple:
    """Incomplete before completed."""
    return (int(bool(_field(todo, 'completed'))), _newest_first(todo))


# =============================================================================
# Comparators
# =============================================================================

def _comparator_for(sort_key: SortKey) -> Comparator:
    def compare(a: Any, b: Any) -> int:
        return _compare(sort_key(a), sort_key(b))
    compare.__doc__ = sort_key.__doc__
    return compare


compare_created_at = _comparator_for(created_at_key)
compare_priority = _comparator_for(priority_key)
compare_due_date = _comparator_for(due_date_key)
compare_alphabetical = _comparator_for(alphabetical_key)
compare_completion = _comparator_for(completion_key)


# =============================================================================
# Registry
# =============================================================================

STRATEGIES: Dict[str, StrategyInfo] = {
    info.key: info
    for info in (
        StrategyInfo('priority', 'Priority', 'Sort by priority level (High → Medium → Low)'),
        StrategyInfo('dueDate', 'Due Date', 'Sort by due date (upcoming first, then by date)'),
        StrategyInfo('alphabetical', 'Alphabetical', 'Sort alphabetically by title'),
        StrategyInfo('completion', 'Completion Status', 'Sort by completion status (incomplete first)'),
        StrategyInfo('createdAt', 'Creation Date', 'Sort by creation date (newest first)'),
    )
}

SORT_KEYS: Dict[str, SortKey] = {
    'priority': priority_key,
    'dueDate': due_date_key,
    'alphabetical': alphabetical_key,
    'completion': completion_key,
    'createdAt': created_at_key,
}

COMPARATORS: Dict[str, Comparator] = {
    'priority': compare_priority,
    'dueDate': compare_due_date,
    'alphabetical': compare_alphabetical,
    'completion': compare_completion,
    'createdAt': compare_created_at,
}


def list_strategies() -> List[str]:
    """Supported strategy keys, in declaration order."""
    return list(STRATEGIES)


def is_valid_strategy(key: Any) -> bool:
    return isinstance(key, str) and key in STRATEGIES


def describe_strategy(key: Any) -> StrategyInfo:
    """
    Display metadata for a strategy key.

    Unknown keys fall back to the raw key text as the name and a generic
    description, so this never raises.
    """
    if is_valid_strategy(key):
        return STRATEGIES[key]
    return StrategyInfo(key=str(key), name=str(key), description=NO_DESCRIPTION)


def get_sort_key(key: Any) -> SortKey:
    """Sort key for a strategy; unknown keys use the creation date ordering."""
    if is_valid_strategy(key):
        return SORT_KEYS[key]
    return SORT_KEYS[DEFAULT_STRATEGY]


def get_comparator(key: Any) -> Comparator:
    """Comparator for a key; unknown keys use the creation date ordering."""
    if is_valid_strategy(key):
        return COMPARATORS[key]
    return COMPARATORS[DEFAULT_STRATEGY]
