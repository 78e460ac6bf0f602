"""
API Schemas for Sorting app.
Pydantic/Ninja schemas for request/response validation.
"""
from typing import Any, List

from ninja import Schema

from .strategies import DEFAULT_STRATEGY


# =============================================================================
# Request Schemas
# =============================================================================

class SortIn(Schema):
    """
    Body of a sort request.

    Both fields are loosely typed so the endpoint can answer with its own
    400 messages instead of a generic validation error.
    """
    todos: Any = None
    sortBy: Any = DEFAULT_STRATEGY


# =============================================================================
# Response Schemas
# =============================================================================

class StrategyOut(Schema):
    key: str
    name: str
    description: str


class StrategyListOut(Schema):
    strategies: List[StrategyOut]
    count: int


class ErrorOut(Schema):
    """Error response."""
    error: str
    message: str
