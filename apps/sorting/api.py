"""
API Router for Sorting app.
Validates sort requests at the boundary and delegates ordering to services.
"""
import logging
from typing import Any, List

from django.http import HttpRequest
from ninja import Router

from .schemas import SortIn, StrategyOut, StrategyListOut, ErrorOut
from .services import sort_todos
from .strategies import list_strategies, is_valid_strategy, describe_strategy

logger = logging.getLogger(__name__)

router = Router(tags=["Sorting"])


@router.post("/sort", response={200: List[Any], 400: ErrorOut, 500: ErrorOut})
def sort_todo_items(request: HttpRequest, payload: SortIn = None):
    """
    Sort todos by the requested strategy.

    `sortBy` defaults to `createdAt`. Every todo is returned unchanged,
    only the order differs.
    """
    if payload is None:
        # Empty body reads as {}
        payload = SortIn()

    todos = payload.todos
    sort_by = payload.sortBy

    # Empty containers are present; null, false, 0 and "" count as missing
    if todos is None or (isinstance(todos, (bool, int, float, str)) and not todos):
        return 400, ErrorOut(
            error="Missing required field: todos",
            message='Request body must include a "todos" array',
        )

    if not isinstance(todos, list):
        return 400, ErrorOut(
            error="Invalid todos format",
            message='Field "todos" must be an array',
        )

    if not is_valid_strategy(sort_by):
        return 400, ErrorOut(
            error="Invalid sorting strategy",
            message=f"Supported strategies: {', '.join(list_strategies())}",
        )

    logger.info(f"Sorting {len(todos)} todos by: {sort_by}")

    try:
        return 200, sort_todos(todos, sort_by)
    except Exception:
        logger.exception("Error sorting todos")
        return 500, ErrorOut(
            error="Internal server error",
            message="Failed to sort todos",
        )


@router.get("/sort/strategies", response=StrategyListOut)
def get_strategies(request: HttpRequest):
    """List supported sorting strategies in declaration order."""
    strategies = [
        StrategyOut(key=info.key, name=info.name, description=info.description)
        for info in map(describe_strategy, list_strategies())
    ]
    return StrategyListOut(strategies=strategies, count=len(strategies))
