"""
Sorting app - Reorders todo items by a named strategy.

Strategies: priority, dueDate, alphabetical, completion, createdAt.
"""
