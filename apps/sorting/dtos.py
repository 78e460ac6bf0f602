"""DTOs for Sorting app."""
from dataclasses import dataclass


@dataclass(frozen=True)
class StrategyInfo:
    key: str
    name: str
    description: str
