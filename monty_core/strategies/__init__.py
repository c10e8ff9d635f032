"""
Strategy implementations for Monty Hall Simulator
"""

from .base import BaseStrategy, StrategyProtocol
from .registry import register_strategy, get_strategy, list_strategies

# Import strategies to trigger registration
from .stay import StayStrategy
from .switch import SwitchStrategy

from .decision import change_door

__all__ = [
    "BaseStrategy",
    "StrategyProtocol",
    "register_strategy",
    "get_strategy",
    "list_strategies",
    "StayStrategy",
    "SwitchStrategy",
    "change_door",
]
