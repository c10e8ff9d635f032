"""
Stay strategy for Monty Hall Simulator
"""

from .base import BaseStrategy
from .registry import register_strategy
from ..config import Strategy


@register_strategy(Strategy.STAY)
class StayStrategy(BaseStrategy):
    """最初の選択を維持する"""

    name = "Stay"

    def final_door(self, revealed: int, pick: int) -> int:
        return pick
