"""
Switch strategy for Monty Hall Simulator
"""

from .base import BaseStrategy
from .registry import register_strategy
from ..config import DOORS, Strategy


@register_strategy(Strategy.SWITCH)
class SwitchStrategy(BaseStrategy):
    """
    残りの未開扉ドアに変更する

    revealed と pick は異なるので、残りのドアはちょうど1つ。
    """

    name = "Switch"

    def final_door(self, revealed: int, pick: int) -> int:
        remaining = [d for d in DOORS if d not in (revealed, pick)]
        return remaining[0]
