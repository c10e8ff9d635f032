"""
Decision resolver for Monty Hall Simulator

戦略に応じて最終選択のドアを決定
"""

from .registry import get_strategy
from ..config import Strategy
from ..exceptions import InvalidArgumentError
from ..game import validate_position


def change_door(strategy: Strategy | str, revealed: int, pick: int) -> int:
    """
    最終選択のドアを決定

    Args:
        strategy: STAY または SWITCH
        revealed: 司会者が開けたドア位置
        pick: 参加者が最初に選んだドア位置

    Returns:
        最終選択のドア位置

    Raises:
        InvalidPositionError: ドア位置が範囲外
        InvalidArgumentError: revealed == pick、または未知の戦略
    """
    revealed = validate_position(revealed)
    pick = validate_position(pick)
    if revealed == pick:
        raise InvalidArgumentError(
            f"開けたドアと選択ドアが同じです: revealed={revealed}, pick={pick}"
        )
    return get_strategy(strategy).final_door(revealed, pick)
