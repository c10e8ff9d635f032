"""
Host behaviour for Monty Hall Simulator

司会者が参加者の選択以外のハズレのドアを1つ開ける
"""

from typing import List, Sequence

from .config import DOORS, Outcome
from .game import GameState, RandomSource, resolve_rng, validate_position


def open_goat_door(
    game: GameState | Sequence[Outcome | str],
    pick: int,
    rng: RandomSource | None = None
) -> int:
    """
    司会者が開けるドアを決定

    Args:
        game: ゲーム状態
        pick: 参加者が最初に選んだドア位置
        rng: 乱数源（参加者が当たりを選んだ場合のみ使用）

    Returns:
        開けたドア位置（必ずハズレで、pickとは異なる）

    Note:
        検証はすべて乱数を消費する前に行う
    """
    state = GameState.coerce(game)
    pick = validate_position(pick)

    if state[pick] is Outcome.PRIZE:
        # 残り2つはどちらもハズレなので一様に選ぶ
        candidates: List[int] = [d for d in DOORS if d != pick]
        return int(resolve_rng(rng).choice(candidates))

    # ハズレを選んでいれば、開けられるドアは一意に決まる
    return next(d for d in state.goat_doors if d != pick)
