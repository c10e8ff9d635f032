"""
Configuration classes for Monty Hall Simulator
"""

from dataclasses import dataclass
from enum import Enum
from numbers import Integral
from typing import Tuple

from .exceptions import InvalidArgumentError


# ドア位置（1始まり）
DOORS: Tuple[int, ...] = (1, 2, 3)


class Outcome(str, Enum):
    """ドアの中身"""
    PRIZE = "car"
    EMPTY = "goat"


class Strategy(str, Enum):
    """最終選択の戦略"""
    STAY = "stay"      # 最初の選択を維持
    SWITCH = "switch"  # 残りの未開扉ドアに変更


class Verdict(str, Enum):
    """1戦略・1ラウンドの勝敗"""
    WIN = "WIN"
    LOSE = "LOSE"


def to_strategy(strategy: "Strategy | str") -> Strategy:
    """
    文字列またはStrategyをStrategyに変換（大文字小文字は区別しない）

    Raises:
        InvalidArgumentError: 未知の戦略
    """
    try:
        return Strategy(strategy.lower() if isinstance(strategy, str) else strategy)
    except ValueError as e:
        raise InvalidArgumentError(f"Unknown strategy: {strategy!r}") from e


def _is_int(value: object) -> bool:
    # boolはintのサブクラスなので除外
    return isinstance(value, Integral) and not isinstance(value, bool)


@dataclass(frozen=True)
class SimulationConfig:
    """シミュレーション全体の設定（イミュータブル）"""

    n_games: int = 100               # ゲーム数（1以上）
    random_seed: int | None = None   # 再現性用シード（オプション）
    decimals: int = 2                # 割合表の表示桁数（0〜6）

    def __post_init__(self) -> None:
        """バリデーション"""
        # ゲーム数チェック
        if not _is_int(self.n_games):
            raise InvalidArgumentError(
                f"ゲーム数は整数である必要があります: {self.n_games!r}"
            )
        if self.n_games < 1:
            raise InvalidArgumentError(
                f"ゲーム数は1以上である必要があります: {self.n_games}"
            )

        if not _is_int(self.decimals) or not (0 <= self.decimals <= 6):
            raise InvalidArgumentError(
                f"表示桁数は0〜6の整数である必要があります: {self.decimals!r}"
            )

        if self.random_seed is not None and (
            not _is_int(self.random_seed) or self.random_seed < 0
        ):
            raise InvalidArgumentError(
                f"シードは0以上の整数である必要があります: {self.random_seed!r}"
            )

    def to_dict(self) -> dict:
        """設定を辞書形式に変換"""
        return {
            "n_games": int(self.n_games),
            "random_seed": self.random_seed,
            "decimals": self.decimals,
        }
