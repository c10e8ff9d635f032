"""
Base class for Strategies in Monty Hall Simulator

最終選択戦略の抽象基底クラス
"""

from abc import ABC, abstractmethod
from typing import Protocol


class StrategyProtocol(Protocol):
    """戦略が満たすべきインターフェース（静的型チェック用）"""

    def final_door(self, revealed: int, pick: int) -> int:
        """最終的に選ぶドア位置を返す"""
        ...


class BaseStrategy(ABC):
    """
    戦略の抽象基底クラス

    全ての戦略はこのクラスを継承して実装する。
    戦略は状態を持たず、乱数も使用しない。
    """

    # サブクラスで定義必須
    name: str = ""

    @abstractmethod
    def final_door(self, revealed: int, pick: int) -> int:
        """
        最終的に選ぶドア位置を決定

        Args:
            revealed: 司会者が開けたドア位置
            pick: 参加者が最初に選んだドア位置

        Returns:
            最終選択のドア位置

        Note:
            呼び出し側で revealed != pick と範囲を検証済みであること
        """
        pass
