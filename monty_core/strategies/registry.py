"""
Strategy registry for Monty Hall Simulator

戦略クラスの登録・取得機構（プラグインパターン）
"""

from typing import Callable, Dict, List, Type

from .base import BaseStrategy
from ..config import Strategy, to_strategy
from ..exceptions import InvalidArgumentError


# 戦略クラスの登録用辞書
_STRATEGY_REGISTRY: Dict[Strategy, Type[BaseStrategy]] = {}


def register_strategy(
    strategy: Strategy
) -> Callable[[Type[BaseStrategy]], Type[BaseStrategy]]:
    """
    戦略クラスを登録するデコレータ

    Usage:
        @register_strategy(Strategy.STAY)
        class StayStrategy(BaseStrategy):
            ...

    Raises:
        ValueError: 同じStrategyが既に登録されている場合
    """
    def decorator(cls: Type[BaseStrategy]) -> Type[BaseStrategy]:
        if strategy in _STRATEGY_REGISTRY:
            existing = _STRATEGY_REGISTRY[strategy]
            raise ValueError(
                f"Strategy {strategy} is already registered by {existing.__name__}"
            )
        _STRATEGY_REGISTRY[strategy] = cls
        return cls

    return decorator


def get_strategy(strategy: Strategy | str) -> BaseStrategy:
    """
    登録された戦略をインスタンス化して取得

    Args:
        strategy: 戦略の種別（"stay" / "switch" の文字列も可）

    Returns:
        戦略インスタンス

    Raises:
        InvalidArgumentError: 未知または未登録の戦略
    """
    key = to_strategy(strategy)
    if key not in _STRATEGY_REGISTRY:
        available = list(_STRATEGY_REGISTRY.keys())
        raise InvalidArgumentError(
            f"Strategy not registered: {key}. "
            f"Available strategies: {available}"
        )

    return _STRATEGY_REGISTRY[key]()


def list_strategies() -> List[Strategy]:
    """登録済みの戦略一覧を取得（Strategy定義順）"""
    return [s for s in Strategy if s in _STRATEGY_REGISTRY]
