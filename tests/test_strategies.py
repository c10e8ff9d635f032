"""
Tests for strategies and change_door
"""

from itertools import permutations

import pytest

from monty_core.config import Strategy
from monty_core.exceptions import InvalidArgumentError, InvalidPositionError
from monty_core.strategies import (
    BaseStrategy,
    StayStrategy,
    SwitchStrategy,
    change_door,
    get_strategy,
    list_strategies,
    register_strategy,
)


VALID_PAIRS = list(permutations((1, 2, 3), 2))


class TestChangeDoor:
    """change_doorのテスト"""

    @pytest.mark.parametrize("revealed,pick", VALID_PAIRS)
    def test_stay_is_identity(self, revealed: int, pick: int) -> None:
        """STAYは最初の選択をそのまま返す"""
        assert change_door(Strategy.STAY, revealed, pick) == pick

    @pytest.mark.parametrize("revealed,pick", VALID_PAIRS)
    def test_switch_returns_remaining_door(self, revealed: int, pick: int) -> None:
        """SWITCHは開扉ドアでも選択ドアでもない唯一のドアを返す"""
        final = change_door(Strategy.SWITCH, revealed, pick)
        assert {final} == {1, 2, 3} - {revealed, pick}

    def test_accepts_strategy_strings(self) -> None:
        """文字列でも指定できる"""
        assert change_door("stay", 3, 1) == 1
        assert change_door("SWITCH", 3, 1) == 2

    def test_same_door_raises(self) -> None:
        """revealed == pick はエラー"""
        with pytest.raises(InvalidArgumentError, match="同じです"):
            change_door(Strategy.SWITCH, 2, 2)

    @pytest.mark.parametrize("revealed,pick", [(0, 1), (1, 4), (2.0, 1)])
    def test_out_of_range_raises(self, revealed, pick) -> None:
        """範囲外のドアはエラー"""
        with pytest.raises(InvalidPositionError):
            change_door(Strategy.STAY, revealed, pick)

    def test_unknown_strategy_raises(self) -> None:
        """未知の戦略はエラー"""
        with pytest.raises(InvalidArgumentError, match="Unknown strategy"):
            change_door("hold", 3, 1)


class TestRegistry:
    """戦略レジストリのテスト"""

    def test_list_strategies(self) -> None:
        """STAY, SWITCHの順で登録済み"""
        assert list_strategies() == [Strategy.STAY, Strategy.SWITCH]

    def test_get_strategy_types(self) -> None:
        """登録クラスのインスタンスを返す"""
        assert isinstance(get_strategy(Strategy.STAY), StayStrategy)
        assert isinstance(get_strategy("switch"), SwitchStrategy)

    def test_duplicate_registration_raises(self) -> None:
        """同じ戦略の二重登録はエラー"""
        with pytest.raises(ValueError, match="already registered"):
            @register_strategy(Strategy.STAY)
            class AnotherStay(BaseStrategy):
                name = "Another"

                def final_door(self, revealed: int, pick: int) -> int:
                    return pick
