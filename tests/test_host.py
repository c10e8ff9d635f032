"""
Tests for open_goat_door
"""

from collections import Counter
from itertools import product

import pytest
import numpy as np

from monty_core.config import Outcome
from monty_core.exceptions import InvalidPositionError, InvalidStateError
from monty_core.game import GameState
from monty_core.host import open_goat_door


CAR = Outcome.PRIZE
GOAT = Outcome.EMPTY

# 3通りのゲーム状態（当たりのドア位置 -> 状態）
FIXED_GAMES = {
    1: GameState((CAR, GOAT, GOAT)),
    2: GameState((GOAT, CAR, GOAT)),
    3: GameState((GOAT, GOAT, CAR)),
}


class ExplodingRNG:
    """呼ばれたら失敗する乱数源"""

    def permutation(self, x):
        raise AssertionError("rng should not be used")

    def integers(self, low, high):
        raise AssertionError("rng should not be used")

    def choice(self, a):
        raise AssertionError("rng should not be used")


class TestOpenGoatDoor:
    """open_goat_doorのテスト"""

    @pytest.mark.parametrize("prize_door,pick", list(product((1, 2, 3), (1, 2, 3))))
    def test_reveals_goat_not_pick(self, prize_door: int, pick: int) -> None:
        """全9通りで、開けるドアは必ずハズレかつ選択ドア以外"""
        game = FIXED_GAMES[prize_door]
        rng = np.random.default_rng(prize_door * 10 + pick)
        for _ in range(20):
            opened = open_goat_door(game, pick, rng)
            assert opened != pick
            assert game[opened] is GOAT

    @pytest.mark.parametrize("prize_door,pick", [
        (d, p) for d, p in product((1, 2, 3), (1, 2, 3)) if d != p
    ])
    def test_goat_pick_is_deterministic(self, prize_door: int, pick: int) -> None:
        """ハズレを選んだ場合は乱数を使わず一意に決まる"""
        game = FIXED_GAMES[prize_door]
        opened = open_goat_door(game, pick, ExplodingRNG())
        assert opened == 6 - prize_door - pick

    def test_prize_pick_splits_evenly(self) -> None:
        """当たりを選んだ場合は残り2つから一様に選ぶ"""
        rng = np.random.default_rng(7)
        counts = Counter(open_goat_door(FIXED_GAMES[1], 1, rng) for _ in range(4000))
        assert set(counts) == {2, 3}
        assert abs(counts[2] / 4000 - 0.5) < 0.05

    def test_accepts_string_game(self) -> None:
        """文字列のリストも受け付ける"""
        assert open_goat_door(["goat", "car", "goat"], 1) == 3

    def test_invalid_pick_raises_before_draw(self) -> None:
        """範囲外の選択は乱数消費前にエラー"""
        with pytest.raises(InvalidPositionError):
            open_goat_door(FIXED_GAMES[1], 4, ExplodingRNG())

    def test_invalid_state_raises_before_draw(self) -> None:
        """不正なゲーム状態は乱数消費前にエラー"""
        with pytest.raises(InvalidStateError):
            open_goat_door(["car", "car", "goat"], 1, ExplodingRNG())
