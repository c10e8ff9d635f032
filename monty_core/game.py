"""
Game state for Monty Hall Simulator

ゲーム状態（3ドアへの当たり・ハズレの割り当て）の生成と判定
"""

from dataclasses import dataclass
from numbers import Integral
from typing import Iterator, List, Protocol, Sequence, Tuple
import numpy as np

from .config import DOORS, Outcome, Verdict
from .exceptions import InvalidPositionError, InvalidStateError


# create_gameで並べ替える固定の中身（ハズレ2つ、当たり1つ）
_BASE_DOORS: Tuple[Outcome, ...] = (Outcome.EMPTY, Outcome.EMPTY, Outcome.PRIZE)


class RandomSource(Protocol):
    """シミュレーションが利用する乱数源のインターフェース（np.random.Generatorの部分集合）"""

    def permutation(self, x: int) -> Sequence[int]:
        """0〜x-1のランダムな並べ替え"""
        ...

    def integers(self, low: int, high: int) -> int:
        """[low, high) の一様整数"""
        ...

    def choice(self, a: Sequence[int]) -> int:
        """aから一様に1つ選択"""
        ...


def validate_position(position: object) -> int:
    """
    ドア位置を検証してintで返す

    Raises:
        InvalidPositionError: 整数でない、または1〜3の範囲外
    """
    if isinstance(position, bool) or not isinstance(position, Integral):
        raise InvalidPositionError(position)
    if int(position) not in DOORS:
        raise InvalidPositionError(position)
    return int(position)


@dataclass(frozen=True)
class GameState:
    """
    1ラウンドのゲーム状態（イミュータブル）

    3つのドアのうち当たり（car）が1つ、ハズレ（goat）が2つ。
    ドア位置は1始まりで参照する。
    """

    doors: Tuple[Outcome, ...]

    def __post_init__(self) -> None:
        # リストで渡されても後から書き換えられないようにタプルへ固定
        try:
            object.__setattr__(self, "doors", tuple(self.doors))
        except TypeError as e:
            raise InvalidStateError(f"ゲーム状態に変換できません: {self.doors!r}") from e
        if len(self.doors) != len(DOORS):
            raise InvalidStateError(
                f"ドア数は{len(DOORS)}である必要があります: {len(self.doors)}"
            )
        if not all(isinstance(d, Outcome) for d in self.doors):
            raise InvalidStateError(f"不正なドアの中身です: {self.doors!r}")
        n_prize = sum(1 for d in self.doors if d is Outcome.PRIZE)
        if n_prize != 1:
            raise InvalidStateError(
                f"当たりのドアはちょうど1つである必要があります: {n_prize}"
            )

    @classmethod
    def coerce(cls, value: "GameState | Sequence[Outcome | str]") -> "GameState":
        """
        シーケンス（例: ["goat", "car", "goat"]）をGameStateに変換

        Raises:
            InvalidStateError: 中身のラベルが不正、または当たりの数が不正
        """
        if isinstance(value, GameState):
            return value
        try:
            doors = tuple(Outcome(v) for v in value)
        except (TypeError, ValueError) as e:
            raise InvalidStateError(f"ゲーム状態に変換できません: {value!r}") from e
        return cls(doors)

    def __getitem__(self, position: int) -> Outcome:
        return self.doors[validate_position(position) - 1]

    def __iter__(self) -> Iterator[Outcome]:
        return iter(self.doors)

    def __len__(self) -> int:
        return len(self.doors)

    @property
    def prize_door(self) -> int:
        """当たりのドア位置"""
        return self.doors.index(Outcome.PRIZE) + 1

    @property
    def goat_doors(self) -> Tuple[int, ...]:
        """ハズレのドア位置"""
        return tuple(p for p in DOORS if self.doors[p - 1] is Outcome.EMPTY)

    def to_list(self) -> List[str]:
        """文字列のリストに変換"""
        return [d.value for d in self.doors]


def resolve_rng(rng: RandomSource | None) -> RandomSource:
    """rngがNoneなら新規のnp.random.Generatorを返す"""
    return rng if rng is not None else np.random.default_rng()


def create_game(rng: RandomSource | None = None) -> GameState:
    """
    新しいゲームを生成

    ハズレ2つ・当たり1つを一様ランダムに並べ替える。

    Args:
        rng: 乱数源（省略時は新規のnp.random.Generator）

    Returns:
        ゲーム状態
    """
    order = resolve_rng(rng).permutation(len(_BASE_DOORS))
    return GameState(tuple(_BASE_DOORS[int(i)] for i in order))


def select_door(rng: RandomSource | None = None) -> int:
    """
    参加者の最初の選択（1〜3の一様乱数）

    Args:
        rng: 乱数源

    Returns:
        選択したドア位置
    """
    return int(resolve_rng(rng).integers(DOORS[0], DOORS[-1] + 1))


def determine_winner(final: int, game: GameState | Sequence[Outcome | str]) -> Verdict:
    """
    最終選択ドアの勝敗を判定

    Args:
        final: 最終的に選んだドア位置
        game: ゲーム状態

    Returns:
        当たりならWIN、ハズレならLOSE

    Raises:
        InvalidPositionError: ドア位置が範囲外
        InvalidStateError: ゲーム状態が不正
    """
    state = GameState.coerce(game)
    return Verdict.WIN if state[final] is Outcome.PRIZE else Verdict.LOSE
