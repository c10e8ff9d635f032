"""
Simulation engine for Monty Hall Simulator

シミュレーションの実行エンジン
"""

import logging
from typing import Callable, List
import numpy as np

from .config import SimulationConfig, Strategy
from .game import RandomSource, create_game, select_door, determine_winner
from .host import open_goat_door
from .strategies import change_door
from .results import GameResult, SimulationResults


logger = logging.getLogger(__name__)


class SimulationEngine:
    """シミュレーション実行エンジン"""

    def __init__(
        self,
        config: SimulationConfig,
        rng: RandomSource | None = None,
        progress_callback: Callable[[int, int], None] | None = None
    ) -> None:
        """
        Args:
            config: シミュレーション設定
            rng: 乱数源（省略時は config.random_seed から生成）
            progress_callback: 進捗コールバック (current, total) -> None
        """
        self.config = config
        self.progress_callback = progress_callback

        # 乱数生成器（エンジンが唯一の所有者）
        self.rng = rng if rng is not None else np.random.default_rng(config.random_seed)

    def run(self) -> SimulationResults:
        """
        全ゲームを実行

        Returns:
            シミュレーション結果
        """
        n_games = self.config.n_games
        logger.debug(f"Running {n_games} games (seed={self.config.random_seed})")

        games: List[GameResult] = []

        for round_id in range(n_games):
            if self.progress_callback:
                self.progress_callback(round_id, n_games)

            games.append(self.play_round(round_id))

        if self.progress_callback:
            self.progress_callback(n_games, n_games)

        config_summary = self.config.to_dict()

        return SimulationResults(games=games, config_summary=config_summary)

    def play_round(self, round_id: int = 0) -> GameResult:
        """
        1ラウンドを実行

        両戦略を同じゲーム状態・同じ最初の選択・同じ開扉ドアで評価する。

        Args:
            round_id: ラウンドID

        Returns:
            ラウンド結果
        """
        game = create_game(self.rng)
        first_pick = select_door(self.rng)
        opened_door = open_goat_door(game, first_pick, self.rng)

        stay_door = change_door(Strategy.STAY, opened_door, first_pick)
        switch_door = change_door(Strategy.SWITCH, opened_door, first_pick)

        result = GameResult(
            round_id=round_id,
            prize_door=game.prize_door,
            first_pick=first_pick,
            opened_door=opened_door,
            stay_door=stay_door,
            switch_door=switch_door,
            stay=determine_winner(stay_door, game),
            switch=determine_winner(switch_door, game),
        )
        logger.debug(
            f"[round {round_id}] game={game.to_list()} pick={first_pick} "
            f"opened={opened_door} stay={result.stay.value} switch={result.switch.value}"
        )
        return result


def play_game(rng: RandomSource | None = None) -> GameResult:
    """
    1ラウンドを実行

    Args:
        rng: 乱数源（省略時は新規のnp.random.Generator）

    Returns:
        両戦略の勝敗を含むラウンド結果
    """
    engine = SimulationEngine(SimulationConfig(n_games=1), rng=rng)
    return engine.play_round(0)


def play_n_games(
    n: int = 100,
    rng: RandomSource | None = None,
    seed: int | None = None,
    progress_callback: Callable[[int, int], None] | None = None
) -> SimulationResults:
    """
    nラウンドを実行して結果を集約

    Args:
        n: ゲーム数（1以上）
        rng: 乱数源（指定時はseedより優先）
        seed: 再現性用シード
        progress_callback: 進捗コールバック

    Returns:
        シミュレーション結果（割合表は proportion_table() で取得）

    Raises:
        InvalidArgumentError: nが1未満または整数でない
    """
    config = SimulationConfig(n_games=n, random_seed=seed)
    engine = SimulationEngine(config, rng=rng, progress_callback=progress_callback)
    return engine.run()
