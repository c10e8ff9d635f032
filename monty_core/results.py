"""
Result data structures for Monty Hall Simulator

ラウンド結果とシミュレーション結果の集約
"""

from dataclasses import dataclass
from typing import List, Dict, Any
import pandas as pd
from scipy.stats import binomtest

from .config import Strategy, Verdict, to_strategy


@dataclass(frozen=True)
class RoundResult:
    """1ラウンド・1戦略の結果"""

    round_id: int        # ラウンドID（0始まり）
    strategy: Strategy
    verdict: Verdict

    def to_dict(self) -> Dict[str, Any]:
        """辞書形式に変換"""
        return {
            "round_id": self.round_id,
            "strategy": self.strategy.value,
            "outcome": self.verdict.value,
        }


@dataclass(frozen=True)
class GameResult:
    """1ラウンドの結果（同じゲーム状態に対する両戦略の勝敗）"""

    round_id: int        # ラウンドID（0始まり）
    prize_door: int      # 当たりのドア
    first_pick: int      # 最初の選択
    opened_door: int     # 司会者が開けたドア
    stay_door: int       # STAY時の最終選択
    switch_door: int     # SWITCH時の最終選択
    stay: Verdict
    switch: Verdict

    def outcome(self, strategy: Strategy | str) -> Verdict:
        """戦略ごとの勝敗"""
        if to_strategy(strategy) is Strategy.STAY:
            return self.stay
        return self.switch

    def to_round_results(self) -> List[RoundResult]:
        """戦略ごとのRoundResultに分解"""
        return [
            RoundResult(self.round_id, Strategy.STAY, self.stay),
            RoundResult(self.round_id, Strategy.SWITCH, self.switch),
        ]

    def to_dict(self) -> Dict[str, Any]:
        """辞書形式に変換"""
        return {
            "round_id": self.round_id,
            "prize_door": self.prize_door,
            "first_pick": self.first_pick,
            "opened_door": self.opened_door,
            "stay_door": self.stay_door,
            "switch_door": self.switch_door,
            "stay": self.stay.value,
            "switch": self.switch.value,
        }


@dataclass
class SimulationResults:
    """全ラウンドの結果を集約"""

    games: List[GameResult]
    config_summary: Dict[str, Any]

    @property
    def n_games(self) -> int:
        """ゲーム数"""
        return len(self.games)

    def round_results(self) -> List[RoundResult]:
        """全RoundResult（ラウンド順、各ラウンドSTAY→SWITCH）"""
        return [r for g in self.games for r in g.to_round_results()]

    def to_dataframe(self) -> pd.DataFrame:
        """
        結果を縦長のDataFrameに変換

        Returns:
            1行 = 1ラウンド・1戦略（2n行）、列は round_id, strategy, outcome
        """
        records = [r.to_dict() for r in self.round_results()]
        return pd.DataFrame(records, columns=["round_id", "strategy", "outcome"])

    def to_wide_dataframe(self) -> pd.DataFrame:
        """
        結果を横長のDataFrameに変換

        Returns:
            1行 = 1ラウンド（n行）、ドア情報と stay / switch の勝敗列
        """
        return pd.DataFrame([g.to_dict() for g in self.games])

    def count_outcomes(self) -> Dict[Strategy, Dict[str, int]]:
        """
        戦略ごとの勝敗数をカウント

        Returns:
            {Strategy.STAY: {"WIN": k, "LOSE": n - k}, Strategy.SWITCH: {...}}
        """
        counts: Dict[Strategy, Dict[str, int]] = {}
        for strategy in Strategy:
            wins = sum(1 for g in self.games if g.outcome(strategy) is Verdict.WIN)
            counts[strategy] = {
                Verdict.WIN.value: wins,
                Verdict.LOSE.value: self.n_games - wins,
            }
        return counts

    def proportion_table(self, decimals: int = 2) -> pd.DataFrame:
        """
        戦略×勝敗の割合表（行方向に正規化）

        Args:
            decimals: 丸める小数点以下桁数

        Returns:
            行 = strategy（stay, switch）、列 = outcome（WIN, LOSE）のDataFrame
        """
        df = self.to_dataframe()
        table = pd.crosstab(df["strategy"], df["outcome"], normalize="index")
        # 全勝・全敗でも2×2になるようにそろえる
        table = table.reindex(
            index=[s.value for s in Strategy],
            columns=[v.value for v in Verdict],
            fill_value=0.0,
        )
        table.index.name = "strategy"
        table.columns.name = "outcome"
        return table.round(decimals)

    def win_rate(self, strategy: Strategy | str) -> float:
        """戦略の勝率"""
        counts = self.count_outcomes()[to_strategy(strategy)]
        return counts[Verdict.WIN.value] / self.n_games

    def compute_statistics(self, confidence_level: float = 0.95) -> Dict[str, Dict[str, float]]:
        """
        統計量を計算

        Args:
            confidence_level: 勝率の信頼区間の水準

        Returns:
            {"stay": {...}, "switch": {...}} 形式の辞書
            各項目は wins, losses, win_rate, loss_rate, ci_low, ci_high を含む

        Note:
            信頼区間はClopper-Pearson（正確二項）区間
        """
        stats: Dict[str, Dict[str, float]] = {}
        for strategy, counts in self.count_outcomes().items():
            wins = counts[Verdict.WIN.value]
            losses = counts[Verdict.LOSE.value]
            ci = binomtest(wins, self.n_games).proportion_ci(
                confidence_level=confidence_level
            )
            stats[strategy.value] = {
                "wins": wins,
                "losses": losses,
                "win_rate": wins / self.n_games,
                "loss_rate": losses / self.n_games,
                "ci_low": float(ci.low),
                "ci_high": float(ci.high),
            }
        return stats

    def cumulative_win_rates(self) -> pd.DataFrame:
        """
        累積勝率の推移

        Returns:
            列 = stay, switch、行 = ラウンド（1始まりのindex）のDataFrame
        """
        wide = pd.DataFrame({
            s.value: [g.outcome(s) is Verdict.WIN for g in self.games]
            for s in Strategy
        }, dtype=float)
        cumulative = wide.expanding().mean()
        cumulative.index = pd.RangeIndex(1, self.n_games + 1, name="game")
        return cumulative

    def best_strategy(self) -> Strategy:
        """勝率の高い戦略（同率ならSTAY）"""
        return max(Strategy, key=lambda s: self.win_rate(s))

    def get_summary_text(self) -> str:
        """
        結果のサマリテキストを生成

        Returns:
            人間可読なサマリ文字列
        """
        stats = self.compute_statistics()
        stay = stats[Strategy.STAY.value]
        switch = stats[Strategy.SWITCH.value]
        seed = self.config_summary.get("random_seed")

        lines = [
            "=== Simulation Results ===",
            f"Games: {self.n_games:,}",
            f"Random seed: {seed if seed is not None else 'N/A'}",
            "",
            "Stay:",
            f"  Wins:     {stay['wins']:,} / {self.n_games:,}",
            f"  Win rate: {stay['win_rate']:.3f} "
            f"[{stay['ci_low']:.3f}, {stay['ci_high']:.3f}]",
            "",
            "Switch:",
            f"  Wins:     {switch['wins']:,} / {self.n_games:,}",
            f"  Win rate: {switch['win_rate']:.3f} "
            f"[{switch['ci_low']:.3f}, {switch['ci_high']:.3f}]",
        ]

        return "\n".join(lines)
