"""
Reporter for displaying simulation results.
"""

from typing import List

import pandas as pd

from monty_core.config import SimulationConfig, Strategy
from monty_core.results import SimulationResults


SEPARATOR = "=" * 60
THIN_SEPARATOR = "-" * 60


def print_header() -> None:
    """Print report header."""
    print(SEPARATOR)
    print("          Monty Hall Simulator - Stay vs Switch")
    print(SEPARATOR)


def print_configuration(config: SimulationConfig) -> None:
    """Print configuration summary."""
    print("Configuration:")
    print(f"  Games: {config.n_games:,}")

    if config.random_seed is not None:
        print(f"  Random Seed: {config.random_seed}")

    print(THIN_SEPARATOR)


def format_proportion_table(table: pd.DataFrame, decimals: int = 2) -> str:
    """
    Format the 2x2 strategy/outcome proportion table.

    Args:
        table: DataFrame from SimulationResults.proportion_table()
        decimals: Digits after the decimal point

    Returns:
        Table as a multi-line string
    """
    width = max(6, decimals + 3)
    header = f"{'strategy':<10} | " + " | ".join(
        f"{col:>{width}}" for col in table.columns
    )
    lines = [header, "-" * len(header)]
    for strategy, row in table.iterrows():
        values = " | ".join(f"{row[col]:>{width}.{decimals}f}" for col in table.columns)
        lines.append(f"{strategy:<10} | {values}")
    return "\n".join(lines)


def print_proportion_table(results: SimulationResults, decimals: int = 2) -> None:
    """Print row-normalized outcome proportions per strategy."""
    print("\nOutcome proportions (rows sum to 1):")
    print(format_proportion_table(results.proportion_table(decimals), decimals))
    print(THIN_SEPARATOR)


def format_statistics_rows(results: SimulationResults) -> List[str]:
    """Format win statistics with 95% confidence intervals."""
    stats = results.compute_statistics()
    rows = [
        f"{'Strategy':<10} | {'Wins':>8} | {'Losses':>8} | {'Win rate':>8} | {'95% CI':>17}",
        THIN_SEPARATOR,
    ]
    for strategy in Strategy:
        s = stats[strategy.value]
        ci = f"[{s['ci_low']:.3f}, {s['ci_high']:.3f}]"
        rows.append(
            f"{strategy.value:<10} | {s['wins']:>8,} | {s['losses']:>8,} | "
            f"{s['win_rate']:>8.3f} | {ci:>17}"
        )
    return rows


def print_statistics(results: SimulationResults) -> None:
    """Print win statistics table."""
    print("\nWin statistics:")
    for row in format_statistics_rows(results):
        print(row)
    print(THIN_SEPARATOR)


def print_sample_rounds(results: SimulationResults, limit: int = 10) -> None:
    """Print the first rounds in detail."""
    print(f"\nFirst {min(limit, results.n_games)} rounds:")
    print(results.to_wide_dataframe().head(limit).to_string(index=False))


def print_best_strategy(results: SimulationResults) -> None:
    """Print the strategy with the higher win rate."""
    best = results.best_strategy()
    print(f"\nBest Strategy: {best.value} (Win rate: {results.win_rate(best):.3f})")
    print(SEPARATOR)


def print_full_report(
    results: SimulationResults,
    config: SimulationConfig,
    verbose: bool = False
) -> None:
    """Print the full comparison report."""
    print_header()
    print_configuration(config)
    print_proportion_table(results, config.decimals)
    print_statistics(results)

    if verbose:
        print_sample_rounds(results)

    print_best_strategy(results)
