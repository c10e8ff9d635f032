"""
Configuration builder for CLI Simulator.

Converts command-line arguments to SimulationConfig.
"""

from argparse import Namespace

from monty_core.config import SimulationConfig


def build_config(args: Namespace) -> SimulationConfig:
    """
    Build a SimulationConfig from command-line arguments.

    Args:
        args: Parsed command-line arguments

    Returns:
        Validated SimulationConfig

    Raises:
        ValueError: If any argument is out of range
    """
    return SimulationConfig(
        n_games=args.games,
        random_seed=args.seed,
        decimals=args.decimals,
    )


def format_config_summary(config: SimulationConfig) -> str:
    """Format configuration for display."""
    lines = [
        f"  Games: {config.n_games:,}",
        f"  Random Seed: {config.random_seed if config.random_seed is not None else 'None (random)'}",
        f"  Decimals: {config.decimals}",
    ]
    return "\n".join(lines)
