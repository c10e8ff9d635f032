"""
Runner for executing the simulation with a terminal progress bar.
"""

from monty_core.config import SimulationConfig
from monty_core.simulation import SimulationEngine
from monty_core.results import SimulationResults


def _print_progress(current: int, total: int) -> None:
    """Simple progress indicator."""
    done = min(current + 1, total)
    # Redraw about every 1%
    if done != total and done % max(1, total // 100):
        return
    pct = done / total * 100
    bar_len = 30
    filled = int(bar_len * done / total)
    bar = "=" * filled + "-" * (bar_len - filled)
    print(f"\r  Progress: [{bar}] {pct:5.1f}% ({done}/{total})", end="", flush=True)


def run_simulation(
    config: SimulationConfig,
    show_progress: bool = True,
) -> SimulationResults:
    """
    Run the simulation for the given configuration.

    Args:
        config: Simulation configuration
        show_progress: Whether to show a progress bar

    Returns:
        Simulation results for both strategies
    """
    engine = SimulationEngine(
        config,
        progress_callback=_print_progress if show_progress else None,
    )
    results = engine.run()

    if show_progress:
        print()  # New line after progress bar

    return results
