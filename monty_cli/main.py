"""
Main entry point for CLI Simulator.

Usage:
    python -m monty_cli [options]

Example:
    python -m monty_cli --games 10000 --seed 42
"""

import argparse
import logging
import sys
from typing import List, Optional

from .config_builder import build_config, format_config_summary
from .runner import run_simulation
from .reporter import print_full_report


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="monty_cli",
        description="Monty Hall CLI Simulator - Compare stay and switch strategies",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m monty_cli
  python -m monty_cli --games 100000 --no-progress
  python -m monty_cli -n 1000 --seed 42 --decimals 3 -v
        """
    )

    parser.add_argument(
        "-n", "--games",
        type=int,
        default=100,
        help="Number of games to simulate (default: 100)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for reproducibility"
    )
    parser.add_argument(
        "-d", "--decimals",
        type=int,
        default=2,
        help="Decimal places in the proportion table (default: 2)"
    )

    # Output control
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Show detailed output and debug logging"
    )
    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Hide progress bar"
    )

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )

    try:
        config = build_config(args)

        print("\n" + "=" * 60)
        print("Monty Hall CLI Simulator")
        print("=" * 60)
        print("\nConfiguration:")
        print(format_config_summary(config))
        print(f"\nRunning {config.n_games:,} games...")

        results = run_simulation(
            config,
            show_progress=not args.no_progress,
        )

        print("\n")
        print_full_report(results, config, verbose=args.verbose)

        return 0

    except ValueError as e:
        print(f"Configuration error: {e}")
        return 1
    except KeyboardInterrupt:
        print("\n\nInterrupted by user.")
        return 130
    except Exception as e:
        print(f"Error: {e}")
        if args.verbose:
            import traceback
            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
