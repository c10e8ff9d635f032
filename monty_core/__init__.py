"""
Monty Hall Simulator Core Package

モンティ・ホール問題のモンテカルロシミュレーターのコアモジュール
"""

from .config import DOORS, Outcome, Strategy, Verdict, SimulationConfig
from .game import GameState, RandomSource, create_game, select_door, determine_winner
from .host import open_goat_door
from .strategies import change_door, get_strategy, list_strategies
from .results import RoundResult, GameResult, SimulationResults
from .simulation import SimulationEngine, play_game, play_n_games
from .exceptions import (
    MontyHallSimulatorError,
    InvalidArgumentError,
    InvalidStateError,
    InvalidPositionError,
)

__version__ = "0.1.0"

__all__ = [
    # Config
    "DOORS",
    "Outcome",
    "Strategy",
    "Verdict",
    "SimulationConfig",
    # Core
    "GameState",
    "RandomSource",
    "create_game",
    "select_door",
    "open_goat_door",
    "change_door",
    "get_strategy",
    "list_strategies",
    "determine_winner",
    "RoundResult",
    "GameResult",
    "SimulationResults",
    "SimulationEngine",
    "play_game",
    "play_n_games",
    # Exceptions
    "MontyHallSimulatorError",
    "InvalidArgumentError",
    "InvalidStateError",
    "InvalidPositionError",
]
