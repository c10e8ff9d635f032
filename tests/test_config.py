"""
Tests for SimulationConfig
"""

import pytest
import numpy as np

from monty_core.config import SimulationConfig
from monty_core.exceptions import InvalidArgumentError


class TestSimulationConfig:
    """SimulationConfigのバリデーション"""

    def test_defaults(self) -> None:
        """デフォルト値"""
        config = SimulationConfig()
        assert config.n_games == 100
        assert config.random_seed is None
        assert config.decimals == 2

    def test_numpy_integers_accepted(self) -> None:
        """numpyの整数も受け付ける"""
        config = SimulationConfig(
            n_games=np.int64(5), random_seed=np.int32(3), decimals=np.int64(1)
        )
        assert config.to_dict() == {"n_games": 5, "random_seed": 3, "decimals": 1}

    @pytest.mark.parametrize("decimals", [2.5, True, "2", -1, 7, None])
    def test_invalid_decimals(self, decimals) -> None:
        """表示桁数は0〜6の整数"""
        with pytest.raises(InvalidArgumentError, match="表示桁数"):
            SimulationConfig(n_games=3, decimals=decimals)

    @pytest.mark.parametrize("seed", [-1, 1.5, False, "42"])
    def test_invalid_seed(self, seed) -> None:
        """シードは0以上の整数"""
        with pytest.raises(InvalidArgumentError, match="シード"):
            SimulationConfig(n_games=3, random_seed=seed)

    @pytest.mark.parametrize("seed", [None, 0, 2**31 - 1])
    def test_valid_seed(self, seed) -> None:
        """Noneと0以上の整数はOK"""
        assert SimulationConfig(random_seed=seed).random_seed == seed
