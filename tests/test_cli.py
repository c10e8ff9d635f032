"""
Tests for the command-line interface
"""

import pytest

from monty_cli.config_builder import build_config, format_config_summary
from monty_cli.main import main, parse_args
from monty_cli.reporter import format_proportion_table, format_statistics_rows
from monty_core.simulation import play_n_games


class TestParseArgs:
    """引数パースのテスト"""

    def test_defaults(self) -> None:
        """デフォルト値"""
        args = parse_args([])
        assert args.games == 100
        assert args.seed is None
        assert args.decimals == 2
        assert not args.verbose
        assert not args.no_progress

    def test_build_config(self) -> None:
        """引数からSimulationConfigを構築"""
        config = build_config(parse_args(["-n", "250", "--seed", "7", "-d", "3"]))
        assert config.n_games == 250
        assert config.random_seed == 7
        assert config.decimals == 3
        assert "Games: 250" in format_config_summary(config)

    def test_build_config_rejects_zero_games(self) -> None:
        """ゲーム数0はエラー"""
        with pytest.raises(ValueError):
            build_config(parse_args(["--games", "0"]))


class TestReporter:
    """表示フォーマットのテスト"""

    def test_format_proportion_table(self) -> None:
        """2×2の割合表"""
        results = play_n_games(200, seed=11)
        text = format_proportion_table(results.proportion_table(), 2)
        lines = text.splitlines()

        assert "WIN" in lines[0] and "LOSE" in lines[0]
        assert lines[2].startswith("stay")
        assert lines[3].startswith("switch")
        assert len(lines) == 4

    def test_format_statistics_rows(self) -> None:
        """戦略ごとに1行"""
        rows = format_statistics_rows(play_n_games(50, seed=2))
        assert rows[0].startswith("Strategy")
        assert rows[2].startswith("stay")
        assert rows[3].startswith("switch")


class TestMain:
    """mainのテスト"""

    def test_success(self, capsys: pytest.CaptureFixture[str]) -> None:
        """正常終了して結果を表示"""
        exit_code = main(["-n", "300", "--seed", "1", "--no-progress"])
        out = capsys.readouterr().out

        assert exit_code == 0
        assert "Outcome proportions" in out
        assert "Win statistics" in out
        assert "Best Strategy:" in out
        assert "Progress:" not in out

    def test_progress_bar(self, capsys: pytest.CaptureFixture[str]) -> None:
        """進捗バーを表示"""
        assert main(["-n", "50", "--seed", "1"]) == 0
        assert "Progress:" in capsys.readouterr().out

    def test_verbose_shows_rounds(self, capsys: pytest.CaptureFixture[str]) -> None:
        """verboseでラウンド詳細を表示"""
        assert main(["-n", "5", "--seed", "1", "--no-progress", "-v"]) == 0
        out = capsys.readouterr().out
        assert "First 5 rounds" in out
        assert "opened_door" in out

    @pytest.mark.parametrize("argv", [["-n", "0"], ["-n", "-3"], ["-d", "9"]])
    def test_configuration_error(
        self, argv: list, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """設定エラーは終了コード1"""
        assert main(argv + ["--no-progress"]) == 1
        assert "Configuration error" in capsys.readouterr().out

    def test_keyboard_interrupt(
        self,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Ctrl-Cは終了コード130"""
        def interrupted(*args, **kwargs):
            raise KeyboardInterrupt

        monkeypatch.setattr("monty_cli.main.run_simulation", interrupted)

        assert main(["-n", "10", "--no-progress"]) == 130
        assert "Interrupted by user." in capsys.readouterr().out
