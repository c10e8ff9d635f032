"""
Exception classes for Monty Hall Simulator
"""


class MontyHallSimulatorError(Exception):
    """シミュレータの基底例外クラス"""
    pass


class InvalidArgumentError(MontyHallSimulatorError, ValueError):
    """引数が不正（ゲーム数、戦略名、開扉ドアと選択ドアの重複など）"""
    pass


class InvalidStateError(MontyHallSimulatorError, ValueError):
    """ゲーム状態が不正（3ドア・当たり1つの条件を満たさない）"""
    pass


class InvalidPositionError(MontyHallSimulatorError, ValueError):
    """ドア位置が1〜3の範囲外"""
    def __init__(self, position: object) -> None:
        self.position = position
        super().__init__(
            f"ドア位置は1〜3である必要があります: {position!r}"
        )
