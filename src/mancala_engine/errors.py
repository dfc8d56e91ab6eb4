"""Exception types raised by the rules engine and the computer opponent."""


class MancalaError(Exception):
    """Base class for engine errors."""


class PreconditionViolation(MancalaError, ValueError):
    """A move was requested on a pit that fails is_valid_move."""

    def __init__(self, pit_index: int, player: int, reason: str):
        self.pit_index = pit_index
        self.player = player
        self.reason = reason
        super().__init__(f"Illegal move {pit_index} for player {player}: {reason}")


class NoValidMovesError(MancalaError):
    """The computer player was asked to move with no playable pits."""

    def __init__(self, player: int):
        self.player = player
        super().__init__("No valid moves available for computer player")
