"""
Custom exceptions, shared across layers.

NOTE: An illegal move is NOT an exception. Players try illegal moves all the time; the Game answers those with False.
These exceptions are for situations where the caller asked for something that cannot be answered at all.
"""


class GameError(Exception):
    """Top-level exception: catch this one to handle anything raised by this package."""


class InvalidBoardError(GameError):
    """A board description (piece placement string) could not be interpreted."""


class GameStateError(GameError):
    """The request does not make sense in the current state of the game."""


class NotYourTurnError(GameStateError):
    """A player (or the computer opponent) tried to act while it is the other side's turn."""


class NoLegalMovesError(GameStateError):
    """A move was requested from a side that has nothing left to play."""


class InvalidRequestError(GameError):
    """A request coming in from a front end is malformed."""


class ConfigurationError(GameError):
    """A setting (environment variable / command line flag) could not be interpreted."""
