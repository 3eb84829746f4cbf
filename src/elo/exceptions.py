"""Errors raised by the Elo calculator."""


class EloError(Exception):
    """Base exception for rating updates."""
    pass


class InvalidOutcomeError(EloError, ValueError):
    """Raised when an outcome or winner index is outside its valid range."""

    def __init__(self, message, outcome=None):
        super().__init__(message)
        self.outcome = outcome


class InvalidPartiesError(InvalidOutcomeError):
    """Raised when there are not enough parties, or a team has no members."""
    pass


class TeamLengthMismatchError(EloError, ValueError):
    """Raised when teams of different sizes meet under the reject policy."""

    def __init__(self, message, team_sizes=None):
        super().__init__(message)
        self.team_sizes = team_sizes
