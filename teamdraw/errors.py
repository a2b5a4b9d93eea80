"""Exceptions raised by the team draw."""


class TeamDrawError(Exception):
    """Base class for every team draw error"""


class GroupFullError(TeamDrawError):
    """A participant was admitted to a group that is already complete."""

    def __init__(self, group_name):
        super().__init__(f"Group '{group_name}' is already complete")
        self.group_name = group_name


class InvalidConfigurationError(TeamDrawError):
    """The participants, group names or group size cannot be used for a draw."""


class BalanceNotAchievedError(TeamDrawError):
    """
    Raised when the attempt budget runs out (or the draw is cancelled)
    before a balanced result was found.

    Attributes:
        attempts: Number of attempts that were run
        last_result: The last (unbalanced) AssemblyResult, or None if no attempt ran
    """

    def __init__(self, attempts, last_result=None, cancelled=False):
        reason = "cancelled" if cancelled else "attempt budget exhausted"
        super().__init__(
            f"No balanced result after {attempts} attempt(s) ({reason})"
        )
        self.attempts = attempts
        self.last_result = last_result
        self.cancelled = cancelled
