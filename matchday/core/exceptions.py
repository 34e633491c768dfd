"""Matchday exceptions."""


class MatchdayError(Exception):
    """Base class for Matchday errors."""


class MatchNotFoundError(MatchdayError):
    """Raised when a match id does not exist."""

    def __init__(self, match_id: int):
        super().__init__(f"Match {match_id} not found")
        self.match_id = match_id


class StaleMatchError(MatchdayError):
    """Raised when a status write loses a race with another writer.

    The stored status no longer equals the status the writer read, so the
    write is refused instead of overwriting a newer value.
    """

    def __init__(self, match_id: int, expected: str, actual: str):
        super().__init__(
            f"Match {match_id} status is '{actual}', expected '{expected}'"
        )
        self.match_id = match_id
        self.expected = expected
        self.actual = actual
