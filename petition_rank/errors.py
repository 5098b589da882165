# petition_rank/errors.py
from typing import Any

class ScoringError(ValueError):
    """Base for every input the scorer refuses to turn into a number."""

class InvalidVoteType(ScoringError):
    def __init__(self, vote_type: Any):
        self.vote_type = vote_type
        super().__init__(f"vote type must be 'up' or 'down', got {vote_type!r}")

class InvalidTimestamp(ScoringError):
    def __init__(self, value: Any, detail: str = "not a valid instant"):
        self.value = value
        super().__init__(f"{value!r}: {detail}")

class DegenerateTimeWeight(ScoringError):
    def __init__(self, instant, age_days: int):
        self.instant = instant
        self.age_days = age_days
        super().__init__(
            f"{instant.isoformat()} is {-age_days} day(s) past the scoring epoch; time weight undefined"
        )

class InvalidScore(ScoringError):
    def __init__(self, value: Any):
        self.value = value
        super().__init__(f"running score must be a finite number, got {value!r}")
