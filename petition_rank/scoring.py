# petition_rank/scoring.py
import math
from datetime import date, datetime, timedelta, timezone
from numbers import Real
from typing import Any

from petition_rank.config import settings
from petition_rank.errors import DegenerateTimeWeight, InvalidScore, InvalidTimestamp, InvalidVoteType
from petition_rank.schemas import VoteType

UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
ONE_DAY = timedelta(days=1)

def to_instant(value: Any) -> datetime:
    """Coerce a datetime (naive = UTC) or Unix milliseconds into an aware instant."""
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value
    if isinstance(value, date):
        raise InvalidTimestamp(value, "a date without a time is not an instant")
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidTimestamp(value)
    try:
        ms = float(value)
    except (OverflowError, TypeError, ValueError):
        raise InvalidTimestamp(value, "out of range") from None
    if not math.isfinite(ms):
        raise InvalidTimestamp(value, "not finite")
    try:
        return UNIX_EPOCH + timedelta(milliseconds=ms)
    except OverflowError:
        raise InvalidTimestamp(value, "out of range") from None

def day_difference(later: Any, earlier: Any) -> int:
    # floor division on exact timedeltas == floor(elapsed_ms / 86_400_000)
    return (to_instant(later) - to_instant(earlier)) // ONE_DAY

def time_weight(instant: Any) -> float:
    t = to_instant(instant)
    age_days = day_difference(settings.SCORING_EPOCH, t)
    if age_days + 1 <= 0:
        raise DegenerateTimeWeight(t, age_days)
    return 1 / (age_days + 1)

def is_stale(activity_instant: Any, reference_instant: Any) -> bool:
    return day_difference(activity_instant, reference_instant) > settings.STALE_AFTER_DAYS

def _checked_score(current_score: Any) -> float:
    if isinstance(current_score, bool) or not isinstance(current_score, Real):
        raise InvalidScore(current_score)
    try:
        score = float(current_score)
    except (OverflowError, TypeError, ValueError):
        raise InvalidScore(current_score) from None
    if not math.isfinite(score):
        raise InvalidScore(current_score)
    return score

def _vote_sign(vote_type: Any) -> int:
    try:
        vt = VoteType(vote_type)
    except (ValueError, TypeError):
        raise InvalidVoteType(vote_type) from None
    return 1 if vt is VoteType.UP else -1

def calculate_novelty_boost(submission_instant: Any) -> float:
    return settings.BOOST_WEIGHT * time_weight(submission_instant)

def calculate_vote_velocity(activity_instant: Any, approved_instant: Any, current_score: float, vote_type: VoteType | str) -> float:
    """Fold one vote into a petition's running vote score.

    Votes cast more than STALE_AFTER_DAYS after approval count at VOTE_DECAY.
    """
    sign = _vote_sign(vote_type)
    score = _checked_score(current_score)
    decay = settings.VOTE_DECAY if is_stale(activity_instant, approved_instant) else 1
    return score + decay * sign * settings.VOTE_WEIGHT * time_weight(activity_instant)

def calculate_comment_velocity(activity_instant: Any, approved_instant: Any, current_score: float) -> float:
    """Fold one comment into a petition's running comment score. Never decreases it."""
    score = _checked_score(current_score)
    decay = settings.COMMENT_DECAY if is_stale(activity_instant, approved_instant) else 1
    return score + decay * settings.COMMENT_WEIGHT * time_weight(activity_instant)
