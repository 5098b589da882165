# petition_rank/services/ranking.py
import logging
from datetime import datetime
from functools import reduce
from typing import Iterable, List

from petition_rank.errors import ScoringError
from petition_rank.schemas import CommentEvent, Petition, PetitionScore, RankedPetition, VoteEvent
from petition_rank.scoring import calculate_comment_velocity, calculate_novelty_boost, calculate_vote_velocity

logger = logging.getLogger(__name__)

UNRANKED_REASON = "petition temporarily unranked"

def fold_votes(votes: Iterable[VoteEvent], approved_at: datetime, seed: float = 0.0) -> float:
    return reduce(
        lambda score, v: calculate_vote_velocity(v.voted_at, approved_at, score, v.vote_type),
        votes,
        seed,
    )

def fold_comments(comments: Iterable[CommentEvent], approved_at: datetime, seed: float = 0.0) -> float:
    return reduce(
        lambda score, c: calculate_comment_velocity(c.commented_at, approved_at, score),
        comments,
        seed,
    )

def score_petition(p: Petition) -> PetitionScore:
    novelty = calculate_novelty_boost(p.submitted_at)
    vote_score = fold_votes(p.votes, p.approved_at)
    comment_score = fold_comments(p.comments, p.approved_at)
    return PetitionScore(
        petition_id=p.id,
        novelty=novelty,
        vote_score=vote_score,
        comment_score=comment_score,
        total=novelty + vote_score + comment_score,
    )

def rank_petitions(petitions: Iterable[Petition]) -> List[RankedPetition]:
    """Order petitions for the feed, highest total first.

    A petition whose history cannot be scored is kept out of the ordering and
    reported as unranked after the ranked ones; the cause only goes to the log.
    """
    scored: list[PetitionScore] = []
    unranked: list[RankedPetition] = []
    for p in petitions:
        try:
            scored.append(score_petition(p))
        except ScoringError as e:
            logger.warning("petition %s unranked: %s", p.id, e)
            unranked.append(RankedPetition(petition_id=p.id, status="unranked", reason=UNRANKED_REASON))

    # stable sort, ties keep input order
    scored.sort(key=lambda s: s.total, reverse=True)
    ranked = [
        RankedPetition(petition_id=s.petition_id, rank=i, score=s)
        for i, s in enumerate(scored, start=1)
    ]
    logger.debug("ranked %d petitions, %d unranked", len(ranked), len(unranked))
    return ranked + unranked
