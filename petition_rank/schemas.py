# petition_rank/schemas.py
from enum import Enum
from pydantic import BaseModel, Field
from typing import List, Literal, Optional
from datetime import datetime

class VoteType(str, Enum):
    UP = "up"
    DOWN = "down"

class VoteEvent(BaseModel):
    voted_at: datetime
    vote_type: VoteType

class CommentEvent(BaseModel):
    commented_at: datetime

class Petition(BaseModel):
    id: str
    title: Optional[str] = None
    submitted_at: datetime
    approved_at: datetime
    votes: List[VoteEvent] = Field(default_factory=list)
    comments: List[CommentEvent] = Field(default_factory=list)

class PetitionScore(BaseModel):
    petition_id: str
    novelty: float
    vote_score: float
    comment_score: float
    total: float

class RankedPetition(BaseModel):
    petition_id: str
    rank: Optional[int] = None
    status: Literal["ranked", "unranked"] = "ranked"
    score: Optional[PetitionScore] = None
    reason: Optional[str] = None
