# petition_rank/config.py
from datetime import datetime, timezone
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    # far-future anchor; weights grow as activity approaches it
    SCORING_EPOCH: datetime = datetime(2074, 1, 1, tzinfo=timezone.utc)

    BOOST_WEIGHT: float = 20.0
    VOTE_WEIGHT: float = 55.0
    COMMENT_WEIGHT: float = 25.0

    VOTE_DECAY: float = 0.5
    COMMENT_DECAY: float = 0.2
    STALE_AFTER_DAYS: int = 30

    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        frozen = True

settings = Settings()
