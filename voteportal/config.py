import os

from dotenv import load_dotenv

load_dotenv()


class Config:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-only-change-me")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

    # Seconds the "vote submitted" confirmation stays up before the form returns.
    VOTE_CONFIRMATION_SECONDS = float(os.getenv("VOTE_CONFIRMATION_SECONDS", "3"))

    PARTICIPATION_BASELINE = int(os.getenv("PARTICIPATION_BASELINE", "1000"))
    COMPLETION_RATE_MULTIPLIER = float(os.getenv("COMPLETION_RATE_MULTIPLIER", "1.2"))
    HOURLY_TIMELINE_LIMIT = int(os.getenv("HOURLY_TIMELINE_LIMIT", "8"))

    # None means the built-in catalog; otherwise a list of category mappings.
    VOTING_CATALOG = None
