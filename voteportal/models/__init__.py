from voteportal.models.category import VotingCategory
from voteportal.models.option import VoteOption
from voteportal.models.vote_record import VoteRecord
from voteportal.models.voter import VoterInfo

__all__ = [
    "VoteOption",
    "VotingCategory",
    "VoterInfo",
    "VoteRecord",
]
