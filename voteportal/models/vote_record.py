from dataclasses import dataclass
from datetime import datetime

from voteportal.models.voter import VoterInfo


@dataclass(frozen=True)
class VoteRecord:
    id: str
    category_id: str
    option_id: str
    voter_info: VoterInfo
    timestamp: datetime
