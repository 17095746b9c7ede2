from dataclasses import dataclass


@dataclass(frozen=True)
class VoteOption:
    id: str
    name: str
    party: str
