from dataclasses import dataclass


@dataclass(frozen=True)
class VoterInfo:
    name: str = ""
    email: str = ""
    district: str = ""

    def is_complete(self):
        return all(
            (value or "").strip() for value in (self.name, self.email, self.district)
        )
