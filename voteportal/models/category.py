from dataclasses import dataclass


@dataclass(frozen=True)
class VotingCategory:
    id: str
    title: str
    description: str
    options: tuple

    def option(self, option_id):
        return next((option for option in self.options if option.id == option_id), None)

    def option_ids(self):
        return [option.id for option in self.options]
