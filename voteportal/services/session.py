from flask import current_app

from voteportal.services.capture import VoteCapture
from voteportal.services.store import VoteRecordStore

VIEWS = (
    ("vote", "Cast Vote"),
    ("results", "Live Results"),
    ("analytics", "Analytics"),
)

DEFAULT_VIEW = "vote"


class UnknownViewError(ValueError):
    pass


class VotingSession:
    def __init__(self, categories, confirmation_seconds=3):
        self.categories = categories
        self.store = VoteRecordStore()
        self.capture = VoteCapture(categories, confirmation_seconds=confirmation_seconds)
        self.active_view = DEFAULT_VIEW

    def select_view(self, name):
        if name not in dict(VIEWS):
            raise UnknownViewError(f"Unknown view: {name}")
        self.active_view = name

    @property
    def total_votes(self):
        return len(self.store)


class SessionRegistry:
    def __init__(self, app=None):
        if app is not None:
            self.init_app(app)

    def init_app(self, app):
        app.extensions["voting_sessions"] = {
            "categories": app.config["VOTING_CATEGORIES"],
            "confirmation_seconds": app.config["VOTE_CONFIRMATION_SECONDS"],
            "sessions": {},
        }

    def _state(self):
        return current_app.extensions["voting_sessions"]

    def get(self, key):
        return self._state()["sessions"].get(key)

    def transient(self):
        state = self._state()
        return VotingSession(
            state["categories"],
            confirmation_seconds=state["confirmation_seconds"],
        )

    def get_or_create(self, key):
        state = self._state()
        voting_session = state["sessions"].get(key)
        if voting_session is None:
            voting_session = self.transient()
            state["sessions"][key] = voting_session
        return voting_session

    def discard(self, key):
        return self._state()["sessions"].pop(key, None)

    def __len__(self):
        return len(self._state()["sessions"])
