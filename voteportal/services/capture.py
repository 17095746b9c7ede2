import threading
from datetime import datetime, timedelta

from voteportal.models import VoteRecord, VoterInfo
from voteportal.services.catalog import DISTRICT_VALUES, find_category
from voteportal.services.identifiers import generate_vote_id


class VoteValidationError(ValueError):
    pass


class MissingVoterInfoError(VoteValidationError):
    def __init__(self):
        super().__init__("Please fill in all voter information fields.")


class NoSelectionError(VoteValidationError):
    def __init__(self):
        super().__init__("Please select at least one vote option.")


class UnknownChoiceError(VoteValidationError):
    pass


class VoteCapture:
    def __init__(self, categories, confirmation_seconds=3):
        self.categories = categories
        self.confirmation_seconds = confirmation_seconds
        self.selections = {}
        self.voter_info = VoterInfo()
        self.submitted_at = None
        self._lock = threading.Lock()

    def select(self, category_id, option_id):
        category = find_category(self.categories, category_id)
        if category is None:
            raise UnknownChoiceError(f"Unknown category: {category_id}")
        if category.option(option_id) is None:
            raise UnknownChoiceError(
                f"Unknown option {option_id} for category {category_id}"
            )

        with self._lock:
            self.selections[category_id] = option_id

    def clear_selection(self, category_id):
        with self._lock:
            self.selections.pop(category_id, None)

    def selected_option(self, category_id):
        return self.selections.get(category_id)

    def update_voter_info(self, name=None, email=None, district=None):
        current = self.voter_info
        name = current.name if name is None else name.strip()
        email = current.email if email is None else email.strip()

        rejected = None
        if district is None:
            district = current.district
        else:
            district = district.strip()
            if district and district not in DISTRICT_VALUES:
                rejected = district
                district = current.district

        # Name and email are kept even when the district is rejected.
        self.voter_info = VoterInfo(name=name, email=email, district=district)
        if rejected is not None:
            raise VoteValidationError(f"Unknown district: {rejected}")

    def submit(self, store, now=None):
        with self._lock:
            if not self.voter_info.is_complete():
                raise MissingVoterInfoError()
            if not self.selections:
                raise NoSelectionError()

            now = now or datetime.now()
            voter_info = self.voter_info
            choices = list(self.selections.items())
            self._clear()
            self.submitted_at = now

        return [
            store.append(
                VoteRecord(
                    id=generate_vote_id(now),
                    category_id=category_id,
                    option_id=option_id,
                    voter_info=voter_info,
                    timestamp=now,
                )
            )
            for category_id, option_id in choices
        ]

    def _clear(self):
        self.selections = {}
        self.voter_info = VoterInfo()
        self.submitted_at = None

    def reset(self):
        with self._lock:
            self._clear()

    def is_confirming(self, now=None):
        if self.submitted_at is None:
            return False

        now = now or datetime.now()
        if now - self.submitted_at < timedelta(seconds=self.confirmation_seconds):
            return True

        self.submitted_at = None
        return False

    def seconds_until_form(self, now=None):
        if not self.is_confirming(now):
            return 0

        now = now or datetime.now()
        elapsed = (now - self.submitted_at).total_seconds()
        return max(self.confirmation_seconds - elapsed, 0)
