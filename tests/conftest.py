from datetime import datetime
from pathlib import Path
import sys

import pytest

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from voteportal import create_app
from voteportal.models import VoteRecord, VoterInfo
from voteportal.services.catalog import DEFAULT_CATALOG
from voteportal.services.session import VotingSession


@pytest.fixture()
def app():
    app = create_app(
        {
            "TESTING": True,
            "SECRET_KEY": "test-secret",
            "VOTE_CONFIRMATION_SECONDS": 3,
        }
    )

    with app.app_context():
        yield app


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def categories():
    return DEFAULT_CATALOG


@pytest.fixture()
def voting_session(categories):
    return VotingSession(categories, confirmation_seconds=3)


@pytest.fixture()
def make_record():
    counter = {"value": 0}

    def _make(
        category_id,
        option_id,
        district="north",
        timestamp=None,
        name="Ada Voter",
        email="ada@example.com",
    ):
        counter["value"] += 1
        return VoteRecord(
            id=f"vote-test-{counter['value']}",
            category_id=category_id,
            option_id=option_id,
            voter_info=VoterInfo(name=name, email=email, district=district),
            timestamp=timestamp or datetime(2025, 3, 4, 10, 15),
        )

    return _make
