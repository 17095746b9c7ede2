import time
import uuid


def generate_vote_id(now=None):
    # e.g. 'vote-1718031245123-3f9a1c07b'
    millis = int((now.timestamp() if now is not None else time.time()) * 1000)
    return f"vote-{millis}-{uuid.uuid4().hex[:9]}"


def generate_session_key():
    return uuid.uuid4().hex
