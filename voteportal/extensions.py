from voteportal.services.session import SessionRegistry

sessions = SessionRegistry()
