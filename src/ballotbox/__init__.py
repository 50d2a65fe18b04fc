"""ballotbox - a single-booth voter registration and balloting demo.

Voters register with their phone number, log in with it, cast exactly one
vote, and everyone can see the live tally with winner/tie tags.
"""

from .election import Election
from .errors import (
    AlreadyVoted,
    DuplicatePhone,
    NoActiveSession,
    NotRegistered,
    UnknownCandidate,
    ValidationError,
    VotingError,
)
from .models import Results, ResultEntry, Voter

__all__ = [
    "Election",
    "Voter",
    "Results",
    "ResultEntry",
    "VotingError",
    "ValidationError",
    "DuplicatePhone",
    "NotRegistered",
    "AlreadyVoted",
    "NoActiveSession",
    "UnknownCandidate",
]
