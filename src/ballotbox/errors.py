"""Failures raised by the registry, the tally and the session gate.

Each error also derives from the closest built-in exception so callers that
only care about the broad category can catch that instead.
"""

from typing import Iterable


class VotingError(Exception):
    """Base class for every recognised voting failure."""


class ValidationError(VotingError, ValueError):
    """One or more registration rules failed.

    ``messages`` holds every failing rule, in check order.
    """

    def __init__(self, messages: Iterable[str]):
        self.messages = list(messages)
        super().__init__("\n".join(self.messages))


class DuplicatePhone(VotingError, KeyError):
    def __init__(self, phone: str):
        self.phone = phone
        super().__init__(
            "This phone number is already registered. You cannot register again."
        )

    def __str__(self) -> str:
        # KeyError would repr() the message
        return self.args[0]


class NotRegistered(VotingError, LookupError):
    def __init__(self, phone: str):
        self.phone = phone
        super().__init__("Voter not found. Please register first.")


class AlreadyVoted(VotingError, PermissionError):
    def __init__(self, phone: str):
        self.phone = phone
        super().__init__("You have already voted. Thank you.")


class NoActiveSession(VotingError, PermissionError):
    def __init__(self):
        super().__init__("No voter is logged in. Please log in before voting.")


class UnknownCandidate(VotingError, ValueError):
    def __init__(self, candidate: str):
        self.candidate = candidate
        super().__init__(f"Unknown candidate: {candidate!r}")
