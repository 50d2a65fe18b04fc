"""Session gate: who may cast the next vote.

At most one voter is authenticated at a time. A successful login of a voter
who has not voted opens the session; recording that voter's vote closes it.
"""

import logging
from typing import Optional

from .errors import AlreadyVoted, NoActiveSession, NotRegistered
from .models import Voter
from .registry import VoterRegistry
from .tally import Tally

logger = logging.getLogger(__name__)


class SessionGate:
    def __init__(self, registry: VoterRegistry, tally: Tally):
        self.registry = registry
        self.tally = tally
        # phone of the authenticated voter; None means anonymous
        self._phone: Optional[str] = None

    @property
    def current_phone(self) -> Optional[str]:
        return self._phone

    @property
    def is_authenticated(self) -> bool:
        return self._phone is not None

    def login(self, phone: str) -> Voter:
        """Authenticate the voter registered under ``phone``.

        Raises NotRegistered or AlreadyVoted without touching the session.
        """
        phone = (phone or "").strip()
        voter = self.registry.find_by_phone(phone)
        if voter is None:
            raise NotRegistered(phone)
        if voter.voted:
            raise AlreadyVoted(phone)
        if self._phone is not None and self._phone != phone:
            logger.info("session for %s replaced by %s", self._phone, phone)
        self._phone = phone
        return voter

    def cast_vote(self, candidate: str) -> Voter:
        """Record a vote for the authenticated voter and end the session."""
        if self._phone is None:
            raise NoActiveSession()
        voter = self.registry.find_by_phone(self._phone)
        if voter is None:
            # registry entries are never deleted, so this is a broken session
            self._phone = None
            raise NoActiveSession()
        # record_vote validates the candidate before anything changes
        self.tally.record_vote(candidate)
        voter.mark_voted()
        self._phone = None
        logger.info("vote recorded for %s", voter.phone)
        return voter
