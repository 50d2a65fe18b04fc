"""Application state for one voting booth.

An Election is built once from a store and owns the registry, the tally and
the session gate. Every successful registration or vote is written back to
the store in full.
"""

import logging
from typing import Iterable, Optional

from . import config
from .models import Results, Voter
from .registry import VoterRegistry
from .session import SessionGate
from .storage import MemoryStore, Persistence
from .tally import Tally

logger = logging.getLogger(__name__)


class Election:
    def __init__(self, store=None, candidates: Iterable[str] = config.CANDIDATES):
        self.persistence = Persistence(
            store if store is not None else MemoryStore(), candidates
        )
        self.registry = VoterRegistry(self.persistence.load_voters())
        self.tally = Tally(candidates, self.persistence.load_tally())
        self.session = SessionGate(self.registry, self.tally)
        logger.debug(
            "loaded %d voters and %d votes", len(self.registry), self.tally.total()
        )

    @property
    def candidates(self):
        return self.tally.candidates

    def register(
        self,
        name: str,
        age: Optional[int],
        gender: str,
        phone: str,
        district: str,
    ) -> Voter:
        voter = self.registry.register(name, age, gender, phone, district)
        self.persistence.save_voters(self.registry)
        return voter

    def login(self, phone: str) -> Voter:
        return self.session.login(phone)

    def cast_vote(self, candidate: str) -> Voter:
        voter = self.session.cast_vote(candidate)
        self.persistence.save_tally(self.tally.as_dict())
        self.persistence.save_voters(self.registry)
        return voter

    def results(self) -> Results:
        return self.tally.compute_results()
