"""Per-candidate vote counters and result ranking."""

from typing import Dict, Iterable, Mapping, Optional

from . import config
from .errors import UnknownCandidate
from .models import TIE, WINNER, ResultEntry, Results


class Tally:
    """Vote counts for a fixed, ordered candidate set."""

    def __init__(
        self,
        candidates: Iterable[str] = config.CANDIDATES,
        counts: Optional[Mapping[str, int]] = None,
    ):
        self.candidates = tuple(candidates)
        counts = counts or {}
        self._counts: Dict[str, int] = {c: int(counts.get(c, 0)) for c in self.candidates}

    def record_vote(self, candidate: str) -> int:
        """Add one vote for ``candidate`` and return its new count."""
        if candidate not in self._counts:
            raise UnknownCandidate(candidate)
        self._counts[candidate] += 1
        return self._counts[candidate]

    def count(self, candidate: str) -> int:
        if candidate not in self._counts:
            raise UnknownCandidate(candidate)
        return self._counts[candidate]

    def total(self) -> int:
        return sum(self._counts.values())

    def as_dict(self) -> Dict[str, int]:
        return dict(self._counts)

    def compute_results(self) -> Results:
        """Rank candidates by count and tag the winner or the tied leaders.

        Equal counts keep candidate order (sorted() is stable). With no votes
        at all nothing is tagged and there are no winners.
        """
        ranked = sorted(
            ((c, self._counts[c]) for c in self.candidates),
            key=lambda item: item[1],
            reverse=True,
        )
        total = self.total()
        if total == 0:
            entries = [ResultEntry(name, count) for name, count in ranked]
            return Results(entries=entries, total_votes=0, winners=[])

        max_count = ranked[0][1]
        winners = [name for name, count in ranked if count == max_count]
        tag = WINNER if len(winners) == 1 else TIE
        entries = [
            ResultEntry(name, count, tag if name in winners else None)
            for name, count in ranked
        ]
        return Results(entries=entries, total_votes=total, winners=winners)
