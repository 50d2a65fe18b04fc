from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional

WINNER = "Winner"
TIE = "Tie"


@dataclass
class Voter:
    """A registered voter

    Attributes
    - phone: unique key used for login
    - voted: flips to True once, after the voter's ballot is recorded
    """

    name: str
    age: int
    gender: str
    phone: str
    district: str
    voted: bool = False

    def mark_voted(self) -> None:
        self.voted = True

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Any) -> "Voter":
        """Build a voter from loaded data, checking its shape.

        Raises ValueError when a required field is missing or has the wrong type.
        """
        if not isinstance(data, dict):
            raise ValueError("voter record must be an object")
        for key in ("name", "gender", "phone", "district"):
            if not isinstance(data.get(key), str):
                raise ValueError(f"voter field {key!r} must be a string")
        age = data.get("age")
        # bool is an int subclass but never a valid age
        if isinstance(age, bool) or not isinstance(age, int):
            raise ValueError("voter field 'age' must be an integer")
        return cls(
            name=data["name"],
            age=age,
            gender=data["gender"],
            phone=data["phone"],
            district=data["district"],
            voted=bool(data.get("voted", False)),
        )


@dataclass(frozen=True)
class ResultEntry:
    name: str
    count: int
    tag: Optional[str] = None


@dataclass(frozen=True)
class Results:
    """Ranked tally snapshot

    Attributes
    - entries: one per candidate, highest count first
    - total_votes: sum of all counts
    - winners: names holding the maximum count (empty when no votes)
    """

    entries: List[ResultEntry]
    total_votes: int
    winners: List[str] = field(default_factory=list)

    @property
    def no_votes(self) -> bool:
        return self.total_votes == 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "entries": [asdict(e) for e in self.entries],
            "total_votes": self.total_votes,
            "winners": list(self.winners),
            "no_votes": self.no_votes,
        }
