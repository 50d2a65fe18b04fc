"""Key-value stores and the persistence adapter for voters and votes.

A store maps string keys to serialized strings. ``get`` returns None for a
missing key; ``set`` raises OSError when the value cannot be written.
"""

import json
import logging
import os
from typing import Dict, Iterable, List, Optional

from . import config
from .models import Voter

logger = logging.getLogger(__name__)


class MemoryStore:
    """Dict-backed store used by tests and the walkthrough."""

    def __init__(self, data: Optional[Dict[str, str]] = None):
        self.data: Dict[str, str] = dict(data or {})

    def get(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value


class JsonFileStore:
    """Store every key in one JSON document on disk.

    A missing, empty or corrupt file reads as an empty store.
    """

    def __init__(self, path: str):
        self.path = path

    def _read(self) -> Dict[str, str]:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            return {}
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("could not read %s, starting empty: %s", self.path, e)
            return {}
        if not isinstance(data, dict):
            logger.warning("ignoring %s: top level is not an object", self.path)
            return {}
        return data

    def get(self, key: str) -> Optional[str]:
        value = self._read().get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        parent = os.path.dirname(self.path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)


class Persistence:
    """Load and save the voter list and the tally through a store.

    Loading never fails: anything absent or malformed becomes empty state.
    Saving reports success as a bool and logs failures.
    """

    def __init__(self, store, candidates: Iterable[str] = config.CANDIDATES):
        self.store = store
        self.candidates = tuple(candidates)

    def _load_json(self, key: str):
        try:
            raw = self.store.get(key)
        except OSError as e:
            logger.warning("error reading %r from store: %s", key, e)
            return None
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except (TypeError, ValueError) as e:
            logger.warning("error parsing %r from store: %s", key, e)
            return None

    def load_voters(self) -> List[Voter]:
        data = self._load_json(config.VOTERS_KEY)
        if data is None:
            return []
        if not isinstance(data, list):
            logger.warning("stored voters are not a list, starting empty")
            return []
        voters = []
        seen = set()
        for i, record in enumerate(data):
            try:
                voter = Voter.from_dict(record)
            except ValueError as e:
                logger.warning("dropping stored voter #%d: %s", i, e)
                continue
            if voter.phone in seen:
                logger.warning("dropping stored voter #%d: duplicate phone", i)
                continue
            seen.add(voter.phone)
            voters.append(voter)
        return voters

    def load_tally(self) -> Dict[str, int]:
        counts = {c: 0 for c in self.candidates}
        data = self._load_json(config.VOTES_KEY)
        if data is None:
            return counts
        if not isinstance(data, dict):
            logger.warning("stored votes are not an object, starting from zero")
            return counts
        for candidate in self.candidates:
            value = data.get(candidate, 0)
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                logger.warning("resetting invalid count for %s: %r", candidate, value)
                continue
            counts[candidate] = value
        return counts

    def _save(self, key: str, payload) -> bool:
        try:
            self.store.set(key, json.dumps(payload))
        except (OSError, TypeError, ValueError) as e:
            logger.error("failed to save %r: %s", key, e)
            return False
        return True

    def save_voters(self, voters: Iterable[Voter]) -> bool:
        return self._save(config.VOTERS_KEY, [v.to_dict() for v in voters])

    def save_tally(self, counts: Dict[str, int]) -> bool:
        return self._save(config.VOTES_KEY, counts)
