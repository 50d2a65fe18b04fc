import pytest

from ballotbox.config import CANDIDATES
from ballotbox.errors import UnknownCandidate
from ballotbox.models import TIE, WINNER
from ballotbox.tally import Tally


def test_no_votes_returns_sentinel_without_winner():
    res = Tally().compute_results()
    assert res.no_votes is True
    assert res.total_votes == 0
    assert res.winners == []
    assert [e.name for e in res.entries] == list(CANDIDATES)
    assert all(e.tag is None for e in res.entries)


def test_single_leader_is_winner():
    t = Tally()
    t.record_vote(CANDIDATES[2])
    t.record_vote(CANDIDATES[2])
    t.record_vote(CANDIDATES[0])
    res = t.compute_results()
    assert res.winners == [CANDIDATES[2]]
    assert res.entries[0].name == CANDIDATES[2]
    assert res.entries[0].tag == WINNER
    assert [e.tag for e in res.entries[1:]] == [None, None, None]
    assert res.total_votes == 3


def test_shared_maximum_is_tie_and_keeps_candidate_order():
    t = Tally()
    t.record_vote(CANDIDATES[3])
    t.record_vote(CANDIDATES[1])
    res = t.compute_results()
    assert res.winners == [CANDIDATES[1], CANDIDATES[3]]
    tags = {e.name: e.tag for e in res.entries}
    assert tags[CANDIDATES[1]] == TIE
    assert tags[CANDIDATES[3]] == TIE
    assert WINNER not in tags.values()
    # zero-count candidates follow, also in candidate order
    assert [e.name for e in res.entries] == [
        CANDIDATES[1],
        CANDIDATES[3],
        CANDIDATES[0],
        CANDIDATES[2],
    ]


def test_record_vote_only_touches_one_counter():
    t = Tally()
    before = t.as_dict()
    assert t.record_vote(CANDIDATES[0]) == 1
    after = t.as_dict()
    assert after[CANDIDATES[0]] == before[CANDIDATES[0]] + 1
    for c in CANDIDATES[1:]:
        assert after[c] == before[c]


def test_unknown_candidate_rejected():
    t = Tally()
    with pytest.raises(UnknownCandidate):
        t.record_vote("Nobody")
    assert t.total() == 0


def test_initial_counts_are_restricted_to_candidates():
    t = Tally(counts={CANDIDATES[0]: 4, "Nobody": 9})
    assert t.count(CANDIDATES[0]) == 4
    assert "Nobody" not in t.as_dict()
    assert t.total() == 4
