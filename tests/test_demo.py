from ballotbox import demo
from ballotbox.config import CANDIDATES
from ballotbox.storage import MemoryStore


def test_demo_walkthrough(capsys):
    store = MemoryStore()
    election = demo.main(store)
    out = capsys.readouterr().out

    # the duplicate and the invalid registration were both rejected
    assert len(election.registry) == 2
    assert "already registered" in out
    assert "Age must be greater than 18." in out
    assert "You have already voted" in out
    assert "Voter not found" in out

    # two voters, two different candidates: a tie
    assert election.results().winners == [CANDIDATES[0], CANDIDATES[1]]
    assert "[Tie]" in out
    assert all(v.voted for v in election.registry)
