import pytest

from ballotbox import cli


class FakeResponse:
    def __init__(self, status_code, data):
        self.status_code = status_code
        self._data = data

    def json(self):
        return self._data


@pytest.fixture
def calls(monkeypatch):
    """Record requests and answer them from a per-path table."""
    recorded = []
    replies = {}

    def fake(method):
        def _call(url, json=None, timeout=None):
            path = url.split("127.0.0.1:5000", 1)[-1]
            recorded.append((method, path, json))
            return replies[(method, path)]

        return _call

    monkeypatch.setattr(cli.config, "BASE_URL", "http://127.0.0.1:5000")
    monkeypatch.setattr(cli.requests, "get", fake("GET"))
    monkeypatch.setattr(cli.requests, "post", fake("POST"))
    return recorded, replies


def test_register_prints_every_error(calls, capsys):
    recorded, replies = calls
    replies[("POST", "/register")] = FakeResponse(
        400, {"errors": ["Age must be greater than 18.", "Please select gender."]}
    )
    assert cli.main(["register", "--name", "A B C", "--age", "18", "--phone", "25261"]) == 1
    out = capsys.readouterr().out
    assert "Age must be greater than 18." in out
    assert "Please select gender." in out
    assert recorded[0][2]["age"] == "18"


def test_vote_by_index_resolves_candidate(calls, capsys):
    recorded, replies = calls
    replies[("GET", "/options")] = FakeResponse(200, {"candidates": ["A", "B"]})
    replies[("POST", "/vote")] = FakeResponse(
        201, {"results": {"lines": ["B - 1 votes [Winner]", "A - 0 votes"]}}
    )
    assert cli.vote(index=1) is True
    assert recorded[-1] == ("POST", "/vote", {"candidate": "B"})
    assert "B - 1 votes [Winner]" in capsys.readouterr().out


def test_vote_index_out_of_range(calls, capsys):
    recorded, replies = calls
    replies[("GET", "/options")] = FakeResponse(200, {"candidates": ["A", "B"]})
    assert cli.vote(index=5) is False
    assert "between 0 and 1" in capsys.readouterr().out


def test_login_already_voted_shows_results(calls, capsys):
    recorded, replies = calls
    replies[("POST", "/login")] = FakeResponse(
        403,
        {
            "error": "You have already voted. Thank you.",
            "next": "results",
            "results": {"lines": ["A - 1 votes [Winner]"]},
        },
    )
    assert cli.login("25261112233") is False
    out = capsys.readouterr().out
    assert "already voted" in out
    assert "A - 1 votes [Winner]" in out


def test_unreachable_server_returns_error_code(monkeypatch):
    def boom(*args, **kwargs):
        raise cli.requests.ConnectionError("refused")

    monkeypatch.setattr(cli.requests, "get", boom)
    assert cli.main(["results"]) == 1


def test_rejected_login_sets_exit_code(calls, capsys):
    recorded, replies = calls
    replies[("POST", "/login")] = FakeResponse(
        404, {"error": "Voter not found. Please register first.", "next": "register"}
    )
    assert cli.main(["login", "--phone", "25261000000"]) == 1
    assert "Voter not found" in capsys.readouterr().out


def test_successful_vote_exit_code_zero(calls):
    recorded, replies = calls
    replies[("POST", "/vote")] = FakeResponse(201, {"results": {"lines": ["A - 1 votes [Winner]"]}})
    assert cli.main(["vote", "--candidate", "A"]) == 0


def test_show_missing_voter_sets_exit_code(calls):
    recorded, replies = calls
    replies[("GET", "/voters/7")] = FakeResponse(404, {"error": "voter not found"})
    assert cli.main(["show", "7"]) == 1
