"""Minimal Flask API for the voting booth.

Endpoints:
- GET /options -> candidates, genders and districts for building forms
- POST /register -> register a voter {"name", "age", "gender", "phone", "district"}
- GET /voters -> list of registered voters
- GET /voters/<index> -> details for one voter
- POST /login -> open a voting session {"phone": ...}
- POST /vote -> cast the session's vote {"candidate": ...}
- GET /results -> ranked tally with winner/tie tags
"""

import logging
from typing import Any, Optional

from flask import Flask, current_app, jsonify, request

from . import config, views
from .election import Election
from .errors import (
    AlreadyVoted,
    DuplicatePhone,
    NoActiveSession,
    NotRegistered,
    UnknownCandidate,
    ValidationError,
)
from .storage import JsonFileStore

logger = logging.getLogger(__name__)

TEXT_FIELDS = ("name", "gender", "phone", "district")


def _election() -> Election:
    return current_app.config["ELECTION"]


def _json_body() -> dict:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def _parse_age(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def _results_payload(election: Election):
    results = election.results()
    payload = results.to_dict()
    payload["lines"] = views.result_lines(results)
    return payload


def create_app(store=None) -> Flask:
    """Build the app around a single Election loaded from ``store``."""
    app = Flask(__name__)
    app.config["ELECTION"] = Election(store)

    @app.route("/options", methods=["GET"])
    def options():
        return jsonify(
            {
                "candidates": list(_election().candidates),
                "genders": list(config.GENDERS),
                "districts": list(config.DISTRICTS),
            }
        )

    @app.route("/register", methods=["POST"])
    def register_voter():
        """Register a voter.

        All failing rules are returned together under "errors".
        """
        data = _json_body()
        fields = {key: data.get(key) or "" for key in TEXT_FIELDS}
        bad = sorted(key for key, value in fields.items() if not isinstance(value, str))
        if bad:
            return jsonify({"error": "invalid fields: " + ", ".join(bad)}), 400
        try:
            voter = _election().register(
                age=_parse_age(data.get("age")),
                **fields,
            )
        except DuplicatePhone as e:
            return jsonify({"error": str(e)}), 409
        except ValidationError as e:
            return jsonify({"errors": e.messages}), 400
        return jsonify({"status": "registered", "voter": voter.to_dict()}), 201

    @app.route("/voters", methods=["GET"])
    def list_voters():
        voters = _election().registry.list_voters()
        return jsonify(
            {
                "voters": [
                    {"index": i, "line": views.voter_line(v), "voted": v.voted}
                    for i, v in enumerate(voters)
                ]
            }
        )

    @app.route("/voters/<int:index>", methods=["GET"])
    def voter_details(index: int):
        try:
            voter = _election().registry.get(index)
        except IndexError:
            return jsonify({"error": "voter not found"}), 404
        return jsonify({"index": index, "details": views.voter_details(voter)})

    @app.route("/login", methods=["POST"])
    def login():
        """Open a session; "next" tells the client which panel to show."""
        data = _json_body()
        phone = data.get("phone")
        if not isinstance(phone, str):
            return jsonify({"error": "missing or invalid 'phone'"}), 400
        election = _election()
        try:
            voter = election.login(phone)
        except NotRegistered as e:
            return jsonify({"error": str(e), "next": "register"}), 404
        except AlreadyVoted as e:
            payload = {"error": str(e), "next": "results"}
            payload["results"] = _results_payload(election)
            return jsonify(payload), 403
        return jsonify({"status": "authenticated", "next": "vote", "name": voter.name})

    @app.route("/vote", methods=["POST"])
    def vote():
        data = _json_body()
        candidate = data.get("candidate")
        if not isinstance(candidate, str):
            return jsonify({"error": "missing or invalid 'candidate'"}), 400
        election = _election()
        try:
            election.cast_vote(candidate)
        except NoActiveSession as e:
            return jsonify({"error": str(e)}), 403
        except UnknownCandidate as e:
            return jsonify({"error": str(e)}), 400
        return jsonify({"status": "voted", "results": _results_payload(election)}), 201

    @app.route("/results", methods=["GET"])
    def results():
        return jsonify(_results_payload(_election()))

    return app


def main():
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
    )
    app = create_app(JsonFileStore(config.DATA_FILE))
    logger.info("using data file %s", config.DATA_FILE)
    # one request at a time: the booth has a single session
    app.run(threaded=False)


if __name__ == "__main__":
    main()
