"""Plain-text renderings shared by the API and the command line client."""

from typing import Dict, List

from .models import Results, Voter

NO_VOTES_LINE = "No votes yet - be the first to vote!"


def voter_line(voter: Voter) -> str:
    line = f"{voter.name} - {voter.district}"
    if voter.voted:
        line += " (voted)"
    return line


def voter_details(voter: Voter) -> Dict[str, str]:
    return {
        "Name": voter.name,
        "Age": str(voter.age),
        "Gender": voter.gender,
        "Phone": voter.phone,
        "District": voter.district,
    }


def result_lines(results: Results) -> List[str]:
    if results.no_votes:
        return [NO_VOTES_LINE]
    lines = []
    for entry in results.entries:
        line = f"{entry.name} - {entry.count} votes"
        if entry.tag:
            line += f" [{entry.tag}]"
        lines.append(line)
    return lines
