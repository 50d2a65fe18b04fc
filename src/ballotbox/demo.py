"""Scripted walkthrough of one booth session against an in-memory store.

Registers a few voters (including rejected attempts), lets them log in and
vote, and prints the results after each step.
"""

from . import views
from .election import Election
from .errors import AlreadyVoted, DuplicatePhone, NotRegistered, ValidationError
from .storage import MemoryStore


def _print_heading(msg: str):
    print()
    print(msg)


def _print_kv(key: str, value: str):
    print(f"  {key}: {value}")


def _try_register(election: Election, **fields):
    try:
        voter = election.register(**fields)
    except DuplicatePhone as e:
        _print_kv("rejected", str(e))
        return None
    except ValidationError as e:
        for msg in e.messages:
            _print_kv("rejected", msg)
        return None
    _print_kv("registered", views.voter_line(voter))
    return voter


def _try_vote(election: Election, phone: str, candidate: str) -> bool:
    try:
        election.login(phone)
    except (NotRegistered, AlreadyVoted) as e:
        _print_kv(phone, str(e))
        return False
    election.cast_vote(candidate)
    _print_kv(phone, f"voted for {candidate}")
    return True


def main(store=None) -> Election:
    election = Election(store if store is not None else MemoryStore())
    candidates = election.candidates

    _print_heading("[Registration]")
    _try_register(
        election, name="Ali Omar Hassan", age=25, gender="male",
        phone="25261112233", district="Hodan",
    )
    _try_register(
        election, name="Ali Omar Hassan", age=30, gender="male",
        phone="25261112233", district="Wadajir",
    )
    _try_register(
        election, name="Hodan Ali", age=18, gender="",
        phone="25252000111", district="",
    )
    _try_register(
        election, name="Faadumo Cali Nuur", age=41, gender="female",
        phone="25261445566", district="Kaaraan",
    )

    _print_heading("[Voting]")
    _try_vote(election, "25261112233", candidates[0])
    _try_vote(election, "25261112233", candidates[1])
    _try_vote(election, "25261999999", candidates[1])
    _try_vote(election, "25261445566", candidates[1])

    _print_heading("[Results]")
    for line in views.result_lines(election.results()):
        print(" ", line)

    _print_heading("[Voters]")
    for i, voter in enumerate(election.registry):
        print(f"  {i}: {views.voter_line(voter)}")
    return election


if __name__ == "__main__":
    main()
