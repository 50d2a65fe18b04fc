"""Small CLI for interacting with the voting booth server.

Usage examples:
    ballotbox-cli register --name "Ali Omar Hassan" --age 25 --gender male \
        --phone 25261112233 --district Hodan
    ballotbox-cli login --phone 25261112233
    ballotbox-cli vote --index 0
    ballotbox-cli results
"""

import argparse
import logging
from typing import Optional

import requests

from . import config

logger = logging.getLogger(__name__)

TIMEOUT = 2


def _url(path: str) -> str:
    return config.BASE_URL.rstrip("/") + path


def _print_error(data):
    if "errors" in data:
        for msg in data["errors"]:
            print(msg)
    else:
        print(data.get("error", data))


def _print_lines(lines):
    for line in lines:
        print(line)


def options():
    r = requests.get(_url("/options"), timeout=TIMEOUT)
    data = r.json()
    print("Candidates:")
    for i, name in enumerate(data["candidates"]):
        print(f"  {i}. {name}")
    print("Genders:", ", ".join(data["genders"]))
    print("Districts:", ", ".join(data["districts"]))


def register(name: str, age: str, gender: str, phone: str, district: str):
    body = {
        "name": name,
        "age": age,
        "gender": gender,
        "phone": phone,
        "district": district,
    }
    r = requests.post(_url("/register"), json=body, timeout=TIMEOUT)
    data = r.json()
    if r.status_code != 201:
        _print_error(data)
        return False
    print(f"Registered {data['voter']['name']}")
    return True


def voters():
    r = requests.get(_url("/voters"), timeout=TIMEOUT)
    for v in r.json()["voters"]:
        print(f"{v['index']}: {v['line']}")


def show(index: int):
    r = requests.get(_url(f"/voters/{index}"), timeout=TIMEOUT)
    data = r.json()
    if r.status_code != 200:
        _print_error(data)
        return False
    for key, value in data["details"].items():
        print(f"{key}: {value}")
    return True


def login(phone: str):
    r = requests.post(_url("/login"), json={"phone": phone}, timeout=TIMEOUT)
    data = r.json()
    if r.status_code == 200:
        print(f"Welcome {data['name']}, you may now vote.")
        return True
    _print_error(data)
    # voters who already voted are shown the results instead
    if data.get("next") == "results":
        _print_lines(data["results"]["lines"])
    return False


def vote(candidate: Optional[str] = None, index: Optional[int] = None):
    if candidate is None:
        r = requests.get(_url("/options"), timeout=TIMEOUT)
        names = r.json()["candidates"]
        if index is None or not 0 <= index < len(names):
            print(f"Candidate index must be between 0 and {len(names) - 1}.")
            return False
        candidate = names[index]
    r = requests.post(_url("/vote"), json={"candidate": candidate}, timeout=TIMEOUT)
    data = r.json()
    if r.status_code != 201:
        _print_error(data)
        return False
    _print_lines(data["results"]["lines"])
    return True


def results():
    r = requests.get(_url("/results"), timeout=TIMEOUT)
    _print_lines(r.json()["lines"])


def main(argv=None):
    logging.basicConfig(level=config.LOG_LEVEL)
    p = argparse.ArgumentParser(prog="ballotbox-cli")
    sub = p.add_subparsers(dest="cmd")
    sub.add_parser("options")
    r = sub.add_parser("register")
    r.add_argument("--name", required=True)
    r.add_argument("--age", required=True)
    r.add_argument("--gender", default="")
    r.add_argument("--phone", required=True)
    r.add_argument("--district", default="")
    sub.add_parser("voters")
    s = sub.add_parser("show")
    s.add_argument("index", type=int)
    lg = sub.add_parser("login")
    lg.add_argument("--phone", required=True)
    v = sub.add_parser("vote")
    group = v.add_mutually_exclusive_group(required=True)
    group.add_argument("--candidate")
    group.add_argument("--index", type=int)
    sub.add_parser("results")
    args = p.parse_args(argv)

    ok = True
    try:
        if args.cmd == "options":
            options()
        elif args.cmd == "register":
            ok = register(args.name, args.age, args.gender, args.phone, args.district)
        elif args.cmd == "voters":
            voters()
        elif args.cmd == "show":
            ok = show(args.index)
        elif args.cmd == "login":
            ok = login(args.phone)
        elif args.cmd == "vote":
            ok = vote(args.candidate, args.index)
        elif args.cmd == "results":
            results()
        else:
            p.print_help()
    except requests.RequestException as e:
        logger.error("could not reach %s: %s", config.BASE_URL, e)
        return 1
    return 0 if ok else 1


if __name__ == "__main__":
    raise SystemExit(main())
