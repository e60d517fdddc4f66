"""Entry point: python -m interactions [status|members|verify <email>]

- status:          Initialization state, missing paths, team summary (default)
- members:         Member identifiers with display names
- verify <email>:  Prompt for a pincode and check it (exit 0 ok, 1 wrong, 2 no credentials)
"""

from __future__ import annotations

import getpass
import logging
import sys

from interactions.config import load_config
from interactions.errors import CredentialsNotFoundError, DecodeError
from interactions.storage import TeamStore


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def _status(store: TeamStore) -> int:
    if not store.is_initialized():
        print(f"Not initialized: {store.shared_root}")
        return 1
    try:
        team = store.load_team()
        missing = store.missing_paths()
    except DecodeError as e:
        print(f"Unreadable team record: {e}")
        return 1
    if team:
        print(f"Team: {team.name}")
        print(f"Leaders: {', '.join(team.leaders) or '(none)'}")
    print(f"Members: {len(store.list_members())}")
    for path in missing:
        print(f"Missing: {path}")
    return 0 if not missing else 1


def _members(store: TeamStore) -> int:
    for email in store.list_members():
        try:
            member = store.load_member(email)
        except DecodeError as e:
            print(f"{email}  (unreadable profile: {e.reason})")
            continue
        print(email if member is None else f"{email}  {member.display_name}")
    return 0


def _verify(store: TeamStore, email: str) -> int:
    pincode = getpass.getpass(f"Pincode for {email}: ")
    try:
        ok = store.verify_pincode(email, pincode)
    except CredentialsNotFoundError as e:
        print(e)
        return 2
    print("Pincode accepted" if ok else "Pincode incorrect")
    return 0 if ok else 1


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    cmd = args[0] if args else "status"

    config = load_config()
    _setup_logging(config.log_level)
    store = TeamStore.from_config(config)

    if cmd == "status":
        return _status(store)
    if cmd == "members":
        return _members(store)
    if cmd == "verify":
        email = args[1] if len(args) > 1 else config.user
        if not email:
            print("Usage: python -m interactions verify <email>")
            return 1
        return _verify(store, email)

    print("Usage: python -m interactions [status|members|verify <email>]")
    print("  status   — Initialization state and team summary (default)")
    print("  members  — List team members")
    print("  verify   — Check a member's pincode")
    return 1


if __name__ == "__main__":
    sys.exit(main())
