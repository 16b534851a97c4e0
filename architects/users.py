"""Player accounts kept in a JSON file: registration, login and results."""

from __future__ import annotations

import hashlib
import json
import uuid
from dataclasses import dataclass
from pathlib import Path
from typing import Any

DEFAULT_PATH = "userinfo.json"


class UserDataError(Exception):
    """The user data file cannot be read, parsed or written."""


@dataclass
class UserInformation:
    """A logged-in player and the tally of their games."""

    username: str
    uid: str
    wins: int = 0
    losses: int = 0
    draws: int = 0


def hash_password(password: str) -> str:
    """SHA-256 of the UTF-8 password, as lower-case hex."""
    return hashlib.sha256(password.encode("utf-8")).hexdigest()


def _as_int(value: Any) -> int:
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return 0


def _as_str(value: Any) -> str:
    return value if isinstance(value, str) else ""


class UserStore:
    """Accounts stored as a JSON array of objects in one file."""

    def __init__(self, path: str | Path = DEFAULT_PATH) -> None:
        self.path = Path(path)

    def load(self) -> list[dict[str, Any]]:
        """Read every account; raise UserDataError if the file is unusable."""
        try:
            raw = self.path.read_bytes()
        except OSError as exc:
            raise UserDataError(f"cannot read user data file {self.path}") from exc
        try:
            document = json.loads(raw)
        except ValueError as exc:
            raise UserDataError(f"user data file {self.path} is not valid JSON") from exc
        if not isinstance(document, list):
            raise UserDataError(f"user data file {self.path} does not hold an array")
        return [entry if isinstance(entry, dict) else {} for entry in document]

    def save(self, users: list[dict[str, Any]]) -> None:
        """Write every account back to the file."""
        text = json.dumps(users, indent=4, ensure_ascii=False) + "\n"
        try:
            self.path.write_text(text, encoding="utf-8")
        except OSError as exc:
            raise UserDataError(f"cannot write user data file {self.path}") from exc

    def _load_or_empty(self) -> list[dict[str, Any]] | None:
        try:
            return self.load()
        except UserDataError:
            return None

    def is_username_taken(self, username: str) -> bool:
        users = self._load_or_empty()
        if users is None:
            return False
        return any(_as_str(entry.get("username")) == username for entry in users)

    def register(self, username: str, password: str) -> UserInformation:
        """Add a new account with a fresh uid and no games played."""
        users = self._load_or_empty() or []
        uid = str(uuid.uuid4())
        users.append(
            {
                "username": username,
                "password": hash_password(password),
                "uid": uid,
                "winNum": 0,
                "loseNum": 0,
                "drawNum": 0,
            }
        )
        self.save(users)
        return UserInformation(username=username, uid=uid)

    def login(self, username: str, password: str) -> UserInformation | None:
        """The account matching name and password, or None."""
        users = self._load_or_empty()
        if users is None:
            return None
        hashed = hash_password(password)
        for entry in users:
            if _as_str(entry.get("username")) == username and hashed == _as_str(
                entry.get("password")
            ):
                return UserInformation(
                    username=username,
                    uid=_as_str(entry.get("uid")),
                    wins=_as_int(entry.get("winNum")),
                    losses=_as_int(entry.get("loseNum")),
                    draws=_as_int(entry.get("drawNum")),
                )
        return None

    def store(self, user: UserInformation) -> bool:
        """Write the user's name and tally back; False if the uid is unknown."""
        users = self._load_or_empty()
        if users is None:
            return False
        for entry in users:
            if _as_str(entry.get("uid")) == user.uid:
                entry["username"] = user.username
                entry["uid"] = user.uid
                entry["winNum"] = user.wins
                entry["loseNum"] = user.losses
                entry["drawNum"] = user.draws
                self.save(users)
                return True
        return False