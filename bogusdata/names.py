import os
from random import Random
from typing import Optional, Set

from bogusdata.config import Scenario
from bogusdata.constants import KEYWORD_PROBABILITY, LOGGABLE_EXTENSIONS, MAX_NAME_ATTEMPTS


NAME_DICTIONARY = {
    Scenario.USER_DATABASE: [
        "users.sql",
        "customers.sql",
        "accounts.sql",
        "user_profiles.sql",
        "login_history.sql",
        "permissions.sql",
        "users_export.bak",
        "userdb_nightly.bak",
        "database.conf",
        "auth.conf",
        "userdb_dump.zip",
        "profile_pictures.zip",
    ],
    Scenario.BACKUPS: [
        "full_backup.bak",
        "incremental_backup.bak",
        "differential_backup.bak",
        "system_state.bak",
        "db_backup.sql",
        "schema_backup.sql",
        "backup_job.conf",
        "retention.conf",
        "home_directories.zip",
        "mailbox_archive.zip",
        "webroot_snapshot.zip",
        "offsite_copy.zip",
    ],
}


class NameCollisionException(Exception):
    pass


def extension_of(name: str) -> str:
    return os.path.splitext(name)[1].lstrip(".").lower()


def choose_name(scenario: Scenario, extension: str, index: int, rng: Random) -> str:
    """Pick a base file name for one slot.

    Dictionary scenarios ignore ``extension``; every entry carries its own.
    """
    if scenario is Scenario.RANDOM:
        return f"random_file_{index}.{extension}"
    return rng.choice(NAME_DICTIONARY[scenario])


def inject_keyword(name: str, keyword: Optional[str], rng: Random) -> str:
    if not keyword:
        return name
    if extension_of(name) in LOGGABLE_EXTENSIONS or rng.random() < KEYWORD_PROBABILITY:
        return f"{keyword}_{name}"
    return name


class NameRegistry:
    """File names already handed out during one run."""

    def __init__(self, max_attempts: int = MAX_NAME_ATTEMPTS):
        self.max_attempts = max_attempts
        self._used: Set[str] = set()

    def __contains__(self, name: str) -> bool:
        return name in self._used

    def __len__(self) -> int:
        return len(self._used)

    def reserve(self, name: str) -> str:
        if name not in self._used:
            self._used.add(name)
            return name
        stem, ext = os.path.splitext(name)
        for n in range(1, self.max_attempts + 1):
            candidate = f"{stem}_{n}{ext}"
            if candidate not in self._used:
                self._used.add(candidate)
                return candidate
        raise NameCollisionException(f"No free name for {name} after {self.max_attempts} attempts")

    def release(self, name: str) -> None:
        self._used.discard(name)
