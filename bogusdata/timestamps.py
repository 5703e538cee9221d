import logging
import os
import subprocess
import sys
from datetime import datetime
from random import Random
from typing import Optional, Tuple


logger = logging.getLogger(__name__)


def pick_modified(created: datetime, rng: Random, now: Optional[datetime] = None) -> datetime:
    """Uniform instant between ``created`` and ``now``; ``created`` if that is not in the past."""
    now = now or datetime.now()
    if created >= now:
        return created
    span = (now - created).total_seconds()
    return datetime.fromtimestamp(created.timestamp() + rng.uniform(0, span))


def _set_windows_creation_time(path: str, created: datetime) -> None:
    creation_str = created.strftime("%m/%d/%Y %H:%M:%S")
    quoted = path.replace("'", "''")
    command = f"(Get-Item -LiteralPath '{quoted}').CreationTime = '{creation_str}'"
    result = subprocess.run(["powershell", "-NoProfile", "-Command", command],
                            capture_output=True, text=True)
    if result.returncode != 0:
        logger.warning("Could not set creation time on %s: %s", path, result.stderr.strip())


def stamp(path, created: datetime, rng: Random, now: Optional[datetime] = None) -> Tuple[datetime, datetime]:
    """Backdate ``path``: access time carries ``created``, mtime a later random instant.

    POSIX filesystems do not let us set a birth time, so only Windows gets a
    real creation time.
    """
    modified = pick_modified(created, rng, now)
    os.utime(path, (created.timestamp(), modified.timestamp()))
    if sys.platform == "win32":
        _set_windows_creation_time(os.fspath(path), created)
    return created, modified
