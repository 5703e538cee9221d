import logging
from pathlib import Path
from typing import Optional

from bogusdata.content.headers import HeaderTemplate, header_bytes


logger = logging.getLogger(__name__)


class WriteException(Exception):
    pass


def _discard(path: Path) -> None:
    try:
        path.unlink()
    except FileNotFoundError:
        pass
    except OSError as e:
        logger.warning("Could not remove partial file %s: %s", path, e)


def write_file(path, size_bytes: int, filler, header: Optional[HeaderTemplate] = None) -> int:
    """Write ``size_bytes`` bytes to ``path`` and return the count written.

    When ``header`` is given it becomes the first bytes of the file (cut to
    ``size_bytes``) and filler makes up the rest. A failed write removes
    whatever was written and raises :class:`WriteException`.
    """
    if size_bytes <= 0:
        return 0
    path = Path(path)
    prefix = header_bytes(header)[:size_bytes]
    written = 0
    try:
        f = path.open("xb")
    except OSError as e:
        raise WriteException(f"Cannot create {path}: {e}")
    try:
        with f:
            if prefix:
                f.write(prefix)
                written += len(prefix)
            for chunk in filler.chunks(size_bytes - written):
                f.write(chunk)
                written += len(chunk)
    except OSError as e:
        _discard(path)
        raise WriteException(f"Writing {path} failed after {written} bytes: {e}")
    return written
