import logging
from itertools import count
from pathlib import Path

from bogusdata.constants import OUTPUT_PREFIX


logger = logging.getLogger(__name__)


def allocate_output_dir(base_dir=".", prefix: str = OUTPUT_PREFIX) -> Path:
    """Create and return the first free ``<prefix><n>`` directory under ``base_dir``."""
    base = Path(base_dir)
    base.mkdir(parents=True, exist_ok=True)
    for n in count():
        candidate = base / f"{prefix}{n}"
        if candidate.exists():
            continue
        try:
            candidate.mkdir()
        except FileExistsError:
            # created between the probe and mkdir; keep probing
            continue
        logger.debug("Allocated output directory %s", candidate)
        return candidate
