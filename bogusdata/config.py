"""Run configuration for bogusdata.

A :class:`Configuration` is built once from the command line (and optionally a
JSON file), validated, and never mutated afterwards. Every check here runs
before the output directory is created, so a rejected configuration leaves the
filesystem untouched.
"""

import json
import logging
import os
import re
import shutil
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import List, Optional

from bogusdata.constants import DEFAULT_EXTENSIONS, FILLERS, FREE_SPACE_WARN_RATIO, MAX_FILE_SIZE
from bogusdata.utils.sizes import human, human_size_to_bytes


logger = logging.getLogger(__name__)

_DATE_RE = re.compile(r"^\s*(\d{1,2})/(\d{1,2})/(\d{4}|\d{2})\s*$")


class ConfigurationException(Exception):
    pass


class Scenario(Enum):
    USER_DATABASE = "UserDatabase"
    BACKUPS = "Backups"
    RANDOM = "Random"

    @classmethod
    def parse(cls, value) -> "Scenario":
        if isinstance(value, cls):
            return value
        for scenario in cls:
            if scenario.value.lower() == str(value).strip().lower():
                return scenario
        choices = ", ".join(s.value for s in cls)
        raise ConfigurationException(f"Unknown scenario {value!r} (expected one of: {choices})")


class SizeMode(Enum):
    RANDOM = "random"
    EXACT = "exact"

    @classmethod
    def parse(cls, value) -> "SizeMode":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ConfigurationException(f"Unknown size mode {value!r} (expected random or exact)")


def parse_date(text: str, today: Optional[datetime] = None) -> datetime:
    """Parse ``MM/DD/YYYY`` or ``MM/DD/YY`` into a datetime at midnight.

    Two-digit years are windowed against the current year: values up to the
    current two-digit year land in 2000+yy, larger values in 1900+yy.
    """
    match = _DATE_RE.match(text or "")
    if not match:
        raise ConfigurationException(f"Invalid created date {text!r} (expected MM/DD/YYYY or MM/DD/YY)")
    month, day, year_text = match.groups()
    year = int(year_text)
    if len(year_text) == 2:
        pivot = (today or datetime.now()).year % 100
        year += 2000 if year <= pivot else 1900
    try:
        return datetime(year, int(month), int(day))
    except ValueError as e:
        raise ConfigurationException(f"Invalid created date {text!r}: {e}")


def parse_size(value) -> int:
    if isinstance(value, int):
        return value
    try:
        return human_size_to_bytes(value)
    except ValueError as e:
        raise ConfigurationException(str(e))


def _as_int(name, value) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ConfigurationException(f"{name} must be an integer, got {value!r}")


CONFIG_FILE_KEYS = frozenset({
    "scenario", "max_total_size", "size_mode", "exact_file_size", "file_count",
    "extensions", "keyword", "created_date", "base_dir", "seed", "filler",
    "keep_headers", "skip_space_check", "max_file_size",
})


def _as_bool(name, value) -> bool:
    if not isinstance(value, bool):
        raise ConfigurationException(f"{name} must be true or false, got {value!r}")
    return value


def load_config_file(path: str) -> dict:
    """Read a JSON object whose keys mirror the command line option names.

    ``skip-space-check`` is translated to the ``check_space`` option; any key
    that is not a command line option is rejected.
    """
    try:
        with open(os.path.expanduser(path), "r") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        raise ConfigurationException(f"Cannot read config file {path}: {e}")
    if not isinstance(data, dict):
        raise ConfigurationException(f"Config file {path} must contain a JSON object")
    options = {k.replace("-", "_"): v for k, v in data.items()}
    unknown = sorted(set(options) - CONFIG_FILE_KEYS)
    if unknown:
        raise ConfigurationException(f"Unknown option(s) in config file {path}: {', '.join(unknown)}")
    if "skip_space_check" in options:
        options["check_space"] = not _as_bool("skip-space-check", options.pop("skip_space_check"))
    return options


@dataclass
class Configuration:
    scenario: Optional[Scenario] = None
    max_total_size: Optional[int] = None
    size_mode: SizeMode = SizeMode.RANDOM
    exact_file_size: Optional[int] = None
    file_count: Optional[int] = None
    extensions: List[str] = field(default_factory=lambda: list(DEFAULT_EXTENSIONS))
    keyword: Optional[str] = None
    created_date: Optional[datetime] = None
    base_dir: str = "."
    seed: Optional[int] = None
    filler: str = "urandom"
    keep_headers: bool = False
    check_space: bool = True
    max_file_size: int = MAX_FILE_SIZE

    @classmethod
    def from_options(cls, options: dict) -> "Configuration":
        """Build a configuration from loosely typed option values (CLI or JSON)."""
        opts = {k: v for k, v in options.items() if v is not None}
        config = cls()
        if "scenario" in opts:
            config.scenario = Scenario.parse(opts["scenario"])
        if "max_total_size" in opts:
            config.max_total_size = parse_size(opts["max_total_size"])
        if "size_mode" in opts:
            config.size_mode = SizeMode.parse(opts["size_mode"])
        if "exact_file_size" in opts:
            config.exact_file_size = parse_size(opts["exact_file_size"])
        if "file_count" in opts:
            config.file_count = _as_int("file-count", opts["file_count"])
        if "extensions" in opts:
            exts = opts["extensions"]
            if isinstance(exts, str):
                exts = exts.split(",")
            config.extensions = [e.strip().lstrip(".").lower() for e in exts if e.strip()]
        if opts.get("keyword"):
            config.keyword = opts["keyword"]
        if "created_date" in opts:
            config.created_date = parse_date(opts["created_date"])
        if "base_dir" in opts:
            config.base_dir = opts["base_dir"]
        if "seed" in opts:
            config.seed = _as_int("seed", opts["seed"])
        if "filler" in opts:
            config.filler = opts["filler"]
        if "keep_headers" in opts:
            config.keep_headers = _as_bool("keep-headers", opts["keep_headers"])
        if "check_space" in opts:
            config.check_space = _as_bool("check-space", opts["check_space"])
        if "max_file_size" in opts:
            config.max_file_size = parse_size(opts["max_file_size"])
        return config

    def validate(self) -> None:
        if self.scenario is None:
            raise ConfigurationException("Missing required parameter: scenario")
        if self.max_total_size is None:
            raise ConfigurationException("Missing required parameter: max-total-size")
        if self.max_total_size <= 0:
            raise ConfigurationException("max-total-size must be > 0")
        if self.size_mode is SizeMode.EXACT:
            if self.exact_file_size is None:
                raise ConfigurationException("size-mode exact requires exact-file-size")
            if self.exact_file_size <= 0:
                raise ConfigurationException("exact-file-size must be > 0")
        if self.file_count is not None and self.file_count < 1:
            raise ConfigurationException("file-count must be >= 1")
        if not self.extensions:
            raise ConfigurationException("At least one extension is required")
        if self.keyword is not None:
            separators = [s for s in (os.sep, os.altsep, "/") if s]
            if self.keyword in (".", "..") or any(s in self.keyword for s in separators):
                raise ConfigurationException(f"keyword {self.keyword!r} must not contain path separators")
        if self.max_file_size <= 0:
            raise ConfigurationException("max-file-size must be > 0")
        if self.filler not in FILLERS:
            raise ConfigurationException(f"Unknown filler {self.filler!r} (expected one of: {', '.join(FILLERS)})")


def check_free_space(config: Configuration) -> None:
    """Warn when the run would fill the volume, fail when it cannot fit at all."""
    if not config.check_space:
        return
    free = shutil.disk_usage(os.path.abspath(config.base_dir)).free
    if config.max_total_size > free:
        raise ConfigurationException(
            f"Requested {human(config.max_total_size)} but only {human(free)} is free")
    if config.max_total_size >= free * FREE_SPACE_WARN_RATIO:
        logger.warning("Requested %s uses %.0f%% of the %s free on this volume",
                       human(config.max_total_size), 100.0 * config.max_total_size / free, human(free))
