import logging
import time
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from random import Random
from typing import List, Optional

from bogusdata.config import Configuration, check_free_space
from bogusdata.constants import FILE_COUNT_RANGE
from bogusdata.content import header_for, make_filler
from bogusdata.names import NameCollisionException, NameRegistry, choose_name, extension_of, inject_keyword
from bogusdata.outdir import allocate_output_dir
from bogusdata.sizing import Budget, choose_size
from bogusdata.timestamps import stamp
from bogusdata.writer import WriteException, write_file


logger = logging.getLogger(__name__)


def _log(operation: str, key: str, phase: str, status: str, msg: str = ""):
    # Format: SERVICE, OPERATION, KEY, START/END, Status, MSG
    level = logging.ERROR if status == "ERROR" else logging.DEBUG
    logger.log(level, f"GENERATOR,{operation},{key},{phase},{status},{msg}")


def _ms(ns_start: int) -> float:
    return (time.perf_counter_ns() - ns_start) / 1e6


@dataclass(frozen=True)
class GeneratedFile:
    path: Path
    size: int
    created: Optional[datetime] = None
    modified: Optional[datetime] = None


@dataclass
class GenerationResult:
    output_dir: Path
    files: List[GeneratedFile] = field(default_factory=list)

    @property
    def total_size(self) -> int:
        return sum(f.size for f in self.files)


class Generator(object):

    def __init__(self, config: Configuration, rng: Optional[Random] = None):
        self.config = config
        self.rng = rng or Random(config.seed)

    def file_count(self) -> int:
        if self.config.file_count is not None:
            return self.config.file_count
        return self.rng.randrange(*FILE_COUNT_RANGE)

    def run(self) -> GenerationResult:
        """Validate the configuration, then fill a fresh output directory.

        Raises ``ConfigurationException`` before anything touches the disk.
        Per-file failures are logged and the slot is skipped.
        """
        t_total = time.perf_counter_ns()
        config = self.config
        config.validate()
        check_free_space(config)

        output_dir = allocate_output_dir(config.base_dir)
        count = self.file_count()
        _log("RUN", output_dir.name, "START", "RUN",
             f"scenario={config.scenario.value};max_total_size={config.max_total_size};"
             f"size_mode={config.size_mode.value};file_count={count};extensions={','.join(config.extensions)}")

        result = GenerationResult(output_dir=output_dir)
        budget = Budget(config.max_total_size)
        registry = NameRegistry()
        filler = make_filler(config.filler, self.rng)

        for index in range(1, count + 1):
            if budget.exhausted:
                _log("RUN", output_dir.name, "END", "SUCCESS", f"msg=budget_exhausted;slot={index}")
                break

            extension = self.rng.choice(config.extensions)
            name = inject_keyword(choose_name(config.scenario, extension, index, self.rng),
                                  config.keyword, self.rng)
            try:
                name = registry.reserve(name)
            except NameCollisionException as e:
                _log("FILE", name, "END", "ERROR", f"phase=NAME;msg={e}")
                continue

            file_ext = extension_of(name)
            size = choose_size(file_ext, budget, config, self.rng)
            if size <= 0:
                registry.release(name)
                _log("RUN", output_dir.name, "END", "SUCCESS", f"msg=non_positive_size;slot={index}")
                break

            entry = self._create(output_dir / name, file_ext, size, filler)
            if entry is None:
                registry.release(name)
                continue
            budget.consume(entry.size)
            result.files.append(entry)

        _log("RUN", output_dir.name, "END", "SUCCESS",
             f"files={len(result.files)};total_bytes={budget.total};total_time_ms={_ms(t_total):.3f}")
        return result

    def _create(self, path: Path, extension: str, size: int, filler) -> Optional[GeneratedFile]:
        t0 = time.perf_counter_ns()
        _log("FILE", path.name, "START", "RUN", f"bytes={size}")
        header = header_for(extension) if self.config.keep_headers else None
        try:
            written = write_file(path, size, filler, header)
        except WriteException as e:
            _log("FILE", path.name, "END", "ERROR", f"phase=WRITE;msg={e}")
            return None

        created = modified = None
        if self.config.created_date is not None:
            try:
                created, modified = stamp(path, self.config.created_date, self.rng)
            except OSError as e:
                _log("FILE", path.name, "END", "ERROR", f"phase=STAMP;msg={e}")

        _log("FILE", path.name, "END", "SUCCESS", f"bytes={written};time_ms={_ms(t0):.3f}")
        return GeneratedFile(path=path, size=written, created=created, modified=modified)
