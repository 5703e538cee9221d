import json
from collections import namedtuple

import pytest

from bogusdata.cli import main
from bogusdata.report import format_summary
from bogusdata.generator import GeneratedFile, GenerationResult


DiskUsage = namedtuple("DiskUsage", "total used free")


def _data_dirs(path):
    return sorted(p.name for p in path.iterdir() if p.name.startswith("DATA"))


def test_main_generates_and_prints_summary(tmp_path, capsys):
    rc = main(["--scenario", "Random", "--max-total-size", "1MB", "--file-count", "3",
               "--extensions", "conf", "zip", "--base-dir", str(tmp_path), "--skip-space-check"])
    assert rc == 0
    out = capsys.readouterr().out.strip().splitlines()
    assert len(out) == 4
    assert out[-1].startswith("Generated 3 files in ")
    assert _data_dirs(tmp_path) == ["DATA0"]


@pytest.mark.parametrize("argv", [
    ["--max-total-size", "1000"],
    ["--scenario", "Backups"],
    ["--scenario", "Backups", "--max-total-size", "1000", "--created-date", "2020-01-01"],
    ["--scenario", "Backups", "--max-total-size", "1000", "--size-mode", "exact"],
    ["--scenario", "Pictures", "--max-total-size", "1000"],
])
def test_configuration_errors_exit_before_creating_anything(tmp_path, argv):
    assert main(argv + ["--base-dir", str(tmp_path)]) == 1
    assert _data_dirs(tmp_path) == []


def test_help_exits_cleanly(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--help"])
    assert exc.value.code == 0
    assert "--max-total-size" in capsys.readouterr().out
    assert list(tmp_path.iterdir()) == []


def test_config_file_with_command_line_override(tmp_path, capsys):
    cfg = tmp_path / "bogus.json"
    cfg.write_text(json.dumps({
        "scenario": "UserDatabase",
        "max-total-size": "100KB",
        "file-count": 7,
        "base-dir": str(tmp_path / "out"),
        "skip-space-check": True,
    }))
    assert main(["--config", str(cfg), "--file-count", "2"]) == 0
    out = capsys.readouterr().out.strip().splitlines()
    assert out[-1].startswith("Generated ")
    assert len(list((tmp_path / "out" / "DATA0").iterdir())) <= 2


def test_format_summary(tmp_path):
    result = GenerationResult(output_dir=tmp_path, files=[
        GeneratedFile(path=tmp_path / "users.sql", size=1048576),
        GeneratedFile(path=tmp_path / "auth.conf", size=524288),
    ])
    lines = format_summary(result)
    assert lines == [
        f"{tmp_path / 'users.sql'}  1.00 MB",
        f"{tmp_path / 'auth.conf'}  0.50 MB",
        f"Generated 2 files in {tmp_path} (1.50 MB total)",
    ]


def test_config_file_skip_space_check(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr("bogusdata.config.shutil.disk_usage", lambda p: DiskUsage(100, 90, 10))
    cfg = tmp_path / "bogus.json"
    cfg.write_text(json.dumps({
        "scenario": "Random",
        "max-total-size": "1KB",
        "file-count": 1,
        "base-dir": str(tmp_path),
        "skip-space-check": True,
    }))
    assert main(["--config", str(cfg)]) == 0
    assert _data_dirs(tmp_path) == ["DATA0"]


@pytest.mark.parametrize("extra", [{"max-total-sise": "1KB"}, {"keep-headers": "false"}])
def test_config_file_bad_keys_or_values_fail(tmp_path, extra):
    cfg = tmp_path / "bogus.json"
    options = {"scenario": "Random", "max-total-size": "1KB", "base-dir": str(tmp_path)}
    options.update(extra)
    cfg.write_text(json.dumps(options))
    assert main(["--config", str(cfg), "--skip-space-check"]) == 1
    assert _data_dirs(tmp_path) == []


def test_keyword_with_path_separator_exits(tmp_path):
    rc = main(["--scenario", "Random", "--max-total-size", "1000", "--keyword", "../escaped",
               "--base-dir", str(tmp_path / "runs"), "--skip-space-check"])
    assert rc == 1
    assert not (tmp_path / "runs").exists()
    assert list(tmp_path.iterdir()) == []
