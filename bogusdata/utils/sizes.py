from bogusdata.constants import KB, MB, GB


_UNITS = {"": 1, "b": 1, "k": KB, "kb": KB, "m": MB, "mb": MB, "g": GB, "gb": GB,
          "t": GB * 1024, "tb": GB * 1024}


def human_size_to_bytes(s: str) -> int:
    """Parse '512', '10KB', '1.5mb' or '2G' into a byte count."""
    s = str(s).strip().lower()
    num, unit = "", ""
    for ch in s:
        if (ch.isdigit() or ch == ".") and not unit:
            num += ch
        else:
            unit += ch
    if not num:
        raise ValueError(f"Invalid size: {s!r}")
    unit = unit.strip()
    if unit not in _UNITS:
        raise ValueError(f"Unknown unit in {s!r}")
    return int(float(num) * _UNITS[unit])


def human(n: int) -> str:
    for unit in ("B", "KB", "MB", "GB"):
        if n < 1024 or unit == "GB":
            return f"{n:.2f} {unit}" if unit != "B" else f"{n} {unit}"
        n /= 1024


def to_mb(n: int) -> float:
    return n / MB
