from typing import List

from bogusdata.utils.sizes import to_mb


def format_summary(result) -> List[str]:
    lines = [f"{f.path}  {to_mb(f.size):.2f} MB" for f in result.files]
    lines.append(f"Generated {len(result.files)} files in {result.output_dir} "
                 f"({to_mb(result.total_size):.2f} MB total)")
    return lines


def print_summary(result) -> None:
    for line in format_summary(result):
        print(line)
