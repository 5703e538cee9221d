"""Header stubs written at the start of some generated files.

A header is either text or raw bytes; ``header_bytes`` is the one place that
turns either form into what goes on disk.
"""

from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class TextHeader:
    text: str
    encoding: str = "utf-8"


@dataclass(frozen=True)
class BytesHeader:
    data: bytes


HeaderTemplate = Union[TextHeader, BytesHeader]


HEADER_TEMPLATES = {
    "conf": TextHeader("# generated configuration file\n[general]\n"),
    "sql": TextHeader("-- SQL dump\n-- Server version: 8.0\n\n"),
    "zip": BytesHeader(b"PK\x03\x04"),
}


def header_for(extension: str) -> Optional[HeaderTemplate]:
    return HEADER_TEMPLATES.get(extension)


def header_bytes(template: Optional[HeaderTemplate]) -> bytes:
    if template is None:
        return b""
    if isinstance(template, TextHeader):
        return template.text.encode(template.encoding)
    if isinstance(template, BytesHeader):
        return bytes(template.data)
    raise TypeError(f"Unsupported header template: {template!r}")
