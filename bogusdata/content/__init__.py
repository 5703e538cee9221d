from bogusdata.content.headers import BytesHeader, TextHeader, header_bytes, header_for
from bogusdata.content.filler import make_filler

__all__ = ["BytesHeader", "TextHeader", "header_bytes", "header_for", "make_filler"]
