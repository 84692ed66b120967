# file_handling.py

import functools
import unicodedata
from typing import Iterator

from . import globalv


def is_print(c: str) -> bool:
    """Go's unicode.IsPrint: letters, marks, numbers, punctuation, symbols and ASCII space."""
    return c == " " or unicodedata.category(c)[0] in "LMNPS"


def _escape_rune(c: str) -> str:
    r = ord(c)
    # surrogateescape maps every byte that is not valid UTF-8 to U+DC80..U+DCFF
    if 0xDC80 <= r <= 0xDCFF:
        return f"\\x{r - 0xDC00:02x}"
    if r in globalv.go.escapes:
        return globalv.go.escapes[r]
    if is_print(c):
        return c
    if r < 0x20 or r == 0x7F:
        return f"\\x{r:02x}"
    if r < 0x10000:
        return f"\\u{r:04x}"
    return f"\\U{r:08x}"


def quote(data: bytes) -> str:
    """
    Render `data` as a double-quoted Go string literal, like strconv.Quote.

    Printable runes are kept, everything else is escaped. Decoding the result
    with Go's string literal grammar yields `data` again.
    """
    text = data.decode("utf-8", errors="surrogateescape")
    return '"' + "".join(_escape_rune(c) for c in text) + '"'


def escape_file(path: str, chunk_size: int = globalv.BUFSIZE) -> Iterator[str]:
    """
    Read `path` chunk by chunk and yield its escaped contents.

    The fragments come without surrounding quotes, the caller writes those
    once for the whole file. Read errors propagate.
    """
    with open(path, "rb") as f:
        for chunk in iter(functools.partial(f.read, chunk_size), b""):
            quoted = quote(chunk)
            # we write start and end quotes ourselves, drop them
            yield quoted[1:-1]
