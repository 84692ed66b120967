# naming.py

import enum
import os
import unicodedata

from . import globalv
from .errors import EmptyIdentifier, ReservedIdentifier


class CaseState(enum.Enum):
    AT_WORD_START = enum.auto()
    IN_WORD = enum.auto()


def _title(c: str) -> str:
    t = c.title()
    # some runes (e.g. 'ß') title-case to more than one character, keep those as is
    return t if len(t) == 1 else c


def to_camel_case(s: str) -> str:
    """
    Remove separator characters like dashes and underscores and capitalize
    the first character of every following word.

    The start of the string counts as a word start, so "hello_world" becomes
    "HelloWorld".
    """
    state = CaseState.AT_WORD_START
    out = []
    for c in s:
        if c in globalv.SEPARATORS:
            state = CaseState.AT_WORD_START
            continue
        if state is CaseState.AT_WORD_START:
            out.append(_title(c))
            state = CaseState.IN_WORD
        else:
            out.append(c)
    return "".join(out)


def is_letter(c: str) -> bool:
    if c < "\x80":
        return "a" <= c <= "z" or "A" <= c <= "Z" or c == "_"
    return unicodedata.category(c).startswith("L")


def is_digit(c: str) -> bool:
    if c < "\x80":
        return "0" <= c <= "9"
    return unicodedata.category(c) == "Nd"


def filter_invalid_chars(s: str) -> str:
    """
    Drop characters that are invalid in Go identifiers.

    Digits are skipped as long as nothing has been kept yet, an identifier
    can't begin with one.
    """
    out = []
    for c in s:
        if is_letter(c):
            out.append(c)
        elif is_digit(c) and out:
            out.append(c)
    return "".join(out)


def is_reserved_keyword(name: str) -> bool:
    return name in globalv.KEYWORDS


def is_identifier(name: str) -> bool:
    """Whether `name` can be used as a Go identifier as it is."""
    return (
        bool(name)
        and is_letter(name[0])
        and all(is_letter(c) or is_digit(c) for c in name)
        and not is_reserved_keyword(name)
    )


def make_identifier(raw_name: str, prefix: str = "") -> str:
    """
    Derive a Go identifier from an arbitrary name.

    :param raw_name: File name (or any string) to derive the identifier from.
    :param prefix: Prepended to the sanitized name, not sanitized itself.
    :raises ReservedIdentifier: if the result is a Go keyword.
    :raises EmptyIdentifier: if nothing usable is left.
    """
    name = to_camel_case(raw_name)
    name = filter_invalid_chars(name)

    if prefix:
        name = prefix + name
    if not name:
        raise EmptyIdentifier(raw_name)
    if is_reserved_keyword(name):
        raise ReservedIdentifier(name)

    return name


def strip_extension(path: str) -> str:
    return os.path.splitext(os.path.basename(path))[0]


class NamingStrategy(enum.Enum):
    """How the identifier of a file is derived from its path."""

    STRIP_EXTENSION = "basename"
    FULL_FILENAME = "filename"

    def base_name(self, path: str) -> str:
        if self is NamingStrategy.STRIP_EXTENSION:
            return strip_extension(path)
        return os.path.basename(path)

    def identifier(self, path: str, prefix: str = "") -> str:
        return make_identifier(self.base_name(path), prefix)
