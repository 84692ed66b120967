"""Common testing stuff"""

import os
import shutil
import tempfile
import unittest

TESTDATA = os.path.join(os.path.dirname(os.path.abspath(__file__)), "testdata")
TESTFILES = ["helloworld.go", "example.json", "empty.json"]

_SIMPLE_ESCAPES = {
    "a": 0x07, "b": 0x08, "f": 0x0C, "n": 0x0A, "r": 0x0D,
    "t": 0x09, "v": 0x0B, "\\": 0x5C, '"': 0x22, "'": 0x27,
}


def go_unquote(literal):
    """Decode a double-quoted Go string literal into the bytes it denotes."""
    assert literal[0] == '"' and literal[-1] == '"', literal
    s = literal[1:-1]
    out = bytearray()
    i = 0
    while i < len(s):
        c = s[i]
        if c != "\\":
            assert c not in '"\n', f"unescaped {c!r} at {i}"
            out += c.encode("utf-8")
            i += 1
            continue
        e = s[i + 1]
        if e in _SIMPLE_ESCAPES:
            out.append(_SIMPLE_ESCAPES[e])
            i += 2
        elif e == "x":
            out.append(int(s[i + 2:i + 4], 16))
            i += 4
        elif e == "u":
            out += chr(int(s[i + 2:i + 6], 16)).encode("utf-8")
            i += 6
        elif e == "U":
            out += chr(int(s[i + 2:i + 10], 16)).encode("utf-8")
            i += 10
        elif e in "01234567":
            out.append(int(s[i + 1:i + 4], 8))
            i += 4
        else:
            raise ValueError(f"unknown escape \\{e}")
    return bytes(out)


class TestCase(unittest.TestCase):
    """Base class for gobundle unittests, runs each test in a scratch directory"""

    def setUp(self):
        self.tmpdir = tempfile.mkdtemp(prefix="gobundle")
        self.addCleanup(shutil.rmtree, self.tmpdir)
        cwd = os.getcwd()
        os.chdir(self.tmpdir)
        self.addCleanup(os.chdir, cwd)

    def write_file(self, name, content=b""):
        path = os.path.join(self.tmpdir, name)
        os.makedirs(os.path.dirname(path), exist_ok=True)
        if isinstance(content, str):
            content = content.encode("utf-8")
        with open(path, "wb") as f:
            f.write(content)
        return path

    def read_file(self, name):
        with open(os.path.join(self.tmpdir, name), "rb") as f:
            return f.read()

    def copy_testdata(self):
        """Copy the input files to ./testdata and return their relative paths."""
        os.mkdir("testdata")
        for fn in TESTFILES:
            shutil.copy(os.path.join(TESTDATA, fn), "testdata")
        return [os.path.join("testdata", fn) for fn in TESTFILES]

    def golden(self, name):
        with open(os.path.join(TESTDATA, name), "rb") as f:
            return f.read()
