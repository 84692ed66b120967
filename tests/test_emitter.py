#!/usr/bin/python3

import contextlib
import io
import os
import unittest

import testcommon

from gobundle.emitter import Emitter, open_output

HEADER = "// Code generated automatically; DO NOT EDIT.\n\npackage assets\n\n"


class TestEmitter(unittest.TestCase):

    def emit(self, decl, entries):
        out = io.StringIO()
        emitter = Emitter(out, decl)
        emitter.write_header("assets")
        emitter.open_block()
        for path, name, fragments in entries:
            emitter.write_entry(path, name, fragments)
        emitter.close_block()
        return out.getvalue()

    def test_empty_block(self):
        self.assertEqual(
            self.emit("var", []),
            HEADER + "// These vars are included from files by go generate.\nvar ()\n",
        )

    def test_entries(self):
        self.assertEqual(
            self.emit("const", [("a.txt", "A", ["x", "y"]), ("b.txt", "B", [])]),
            HEADER
            + "// These consts are included from files by go generate.\n"
            + "const (\n"
            + "\t// file: a.txt\n"
            + '\tA = "xy"\n'
            + "\t// file: b.txt\n"
            + '\tB = ""\n'
            + ")\n",
        )

    def test_invalid_decl(self):
        with self.assertRaises(ValueError):
            Emitter(io.StringIO(), "let")


class TestOpenOutput(testcommon.TestCase):

    def test_file_created(self):
        with open_output("out.go") as out:
            out.write("package x\n")
        self.assertEqual(self.read_file("out.go"), b"package x\n")

    def test_file_truncated(self):
        self.write_file("out.go", b"old contents that are longer\n")
        with open_output("out.go") as out:
            out.write("new\n")
        self.assertEqual(self.read_file("out.go"), b"new\n")

    def test_flushed_on_error(self):
        with self.assertRaises(RuntimeError):
            with open_output("out.go") as out:
                out.write("partial")
                raise RuntimeError("boom")
        self.assertEqual(self.read_file("out.go"), b"partial")

    def test_utf8(self):
        with open_output("out.go") as out:
            out.write("Grüße\n")
        self.assertEqual(self.read_file("out.go"), "Grüße\n".encode("utf-8"))

    def test_bad_destination(self):
        with self.assertRaises(OSError):
            with open_output(os.path.join(self.tmpdir, "missing", "out.go")):
                pass

    def test_stdout_text_stream(self):
        buf = io.StringIO()
        with contextlib.redirect_stdout(buf):
            with open_output("") as out:
                out.write("hello\n")
        self.assertEqual(buf.getvalue(), "hello\n")

    def test_stdout_binary_buffer(self):
        raw = io.BytesIO()
        stdout = io.TextIOWrapper(raw, encoding="ascii")
        with contextlib.redirect_stdout(stdout):
            with open_output("") as out:
                out.write("Grüße\n")
        self.assertEqual(raw.getvalue(), "Grüße\n".encode("utf-8"))
        self.assertFalse(stdout.closed)


if __name__ == "__main__":
    unittest.main()
