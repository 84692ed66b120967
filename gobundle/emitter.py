# emitter.py

import contextlib
import io
import sys

from . import globalv


@contextlib.contextmanager
def open_output(out_file: str = ""):
    """
    Yield a buffered UTF-8 text stream for the generated code.

    An empty `out_file` writes to standard output. The stream is flushed
    whichever way the block is left, so an aborted run still leaves what was
    written so far.
    """
    if out_file:
        out = open(out_file, "w", encoding="utf-8", errors="surrogateescape", newline="\n")
        try:
            yield out
        finally:
            out.close()
    else:
        stdout = sys.stdout
        buffer = getattr(stdout, "buffer", None)
        if buffer is None:
            # already a plain text stream (e.g. redirected in tests)
            try:
                yield stdout
            finally:
                stdout.flush()
            return
        stdout.flush()
        out = io.TextIOWrapper(buffer, encoding="utf-8", errors="surrogateescape", newline="\n")
        try:
            yield out
        finally:
            out.flush()
            out.detach()


class Emitter:
    """Writes the generated Go file: header, one declaration block and its entries."""

    def __init__(self, out, decl: str = "var"):
        if decl not in globalv.go.block.kinds:
            raise ValueError(f"decl must be one of {globalv.go.block.kinds}")
        self.out = out
        self.decl = decl
        self.entries = 0

    def write_header(self, pkg_name: str) -> None:
        self.out.write(globalv.go.header.generated + "\n")
        self.out.write("\n")
        self.out.write(globalv.go.header.package.format(name=pkg_name) + "\n")
        self.out.write("\n")

    def open_block(self) -> None:
        self.out.write(globalv.go.block.comment.format(decl=self.decl) + "\n")
        self.out.write(f"{self.decl} (")

    def write_entry(self, path: str, name: str, fragments) -> None:
        self.out.write(f"\n\t// file: {path}\n")
        self.out.write(f"\t{name} = ")
        self.out.write('"')
        for fragment in fragments:
            self.out.write(fragment)
        self.out.write('"')
        self.entries += 1

    def close_block(self) -> None:
        # an empty block stays on one line: var ()
        if self.entries:
            self.out.write("\n")
        self.out.write(")\n")
