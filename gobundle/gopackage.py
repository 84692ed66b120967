# gopackage.py

import itertools
import logging
import os
import re

from . import utils
from .errors import PackageResolutionError

logger = utils.CustomAdapter(logging.getLogger(__name__))

# leading comments and blank space, then the package clause
_PACKAGE_CLAUSE = re.compile(r"\A(?:\s|(?>//[^\n]*)|(?>/\*.*?\*/))*?package\s+([^\W\d]\w*)", re.S)
_GO_BUILD = re.compile(r"^//go:build\s+(.*)$", re.M)
_PLUS_BUILD = re.compile(r"^//\s*\+build\s+(.*)$", re.M)
_MAX_CONSTRAINT_TAGS = 12


def parse_package_clause(source: str):
    """
    Return (package name, header text) of a Go source file, or (None, None)
    if there is no package clause before the first non-comment token.
    """
    m = _PACKAGE_CLAUSE.match(source)
    if m is None:
        return None, None
    return m.group(1), m.group(0)


_TOKEN = re.compile(r"\s*(\(|\)|!|&&|\|\||[\w.]+)")


def _tokenize(expr: str):
    tokens, pos = [], 0
    expr = expr.strip()
    while pos < len(expr):
        m = _TOKEN.match(expr, pos)
        if m is None:
            raise ValueError(f"bad build constraint: {expr!r}")
        tokens.append(m.group(1))
        pos = m.end()
    return tokens


def parse_constraint(expr: str):
    """
    Parse a //go:build expression into a predicate over the set of satisfied tags.

    Returns (predicate, tags) where tags are all tag names in the expression.
    """
    tokens = _tokenize(expr)
    tags = set()
    pos = 0

    def peek():
        return tokens[pos] if pos < len(tokens) else None

    def take():
        nonlocal pos
        pos += 1
        return tokens[pos - 1]

    def or_expr():
        left = and_expr()
        while peek() == "||":
            take()
            right = and_expr()
            left = (lambda a, b: lambda env: a(env) or b(env))(left, right)
        return left

    def and_expr():
        left = unary()
        while peek() == "&&":
            take()
            right = unary()
            left = (lambda a, b: lambda env: a(env) and b(env))(left, right)
        return left

    def unary():
        tok = peek()
        if tok == "!":
            take()
            inner = unary()
            return lambda env: not inner(env)
        if tok == "(":
            take()
            inner = or_expr()
            if peek() != ")":
                raise ValueError(f"bad build constraint: {expr!r}")
            take()
            return inner
        if tok is None or tok in (")", "&&", "||"):
            raise ValueError(f"bad build constraint: {expr!r}")
        tag = take()
        tags.add(tag)
        return lambda env: tag in env

    predicate = or_expr()
    if pos != len(tokens):
        raise ValueError(f"bad build constraint: {expr!r}")
    return predicate, tags


def _plus_build_to_expr(lines):
    # "// +build a,!b c" means (a && !b) || c; several lines are ANDed
    clauses = []
    for line in lines:
        options = ["(" + " && ".join(opt.split(",")) + ")" for opt in line.split()]
        clauses.append("(" + " || ".join(options) + ")")
    return " && ".join(clauses)


def is_ignored(header: str) -> bool:
    """
    Whether the build constraint in `header` excludes the file on every
    platform, i.e. only holds with the `ignore` tag set.

    The `ignore` tag is never satisfied. Any other tag may or may not be, so
    the file counts as ignored only if no choice of the other tags satisfies
    the constraint. `//go:build` takes precedence over `// +build` lines.
    """
    go_build = _GO_BUILD.findall(header)
    if go_build:
        expr = go_build[0]
    else:
        plus_build = _PLUS_BUILD.findall(header)
        if not plus_build:
            return False
        expr = _plus_build_to_expr(plus_build)

    try:
        predicate, tags = parse_constraint(expr)
    except ValueError:
        logger.debug(f"can't evaluate build constraint {expr!r}")
        return False

    others = sorted(tags - {"ignore"})
    if len(others) > _MAX_CONSTRAINT_TAGS:
        return False
    for values in itertools.product((False, True), repeat=len(others)):
        env = {tag for tag, on in zip(others, values) if on}
        if predicate(env):
            return False
    return True


def get_package_name(directory: str = ".", exclude=()) -> str:
    """
    Find the package name of the Go files in `directory`.

    Works like go/build's ImportDir for the purpose of learning the name:
    files starting with '_' or '.', files tagged `ignore`, external test
    packages, `package documentation` and files without a package clause
    don't count.

    :param exclude: Paths to leave out, e.g. the file about to be generated.
    :raises PackageResolutionError: if no file or more than one package is found.
    """
    excluded = {os.path.realpath(p) for p in exclude if p}
    found = {}

    try:
        entries = sorted(os.listdir(directory))
    except OSError as e:
        raise PackageResolutionError(directory, f"can't read directory {directory}: {e.strerror}") from e

    for fn in entries:
        path = os.path.join(directory, fn)
        if not fn.endswith(".go") or fn.startswith(("_", ".")):
            continue
        if os.path.realpath(path) in excluded or not os.path.isfile(path):
            continue

        with open(path, "r", encoding="utf-8", errors="replace") as f:
            name, header = parse_package_clause(f.read())
        if name is None:
            logger.debug(f"skipping {fn}: no package clause")
            continue
        if is_ignored(header):
            continue
        if fn.endswith("_test.go") and name.endswith("_test"):
            continue
        # go/build leaves out package documentation
        if name == "documentation":
            continue

        found.setdefault(name, fn)

    if not found:
        raise PackageResolutionError(directory, f"no buildable Go source files in {os.path.abspath(directory)}")
    if len(found) > 1:
        (a, fa), (b, fb) = list(found.items())[:2]
        raise PackageResolutionError(
            directory,
            f"found packages {a} ({fa}) and {b} ({fb}) in {os.path.abspath(directory)}"
        )

    name = next(iter(found))
    logger.debug(f"resolved package name {name}")
    return name
