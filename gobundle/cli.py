# cli.py

import argparse
import logging
import sys

from . import utils
from .build import Bundler
from .config import (
    CONF_CONST,
    CONF_NAMING,
    CONF_OUT,
    CONF_PKG,
    CONF_PREFIX,
    CONF_VERBOSE,
    NAMING_STRATEGIES,
    load_config,
)
from .errors import BundleError

logger = utils.CustomAdapter(logging.getLogger(__name__))


def build_parser(prog=None):
    parser = argparse.ArgumentParser(
        prog=prog,
        usage="%(prog)s <file> <file>...",
        description="Pack the contents of files as variables or constants into a generated Go source file.",
    )
    parser.add_argument("-out", "--out", dest=CONF_OUT, default="", metavar="FILE",
                        help="file name to write generated code to (STDOUT if not provided)")
    parser.add_argument("-prefix", "--prefix", dest=CONF_PREFIX, default="",
                        help="prefix for generated variables")
    parser.add_argument("-const", "--const", dest=CONF_CONST, action="store_true",
                        help="use const instead of var")
    parser.add_argument("-pkg", "--pkg", dest=CONF_PKG, default="",
                        help="override package name of generated file")
    parser.add_argument("-naming", "--naming", dest=CONF_NAMING, choices=NAMING_STRATEGIES, default="basename",
                        help="derive names from the file name without extension (basename) or with it (filename)")
    parser.add_argument("-v", "--verbose", dest=CONF_VERBOSE, action="store_true",
                        help="verbose; print name of files as they are processed")
    parser.add_argument("files", nargs="*", metavar="file", help="files to include")
    return parser


def main(argv=None) -> int:
    parser = build_parser(prog="gobundle")
    args = parser.parse_args(argv)
    raw = vars(args)
    files = raw.pop("files")

    utils.setup_logging(raw[CONF_VERBOSE])

    try:
        bundler = Bundler(load_config(raw))
        bundler.process_files(*files)
    except (BundleError, OSError) as e:
        logger.error(f"error: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
