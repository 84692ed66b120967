# build.py

import logging

from . import utils
from .config import BundleConfig
from .emitter import Emitter, open_output
from .file_handling import escape_file
from .gopackage import get_package_name

logger = utils.CustomAdapter(logging.getLogger(__name__))


class Bundler:
    """Holds the settings for the bundling process."""

    def __init__(self, config: BundleConfig = None):
        self.config = config or BundleConfig()

    def resolve_package_name(self) -> str:
        if self.config.pkg_name:
            return self.config.pkg_name
        return get_package_name(".", exclude=[self.config.out_file])

    def process_files(self, *files: str) -> None:
        """
        Include each of the given files into the output, in order.

        The first error aborts the run. Whatever was written before it stays
        in the output, which then must not be used.
        """
        config = self.config
        with open_output(config.out_file) as out:
            emitter = Emitter(out, config.decl)
            emitter.write_header(self.resolve_package_name())
            emitter.open_block()

            for fn in files:
                if config.verbose:
                    logger.info(f"processing file: {fn}")
                name = config.naming.identifier(fn, config.prefix)
                emitter.write_entry(fn, name, escape_file(fn))

            emitter.close_block()
