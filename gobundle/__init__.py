"""Pack the contents of files as Go string variables or constants into a generated source file."""

from .build import Bundler
from .config import BundleConfig, load_config
from .errors import (
    BundleError,
    ConfigError,
    EmptyIdentifier,
    IdentifierError,
    PackageResolutionError,
    ReservedIdentifier,
)
from .naming import NamingStrategy, make_identifier

__version__ = "1.0.0"
