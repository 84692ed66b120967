# errors.py


class BundleError(Exception):
    """Base class for errors that abort a bundling run."""


class ConfigError(BundleError):
    """Raised when the run configuration does not validate."""


class IdentifierError(BundleError, ValueError):
    """Raised when no usable Go identifier can be derived from a file name."""


class ReservedIdentifier(IdentifierError):

    def __init__(self, name):
        self.name = name
        super().__init__(f"reserved keyword: {name!r} can't be used as identifier")


class EmptyIdentifier(IdentifierError):

    def __init__(self, raw_name):
        self.raw_name = raw_name
        super().__init__(f"no valid identifier characters in {raw_name!r}")


class PackageResolutionError(BundleError):

    def __init__(self, directory, message):
        self.directory = directory
        super().__init__(message)
