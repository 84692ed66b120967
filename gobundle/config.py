# config.py

from dataclasses import dataclass

import esphome.config_validation as cv

from .errors import ConfigError
from .naming import NamingStrategy, is_identifier

# Configuration Constants
CONF_OUT = "out"
CONF_PKG = "pkg"
CONF_PREFIX = "prefix"
CONF_CONST = "const"
CONF_NAMING = "naming"
CONF_VERBOSE = "verbose"

NAMING_STRATEGIES = [s.value for s in NamingStrategy]


def go_package_name(value):
    """Empty (auto-detect) or a valid Go identifier other than the blank identifier."""
    value = cv.string(value)
    if value and (value == "_" or not is_identifier(value)):
        raise cv.Invalid(f"'{value}' is not a valid Go package name")
    return value


CONFIG_SCHEMA = cv.Schema({
    cv.Optional(CONF_OUT, default=""): cv.string,
    cv.Optional(CONF_PKG, default=""): go_package_name,
    cv.Optional(CONF_PREFIX, default=""): cv.string,
    cv.Optional(CONF_CONST, default=False): cv.boolean,
    cv.Optional(CONF_NAMING, default=NamingStrategy.STRIP_EXTENSION.value): cv.one_of(*NAMING_STRATEGIES, lower=True),
    cv.Optional(CONF_VERBOSE, default=False): cv.boolean,
})


@dataclass(frozen=True)
class BundleConfig:
    """Settings of one bundling run."""

    out_file: str = ""
    pkg_name: str = ""
    prefix: str = ""
    decl: str = "var"
    naming: NamingStrategy = NamingStrategy.STRIP_EXTENSION
    verbose: bool = False


def load_config(raw: dict) -> BundleConfig:
    """
    Validate a raw settings mapping (as collected from the command line) and
    turn it into a BundleConfig.

    :raises ConfigError: if a value doesn't validate.
    """
    try:
        config = CONFIG_SCHEMA(raw)
    except cv.Invalid as e:
        raise ConfigError(f"invalid configuration: {e}") from e

    return BundleConfig(
        out_file=config[CONF_OUT],
        pkg_name=config[CONF_PKG],
        prefix=config[CONF_PREFIX],
        decl="const" if config[CONF_CONST] else "var",
        naming=NamingStrategy(config[CONF_NAMING]),
        verbose=config[CONF_VERBOSE],
    )
