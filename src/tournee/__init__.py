"""Tournée - Affectation gloutonne de livreurs à des adresses."""

from tournee.config import ConfigError, ConfigFileError, TourneeError
from tournee.io_files import InputFileError
from tournee.matching.parsing import ParseError
from tournee.primes import InvalidArgumentError

__all__ = [
    "__version__",
    "TourneeError",
    "ConfigError",
    "ConfigFileError",
    "InputFileError",
    "InvalidArgumentError",
    "ParseError",
]

__version__ = "0.1.0"
