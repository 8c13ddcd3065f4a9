"""
simplecmd - a small, configurable command-line option scanner.

This package parses a list of argument strings against a set of registered
options in a single pass. Long options, short option clusters, inline and
separate option values, a stop trigger and positional arguments are all
supported, and problems in the arguments are returned as data rather than
raised. Parser settings can come from named styles or YAML/JSON files.
"""

from .config import OptionStyle, ParserConfig, load_config_file
from .options import Option, OptionRegistry
from .parser import SimpleCmdParser
from .results import ParseError, ParseErrorKind, ParseResults

__version__ = "1.0.0"
__all__ = [
    "SimpleCmdParser",
    "Option",
    "OptionRegistry",
    "OptionStyle",
    "ParserConfig",
    "ParseError",
    "ParseErrorKind",
    "ParseResults",
    "load_config_file",
]
