"""
SimpleCmdParser - a small, configurable command-line option scanner.

The parser makes one left-to-right pass over a list of argument strings and
sorts them into long options ("--name", "--name=value"), short options ("-n",
clusters such as "-abc", "-ovalue"), positional arguments and the stop
trigger ("--"). Problems in the arguments never raise: they are collected as
`ParseError` entries on the returned `ParseResults`.
"""

import logging
from typing import Iterable, Optional, Sequence, Union

from result import Err, Ok, Result

from .config import OptionStyle, ParserConfig, load_config_file
from .options import Option, OptionRegistry
from .results import OptionValue, ParseErrorKind, ParseResults

logger = logging.getLogger(__name__)

OptionSpec = Union[Option, str, tuple, list, dict]


class SimpleCmdParser:
    """
    A command-line parser driven by an option registry and a `ParserConfig`.

    Example:
        parser = (
            SimpleCmdParser()
            .add("verbose", "v")
            .add("output", "o", requires_value=True)
        )
        results = parser.parse(["-v", "--output=out.txt", "input.txt"])
        results["verbose"]  # True
        results["output"]   # "out.txt"
        results["@1"]       # "input.txt"

    Options can also be passed to the constructor, either as `Option`
    instances, bare names, `(names, requires_value)` tuples or
    `{"names": ..., "requires_value": ...}` dicts.
    """

    def __init__(
        self,
        options: Optional[Iterable[OptionSpec]] = None,
        config: Optional[ParserConfig] = None,
        style: Optional[Union[OptionStyle, str]] = None,
    ) -> None:
        """
        Args:
            options: Options to register up front.
            config: Scanner settings. Defaults to `ParserConfig()`.
            style: A named preset applied instead of `config`.

        Raises:
            ValueError: If both `config` and `style` are given, or an option is invalid.
        """
        if config is not None and style is not None:
            raise ValueError("Pass either 'config' or 'style', not both")

        self.registry: OptionRegistry = OptionRegistry()
        self.config: ParserConfig = config if config is not None else ParserConfig()
        if style is not None:
            self.set_style(style)

        if options:
            for item in options:
                self.add_option(_option_from_spec(item))

    @classmethod
    def from_config_file(cls, config_path: str) -> "SimpleCmdParser":
        """
        Build a parser from a YAML or JSON file.

        The file holds optional parser settings (including "style") and an
        "options" list:

            style: default
            cluster_short_options: false
            options:
              - names: [verbose, v]
              - names: output
                requires_value: true

        Raises:
            FileNotFoundError: If the file doesn't exist.
            ValueError: If the file or one of its entries is invalid.
            TypeError: If a setting has the wrong type.
        """
        data = load_config_file(config_path)
        option_specs = data.pop("options", None) or []
        if not isinstance(option_specs, list):
            raise ValueError("'options' must be a list of option entries")
        return cls(options=option_specs, config=ParserConfig.from_dict(data))

    def add(
        self, name: str, alias: Optional[str] = None, requires_value: bool = False
    ) -> "SimpleCmdParser":
        """
        Register an option and return the parser, so calls can be chained.

        Raises:
            ValueError: If both names are short or both are long.
        """
        option = self.registry.register(name, alias, requires_value)
        logger.debug("Registered option %s", option)
        return self

    def add_option(self, option: Option) -> "SimpleCmdParser":
        """Register a pre-built `Option` and return the parser."""
        self.registry.add(option)
        logger.debug("Registered option %s", option)
        return self

    def set_style(self, style: Union[OptionStyle, str]) -> "SimpleCmdParser":
        """Replace the configuration with a named preset and return the parser."""
        self.config = ParserConfig.for_style(style)
        logger.debug("Applied option style %s", OptionStyle.from_value(style).value)
        return self

    # Token classification. Subclasses may override these to change what
    # counts as an option.

    def is_long_option(self, arg: str) -> bool:
        prefix = self.config.long_prefix
        if prefix is None:
            return False
        return arg.startswith(prefix) and arg != prefix

    def is_short_option(self, arg: str) -> bool:
        prefix = self.config.short_prefix
        if prefix is None:
            return False
        return arg.startswith(prefix) and not self.is_long_option(arg) and arg != prefix

    def is_stop_trigger(self, arg: str) -> bool:
        return self.config.stop_trigger is not None and arg == self.config.stop_trigger

    def is_argument(self, arg: str) -> bool:
        """Whether `arg` can be taken as a value or positional argument."""
        return not (
            self.is_long_option(arg)
            or self.is_short_option(arg)
            or self.is_stop_trigger(arg)
        )

    def parse(self, args: Optional[Sequence[Optional[str]]]) -> ParseResults:
        """
        Parse a list of argument strings.

        Args:
            args: The arguments, without the program name. None is treated as
                an empty list; None entries are skipped.

        Returns:
            ParseResults: Positional arguments, option values and parse errors.

        Raises:
            ValueError, TypeError: If the parser configuration is invalid.
        """
        self.config.validate()
        results = ParseResults()
        if args is None:
            return results

        scanning = True
        i = 0
        while i < len(args):
            arg = args[i]
            if arg is None:
                i += 1
                continue

            if scanning and self.is_stop_trigger(arg):
                scanning = False
                logger.debug("Stop trigger at argument %d; option scanning disabled", i + 1)
            elif scanning and self.is_long_option(arg):
                i += self._parse_long_option(args, i, results)
            elif scanning and self.is_short_option(arg):
                i += self._parse_short_option(args, i, results)
            else:
                results._add_argument(arg, scanning)
                if scanning and self.config.stop_on_first_positional:
                    scanning = False
                    logger.debug(
                        "Positional argument at %d; option scanning disabled", i + 1
                    )
            i += 1

        logger.debug(
            "Parsed %d arguments: %d positional, %d options, %d errors",
            len(args),
            len(results.positional_arguments()),
            len(results.option_values()),
            len(results.errors()),
        )
        return results

    def safe_parse(
        self, args: Optional[Sequence[Optional[str]]]
    ) -> Result[ParseResults, str]:
        """
        Parse arguments and report problems as a value instead of a results object with errors.

        Returns:
            Result[ParseResults, str]:
                - Ok[ParseResults] if the arguments parsed without errors,
                - Err with a message listing every parse error otherwise.
        """
        results = self.parse(args)
        if results.has_errors():
            return Err("; ".join(str(e) for e in results.errors()))
        return Ok(results)

    def _take_next_value(
        self, args: Sequence[Optional[str]], i: int
    ) -> Optional[str]:
        """Return args[i + 1] if it can serve as an option value."""
        if i + 1 < len(args):
            candidate = args[i + 1]
            if candidate is not None and self.is_argument(candidate):
                return candidate
        return None

    def _parse_long_option(
        self, args: Sequence[Optional[str]], i: int, results: ParseResults
    ) -> int:
        """
        Handle the long option at args[i].

        Returns:
            int: The number of following arguments consumed as a value (0 or 1).
        """
        arg = args[i][len(self.config.long_prefix) :]
        separator = self.config.long_value_separator

        value: Optional[OptionValue] = None
        if separator is not None:
            name, _, inline = arg.partition(separator)
            # "--name=" carries no value
            if inline:
                value = inline
        else:
            name = arg

        option = self.registry.resolve(name)
        if option is None:
            results._add_error(ParseErrorKind.INVALID_OPTION, name)
            return 0

        consumed = 0
        if option.requires_value:
            if value is None:
                value = self._take_next_value(args, i)
                if value is None:
                    results._add_error(ParseErrorKind.MISSING_OPTION_VALUE, name)
                    return 0
                consumed = 1
        elif value is not None:
            results._add_error(ParseErrorKind.UNEXPECTED_OPTION_VALUE, name, value)
            return 0
        else:
            value = True

        results._add_option(self.registry.canonical_name(option), value)
        return consumed

    def _parse_short_option(
        self, args: Sequence[Optional[str]], i: int, results: ParseResults
    ) -> int:
        """
        Handle the short option (or cluster of short options) at args[i].

        Returns:
            int: The number of following arguments consumed as a value (0 or 1).
        """
        cluster = args[i][len(self.config.short_prefix) :]
        clustering = self.config.cluster_short_options
        stop = len(cluster) if clustering else 1

        for j in range(stop):
            name = cluster[j]
            option = self.registry.resolve(name)
            if option is None:
                results._add_error(ParseErrorKind.INVALID_OPTION, name)
                continue

            if option.requires_value:
                consumed = 0
                # The rest of the cluster is the value, as in "-ofile"
                if j < len(cluster) - 1:
                    value = cluster[j + 1 :]
                else:
                    value = self._take_next_value(args, i)
                    if value is None:
                        results._add_error(ParseErrorKind.MISSING_OPTION_VALUE, name)
                        return 0
                    consumed = 1
                results._add_option(self.registry.canonical_name(option), value)
                return consumed

            results._add_option(self.registry.canonical_name(option), True)
            if not clustering and len(cluster) > 1:
                results._add_error(ParseErrorKind.INVALID_OPTION, cluster[j + 1 :])

        return 0


def _option_from_spec(item: OptionSpec) -> Option:
    """
    Normalize one option entry into an `Option`.

    Each entry may be one of:
    - an `Option` instance
    - a name, e.g. "verbose"
    - (names, requires_value) where names is a str or a tuple/list of one or two names
    - {'names': name_or_list, 'requires_value': bool}
    """
    if isinstance(item, Option):
        return item
    if isinstance(item, str):
        return Option(item)

    if isinstance(item, dict) and "names" in item:
        unknown = sorted(set(item) - {"names", "requires_value"})
        if unknown:
            raise ValueError(f"Unknown option entry keys: {', '.join(unknown)}")
        names = item["names"]
        requires_value = item.get("requires_value", False)
    elif isinstance(item, (list, tuple)) and len(item) == 2:
        names, requires_value = item
    else:
        raise ValueError(
            "Each option must be an Option, a name, a (names, requires_value) tuple "
            "or a {'names': ..., 'requires_value': ...} dict"
        )

    if isinstance(names, str):
        names = (names,)
    if not isinstance(names, (list, tuple)):
        raise ValueError(f"Option names must be one or two strings, got {names!r}")
    names = tuple(names)
    if len(names) not in (1, 2) or not all(isinstance(n, str) for n in names):
        raise ValueError(f"Option names must be one or two strings, got {names!r}")
    if not isinstance(requires_value, bool):
        raise TypeError(
            f"Option '{names[0]}' expects bool for requires_value, "
            f"got {type(requires_value).__name__}: {requires_value!r}"
        )
    return Option(*names, requires_value=requires_value)
