"""
Parse results: positional arguments, option values and parse errors.
"""

import dataclasses
import enum
from typing import Optional, Union

OptionValue = Union[str, bool]

# Prefix of positional queries, e.g. "@2" for the second positional argument
POSITION_MARKER = "@"


class ParseErrorKind(enum.Enum):
    INVALID_OPTION = "invalid option"
    DUPLICATE_OPTION = "duplicate option"
    MISSING_OPTION_VALUE = "missing option value"
    UNEXPECTED_OPTION_VALUE = "unexpected option value"


@dataclasses.dataclass(frozen=True)
class ParseError:
    """
    A problem found in the user's arguments.

    `name` is the option name (or raw token) involved; `value` is only set for
    UNEXPECTED_OPTION_VALUE and holds the value that should not have been given.
    """

    kind: ParseErrorKind
    name: Optional[str] = None
    value: Optional[str] = None

    def __str__(self) -> str:
        if self.kind is ParseErrorKind.UNEXPECTED_OPTION_VALUE:
            return f"{self.kind.value}: '{self.name}' does not take a value (got {self.value!r})"
        return f"{self.kind.value}: '{self.name}'"


class ParseResults:
    """
    The outcome of a single `SimpleCmdParser.parse` call.

    Values are looked up with a query string: an option's canonical (long)
    name, or "@N" for the Nth positional argument.

    Example:
        results = parser.parse(["--output=a.txt", "input.txt"])
        results["output"]   # "a.txt"
        results["@1"]       # "input.txt"
        "verbose" in results  # False
    """

    def __init__(self) -> None:
        self._arguments: list[str] = []
        self._options: dict[str, OptionValue] = {}
        self._errors: list[ParseError] = []
        self._stop_position: int = 0

    def get(self, query: str) -> Optional[OptionValue]:
        """
        Return an option value or a positional argument.

        Args:
            query: An option name, or "@N" (N starting from 1) for a positional argument.

        Returns:
            The option value (a string, or True for flags), the positional
            argument, or None if it is not set or the query is out of range.
        """
        if query.startswith(POSITION_MARKER):
            index = query[len(POSITION_MARKER) :]
            if not index.isdecimal():
                return None
            position = int(index)
            if position < 1 or position > len(self._arguments):
                return None
            return self._arguments[position - 1]
        return self._options.get(query)

    def __getitem__(self, query: str) -> Optional[OptionValue]:
        return self.get(query)

    def __contains__(self, query: object) -> bool:
        return isinstance(query, str) and self.get(query) is not None

    def has_errors(self) -> bool:
        return bool(self._errors)

    def errors(self) -> tuple[ParseError, ...]:
        return tuple(self._errors)

    def positional_arguments(self) -> tuple[str, ...]:
        return tuple(self._arguments)

    def option_values(self) -> dict[str, OptionValue]:
        """A copy of the resolved options keyed by canonical name."""
        return dict(self._options)

    def stop_position(self) -> int:
        """
        Position (as used in "@N" queries) of the first positional argument
        collected after option scanning stopped, or 0 if there is none.
        """
        return self._stop_position

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParseResults):
            return NotImplemented
        return (
            self._arguments == other._arguments
            and self._options == other._options
            and self._errors == other._errors
            and self._stop_position == other._stop_position
        )

    def __repr__(self) -> str:
        return (
            f"ParseResults(arguments={self._arguments!r}, options={self._options!r}, "
            f"errors={self._errors!r}, stop_position={self._stop_position})"
        )

    # Mutators used by the parser while scanning

    def _add_option(self, name: str, value: OptionValue) -> None:
        if name in self._options:
            self._add_error(ParseErrorKind.DUPLICATE_OPTION, name)
        else:
            self._options[name] = value

    def _add_argument(self, value: str, scanning_options: bool) -> None:
        self._arguments.append(value)
        if not scanning_options and self._stop_position == 0:
            self._stop_position = len(self._arguments)

    def _add_error(
        self, kind: ParseErrorKind, name: Optional[str], value: Optional[str] = None
    ) -> None:
        self._errors.append(ParseError(kind, name, value))
