"""
Option definitions and the name table the parser resolves them from.

An option has a primary name and an optional alias. When both are given,
one of them must be a single character (the short name) and the other longer
(the long name). Both names map to the same `Option` instance in an
`OptionRegistry`, and results are always reported under the long name when
the option has one.
"""

import dataclasses
import logging
from typing import Iterator, Optional

logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class Option:
    """
    An immutable option definition.

    Example:
        Option("verbose", "v")                    # flag with a short alias
        Option("output", "o", requires_value=True)
        Option("m", requires_value=True)          # short-only option

    Raises:
        ValueError: If a name is empty, or if both names are short or both long.
    """

    name: str
    alias: Optional[str] = None
    requires_value: bool = False

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Option name is required")
        if self.alias is None:
            return
        if not self.alias:
            raise ValueError(f"Option alias for '{self.name}' must not be empty")
        if len(self.name) > 1 and len(self.alias) > 1:
            raise ValueError(
                f"Either '{self.name}' or '{self.alias}' must be a short (single character) name"
            )
        if len(self.name) == 1 and len(self.alias) == 1:
            raise ValueError(
                f"Either '{self.name}' or '{self.alias}' must be a long (multi-character) name"
            )

    @property
    def names(self) -> tuple[str, ...]:
        """All names this option answers to, primary name first."""
        if self.alias is None:
            return (self.name,)
        return (self.name, self.alias)

    @property
    def long_name(self) -> str:
        """The long name if there is one, otherwise the only name."""
        if self.alias is None or len(self.name) > 1:
            return self.name
        return self.alias


class OptionRegistry:
    """
    Maps every registered name to its `Option`.

    Registering a name that is already present replaces the previous entry.
    """

    def __init__(self) -> None:
        self._options: dict[str, Option] = {}

    def register(
        self, name: str, alias: Optional[str] = None, requires_value: bool = False
    ) -> Option:
        """
        Create an option and register it under each of its names.

        Args:
            name: The primary name.
            alias: An optional second name; one of the two must be a single character.
            requires_value: Whether the option takes a value.

        Returns:
            Option: The registered option.

        Raises:
            ValueError: If the names are invalid (see `Option`).
        """
        return self.add(Option(name, alias, requires_value))

    def add(self, option: Option) -> Option:
        """Register an existing `Option` under each of its names."""
        for n in option.names:
            if n in self._options:
                logger.debug("Replacing option registered as '%s'", n)
            self._options[n] = option
        return option

    def resolve(self, name: str) -> Optional[Option]:
        """Return the option registered under `name`, or None."""
        return self._options.get(name)

    def canonical_name(self, option: Option) -> str:
        """Return the name under which values for `option` are reported."""
        return option.long_name

    def options(self) -> list[Option]:
        """Distinct registered options in registration order."""
        distinct = {id(option): option for option in self._options.values()}
        return list(distinct.values())

    def __contains__(self, name: object) -> bool:
        return name in self._options

    def __len__(self) -> int:
        return len(self._options)

    def __iter__(self) -> Iterator[str]:
        return iter(self._options)
