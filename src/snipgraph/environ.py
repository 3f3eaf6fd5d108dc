"""
Snippet environment variables.

The environment is the host-supplied, read-only mapping from variable name
to value (a string or a list of lines). Which names count as environment
variables is decided by a registry: the TextMate/VSCode standard set plus
whatever names a caller registers.
"""

import re
from collections.abc import Iterable, Iterator, Mapping

from snipgraph.core.types import EnvValue

# Variables the host is expected to provide, TextMate and VSCode naming
STANDARD_VARIABLES = frozenset(
    {
        # Selection and buffer
        "TM_SELECTED_TEXT",
        "TM_CURRENT_LINE",
        "TM_CURRENT_WORD",
        "TM_LINE_INDEX",
        "TM_LINE_NUMBER",
        "SELECT_RAW",
        "SELECT_DEDENT",
        "LS_SELECT_RAW",
        "LS_SELECT_DEDENT",
        "LS_TRIGGER",
        "POSTFIX_MATCH",
        "CLIPBOARD",
        # Files and workspace
        "TM_FILENAME",
        "TM_FILENAME_BASE",
        "TM_DIRECTORY",
        "TM_FILEPATH",
        "RELATIVE_FILEPATH",
        "WORKSPACE_NAME",
        "WORKSPACE_FOLDER",
        # Date and time
        "CURRENT_YEAR",
        "CURRENT_YEAR_SHORT",
        "CURRENT_MONTH",
        "CURRENT_MONTH_NAME",
        "CURRENT_MONTH_NAME_SHORT",
        "CURRENT_DATE",
        "CURRENT_DAY_NAME",
        "CURRENT_DAY_NAME_SHORT",
        "CURRENT_HOUR",
        "CURRENT_MINUTE",
        "CURRENT_SECOND",
        "CURRENT_SECONDS_UNIX",
        "CURRENT_TIMEZONE_OFFSET",
        # Random values
        "RANDOM",
        "RANDOM_HEX",
        "UUID",
        # Comments
        "LINE_COMMENT",
        "BLOCK_COMMENT_START",
        "BLOCK_COMMENT_END",
    }
)

# Regex captures of the trigger, LS_CAPTURE_1, LS_CAPTURE_2, ...
CAPTURE_VARIABLE_PATTERN = re.compile(r"LS_CAPTURE_\d+")


def is_valid_var(name: str, known: Iterable[str] = STANDARD_VARIABLES) -> bool:
    """
    Check whether a variable name is a recognized environment variable.

    Params:
        name: Variable name as written in the snippet
        known: Recognized names

    Returns:
        True if the name is known or is a trigger capture variable
    """
    return name in known or CAPTURE_VARIABLE_PATTERN.fullmatch(name) is not None


class Environment(Mapping[str, EnvValue]):
    """
    Read-only variable values for one live template instance.

    Absent names are valid and render as an empty line. Names given as
    values are registered automatically so they are recognized when the same
    environment seeds a conversion through ``to_node(..., env=env)``.
    """

    def __init__(
        self,
        values: Mapping[str, EnvValue] | None = None,
        *,
        extra_variables: Iterable[str] = (),
    ):
        self._values = dict(values or {})
        self._variables = set(STANDARD_VARIABLES) | set(extra_variables) | set(self._values)

    def __getitem__(self, name: str) -> EnvValue:
        return self._values[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"Environment({self._values!r})"

    @property
    def variables(self) -> frozenset[str]:
        return frozenset(self._variables)

    def register_variable(self, name: str) -> None:
        self._variables.add(name)

    def is_valid_var(self, name: str) -> bool:
        return is_valid_var(name, self._variables)
