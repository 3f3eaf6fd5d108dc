"""
Default transform applier.

Turns a ``TransformSpec`` (``/pattern/format/options``) into a function over
line lists. The pattern is a Python regular expression matched against the
newline-joined text; the format string supports TextMate group references
(``$1``, ``${1}``), case modifiers (``${1:/upcase}``) and conditional
insertions (``${1:+if}``, ``${1:-else}``, ``${1:else}``, ``${1:?if:else}``).

Hosts with their own transform engine plug it in through
``CompilerConfig.transform_factory`` instead.
"""

import re

from attrs import frozen

from snipgraph.core.text import join_lines, split_lines
from snipgraph.core.types import Lines, LineTransform
from snipgraph.exceptions import TransformError
from snipgraph.syntax.nodes import TransformSpec

_OPTION_FLAGS = {"i": re.IGNORECASE, "m": re.MULTILINE, "s": re.DOTALL}

_DIGITS = re.compile(r"\d+")
_BRACED_BODY = re.compile(r"(\d+)(?::(.*))?", re.DOTALL)
_WORD_SPLIT = re.compile(r"[^0-9A-Za-z]+")

_ESCAPES = {"n": "\n", "t": "\t"}


def _pascalcase(text: str) -> str:
    return "".join(word[:1].upper() + word[1:] for word in _WORD_SPLIT.split(text) if word)


def _camelcase(text: str) -> str:
    pascal = _pascalcase(text)
    return pascal[:1].lower() + pascal[1:]


_CASE_FUNCTIONS = {
    "upcase": str.upper,
    "downcase": str.lower,
    "capitalize": lambda text: text[:1].upper() + text[1:],
    "pascalcase": _pascalcase,
    "camelcase": _camelcase,
}


@frozen
class GroupRef:
    """``$n`` - insert capture group ``n``."""

    index: int


@frozen
class CaseRef:
    """``${n:/upcase}`` - insert capture group ``n`` with a case change."""

    index: int
    case: str


@frozen
class Conditional:
    """``${n:?if:else}`` - insert text depending on whether group ``n`` matched."""

    index: int
    if_text: str = ""
    else_text: str = ""


FormatToken = str | GroupRef | CaseRef | Conditional


def identity(lines: Lines) -> Lines:
    return lines


def _unescape(text: str) -> str:
    chars = []
    i = 0
    while i < len(text):
        if text[i] == "\\" and i + 1 < len(text):
            chars.append(_ESCAPES.get(text[i + 1], text[i + 1]))
            i += 2
        else:
            chars.append(text[i])
            i += 1
    return "".join(chars)


def _find_closing_brace(text: str, start: int) -> int:
    """Index of the ``}`` closing a ``${`` whose body begins at ``start``, or -1."""
    depth = 0
    i = start
    while i < len(text):
        char = text[i]
        if char == "\\":
            i += 2
            continue
        if char == "{":
            depth += 1
        elif char == "}":
            if depth == 0:
                return i
            depth -= 1
        i += 1
    return -1


def _split_unescaped(text: str, separator: str) -> tuple[str, str]:
    i = 0
    while i < len(text):
        if text[i] == "\\":
            i += 2
            continue
        if text[i] == separator:
            return text[:i], text[i + 1 :]
        i += 1
    return text, ""


def _parse_braced(body: str, spec_pattern: str) -> FormatToken:
    match = _BRACED_BODY.fullmatch(body)
    if match is None:
        raise TransformError(spec_pattern, f"invalid format reference '${{{body}}}'")

    index = int(match.group(1))
    rest = match.group(2)
    if rest is None:
        return GroupRef(index)
    if rest.startswith("/"):
        case = rest[1:]
        if case not in _CASE_FUNCTIONS:
            raise TransformError(spec_pattern, f"unknown case modifier '{case}'")
        return CaseRef(index, case)
    if rest.startswith("+"):
        return Conditional(index, if_text=_unescape(rest[1:]))
    if rest.startswith("?"):
        if_text, else_text = _split_unescaped(rest[1:], ":")
        return Conditional(index, _unescape(if_text), _unescape(else_text))
    if rest.startswith("-"):
        rest = rest[1:]
    return Conditional(index, else_text=_unescape(rest))


def parse_format(format_string: str, spec_pattern: str = "") -> list[FormatToken]:
    """
    Parse a TextMate replacement format into literal and reference tokens.

    Params:
        format_string: Format part of a transform
        spec_pattern: Pattern of the owning transform, used in error messages

    Returns:
        Tokens in order; adjacent literal characters are merged

    Raises:
        TransformError: If a ``${`` reference is malformed or unterminated
    """
    tokens: list[FormatToken] = []
    literal: list[str] = []

    def flush() -> None:
        if literal:
            tokens.append("".join(literal))
            literal.clear()

    i = 0
    while i < len(format_string):
        char = format_string[i]
        if char == "\\" and i + 1 < len(format_string):
            literal.append(_ESCAPES.get(format_string[i + 1], format_string[i + 1]))
            i += 2
            continue
        if char == "$":
            digits = _DIGITS.match(format_string, i + 1)
            if digits:
                flush()
                tokens.append(GroupRef(int(digits.group())))
                i = digits.end()
                continue
            if format_string.startswith("{", i + 1):
                end = _find_closing_brace(format_string, i + 2)
                if end < 0:
                    raise TransformError(
                        spec_pattern, f"unterminated '${{' in format '{format_string}'"
                    )
                flush()
                tokens.append(_parse_braced(format_string[i + 2 : end], spec_pattern))
                i = end + 1
                continue
        literal.append(char)
        i += 1

    flush()
    return tokens


def _expand(token: FormatToken, match: re.Match) -> str:
    if isinstance(token, str):
        return token
    group = match.group(token.index)
    if isinstance(token, GroupRef):
        return group or ""
    if isinstance(token, CaseRef):
        return _CASE_FUNCTIONS[token.case](group or "")
    return token.if_text if group else token.else_text


def make_transform(spec: TransformSpec) -> LineTransform:
    """
    Build a line transform from a transform description.

    Pattern and format are validated immediately; errors raised while the
    returned function runs (for example a reference to a group the pattern
    does not define) propagate to the caller.

    Params:
        spec: Transform description from the syntax tree

    Returns:
        Function mapping resolved lines to transformed lines

    Raises:
        TransformError: If the pattern, options or format are invalid
    """
    flags = 0
    for option in spec.options:
        if option in _OPTION_FLAGS:
            flags |= _OPTION_FLAGS[option]
        elif option != "g":
            raise TransformError(spec.pattern, f"unknown option '{option}'")

    try:
        regex = re.compile(spec.pattern, flags)
    except re.error as e:
        raise TransformError(spec.pattern, str(e)) from e

    tokens = parse_format(spec.format, spec.pattern)
    count = 0 if "g" in spec.options else 1

    def replace(match: re.Match) -> str:
        return "".join(_expand(token, match) for token in tokens)

    def transform(lines: Lines) -> Lines:
        return split_lines(regex.sub(replace, join_lines(lines), count=count))

    return transform
