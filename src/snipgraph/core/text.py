"""Line-list helpers shared by the compiler and the renderer."""

from snipgraph.core.types import EnvValue, Lines


def split_lines(text: str) -> Lines:
    """Split text on newlines, keeping empty trailing segments."""
    return text.split("\n")


def join_lines(lines: Lines) -> str:
    return "\n".join(lines)


def to_lines(value: EnvValue | None) -> Lines:
    """
    Coerce an environment or function value into a non-empty line list.

    An empty sequence becomes a single empty line so a rendered field never
    collapses to zero width.

    Params:
        value: String, sequence of lines, or None

    Returns:
        List with at least one line
    """
    if value is None:
        return [""]
    if isinstance(value, str):
        return split_lines(value)
    lines = list(value)
    return lines if lines else [""]


def concat_lines(chunks: list[Lines]) -> Lines:
    """
    Concatenate rendered chunks the way adjacent nodes appear in a buffer.

    The last line of each chunk continues on the first line of the next one.

    Params:
        chunks: Rendered line lists in document order

    Returns:
        Combined line list
    """
    result: Lines = [""]
    for chunk in chunks:
        if not chunk:
            continue
        result[-1] += chunk[0]
        result.extend(chunk[1:])
    return result
