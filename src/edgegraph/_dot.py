"""Reader for a small subset of the DOT graph description language.

Only what is needed to produce edge lists is understood:

- the graph must be a ``digraph``; everything before its ``{`` is ignored
- statements are separated by ``;`` or newlines, one edge per statement
  (``"a" -> "b"``), double quotes around names are optional
- ``//`` comments run to the end of the statement
- reading stops at the statement containing ``}``

Attribute lists (``[label = "x"]``), subgraphs and edge chains are not
interpreted.
"""

import logging
import re
from pathlib import Path

from ._errors import DotFormatError

logger = logging.getLogger(__name__)

_STATEMENT_SEPARATOR = re.compile(r";|\n")
_COMMENT = re.compile(r"//.*")
_GRAPH_HEADER = re.compile(r".*\{")
_EDGE_OP = "->"


def parse_dot(text: str) -> tuple[list[str], list[str]]:
    """Parse DOT text into parallel source and destination lists.

    Args:
        text: DOT source of a directed graph.

    Returns:
        A ``(sources, destinations)`` tuple of vertex names, one entry per edge.

    Raises:
        DotFormatError: If the text contains no ``digraph``.

    Example:
        >>> parse_dot('digraph g { "a" -> "b"; b -> c }')
        (['a', 'b'], ['b', 'c'])

    """
    statements = iter(_STATEMENT_SEPARATOR.split(text))

    # Find the "digraph id {" header
    for statement in statements:
        statement = _COMMENT.sub("", statement, count=1)
        if "digraph" in statement:
            body = _GRAPH_HEADER.sub("", statement, count=1)
            break
    else:
        msg = "DOT graph must be directed (i.e., digraph)."
        raise DotFormatError(msg)

    sources: list[str] = []
    destinations: list[str] = []
    while True:
        body, closing, _ = body.partition("}")
        parts = body.split(_EDGE_OP)
        if len(parts) >= 2:
            src = parts[0].replace('"', "").strip()
            dst = parts[1].replace('"', "").strip()
            if src and dst:
                sources.append(src)
                destinations.append(dst)

        if closing:
            break

        body = next(statements, None)
        if body is None:
            logger.warning("DOT input ended before the closing '}'")
            break
        body = _COMMENT.sub("", body, count=1)

    logger.debug(f"Parsed {len(sources)} edges from DOT input")
    return sources, destinations


def read_dot(path: Path | str) -> tuple[list[str], list[str]]:
    """Read a DOT file into parallel source and destination lists.

    Args:
        path: Path to the DOT file.

    Returns:
        A ``(sources, destinations)`` tuple of vertex names, one entry per edge.

    Raises:
        FileNotFoundError: If the file does not exist.
        DotFormatError: If the file contains no ``digraph``.

    """
    path = Path(path)
    logger.debug(f"Reading DOT file: {path}")
    return parse_dot(path.read_text(encoding="utf-8"))
