# -*- coding: utf-8 -*-
""" Work with strings """

import bisect
import re
import sys
import textwrap
from typing import List, Sequence, Tuple, Union

LINE_SEPARATOR = re.compile(r"\r\n|[\n\r]")


def ensure_unicode(string: Union[str, bytes]) -> str:
    if isinstance(string, bytes):
        return string.decode("utf8")
    return string


def parse_block_string(raw_string: str) -> str:
    """ Parse a raw string according to the GraphQL spec's BlockStringValue()
    http://facebook.github.io/graphql/draft/#BlockStringValue() static
    algorithm. Similar to Coffeescript's block string, Python's inspect.cleandoc
    or Ruby's strip_heredoc.

    Compared to Python's default behaviour, this does not remove leading
    whitespace from the first line.

    >>> parse_block_string('''
    ...     Hello,
    ...       World!
    ...
    ...     Yours,
    ...       GraphQL.
    ... ''')
    'Hello,\\n  World!\\n\\nYours,\\n  GraphQL.'

    >>> parse_block_string(' simple ')
    ' simple '
    """
    lines = raw_string.splitlines()

    common_indent = sys.maxsize

    for line in lines[1:]:
        inner_len = len(line.lstrip())
        if inner_len:
            common_indent = min(common_indent, len(line) - inner_len)

    if common_indent < sys.maxsize:
        for i, line in enumerate(lines[1:]):
            lines[i + 1] = line[common_indent:]

    while lines and (not lines[0].lstrip()):
        lines.pop(0)

    while lines and (not lines[-1].lstrip()):
        lines.pop()

    return "\n".join(lines)


# Used to write indented SDL in tests.
def dedent(raw_string: str) -> str:
    return textwrap.dedent(raw_string).lstrip()


def index_to_loc(body: str, position: int) -> Tuple[int, int]:
    r""" Get the (line number, column number) tuple from a zero-indexed offset.

    Args:
        body (str): Source string
        position (int): 0-indexed position of the character

    Returns:
        Tuple[int, int]: (line number, column number)

    Raises:
        :py:class:`IndexError`: if ``position`` is out of bounds

    >>> index_to_loc("ab\ncd\ne", 0)
    (1, 1)

    >>> index_to_loc("ab\ncd\ne", 3)
    (2, 1)

    >>> index_to_loc("", 0)
    (1, 1)

    >>> index_to_loc("{", 1)
    (1, 2)

    >>> index_to_loc("", 42)
    Traceback (most recent call last):
        ...
    IndexError: 42
    """
    if not body and not position:
        return (1, 1)

    if position > len(body) or position < 0:
        raise IndexError(position)

    return offset_to_loc(line_starts(body), position)


def line_starts(body: str) -> List[int]:
    r""" Compute the offsets at which every line of a source string starts.

    >>> line_starts("ab\ncd\ne")
    [0, 3, 6]

    >>> line_starts("")
    [0]
    """
    starts = [0]
    for match in LINE_SEPARATOR.finditer(body):
        starts.append(match.end())
    return starts


def offset_to_loc(starts: Sequence[int], position: int) -> Tuple[int, int]:
    r""" Same as :func:`index_to_loc` working on pre-computed line offsets
    (see :func:`line_starts`), which is much cheaper when converting many
    positions from the same source.

    >>> offset_to_loc([0, 3, 6], 4)
    (2, 2)

    >>> offset_to_loc([0, 3, 6], 6)
    (3, 1)
    """
    line = bisect.bisect_right(starts, position) - 1
    return (line + 1, position - starts[line] + 1)


def highlight_location(body: str, position: int, delta: int = 2) -> str:
    """ Nicely format a highlited view of a position into a source string.

    Args:
        body (str): Source string
        position (int): 0-indexed position of the character
        delta (int): How many lines around the position should this conserve

    Returns:
        str: Formatted view
    """
    line, col = index_to_loc(body, position)
    line_index = line - 1
    lines = LINE_SEPARATOR.split(body)
    min_line = max(0, line_index - delta)
    max_line = min(line_index + delta, len(lines) - 1)
    pad_len = len(str(max_line + 1))

    def ws(len_):
        return " " * len_

    def lineno(l):
        m = l + 1
        return " " * (pad_len - len(str(m))) + str(m)

    output = ["(%d:%d):" % (line, col)]
    output.extend(
        [
            ws(2) + lineno(l) + ":" + lines[l]
            for l in range(min_line, line_index)
        ]
    )
    output.append(ws(2) + lineno(line_index) + ":" + lines[line_index])
    output.append(ws(2) + ws(pad_len + col) + "^")
    output.extend(
        [
            ws(2) + lineno(l) + ":" + lines[l]
            for l in range(line_index + 1, max_line + 1)
        ]
    )
    return "\n".join(output) + "\n"
