# -*- coding: utf-8 -*-
"""
All the valid source tokens found in GraphQL documents (as described in `this
document <http://facebook.github.io/graphql/June2018/#sec-Source-Text>`_) are
encoded as instances of :class:`Token`.

On top of their value and position, tokens carry the ``#`` comments and the
raw ignored characters (whitespace, commas, comments) which precede them in
the source so that the parser can attach them to the nodes it builds.
"""

from typing import Any, Sequence, Tuple


class Token:
    """ Base token class.

    All token instances can be compared by simple equality. Comments and
    ignored characters are not taken into account when comparing.

    Attributes:
        start (int): Starting position for this token (0-indexed)
        end (int): End position for this token (0-indexed)
        value (str): Characters making up this token
        comments (Tuple[str, ...]): Text of the comment lines directly
            preceding this token (without the leading ``#``)
        ignored (str): Raw ignored characters preceding this token

    Args:
        start (int): Starting position for this token (0-indexed)
        end (int): End position for this token (0-indexed)
        value (str): Characters making up this token
        comments: Comment lines directly preceding this token
        ignored: Raw ignored characters preceding this token
    """

    __slots__ = "start", "end", "value", "comments", "ignored"

    def __init__(
        self,
        start: int,
        end: int,
        value: str,
        comments: Sequence[str] = (),
        ignored: str = "",
    ):
        self.start = start
        self.end = end
        self.value = value
        self.comments = tuple(comments)  # type: Tuple[str, ...]
        self.ignored = ignored

    def __repr__(self) -> str:
        return "<Token.%s: value='%s' at (%d, %d)>" % (
            self.__class__.__name__,
            self,
            self.start,
            self.end,
        )

    def __str__(self) -> str:
        return str(self.value)

    def __eq__(self, rhs: Any) -> bool:
        return (
            self.__class__ is rhs.__class__
            and self.value == rhs.value
            and self.start == rhs.start
            and self.end == rhs.end
        )


class ConstToken(Token):
    """
    Encode tokens with contants values. Should not be used directly.
    """

    value = ""

    def __init__(
        self,
        start: int,
        end: int,
        comments: Sequence[str] = (),
        ignored: str = "",
    ):
        self.start = start
        self.end = end
        self.comments = tuple(comments)
        self.ignored = ignored


class SOF(ConstToken):
    value = "<SOF>"


class EOF(ConstToken):
    value = "<EOF>"


class ExclamationMark(ConstToken):
    value = "!"


class Dollar(ConstToken):
    value = "$"


class ParenOpen(ConstToken):
    value = "("


class ParenClose(ConstToken):
    value = ")"


class BracketOpen(ConstToken):
    value = "["


class BracketClose(ConstToken):
    value = "]"


class CurlyOpen(ConstToken):
    value = "{"


class CurlyClose(ConstToken):
    value = "}"


class Colon(ConstToken):
    value = ":"


class Equals(ConstToken):
    value = "="


class At(ConstToken):
    value = "@"


class Pipe(ConstToken):
    value = "|"


class Ampersand(ConstToken):
    value = "&"


class Ellip(ConstToken):
    value = "..."


class Integer(Token):
    pass


class Float(Token):
    pass


class Name(Token):
    pass


class String(Token):
    pass


class BlockString(Token):
    pass


__all__ = (
    "Token",
    "SOF",
    "EOF",
    "ExclamationMark",
    "Dollar",
    "ParenOpen",
    "ParenClose",
    "BracketOpen",
    "BracketClose",
    "CurlyOpen",
    "CurlyClose",
    "Colon",
    "Equals",
    "At",
    "Pipe",
    "Ampersand",
    "Ellip",
    "Integer",
    "Float",
    "Name",
    "String",
    "BlockString",
)
