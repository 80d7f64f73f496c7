# -*- coding: utf-8 -*-
""" Some generic laguage level utilities for internal use. """

from typing import (
    Callable,
    Dict,
    Hashable,
    Iterable,
    List,
    Optional,
    TypeVar,
)

T = TypeVar("T")
H = TypeVar("H", bound=Hashable)


def map_and_filter(
    func: Callable[[T], Optional[T]], iterable: Iterable[T]
) -> List[T]:
    """ Map an  iterable filtering out None.

    >>> map_and_filter(lambda x: None if x % 2 else x, range(10))
    [0, 2, 4, 6, 8]
    """
    return [m for m in (func(e) for e in iterable) if m is not None]


def first_by(iterable: Iterable[T], key: Callable[[T], H]) -> Dict[H, T]:
    """ Index an iterable by key, the first entry wins when multiple entries
    share the same key.

    >>> first_by(["ab", "ac", "bd"], lambda x: x[0])
    {'a': 'ab', 'b': 'bd'}
    """
    index = {}  # type: Dict[H, T]
    for entry in iterable:
        index.setdefault(key(entry), entry)
    return index


def last_by(iterable: Iterable[T], key: Callable[[T], H]) -> Dict[H, T]:
    """ Index an iterable by key, the last entry wins when multiple entries
    share the same key. Keys are ordered by first appearance.

    >>> last_by(["ab", "bd", "ac"], lambda x: x[0])
    {'a': 'ac', 'b': 'bd'}
    """
    index = {}  # type: Dict[H, T]
    for entry in iterable:
        index[key(entry)] = entry
    return index
