# -*- coding: utf-8 -*-
"""
gql_sdl

gql_sdl parses `GraphQL <https://graphql.org/>`_ schema definition documents
(SDL) and checks the directives they use, for Python 3.6+.

The main :mod:`gql_sdl` package provides the end to end entrypoint while the
relevant submodules give access to the parser, the AST and the type registry.
"""

from .version import __version__  # isort:skip

from . import lang, sdl  # noqa: F401
from ._validate import validate_sdl
from .exc import SchemaProblem
from .lang import parse
from .sdl import RuntimeWiring, build_registry, check_directives

__all__ = (
    "__version__",
    "parse",
    "build_registry",
    "check_directives",
    "validate_sdl",
    "RuntimeWiring",
    "SchemaProblem",
)
