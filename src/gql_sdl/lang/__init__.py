# -*- coding: utf-8 -*-
"""
The :mod:`gql_sdl.lang` module is responsible for parsing and operating on
GraphQL schema definition documents.

You can refer to the `relevant part of the GraphQL specification
<https://graphql.github.io/graphql-spec/June2018/#sec-Type-System>`_ for more
information.
"""

# flake8: noqa

from .ast import NodeBuilder, SourceLocation, unwrap_type
from .lexer import Lexer
from .parser import Parser, parse, parse_type, parse_value
from .visitor import ASTVisitor, DispatchingVisitor, SkipNode

__all__ = (
    "parse",
    "parse_type",
    "parse_value",
    "Parser",
    "Lexer",
    "NodeBuilder",
    "SourceLocation",
    "unwrap_type",
    "ASTVisitor",
    "DispatchingVisitor",
    "SkipNode",
)
