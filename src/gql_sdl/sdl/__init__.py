# -*- coding: utf-8 -*-
"""
Utilities to work with the GraphQL schema definition language (SDL): type
registry and directive checks.
"""

# flake8: noqa

from .directives import SchemaTypeDirectivesChecker, check_directives
from .registry import TypeDefinitionRegistry, build_registry
from .scalars import RegexType, ScalarType
from .values import ArgValueOfAllowedTypeChecker
from .wiring import RuntimeWiring

__all__ = (
    "TypeDefinitionRegistry",
    "build_registry",
    "SchemaTypeDirectivesChecker",
    "check_directives",
    "ArgValueOfAllowedTypeChecker",
    "RuntimeWiring",
    "ScalarType",
    "RegexType",
)
