# -*- coding: utf-8 -*-

from typing import Any, Optional, Union

from .exc import SchemaProblem
from .lang.ast import Document
from .sdl.directives import check_directives
from .sdl.registry import TypeDefinitionRegistry, build_registry
from .sdl.wiring import RuntimeWiring


def validate_sdl(
    document: Union[str, bytes, Document],
    wiring: Optional[RuntimeWiring] = None,
    **kwargs: Any
) -> TypeDefinitionRegistry:
    """
    Main entrypoint encapsulating schema definition processing from start to
    finish: parsing, registering definitions and checking directives.

    Args:
        document: SDL document, either as a string or already parsed.
        wiring: Custom scalars and argument coercers used when checking
            directive argument values.
        **kwargs: Keyword arguments passed to :func:`gql_sdl.lang.parse`
            when ``document`` is a string.

    Raises:
        :class:`~gql_sdl.exc.GraphQLSyntaxError`: If the document cannot be
            parsed.
        :class:`~gql_sdl.exc.SchemaProblem`: Wraps all the problems found in
            the document.

    Returns:
        Populated registry when the document is valid.
    """
    registry = build_registry(document, **kwargs)
    errors = check_directives(registry, wiring=wiring)
    if errors:
        raise SchemaProblem(errors)
    return registry
