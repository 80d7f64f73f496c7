# -*- coding: utf-8 -*-
"""
Collect the definitions of one or more schema documents in a
:class:`TypeDefinitionRegistry`.

The registry is populated through :meth:`TypeDefinitionRegistry.add` (or
:func:`build_registry`) before any semantic check is run and is then treated
as read-only.
"""

import logging
from typing import (
    Dict,
    Iterable,
    List,
    Optional,
    Set,
    Type,
    TypeVar,
    Union,
    cast,
)

from ..exc import (
    DirectiveRedefinitionError,
    SchemaProblem,
    SchemaRedefinitionError,
    SDLError,
    TypeRedefinitionError,
)
from ..lang import ast as _ast
from ..lang.parser import parse
from ..lang.visitor import DispatchingVisitor, SkipNode
from .scalars import SPECIFIED_SCALAR_TYPES

logger = logging.getLogger(__name__)

TTypeDefinition = TypeVar("TTypeDefinition", bound=_ast.TypeDefinition)

SPECIFIED_DIRECTIVES_SDL = '''
"Directs the executor to skip this field or fragment when the `if` argument \
is true."
directive @skip(
    "Skipped when true."
    if: Boolean!
) on FIELD | FRAGMENT_SPREAD | INLINE_FRAGMENT

"Directs the executor to include this field or fragment only when the `if` \
argument is true."
directive @include(
    "Included when true."
    if: Boolean!
) on FIELD | FRAGMENT_SPREAD | INLINE_FRAGMENT

"Marks an element of a GraphQL schema as no longer supported."
directive @deprecated(
    """
    Explains why this element was deprecated, usually also including a
    suggestion for how to access supported similar data. Formatted in
    [Markdown](https://daringfireball.net/projects/markdown/).
    """
    reason: String = "No longer supported"
) on FIELD_DEFINITION | ENUM_VALUE

"Exposes a URL that specifies the behaviour of this scalar."
directive @specifiedBy(
    "The URL that specifies the behaviour of this scalar."
    url: String!
) on SCALAR
'''

# These are the directives which are part of the GraphQL specification and
# will always be available in any compliant schema.
SPECIFIED_DIRECTIVES = tuple(
    cast(_ast.DirectiveDefinition, definition)
    for definition in parse(
        SPECIFIED_DIRECTIVES_SDL, source_name="<specified directives>"
    ).definitions
)

EXTENSION_KINDS = {
    _ast.ObjectTypeDefinition: _ast.ObjectTypeExtension,
    _ast.InterfaceTypeDefinition: _ast.InterfaceTypeExtension,
    _ast.UnionTypeDefinition: _ast.UnionTypeExtension,
    _ast.EnumTypeDefinition: _ast.EnumTypeExtension,
    _ast.ScalarTypeDefinition: _ast.ScalarTypeExtension,
    _ast.InputObjectTypeDefinition: _ast.InputObjectTypeExtension,
}

INPUT_TYPE_DEFINITIONS = (
    _ast.ScalarTypeDefinition,
    _ast.EnumTypeDefinition,
    _ast.InputObjectTypeDefinition,
)


class TypeDefinitionRegistry:
    """
    Name indexed collection of type system definitions.

    Built-in scalars (``Int``, ``Float``, ``String``, ``Boolean``, ``ID``)
    and built-in directives (``@skip``, ``@include``, ``@deprecated``,
    ``@specifiedBy``) are always available. Declaring a type or directive
    with the same name as a built-in replaces it; declaring it again is a
    redefinition error.

    All lookups return definitions in declaration order.
    """

    def __init__(self):
        self._types = {}  # type: Dict[str, _ast.TypeDefinition]
        self._scalars = {
            scalar.name: scalar.definition for scalar in SPECIFIED_SCALAR_TYPES
        }  # type: Dict[str, _ast.ScalarTypeDefinition]
        self._directives = {
            directive.name: directive for directive in SPECIFIED_DIRECTIVES
        }  # type: Dict[str, _ast.DirectiveDefinition]
        self._extensions = {
            ext_kind: {} for ext_kind in EXTENSION_KINDS.values()
        }  # type: Dict[Type[_ast.TypeExtension], Dict[str, List[_ast.TypeExtension]]]
        self._schema = None  # type: Optional[_ast.SchemaDefinition]
        self._schema_extensions = []  # type: List[_ast.SchemaExtension]

        # Names declared in user documents, built-ins are not in here.
        self._declared_types = set()  # type: Set[str]
        self._declared_directives = set()  # type: Set[str]
        self._definitions = []  # type: List[_ast.TypeSystemDefinition]

    def __repr__(self) -> str:
        return "<%s types=%d scalars=%d directives=%d>" % (
            self.__class__.__name__,
            len(self._types),
            len(self._scalars),
            len(self._directives),
        )

    def add(self, definition: _ast.TypeSystemDefinition) -> None:
        """
        Add a single definition or extension to the registry.

        Raises:
            TypeRedefinitionError: If a type with the same name was already
                declared.
            DirectiveRedefinitionError: If a directive with the same name was
                already declared.
            SchemaRedefinitionError: If a schema definition was already
                declared.
            TypeError: If ``definition`` is not a type system definition.
        """
        if isinstance(definition, _ast.TypeDefinition):
            self._add_type(definition)
        elif isinstance(definition, _ast.TypeExtension):
            self._extensions[type(definition)].setdefault(
                definition.name, []
            ).append(definition)
        elif isinstance(definition, _ast.SchemaDefinition):
            if self._schema is not None:
                raise SchemaRedefinitionError(definition, self._schema)
            self._schema = definition
        elif isinstance(definition, _ast.SchemaExtension):
            self._schema_extensions.append(definition)
        elif isinstance(definition, _ast.DirectiveDefinition):
            name = definition.name
            if name in self._declared_directives:
                raise DirectiveRedefinitionError(
                    definition, self._directives[name]
                )
            self._declared_directives.add(name)
            self._directives[name] = definition
        else:
            raise TypeError(
                "Expected a type system definition but got %s"
                % type(definition).__name__
            )

        self._definitions.append(definition)

    def _add_type(self, definition: _ast.TypeDefinition) -> None:
        name = definition.name
        if name in self._declared_types:
            existing = self.get_type(name)
            assert existing is not None
            raise TypeRedefinitionError(definition, existing)

        self._declared_types.add(name)
        if isinstance(definition, _ast.ScalarTypeDefinition):
            self._scalars[name] = definition
        else:
            # A non scalar type replaces a built-in scalar of the same name.
            self._scalars.pop(name, None)
            self._types[name] = definition

    def add_all(
        self, definitions: Iterable[_ast.TypeSystemDefinition]
    ) -> List[SDLError]:
        """
        Add all definitions, collecting redefinition errors instead of
        stopping at the first one.

        Returns:
            Errors in the order they were encountered.
        """
        errors = []  # type: List[SDLError]
        for definition in definitions:
            try:
                self.add(definition)
            except SDLError as err:
                logger.debug("Ignoring invalid definition: %s", err)
                errors.append(err)
        return errors

    def merge(self, other: "TypeDefinitionRegistry") -> None:
        """
        Add all the definitions declared in another registry (built-ins
        excluded) to this one.

        Raises:
            SchemaProblem: Wraps all redefinition errors.
        """
        errors = self.add_all(other._definitions)
        if errors:
            raise SchemaProblem(errors)

    def has_type(self, name: str) -> bool:
        return name in self._types or name in self._scalars

    def get_type(self, name: str) -> Optional[_ast.TypeDefinition]:
        """
        Find a type definition (scalars included) by name.
        """
        try:
            return self._types[name]
        except KeyError:
            return self._scalars.get(name)

    def get_types(self, kind: Type[TTypeDefinition]) -> List[TTypeDefinition]:
        """
        All non scalar type definitions of a given class. Use
        :meth:`scalars` to access scalar definitions.
        """
        return [
            cast(TTypeDefinition, definition)
            for definition in self._types.values()
            if isinstance(definition, kind)
        ]

    def types(self) -> Dict[str, _ast.TypeDefinition]:
        """ All non scalar type definitions. """
        return dict(self._types)

    def scalars(self) -> Dict[str, _ast.ScalarTypeDefinition]:
        """ Built-in and declared scalar definitions. """
        return dict(self._scalars)

    def is_input_type(self, name: str) -> bool:
        return isinstance(self.get_type(name), INPUT_TYPE_DEFINITIONS)

    def get_directive_definition(
        self, name: str
    ) -> Optional[_ast.DirectiveDefinition]:
        return self._directives.get(name)

    def directive_definitions(self) -> Dict[str, _ast.DirectiveDefinition]:
        """ Built-in and declared directive definitions. """
        return dict(self._directives)

    def schema_definition(self) -> Optional[_ast.SchemaDefinition]:
        return self._schema

    def schema_extensions(self) -> List[_ast.SchemaExtension]:
        return list(self._schema_extensions)

    def _extensions_of(
        self, kind: Type[_ast.TypeExtension]
    ) -> Dict[str, List[_ast.TypeExtension]]:
        return {
            name: list(extensions)
            for name, extensions in self._extensions[kind].items()
        }

    def object_type_extensions(self) -> Dict[str, List[_ast.TypeExtension]]:
        return self._extensions_of(_ast.ObjectTypeExtension)

    def interface_type_extensions(
        self,
    ) -> Dict[str, List[_ast.TypeExtension]]:
        return self._extensions_of(_ast.InterfaceTypeExtension)

    def union_type_extensions(self) -> Dict[str, List[_ast.TypeExtension]]:
        return self._extensions_of(_ast.UnionTypeExtension)

    def enum_type_extensions(self) -> Dict[str, List[_ast.TypeExtension]]:
        return self._extensions_of(_ast.EnumTypeExtension)

    def scalar_type_extensions(self) -> Dict[str, List[_ast.TypeExtension]]:
        return self._extensions_of(_ast.ScalarTypeExtension)

    def input_object_type_extensions(
        self,
    ) -> Dict[str, List[_ast.TypeExtension]]:
        return self._extensions_of(_ast.InputObjectTypeExtension)

    def extended_type(self, name: str) -> Optional[_ast.TypeDefinition]:
        """
        Get a type definition with the directives and members of all of its
        extensions appended, in declaration order.

        This returns a new node, the registry is not modified.
        """
        base = self.get_type(name)
        if base is None:
            return None

        extensions = self._extensions[EXTENSION_KINDS[type(base)]].get(name)
        if not extensions:
            return base

        def _fold(builder: _ast.NodeBuilder) -> None:
            for extension in extensions or ():
                for role, children in extension.named_children().items():
                    builder.add(role, *children)

        return base.transform(_fold)


class _DefinitionCollector(DispatchingVisitor):
    """
    Collect top level definitions into a registry. Type definitions are
    never descended into.
    """

    def __init__(self, registry: TypeDefinitionRegistry):
        self.registry = registry
        self.errors = []  # type: List[SDLError]

    def _collect(self, node: _ast.TypeSystemDefinition) -> None:
        self.errors.extend(self.registry.add_all([node]))
        raise SkipNode()

    enter_schema_definition = _collect
    enter_schema_extension = _collect
    enter_directive_definition = _collect
    enter_scalar_type_definition = _collect
    enter_object_type_definition = _collect
    enter_interface_type_definition = _collect
    enter_union_type_definition = _collect
    enter_enum_type_definition = _collect
    enter_input_object_type_definition = _collect
    enter_scalar_type_extension = _collect
    enter_object_type_extension = _collect
    enter_interface_type_extension = _collect
    enter_union_type_extension = _collect
    enter_enum_type_extension = _collect
    enter_input_object_type_extension = _collect


def build_registry(
    document: Union[str, bytes, _ast.Document],
    registry: Optional[TypeDefinitionRegistry] = None,
    **kwargs
) -> TypeDefinitionRegistry:
    """
    Build a registry out of a schema definition document.

    Args:
        document: SDL document, either as a string or already parsed.
        registry: Add the definitions to an existing registry instead of a new
            one.
        **kwargs: Keyword arguments passed to :func:`gql_sdl.lang.parse`
            when ``document`` is a string.

    Raises:
        :class:`~gql_sdl.exc.GraphQLSyntaxError`: If the document cannot be
            parsed.
        :class:`~gql_sdl.exc.SchemaProblem`: Wraps all the redefinition
            errors found in the document.

    Returns:
        Populated registry.
    """
    if isinstance(document, (str, bytes)):
        document = parse(document, **kwargs)
    elif not isinstance(document, _ast.Document):
        raise TypeError("Expected Document but got %s" % type(document))

    registry = registry if registry is not None else TypeDefinitionRegistry()
    collector = _DefinitionCollector(registry)
    collector.visit(document)

    if collector.errors:
        raise SchemaProblem(collector.errors)

    return registry
