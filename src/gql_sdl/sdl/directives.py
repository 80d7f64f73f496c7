# -*- coding: utf-8 -*-
"""
Check that every directive used in a schema definition document is declared,
is used in a location it supports and is given valid arguments. Directive
definitions are checked as well.
"""

import logging
from typing import Dict, List, Optional, Sequence

from .._utils import first_by, last_by
from ..exc import (
    DirectiveIllegalLocationError,
    DirectiveIllegalReferenceError,
    DirectiveMissingNonNullArgumentError,
    DirectiveUndeclaredError,
    DirectiveUnknownArgumentError,
    IllegalNameError,
    MissingTypeError,
    NotAnInputTypeError,
    SDLError,
)
from ..lang import ast as _ast
from .registry import INPUT_TYPE_DEFINITIONS, TypeDefinitionRegistry
from .values import ArgValueOfAllowedTypeChecker
from .wiring import RuntimeWiring

logger = logging.getLogger(__name__)

SCHEMA = "SCHEMA"
SCALAR = "SCALAR"
OBJECT = "OBJECT"
FIELD_DEFINITION = "FIELD_DEFINITION"
ARGUMENT_DEFINITION = "ARGUMENT_DEFINITION"
INTERFACE = "INTERFACE"
UNION = "UNION"
ENUM = "ENUM"
ENUM_VALUE = "ENUM_VALUE"
INPUT_OBJECT = "INPUT_OBJECT"
INPUT_FIELD_DEFINITION = "INPUT_FIELD_DEFINITION"

# Types whose members are fields with arguments.
_FIELDS_CONTAINERS = (
    _ast.ObjectTypeDefinition,
    _ast.ObjectTypeExtension,
    _ast.InterfaceTypeDefinition,
    _ast.InterfaceTypeExtension,
)
_ENUMS = (_ast.EnumTypeDefinition, _ast.EnumTypeExtension)
_INPUT_OBJECTS = (
    _ast.InputObjectTypeDefinition,
    _ast.InputObjectTypeExtension,
)


class SchemaTypeDirectivesChecker:
    """
    Check the usages of directives throughout a type registry as well as the
    directive definitions themselves.

    The registry is never modified and every call to
    :meth:`check_type_directives` starts from an empty list of problems so
    running the checker multiple times yields the same result.

    Args:
        registry: Populated type registry
        wiring: Custom scalars and argument coercers used when checking
            argument values.
    """

    def __init__(
        self,
        registry: TypeDefinitionRegistry,
        wiring: Optional[RuntimeWiring] = None,
    ):
        self.registry = registry
        self.wiring = wiring if wiring is not None else RuntimeWiring()

    def check_type_directives(self) -> List[SDLError]:
        """
        Run all checks.

        Returns:
            All problems found, in a deterministic order: extensions, type
            definitions, schema directives and then directive definitions.
        """
        errors = []  # type: List[SDLError]
        registry = self.registry

        for extensions, location in (
            (registry.object_type_extensions(), OBJECT),
            (registry.interface_type_extensions(), INTERFACE),
            (registry.union_type_extensions(), UNION),
            (registry.enum_type_extensions(), ENUM),
            (registry.scalar_type_extensions(), SCALAR),
            (registry.input_object_type_extensions(), INPUT_OBJECT),
        ):
            for extension_list in extensions.values():
                for extension in extension_list:
                    self._check_type(errors, location, extension)

        for definitions, location in (
            (registry.get_types(_ast.ObjectTypeDefinition), OBJECT),
            (registry.get_types(_ast.InterfaceTypeDefinition), INTERFACE),
            (registry.get_types(_ast.UnionTypeDefinition), UNION),
            (registry.get_types(_ast.EnumTypeDefinition), ENUM),
            (registry.scalars().values(), SCALAR),
            (registry.get_types(_ast.InputObjectTypeDefinition), INPUT_OBJECT),
        ):
            for definition in definitions:
                self._check_type(errors, location, definition)

        self._check_schema_directives(errors)
        self._check_directive_definitions(errors)

        logger.debug(
            "Checked directives of %r, found %d problem(s)",
            registry,
            len(errors),
        )
        return errors

    def _check_type(
        self,
        errors: List[SDLError],
        location: str,
        node: _ast.TypeSystemDefinition,
    ) -> None:
        name = node.name  # type: ignore
        self.check_directives(errors, location, node, name, node.directives)

        if isinstance(node, _FIELDS_CONTAINERS):
            for field in node.fields:  # type: ignore
                self.check_directives(
                    errors,
                    FIELD_DEFINITION,
                    field,
                    field.name,
                    field.directives,
                )
                for arg in field.arguments:
                    self.check_directives(
                        errors,
                        ARGUMENT_DEFINITION,
                        arg,
                        arg.name,
                        arg.directives,
                    )
        elif isinstance(node, _ENUMS):
            for value in node.values:  # type: ignore
                self.check_directives(
                    errors, ENUM_VALUE, value, value.name, value.directives
                )
        elif isinstance(node, _INPUT_OBJECTS):
            for input_field in node.fields:  # type: ignore
                self.check_directives(
                    errors,
                    INPUT_FIELD_DEFINITION,
                    input_field,
                    input_field.name,
                    input_field.directives,
                )

    def _check_schema_directives(self, errors: List[SDLError]) -> None:
        schema = self.registry.schema_definition()
        directives = []  # type: List[_ast.Directive]
        if schema is not None:
            directives.extend(schema.directives)
        for extension in self.registry.schema_extensions():
            directives.extend(extension.directives)

        self.check_directives(
            errors,
            SCHEMA,
            schema if schema is not None else _ast.SchemaDefinition(),
            "schema",
            directives,
        )

    def check_directives(
        self,
        errors: List[SDLError],
        location: str,
        element: _ast.Node,
        element_name: str,
        directives: Sequence[_ast.Directive],
    ) -> None:
        """
        Check directives applied to a single schema element.

        Args:
            errors: Problems are appended to this list
            location: Location of the element, e.g. ``"OBJECT"``
            element: Schema element the directives are applied to
            element_name: Name used to identify the element in errors
            directives: Directives applied to the element
        """
        for directive in directives:
            definition = self.registry.get_directive_definition(directive.name)
            if definition is None:
                errors.append(
                    DirectiveUndeclaredError(
                        element, element_name, directive.name
                    )
                )
                continue

            allowed = set(loc.name.upper() for loc in definition.locations)
            if location.upper() not in allowed:
                errors.append(
                    DirectiveIllegalLocationError(
                        element, element_name, directive.name, location
                    )
                )

            self._check_arguments(
                errors, element, element_name, directive, definition
            )

    def _check_arguments(
        self,
        errors: List[SDLError],
        element: _ast.Node,
        element_name: str,
        directive: _ast.Directive,
        definition: _ast.DirectiveDefinition,
    ) -> None:
        allowed = first_by(
            definition.arguments, lambda arg: arg.name
        )  # type: Dict[str, _ast.InputValueDefinition]
        provided = last_by(
            directive.arguments, lambda arg: arg.name
        )  # type: Dict[str, _ast.Argument]

        for name, argument in provided.items():
            arg_def = allowed.get(name)
            if arg_def is None:
                errors.append(
                    DirectiveUnknownArgumentError(
                        element, element_name, directive.name, name
                    )
                )
                continue

            ArgValueOfAllowedTypeChecker(
                self.registry,
                directive,
                element,
                element_name,
                argument,
                wiring=self.wiring,
            ).check_argument(errors, arg_def.type)

        for name, arg_def in allowed.items():
            if (
                isinstance(arg_def.type, _ast.NonNullType)
                and arg_def.default_value is None
                and name not in provided
            ):
                errors.append(
                    DirectiveMissingNonNullArgumentError(
                        element, element_name, directive.name, name
                    )
                )

    def _check_directive_definitions(self, errors: List[SDLError]) -> None:
        for definition in self.registry.directive_definitions().values():
            if _is_reserved(definition.name):
                errors.append(IllegalNameError(definition))

            for arg in definition.arguments:
                if _is_reserved(arg.name):
                    errors.append(IllegalNameError(arg))

                self._check_input_type(errors, arg)

                if arg.has_directive(definition.name):
                    errors.append(
                        DirectiveIllegalReferenceError(definition, arg)
                    )

    def _check_input_type(
        self, errors: List[SDLError], arg: _ast.InputValueDefinition
    ) -> None:
        named = _ast.unwrap_type(arg.type)
        type_def = self.registry.get_type(named.name)
        if type_def is None:
            errors.append(MissingTypeError(named.name, arg, arg.name))
        elif not isinstance(type_def, INPUT_TYPE_DEFINITIONS):
            errors.append(NotAnInputTypeError(named, type_def))


def _is_reserved(name: str) -> bool:
    """
    >>> _is_reserved("__secret")
    True

    >>> _is_reserved("_private")
    False
    """
    return name.startswith("__")


def check_directives(
    registry: TypeDefinitionRegistry, wiring: Optional[RuntimeWiring] = None
) -> List[SDLError]:
    """
    Check all directive usages and definitions of a type registry.

    Args:
        registry: Populated type registry
        wiring: Custom scalars and argument coercers

    Returns:
        All problems found, empty if the schema is valid.
    """
    return SchemaTypeDirectivesChecker(
        registry, wiring=wiring
    ).check_type_directives()
