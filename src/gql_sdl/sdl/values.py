# -*- coding: utf-8 -*-
"""
Check that literal values passed to directive arguments are compatible with
the arguments' declared types.

The rules follow input coercion as described in the `GraphQL specification
<https://graphql.github.io/graphql-spec/June2018/#sec-Input-Values>`_ with
the following caveats:

- References to unknown or non input types are ignored, they are reported
  when checking directive definitions.
- Scalars which are neither built-in nor registered on the
  :class:`~gql_sdl.sdl.wiring.RuntimeWiring` accept any scalar literal.
"""

import collections
from typing import List, Optional, Type

from ..exc import (
    BadValueCoercionError,
    BadValueDuplicateKeysError,
    BadValueEnumError,
    BadValueError,
    BadValueListError,
    BadValueMissingFieldError,
    BadValueNullError,
    BadValueObjectError,
    BadValueScalarError,
    BadValueUnknownFieldsError,
    ScalarParsingError,
    SDLError,
)
from ..lang import ast as _ast
from .registry import TypeDefinitionRegistry
from .wiring import RuntimeWiring

EXPECTED_NON_NULL_MESSAGE = (
    "Argument value is 'NullValue', expected a non-null value."
)
EXPECTED_LIST_MESSAGE = "Argument value is '%s', expected a list value."
EXPECTED_OBJECT_MESSAGE = (
    "Argument value is of type '%s', expected an Object value."
)
DUPLICATED_KEYS_MESSAGE = (
    "Argument value object keys [%s] appear more than once."
)
UNKNOWN_FIELDS_MESSAGE = "Fields ['%s'] not present in type '%s'."
MISSING_REQUIRED_FIELD_MESSAGE = "Missing required field '%s'."
EXPECTED_ENUM_MESSAGE = (
    "Argument value is of type '%s', expected an enum value."
)
NOT_MATCHING_ENUM_MESSAGE = (
    "Argument value '%s' doesn't match any of the allowed enum values ['%s']"
)
EXPECTED_SCALAR_MESSAGE = "Argument value is of type '%s', expected a scalar."
NOT_MATCHING_SCALAR_MESSAGE = (
    "Argument value '%s' is not a valid value of scalar '%s': %s"
)
COERCION_FAILED_MESSAGE = "Argument value failed coercion: %s"


def _kind(value: _ast.Value) -> str:
    return value.__class__.__name__


class ArgValueOfAllowedTypeChecker:
    """
    Check the value of a single directive argument against the argument's
    declared type, appending a :class:`~gql_sdl.exc.BadValueError` to the
    error list for every mismatch.

    Args:
        registry: Registry used to resolve named types
        directive: Directive usage being checked
        element: Schema element the directive is applied to
        element_name: Name of the schema element
        argument: Argument usage being checked
        wiring: Custom scalars and argument coercers
    """

    def __init__(
        self,
        registry: TypeDefinitionRegistry,
        directive: _ast.Directive,
        element: _ast.Node,
        element_name: str,
        argument: _ast.Argument,
        wiring: Optional[RuntimeWiring] = None,
    ):
        self.registry = registry
        self.directive = directive
        self.element = element
        self.element_name = element_name
        self.argument = argument
        self.wiring = wiring if wiring is not None else RuntimeWiring()

    def _add_error(
        self,
        errors: List[SDLError],
        cls: Type[BadValueError],
        detail: str,
        value: Optional[_ast.Value] = None,
    ) -> None:
        errors.append(
            cls(
                self.element,
                self.element_name,
                self.directive.name,
                self.argument.name,
                detail,
                value,
            )
        )

    def check_argument(
        self, errors: List[SDLError], allowed_type: _ast.Type
    ) -> None:
        """
        Check the argument's value and, if it is structurally valid, run the
        argument coercer registered for it if any.
        """
        count = len(errors)
        self.check_arg_value_matches_allowed_type(
            errors, self.argument.value, allowed_type
        )
        if len(errors) == count:
            self._coerce(errors)

    def _coerce(self, errors: List[SDLError]) -> None:
        coercer = self.wiring.get_argument_coercer(
            self.directive.name, self.argument.name
        )
        if coercer is None:
            return

        try:
            coercer(self.argument.value)
        except (ScalarParsingError, ValueError, TypeError) as err:
            self._add_error(
                errors,
                BadValueCoercionError,
                COERCION_FAILED_MESSAGE % err,
                self.argument.value,
            )

    def check_arg_value_matches_allowed_type(
        self,
        errors: List[SDLError],
        value: _ast.Value,
        allowed_type: _ast.Type,
    ) -> None:
        if isinstance(allowed_type, _ast.NonNullType):
            self._check_non_null(errors, value, allowed_type)
        elif isinstance(allowed_type, _ast.ListType):
            self._check_list(errors, value, allowed_type)
        elif isinstance(allowed_type, _ast.NamedType):
            self._check_named(errors, value, allowed_type)
        else:
            raise TypeError("Unknown type node %r" % allowed_type)

    def _check_non_null(
        self,
        errors: List[SDLError],
        value: _ast.Value,
        allowed_type: _ast.NonNullType,
    ) -> None:
        if isinstance(value, _ast.NullValue):
            self._add_error(
                errors, BadValueNullError, EXPECTED_NON_NULL_MESSAGE, value
            )
            return

        self.check_arg_value_matches_allowed_type(
            errors, value, allowed_type.type
        )

    def _check_list(
        self,
        errors: List[SDLError],
        value: _ast.Value,
        allowed_type: _ast.ListType,
    ) -> None:
        if isinstance(value, _ast.NullValue):
            return

        item_type = allowed_type.type

        # Single values are coerced to a list of one item.
        if not isinstance(value, _ast.ListValue):
            self.check_arg_value_matches_allowed_type(errors, value, item_type)
            return

        nested = isinstance(item_type, _ast.ListType)
        for item in value.values:
            if nested and not isinstance(item, _ast.ListValue):
                self._add_error(
                    errors,
                    BadValueListError,
                    EXPECTED_LIST_MESSAGE % _kind(item),
                    item,
                )
            self.check_arg_value_matches_allowed_type(errors, item, item_type)

    def _check_named(
        self,
        errors: List[SDLError],
        value: _ast.Value,
        allowed_type: _ast.NamedType,
    ) -> None:
        if isinstance(value, _ast.NullValue):
            return

        definition = self.registry.extended_type(allowed_type.name)

        if isinstance(definition, _ast.ScalarTypeDefinition):
            self._check_scalar(errors, value, definition)
        elif isinstance(definition, _ast.EnumTypeDefinition):
            self._check_enum(errors, value, definition)
        elif isinstance(definition, _ast.InputObjectTypeDefinition):
            self._check_input_object(errors, value, definition)

    def _check_scalar(
        self,
        errors: List[SDLError],
        value: _ast.Value,
        definition: _ast.ScalarTypeDefinition,
    ) -> None:
        if isinstance(
            value, (_ast.ListValue, _ast.EnumValue, _ast.ObjectValue)
        ):
            self._add_error(
                errors,
                BadValueScalarError,
                EXPECTED_SCALAR_MESSAGE % _kind(value),
                value,
            )
            return

        scalar = self.wiring.get_scalar(definition.name)
        if scalar is None:
            return

        try:
            scalar.parse_literal(value)
        except ScalarParsingError as err:
            self._add_error(
                errors,
                BadValueScalarError,
                NOT_MATCHING_SCALAR_MESSAGE
                % (getattr(value, "value", value), definition.name, err),
                value,
            )

    def _check_enum(
        self,
        errors: List[SDLError],
        value: _ast.Value,
        definition: _ast.EnumTypeDefinition,
    ) -> None:
        if not isinstance(value, _ast.EnumValue):
            self._add_error(
                errors,
                BadValueEnumError,
                EXPECTED_ENUM_MESSAGE % _kind(value),
                value,
            )
            return

        allowed = [enum_value.name for enum_value in definition.values]
        if value.value not in allowed:
            self._add_error(
                errors,
                BadValueEnumError,
                NOT_MATCHING_ENUM_MESSAGE % (value.value, "', '".join(allowed)),
                value,
            )

    def _check_input_object(
        self,
        errors: List[SDLError],
        value: _ast.Value,
        definition: _ast.InputObjectTypeDefinition,
    ) -> None:
        if not isinstance(value, _ast.ObjectValue):
            self._add_error(
                errors,
                BadValueObjectError,
                EXPECTED_OBJECT_MESSAGE % _kind(value),
                value,
            )
            return

        counts = collections.Counter(field.name for field in value.fields)
        duplicates = [name for name, count in counts.items() if count > 1]
        if duplicates:
            self._add_error(
                errors,
                BadValueDuplicateKeysError,
                DUPLICATED_KEYS_MESSAGE % ",".join(duplicates),
                value,
            )
            return

        allowed = {field.name: field for field in definition.fields}
        unknown = [
            field.name for field in value.fields if field.name not in allowed
        ]
        if unknown:
            self._add_error(
                errors,
                BadValueUnknownFieldsError,
                UNKNOWN_FIELDS_MESSAGE
                % ("', '".join(unknown), definition.name),
                value,
            )
            return

        provided = {field.name: field for field in value.fields}
        for allowed_field in definition.fields:
            field = provided.get(allowed_field.name)
            if field is not None:
                self.check_arg_value_matches_allowed_type(
                    errors, field.value, allowed_field.type
                )
            elif (
                isinstance(allowed_field.type, _ast.NonNullType)
                and allowed_field.default_value is None
            ):
                self._add_error(
                    errors,
                    BadValueMissingFieldError,
                    MISSING_REQUIRED_FIELD_MESSAGE % allowed_field.name,
                    value,
                )
