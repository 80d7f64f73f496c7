# -*- coding: utf-8 -*-

import logging

import pytest

from gql_sdl._string_utils import dedent
from gql_sdl.exc import (
    BadValueNullError,
    BadValueScalarError,
    DirectiveIllegalLocationError,
    DirectiveIllegalReferenceError,
    DirectiveMissingNonNullArgumentError,
    DirectiveUndeclaredError,
    DirectiveUnknownArgumentError,
    IllegalNameError,
    MissingTypeError,
    NotAnInputTypeError,
)
from gql_sdl.lang import ast as _ast
from gql_sdl.sdl import (
    RuntimeWiring,
    SchemaTypeDirectivesChecker,
    build_registry,
    check_directives,
)


def _check(sdl, wiring=None):
    return check_directives(build_registry(dedent(sdl)), wiring=wiring)


def _summary(errors):
    return [(type(e), e.element_name) for e in errors]


def test_valid_schema_has_no_problems(directives_registry):
    assert check_directives(directives_registry) == []


def test_checking_is_repeatable():
    registry = build_registry(
        "type Query @foo { a: Int @deprecated(reason: 1) }"
    )
    checker = SchemaTypeDirectivesChecker(registry)

    first = checker.check_type_directives()
    second = checker.check_type_directives()

    assert first is not second
    assert len(first) == 2
    assert [str(e) for e in first] == [str(e) for e in second]


def test_checking_logs_number_of_problems(caplog):
    caplog.set_level(logging.DEBUG, logger="gql_sdl.sdl.directives")
    _check("type Query @foo { a: Int }")
    assert any(
        "found 1 problem(s)" in record.getMessage()
        for record in caplog.records
    )


def test_undeclared_directive():
    (error,) = _check("type Query @foo { a: Int }")

    assert isinstance(error, DirectiveUndeclaredError)
    assert error.element_name == "Query"
    assert error.directive_name == "foo"
    assert str(error) == (
        "'Query' [@1:1] tried to use an undeclared directive 'foo'"
    )


def test_undeclared_directive_does_not_stop_other_directives_checks():
    errors = _check("type Query @foo @deprecated @bar { a: Int }")

    assert [type(e) for e in errors] == [
        DirectiveUndeclaredError,
        DirectiveIllegalLocationError,
        DirectiveUndeclaredError,
    ]
    assert [e.directive_name for e in errors] == ["foo", "deprecated", "bar"]


def test_illegal_location_and_argument_errors_are_both_reported():
    errors = _check(
        """
        directive @foo(a: Int!) on FIELD_DEFINITION
        type Query @foo(a: "x", b: 1) { a: Int }
        """
    )

    assert [type(e) for e in errors] == [
        DirectiveIllegalLocationError,
        BadValueScalarError,
        DirectiveUnknownArgumentError,
    ]
    assert errors[0].location == "OBJECT"
    assert str(errors[0]) == (
        "'Query' [@2:1] tried to use a directive 'foo' in the 'OBJECT' "
        "location but that is illegal"
    )


_LOCATION_CASES = [
    ("schema @foo { query: Query }", "SCHEMA", "schema"),
    ("extend schema @foo", "SCHEMA", "schema"),
    ("scalar S @foo", "SCALAR", "S"),
    ("extend scalar S @foo", "SCALAR", "S"),
    ("type Query @foo { a: Int }", "OBJECT", "Query"),
    ("extend type Query @foo", "OBJECT", "Query"),
    ("type Query { a: Int @foo }", "FIELD_DEFINITION", "a"),
    ("extend type Query { b: Int @foo }", "FIELD_DEFINITION", "b"),
    ("type Query { a(b: Int @foo): Int }", "ARGUMENT_DEFINITION", "b"),
    ("extend type Query { a(c: Int @foo): Int }", "ARGUMENT_DEFINITION", "c"),
    ("interface I @foo { a: Int }", "INTERFACE", "I"),
    ("extend interface I @foo", "INTERFACE", "I"),
    ("interface I { a: Int @foo }", "FIELD_DEFINITION", "a"),
    ("interface I { a(b: Int @foo): Int }", "ARGUMENT_DEFINITION", "b"),
    ("union U @foo = Query", "UNION", "U"),
    ("extend union U @foo", "UNION", "U"),
    ("enum E @foo { A }", "ENUM", "E"),
    ("extend enum E @foo", "ENUM", "E"),
    ("enum E { A @foo }", "ENUM_VALUE", "A"),
    ("extend enum E { B @foo }", "ENUM_VALUE", "B"),
    ("input In @foo { a: Int }", "INPUT_OBJECT", "In"),
    ("extend input In @foo", "INPUT_OBJECT", "In"),
    ("input In { a: Int @foo }", "INPUT_FIELD_DEFINITION", "a"),
    ("extend input In { b: Int @foo }", "INPUT_FIELD_DEFINITION", "b"),
]


@pytest.mark.parametrize("sdl, location, element_name", _LOCATION_CASES)
def test_directive_in_supported_location(sdl, location, element_name):
    assert _check("directive @foo on %s\n%s" % (location, sdl)) == []


@pytest.mark.parametrize("sdl, location, element_name", _LOCATION_CASES)
def test_directive_in_unsupported_location(sdl, location, element_name):
    (error,) = _check("directive @foo on QUERY | FIELD\n%s" % sdl)

    assert isinstance(error, DirectiveIllegalLocationError)
    assert error.location == location
    assert error.element_name == element_name
    assert error.directive_name == "foo"


def test_directive_locations_are_compared_without_case():
    assert (
        _check(
            """
            directive @foo on object | Field_Definition
            type Query @foo { a: Int @foo }
            """
        )
        == []
    )


def test_schema_and_schema_extensions_directives_are_checked_together():
    errors = _check(
        """
        directive @foo on SCHEMA
        schema @foo { query: Query }
        extend schema @bar
        """
    )

    (error,) = errors
    assert isinstance(error, DirectiveUndeclaredError)
    assert error.element_name == "schema"
    assert error.directive_name == "bar"
    assert isinstance(error.node, _ast.SchemaDefinition)
    assert error.node.source_location.line == 2


def test_schema_extension_without_schema_definition():
    (error,) = _check("extend schema @bar")

    assert isinstance(error, DirectiveUndeclaredError)
    assert error.element_name == "schema"
    assert error.node.loc is None
    assert str(error) == "'schema' tried to use an undeclared directive 'bar'"


def test_unknown_argument():
    (error,) = _check(
        """
        directive @foo(a: Int) on OBJECT
        type Query @foo(b: 1) { a: Int }
        """
    )

    assert isinstance(error, DirectiveUnknownArgumentError)
    assert error.argument_name == "b"
    assert str(error) == (
        "'Query' [@2:1] uses an unknown argument 'b' on directive 'foo'"
    )


def test_last_duplicate_argument_value_is_checked():
    assert (
        _check(
            """
            directive @foo(a: Int) on OBJECT
            type Query @foo(a: "x", a: 1) { a: Int }
            """
        )
        == []
    )

    errors = _check(
        """
        directive @foo(a: Int) on OBJECT
        type Query @foo(a: 1, a: "x") { a: Int }
        """
    )
    assert [type(e) for e in errors] == [BadValueScalarError]


def test_first_declared_argument_is_used():
    sdl = """
    directive @foo(a: Int, a: String) on OBJECT
    type Query @foo(a: %s) { a: Int }
    """

    assert _check(sdl % "1") == []

    errors = _check(sdl % '"x"')
    assert [type(e) for e in errors] == [BadValueScalarError]
    assert errors[0].detail == (
        "Argument value 'x' is not a valid value of scalar 'Int': "
        "Invalid literal StringValue"
    )


def test_missing_non_null_argument():
    (error,) = _check(
        """
        directive @foo(a: Int!, b: Int! = 1, c: Int) on OBJECT
        type Query @foo { a: Int }
        """
    )

    assert isinstance(error, DirectiveMissingNonNullArgumentError)
    assert error.argument_name == "a"
    assert str(error) == (
        "'Query' [@2:1] failed to provide a value for the non null argument "
        "'a' on directive 'foo'"
    )


def test_explicit_null_for_non_null_argument_is_a_bad_value():
    errors = _check(
        """
        directive @foo(a: Int!) on OBJECT
        type Query @foo(a: null) { a: Int }
        """
    )
    assert [type(e) for e in errors] == [BadValueNullError]


def test_reserved_directive_and_argument_names():
    errors = _check("directive @__secret(__arg: Int) on OBJECT")

    assert _summary(errors) == [
        (IllegalNameError, "__secret"),
        (IllegalNameError, "__arg"),
    ]
    assert str(errors[0]) == (
        "'__secret' [@1:1] must not begin with '__', which is reserved by "
        "GraphQL introspection."
    )


def test_single_underscore_names_are_allowed():
    assert _check("directive @_private(_arg: Int) on OBJECT") == []


def test_directive_argument_of_unknown_type():
    (error,) = _check("directive @foo(a: [Unknown!]) on OBJECT")

    assert isinstance(error, MissingTypeError)
    assert error.type_name == "Unknown"
    assert error.element_name == "a"


def test_directive_argument_of_output_type():
    errors = _check(
        """
        type Obj { a: Int }
        interface Iface { a: Int }
        union Union = Obj
        directive @foo(a: [Obj!], b: Iface, c: Union) on OBJECT
        """
    )

    assert _summary(errors) == [
        (NotAnInputTypeError, "Obj"),
        (NotAnInputTypeError, "Iface"),
        (NotAnInputTypeError, "Union"),
    ]
    assert isinstance(errors[0].definition, _ast.ObjectTypeDefinition)


def test_directive_argument_of_input_types():
    assert (
        _check(
            """
            enum E { A }
            input In { a: Int }
            scalar S
            directive @foo(a: E, b: [In!]!, c: S, d: String) on OBJECT
            """
        )
        == []
    )


def test_directive_cannot_reference_itself():
    (error,) = _check("directive @foo(a: Int @foo) on ARGUMENT_DEFINITION")

    assert isinstance(error, DirectiveIllegalReferenceError)
    assert error.element_name == "foo"
    assert error.argument_name == "a"


def test_extensions_are_checked_before_definitions():
    errors = _check(
        """
        type Query @a { x: Int }
        extend type Query @b
        """
    )
    assert [e.directive_name for e in errors] == ["b", "a"]


def test_definitions_are_checked_by_kind():
    errors = _check(
        """
        input In @i { a: Int }
        scalar S @s
        enum E @e { A }
        union U @u = T
        interface I @f { a: Int }
        type T @t { a: Int }
        """
    )
    assert [e.element_name for e in errors] == ["T", "I", "U", "E", "S", "In"]


def test_extension_members_are_checked():
    errors = _check(
        """
        type Query { a: Int }
        extend type Query { b(x: Int @foo): Int @bar }
        """
    )
    assert [(e.element_name, e.directive_name) for e in errors] == [
        ("b", "bar"),
        ("x", "foo"),
    ]


def test_replaced_built_in_directive_is_used():
    errors = _check(
        """
        directive @deprecated on OBJECT
        type Query @deprecated { a: Int @deprecated }
        """
    )
    assert _summary(errors) == [(DirectiveIllegalLocationError, "a")]


def test_wiring_is_used_for_argument_values():
    sdl = """
    scalar Port
    directive @listen(port: Port!) on OBJECT
    type Query @listen(port: 70000) { a: Int }
    """
    assert _check(sdl) == []

    wiring = RuntimeWiring()

    @wiring.scalar("Port")
    def parse_port(node):
        value = int(node.value)
        if not 0 < value < 65536:
            raise ValueError("Invalid port %d" % value)
        return value

    (error,) = _check(sdl, wiring=wiring)
    assert isinstance(error, BadValueScalarError)
    assert error.detail == (
        "Argument value '70000' is not a valid value of scalar 'Port': "
        "Invalid port 70000"
    )


def test_check_directives_on_single_element():
    registry = build_registry("directive @foo on FIELD_DEFINITION")
    field = _ast.FieldDefinition(
        "a",
        _ast.NamedType("Int"),
        directives=[_ast.Directive("foo"), _ast.Directive("bar")],
    )
    errors = []  # type: ignore

    SchemaTypeDirectivesChecker(registry).check_directives(
        errors, "ENUM_VALUE", field, "a", field.directives
    )

    assert _summary(errors) == [
        (DirectiveIllegalLocationError, "a"),
        (DirectiveUndeclaredError, "a"),
    ]
