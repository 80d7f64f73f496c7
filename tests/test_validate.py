# -*- coding: utf-8 -*-

import pytest

from gql_sdl import RuntimeWiring, SchemaProblem, validate_sdl
from gql_sdl.exc import (
    BadValueCoercionError,
    DirectiveUndeclaredError,
    GraphQLSyntaxError,
    TypeRedefinitionError,
)
from gql_sdl.lang import parse
from gql_sdl.sdl import TypeDefinitionRegistry


def test_valid_document_returns_registry(fixture_file):
    registry = validate_sdl(fixture_file("directives-schema.graphql"))
    assert isinstance(registry, TypeDefinitionRegistry)
    assert registry.has_type("Role")


def test_accepts_parsed_documents():
    registry = validate_sdl(parse("type Query { a: Int }"))
    assert registry.has_type("Query")


def test_syntax_errors_are_raised():
    with pytest.raises(GraphQLSyntaxError):
        validate_sdl("type Query {")


def test_redefinitions_are_raised_before_checking_directives():
    with pytest.raises(SchemaProblem) as exc_info:
        validate_sdl("scalar Foo @bar\nscalar Foo")

    assert [type(e) for e in exc_info.value.errors] == [TypeRedefinitionError]


def test_directive_problems_are_raised():
    with pytest.raises(SchemaProblem) as exc_info:
        validate_sdl("type Query @foo { a: Int @bar }")

    assert [
        (type(e), e.directive_name) for e in exc_info.value.errors
    ] == [(DirectiveUndeclaredError, "foo"), (DirectiveUndeclaredError, "bar")]


def test_wiring_is_used(raiser):
    sdl = "directive @foo(a: Int) on OBJECT\ntype Query @foo(a: 1) { a: Int }"
    assert validate_sdl(sdl).has_type("Query")

    wiring = RuntimeWiring()
    wiring.register_argument_coercer("foo", "a", raiser(ValueError, "nope"))

    with pytest.raises(SchemaProblem) as exc_info:
        validate_sdl(sdl, wiring=wiring)

    (error,) = exc_info.value.errors
    assert isinstance(error, BadValueCoercionError)
    assert error.detail == "Argument value failed coercion: nope"


def test_parser_arguments_are_passed_through():
    with pytest.raises(SchemaProblem) as exc_info:
        validate_sdl("type Query @foo { a: Int }", no_location=True)

    (error,) = exc_info.value.errors
    assert str(error) == "'Query' tried to use an undeclared directive 'foo'"


def test_error_to_dict():
    with pytest.raises(SchemaProblem) as exc_info:
        validate_sdl("\n\ntype Query @foo { a: Int }")

    assert exc_info.value.errors[0].to_dict() == {
        "message": "'Query' [@3:1] tried to use an undeclared directive 'foo'",
        "locations": [{"line": 3, "column": 1}],
    }


def test_error_to_dict_without_location():
    with pytest.raises(SchemaProblem) as exc_info:
        validate_sdl("extend schema @foo")

    assert exc_info.value.errors[0].to_dict() == {
        "message": "'schema' tried to use an undeclared directive 'foo'",
    }
