# -*- coding: utf-8 -*-

import pytest

from gql_sdl._string_utils import dedent
from gql_sdl.exc import (
    BadValueCoercionError,
    BadValueDuplicateKeysError,
    BadValueEnumError,
    BadValueListError,
    BadValueMissingFieldError,
    BadValueNullError,
    BadValueObjectError,
    BadValueScalarError,
    BadValueUnknownFieldsError,
    MissingTypeError,
)
from gql_sdl.lang import ast as _ast, parse_value
from gql_sdl.sdl import (
    ArgValueOfAllowedTypeChecker,
    RuntimeWiring,
    build_registry,
    check_directives,
)

SCHEMA = """
enum Color { RED GREEN }

input Point {
    x: Int!
    y: Int!
    z: Int = 0
    label: String
}

input Nested {
    point: Point!
    tags: [String!]
}

scalar Custom
"""


def _errors(arg_type, value, wiring=None, schema=SCHEMA):
    registry = build_registry(
        dedent(schema)
        + "\ndirective @d(arg: %s) on OBJECT\n" % arg_type
        + "type Query @d(arg: %s) { a: Int }\n" % value
    )
    return check_directives(registry, wiring=wiring)


@pytest.mark.parametrize(
    "arg_type, value",
    [
        ("Int", "1"),
        ("Int", "-42"),
        ("Int", "null"),
        ("Int!", "1"),
        ("Float", "1"),
        ("Float", "1.5e3"),
        ("String", '"a"'),
        ("String", '"""block"""'),
        ("Boolean", "false"),
        ("ID", '"a"'),
        ("ID", "1"),
        ("[Int]", "1"),
        ("[Int]", "[1, 2]"),
        ("[Int]", "[1, null]"),
        ("[Int]", "null"),
        ("[Int!]", "[]"),
        ("[Int!]!", "[1]"),
        ("[[Int]]", "[[1], [2, 3]]"),
        ("[[Int]]", "null"),
        ("Color", "RED"),
        ("[Color]", "[RED, GREEN]"),
        ("Point", "{x: 1, y: 2}"),
        ("Point", "{y: 2, x: 1, z: null, label: \"a\"}"),
        ("[Point!]!", "{x: 1, y: 2}"),
        ("Nested", '{point: {x: 1, y: 2}, tags: "single"}'),
        ("Nested", '{point: {x: 1, y: 2}, tags: ["a", "b"]}'),
        ("Custom", "1"),
        ("Custom", '"anything"'),
        ("Custom", "true"),
    ],
)
def test_valid_values(arg_type, value):
    assert _errors(arg_type, value) == []


@pytest.mark.parametrize(
    "arg_type, value, error_cls, detail",
    [
        (
            "Int!",
            "null",
            BadValueNullError,
            "Argument value is 'NullValue', expected a non-null value.",
        ),
        (
            "[Int!]",
            "[1, null]",
            BadValueNullError,
            "Argument value is 'NullValue', expected a non-null value.",
        ),
        (
            "Int",
            '"a"',
            BadValueScalarError,
            "Argument value 'a' is not a valid value of scalar 'Int': "
            "Invalid literal StringValue",
        ),
        (
            "Int",
            "2147483648",
            BadValueScalarError,
            "Argument value '2147483648' is not a valid value of scalar "
            "'Int': Int cannot represent non 32-bit signed integer: "
            "2147483648",
        ),
        (
            "Boolean",
            "1",
            BadValueScalarError,
            "Argument value '1' is not a valid value of scalar 'Boolean': "
            "Invalid literal IntValue",
        ),
        (
            "Int",
            "RED",
            BadValueScalarError,
            "Argument value is of type 'EnumValue', expected a scalar.",
        ),
        (
            "String",
            '["a"]',
            BadValueScalarError,
            "Argument value is of type 'ListValue', expected a scalar.",
        ),
        (
            "Custom",
            "{a: 1}",
            BadValueScalarError,
            "Argument value is of type 'ObjectValue', expected a scalar.",
        ),
        (
            "[[Int]]",
            "[1]",
            BadValueListError,
            "Argument value is 'IntValue', expected a list value.",
        ),
        (
            "[[Int]]",
            "[null]",
            BadValueListError,
            "Argument value is 'NullValue', expected a list value.",
        ),
        (
            "Color",
            '"RED"',
            BadValueEnumError,
            "Argument value is of type 'StringValue', expected an enum value.",
        ),
        (
            "Color",
            "BLUE",
            BadValueEnumError,
            "Argument value 'BLUE' doesn't match any of the allowed enum "
            "values ['RED', 'GREEN']",
        ),
        (
            "Point",
            "1",
            BadValueObjectError,
            "Argument value is of type 'IntValue', expected an Object value.",
        ),
        (
            "Point",
            "{x: 1, x: 2, y: 1}",
            BadValueDuplicateKeysError,
            "Argument value object keys [x] appear more than once.",
        ),
        (
            "Point",
            "{x: 1, y: 2, w: 3, v: 4}",
            BadValueUnknownFieldsError,
            "Fields ['w', 'v'] not present in type 'Point'.",
        ),
        (
            "Point",
            "{x: 1}",
            BadValueMissingFieldError,
            "Missing required field 'y'.",
        ),
        (
            "Point",
            "{x: 1, y: null}",
            BadValueNullError,
            "Argument value is 'NullValue', expected a non-null value.",
        ),
        (
            "Nested",
            '{point: {x: "a", y: 1}}',
            BadValueScalarError,
            "Argument value 'a' is not a valid value of scalar 'Int': "
            "Invalid literal StringValue",
        ),
        (
            "[Point]",
            "[{x: 1, y: 2}, 3]",
            BadValueObjectError,
            "Argument value is of type 'IntValue', expected an Object value.",
        ),
    ],
)
def test_invalid_values(arg_type, value, error_cls, detail):
    (error,) = _errors(arg_type, value)

    assert type(error) is error_cls
    assert error.detail == detail
    assert error.directive_name == "d"
    assert error.argument_name == "arg"
    assert error.element_name == "Query"


def test_bad_value_message():
    (error,) = _errors("Int", '"a"')
    assert str(error) == (
        "'Query' [@18:1] uses an illegal value for the argument 'arg' on "
        "directive 'd'. Argument value 'a' is not a valid value of scalar "
        "'Int': Invalid literal StringValue"
    )


def test_bad_value_points_at_offending_value():
    (error,) = _errors("[Int]", '[1, "two", 3]')
    assert isinstance(error.value, _ast.StringValue)
    assert error.value.value == "two"


def test_every_missing_field_is_reported():
    errors = _errors("Point", "{}")
    assert [e.detail for e in errors] == [
        "Missing required field 'x'.",
        "Missing required field 'y'.",
    ]


def test_every_bad_list_item_is_reported():
    errors = _errors("[Color!]", "[RED, BLUE, null, YELLOW]")
    assert [type(e) for e in errors] == [
        BadValueEnumError,
        BadValueNullError,
        BadValueEnumError,
    ]


def test_nested_list_items_which_are_not_lists_are_still_checked():
    errors = _errors("[[Int]]", '[[1], "a"]')
    assert [type(e) for e in errors] == [
        BadValueListError,
        BadValueScalarError,
    ]


def test_duplicated_keys_stop_further_checks():
    errors = _errors("Point", "{x: 1, x: 2, w: 1, w: 2}")
    assert [e.detail for e in errors] == [
        "Argument value object keys [x,w] appear more than once."
    ]


def test_enum_extension_values_are_accepted():
    schema = SCHEMA + "extend enum Color { BLUE }"
    assert _errors("Color", "BLUE", schema=schema) == []


def test_input_extension_fields_are_checked():
    schema = SCHEMA + "extend input Point { w: Int! }"
    assert _errors("Point", "{x: 1, y: 2, w: 3}", schema=schema) == []

    (error,) = _errors("Point", "{x: 1, y: 2}", schema=schema)
    assert error.detail == "Missing required field 'w'."


def test_built_in_scalar_replaced_by_custom_scalar():
    # Once re-declared, String is still parsed with the built-in scalar
    # unless the wiring provides one.
    schema = SCHEMA + "scalar String"
    assert _errors("String", '"a"', schema=schema) == []

    wiring = RuntimeWiring()
    wiring.scalar("String")(lambda node: node.value)
    assert _errors("String", "1", wiring=wiring, schema=schema) == []


def test_unknown_argument_type_is_only_reported_once():
    errors = _errors("Unknown", "1")
    assert [type(e) for e in errors] == [MissingTypeError]


def test_argument_coercer_rejects_value():
    wiring = RuntimeWiring()

    @wiring.argument_coercer("@d.arg")
    def coerce_arg(node):
        if int(node.value) % 2:
            raise ValueError("Expected an even number")
        return int(node.value)

    assert _errors("Int", "2", wiring=wiring) == []

    (error,) = _errors("Int", "3", wiring=wiring)
    assert isinstance(error, BadValueCoercionError)
    assert error.detail == (
        "Argument value failed coercion: Expected an even number"
    )
    assert isinstance(error.value, _ast.IntValue)


def test_argument_coercer_does_not_run_on_invalid_values():
    calls = []
    wiring = RuntimeWiring()
    wiring.register_argument_coercer("d", "arg", calls.append)

    errors = _errors("Int", '"a"', wiring=wiring)

    assert [type(e) for e in errors] == [BadValueScalarError]
    assert calls == []


def test_argument_coercer_receives_the_value_node():
    calls = []
    wiring = RuntimeWiring()
    wiring.register_argument_coercer("d", "arg", calls.append)

    assert _errors("[Color]", "[RED]", wiring=wiring) == []
    (node,) = calls
    assert isinstance(node, _ast.ListValue)
    assert node.values[0].value == "RED"


def _checker(registry, wiring=None):
    directive = _ast.Directive(
        "d", arguments=[_ast.Argument("arg", _ast.IntValue("1"))]
    )
    return ArgValueOfAllowedTypeChecker(
        registry,
        directive,
        _ast.ScalarTypeDefinition("Foo"),
        "Foo",
        directive.arguments[0],
        wiring=wiring,
    )


def test_checker_can_be_used_on_its_own():
    registry = build_registry(dedent(SCHEMA))
    checker = _checker(registry)
    errors = []  # type: ignore

    checker.check_arg_value_matches_allowed_type(
        errors, parse_value("{x: 1}"), _ast.NamedType("Point")
    )
    checker.check_argument(errors, _ast.NamedType("Int"))

    assert [type(e) for e in errors] == [BadValueMissingFieldError]
    assert errors[0].element_name == "Foo"


def test_checker_rejects_unknown_type_nodes():
    checker = _checker(build_registry(dedent(SCHEMA)))
    with pytest.raises(TypeError):
        checker.check_arg_value_matches_allowed_type(
            [], _ast.IntValue("1"), _ast.Type()
        )
