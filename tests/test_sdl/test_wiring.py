# -*- coding: utf-8 -*-

import pytest

from gql_sdl.lang import parse_value
from gql_sdl.sdl import RegexType, RuntimeWiring
from gql_sdl.sdl.scalars import UUID, Int


def test_built_in_scalars_are_available_by_default():
    wiring = RuntimeWiring()
    for name in ("Int", "Float", "String", "Boolean", "ID"):
        assert wiring.get_scalar(name).name == name
    assert wiring.get_scalar("UUID") is None
    assert not wiring.scalars


def test_register_scalar():
    wiring = RuntimeWiring()
    wiring.register_scalar(UUID)
    assert wiring.get_scalar("UUID") is UUID


def test_register_scalar_twice_fails():
    wiring = RuntimeWiring()
    wiring.register_scalar(UUID)
    with pytest.raises(ValueError):
        wiring.register_scalar(UUID)


def test_register_scalar_with_override():
    wiring = RuntimeWiring()
    wiring.register_scalar(RegexType("Slug", r"^[a-z-]+$"))
    other = RegexType("Slug", r"^[a-z_]+$")
    wiring.register_scalar(other, allow_override=True)
    assert wiring.get_scalar("Slug") is other


def test_registered_scalar_takes_precedence_over_built_in():
    wiring = RuntimeWiring()

    @wiring.scalar("Int", description="Any integer")
    def parse_int(node):
        return int(node.value)

    scalar = wiring.get_scalar("Int")
    assert scalar is not Int
    assert scalar.description == "Any integer"
    assert scalar.parse_literal(parse_value("2147483648")) == 2147483648


def test_scalar_decorator_returns_function():
    wiring = RuntimeWiring()

    def parse_port(node):
        return int(node.value)

    assert wiring.scalar("Port")(parse_port) is parse_port
    assert wiring.get_scalar("Port").parse_literal(parse_value("80")) == 80


def test_register_argument_coercer():
    wiring = RuntimeWiring()

    def coercer(node):
        return node.value

    wiring.register_argument_coercer("foo", "bar", coercer)

    assert wiring.get_argument_coercer("foo", "bar") is coercer
    assert wiring.get_argument_coercer("foo", "baz") is None
    assert wiring.get_argument_coercer("baz", "bar") is None


def test_register_argument_coercer_twice_fails():
    wiring = RuntimeWiring()
    wiring.register_argument_coercer("foo", "bar", lambda node: None)
    with pytest.raises(ValueError) as exc_info:
        wiring.register_argument_coercer("foo", "bar", lambda node: None)
    assert str(exc_info.value) == (
        'Argument "bar" of directive "@foo" already has a coercer.'
    )


def test_register_argument_coercer_with_override():
    wiring = RuntimeWiring()

    def coercer(node):
        return node.value

    wiring.register_argument_coercer("foo", "bar", lambda node: None)
    wiring.register_argument_coercer(
        "foo", "bar", coercer, allow_override=True
    )
    assert wiring.get_argument_coercer("foo", "bar") is coercer


@pytest.mark.parametrize("path", ["foo.bar", "@foo.bar"])
def test_argument_coercer_decorator(path):
    wiring = RuntimeWiring()

    @wiring.argument_coercer(path)
    def coercer(node):
        return node.value

    assert wiring.get_argument_coercer("foo", "bar") is coercer


@pytest.mark.parametrize("path", ["foo", "foo.bar.baz", "@foo"])
def test_argument_coercer_decorator_invalid_path(path):
    wiring = RuntimeWiring()
    with pytest.raises(ValueError):
        wiring.argument_coercer(path)


def test_merge():
    wiring = RuntimeWiring()
    wiring.register_scalar(UUID)

    def coercer(node):
        return node.value

    other = RuntimeWiring()
    other.register_scalar(RegexType("Slug", r"^[a-z-]+$"))
    other.register_argument_coercer("foo", "bar", coercer)

    wiring.merge(other)

    assert set(wiring.scalars) == {"UUID", "Slug"}
    assert wiring.get_argument_coercer("foo", "bar") is coercer


def test_merge_conflicts():
    wiring = RuntimeWiring()
    wiring.register_scalar(UUID)
    other = RuntimeWiring()
    other.register_scalar(UUID)

    with pytest.raises(ValueError):
        wiring.merge(other)

    wiring.merge(other, allow_override=True)
    assert wiring.get_scalar("UUID") is UUID
