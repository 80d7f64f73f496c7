# -*- coding: utf-8 -*-
""" Pre-defined scalar types and literal parsing for scalar values. """

import re
import uuid
from typing import Any, Callable, Optional, Pattern, Type, TypeVar, Union

from ..exc import ScalarParsingError
from ..lang import ast as _ast

T = TypeVar("T")

ScalarValueNode = Union[
    _ast.IntValue, _ast.FloatValue, _ast.StringValue, _ast.BooleanValue
]

LiteralParser = Callable[[ScalarValueNode], Any]


class ScalarType:
    """
    Literal parsing behaviour for a named scalar.

    This is what the directive argument checker uses to decide whether a
    literal value is acceptable for a scalar typed argument. Built-in scalars
    are defined below, custom scalars can be registered through
    :class:`gql_sdl.sdl.wiring.RuntimeWiring`.

    Args:
        name: Type name

        parse_literal: Type de-serializer for value nodes.

            This function receives a :class:`gql_sdl.lang.ast.Value`
            and can outputs any Python value.

            Raise :class:`~gql_sdl.exc.ScalarParsingError`,
            :py:class:`ValueError` or :py:class:`TypeError` to signify that
            the value cannot be parsed.

        description: Type description

    Attributes:
        name (str): Type name
        description (Optional[str]): Type description
        definition (gql_sdl.lang.ast.ScalarTypeDefinition): Synthetic
            definition node for this scalar
    """

    def __init__(
        self,
        name: str,
        parse_literal: LiteralParser,
        description: Optional[str] = None,
    ):
        self.name = name
        self.description = description
        self._parse_literal = parse_literal
        self.definition = _ast.ScalarTypeDefinition(
            name,
            description=(
                _ast.StringValue(description, block=True)
                if description is not None
                else None
            ),
        )

    def __repr__(self) -> str:
        return "<%s %s>" % (self.__class__.__name__, self.name)

    def parse_literal(self, node: _ast.Value) -> Any:
        """
        Transform an AST node in a valid Python value

        Args:
            node: Parse node

        Returns:
            Python level value

        Raises:
            ScalarParsingError:
        """
        try:
            return self._parse_literal(node)  # type: ignore
        except ScalarParsingError:
            raise
        except (ValueError, TypeError) as err:
            raise ScalarParsingError(str(err)) from err


# Shortcut to generate ``parse_literal`` from a simple
# parsing function by adding node type validation.
def _typed_coerce(
    coerce_: Callable[[Any], T], *types: Type[ScalarValueNode]
) -> Callable[[ScalarValueNode], T]:
    def _coerce(node: ScalarValueNode) -> T:
        if type(node) not in types:
            raise TypeError("Invalid literal %s" % node.__class__.__name__)
        return coerce_(node.value)

    return _coerce


Boolean = ScalarType(
    "Boolean",
    _typed_coerce(bool, _ast.BooleanValue),
    description="The `Boolean` scalar type represents `true` or `false`.",
)


MAX_INT = 2147483647
MIN_INT = -2147483648
INVALID_INT = "Int cannot represent non integer value: %s"
INVALID_NUMERIC = "Int cannot represent non 32-bit signed integer: %s"


def coerce_int(maybe_int: Any) -> int:
    """ GraphQL compliant int conversion.

    >>> coerce_int("42")
    42

    >>> coerce_int("2147483648")
    Traceback (most recent call last):
        ...
    ValueError: Int cannot represent non 32-bit signed integer: 2147483648
    """
    if isinstance(maybe_int, bool):
        raise ValueError(INVALID_INT % maybe_int)
    elif isinstance(maybe_int, int):
        numeric = maybe_int
    elif isinstance(maybe_int, float):
        numeric = int(maybe_int)
        if numeric != maybe_int:
            raise ValueError(INVALID_INT % maybe_int)
    elif maybe_int is None:
        raise ValueError(INVALID_INT % "None")
    elif isinstance(maybe_int, str):
        if not maybe_int:
            raise ValueError(INVALID_INT % "(empty string)")
        try:
            numeric = int(maybe_int, 10)
        except ValueError:
            raise ValueError(INVALID_INT % maybe_int)
    else:
        raise ValueError(INVALID_INT % repr(maybe_int))

    if not (MIN_INT <= numeric <= MAX_INT):
        raise ValueError(INVALID_NUMERIC % maybe_int)

    return numeric


def coerce_float(maybe_float: Any) -> float:
    """ GraphQL compliant float conversion. """
    if maybe_float == "":
        raise ValueError(
            "Float cannot represent non numeric value: (empty string)"
        )
    if maybe_float is None:
        raise ValueError("Float cannot represent non numeric value: None")

    try:
        return float(maybe_float)
    except ValueError:
        raise ValueError(
            "Float cannot represent non numeric value: %s" % maybe_float
        )


Int = ScalarType(
    "Int",
    _typed_coerce(coerce_int, _ast.IntValue),
    description=(
        "The `Int` scalar type represents non-fractional signed whole numeric "
        "values. Int can represent values between -(2^31) and 2^31 - 1."
    ),
)


Float = ScalarType(
    "Float",
    _typed_coerce(coerce_float, _ast.FloatValue, _ast.IntValue),
    description=(
        "The `Float` scalar type represents signed double-precision "
        "fractional values as specified by "
        "[IEEE 754](http://en.wikipedia.org/wiki/IEEE_floating_point)."
    ),
)


String = ScalarType(
    "String",
    _typed_coerce(str, _ast.StringValue),
    description=(
        "The `String` scalar type represents textual data, represented as "
        "UTF-8 character sequences. The String type is most often used by "
        "GraphQL to represent free-form human-readable text."
    ),
)


ID = ScalarType(
    "ID",
    _typed_coerce(str, _ast.StringValue, _ast.IntValue),
    description=(
        "The `ID` scalar type represents a unique identifier, often used to "
        "refetch an object or as key for a cache. The ID type appears in a "
        "JSON response as a String; however, it is not intended to be "
        "human-readable. When expected as an input type, any string (such "
        'as `"4"`) or integer (such as `4`) input value will be accepted as '
        "an ID."
    ),
)


# These are the types which are part of the GraphQL specification and will
# always be available in any compliant schema.
SPECIFIED_SCALAR_TYPES = (Int, Float, String, Boolean, ID)

# Further down are common types for your convenience which are not available
# by default, register them on a RuntimeWiring to use them.

UUID = ScalarType(
    "UUID",
    _typed_coerce(uuid.UUID, _ast.StringValue),
    description=(
        "The `UUID` scalar type represents a UUID as specified in [RFC 4122]"
        "(https://tools.ietf.org/html/rfc4122)"
    ),
)


class RegexType(ScalarType):
    """
    Scalar typeclass to validate string literals against regex patterns.

    Args:
        name: Type name
        regex: Regular expression
        description: Type description

    Attributes:
        name (str): Type name
        description (str): Type description
    """

    def __init__(
        self,
        name: str,
        regex: Union[str, Pattern],
        description: Optional[str] = None,
    ):

        if isinstance(regex, str):
            self._regex = re.compile(regex)
        else:
            self._regex = regex

        if description is None:
            description = "String matching pattern /%s/" % self._regex.pattern

        def _parse(value: str) -> str:
            if not self._regex.match(value):
                raise ValueError(
                    '"%s" does not match pattern "%s"'
                    % (value, self._regex.pattern)
                )
            return value

        super(RegexType, self).__init__(
            name,
            _typed_coerce(_parse, _ast.StringValue),
            description=description,
        )
