# -*- coding: utf-8 -*-
"""This module implements all the exceptions exposed by this library."""

from typing import TYPE_CHECKING, Any, Dict, List, Optional, Sequence

from ._string_utils import highlight_location, index_to_loc

if TYPE_CHECKING:  # Fix import cycles of types needed for Mypy checking
    from .lang import ast as _ast  # noqa: F401


class GraphQLError(Exception):
    """
    Base GraphQL exception from which all other inherit. You should prefer
    using one of its subclasses most of the time.
    """

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class GraphQLSyntaxError(GraphQLError):
    """
    Syntax error while parsing a schema definition document.

    Args:
        message: Explanatory message
        position: 0-indexed position locating the syntax error
        source: Source string from which the syntax error originated

    Attributes:
        message (str): Explanatory message
        position (int): 0-indexed position locating the syntax error
        source (str): Source string from which the syntax error originated
    """

    def __init__(self, message: str, position: int, source: str):
        super().__init__(message)
        self.source = source
        self.position = position
        self._highlighted = None  # type: Optional[str]

    @property
    def highlighted(self) -> str:
        """
        str: Message followed by a view of the source document pointing at
        the exact location of the error.
        """
        if self._highlighted is not None:
            return self._highlighted

        highlight = highlight_location(self.source, self.position)
        self._highlighted = "%s %s" % (self.message, highlight)
        return self._highlighted

    def __str__(self) -> str:
        return self.highlighted

    def to_dict(self) -> Dict[str, Any]:
        line, col = index_to_loc(self.source, self.position)
        return {
            "message": str(self),
            "locations": [{"line": line, "column": col}],
        }


class InvalidCharacter(GraphQLSyntaxError):
    pass


class UnexpectedCharacter(GraphQLSyntaxError):
    pass


class UnexpectedEOF(GraphQLSyntaxError):
    """
    Args:
        position: 0-indexed position locating the syntax error
        source: Source string from which the syntax error originated
    """

    def __init__(self, position: int, source: str):
        super().__init__("Unexpected <EOF>", position, source)


class NonTerminatedString(GraphQLSyntaxError):
    pass


class InvalidEscapeSequence(GraphQLSyntaxError):
    pass


class UnexpectedToken(GraphQLSyntaxError):
    pass


class GraphQLLocatedError(GraphQLError):
    """
    Error that can be traced back to specific node(s) in the source document.

    Args:
        message: Explanatory message
        nodes: Nodes relevant to the exception

    Attributes:
        message (str): Explanatory message
        nodes (List[gql_sdl.lang.ast.Node]): Nodes relevant to the exception
    """

    def __init__(
        self, message: str, nodes: Optional[Sequence["_ast.Node"]] = None
    ):
        super().__init__(message)
        self.nodes = list(nodes[:]) if nodes else []  # type: List[_ast.Node]

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert the exception to a dictionnary that can be serialized to
        JSON.

        Returns:
            JSON serializable representation of the error.
        """
        locations = [
            {
                "line": node.source_location.line,
                "column": node.source_location.column,
            }
            for node in self.nodes
            if node.source_location is not None
        ]
        kv = (("message", str(self)), ("locations", locations))
        return {k: v for k, v in kv if v}


class ScalarParsingError(GraphQLError, ValueError):
    pass


class SchemaProblem(GraphQLError):
    """
    Collection of multiple :class:`SDLError` found while building a type
    registry or checking a schema definition document.

    Args:
        errors: Wrapped errors

    Attributes:
        errors (List[SDLError]): Wrapped errors, in the order they were found.
    """

    def __init__(self, errors: Sequence["SDLError"]):
        super().__init__("Invalid schema: %d errors" % len(errors))
        self.errors = list(errors)

    def __str__(self) -> str:
        if len(self.errors) == 1:
            return str(self.errors[0])
        return ",\n".join([str(err) for err in self.errors])

    def __repr__(self) -> str:
        return "<%s errors=%r>" % (self.__class__.__name__, self.errors)


def _at(node: Optional["_ast.Node"]) -> str:
    if node is None or node.source_location is None:
        return ""
    return " [@%d:%d]" % (
        node.source_location.line,
        node.source_location.column,
    )


class SDLError(GraphQLLocatedError):
    """
    Problem found in a schema definition document (SDL). These are collected
    by the registry and the checkers and are only raised wrapped in a
    :class:`SchemaProblem`.

    Attributes:
        node (Optional[gql_sdl.lang.ast.Node]): Offending node
        element_name (Optional[str]): Name of the offending element
    """

    def __init__(
        self,
        message: str,
        node: Optional["_ast.Node"] = None,
        element_name: Optional[str] = None,
    ):
        super().__init__(message, [node] if node is not None else None)
        self.node = node
        self.element_name = element_name

    def __repr__(self) -> str:
        return "<%s %r>" % (self.__class__.__name__, self.message)


class TypeRedefinitionError(SDLError):
    def __init__(self, node: "_ast.Node", existing: "_ast.Node"):
        name = getattr(node, "name", None)
        super().__init__(
            "'%s'%s tried to redefine existing '%s' type%s"
            % (name, _at(node), name, _at(existing)),
            node,
            name,
        )
        self.existing = existing


class DirectiveRedefinitionError(SDLError):
    def __init__(
        self,
        node: "_ast.DirectiveDefinition",
        existing: "_ast.DirectiveDefinition",
    ):
        super().__init__(
            "'%s'%s tried to redefine existing directive '%s'%s"
            % (node.name, _at(node), existing.name, _at(existing)),
            node,
            node.name,
        )
        self.existing = existing


class SchemaRedefinitionError(SDLError):
    def __init__(
        self,
        node: "_ast.SchemaDefinition",
        existing: "_ast.SchemaDefinition",
    ):
        super().__init__(
            "There is already a schema defined%s, redefined%s"
            % (_at(existing), _at(node)),
            node,
            "schema",
        )
        self.existing = existing


class DirectiveUndeclaredError(SDLError):
    def __init__(
        self, element: "_ast.Node", element_name: str, directive_name: str
    ):
        super().__init__(
            "'%s'%s tried to use an undeclared directive '%s'"
            % (element_name, _at(element), directive_name),
            element,
            element_name,
        )
        self.directive_name = directive_name


class DirectiveIllegalLocationError(SDLError):
    def __init__(
        self,
        element: "_ast.Node",
        element_name: str,
        directive_name: str,
        location: str,
    ):
        super().__init__(
            "'%s'%s tried to use a directive '%s' in the '%s' location but "
            "that is illegal"
            % (element_name, _at(element), directive_name, location),
            element,
            element_name,
        )
        self.directive_name = directive_name
        self.location = location


class DirectiveUnknownArgumentError(SDLError):
    def __init__(
        self,
        element: "_ast.Node",
        element_name: str,
        directive_name: str,
        argument_name: str,
    ):
        super().__init__(
            "'%s'%s uses an unknown argument '%s' on directive '%s'"
            % (element_name, _at(element), argument_name, directive_name),
            element,
            element_name,
        )
        self.directive_name = directive_name
        self.argument_name = argument_name


class DirectiveMissingNonNullArgumentError(SDLError):
    def __init__(
        self,
        element: "_ast.Node",
        element_name: str,
        directive_name: str,
        argument_name: str,
    ):
        super().__init__(
            "'%s'%s failed to provide a value for the non null argument '%s' "
            "on directive '%s'"
            % (element_name, _at(element), argument_name, directive_name),
            element,
            element_name,
        )
        self.directive_name = directive_name
        self.argument_name = argument_name


class IllegalNameError(SDLError):
    def __init__(self, node: "_ast.Node"):
        name = getattr(node, "name", None)
        super().__init__(
            "'%s'%s must not begin with '__', which is reserved by GraphQL "
            "introspection." % (name, _at(node)),
            node,
            name,
        )


class MissingTypeError(SDLError):
    def __init__(self, type_name: str, node: "_ast.Node", element_name: str):
        super().__init__(
            "The type '%s' is not present when resolving type '%s'%s"
            % (type_name, element_name, _at(node)),
            node,
            element_name,
        )
        self.type_name = type_name


class NotAnInputTypeError(SDLError):
    def __init__(
        self, type_node: "_ast.NamedType", definition: "_ast.TypeDefinition"
    ):
        super().__init__(
            "The type '%s'%s is not an input type, but was used as an input "
            "type%s" % (type_node.name, _at(type_node), _at(definition)),
            type_node,
            type_node.name,
        )
        self.definition = definition


class DirectiveIllegalReferenceError(SDLError):
    def __init__(
        self,
        directive_definition: "_ast.DirectiveDefinition",
        argument: "_ast.InputValueDefinition",
    ):
        super().__init__(
            "'%s' must not reference itself on '%s'%s"
            % (directive_definition.name, argument.name, _at(argument)),
            directive_definition,
            directive_definition.name,
        )
        self.argument_name = argument.name


class BadValueError(SDLError):
    """
    Base class for directive argument values which do not match the argument's
    declared type.

    Attributes:
        directive_name (str): Name of the directive used
        argument_name (str): Name of the argument with a bad value
        value (Optional[gql_sdl.lang.ast.Value]): Offending value
        detail (str): Description of the mismatch between expected and
            actual values
    """

    def __init__(
        self,
        element: "_ast.Node",
        element_name: str,
        directive_name: str,
        argument_name: str,
        detail: str,
        value: Optional["_ast.Value"] = None,
    ):
        super().__init__(
            "'%s'%s uses an illegal value for the argument '%s' on directive "
            "'%s'. %s"
            % (
                element_name,
                _at(element),
                argument_name,
                directive_name,
                detail,
            ),
            element,
            element_name,
        )
        self.directive_name = directive_name
        self.argument_name = argument_name
        self.detail = detail
        self.value = value


class BadValueNullError(BadValueError):
    pass


class BadValueListError(BadValueError):
    pass


class BadValueObjectError(BadValueError):
    pass


class BadValueDuplicateKeysError(BadValueError):
    pass


class BadValueUnknownFieldsError(BadValueError):
    pass


class BadValueMissingFieldError(BadValueError):
    pass


class BadValueEnumError(BadValueError):
    pass


class BadValueScalarError(BadValueError):
    pass


class BadValueCoercionError(BadValueError):
    pass
