# -*- coding: utf-8 -*-
"""
Recursive descent parser for GraphQL schema definition documents (SDL).

Only type system definitions and extensions are accepted: operations and
fragments are rejected with :class:`~gql_sdl.exc.UnexpectedToken` and all
values are parsed with the ``Const`` grammar (no variables).
"""

import collections
from typing import (
    TYPE_CHECKING,
    Any,
    Callable,
    Dict,
    List,
    Optional,
    Type,
    TypeVar,
    Union,
    cast,
)

from .._string_utils import line_starts, offset_to_loc
from ..exc import GraphQLSyntaxError, UnexpectedEOF, UnexpectedToken
from . import ast as _ast
from .lexer import Lexer
from .token import (
    EOF,
    SOF,
    Ampersand,
    At,
    BlockString,
    BracketClose,
    BracketOpen,
    Colon,
    CurlyClose,
    CurlyOpen,
    Equals,
    ExclamationMark,
    Float,
    Integer,
    Name,
    ParenClose,
    ParenOpen,
    Pipe,
    String,
    Token,
)

DIRECTIVE_LOCATIONS = frozenset(
    [
        "QUERY",
        "MUTATION",
        "SUBSCRIPTION",
        "FIELD",
        "FRAGMENT_DEFINITION",
        "FRAGMENT_SPREAD",
        "INLINE_FRAGMENT",
        "VARIABLE_DEFINITION",
        # Type System Definitions
        "SCHEMA",
        "SCALAR",
        "OBJECT",
        "FIELD_DEFINITION",
        "ARGUMENT_DEFINITION",
        "INTERFACE",
        "UNION",
        "ENUM",
        "ENUM_VALUE",
        "INPUT_OBJECT",
        "INPUT_FIELD_DEFINITION",
    ]
)

SCHEMA_DEFINITIONS_KEYWORDS = frozenset(
    [
        "schema",
        "scalar",
        "type",
        "interface",
        "union",
        "enum",
        "input",
        "directive",
    ]
)

OPERATION_TYPES_KEYWORDS = frozenset(["query", "mutation", "subscription"])

DEFAULT_SOURCE_NAME = "GraphQL"


if TYPE_CHECKING:
    from typing import Deque


Kind = Type[Token]
N = TypeVar("N", bound=_ast.Node)


def _unexpected(
    msg_or_token: Union[str, Token], position: int, source: str
) -> GraphQLSyntaxError:
    if isinstance(msg_or_token, Token):
        if isinstance(msg_or_token, EOF):
            return UnexpectedEOF(position, source)
        msg_or_token = 'Unexpected "%s"' % msg_or_token
    return UnexpectedToken(msg_or_token, position, source)


def parse(source: Union[str, bytes], **kwargs: Any) -> _ast.Document:
    """
    Parse a string as a GraphQL schema definition document.

    Args:
        source (Union[str, bytes]): source document.
        **kwargs: Remaining keyword arguments passed to :class:`Parser`

    Raises:
        :class:`~gql_sdl.exc.GraphQLSyntaxError`: if a syntax error is
            encountered.

    Returns:
        `gql_sdl.lang.ast.Document`: Parsed document.
    """
    return Parser(source, **kwargs).parse_document()


def parse_value(source: Union[str, bytes], **kwargs: Any) -> _ast.Value:
    """
    Parse a string as a single constant GraphQL value (eg. ``[42]``).

    Args:
        source (Union[str, bytes]): source document
        **kwargs: Remaining keyword arguments passed to :class:`Parser`

    Raises:
        :class:`~gql_sdl.exc.GraphQLSyntaxError`: if a syntax error is
            encountered.
    """
    parser = Parser(source, **kwargs)
    parser.expect(SOF)
    value = parser.parse_value_literal()
    parser.expect(EOF)
    return value


def parse_type(source: Union[str, bytes], **kwargs: Any) -> _ast.Type:
    """
    Parse a string as a single GraphQL type reference (eg. ``[Int!]``).

    Args:
        source (Union[str, bytes]): source document
        **kwargs: Remaining keyword arguments passed to :class:`Parser`

    Raises:
        :class:`~gql_sdl.exc.GraphQLSyntaxError`: if a syntax error is
            encountered.
    """
    parser = Parser(source, **kwargs)
    parser.expect(SOF)
    value = parser.parse_type_reference()
    parser.expect(EOF)
    return value


class Parser:
    """
    GraphQL schema definition language parser.

    Call :meth:`parse_document` to parse a complete document.

    All ``parse_*`` methods will raise :class:`~gql_sdl.exc.GraphQLSyntaxError`
    if a syntax error is encountered.

    Args:
        source (Union[str, bytes]): source document

        no_location (bool):
            By default, the parser creates AST nodes that know the location
            in the source that they correspond to. This configuration flag
            disables that behavior for performance or testing reasons.

        source_name (str):
            Name of the source document (usually a file name) recorded in
            each node's :class:`~gql_sdl.lang.ast.SourceLocation`.
    """

    __slots__ = (
        "_lexer",
        "_source",
        "_source_name",
        "_no_location",
        "_line_starts",
        "_buffer",
        "_last",
    )

    def __init__(
        self,
        source: Union[str, bytes],
        no_location: bool = False,
        source_name: str = DEFAULT_SOURCE_NAME,
    ):
        self._lexer = Lexer(source)
        self._source = self._lexer._source
        self._source_name = source_name
        self._no_location = no_location
        self._line_starts = line_starts(self._source)

        # Keep track of the current parsing window + last seen token internally
        # as the Lexer iterator itself doesn't handle backtracking or lookahead
        # semantics and can only be consumed once.
        self._buffer = collections.deque()  # type: Deque[Token]

    def _meta(self, start: Token) -> Dict[str, Any]:
        """
        Node metadata for a node starting at ``start`` and ending at the last
        consumed token. Must be evaluated after all the node's children have
        been parsed.
        """
        meta = {
            "source": self._source,
            "comments": start.comments,
            "ignored_chars": start.ignored,
        }  # type: Dict[str, Any]
        if not self._no_location:
            line, column = offset_to_loc(self._line_starts, start.start)
            meta["loc"] = (start.start, self._last.end)
            meta["source_location"] = _ast.SourceLocation(
                line, column, self._source_name
            )
        return meta

    def _advance_window(self, by: int = 1) -> None:
        """
        Advance the parsing window by one element.
        Raise ``gql_sdl.exc.UnexpectedEOF`` error when trying to advance past
        EOF when parsing window is empty. """
        c = 0
        while c < by:
            try:
                self._buffer.appendleft(next(self._lexer))
                c += 1
            except StopIteration:
                if len(self._buffer) == 0:
                    raise UnexpectedEOF(self._lexer._len, self._lexer._source)
                break

    def peek(self, count: int = 1) -> Token:
        """
        Look at a token ahead of the current position without advancing the
        parsing position.

        Args:
            count (int): How many tokens should we look ahead

        Raises:
            :class:`~gql_sdl.exc.UnexpectedEOF`:
                if there is not enough tokens left in the lexer.
        """
        delta = count - len(self._buffer)
        if delta > 0:
            self._advance_window(by=delta)

        try:
            return self._buffer[-count]
        except IndexError:
            raise UnexpectedEOF(self._lexer._len, self._lexer._source)

    def advance(self) -> Token:
        """
        Move parsing window forward and return the next token.

        Raises:
            :class:`~gql_sdl.exc.UnexpectedEOF`:
                if there is not enough tokens left in the lexer.
        """
        if not self._buffer:
            self._advance_window()

        self._last = self._buffer.pop()
        return self._last

    def expect(self, kind: Kind) -> Token:
        """
        Advance the parser and check that the next token is of the
        given token class otherwise raises :class:`~gql_sdl.exc.UnexpectedToken`.

        Args:
            kind: Expected token kind. Must be a subclass of
                :class:`gql_sdl.lang.token.Token`
        """
        next_token = self.peek()
        if next_token.__class__ is kind:
            return self.advance()

        raise _unexpected(
            'Expected %s but found "%s"' % (kind.__name__, next_token),
            next_token.start,
            self._lexer._source,
        )

    def expect_keyword(self, keyword: str) -> Name:
        """
        Advance the parser and check that the next token is a Name with
        the given value otherwise raises :class:`~gql_sdl.exc.UnexpectedToken`.

        Args:
            keyword (str): Expected keyword
        """
        next_token = self.peek()
        if next_token.__class__ is Name and next_token.value == keyword:
            return cast(Name, self.advance())

        raise _unexpected(
            'Expected "%s" but found "%s"' % (keyword, next_token),
            next_token.start,
            self._lexer._source,
        )

    def skip(self, kind: Kind) -> bool:
        """
        If the next token is of the given kind, return ``True`` after
        advancing the parser. Otherwise, do not change the parser state and
        return ``False``.

        Args:
            kind: Token kind to read over. Must be a subclass of
                :class:`gql_sdl.lang.token.Token`
        """
        if self.peek().__class__ is kind:
            self.advance()
            return True
        return False

    def many(
        self, open_kind: Kind, parse_fn: Callable[[], N], close_kind: Kind
    ) -> List[N]:
        """
        Return a non-empty list of parse nodes, determined by ``parse_fn``
        which are surrounded by ``open_kind`` and ``close_kind`` tokens.
        Advances the parser to the next lex token after the closing token.

        Raises:
            :class:`~gql_sdl.exc.UnexpectedToken`:
                if opening, entry or closing token do not match.
        """
        self.expect(open_kind)
        nodes = []
        while True:
            nodes.append(parse_fn())
            if self.skip(close_kind):
                break
        return nodes

    def any_(
        self, open_kind: Kind, parse_fn: Callable[[], N], close_kind: Kind
    ) -> List[N]:
        """
        Return a possibly empty list of parse nodes, determined by
        ``parse_fn`` which are surrounded by ``open_kind`` and ``close_kind``
        tokens. Advances the parser to the next lex token after the closing
        token.

        Raises:
            :class:`~gql_sdl.exc.UnexpectedToken`:
                if opening, entry or closing token do not match.
        """
        self.expect(open_kind)
        nodes = []
        while not self.skip(close_kind):
            nodes.append(parse_fn())
        return nodes

    def delimited_list(
        self, delimiter: Kind, parse_fn: Callable[[], N]
    ) -> List[N]:
        """
        Return a non-empty list of parse nodes determined by ``parse_fn`` and
        separated by a delimiter token of type ``delimiter``. A leading
        delimiter is allowed.
        """
        items = []
        self.skip(delimiter)
        while True:
            items.append(parse_fn())
            if not self.skip(delimiter):
                break
        return items

    def parse_document(self) -> _ast.Document:
        """
        Document : TypeSystemDefinition+
        """
        start = self.peek()
        self.expect(SOF)
        definitions = []
        while True:
            definitions.append(self.parse_definition())
            if self.skip(EOF):
                break

        return _ast.Document(definitions=definitions, **self._meta(start))

    def parse_definition(self) -> _ast.TypeSystemDefinition:
        """
        Definition : TypeSystemDefinition | TypeSystemExtension

        Executable definitions (operations and fragments) are rejected.
        """
        start = self.peek()
        if start.__class__ is Name:
            if start.value in SCHEMA_DEFINITIONS_KEYWORDS:
                return self.parse_type_system_definition()
            elif start.value == "extend":
                return self.parse_type_system_extension()
        elif start.__class__ is String or start.__class__ is BlockString:
            return self.parse_type_system_definition()

        raise _unexpected(start, start.start, self._lexer._source)

    def parse_name(self) -> str:
        """
        Name : /[_A-Za-z][_0-9A-Za-z]*/
        """
        return self.expect(Name).value

    def parse_operation_type(self) -> str:
        """
        OperationType : one of "query" "mutation" "subscription"
        """
        token = self.expect(Name)
        if token.value in OPERATION_TYPES_KEYWORDS:
            return token.value
        raise _unexpected(token, token.start, self._lexer._source)

    def parse_arguments(self) -> List[_ast.Argument]:
        """
        Arguments[Const] : ( Argument[Const]+ )
        """
        if self.peek().__class__ is ParenOpen:
            return self.many(ParenOpen, self.parse_argument, ParenClose)
        return []

    def parse_argument(self) -> _ast.Argument:
        """
        Argument[Const] : Name : Value[Const]
        """
        start = self.peek()
        name = self.parse_name()
        self.expect(Colon)
        return _ast.Argument(
            name=name, value=self.parse_value_literal(), **self._meta(start)
        )

    def parse_value_literal(self) -> _ast.Value:
        """
        Value[Const] : IntValue | FloatValue | StringValue \
        | BooleanValue | NullValue | EnumValue \
        | ListValue[Const] | ObjectValue[Const]

        - BooleanValue : one of "true" "false"
        - NullValue : "null"
        - EnumValue : Name but not "true", "false" or "null"
        """
        token = self.peek()
        kind = type(token)
        value = token.value
        if kind is BracketOpen:
            return self.parse_list()
        elif kind is CurlyOpen:
            return self.parse_object()
        elif kind is Integer:
            self.advance()
            return _ast.IntValue(value=value, **self._meta(token))
        elif kind is Float:
            self.advance()
            return _ast.FloatValue(value=value, **self._meta(token))
        elif kind in (String, BlockString):
            return self.parse_string_literal()
        elif kind is Name:
            self.advance()
            if value in ("true", "false"):
                return _ast.BooleanValue(
                    value=value == "true", **self._meta(token)
                )
            elif value == "null":
                return _ast.NullValue(**self._meta(token))
            else:
                return _ast.EnumValue(value=value, **self._meta(token))
        raise _unexpected(token, token.start, self._lexer._source)

    def parse_string_literal(self) -> _ast.StringValue:
        token = self.advance()
        return _ast.StringValue(
            value=token.value,
            block=token.__class__ is BlockString,
            **self._meta(token)
        )

    def parse_list(self) -> _ast.ListValue:
        """
        ListValue[Const] : [ ] | [ Value[Const]+ ]
        """
        start = self.peek()
        values = self.any_(BracketOpen, self.parse_value_literal, BracketClose)
        return _ast.ListValue(values=values, **self._meta(start))

    def parse_object(self) -> _ast.ObjectValue:
        """
        ObjectValue[Const] { } | { ObjectField[Const]+ }
        """
        start = self.expect(CurlyOpen)
        fields = []
        while not self.skip(CurlyClose):
            fields.append(self.parse_object_field())
        return _ast.ObjectValue(fields=fields, **self._meta(start))

    def parse_object_field(self) -> _ast.ObjectField:
        """
        ObjectField[Const] : Name : Value[Const]
        """
        start = self.peek()
        name = self.parse_name()
        self.expect(Colon)
        return _ast.ObjectField(
            name=name, value=self.parse_value_literal(), **self._meta(start)
        )

    def parse_directives(self) -> List[_ast.Directive]:
        """
        Directives[Const] : Directive[Const]+
        """
        directives = []
        while self.peek().__class__ is At:
            directives.append(self.parse_directive())
        return directives

    def parse_directive(self) -> _ast.Directive:
        """
        Directive[Const] : @ Name Arguments[Const]?
        """
        start = self.expect(At)
        name = self.parse_name()
        return _ast.Directive(
            name=name, arguments=self.parse_arguments(), **self._meta(start)
        )

    def parse_type_reference(self) -> _ast.Type:
        """
        Type : NamedType | ListType | NonNullType
        """
        start = self.peek()
        if self.skip(BracketOpen):
            inner_type = self.parse_type_reference()
            self.expect(BracketClose)
            type_ = _ast.ListType(
                type=inner_type, **self._meta(start)
            )  # type: Union[_ast.ListType, _ast.NamedType]
        else:
            type_ = self.parse_named_type()

        if self.skip(ExclamationMark):
            return _ast.NonNullType(type=type_, **self._meta(start))
        return type_

    def parse_named_type(self) -> _ast.NamedType:
        """
        NamedType : Name
        """
        start = self.peek()
        return _ast.NamedType(name=self.parse_name(), **self._meta(start))

    def parse_type_system_definition(self) -> _ast.TypeSystemDefinition:
        """
        TypeSystemDefinition : SchemaDefinition | TypeDefinition \
        | DirectiveDefinition

        - TypeDefinition : ScalarTypeDefinition | ObjectTypeDefinition \
        | InterfaceTypeDefinition | UnionTypeDefinition | EnumTypeDefinition \
        | InputObjectTypeDefinition
        """
        next_ = self.peek()
        keyword = (
            self.peek(2)
            if (next_.__class__ is String or next_.__class__ is BlockString)
            else next_
        )

        if type(keyword) == Name:
            if keyword.value == "schema":
                return self.parse_schema_definition()
            elif keyword.value == "scalar":
                return self.parse_scalar_type_definition()
            elif keyword.value == "type":
                return self.parse_object_type_definition()
            elif keyword.value == "interface":
                return self.parse_interface_type_definition()
            elif keyword.value == "union":
                return self.parse_union_type_definition()
            elif keyword.value == "enum":
                return self.parse_enum_type_definition()
            elif keyword.value == "input":
                return self.parse_input_object_type_definition()
            elif keyword.value == "directive":
                return self.parse_directive_definition()

        raise _unexpected(keyword, keyword.start, self._lexer._source)

    def parse_description(self) -> Optional[_ast.StringValue]:
        """
        Description : StringValue
        """
        next_ = self.peek()
        return (
            self.parse_string_literal()
            if (next_.__class__ is String or next_.__class__ is BlockString)
            else None
        )

    def parse_schema_definition(self) -> _ast.SchemaDefinition:
        """
        SchemaDefinition : \
        Description? schema Directives[Const]? { OperationTypeDefinition+ }
        """
        start = self.peek()
        desc = self.parse_description()
        self.expect_keyword("schema")
        directives = self.parse_directives()
        operation_types = self.many(
            CurlyOpen, self.parse_operation_type_definition, CurlyClose
        )
        return _ast.SchemaDefinition(
            description=desc,
            directives=directives,
            operation_types=operation_types,
            **self._meta(start)
        )

    def parse_operation_type_definition(self) -> _ast.OperationTypeDefinition:
        """
        OperationTypeDefinition : OperationType : NamedType
        """
        start = self.peek()
        operation = self.parse_operation_type()
        self.expect(Colon)
        return _ast.OperationTypeDefinition(
            operation=operation,
            type=self.parse_named_type(),
            **self._meta(start)
        )

    def parse_scalar_type_definition(self) -> _ast.ScalarTypeDefinition:
        """
        ScalarTypeDefinition : Description? scalar Name Directives[Const]?
        """
        start = self.peek()
        desc = self.parse_description()
        self.expect_keyword("scalar")
        name = self.parse_name()
        return _ast.ScalarTypeDefinition(
            description=desc,
            name=name,
            directives=self.parse_directives(),
            **self._meta(start)
        )

    def parse_object_type_definition(self) -> _ast.ObjectTypeDefinition:
        """
        ObjectTypeDefinition : Description? type Name ImplementsInterfaces? \
        Directives[Const]? FieldsDefinition?
        """
        start = self.peek()
        desc = self.parse_description()
        self.expect_keyword("type")
        name = self.parse_name()
        interfaces = self.parse_implements_interfaces()
        directives = self.parse_directives()
        return _ast.ObjectTypeDefinition(
            description=desc,
            name=name,
            interfaces=interfaces,
            directives=directives,
            fields=self.parse_fields_definition(),
            **self._meta(start)
        )

    def parse_implements_interfaces(self) -> List[_ast.NamedType]:
        """
        ImplementsInterfaces : implements `&`? NamedType \
        | ImplementsInterfaces & NamedType
        """
        token = self.peek()
        types = []
        if token.__class__ is Name and token.value == "implements":
            self.advance()
            self.skip(Ampersand)
            while True:
                types.append(self.parse_named_type())
                if not self.skip(Ampersand):
                    break
        return types

    def parse_fields_definition(self) -> List[_ast.FieldDefinition]:
        """
        FieldsDefinition : { FieldDefinition+ }
        """
        if self.peek().__class__ is CurlyOpen:
            return self.many(CurlyOpen, self.parse_field_definition, CurlyClose)
        return []

    def parse_field_definition(self) -> _ast.FieldDefinition:
        """
        FieldDefinition : \
        Description? Name ArgumentsDefinition? : Type Directives[Const]?
        """
        start = self.peek()
        desc, name = self.parse_description(), self.parse_name()
        args = self.parse_argument_definitions()
        self.expect(Colon)
        type_ = self.parse_type_reference()
        return _ast.FieldDefinition(
            description=desc,
            name=name,
            arguments=args,
            type=type_,
            directives=self.parse_directives(),
            **self._meta(start)
        )

    def parse_argument_definitions(self) -> List[_ast.InputValueDefinition]:
        """
        ArgumentsDefinition : ( InputValueDefinition+ )
        """
        return (
            self.many(ParenOpen, self.parse_input_value_definition, ParenClose)
            if self.peek().__class__ is ParenOpen
            else []
        )

    def parse_input_value_definition(self) -> _ast.InputValueDefinition:
        """
        InputValueDefinition : \
        Description? Name : Type DefaultValue? Directives[Const]?
        """
        start = self.peek()
        desc, name = self.parse_description(), self.parse_name()
        self.expect(Colon)
        type_ = self.parse_type_reference()
        default_value = (
            self.parse_value_literal() if self.skip(Equals) else None
        )
        return _ast.InputValueDefinition(
            description=desc,
            name=name,
            type=type_,
            default_value=default_value,
            directives=self.parse_directives(),
            **self._meta(start)
        )

    def parse_interface_type_definition(self) -> _ast.InterfaceTypeDefinition:
        """
        InterfaceTypeDefinition : \
        Description? interface Name Directives[Const]? FieldsDefinition?
        """
        start = self.peek()
        desc = self.parse_description()
        self.expect_keyword("interface")
        name = self.parse_name()
        directives = self.parse_directives()
        return _ast.InterfaceTypeDefinition(
            description=desc,
            name=name,
            directives=directives,
            fields=self.parse_fields_definition(),
            **self._meta(start)
        )

    def parse_union_type_definition(self) -> _ast.UnionTypeDefinition:
        """
        UnionTypeDefinition : \
        Description? union Name Directives[Const]? UnionMemberTypes?
        """
        start = self.peek()
        desc = self.parse_description()
        self.expect_keyword("union")
        name = self.parse_name()
        directives = self.parse_directives()
        return _ast.UnionTypeDefinition(
            description=desc,
            name=name,
            directives=directives,
            types=self.parse_union_member_types(),
            **self._meta(start)
        )

    def parse_union_member_types(self) -> List[_ast.NamedType]:
        """
        UnionMemberTypes : = `|`? NamedType | UnionMemberTypes | NamedType
        """
        if self.skip(Equals):
            return self.delimited_list(Pipe, self.parse_named_type)
        return []

    def parse_enum_type_definition(self) -> _ast.EnumTypeDefinition:
        """
        EnumTypeDefinition : \
        Description? enum Name Directives[Const]? EnumValuesDefinition?
        """
        start = self.peek()
        desc = self.parse_description()
        self.expect_keyword("enum")
        name = self.parse_name()
        directives = self.parse_directives()
        return _ast.EnumTypeDefinition(
            description=desc,
            name=name,
            directives=directives,
            values=self.parse_enum_values_definition(),
            **self._meta(start)
        )

    def parse_enum_values_definition(self) -> List[_ast.EnumValueDefinition]:
        """
        EnumValuesDefinition : { EnumValueDefinition+ }
        """
        return (
            self.many(CurlyOpen, self.parse_enum_value_definition, CurlyClose)
            if self.peek().__class__ is CurlyOpen
            else []
        )

    def parse_enum_value_definition(self) -> _ast.EnumValueDefinition:
        """
        EnumValueDefinition : Description? EnumValue Directives[Const]?

        - EnumValue : Name but not "true", "false" or "null"
        """
        start = self.peek()
        desc = self.parse_description()
        token = self.peek()
        name = self.parse_name()
        if name in ("true", "false", "null"):
            raise _unexpected(
                'Enum value cannot be "%s"' % name,
                token.start,
                self._lexer._source,
            )
        return _ast.EnumValueDefinition(
            description=desc,
            name=name,
            directives=self.parse_directives(),
            **self._meta(start)
        )

    def parse_input_object_type_definition(
        self,
    ) -> _ast.InputObjectTypeDefinition:
        """
        InputObjectTypeDefinition : \
        Description? input Name Directives[Const]? InputFieldsDefinition?
        """
        start = self.peek()
        desc = self.parse_description()
        self.expect_keyword("input")
        name = self.parse_name()
        directives = self.parse_directives()
        return _ast.InputObjectTypeDefinition(
            description=desc,
            name=name,
            directives=directives,
            fields=self.parse_input_fields_definition(),
            **self._meta(start)
        )

    def parse_input_fields_definition(self) -> List[_ast.InputValueDefinition]:
        """
        InputFieldsDefinition : { InputValueDefinition+ }
        """
        return (
            self.many(CurlyOpen, self.parse_input_value_definition, CurlyClose)
            if self.peek().__class__ is CurlyOpen
            else []
        )

    def parse_type_system_extension(self) -> _ast.TypeSystemExtension:
        """
        TypeSystemExtension : SchemaExtension | TypeExtension

        - TypeExtension : ScalarTypeExtension | ObjectTypeExtension | \
        InterfaceTypeExtension | UnionTypeExtension | EnumTypeExtension | \
        InputObjectTypeDefinition
        """
        keyword = self.peek(2)
        if keyword.__class__ is Name:
            if keyword.value == "schema":
                return self.parse_schema_extension()
            elif keyword.value == "scalar":
                return self.parse_scalar_type_extension()
            elif keyword.value == "type":
                return self.parse_object_type_extension()
            elif keyword.value == "interface":
                return self.parse_interface_type_extension()
            elif keyword.value == "union":
                return self.parse_union_type_extension()
            elif keyword.value == "enum":
                return self.parse_enum_type_extension()
            elif keyword.value == "input":
                return self.parse_input_object_type_extension()

        raise _unexpected(keyword, keyword.start, self._lexer._source)

    def _empty_extension(self) -> GraphQLSyntaxError:
        tok = self.peek()
        return _unexpected(tok, tok.start, self._lexer._source)

    def parse_schema_extension(self) -> _ast.SchemaExtension:
        """
        SchemaExtension : extend schema Directives[Const] \
        { [OperationTypeDefinition] } | extend schema Directives[Const]
        """
        start = self.peek()
        self.expect_keyword("extend")
        self.expect_keyword("schema")
        directives = self.parse_directives()
        if self.peek().__class__ is CurlyOpen:
            operation_types = self.many(
                CurlyOpen, self.parse_operation_type_definition, CurlyClose
            )
        else:
            operation_types = []

        if (not directives) and (not operation_types):
            raise self._empty_extension()

        return _ast.SchemaExtension(
            directives=directives,
            operation_types=operation_types,
            **self._meta(start)
        )

    def parse_scalar_type_extension(self) -> _ast.ScalarTypeExtension:
        """
        ScalarTypeExtension : extend scalar Name Directives[Const]
        """
        start = self.peek()
        self.expect_keyword("extend")
        self.expect_keyword("scalar")
        name = self.parse_name()
        directives = self.parse_directives()
        if not directives:
            raise self._empty_extension()

        return _ast.ScalarTypeExtension(
            name=name, directives=directives, **self._meta(start)
        )

    def parse_object_type_extension(self) -> _ast.ObjectTypeExtension:
        """
        ObjectTypeExtension : \
        extend type Name ImplementsInterfaces? Directives[Const]? FieldsDefinition \
        | extend type Name ImplementsInterfaces? Directives[Const] \
        | extend type Name ImplementsInterfaces
        """
        start = self.peek()
        self.expect_keyword("extend")
        self.expect_keyword("type")
        name = self.parse_name()
        interfaces = self.parse_implements_interfaces()
        directives = self.parse_directives()
        fields = self.parse_fields_definition()
        if (not interfaces) and (not directives) and (not fields):
            raise self._empty_extension()

        return _ast.ObjectTypeExtension(
            name=name,
            interfaces=interfaces,
            directives=directives,
            fields=fields,
            **self._meta(start)
        )

    def parse_interface_type_extension(self) -> _ast.InterfaceTypeExtension:
        """
        InterfaceTypeExtension : \
        extend interface Name Directives[Const]? FieldsDefinition \
        | extend interface Name Directives[Const]
        """
        start = self.peek()
        self.expect_keyword("extend")
        self.expect_keyword("interface")
        name = self.parse_name()
        directives = self.parse_directives()
        fields = self.parse_fields_definition()
        if (not directives) and (not fields):
            raise self._empty_extension()

        return _ast.InterfaceTypeExtension(
            name=name, directives=directives, fields=fields, **self._meta(start)
        )

    def parse_union_type_extension(self) -> _ast.UnionTypeExtension:
        """
        UnionTypeExtension : \
        extend union Name Directives[Const]? UnionMemberTypes \
        | extend union Name Directives[Const]
        """
        start = self.peek()
        self.expect_keyword("extend")
        self.expect_keyword("union")
        name = self.parse_name()
        directives = self.parse_directives()
        types = self.parse_union_member_types()
        if (not directives) and (not types):
            raise self._empty_extension()

        return _ast.UnionTypeExtension(
            name=name, directives=directives, types=types, **self._meta(start)
        )

    def parse_enum_type_extension(self) -> _ast.EnumTypeExtension:
        """
        EnumTypeExtension : \
        extend enum Name Directives[Const]? EnumValuesDefinition \
        | extend enum Name Directives[Const]
        """
        start = self.peek()
        self.expect_keyword("extend")
        self.expect_keyword("enum")
        name = self.parse_name()
        directives = self.parse_directives()
        values = self.parse_enum_values_definition()
        if (not directives) and (not values):
            raise self._empty_extension()

        return _ast.EnumTypeExtension(
            name=name, directives=directives, values=values, **self._meta(start)
        )

    def parse_input_object_type_extension(
        self,
    ) -> _ast.InputObjectTypeExtension:
        """
        InputObjectTypeExtension : \
        extend input Name Directives[Const]? InputFieldsDefinition \
        | extend input Name Directives[Const]
        """
        start = self.peek()
        self.expect_keyword("extend")
        self.expect_keyword("input")
        name = self.parse_name()
        directives = self.parse_directives()
        fields = self.parse_input_fields_definition()
        if (not directives) and (not fields):
            raise self._empty_extension()

        return _ast.InputObjectTypeExtension(
            name=name, directives=directives, fields=fields, **self._meta(start)
        )

    def parse_directive_definition(self) -> _ast.DirectiveDefinition:
        """
        DirectiveDefinition : Description? directive @ Name \
        ArgumentsDefinition? on DirectiveLocations
        """
        start = self.peek()
        desc = self.parse_description()
        self.expect_keyword("directive")
        self.expect(At)
        name = self.parse_name()
        args = self.parse_argument_definitions()
        self.expect_keyword("on")
        return _ast.DirectiveDefinition(
            description=desc,
            name=name,
            arguments=args,
            locations=self.parse_directive_locations(),
            **self._meta(start)
        )

    def parse_directive_locations(self) -> List[_ast.DirectiveLocation]:
        """
        DirectiveLocations : \
        `|`? DirectiveLocation `|` DirectiveLocations `|` DirectiveLocation
        """
        return self.delimited_list(Pipe, self.parse_directive_location)

    def parse_directive_location(self) -> _ast.DirectiveLocation:
        """
        DirectiveLocation : ExecutableDirectiveLocation \
        | TypeSystemDirectiveLocation

        - ExecutableDirectiveLocation : one of QUERY MUTATION SUBSCRIPTION \
        FIELD FRAGMENT_DEFINITION FRAGMENT_SPREAD INLINE_FRAGMENT \
        VARIABLE_DEFINITION

        - TypeSystemDirectiveLocation : one of SCHEMA SCALAR OBJECT \
        FIELD_DEFINITION ARGUMENT_DEFINITION INTERFACE UNION ENUM ENUM_VALUE \
        INPUT_OBJECT INPUT_FIELD_DEFINITION

        Location names are matched without regard to case, the original
        spelling is kept in the resulting node.
        """
        start = self.peek()
        name = self.parse_name()
        if name.upper() in DIRECTIVE_LOCATIONS:
            return _ast.DirectiveLocation(name=name, **self._meta(start))

        raise _unexpected(
            "Unexpected Name %s" % name, start.start, self._lexer._source
        )
