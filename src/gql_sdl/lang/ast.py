# -*- coding: utf-8 -*-
"""
GraphQL AST representations corresponding to the `GraphQL type system
language elements <http://facebook.github.io/graphql/June2018/#sec-Type-System>`_.

Nodes are immutable: every attribute is set once when the node is created and
child sequences are stored as tuples. Use :meth:`Node.to_builder`,
:meth:`Node.transform` or :meth:`Node.with_new_children` to derive modified
copies.

Names are stored as plain strings and every node class carries an explicit
:attr:`Node.kind` tag used for visitor dispatch (see :meth:`Node.accept`).
"""

import copy
from types import MappingProxyType
from typing import (
    Any,
    Callable,
    Dict,
    Iterator,
    List,
    Mapping,
    Optional,
    Sequence,
    Tuple,
    Type as _Type,
    TypeVar,
    cast,
)

N = TypeVar("N", bound="Node")

_META = (
    "source",
    "loc",
    "source_location",
    "comments",
    "ignored_chars",
    "additional_data",
)


class SourceLocation:
    """
    Human readable location of a node in its source document.

    Attributes:
        line (int): 1-indexed line number
        column (int): 1-indexed column number
        source_name (Optional[str]): Name of the source document
    """

    __slots__ = ("line", "column", "source_name")

    def __init__(
        self, line: int, column: int, source_name: Optional[str] = None
    ):
        self.line = line
        self.column = column
        self.source_name = source_name

    def __eq__(self, rhs: Any) -> bool:
        return (
            isinstance(rhs, SourceLocation)
            and self.line == rhs.line
            and self.column == rhs.column
            and self.source_name == rhs.source_name
        )

    def __hash__(self) -> int:
        return hash((self.line, self.column, self.source_name))

    def __repr__(self) -> str:
        return "<SourceLocation %s:%d:%d>" % (
            self.source_name,
            self.line,
            self.column,
        )


def _tuple(value: Optional[Sequence[Any]]) -> Tuple[Any, ...]:
    return tuple(value) if value else ()


class Node:
    """
    Base AST node.

    Attributes:
        source (Optional[str]): Source document the node was parsed from
        loc (Optional[Tuple[int, int]]): ``(start, end)`` offsets of the node
            in :attr:`source`
        source_location (Optional[SourceLocation]): Line / column location of
            the start of the node
        comments (Tuple[str, ...]): Comment lines preceding the node
        ignored_chars (str): Ignored characters preceding the node
        additional_data (Mapping[str, str]): Arbitrary metadata
    """

    __slots__ = _META

    #: Dispatch tag, see :meth:`accept`.
    kind = "node"

    # Structural attributes, computed from the class hierarchy's __slots__.
    _fields = ()  # type: Tuple[str, ...]

    # Structural attributes which hold child nodes.
    _children = ()  # type: Tuple[str, ...]

    # Structural attributes used by :meth:`is_equal_to`.
    _identity = ()  # type: Tuple[str, ...]

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)  # type: ignore
        fields = []  # type: List[str]
        for klass in reversed(cls.__mro__):
            for attr in klass.__dict__.get("__slots__", ()):
                if attr not in _META and attr not in fields:
                    fields.append(attr)
        cls._fields = tuple(fields)

    def __init__(
        self,
        source: Optional[str] = None,
        loc: Optional[Tuple[int, int]] = None,
        source_location: Optional[SourceLocation] = None,
        comments: Sequence[str] = (),
        ignored_chars: str = "",
        additional_data: Optional[Mapping[str, str]] = None,
    ):
        self.source = source
        self.loc = loc
        self.source_location = source_location
        self.comments = _tuple(comments)  # type: Tuple[str, ...]
        self.ignored_chars = ignored_chars
        self.additional_data = MappingProxyType(
            dict(additional_data or {})
        )  # type: Mapping[str, str]

    def __setattr__(self, name: str, value: Any) -> None:
        if hasattr(self, name):
            raise AttributeError(
                "Cannot set attribute %s of immutable node %s"
                % (name, self.__class__.__name__)
            )
        super().__setattr__(name, value)

    def __delattr__(self, name: str) -> None:
        raise AttributeError(
            "Cannot delete attribute %s of immutable node %s"
            % (name, self.__class__.__name__)
        )

    def _props(self) -> Iterator[str]:
        yield from self._fields
        yield "loc"

    def _state(self) -> Dict[str, Any]:
        state = {attr: getattr(self, attr) for attr in self._fields}
        state.update((attr, getattr(self, attr)) for attr in _META)
        return state

    def _replace(self: N, **changes: Any) -> N:
        state = self._state()
        state.update(changes)
        return self.__class__(**state)  # type: ignore

    def __eq__(self, rhs: Any) -> bool:
        return type(rhs) == type(self) and all(
            getattr(self, attr) == getattr(rhs, attr) for attr in self._props()
        )

    def __hash__(self) -> int:
        return id(self)

    def __repr__(self) -> str:
        return "<%s %s>" % (
            self.__class__.__name__,
            ", ".join(
                "%s=%s" % (attr, getattr(self, attr)) for attr in self._props()
            ),
        )

    def __copy__(self: N) -> N:
        return self._replace()

    def __deepcopy__(self: N, memo: Dict[int, Any]) -> N:
        state = self._state()
        state["additional_data"] = dict(self.additional_data)
        return self.__class__(  # type: ignore
            **{k: copy.deepcopy(v, memo) for k, v in state.items()}
        )

    copy = __copy__

    def deepcopy(self: N) -> N:
        """
        Structurally identical copy of the node which doesn't share any child
        node with the original.
        """
        return copy.deepcopy(self)

    def children(self) -> List["Node"]:
        """
        Direct children of this node in declaration order.
        """
        return [
            child for nodes in self.named_children().values() for child in nodes
        ]

    def named_children(self) -> Dict[str, List["Node"]]:
        """
        Direct children of this node grouped by role (e.g. ``"directives"``,
        ``"fields"``). Roles holding a single node map to a list of zero or
        one element.
        """
        result = {}  # type: Dict[str, List[Node]]
        for role in self._children:
            value = getattr(self, role)
            if isinstance(value, tuple):
                result[role] = list(value)
            elif value is None:
                result[role] = []
            else:
                result[role] = [value]
        return result

    def with_new_children(
        self: N, new_children: Mapping[str, Sequence["Node"]]
    ) -> N:
        """
        Create a copy of this node where the given roles are replaced.
        Roles which are not in ``new_children`` are carried over.

        Raises:
            ValueError: If a role is unknown for this node or if multiple
                children are passed for a role which holds a single node.
        """
        changes = {}  # type: Dict[str, Any]
        for role, nodes in new_children.items():
            if role not in self._children:
                raise ValueError(
                    "%s has no child role %s" % (self.__class__.__name__, role)
                )
            if isinstance(getattr(self, role), tuple):
                changes[role] = tuple(nodes)
            elif len(nodes) > 1:
                raise ValueError(
                    "%s.%s holds a single node, got %d"
                    % (self.__class__.__name__, role, len(nodes))
                )
            else:
                changes[role] = nodes[0] if nodes else None
        return self._replace(**changes)

    def is_equal_to(self, other: Any) -> bool:
        """
        Shallow comparison: same node class and same identifying attributes
        (name for named nodes, value for literals). Children, locations and
        comments are not compared.
        """
        return type(other) == type(self) and all(
            getattr(self, attr) == getattr(other, attr)
            for attr in self._identity
        )

    def accept(self, visitor: Any, phase: str = "enter") -> Any:
        """
        Double dispatch to the visitor method for this node kind, for example
        ``visitor.enter_object_type_definition(node)``.
        """
        return getattr(visitor, "%s_%s" % (phase, self.kind))(self)

    @classmethod
    def builder(cls) -> "NodeBuilder":
        """ Empty builder for this node class. """
        return NodeBuilder(cls)

    def to_builder(self) -> "NodeBuilder":
        """ Builder pre-populated with all of this node's attributes. """
        return NodeBuilder(self.__class__, self)

    def transform(self: N, func: Callable[["NodeBuilder"], Any]) -> N:
        """
        Create a modified copy of this node by running ``func`` on a builder
        pre-populated with all its attributes.

        >>> from gql_sdl.lang.ast import NamedType
        >>> NamedType("Foo").transform(lambda b: b.set(name="Bar")).name
        'Bar'
        """
        builder = self.to_builder()
        func(builder)
        return cast(N, builder.build())

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert the current node and all of its children to a JSON serializable
        format.

        This is mostly useful for testing and when you need to convert nodes to
        JSON such as interop with other languages, printing and serialisation.

        The conversion rules are:

        - Each `Node` subclass is converted to a dict of their own converted
          attributes adding a ``__kind__`` key corresponding to the node's
          classname.
        - Primitive values (int, strings, etc.) are left as is.
        - Sequences of children are converted per-element to lists.
        - ``loc`` is kept as a ``(start, end)`` tuple.

        Returns:
            Dict[str, Any]: Converted value
        """
        return cast(Dict[str, Any], _ast_to_json(self))


class NodeBuilder:
    """
    Mutable builder for any node class.

    A builder is meant to be used by a single construction call, it is not
    safe to share across threads.

    >>> from gql_sdl.lang.ast import Directive, ScalarTypeDefinition
    >>> node = (
    ...     ScalarTypeDefinition.builder()
    ...     .set(name="Date")
    ...     .add("directives", Directive("foo"))
    ...     .additional_data("owner", "core")
    ...     .build()
    ... )
    >>> node.name, [d.name for d in node.directives]
    ('Date', ['foo'])
    >>> node.additional_data["owner"]
    'core'
    """

    __slots__ = ("node_class", "_attrs", "_additional_data")

    def __init__(self, node_class: _Type[Node], existing: Optional[Node] = None):
        self.node_class = node_class
        self._attrs = {}  # type: Dict[str, Any]
        self._additional_data = {}  # type: Dict[str, str]

        if existing is not None:
            if not isinstance(existing, node_class):
                raise TypeError(
                    "Expected %s but got %s"
                    % (node_class.__name__, existing.__class__.__name__)
                )
            self._attrs.update(existing._state())

    def _check(self, attr: str) -> None:
        if attr not in self.node_class._fields and attr not in _META:
            raise TypeError(
                "Unknown attribute %s for %s" % (attr, self.node_class.__name__)
            )

    def set(self, **attrs: Any) -> "NodeBuilder":
        """ Set (or overwrite) attributes. """
        for attr in attrs:
            self._check(attr)
        self._attrs.update(attrs)
        return self

    def add(self, role: str, *children: Node) -> "NodeBuilder":
        """ Append children to a sequence attribute. """
        self._check(role)
        self._attrs[role] = list(self._attrs.get(role) or ()) + list(children)
        return self

    def additional_data(self, key: str, value: str) -> "NodeBuilder":
        self._additional_data[key] = value
        return self

    def build(self) -> Node:
        attrs = dict(self._attrs)
        data = dict(attrs.pop("additional_data", None) or {})
        data.update(self._additional_data)
        return self.node_class(additional_data=data, **attrs)  # type: ignore


class SupportDirectives:
    __slots__ = ()

    directives = ()  # type: Tuple[Directive, ...]

    def has_directive(self, name: str) -> bool:
        return any(d.name == name for d in self.directives)

    def get_directives(self, name: str) -> List["Directive"]:
        return [d for d in self.directives if d.name == name]


class SupportDescription:
    __slots__ = ()


class Definition(Node):
    __slots__ = ()


class Value(Node):
    __slots__ = ()


class Type(Node):
    __slots__ = ()


class Document(Node):
    __slots__ = ("definitions",)

    kind = "document"
    _children = ("definitions",)

    def __init__(
        self, definitions: Optional[Sequence[Definition]] = None, **meta: Any
    ):
        self.definitions = _tuple(definitions)  # type: Tuple[Definition, ...]
        super().__init__(**meta)


class NamedType(Type):
    __slots__ = ("name",)

    kind = "named_type"
    _identity = ("name",)

    def __init__(self, name: str, **meta: Any):
        self.name = name
        super().__init__(**meta)


class ListType(Type):
    __slots__ = ("type",)

    kind = "list_type"
    _children = ("type",)

    def __init__(self, type: Type, **meta: Any):
        self.type = type
        super().__init__(**meta)


class NonNullType(Type):
    __slots__ = ("type",)

    kind = "non_null_type"
    _children = ("type",)

    def __init__(self, type: Type, **meta: Any):
        self.type = type
        super().__init__(**meta)


def unwrap_type(type_: Type) -> NamedType:
    """
    Strip all list and non null wrappers from a type reference.

    >>> unwrap_type(NonNullType(ListType(NamedType("Int")))).name
    'Int'
    """
    while isinstance(type_, (ListType, NonNullType)):
        type_ = type_.type
    return cast(NamedType, type_)


class _StringValue(Value):
    __slots__ = ("value",)

    _identity = ("value",)

    def __init__(self, value: str, **meta: Any):
        self.value = value
        super().__init__(**meta)

    def __str__(self) -> str:
        return str(self.value)


class IntValue(_StringValue):
    __slots__ = ()

    kind = "int_value"


class FloatValue(_StringValue):
    __slots__ = ()

    kind = "float_value"


class EnumValue(_StringValue):
    __slots__ = ()

    kind = "enum_value"


class StringValue(Value):
    __slots__ = ("value", "block")

    kind = "string_value"
    _identity = ("value",)

    def __init__(self, value: str, block: bool = False, **meta: Any):
        self.value = value
        self.block = block
        super().__init__(**meta)

    def __str__(self) -> str:
        if self.block:
            return '"""%s"""' % self.value
        else:
            return '"%s"' % self.value


class BooleanValue(Value):
    __slots__ = ("value",)

    kind = "boolean_value"
    _identity = ("value",)

    def __init__(self, value: bool, **meta: Any):
        self.value = value
        super().__init__(**meta)

    def __str__(self) -> str:
        return str(self.value).lower()


class NullValue(Value):
    __slots__ = ()

    kind = "null_value"

    def __str__(self) -> str:
        return "null"


class ListValue(Value):
    __slots__ = ("values",)

    kind = "list_value"
    _children = ("values",)

    def __init__(self, values: Optional[Sequence[Value]] = None, **meta: Any):
        self.values = _tuple(values)  # type: Tuple[Value, ...]
        super().__init__(**meta)


class ObjectValue(Value):
    __slots__ = ("fields",)

    kind = "object_value"
    _children = ("fields",)

    def __init__(
        self,
        fields=None,  # type: Optional[Sequence[ObjectField]]
        **meta: Any
    ):
        self.fields = _tuple(fields)  # type: Tuple[ObjectField, ...]
        super().__init__(**meta)


class ObjectField(Node):
    __slots__ = ("name", "value")

    kind = "object_field"
    _children = ("value",)
    _identity = ("name",)

    def __init__(self, name: str, value: Value, **meta: Any):
        self.name = name
        self.value = value
        super().__init__(**meta)


class Argument(Node):
    __slots__ = ("name", "value")

    kind = "argument"
    _children = ("value",)
    _identity = ("name",)

    def __init__(self, name: str, value: Value, **meta: Any):
        self.name = name
        self.value = value
        super().__init__(**meta)


class Directive(Node):
    __slots__ = ("name", "arguments")

    kind = "directive"
    _children = ("arguments",)
    _identity = ("name",)

    def __init__(
        self,
        name: str,
        arguments: Optional[Sequence[Argument]] = None,
        **meta: Any
    ):
        self.name = name
        self.arguments = _tuple(arguments)  # type: Tuple[Argument, ...]
        super().__init__(**meta)


class DirectiveLocation(Node):
    __slots__ = ("name",)

    kind = "directive_location"
    _identity = ("name",)

    def __init__(self, name: str, **meta: Any):
        self.name = name
        super().__init__(**meta)


class TypeSystemDefinition(SupportDirectives, Definition):
    __slots__ = ()


class SchemaDefinition(SupportDescription, TypeSystemDefinition):
    __slots__ = ("description", "directives", "operation_types")

    kind = "schema_definition"
    _children = ("directives", "operation_types")

    def __init__(
        self,
        directives: Optional[Sequence[Directive]] = None,
        operation_types=None,  # type: Optional[Sequence[OperationTypeDefinition]]
        description: Optional[StringValue] = None,
        **meta: Any
    ):
        self.description = description
        self.directives = _tuple(directives)  # type: Tuple[Directive, ...]
        self.operation_types = _tuple(
            operation_types
        )  # type: Tuple[OperationTypeDefinition, ...]
        super().__init__(**meta)


class OperationTypeDefinition(Node):
    __slots__ = ("operation", "type")

    kind = "operation_type_definition"
    _children = ("type",)
    _identity = ("operation",)

    def __init__(self, operation: str, type: NamedType, **meta: Any):
        self.operation = operation
        self.type = type
        super().__init__(**meta)


class TypeDefinition(SupportDescription, TypeSystemDefinition):
    __slots__ = ()

    _identity = ("name",)

    name = ""  # type: str


class ScalarTypeDefinition(TypeDefinition):
    __slots__ = ("description", "name", "directives")

    kind = "scalar_type_definition"
    _children = ("directives",)

    def __init__(
        self,
        name: str,
        directives: Optional[Sequence[Directive]] = None,
        description: Optional[StringValue] = None,
        **meta: Any
    ):
        self.description = description
        self.name = name
        self.directives = _tuple(directives)  # type: Tuple[Directive, ...]
        super().__init__(**meta)


class ObjectTypeDefinition(TypeDefinition):
    __slots__ = ("description", "name", "interfaces", "directives", "fields")

    kind = "object_type_definition"
    _children = ("interfaces", "directives", "fields")

    def __init__(
        self,
        name: str,
        interfaces: Optional[Sequence[NamedType]] = None,
        directives: Optional[Sequence[Directive]] = None,
        fields=None,  # type: Optional[Sequence[FieldDefinition]]
        description: Optional[StringValue] = None,
        **meta: Any
    ):
        self.description = description
        self.name = name
        self.interfaces = _tuple(interfaces)  # type: Tuple[NamedType, ...]
        self.directives = _tuple(directives)  # type: Tuple[Directive, ...]
        self.fields = _tuple(fields)  # type: Tuple[FieldDefinition, ...]
        super().__init__(**meta)


class FieldDefinition(SupportDirectives, SupportDescription, Node):
    __slots__ = ("description", "name", "arguments", "type", "directives")

    kind = "field_definition"
    _children = ("arguments", "type", "directives")
    _identity = ("name",)

    def __init__(
        self,
        name: str,
        type: Type,
        arguments=None,  # type: Optional[Sequence[InputValueDefinition]]
        directives: Optional[Sequence[Directive]] = None,
        description: Optional[StringValue] = None,
        **meta: Any
    ):
        self.description = description
        self.name = name
        self.arguments = _tuple(
            arguments
        )  # type: Tuple[InputValueDefinition, ...]
        self.type = type
        self.directives = _tuple(directives)  # type: Tuple[Directive, ...]
        super().__init__(**meta)


class InputValueDefinition(SupportDirectives, SupportDescription, Node):
    __slots__ = ("description", "name", "type", "default_value", "directives")

    kind = "input_value_definition"
    _children = ("type", "default_value", "directives")
    _identity = ("name",)

    def __init__(
        self,
        name: str,
        type: Type,
        default_value: Optional[Value] = None,
        directives: Optional[Sequence[Directive]] = None,
        description: Optional[StringValue] = None,
        **meta: Any
    ):
        self.description = description
        self.name = name
        self.type = type
        self.default_value = default_value
        self.directives = _tuple(directives)  # type: Tuple[Directive, ...]
        super().__init__(**meta)


class InterfaceTypeDefinition(TypeDefinition):
    __slots__ = ("description", "name", "directives", "fields")

    kind = "interface_type_definition"
    _children = ("directives", "fields")

    def __init__(
        self,
        name: str,
        directives: Optional[Sequence[Directive]] = None,
        fields: Optional[Sequence[FieldDefinition]] = None,
        description: Optional[StringValue] = None,
        **meta: Any
    ):
        self.description = description
        self.name = name
        self.directives = _tuple(directives)  # type: Tuple[Directive, ...]
        self.fields = _tuple(fields)  # type: Tuple[FieldDefinition, ...]
        super().__init__(**meta)


class UnionTypeDefinition(TypeDefinition):
    __slots__ = ("description", "name", "directives", "types")

    kind = "union_type_definition"
    _children = ("directives", "types")

    def __init__(
        self,
        name: str,
        directives: Optional[Sequence[Directive]] = None,
        types: Optional[Sequence[NamedType]] = None,
        description: Optional[StringValue] = None,
        **meta: Any
    ):
        self.description = description
        self.name = name
        self.directives = _tuple(directives)  # type: Tuple[Directive, ...]
        self.types = _tuple(types)  # type: Tuple[NamedType, ...]
        super().__init__(**meta)


class EnumTypeDefinition(TypeDefinition):
    __slots__ = ("description", "name", "directives", "values")

    kind = "enum_type_definition"
    _children = ("directives", "values")

    def __init__(
        self,
        name: str,
        directives: Optional[Sequence[Directive]] = None,
        values=None,  # type: Optional[Sequence[EnumValueDefinition]]
        description: Optional[StringValue] = None,
        **meta: Any
    ):
        self.description = description
        self.name = name
        self.directives = _tuple(directives)  # type: Tuple[Directive, ...]
        self.values = _tuple(values)  # type: Tuple[EnumValueDefinition, ...]
        super().__init__(**meta)


class EnumValueDefinition(SupportDirectives, SupportDescription, Node):
    __slots__ = ("description", "name", "directives")

    kind = "enum_value_definition"
    _children = ("directives",)
    _identity = ("name",)

    def __init__(
        self,
        name: str,
        directives: Optional[Sequence[Directive]] = None,
        description: Optional[StringValue] = None,
        **meta: Any
    ):
        self.description = description
        self.name = name
        self.directives = _tuple(directives)  # type: Tuple[Directive, ...]
        super().__init__(**meta)


class InputObjectTypeDefinition(TypeDefinition):
    __slots__ = ("description", "name", "directives", "fields")

    kind = "input_object_type_definition"
    _children = ("directives", "fields")

    def __init__(
        self,
        name: str,
        directives: Optional[Sequence[Directive]] = None,
        fields: Optional[Sequence[InputValueDefinition]] = None,
        description: Optional[StringValue] = None,
        **meta: Any
    ):
        self.description = description
        self.name = name
        self.directives = _tuple(directives)  # type: Tuple[Directive, ...]
        self.fields = _tuple(fields)  # type: Tuple[InputValueDefinition, ...]
        super().__init__(**meta)


class TypeSystemExtension(TypeSystemDefinition):
    __slots__ = ()


class SchemaExtension(TypeSystemExtension):
    __slots__ = ("directives", "operation_types")

    kind = "schema_extension"
    _children = ("directives", "operation_types")

    def __init__(
        self,
        directives: Optional[Sequence[Directive]] = None,
        operation_types: Optional[Sequence[OperationTypeDefinition]] = None,
        **meta: Any
    ):
        self.directives = _tuple(directives)  # type: Tuple[Directive, ...]
        self.operation_types = _tuple(
            operation_types
        )  # type: Tuple[OperationTypeDefinition, ...]
        super().__init__(**meta)


class TypeExtension(TypeSystemExtension):
    __slots__ = ()

    _identity = ("name",)

    name = ""  # type: str


class ScalarTypeExtension(TypeExtension):
    __slots__ = ("name", "directives")

    kind = "scalar_type_extension"
    _children = ("directives",)

    def __init__(
        self,
        name: str,
        directives: Optional[Sequence[Directive]] = None,
        **meta: Any
    ):
        self.name = name
        self.directives = _tuple(directives)  # type: Tuple[Directive, ...]
        super().__init__(**meta)


class ObjectTypeExtension(TypeExtension):
    __slots__ = ("name", "interfaces", "directives", "fields")

    kind = "object_type_extension"
    _children = ("interfaces", "directives", "fields")

    def __init__(
        self,
        name: str,
        interfaces: Optional[Sequence[NamedType]] = None,
        directives: Optional[Sequence[Directive]] = None,
        fields: Optional[Sequence[FieldDefinition]] = None,
        **meta: Any
    ):
        self.name = name
        self.interfaces = _tuple(interfaces)  # type: Tuple[NamedType, ...]
        self.directives = _tuple(directives)  # type: Tuple[Directive, ...]
        self.fields = _tuple(fields)  # type: Tuple[FieldDefinition, ...]
        super().__init__(**meta)


class InterfaceTypeExtension(TypeExtension):
    __slots__ = ("name", "directives", "fields")

    kind = "interface_type_extension"
    _children = ("directives", "fields")

    def __init__(
        self,
        name: str,
        directives: Optional[Sequence[Directive]] = None,
        fields: Optional[Sequence[FieldDefinition]] = None,
        **meta: Any
    ):
        self.name = name
        self.directives = _tuple(directives)  # type: Tuple[Directive, ...]
        self.fields = _tuple(fields)  # type: Tuple[FieldDefinition, ...]
        super().__init__(**meta)


class UnionTypeExtension(TypeExtension):
    __slots__ = ("name", "directives", "types")

    kind = "union_type_extension"
    _children = ("directives", "types")

    def __init__(
        self,
        name: str,
        directives: Optional[Sequence[Directive]] = None,
        types: Optional[Sequence[NamedType]] = None,
        **meta: Any
    ):
        self.name = name
        self.directives = _tuple(directives)  # type: Tuple[Directive, ...]
        self.types = _tuple(types)  # type: Tuple[NamedType, ...]
        super().__init__(**meta)


class EnumTypeExtension(TypeExtension):
    __slots__ = ("name", "directives", "values")

    kind = "enum_type_extension"
    _children = ("directives", "values")

    def __init__(
        self,
        name: str,
        directives: Optional[Sequence[Directive]] = None,
        values: Optional[Sequence[EnumValueDefinition]] = None,
        **meta: Any
    ):
        self.name = name
        self.directives = _tuple(directives)  # type: Tuple[Directive, ...]
        self.values = _tuple(values)  # type: Tuple[EnumValueDefinition, ...]
        super().__init__(**meta)


class InputObjectTypeExtension(TypeExtension):
    __slots__ = ("name", "directives", "fields")

    kind = "input_object_type_extension"
    _children = ("directives", "fields")

    def __init__(
        self,
        name: str,
        directives: Optional[Sequence[Directive]] = None,
        fields: Optional[Sequence[InputValueDefinition]] = None,
        **meta: Any
    ):
        self.name = name
        self.directives = _tuple(directives)  # type: Tuple[Directive, ...]
        self.fields = _tuple(fields)  # type: Tuple[InputValueDefinition, ...]
        super().__init__(**meta)


class DirectiveDefinition(SupportDescription, TypeSystemDefinition):
    __slots__ = ("description", "name", "arguments", "locations")

    kind = "directive_definition"
    _children = ("arguments", "locations")
    _identity = ("name",)

    def __init__(
        self,
        name: str,
        arguments: Optional[Sequence[InputValueDefinition]] = None,
        locations: Optional[Sequence[DirectiveLocation]] = None,
        description: Optional[StringValue] = None,
        **meta: Any
    ):
        self.description = description
        self.name = name
        self.arguments = _tuple(
            arguments
        )  # type: Tuple[InputValueDefinition, ...]
        self.locations = _tuple(
            locations
        )  # type: Tuple[DirectiveLocation, ...]
        super().__init__(**meta)


def _ast_to_json(node):
    if isinstance(node, Node):
        return dict(
            {
                attr: _ast_to_json(getattr(node, attr))
                for attr in node._fields
            },
            loc=node.loc,
            __kind__=node.__class__.__name__,
        )
    elif isinstance(node, (list, tuple)):
        return [_ast_to_json(v) for v in node]
    else:
        return node
