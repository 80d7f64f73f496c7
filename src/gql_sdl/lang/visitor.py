# -*- coding: utf-8 -*-
"""
Visitors provide abstractions for traversing and transforming a GraphQL AST.

Nodes are immutable, transformations never modify a tree in place: a visitor
returns a new tree where only the modified nodes and their ancestors are
rebuilt (through :meth:`~gql_sdl.lang.ast.Node.with_new_children`) and all
unchanged subtrees are shared with the original.
"""

from typing import Dict, List, Optional, TypeVar

from .._utils import map_and_filter
from ..exc import GraphQLError
from . import ast as _ast

N = TypeVar("N", bound=_ast.Node)


__all__ = ("SkipNode", "ASTVisitor", "DispatchingVisitor")


class SkipNode(GraphQLError):
    """
    Raise this to short-circuit traversal and ignore the node and all its
    children.
    """

    pass


class ASTVisitor:
    """
    Base visitor class used to build complex AST traversal and transform
    behaviours.
    """

    def enter(self, node: N) -> Optional[N]:
        """
        Implement this for the main visiting behaviour (i.e. before a node's
        children have been visited).

        Return ``None`` to delete the node from it's parent context, a
        different node to replace it or raise :class:`SkipNode` to prevent any
        further processing (children do not get visited and `leave` doesn't
        get called for that node).
        """
        return node

    def leave(self, node: N) -> None:
        """
        Implement this if you need behaviour to run after a node's children
        have been visited.

        This is called with the node returned by :meth:`enter` after its
        children have been visited (and possibly replaced). This doesn't run
        if :meth:`enter` returned ``None`` or raised :class:`SkipNode`.
        """
        pass

    def visit(self, node: N) -> Optional[N]:
        """
        Apply visitor's behaviour to a given node and all of its descendants,
        depth first and in declaration order.

        Returns:
            The (possibly new) node or ``None`` if it was removed.

        Warning:
            In general you should not override this method as this is where
            traversal of a node's children and orchestration around
            :meth:`enter` and :meth:`leave` is encoded.
        """
        try:
            entered = self.enter(node)
        except SkipNode:
            return node

        if entered is None:
            return None

        visited = self._visit_children(entered)
        self.leave(visited)
        return visited

    def _visit_children(self, node: N) -> N:
        changes = {}  # type: Dict[str, List[_ast.Node]]
        for role, children in node.named_children().items():
            visited = map_and_filter(self.visit, children)
            if len(visited) != len(children) or any(
                new is not old for new, old in zip(visited, children)
            ):
                changes[role] = visited

        return node.with_new_children(changes) if changes else node


class DispatchingVisitor(ASTVisitor):
    """
    Base class for specialised visitors.

    You should subclass this and implement methods named ``enter_*`` and
    ``leave_*`` where ``*`` is the :attr:`~gql_sdl.lang.ast.Node.kind` of the
    node to be handled. For instance to process
    :class:`gql_sdl.lang.ast.FloatValue` nodes, implement
    ``enter_float_value``.

    Default behaviour is noop for all node types.
    """

    def enter(self, node: N) -> Optional[N]:
        return node.accept(self, "enter")

    def leave(self, node: _ast.Node) -> None:
        node.accept(self, "leave")

    def enter_document(self, node: _ast.Document) -> Optional[_ast.Document]:
        return node

    def leave_document(self, _: _ast.Document) -> None:
        pass

    def enter_named_type(
        self, node: _ast.NamedType
    ) -> Optional[_ast.NamedType]:
        return node

    def leave_named_type(self, _: _ast.NamedType) -> None:
        pass

    def enter_list_type(self, node: _ast.ListType) -> Optional[_ast.ListType]:
        return node

    def leave_list_type(self, _: _ast.ListType) -> None:
        pass

    def enter_non_null_type(
        self, node: _ast.NonNullType
    ) -> Optional[_ast.NonNullType]:
        return node

    def leave_non_null_type(self, _: _ast.NonNullType) -> None:
        pass

    def enter_int_value(self, node: _ast.IntValue) -> Optional[_ast.IntValue]:
        return node

    def leave_int_value(self, _: _ast.IntValue) -> None:
        pass

    def enter_float_value(
        self, node: _ast.FloatValue
    ) -> Optional[_ast.FloatValue]:
        return node

    def leave_float_value(self, _: _ast.FloatValue) -> None:
        pass

    def enter_string_value(
        self, node: _ast.StringValue
    ) -> Optional[_ast.StringValue]:
        return node

    def leave_string_value(self, _: _ast.StringValue) -> None:
        pass

    def enter_boolean_value(
        self, node: _ast.BooleanValue
    ) -> Optional[_ast.BooleanValue]:
        return node

    def leave_boolean_value(self, _: _ast.BooleanValue) -> None:
        pass

    def enter_null_value(
        self, node: _ast.NullValue
    ) -> Optional[_ast.NullValue]:
        return node

    def leave_null_value(self, _: _ast.NullValue) -> None:
        pass

    def enter_enum_value(
        self, node: _ast.EnumValue
    ) -> Optional[_ast.EnumValue]:
        return node

    def leave_enum_value(self, _: _ast.EnumValue) -> None:
        pass

    def enter_list_value(
        self, node: _ast.ListValue
    ) -> Optional[_ast.ListValue]:
        return node

    def leave_list_value(self, _: _ast.ListValue) -> None:
        pass

    def enter_object_value(
        self, node: _ast.ObjectValue
    ) -> Optional[_ast.ObjectValue]:
        return node

    def leave_object_value(self, _: _ast.ObjectValue) -> None:
        pass

    def enter_object_field(
        self, node: _ast.ObjectField
    ) -> Optional[_ast.ObjectField]:
        return node

    def leave_object_field(self, _: _ast.ObjectField) -> None:
        pass

    def enter_argument(self, node: _ast.Argument) -> Optional[_ast.Argument]:
        return node

    def leave_argument(self, _: _ast.Argument) -> None:
        pass

    def enter_directive(
        self, node: _ast.Directive
    ) -> Optional[_ast.Directive]:
        return node

    def leave_directive(self, _: _ast.Directive) -> None:
        pass

    def enter_directive_location(
        self, node: _ast.DirectiveLocation
    ) -> Optional[_ast.DirectiveLocation]:
        return node

    def leave_directive_location(self, _: _ast.DirectiveLocation) -> None:
        pass

    def enter_schema_definition(
        self, node: _ast.SchemaDefinition
    ) -> Optional[_ast.SchemaDefinition]:
        return node

    def leave_schema_definition(self, _: _ast.SchemaDefinition) -> None:
        pass

    def enter_operation_type_definition(
        self, node: _ast.OperationTypeDefinition
    ) -> Optional[_ast.OperationTypeDefinition]:
        return node

    def leave_operation_type_definition(
        self, _: _ast.OperationTypeDefinition
    ) -> None:
        pass

    def enter_scalar_type_definition(
        self, node: _ast.ScalarTypeDefinition
    ) -> Optional[_ast.ScalarTypeDefinition]:
        return node

    def leave_scalar_type_definition(
        self, _: _ast.ScalarTypeDefinition
    ) -> None:
        pass

    def enter_object_type_definition(
        self, node: _ast.ObjectTypeDefinition
    ) -> Optional[_ast.ObjectTypeDefinition]:
        return node

    def leave_object_type_definition(
        self, _: _ast.ObjectTypeDefinition
    ) -> None:
        pass

    def enter_field_definition(
        self, node: _ast.FieldDefinition
    ) -> Optional[_ast.FieldDefinition]:
        return node

    def leave_field_definition(self, _: _ast.FieldDefinition) -> None:
        pass

    def enter_input_value_definition(
        self, node: _ast.InputValueDefinition
    ) -> Optional[_ast.InputValueDefinition]:
        return node

    def leave_input_value_definition(
        self, _: _ast.InputValueDefinition
    ) -> None:
        pass

    def enter_interface_type_definition(
        self, node: _ast.InterfaceTypeDefinition
    ) -> Optional[_ast.InterfaceTypeDefinition]:
        return node

    def leave_interface_type_definition(
        self, _: _ast.InterfaceTypeDefinition
    ) -> None:
        pass

    def enter_union_type_definition(
        self, node: _ast.UnionTypeDefinition
    ) -> Optional[_ast.UnionTypeDefinition]:
        return node

    def leave_union_type_definition(self, _: _ast.UnionTypeDefinition) -> None:
        pass

    def enter_enum_type_definition(
        self, node: _ast.EnumTypeDefinition
    ) -> Optional[_ast.EnumTypeDefinition]:
        return node

    def leave_enum_type_definition(self, _: _ast.EnumTypeDefinition) -> None:
        pass

    def enter_enum_value_definition(
        self, node: _ast.EnumValueDefinition
    ) -> Optional[_ast.EnumValueDefinition]:
        return node

    def leave_enum_value_definition(self, _: _ast.EnumValueDefinition) -> None:
        pass

    def enter_input_object_type_definition(
        self, node: _ast.InputObjectTypeDefinition
    ) -> Optional[_ast.InputObjectTypeDefinition]:
        return node

    def leave_input_object_type_definition(
        self, _: _ast.InputObjectTypeDefinition
    ) -> None:
        pass

    def enter_schema_extension(
        self, node: _ast.SchemaExtension
    ) -> Optional[_ast.SchemaExtension]:
        return node

    def leave_schema_extension(self, _: _ast.SchemaExtension) -> None:
        pass

    def enter_scalar_type_extension(
        self, node: _ast.ScalarTypeExtension
    ) -> Optional[_ast.ScalarTypeExtension]:
        return node

    def leave_scalar_type_extension(self, _: _ast.ScalarTypeExtension) -> None:
        pass

    def enter_object_type_extension(
        self, node: _ast.ObjectTypeExtension
    ) -> Optional[_ast.ObjectTypeExtension]:
        return node

    def leave_object_type_extension(self, _: _ast.ObjectTypeExtension) -> None:
        pass

    def enter_interface_type_extension(
        self, node: _ast.InterfaceTypeExtension
    ) -> Optional[_ast.InterfaceTypeExtension]:
        return node

    def leave_interface_type_extension(
        self, _: _ast.InterfaceTypeExtension
    ) -> None:
        pass

    def enter_union_type_extension(
        self, node: _ast.UnionTypeExtension
    ) -> Optional[_ast.UnionTypeExtension]:
        return node

    def leave_union_type_extension(self, _: _ast.UnionTypeExtension) -> None:
        pass

    def enter_enum_type_extension(
        self, node: _ast.EnumTypeExtension
    ) -> Optional[_ast.EnumTypeExtension]:
        return node

    def leave_enum_type_extension(self, _: _ast.EnumTypeExtension) -> None:
        pass

    def enter_input_object_type_extension(
        self, node: _ast.InputObjectTypeExtension
    ) -> Optional[_ast.InputObjectTypeExtension]:
        return node

    def leave_input_object_type_extension(
        self, _: _ast.InputObjectTypeExtension
    ) -> None:
        pass

    def enter_directive_definition(
        self, node: _ast.DirectiveDefinition
    ) -> Optional[_ast.DirectiveDefinition]:
        return node

    def leave_directive_definition(self, _: _ast.DirectiveDefinition) -> None:
        pass
