# -*- coding: utf-8 -*-

from typing import Any, Callable, Dict, Optional, TypeVar

from ..lang import ast as _ast
from .scalars import SPECIFIED_SCALAR_TYPES, LiteralParser, ScalarType

ArgumentCoercer = Callable[[_ast.Value], Any]
TLiteralParser = TypeVar("TLiteralParser", bound=LiteralParser)
TArgumentCoercer = TypeVar("TArgumentCoercer", bound=ArgumentCoercer)

_SPECIFIED_SCALARS = {s.name: s for s in SPECIFIED_SCALAR_TYPES}


class RuntimeWiring:
    """
    Collection of runtime behaviour used when checking directive argument
    values, defined outside of the schema document.

    - Custom scalars are used to validate literals passed to scalar typed
      arguments. Scalars declared in the document but not registered here
      accept any literal.
    - Argument coercers run on structurally valid literals passed to a given
      directive argument and can reject them.

    >>> wiring = RuntimeWiring()
    >>> @wiring.scalar("Port")
    ... def parse_port(node):
    ...     value = int(node.value)
    ...     if not 0 < value < 65536:
    ...         raise ValueError("Invalid port %d" % value)
    ...     return value
    >>> wiring.get_scalar("Port").name
    'Port'
    """

    def __init__(self):
        self.scalars = {}  # type: Dict[str, ScalarType]
        self.argument_coercers = (
            {}
        )  # type: Dict[str, Dict[str, ArgumentCoercer]]

    def register_scalar(
        self, scalar: ScalarType, *, allow_override: bool = False
    ) -> None:
        """
        Register a custom scalar.

        Args:
            scalar: Scalar definition
            allow_override: Set this to ``True`` to allow re-definition.

        Raises:
            ValueError: If the scalar has already been defined and
                ``allow_override`` was ``False``.
        """
        if scalar.name in self.scalars and not allow_override:
            raise ValueError('Scalar "%s" is already registered.' % scalar.name)

        self.scalars[scalar.name] = scalar

    def scalar(
        self,
        name: str,
        *,
        description: Optional[str] = None,
        allow_override: bool = False
    ) -> Callable[[TLiteralParser], TLiteralParser]:
        """
        Decorate a function to register it as the literal parser of a custom
        scalar.

        Args:
            name: Scalar name.
            description: Scalar description.
            allow_override: Set this to ``True`` to allow re-definition.

        Returns:
            Decorator.
        """

        def decorator(func: TLiteralParser) -> TLiteralParser:
            self.register_scalar(
                ScalarType(name, func, description=description),
                allow_override=allow_override,
            )
            return func

        return decorator

    def get_scalar(self, name: str) -> Optional[ScalarType]:
        """
        Find the scalar used to parse literals of a given type. Registered
        scalars take precedence over the built-in ones.
        """
        try:
            return self.scalars[name]
        except KeyError:
            return _SPECIFIED_SCALARS.get(name)

    def register_argument_coercer(
        self,
        directive: str,
        argument: str,
        coercer: ArgumentCoercer,
        *,
        allow_override: bool = False
    ) -> None:
        """
        Register a function used to validate values passed to a directive
        argument.

        Args:
            directive: Directive name (without leading ``@``)
            argument: Argument name
            coercer: Callable receiving the value node. Raise
                :class:`~gql_sdl.exc.ScalarParsingError`,
                :py:class:`ValueError` or :py:class:`TypeError` to reject the
                value.
            allow_override: Set this to ``True`` to allow re-definition.

        Raises:
            ValueError: If the coercer has already been defined and
                ``allow_override`` was ``False``.
        """
        parent = self.argument_coercers[
            directive
        ] = self.argument_coercers.get(directive, {})

        if argument in parent and not allow_override:
            raise ValueError(
                'Argument "%s" of directive "@%s" already has a coercer.'
                % (argument, directive)
            )

        parent[argument] = coercer

    def argument_coercer(
        self, path: str, *, allow_override: bool = False
    ) -> Callable[[TArgumentCoercer], TArgumentCoercer]:
        """
        Decorate a function to register it as an argument coercer.

        Args:
            path: Argument path in the form ``{directive}.{argument}``, a
                leading ``@`` is allowed.
            allow_override: Set this to ``True`` to allow re-definition.

        Raises:
            ValueError: If the ``path`` value cannot be parsed.

        Returns:
            Decorator.
        """
        try:
            directive, argument = path.lstrip("@").split(".")
        except ValueError:
            raise ValueError(
                'Invalid argument path "%s". Argument path must of the form '
                '"{directive}.{argument}"' % path
            )

        def decorator(func: TArgumentCoercer) -> TArgumentCoercer:
            self.register_argument_coercer(
                directive, argument, func, allow_override=allow_override
            )
            return func

        return decorator

    def get_argument_coercer(
        self, directive: str, argument: str
    ) -> Optional[ArgumentCoercer]:
        return self.argument_coercers.get(directive, {}).get(argument)

    def merge(
        self, other: "RuntimeWiring", *, allow_override: bool = False
    ) -> None:
        """
        Combine 2 collections by merging the target into the current instance.
        """
        for scalar in other.scalars.values():
            self.register_scalar(scalar, allow_override=allow_override)

        for directive, coercers in other.argument_coercers.items():
            for argument, coercer in coercers.items():
                self.register_argument_coercer(
                    directive, argument, coercer, allow_override=allow_override
                )
