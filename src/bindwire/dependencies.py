from __future__ import annotations

import inspect
from collections.abc import Callable
from dataclasses import dataclass
from inspect import Parameter
from typing import Any, get_type_hints

from bindwire.exceptions import BindwireDependencyInferenceError
from bindwire.markers import (
    is_injectable_class,
    is_injection_target,
    is_maybe_annotation,
    strip_annotated,
)

_VARIADIC_KINDS = (Parameter.VAR_POSITIONAL, Parameter.VAR_KEYWORD)


@dataclass(frozen=True, slots=True)
class InjectableParameter:
    """A parameter of an injectable constructor or method."""

    name: str
    dependency: Any
    """Type the parameter is resolved against, with ``Annotated`` metadata stripped."""
    kind: Any
    default: Any = Parameter.empty
    is_optional: bool = False
    """True for ``Maybe[T]`` parameters."""

    @property
    def has_default(self) -> bool:
        return self.default is not Parameter.empty

    @property
    def is_keyword_only(self) -> bool:
        return self.kind is Parameter.KEYWORD_ONLY


@dataclass(frozen=True, slots=True)
class InjectableMethod:
    """An injectable member found while scanning a class hierarchy."""

    name: str
    function: Callable[..., Any]
    """Most-derived implementation, the one that actually runs."""
    skip_first_parameter: bool


class InjectionPointsExtractor:
    """Discover injectable constructors, methods and their parameters."""

    def __init__(self) -> None:
        self._constructors_cache: dict[type[Any], Callable[..., Any] | None] = {}
        self._parameters_cache: dict[
            tuple[Callable[..., Any], bool],
            tuple[InjectableParameter, ...],
        ] = {}
        self._methods_cache: dict[tuple[type[Any], bool], tuple[InjectableMethod, ...]] = {}

    def get_injectable_constructor(self, cls: type[Any]) -> Callable[..., Any] | None:
        """Return the ``__init__`` marked as injection entry point for ``cls``, if any."""
        if cls in self._constructors_cache:
            return self._constructors_cache[cls]

        constructor: Callable[..., Any] | None = None
        for klass in cls.__mro__:
            init = vars(klass).get("__init__")
            if init is None:
                continue
            if klass is not object and (is_injection_target(init) or is_injectable_class(klass)):
                constructor = init
            break

        self._constructors_cache[cls] = constructor
        return constructor

    def get_constructor_parameters(self, cls: type[Any]) -> tuple[InjectableParameter, ...]:
        """Return parameters of the injectable constructor, or nothing for default construction."""
        constructor = self.get_injectable_constructor(cls)
        if constructor is None:
            return ()
        return self.get_parameters(constructor, owner=cls, skip_first_parameter=True)

    def get_constructor_signature(self, cls: type[Any]) -> tuple[tuple[str, Any], ...]:
        """Return ``(name, type)`` pairs of the injectable constructor."""
        return tuple(
            (parameter.name, parameter.dependency)
            for parameter in self.get_constructor_parameters(cls)
        )

    def get_injectable_methods(
        self,
        cls: type[Any],
        *,
        static: bool,
    ) -> tuple[InjectableMethod, ...]:
        """Collect injectable members of a class hierarchy, base classes first.

        Each member name is placed at the most-base class that declares it as
        an injection target, so base setup runs before derived setup, and
        appears only once even when overridden.

        Args:
            cls: Class whose hierarchy is scanned.
            static: Collect ``staticmethod``/``classmethod`` members instead of
                instance methods.

        """
        cache_key = (cls, static)
        cached = self._methods_cache.get(cache_key)
        if cached is not None:
            return cached

        names: dict[str, None] = {}
        for klass in reversed(cls.__mro__):
            if klass is object:
                continue
            for name, member in vars(klass).items():
                if name == "__init__" or name in names:
                    continue
                if not self._is_member_kind(member, static=static):
                    continue
                if not is_injection_target(member):
                    continue
                if getattr(self._unwrap(member), "__isabstractmethod__", False):
                    continue
                names[name] = None

        methods = tuple(
            method
            for name in names
            if (method := self._most_derived_method(cls, name)) is not None
        )
        self._methods_cache[cache_key] = methods
        return methods

    def get_parameters(
        self,
        function: Callable[..., Any],
        *,
        owner: Any,
        skip_first_parameter: bool,
    ) -> tuple[InjectableParameter, ...]:
        """Return the resolvable parameters of a function."""
        cache_key = (function, skip_first_parameter)
        cached = self._parameters_cache.get(cache_key)
        if cached is not None:
            return cached

        parameters = tuple(inspect.signature(function).parameters.values())
        if skip_first_parameter and parameters:
            parameters = parameters[1:]
        annotations, annotation_error = self._resolved_type_hints(function)

        result: list[InjectableParameter] = []
        for parameter in parameters:
            if parameter.kind in _VARIADIC_KINDS:
                continue
            annotation = annotations.get(parameter.name, parameter.annotation)
            if isinstance(annotation, str):
                raise BindwireDependencyInferenceError(parameter.name, owner, annotation_error)
            dependency = Any if annotation is Parameter.empty else strip_annotated(annotation)
            result.append(
                InjectableParameter(
                    name=parameter.name,
                    dependency=dependency,
                    kind=parameter.kind,
                    default=parameter.default,
                    is_optional=is_maybe_annotation(annotation),
                ),
            )

        resolved = tuple(result)
        self._parameters_cache[cache_key] = resolved
        return resolved

    def _most_derived_method(self, cls: type[Any], name: str) -> InjectableMethod | None:
        for klass in cls.__mro__:
            if name not in vars(klass):
                continue
            member = vars(klass)[name]
            function = self._unwrap(member)
            if not inspect.isfunction(function):
                return None
            return InjectableMethod(
                name=name,
                function=function,
                skip_first_parameter=not isinstance(member, staticmethod),
            )
        return None  # pragma: no cover - the name was found while scanning the same MRO

    def _is_member_kind(self, member: Any, *, static: bool) -> bool:
        if isinstance(member, (staticmethod, classmethod)):
            return static
        return not static and inspect.isfunction(member)

    def _unwrap(self, member: Any) -> Any:
        if isinstance(member, (staticmethod, classmethod)):
            return member.__func__
        return member

    def _resolved_type_hints(
        self,
        function: Callable[..., Any],
    ) -> tuple[dict[str, Any], Exception | None]:
        try:
            return get_type_hints(function, include_extras=True), None
        except (AttributeError, NameError, TypeError) as error:
            return {}, error
