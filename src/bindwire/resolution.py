from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from bindwire.context import CreationContext, InjectionArgument
from bindwire.dependencies import InjectableMethod, InjectableParameter, InjectionPointsExtractor
from bindwire.exceptions import (
    BindwireAmbiguousBindingError,
    BindwireCycleDetectedError,
    BindwireMemberInjectionError,
    BindwireUnresolvedParameterError,
)
from bindwire.type_checks import (
    collection_element_type,
    is_instance_of,
    is_related,
    is_runtime_class,
    zero_value,
)

if TYPE_CHECKING:
    from bindwire.bindings import Binding
    from bindwire.container import Container

logger = logging.getLogger(__name__)

_UNRESOLVED: Any = object()


class Resolver:
    """Build objects and wire their parameters against one container's bindings.

    Parameters are resolved in this order: bindings of the owning container,
    ad hoc arguments of the current call, the parent container chain, and
    finally the parameter default (or zero value for ``Maybe[T]``).
    """

    def __init__(self, container: Container, extractor: InjectionPointsExtractor) -> None:
        self._container = container
        self._extractor = extractor

    def provide(self, binding: Binding) -> Any:
        """Return the binding's instance, building and caching it as its lifetime requires."""
        if not binding.lifetime.is_singleton:
            return self._create(binding)
        if not binding.has_instance:
            binding.cache(self._create(binding))
        return binding.instance

    def construct(self, cls: type[Any], arguments: Sequence[Any] = ()) -> Any:
        """Build a new instance of ``cls`` and run member injection on it."""
        host_object_factory = self._container.host_object_factory
        if (
            host_object_factory is not None
            and is_runtime_class(cls)
            and host_object_factory.owns(cls)
        ):
            instance = host_object_factory.construct(cls)
        elif self._extractor.get_injectable_constructor(cls) is None:
            instance = cls()
        else:
            parameters = self._extractor.get_constructor_parameters(cls)
            args, kwargs = self._resolve_parameters(parameters, cls, arguments)
            instance = cls(*args, **kwargs)

        self.inject_members(instance)
        return instance

    def inject_members(self, instance: Any) -> None:
        """Call every injectable instance method of ``instance``, base classes first.

        A method that raises is logged and ends injection of this instance;
        later methods are skipped and the instance stays partially wired.
        """
        cls = type(instance)
        for method in self._extractor.get_injectable_methods(cls, static=False):
            if not self._invoke(instance, cls, method):
                return

    def inject_static(self, cls: type[Any]) -> None:
        """Call every injectable ``staticmethod``/``classmethod`` of ``cls``."""
        for method in self._extractor.get_injectable_methods(cls, static=True):
            if not self._invoke(cls, cls, method):
                return

    def resolve_parameter(
        self,
        parameter: InjectableParameter,
        consumer: Any,
        arguments: Sequence[Any] = (),
    ) -> Any:
        """Resolve one parameter through this container, then its parents, then defaults.

        Raises:
            BindwireUnresolvedParameterError: If nothing satisfies a mandatory
                parameter.
            BindwireCycleDetectedError: If the selected binding's constructor
                requires the consumer back.

        """
        container: Container | None = self._container
        while container is not None:
            value = container.resolver.resolve_locally(parameter, consumer, arguments)
            if value is not _UNRESOLVED:
                return value
            container = container.parent
            if container is not None:
                logger.debug(
                    "Delegating parameter '%s' of %r to parent container",
                    parameter.name,
                    consumer,
                )

        if collection_element_type(parameter.dependency) is not None:
            return []
        if parameter.has_default:
            return parameter.default
        if parameter.is_optional:
            return zero_value(parameter.dependency)
        raise BindwireUnresolvedParameterError(parameter.name, parameter.dependency, consumer)

    def resolve_locally(
        self,
        parameter: InjectableParameter,
        consumer: Any,
        arguments: Sequence[Any],
    ) -> Any:
        """Resolve a parameter from this container's bindings and the call arguments only."""
        element_type = collection_element_type(parameter.dependency)
        if element_type is not None:
            bindings = [
                binding
                for binding in self._container.bindings
                if binding.target == element_type and binding.is_unrestricted
            ]
            if bindings:
                values = []
                for binding in bindings:
                    self._check_cross_dependency(binding, consumer, parameter)
                    values.append(self.provide(binding))
                return values
        else:
            binding = self._find_binding(parameter, consumer)
            if binding is not None:
                self._check_cross_dependency(binding, consumer, parameter)
                return self.provide(binding)

        return self._find_argument(parameter, arguments)

    def _create(self, binding: Binding) -> Any:
        if binding.factory is None:
            return self.construct(binding.implementation, binding.arguments)

        instance = binding.factory(CreationContext(self._container, binding.arguments))
        if instance is not None:
            self.inject_members(instance)
        return instance

    def _find_binding(self, parameter: InjectableParameter, consumer: Any) -> Binding | None:
        candidates = [
            binding
            for binding in self._container.bindings
            if binding.matches(
                parameter.dependency,
                parameter_name=parameter.name,
                consumer=consumer,
            )
        ]
        if not candidates:
            return None
        if len(candidates) > 1:
            if self._container.strict:
                raise BindwireAmbiguousBindingError(
                    parameter.dependency,
                    [binding.implementation for binding in candidates],
                )
            logger.error(
                "Found multiple bindings of type %r for parameter '%s' of %r, using the last one",
                parameter.dependency,
                parameter.name,
                consumer,
            )
        return candidates[-1]

    def _find_argument(self, parameter: InjectableParameter, arguments: Sequence[Any]) -> Any:
        for argument in arguments:
            if (
                isinstance(argument, InjectionArgument)
                and argument.id == parameter.name
                and is_instance_of(argument.value, parameter.dependency)
            ):
                return argument.value
        for argument in arguments:
            if not isinstance(argument, InjectionArgument) and is_instance_of(
                argument,
                parameter.dependency,
            ):
                return argument
        return _UNRESOLVED

    def _check_cross_dependency(
        self,
        binding: Binding,
        consumer: Any,
        parameter: InjectableParameter,
    ) -> None:
        # Only the dependency's own constructor is inspected, not its whole graph.
        if binding.constructor_signature is None:
            implementation = binding.implementation
            binding.constructor_signature = (
                self._extractor.get_constructor_signature(implementation)
                if is_runtime_class(implementation)
                else ()
            )
        for _, dependency in binding.constructor_signature:
            if is_related(dependency, consumer):
                raise BindwireCycleDetectedError(consumer, binding.implementation, parameter.name)

    def _invoke(self, target: Any, consumer: type[Any], method: InjectableMethod) -> bool:
        parameters = self._extractor.get_parameters(
            method.function,
            owner=consumer,
            skip_first_parameter=method.skip_first_parameter,
        )
        args, kwargs = self._resolve_parameters(parameters, consumer, ())
        try:
            getattr(target, method.name)(*args, **kwargs)
        except Exception as error:
            if self._container.strict:
                raise BindwireMemberInjectionError(consumer, method.name) from error
            logger.exception(
                "There was a problem while calling injectable method '%s' of %r",
                method.name,
                consumer,
            )
            return False
        return True

    def _resolve_parameters(
        self,
        parameters: Sequence[InjectableParameter],
        consumer: Any,
        arguments: Sequence[Any],
    ) -> tuple[list[Any], dict[str, Any]]:
        args: list[Any] = []
        kwargs: dict[str, Any] = {}
        for parameter in parameters:
            value = self.resolve_parameter(parameter, consumer, arguments)
            if parameter.is_keyword_only:
                kwargs[parameter.name] = value
            else:
                args.append(value)
        return args, kwargs
